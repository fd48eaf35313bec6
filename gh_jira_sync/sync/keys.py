"""Issue key extraction from pull request titles."""

import re
from collections.abc import Iterable

from .models import ParsedTitle

BUG_MARKER_PATTERN = re.compile(r"Bug [0-9]+: ")


class KeyExtractor:
    """Parses ``<PROJECT>-<number>: `` markers at the start of titles."""

    def __init__(self, projects: Iterable[str]):
        self.projects = list(projects)
        if self.projects:
            alternatives = "|".join(re.escape(project) for project in self.projects)
            self.pattern: re.Pattern[str] | None = re.compile(
                rf"^((?:{alternatives})-[0-9]+): "
            )
        else:
            self.pattern = None

    def parse(self, title: str) -> ParsedTitle:
        """Extract the issue key and the residual title.

        Args:
            title: Pull request title

        Returns:
            ParsedTitle with ``key`` set when the title starts with a marker
            for one of the configured projects
        """
        key = None
        residual = title
        if self.pattern is not None:
            match = self.pattern.match(title)
            if match:
                key = match.group(1)
                residual = title[match.end() :]

        return ParsedTitle(
            title=title,
            key=key,
            residual=residual,
            is_bugfix=BUG_MARKER_PATTERN.search(title) is not None,
        )
