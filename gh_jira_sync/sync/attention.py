"""Review-attention classification of open pull requests."""

from ..config import SyncConfig
from ..github_client.models import GitHubPullRequest
from .models import Diagnostic, DiagnosticKind, ParsedTitle

WIP_MARKER = "WIP"


class AttentionClassifier:
    """Sorts open team pull requests into review-attention buckets."""

    def __init__(self, config: SyncConfig):
        self.config = config

    def is_tracked(self, pr: GitHubPullRequest) -> bool:
        """Open pull request authored by the team or in a team repository."""
        return pr.state == "open" and (
            self.config.is_team_member(pr.user.login)
            or self.config.is_team_repository(pr.repository_full_name)
        )

    def classify(
        self, pr: GitHubPullRequest, parsed: ParsedTitle
    ) -> Diagnostic | None:
        """Return the attention bucket of a pull request.

        Returns None for closed, untracked and work-in-progress pull requests.
        """
        if not self.is_tracked(pr) or WIP_MARKER in pr.title:
            return None

        url = pr.web_url(self.config.github_url)
        if parsed.key is not None:
            kind = DiagnosticKind.AWAITING_REVIEW_FEATURE
            message = f"Awaiting review (feature): {url}: {pr.title}"
        elif parsed.is_bugfix:
            kind = DiagnosticKind.AWAITING_REVIEW_BUGFIX
            message = f"Awaiting review (bugfix): {url}: {pr.title}"
        else:
            kind = DiagnosticKind.UNASSIGNED
            message = (
                f"The pull request {url} is not assigned to a bug nor a story: "
                f"{pr.title}"
            )

        return Diagnostic(
            kind=kind, message=message, pull_request_url=url, issue_key=parsed.key
        )
