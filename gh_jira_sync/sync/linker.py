"""Idempotent remote links from Jira issues to pull requests."""

import logging

from ..config import SyncConfig
from ..exceptions import JiraClientError, RemoteReadError, RemoteWriteError
from ..github_client.models import GitHubPullRequest
from ..jira_client.client import JiraClient
from ..jira_client.models import RemoteLink, RemoteLinkIcon, RemoteLinkObject
from .models import LinkResult, ParsedTitle

logger = logging.getLogger(__name__)


class LinkReconciler:
    """Makes sure every keyed pull request is linked from its Jira issue."""

    def __init__(self, jira: JiraClient, config: SyncConfig, dry_run: bool = False):
        self.jira = jira
        self.config = config
        self.dry_run = dry_run

    def build_link(self, pr: GitHubPullRequest, parsed: ParsedTitle) -> RemoteLink:
        """Remote link pointing at the canonical pull request URL."""
        return RemoteLink(
            object=RemoteLinkObject(
                url=pr.web_url(self.config.github_url),
                title=f"{pr.reference}: {parsed.residual}",
                icon=RemoteLinkIcon(
                    url16x16=self.config.link_icon_url,
                    title=self.config.link_icon_title,
                ),
            )
        )

    def reconcile(
        self, issue_key: str, pr: GitHubPullRequest, parsed: ParsedTitle
    ) -> LinkResult:
        """Create the remote link unless the issue already has one to this URL.

        Args:
            issue_key: Jira issue key extracted from the title
            pr: Pull request to link
            parsed: Parsed pull request title, used for the link title

        Returns:
            LinkResult telling whether a link was created

        Raises:
            RemoteReadError: If the existing links cannot be fetched
            RemoteWriteError: If the new link cannot be created
        """
        logger.debug("Checking if %s is linked to %s...", pr.reference, issue_key)

        link = self.build_link(pr, parsed)
        try:
            existing = self.jira.get_remote_links(issue_key)
        except JiraClientError as e:
            raise RemoteReadError(f"get remote links of {issue_key}", str(e)) from e

        for remote_link in existing:
            if remote_link.url == link.url:
                logger.debug("%s is already linked to %s", pr.reference, issue_key)
                return LinkResult(issue_key=issue_key, link=remote_link)

        if self.dry_run:
            logger.info(
                "Would link the pull request %s to the issue %s (dry run)",
                pr.reference,
                issue_key,
            )
            return LinkResult(issue_key=issue_key, link=link, dry_run=True)

        logger.info(
            "Linking the pull request %s to the issue %s...", pr.reference, issue_key
        )
        try:
            created = self.jira.create_remote_link(issue_key, link)
        except JiraClientError as e:
            raise RemoteWriteError(f"create remote link on {issue_key}", str(e)) from e
        return LinkResult(issue_key=issue_key, link=created, created=True)
