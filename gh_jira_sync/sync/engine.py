"""Sync run orchestration.

A run walks the configured repositories one at a time and, for each pull
request on the first page of the listing, extracts the issue key, reports
review attention, checks the issue status and links the pull request from
the issue. Remote failures are raised as ``RemoteError``; the engine either
stops the run (the default) or records the error and moves on.
"""

import logging

from github.GithubException import GithubException
from requests.exceptions import RequestException

from ..config import SyncConfig
from ..exceptions import JiraClientError, RemoteError, RemoteReadError
from ..github_client.client import GitHubClient
from ..github_client.models import GitHubPullRequest
from ..jira_client.client import JiraClient
from .attention import AttentionClassifier
from .keys import KeyExtractor
from .linker import LinkReconciler
from .models import Diagnostic, DiagnosticKind, ParsedTitle, SyncReport
from .status import StatusChecker

logger = logging.getLogger(__name__)


class SyncEngine:
    """Reconciles pull requests of the configured repositories with Jira."""

    def __init__(
        self,
        config: SyncConfig,
        github: GitHubClient,
        jira: JiraClient,
        halt_on_error: bool = True,
        dry_run: bool = False,
    ):
        self.config = config
        self.github = github
        self.jira = jira
        self.halt_on_error = halt_on_error

        self.extractor = KeyExtractor(config.jira_projects)
        self.classifier = AttentionClassifier(config)
        self.checker = StatusChecker(config)
        self.linker = LinkReconciler(jira, config, dry_run=dry_run)

    def run(self, repositories: list[str] | None = None) -> SyncReport:
        """Process every repository and return the run summary.

        Args:
            repositories: Full names to scan instead of ``config.repositories``

        Raises:
            RemoteError: On the first remote failure when ``halt_on_error``
        """
        report = SyncReport()
        for full_name in repositories or self.config.repositories:
            self.sync_repository(full_name, report)
        return report

    def sync_repository(self, full_name: str, report: SyncReport) -> None:
        owner, _, name = full_name.partition("/")
        logger.debug("Analyzing github repository %s...", full_name)

        try:
            pull_requests = self.github.list_pull_requests(
                owner, name, state="all", sort="updated", direction="desc"
            )
        except (GithubException, RequestException, ValueError) as e:
            self._handle_error(
                RemoteReadError(f"list pull requests of {full_name}", str(e)), report
            )
            return

        report.repositories += 1
        for pr in pull_requests:
            try:
                self.sync_pull_request(pr, report)
            except RemoteError as e:
                self._handle_error(e, report)

    def sync_pull_request(self, pr: GitHubPullRequest, report: SyncReport) -> None:
        """Classify, check and link a single pull request."""
        report.pull_requests += 1
        parsed = self.extractor.parse(pr.title)

        self._emit(self.classifier.classify(pr, parsed), report)
        self._emit(self.checker.hold_reminder(pr), report)

        if parsed.key is None:
            return

        report.keyed_pull_requests += 1
        self.check_status(pr, parsed, report)
        report.record_link(self.linker.reconcile(parsed.key, pr, parsed))

    def check_status(
        self, pr: GitHubPullRequest, parsed: ParsedTitle, report: SyncReport
    ) -> None:
        assert parsed.key is not None
        try:
            issue = self.jira.get_issue(parsed.key)
        except JiraClientError as e:
            raise RemoteReadError(f"get issue {parsed.key}", str(e)) from e

        for diagnostic in self.checker.check(pr, parsed, issue):
            self._emit(diagnostic, report)

    def _emit(self, diagnostic: Diagnostic | None, report: SyncReport) -> None:
        if diagnostic is None:
            return
        if diagnostic.kind == DiagnosticKind.UNEXPECTED_STATE:
            logger.warning(diagnostic.message)
        else:
            logger.info(diagnostic.message)
        report.diagnostics.append(diagnostic)

    def _handle_error(self, error: RemoteError, report: SyncReport) -> None:
        logger.error(str(error))
        report.errors.append(str(error))
        if self.halt_on_error:
            raise error
