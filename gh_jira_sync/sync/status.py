"""Consistency checks between pull request state and Jira issue status."""

from ..config import SyncConfig
from ..github_client.models import GitHubPullRequest
from ..jira_client.models import JiraIssue
from .attention import WIP_MARKER
from .models import Diagnostic, DiagnosticKind, ParsedTitle

IN_PROGRESS = "In Progress"
CODE_REVIEW = "Code Review"
ON_QA = "On QA"
DONE = "Done"


def expected_statuses(pr: GitHubPullRequest, parsed: ParsedTitle) -> tuple[str, ...]:
    """Issue statuses that agree with the pull request review state.

    An empty tuple means there is no expectation, which is the case for
    closed pull requests that were not merged and for unknown states.
    """
    if pr.state == "open":
        if WIP_MARKER in parsed.residual:
            return (IN_PROGRESS,)
        return (CODE_REVIEW,)
    if pr.state == "closed" and pr.merged:
        return (ON_QA, DONE)
    return ()


class StatusChecker:
    """Compares Jira issue statuses with pull request states."""

    def __init__(self, config: SyncConfig):
        self.config = config

    def check(
        self, pr: GitHubPullRequest, parsed: ParsedTitle, issue: JiraIssue
    ) -> list[Diagnostic]:
        """Report mismatches between the issue status and the pull request.

        Args:
            pr: Pull request whose title references the issue
            parsed: Parsed pull request title
            issue: Issue fetched for ``parsed.key``

        Returns:
            At most one diagnostic; an empty list when the status agrees
        """
        url = pr.web_url(self.config.github_url)

        if pr.state not in ("open", "closed"):
            return [
                Diagnostic(
                    kind=DiagnosticKind.UNEXPECTED_STATE,
                    message=f"{url}: unexpected state {pr.state!r}",
                    pull_request_url=url,
                    issue_key=issue.key,
                )
            ]

        expected = expected_statuses(pr, parsed)
        if not expected or issue.status in expected:
            return []

        want = " or ".join(expected)
        return [
            Diagnostic(
                kind=DiagnosticKind.STATUS_MISMATCH,
                message=f"{issue.key}: got {issue.status}, want {want}",
                pull_request_url=url,
                issue_key=issue.key,
            )
        ]

    def hold_reminder(self, pr: GitHubPullRequest) -> Diagnostic | None:
        """Remind to verify approvals of open pull requests that are not on hold."""
        if pr.state != "open" or pr.has_label(self.config.hold_label):
            return None

        url = pr.web_url(self.config.github_url)
        return Diagnostic(
            kind=DiagnosticKind.HOLD_REMINDER,
            message=(
                f"The pull request {url} is open and it's not on hold. "
                "Please make sure that it has got all approvals or put it on hold."
            ),
            pull_request_url=url,
        )
