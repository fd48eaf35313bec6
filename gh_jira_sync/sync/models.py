"""Models produced by a sync run."""

from collections import Counter
from enum import Enum

from pydantic import BaseModel, Field

from ..jira_client.models import RemoteLink


class DiagnosticKind(str, Enum):
    """Advisory findings reported while scanning pull requests."""

    UNASSIGNED = "unassigned"
    AWAITING_REVIEW_BUGFIX = "awaiting_review_bugfix"
    AWAITING_REVIEW_FEATURE = "awaiting_review_feature"
    HOLD_REMINDER = "hold_reminder"
    STATUS_MISMATCH = "status_mismatch"
    UNEXPECTED_STATE = "unexpected_state"


class ParsedTitle(BaseModel):
    """Result of parsing a pull request title."""

    title: str = Field(..., description="Original title")
    key: str | None = Field(None, description="Jira issue key at the title start")
    residual: str = Field(..., description="Title without the leading key marker")
    is_bugfix: bool = Field(False, description="Title carries a 'Bug N: ' marker")


class Diagnostic(BaseModel):
    """A non-fatal advisory finding about a pull request."""

    kind: DiagnosticKind
    message: str
    pull_request_url: str
    issue_key: str | None = None


class LinkResult(BaseModel):
    """Outcome of reconciling one issue/pull request pair."""

    issue_key: str
    link: RemoteLink
    created: bool = Field(False, description="A new remote link was submitted")
    dry_run: bool = Field(False, description="Creation was skipped by --dry-run")


class SyncReport(BaseModel):
    """Summary of a sync run."""

    repositories: int = 0
    pull_requests: int = 0
    keyed_pull_requests: int = 0
    links_created: int = 0
    links_existing: int = 0
    links_pending: int = 0
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    def record_link(self, result: LinkResult) -> None:
        if result.created:
            self.links_created += 1
        elif result.dry_run:
            self.links_pending += 1
        else:
            self.links_existing += 1

    def diagnostic_counts(self) -> dict[DiagnosticKind, int]:
        return dict(Counter(d.kind for d in self.diagnostics))

    @property
    def ok(self) -> bool:
        return not self.errors
