"""Pull request and Jira issue reconciliation."""

from .attention import AttentionClassifier
from .engine import SyncEngine
from .keys import KeyExtractor
from .linker import LinkReconciler
from .models import Diagnostic, DiagnosticKind, LinkResult, ParsedTitle, SyncReport
from .status import StatusChecker

__all__ = [
    "AttentionClassifier",
    "Diagnostic",
    "DiagnosticKind",
    "KeyExtractor",
    "LinkReconciler",
    "LinkResult",
    "ParsedTitle",
    "StatusChecker",
    "SyncEngine",
    "SyncReport",
]
