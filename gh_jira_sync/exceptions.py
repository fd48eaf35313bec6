"""Exception hierarchy for the sync run."""


class SyncError(Exception):
    """Base class for errors that stop a sync run."""


class ConfigurationError(SyncError):
    """Required configuration is missing or invalid."""


class RemoteError(SyncError):
    """A call to GitHub or Jira failed."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"{operation}: {message}")


class RemoteReadError(RemoteError):
    """Listing pull requests, fetching an issue or its remote links failed."""


class RemoteWriteError(RemoteError):
    """Creating a remote link failed."""


class JiraClientError(Exception):
    """Transport or HTTP error returned by the Jira REST API."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
