"""Jira REST API client using httpx."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import JiraConfig
from ..exceptions import JiraClientError
from .models import JiraIssue, RemoteLink

logger = logging.getLogger(__name__)

API_PREFIX = "rest/api/2"


class JiraClient:
    """Jira API client with HTTP basic authentication."""

    def __init__(
        self,
        config: JiraConfig | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ):
        """Initialize Jira client.

        Args:
            config: Jira connection settings. If None, read from the
                JIRA_BASE_URL, JIRA_USERNAME and JIRA_PASSWORD env vars.
            http_client: Preconfigured httpx client, mainly for tests
            timeout: Request timeout in seconds
        """
        self.config = config or JiraConfig.from_env()
        self.config.validate()

        self.base_url = (self.config.base_url or "").rstrip("/") + "/"
        self.headers = {
            "User-Agent": "gh-jira-sync/0.1.0",
            "Accept": "application/json",
        }
        self._client = http_client or httpx.Client(
            base_url=self.base_url,
            auth=(self.config.username or "", self.config.password or ""),
            headers=self.headers,
            timeout=timeout,
        )

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            JiraClientError: On transport errors, non-2xx responses and
                bodies that are not JSON
        """
        url = f"{API_PREFIX}/{path}"
        try:
            response = self._client.request(method, url, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise JiraClientError(
                f"{method} {url} failed with status "
                f"{e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise JiraClientError(f"{method} {url} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise JiraClientError(
                f"{method} {url} returned invalid JSON: {e}",
                status_code=response.status_code,
            ) from e

    def get_issue(self, key: str) -> JiraIssue:
        """Get an issue with its current status.

        Args:
            key: Issue key, e.g. IR-123

        Returns:
            JiraIssue with the status name
        """
        data = self._request("GET", f"issue/{key}", params={"fields": "status"})
        try:
            return JiraIssue.from_api(data)
        except (KeyError, TypeError) as e:
            raise JiraClientError(f"Issue {key} response has no status: {e!r}") from e

    def get_remote_links(self, key: str) -> list[RemoteLink]:
        """Get all remote links of an issue."""
        data = self._request("GET", f"issue/{key}/remotelink")
        try:
            return [RemoteLink.model_validate(item) for item in data or []]
        except (ValidationError, TypeError) as e:
            raise JiraClientError(f"Invalid remote links of {key}: {e}") from e

    def create_remote_link(self, key: str, link: RemoteLink) -> RemoteLink:
        """Create a remote link on an issue.

        Args:
            key: Issue key
            link: Link to create; its ``id`` is ignored

        Returns:
            The link with the identifier assigned by Jira, when returned
        """
        logger.debug("POST remote link %s -> %s", key, link.url)
        data = self._request(
            "POST", f"issue/{key}/remotelink", json=link.to_payload()
        )
        if isinstance(data, dict) and "id" in data:
            return link.model_copy(update={"id": data["id"]})
        return link
