"""Test configuration and fixtures."""

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from gh_jira_sync.config import JiraConfig, SyncConfig
from gh_jira_sync.github_client.models import (
    GitHubLabel,
    GitHubPullRequest,
    GitHubUser,
)
from gh_jira_sync.jira_client.models import JiraIssue, RemoteLink, RemoteLinkObject

PullRequestFactory = Callable[..., GitHubPullRequest]


@pytest.fixture
def sync_config() -> SyncConfig:
    """Small configuration with a single Jira project."""
    return SyncConfig(
        repositories=["openshift/image-registry", "openshift/origin"],
        jira_projects=["IR"],
        team=["dmage"],
        team_repositories=["openshift/image-registry"],
    )


@pytest.fixture
def jira_config(monkeypatch: pytest.MonkeyPatch) -> JiraConfig:
    """Jira configuration populated from a fake environment."""
    monkeypatch.setenv("JIRA_BASE_URL", "https://issues.example.com")
    monkeypatch.setenv("JIRA_USERNAME", "bot")
    monkeypatch.setenv("JIRA_PASSWORD", "secret")
    return JiraConfig()


@pytest.fixture
def make_pr() -> PullRequestFactory:
    """Factory for pull requests with sensible defaults."""

    def _make_pr(
        title: str = "IR-123: Fix registry pruning",
        number: int = 42,
        state: str = "open",
        merged: bool = False,
        login: str = "someone",
        repository: str = "openshift/image-registry",
        labels: list[str] | None = None,
    ) -> GitHubPullRequest:
        return GitHubPullRequest(
            number=number,
            title=title,
            state=state,
            merged=merged,
            user=GitHubUser(login=login, id=1),
            repository_full_name=repository,
            labels=[GitHubLabel(name=name) for name in labels or []],
        )

    return _make_pr


class FakeJira:
    """In-memory stand-in for JiraClient keeping remote links per issue."""

    def __init__(self, statuses: dict[str, str] | None = None):
        self.statuses = statuses or {}
        self.links: dict[str, list[RemoteLink]] = {}
        self.created: list[tuple[str, RemoteLink]] = []

    def get_issue(self, key: str) -> JiraIssue:
        return JiraIssue(key=key, status=self.statuses.get(key, "Code Review"))

    def get_remote_links(self, key: str) -> list[RemoteLink]:
        return list(self.links.get(key, []))

    def create_remote_link(self, key: str, link: RemoteLink) -> RemoteLink:
        created = link.model_copy(update={"id": len(self.created) + 1})
        self.links.setdefault(key, []).append(created)
        self.created.append((key, created))
        return created

    def add_link(self, key: str, url: str, title: str = "existing") -> None:
        self.links.setdefault(key, []).append(
            RemoteLink(id=99, object=RemoteLinkObject(url=url, title=title))
        )


@pytest.fixture
def fake_jira() -> FakeJira:
    """Fake Jira client with empty link storage."""
    return FakeJira()


@pytest.fixture
def mock_github() -> Mock:
    """Mock GitHub client returning no pull requests."""
    github = Mock()
    github.list_pull_requests.return_value = []
    return github
