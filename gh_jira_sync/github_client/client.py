"""GitHub API client using PyGitHub."""

import logging
import os

from github import Auth, Github
from github.GithubException import GithubException, UnknownObjectException
from github.Label import Label
from github.NamedUser import NamedUser
from github.PullRequest import PullRequest
from github.Repository import Repository
from requests.exceptions import RequestException

from .models import GitHubLabel, GitHubPullRequest, GitHubUser

logger = logging.getLogger(__name__)


class GitHubClient:
    """Read-only GitHub API client for listing pull requests."""

    def __init__(self, token: str | None = None, page_size: int = 100):
        """Initialize GitHub client.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var; without a token the public API is
                used anonymously.
            page_size: Number of pull requests requested per page
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        self.page_size = page_size

        if self.token:
            self.github = Github(auth=Auth.Token(self.token), per_page=page_size)
        else:
            self.github = Github(per_page=page_size)

    def _check_rate_limit(self) -> None:
        """Log the remaining rate limit budget."""
        try:
            rate_limit = self.github.get_rate_limit()
            remaining = rate_limit.rate.remaining
        except (GithubException, RequestException) as e:
            logger.debug("Could not check rate limit: %s", e)
            return

        logger.debug("GitHub API rate limit: %d requests remaining", remaining)
        if remaining < 10:
            logger.warning(
                "GitHub API rate limit is low: %d requests remaining", remaining
            )

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color or "",
            description=github_label.description,
        )

    def _convert_pull_request(self, github_pr: PullRequest) -> GitHubPullRequest:
        """Convert PyGitHub pull request to our model.

        The list endpoint does not return the ``merged`` flag, and reading
        ``PullRequest.merged`` would fetch every pull request again, so the
        flag is derived from ``merged_at``.
        """
        return GitHubPullRequest(
            number=github_pr.number,
            title=github_pr.title or "",
            state=github_pr.state,
            merged=github_pr.merged_at is not None,
            user=self._convert_user(github_pr.user),
            repository_full_name=github_pr.base.repo.full_name,
            labels=[self._convert_label(label) for label in github_pr.labels],
            updated_at=github_pr.updated_at,
        )

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get a lazy repository object; nothing is fetched until it is used."""
        return self.github.get_repo(f"{owner}/{repo}", lazy=True)

    def list_pull_requests(
        self,
        owner: str,
        repo: str,
        state: str = "all",
        sort: str = "updated",
        direction: str = "desc",
    ) -> list[GitHubPullRequest]:
        """List the first page of pull requests of a repository.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            state: Pull request state (open, closed, all)
            sort: Sort field (created, updated, popularity, long-running)
            direction: Sort direction (asc, desc)

        Returns:
            Pull requests in the order returned by the API, at most
            ``page_size`` of them

        Raises:
            ValueError: If the repository does not exist
            GithubException: If the API call fails
            RequestException: On transport errors
        """
        self._check_rate_limit()

        repository = self.get_repository(owner, repo)
        pulls = repository.get_pulls(state=state, sort=sort, direction=direction)
        try:
            page = pulls.get_page(0)
        except UnknownObjectException:
            raise ValueError(f"Repository {owner}/{repo} not found")

        return [self._convert_pull_request(pr) for pr in page]
