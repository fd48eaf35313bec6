"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import GitHubLabel, GitHubPullRequest, GitHubUser

__all__ = [
    "GitHubClient",
    "GitHubUser",
    "GitHubLabel",
    "GitHubPullRequest",
]
