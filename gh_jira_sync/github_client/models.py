"""Pydantic models for GitHub data structures.

These models map directly to GitHub's REST API v3 response structures.
API Reference: https://docs.github.com/en/rest/pulls
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        "", description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubPullRequest(BaseModel):
    """GitHub pull request model.

    Read-only projection of the REST API Pull Request object with the fields
    needed to reconcile it with Jira.
    API Reference: https://docs.github.com/en/rest/pulls/pulls
    """

    number: int = Field(..., description="Pull request number within the repository")
    title: str = Field(..., description="Title of the pull request (string)")
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    merged: bool = Field(
        False, description="Whether the pull request has been merged"
    )
    user: GitHubUser = Field(..., description="Author of the pull request")
    repository_full_name: str = Field(
        ..., description="Full name (owner/name) of the base repository"
    )
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Labels attached to the pull request"
    )
    updated_at: datetime | None = Field(
        None, description="Timestamp of last pull request update (ISO 8601)"
    )

    @property
    def owner(self) -> str:
        return self.repository_full_name.split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self.repository_full_name.split("/", 1)[1]

    @property
    def label_names(self) -> list[str]:
        return [label.name for label in self.labels]

    def has_label(self, name: str) -> bool:
        """Check whether a label with the given name is attached."""
        return name in self.label_names

    @property
    def reference(self) -> str:
        """Short reference in the form owner/repo#number."""
        return f"{self.repository_full_name}#{self.number}"

    def web_url(self, github_url: str = "https://github.com") -> str:
        """Canonical web URL of the pull request."""
        base = github_url.rstrip("/")
        return f"{base}/{self.repository_full_name}/pull/{self.number}"
