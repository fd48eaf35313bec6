"""Pydantic models for Jira data structures.

These models map to the Jira REST API v2 issue and remote link resources.
API Reference: https://developer.atlassian.com/cloud/jira/platform/rest/v2/
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JiraIssue(BaseModel):
    """Jira issue reduced to its key and current status."""

    key: str = Field(..., description="Issue key, e.g. IR-123")
    status: str = Field(..., description="Name of the current workflow status")

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "JiraIssue":
        """Build from a ``GET rest/api/2/issue/{key}`` response body."""
        return cls(key=data["key"], status=data["fields"]["status"]["name"])


class RemoteLinkIcon(BaseModel):
    """Icon shown next to a remote link."""

    url16x16: str | None = Field(None, description="URL of a 16x16 icon")
    title: str | None = Field(None, description="Tooltip of the icon")


class RemoteLinkObject(BaseModel):
    """Target of a remote link."""

    model_config = ConfigDict(extra="ignore")

    url: str = Field(..., description="External URL; identifies the link")
    title: str = Field(..., description="Text displayed for the link")
    icon: RemoteLinkIcon | None = Field(None, description="Link icon")


class RemoteLink(BaseModel):
    """Jira remote link from an issue to an external resource.

    Maps to the Jira REST API remote issue link object.
    API Reference: https://developer.atlassian.com/server/jira/platform/jira-rest-api-for-remote-issue-links/
    """

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(None, description="Server-assigned link identifier")
    object: RemoteLinkObject = Field(..., description="Linked resource")

    @property
    def url(self) -> str:
        return self.object.url

    def to_payload(self) -> dict[str, Any]:
        """Request body for creating the link."""
        return self.model_dump(exclude_none=True, exclude={"id"})
