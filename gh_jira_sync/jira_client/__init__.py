"""Jira client package for REST API interaction."""

from .client import JiraClient
from .models import JiraIssue, RemoteLink, RemoteLinkIcon, RemoteLinkObject

__all__ = [
    "JiraClient",
    "JiraIssue",
    "RemoteLink",
    "RemoteLinkObject",
    "RemoteLinkIcon",
]
