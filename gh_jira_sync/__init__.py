"""Reconcile GitHub pull requests with Jira issues."""

__version__ = "0.1.0"
