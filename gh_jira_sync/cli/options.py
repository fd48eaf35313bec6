"""Standardized CLI option definitions shared by commands."""

import typer

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="JSON file overriding repositories, Jira projects and team",
    exists=True,
    dir_okay=False,
)

REPO_OPTION = typer.Option(
    None,
    "--repo",
    "-r",
    help="Repository to scan as owner/name (can be used multiple times)",
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Report missing links without creating them"
)

KEEP_GOING_OPTION = typer.Option(
    False,
    "--keep-going",
    "-k",
    help="Log remote errors and continue instead of aborting the run",
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")

TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)
