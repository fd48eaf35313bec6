"""CLI commands for reconciling pull requests with Jira issues."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import JiraConfig, SyncConfig
from ..exceptions import SyncError
from ..github_client.client import GitHubClient
from ..jira_client.client import JiraClient
from ..sync.engine import SyncEngine
from ..sync.models import SyncReport
from .options import (
    CONFIG_OPTION,
    DRY_RUN_OPTION,
    KEEP_GOING_OPTION,
    REPO_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send package logs to stderr; DEBUG when verbose, INFO otherwise."""
    root = logging.getLogger()
    if not any(
        isinstance(h, logging.StreamHandler)
        and getattr(h.formatter, "_fmt", None) == LOG_FORMAT
        for h in root.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    # Keep HTTP libraries quiet unless debugging.
    for name in ("httpx", "httpcore", "urllib3", "github"):
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)


def _print_report(report: SyncReport) -> None:
    results_table = Table(title="Sync Results")
    results_table.add_column("Metric", style="cyan")
    results_table.add_column("Value", justify="right", style="green")

    results_table.add_row("Repositories", str(report.repositories))
    results_table.add_row("Pull Requests", str(report.pull_requests))
    results_table.add_row("With Issue Key", str(report.keyed_pull_requests))
    results_table.add_row("Links Created", str(report.links_created))
    results_table.add_row("Already Linked", str(report.links_existing))
    if report.links_pending:
        results_table.add_row("Links Pending (dry run)", str(report.links_pending))
    results_table.add_row("Errors", str(len(report.errors)))
    console.print(results_table)

    counts = report.diagnostic_counts()
    if counts:
        diag_table = Table(title="Diagnostics")
        diag_table.add_column("Kind", style="cyan")
        diag_table.add_column("Count", justify="right", style="yellow")
        for kind, count in sorted(counts.items(), key=lambda item: item[0].value):
            diag_table.add_row(kind.value, str(count))
        console.print(diag_table)


def sync(
    config_file: Path | None = CONFIG_OPTION,
    repos: list[str] | None = REPO_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    keep_going: bool = KEEP_GOING_OPTION,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Link pull requests to the Jira issues named in their titles.

    Scans the most recently updated pull requests of every configured
    repository, reports review attention for the team, checks that the
    status of each referenced issue matches the pull request and adds a
    remote link to the issue when it is missing.

    Jira access is configured with JIRA_BASE_URL, JIRA_USERNAME and
    JIRA_PASSWORD.

    Examples:
        gh-jira-sync sync
        gh-jira-sync sync --repo openshift/image-registry --dry-run
        gh-jira-sync sync --config team.json --keep-going -v
    """
    configure_logging(verbose)

    try:
        config = SyncConfig.load(config_file)
        jira_config = JiraConfig.from_env()
    except SyncError as e:
        console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if repos:
        try:
            config = SyncConfig.model_validate(
                {**config.model_dump(), "repositories": repos}
            )
        except ValueError as e:
            console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1)

    if dry_run:
        console.print("🔍 [yellow]Dry run: no remote links will be created[/yellow]")

    github = GitHubClient(token=token, page_size=config.page_size)
    with JiraClient(jira_config) as jira:
        engine = SyncEngine(
            config, github, jira, halt_on_error=not keep_going, dry_run=dry_run
        )
        try:
            report = engine.run()
        except SyncError as e:
            console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
            raise typer.Exit(1)

    _print_report(report)

    if not report.ok:
        console.print(f"⚠️  Finished with {len(report.errors)} error(s)")
        raise typer.Exit(1)

    console.print("✨ Sync complete")


def show_config(config_file: Path | None = CONFIG_OPTION) -> None:
    """Show the effective sync configuration."""
    try:
        config = SyncConfig.load(config_file)
    except SyncError as e:
        console.print(f"❌ [red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    settings_table = Table(title="Sync Configuration")
    settings_table.add_column("Setting", style="cyan")
    settings_table.add_column("Value", style="green")

    settings_table.add_row("Repositories", "\n".join(config.repositories))
    settings_table.add_row("Jira Projects", ", ".join(config.jira_projects))
    settings_table.add_row("Team", ", ".join(config.team))
    settings_table.add_row("Team Repositories", "\n".join(config.team_repositories))
    settings_table.add_row("Hold Label", config.hold_label)
    settings_table.add_row("GitHub URL", config.github_url)
    settings_table.add_row("Page Size", str(config.page_size))
    console.print(settings_table)

    jira_config = JiraConfig()
    if jira_config.is_configured():
        console.print(f"🔑 Jira: {jira_config.base_url} as {jira_config.username}")
    else:
        missing = ", ".join(jira_config.missing())
        console.print(f"⚠️  Jira is not configured, missing: {missing}")
