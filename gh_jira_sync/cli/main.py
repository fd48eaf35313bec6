"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .sync import show_config, sync

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="gh-jira-sync",
    help="Link GitHub pull requests to Jira issues and check their status",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="sync", context_settings={"help_option_names": ["-h", "--help"]})(
    sync
)
app.command(name="config", context_settings={"help_option_names": ["-h", "--help"]})(
    show_config
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_jira_sync import __version__

    console.print(f"GitHub Jira Sync v{__version__}")


if __name__ == "__main__":
    app()
