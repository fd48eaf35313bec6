"""Tests for the sync and config CLI commands."""

import json
import os
from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from gh_jira_sync.cli.main import app
from gh_jira_sync.exceptions import RemoteReadError
from gh_jira_sync.sync.models import Diagnostic, DiagnosticKind, SyncReport

JIRA_ENV = {
    "JIRA_BASE_URL": "https://issues.example.com",
    "JIRA_USERNAME": "bot",
    "JIRA_PASSWORD": "secret",
}


class TestSyncCommand:
    """Test the sync CLI command."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.runner = CliRunner()

    @patch.dict(os.environ, JIRA_ENV, clear=True)
    @patch("gh_jira_sync.cli.sync.configure_logging")
    @patch("gh_jira_sync.cli.sync.SyncEngine")
    @patch("gh_jira_sync.cli.sync.JiraClient")
    @patch("gh_jira_sync.cli.sync.GitHubClient")
    def test_sync_success(
        self,
        mock_github_class: Mock,
        mock_jira_class: Mock,
        mock_engine_class: Mock,
        mock_logging: Mock,
    ) -> None:
        """Test a successful run with the default configuration."""
        report = SyncReport(
            repositories=9,
            pull_requests=120,
            keyed_pull_requests=4,
            links_created=1,
            links_existing=3,
            diagnostics=[
                Diagnostic(
                    kind=DiagnosticKind.UNASSIGNED,
                    message="not assigned",
                    pull_request_url="https://github.com/openshift/oc/pull/1",
                )
            ],
        )
        mock_engine_class.return_value.run.return_value = report

        result = self.runner.invoke(app, ["sync"])

        assert result.exit_code == 0
        assert "Sync Results" in result.stdout
        assert "unassigned" in result.stdout
        assert "Sync complete" in result.stdout

        mock_logging.assert_called_once_with(False)
        mock_github_class.assert_called_once_with(token=None, page_size=100)
        config = mock_engine_class.call_args.args[0]
        assert "openshift/image-registry" in config.repositories
        assert mock_engine_class.call_args.kwargs == {
            "halt_on_error": True,
            "dry_run": False,
        }
        mock_jira_class.return_value.__exit__.assert_called_once()

    @patch.dict(os.environ, JIRA_ENV, clear=True)
    @patch("gh_jira_sync.cli.sync.configure_logging")
    @patch("gh_jira_sync.cli.sync.SyncEngine")
    @patch("gh_jira_sync.cli.sync.JiraClient")
    @patch("gh_jira_sync.cli.sync.GitHubClient")
    def test_sync_options(
        self,
        mock_github_class: Mock,
        mock_jira_class: Mock,
        mock_engine_class: Mock,
        mock_logging: Mock,
    ) -> None:
        """Test repository override, dry run, keep going and verbosity."""
        mock_engine_class.return_value.run.return_value = SyncReport()

        result = self.runner.invoke(
            app,
            [
                "sync",
                "--repo",
                "openshift/api",
                "--repo",
                "openshift/oc",
                "--dry-run",
                "--keep-going",
                "-v",
                "--token",
                "gh_token",
            ],
        )

        assert result.exit_code == 0
        assert "Dry run" in result.stdout
        mock_logging.assert_called_once_with(True)
        mock_github_class.assert_called_once_with(token="gh_token", page_size=100)
        config = mock_engine_class.call_args.args[0]
        assert config.repositories == ["openshift/api", "openshift/oc"]
        assert mock_engine_class.call_args.kwargs == {
            "halt_on_error": False,
            "dry_run": True,
        }

    @patch.dict(os.environ, JIRA_ENV, clear=True)
    @patch("gh_jira_sync.cli.sync.configure_logging")
    @patch("gh_jira_sync.cli.sync.SyncEngine")
    @patch("gh_jira_sync.cli.sync.JiraClient")
    @patch("gh_jira_sync.cli.sync.GitHubClient")
    def test_sync_remote_error(
        self,
        mock_github_class: Mock,
        mock_jira_class: Mock,
        mock_engine_class: Mock,
        mock_logging: Mock,
    ) -> None:
        """Test that a remote failure aborts with exit code 1."""
        mock_engine_class.return_value.run.side_effect = RemoteReadError(
            "get issue IR-1", "404 Not Found"
        )

        result = self.runner.invoke(app, ["sync"])

        assert result.exit_code == 1
        assert "get issue IR-1" in result.stdout
        assert "Sync Results" not in result.stdout

    @patch.dict(os.environ, JIRA_ENV, clear=True)
    @patch("gh_jira_sync.cli.sync.configure_logging")
    @patch("gh_jira_sync.cli.sync.SyncEngine")
    @patch("gh_jira_sync.cli.sync.JiraClient")
    @patch("gh_jira_sync.cli.sync.GitHubClient")
    def test_sync_keep_going_with_errors(
        self,
        mock_github_class: Mock,
        mock_jira_class: Mock,
        mock_engine_class: Mock,
        mock_logging: Mock,
    ) -> None:
        """Test that recorded errors still fail the command."""
        mock_engine_class.return_value.run.return_value = SyncReport(
            errors=["list pull requests of openshift/oc: 502"]
        )

        result = self.runner.invoke(app, ["sync", "--keep-going"])

        assert result.exit_code == 1
        assert "Sync Results" in result.stdout
        assert "Finished with 1 error(s)" in result.stdout

    @patch.dict(os.environ, {}, clear=True)
    @patch("gh_jira_sync.cli.sync.configure_logging")
    @patch("gh_jira_sync.cli.sync.SyncEngine")
    def test_sync_missing_environment(
        self, mock_engine_class: Mock, mock_logging: Mock
    ) -> None:
        """Test that missing Jira credentials stop the run before it starts."""
        result = self.runner.invoke(app, ["sync"])

        assert result.exit_code == 1
        assert "JIRA_BASE_URL" in result.stdout
        mock_engine_class.assert_not_called()

    @patch.dict(os.environ, JIRA_ENV, clear=True)
    @patch("gh_jira_sync.cli.sync.configure_logging")
    @patch("gh_jira_sync.cli.sync.SyncEngine")
    def test_sync_invalid_repository(
        self, mock_engine_class: Mock, mock_logging: Mock
    ) -> None:
        """Test that a malformed --repo value is rejected."""
        result = self.runner.invoke(app, ["sync", "--repo", "image-registry"])

        assert result.exit_code == 1
        assert "owner/name" in result.stdout
        mock_engine_class.assert_not_called()

    @patch.dict(os.environ, JIRA_ENV, clear=True)
    @patch("gh_jira_sync.cli.sync.configure_logging")
    @patch("gh_jira_sync.cli.sync.SyncEngine")
    @patch("gh_jira_sync.cli.sync.JiraClient")
    @patch("gh_jira_sync.cli.sync.GitHubClient")
    def test_sync_config_file(
        self,
        mock_github_class: Mock,
        mock_jira_class: Mock,
        mock_engine_class: Mock,
        mock_logging: Mock,
        tmp_path: Path,
    ) -> None:
        """Test loading repositories and projects from a JSON file."""
        config_file = tmp_path / "team.json"
        config_file.write_text(
            json.dumps(
                {
                    "repositories": ["example/service"],
                    "jira_projects": ["SVC"],
                    "page_size": 20,
                }
            )
        )
        mock_engine_class.return_value.run.return_value = SyncReport()

        result = self.runner.invoke(app, ["sync", "--config", str(config_file)])

        assert result.exit_code == 0
        config = mock_engine_class.call_args.args[0]
        assert config.repositories == ["example/service"]
        assert config.jira_projects == ["SVC"]
        mock_github_class.assert_called_once_with(token=None, page_size=20)


class TestConfigCommand:
    """Test the config CLI command."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.runner = CliRunner()

    @patch.dict(os.environ, JIRA_ENV, clear=True)
    def test_show_defaults(self) -> None:
        """Test printing the default configuration."""
        result = self.runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "Sync Configuration" in result.stdout
        assert "do-not-merge/hold" in result.stdout
        assert "https://issues.example.com" in result.stdout

    @patch.dict(os.environ, {}, clear=True)
    def test_show_missing_jira(self) -> None:
        """Test the hint about missing Jira variables."""
        result = self.runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "JIRA_USERNAME" in result.stdout

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        """Test that a malformed config file fails."""
        config_file = tmp_path / "broken.json"
        config_file.write_text('{"page_size": 0}')

        result = self.runner.invoke(app, ["config", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid config file" in result.stdout
