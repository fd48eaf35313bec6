"""Configuration for the GitHub/Jira sync run."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

DEFAULT_REPOSITORIES = [
    "openshift/api",
    "openshift/cluster-image-registry-operator",
    "openshift/cluster-monitoring-operator",
    "openshift/docker-distribution",
    "openshift/image-registry",
    "openshift/oc",
    "openshift/openshift-apiserver",
    "openshift/origin",
    "openshift/release",
]

DEFAULT_JIRA_PROJECTS = ["IR"]

DEFAULT_TEAM = ["dmage", "ricardomaraschini"]

DEFAULT_TEAM_REPOSITORIES = [
    "openshift/cluster-image-registry-operator",
    "openshift/image-registry",
]


class JiraConfig:
    """Configuration class for Jira API access."""

    def __init__(self) -> None:
        """Initialize Jira configuration from environment variables."""
        self.base_url: str | None = os.getenv("JIRA_BASE_URL")
        self.username: str | None = os.getenv("JIRA_USERNAME")
        self.password: str | None = os.getenv("JIRA_PASSWORD")

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Read the configuration from the environment and validate it."""
        config = cls()
        config.validate()
        return config

    def is_configured(self) -> bool:
        """Check if Jira is properly configured."""
        return not self.missing()

    def missing(self) -> list[str]:
        """Names of required environment variables that are not set."""
        missing_vars = []
        if not self.base_url:
            missing_vars.append("JIRA_BASE_URL")
        if not self.username:
            missing_vars.append("JIRA_USERNAME")
        if not self.password:
            missing_vars.append("JIRA_PASSWORD")
        return missing_vars

    def validate(self) -> None:
        """Validate configuration and raise error if invalid."""
        missing_vars = self.missing()
        if missing_vars:
            raise ConfigurationError(
                "The environment variables "
                f"{', '.join(missing_vars)} are not set or empty. "
                "Please set them and try again."
            )


class SyncConfig(BaseModel):
    """Repositories, Jira projects and team membership used by a sync run.

    The defaults describe the image registry team; a JSON file with the same
    fields can be passed to override any of them.
    """

    repositories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REPOSITORIES),
        description="GitHub repositories to scan, as owner/name",
    )
    jira_projects: list[str] = Field(
        default_factory=lambda: list(DEFAULT_JIRA_PROJECTS),
        description="Jira project keys recognised in pull request titles",
    )
    team: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEAM),
        description="GitHub logins whose open pull requests are classified",
    )
    team_repositories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEAM_REPOSITORIES),
        description="Repositories whose open pull requests are all classified",
    )
    hold_label: str = Field(
        "do-not-merge/hold", description="Label that keeps a pull request on hold"
    )
    github_url: str = Field(
        "https://github.com", description="Web URL used to build pull request links"
    )
    link_icon_url: str = Field(
        "https://github.com/favicon.ico",
        description="16x16 icon shown next to remote links in Jira",
    )
    link_icon_title: str = Field("GitHub", description="Title of the link icon")
    page_size: int = Field(
        100, ge=1, le=100, description="Pull requests fetched per repository"
    )

    @field_validator("repositories", "team_repositories")
    @classmethod
    def _check_full_names(cls, value: list[str]) -> list[str]:
        for full_name in value:
            owner, _, name = full_name.partition("/")
            if not owner or not name or "/" in name:
                raise ValueError(
                    f"repository {full_name!r} must be in the form owner/name"
                )
        return value

    @field_validator("jira_projects")
    @classmethod
    def _check_projects(cls, value: list[str]) -> list[str]:
        if any(not project.strip() for project in value):
            raise ValueError("Jira project keys must not be empty")
        return value

    @field_validator("github_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def load(cls, path: Path | None = None) -> "SyncConfig":
        """Load configuration from a JSON file, or use the defaults.

        Args:
            path: Path to a JSON document with any of the model fields

        Returns:
            Validated SyncConfig

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        if path is None:
            return cls()

        try:
            return cls.model_validate_json(path.read_text())
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config file {path}: {e}") from e

    def is_team_member(self, login: str) -> bool:
        """Check whether a GitHub login belongs to the tracked team."""
        return login in self.team

    def is_team_repository(self, full_name: str) -> bool:
        """Check whether a repository is tracked by the team."""
        return full_name in self.team_repositories
