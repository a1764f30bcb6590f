"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    TOKEN = "token"
    APP = "app"


@dataclass
class SyncLabelsConfig:
    """Resolved configuration for the sync command."""

    repo: str
    sources: list[str]
    skip_delete: bool
    github_api_url: str
    github_auth_type: GitHubAuthenticationType
    github_token: str | None = None
    github_app_id: int | None = None
    github_app_private_key_path: Path | None = None
    github_app_installation_id: int | None = None
