"""Pytest configuration for integration tests."""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from github_label_manager.configuration.models import GitHubAuthenticationType, SyncLabelsConfig
from github_label_manager.utils.constants import DEFAULT_GITHUB_API_URL


@pytest.fixture(autouse=True, scope="session")
def load_env() -> None:
    """Load environment variables from .env.integration and .env before running integration tests.

    The .env.integration file takes precedence over .env.
    """
    project_root = Path(__file__).parent.parent.parent

    integration_env = project_root / ".env.integration"
    if integration_env.exists():
        load_dotenv(dotenv_path=integration_env)

    default_env = project_root / ".env"
    if default_env.exists():
        load_dotenv(dotenv_path=default_env)


@pytest.fixture
def sandbox_config(tmp_path: Path) -> SyncLabelsConfig:
    """Configuration targeting a throwaway repository whose labels may be rewritten.

    Integration tests are skipped unless INTEGRATION_REPO and GITHUB_TOKEN are set.
    """
    repo = os.getenv("INTEGRATION_REPO")
    token = os.getenv("GITHUB_TOKEN")
    if not repo or not token:
        pytest.skip("INTEGRATION_REPO and GITHUB_TOKEN must be set to run integration tests")
    return SyncLabelsConfig(
        repo=repo,
        sources=[],
        skip_delete=False,
        github_api_url=os.getenv("GITHUB_API_URL", DEFAULT_GITHUB_API_URL),
        github_auth_type=GitHubAuthenticationType.TOKEN,
        github_token=token,
    )
