"""Sets up the authenticated githubkit client."""

from pathlib import Path
from typing import TypeAlias

import structlog
from githubkit import GitHub
from githubkit.auth import (
    AppAuthStrategy,
    AppInstallationAuthStrategy,
    TokenAuthStrategy,
)
from githubkit.exception import GitHubException
from githubkit.versions.latest.models import Installation

from github_label_manager.configuration.models import GitHubAuthenticationType
from github_label_manager.synchronize.exceptions import GitHubConnectionError
from github_label_manager.utils.github import RepositoryRef

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GitHubClient: TypeAlias = GitHub[AppInstallationAuthStrategy] | GitHub[TokenAuthStrategy]


async def get_github_app_client(
    repository: RepositoryRef,
    github_app_id: int,
    github_app_private_key_path: Path,
    github_app_installation_id: int,
    github_api_url: str,
) -> GitHub[AppInstallationAuthStrategy]:
    """Returns a GitHub client authenticated as the App installation for the repository."""
    try:
        private_key = Path(github_app_private_key_path).read_text(encoding="utf-8")
    except OSError as e:
        raise GitHubConnectionError(f"Failed to read GitHub App private key '{github_app_private_key_path}': {e}") from e

    # Disable HTTP caching to always get fresh data
    app_client = GitHub(auth=AppAuthStrategy(app_id=github_app_id, private_key=private_key), base_url=github_api_url, http_cache=False)
    try:
        resp = await app_client.rest.apps.async_get_repo_installation(owner=repository.owner, repo=repository.name)
    except GitHubException as e:
        raise GitHubConnectionError(f"Failed to get GitHub App installation for {repository}: {e}") from e
    repo_installation: Installation = resp.parsed_data
    if repo_installation.id != int(github_app_installation_id):
        logger.warning(
            "Configured GitHub App installation does not match the repository installation",
            configured_installation_id=github_app_installation_id,
            repository_installation_id=repo_installation.id,
        )
    return app_client.with_auth(app_client.auth.as_installation(repo_installation.id))


def get_github_token_client(github_token: str, github_api_url: str) -> GitHub[TokenAuthStrategy]:
    """Returns a GitHub client authenticated with a token (GITHUB_TOKEN or a PAT)."""
    # Disable HTTP caching to always get fresh data
    return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)


async def get_github_client(
    repository: RepositoryRef,
    github_auth_type: GitHubAuthenticationType,
    github_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
) -> GitHubClient:
    """Returns an authenticated GitHub client using either a token or GitHub App credentials.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    """
    if github_auth_type == GitHubAuthenticationType.APP:
        if not (github_app_id and github_app_private_key_path and github_app_installation_id):
            raise GitHubConnectionError("GitHub App authentication requires app_id, private_key_path, and installation_id.")
        return await get_github_app_client(repository, github_app_id, github_app_private_key_path, github_app_installation_id, github_api_url)
    if not github_token:
        raise GitHubConnectionError("Token authentication requires a GitHub token.")
    return get_github_token_client(github_token, github_api_url)
