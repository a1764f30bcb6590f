"""Reconcile configuration between CLI arguments and environment variables."""

from pathlib import Path
from typing import Sequence

from github_label_manager.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    RequiredConfigurationElementError,
)
from github_label_manager.configuration.models import GitHubAuthenticationType, SyncLabelsConfig
from github_label_manager.utils.helpers import split_multiline_input


async def validate_github_authentication_configuration(
    github_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Args:
        github_token (str | None): The GitHub token (GITHUB_TOKEN or a personal access token).
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.
        github_app_installation_id (int | None): The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If both or neither of token and App configurations are defined,
            or if the App configuration is incomplete.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_settings = {
        "GitHub App ID": (github_app_id, "--github-app-id", "GITHUB_APP_ID"),
        "GitHub App private key path": (github_app_private_key_path, "--github-app-private-key-path", "GITHUB_APP_PRIVATE_KEY_PATH"),
        "GitHub App installation ID": (github_app_installation_id, "--github-app-installation-id", "GITHUB_APP_INSTALLATION_ID"),
    }
    any_app_setting = any(value for value, _, _ in app_settings.values())

    if github_token and any_app_setting:
        raise GitHubAuthenticationConfigurationUndefinedError("Both token and GitHub App configurations are defined. Please use one or the other.")

    if github_token:
        return GitHubAuthenticationType.TOKEN

    if not any_app_setting:
        raise GitHubAuthenticationConfigurationUndefinedError(
            "No GitHub authentication configuration provided. Please provide either a token (GITHUB_TOKEN) or a GitHub App configuration."
        )

    missing_settings = [
        f"{name} (command line option {cli_name}, environment variable {env_name})"
        for name, (value, cli_name, env_name) in app_settings.items()
        if not value
    ]
    if missing_settings:
        raise GitHubAuthenticationConfigurationUndefinedError(
            "Incomplete GitHub App configuration - missing settings include " + ", ".join(missing_settings)
        )
    return GitHubAuthenticationType.APP


async def reconcile_sync_labels_configuration(
    cli_repo: str | None,
    cli_sources: Sequence[str] | None,
    cli_sources_input: str | None,
    cli_skip_delete: bool,
    cli_github_api_url: str,
    cli_github_token: str | None = None,
    cli_github_app_id: int | None = None,
    cli_github_app_private_key_path: Path | None = None,
    cli_github_app_installation_id: int | None = None,
) -> SyncLabelsConfig:
    """Resolve the sync command configuration, validating required elements and authentication.

    Repeated command line sources take precedence over the newline-separated
    INPUT_FROM value. Only line breaks separate sources, so paths may contain spaces.
    """
    if not cli_repo:
        raise RequiredConfigurationElementError(name="target repository", cli_name="--repo", env_name="GITHUB_REPOSITORY")

    if cli_sources:
        sources = split_multiline_input(cli_sources)
    else:
        sources = split_multiline_input([cli_sources_input] if cli_sources_input else [])
    if not sources:
        raise RequiredConfigurationElementError(name="label sources", cli_name="--from", env_name="INPUT_FROM")

    github_auth_type = await validate_github_authentication_configuration(
        github_token=cli_github_token,
        github_app_id=cli_github_app_id,
        github_app_private_key_path=cli_github_app_private_key_path,
        github_app_installation_id=cli_github_app_installation_id,
    )
    return SyncLabelsConfig(
        repo=cli_repo,
        sources=sources,
        skip_delete=cli_skip_delete,
        github_api_url=cli_github_api_url,
        github_auth_type=github_auth_type,
        github_token=cli_github_token,
        github_app_id=cli_github_app_id,
        github_app_private_key_path=cli_github_app_private_key_path,
        github_app_installation_id=cli_github_app_installation_id,
    )
