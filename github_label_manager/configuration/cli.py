"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_label_manager.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    RequiredConfigurationElementError,
)
from github_label_manager.configuration.reconcile import reconcile_sync_labels_configuration
from github_label_manager.synchronize.driver import run_sync_labels_workflow
from github_label_manager.synchronize.exceptions import LabelSynchronizationError
from github_label_manager.utils.constants import DEFAULT_GITHUB_API_URL
from github_label_manager.utils.logging import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Synchronize GitHub repository labels with JSON/YAML definitions.")


@typer_app.callback()
def main_callback(
    debug: Annotated[bool, Option(envvar=["DEBUG", "RUNNER_DEBUG"], help="Enable debug logging.")] = False,
) -> None:
    """Configure logging for every command."""
    configure_logging(debug=debug)


@typer_app.command(name="sync")
def sync_labels_cli(
    sources: Annotated[
        list[str] | None,
        Option(
            "--from",
            help="Label source (file path or HTTP(S) URL to a .yaml, .yml or .json file). Repeat for several sources; later sources win.",
        ),
    ] = None,
    sources_input: Annotated[
        str | None,
        Option(
            "--from-lines",
            envvar="INPUT_FROM",
            help="Label sources, one per line (GitHub Actions multi-line input). Ignored when --from is given.",
        ),
    ] = None,
    skip_delete: Annotated[
        bool, Option("--skip-delete/--no-skip-delete", envvar="INPUT_SKIP_DELETE", help="Do not delete repository labels missing from the sources.")
    ] = False,
    repo: Annotated[str | None, Option(envvar="GITHUB_REPOSITORY", help="Repository name (owner/repo).")] = None,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = DEFAULT_GITHUB_API_URL,
    github_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token or Personal Access Token.")] = None,
    github_app_id: Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")] = None,
    github_app_private_key_path: Annotated[Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")] = None,
    github_app_installation_id: Annotated[int | None, Option(envvar="GITHUB_APP_INSTALLATION_ID", help="GitHub App Installation ID.")] = None,
) -> None:
    """Create, update and delete repository labels so they match the label sources."""
    try:
        config = asyncio.run(
            reconcile_sync_labels_configuration(
                cli_repo=repo,
                cli_sources=sources,
                cli_sources_input=sources_input,
                cli_skip_delete=skip_delete,
                cli_github_api_url=github_api_url,
                cli_github_token=github_token,
                cli_github_app_id=github_app_id,
                cli_github_app_private_key_path=github_app_private_key_path,
                cli_github_app_installation_id=github_app_installation_id,
            )
        )
    except (RequiredConfigurationElementError, GitHubAuthenticationConfigurationUndefinedError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc

    try:
        asyncio.run(run_sync_labels_workflow(config))
    except LabelSynchronizationError as exc:
        typer.echo(f"Label synchronization failed: {exc}", err=True)
        raise typer.Exit(1) from exc


if __name__ == "__main__":
    typer_app()
