"""Orchestrates the synchronization of GitHub labels."""

import time

import structlog

from github_label_manager.configuration.models import SyncLabelsConfig
from github_label_manager.github.abc import GitHubClientBase
from github_label_manager.github.adapter import GitHubKitAdapter
from github_label_manager.synchronize.exceptions import LabelSynchronizationError
from github_label_manager.synchronize.labels import apply_label_sync_plan, plan_label_sync
from github_label_manager.synchronize.remote import read_remote_labels
from github_label_manager.synchronize.results import LabelSyncResult
from github_label_manager.synchronize.sources import load_desired_labels

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def sync_labels(github_client: GitHubClientBase, sources: list[str], skip_delete: bool = False) -> LabelSyncResult:
    """Converge the repository's labels to the labels defined by the sources."""
    desired_labels = load_desired_labels(sources)
    remote_labels = await read_remote_labels(github_client)
    plan = plan_label_sync(desired_labels, remote_labels, skip_delete=skip_delete)
    logger.info(
        "Planned label synchronization",
        desired_label_count=len(desired_labels),
        existing_label_count=len(remote_labels),
        to_create=len(plan.to_create),
        to_update=len(plan.to_update),
        to_delete=len(plan.to_delete),
        skip_delete=skip_delete,
    )
    return await apply_label_sync_plan(plan, github_client, skip_delete=skip_delete)


async def run_sync_labels_workflow(config: SyncLabelsConfig) -> LabelSyncResult:
    """Run the sync workflow end to end.

    Any failure aborts the run and is re-raised as LabelSynchronizationError with
    the original error as its cause. Labels already created, updated or deleted
    before the failure are left as they are.
    """
    logger.debug("Synchronizing labels", repo=config.repo, sources=config.sources, skip_delete=config.skip_delete)
    start_time = time.time()
    try:
        github_adapter = await GitHubKitAdapter.create(
            repo=config.repo,
            github_auth_type=config.github_auth_type,
            github_token=config.github_token,
            github_app_id=config.github_app_id,
            github_app_private_key_path=config.github_app_private_key_path,
            github_app_installation_id=config.github_app_installation_id,
            github_api_url=config.github_api_url,
        )
        await github_adapter.validate_connection()
        result = await sync_labels(github_adapter, config.sources, skip_delete=config.skip_delete)
    except Exception as exc:
        logger.error("Label synchronization failed", error=str(exc), error_type=type(exc).__name__)
        raise LabelSynchronizationError(str(exc)) from exc

    logger.info(
        "Synchronized labels",
        created=len(result.created),
        updated=len(result.updated),
        deleted=len(result.deleted),
        duration=round(time.time() - start_time, 2),
    )
    return result
