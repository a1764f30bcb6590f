"""Contains synchronization logic for GitHub labels.

Planning is a pure function of the desired and remote label mappings. Applying
a plan issues one GitHub call per label, strictly in order (create, update,
then delete), and stops at the first failure.
"""

from typing import Iterable, Mapping

import structlog

from github_label_manager.github.abc import GitHubClientBase
from github_label_manager.schemas.labels import LabelModel
from github_label_manager.synchronize.exceptions import InvalidArgumentError
from github_label_manager.synchronize.models import DesiredLabels, LabelSyncPlan, RemoteLabels, SyncDecision
from github_label_manager.synchronize.results import LabelSyncResult
from github_label_manager.synchronize.types import RemoteLabel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def decide_label_sync_action(desired_label: LabelModel | None, remote_label: RemoteLabel | None) -> SyncDecision:
    """Decide whether a label must be created, updated, or deleted.

    Key is the case-insensitive label name. A label present on both sides is
    always updated, even when its attributes are unchanged.
    """
    if desired_label is None and remote_label is None:
        raise InvalidArgumentError("desired_label or remote_label")
    if remote_label is None:
        return SyncDecision.CREATE
    if desired_label is None:
        return SyncDecision.DELETE
    return SyncDecision.UPDATE


def plan_label_sync(desired_labels: DesiredLabels | None, remote_labels: RemoteLabels | None, skip_delete: bool = False) -> LabelSyncPlan:
    """Compute the create/update/delete sets, each ordered by case-insensitive name."""
    if desired_labels is None:
        raise InvalidArgumentError("desired_labels")
    if remote_labels is None:
        raise InvalidArgumentError("remote_labels")

    if skip_delete:
        # Remote-only labels are never looked at when deletion is skipped.
        keys = set(desired_labels.keys())
    else:
        keys = desired_labels.keys() | remote_labels.keys()

    plan = LabelSyncPlan()
    for key in sorted(keys):
        decision = decide_label_sync_action(desired_labels.get(key), remote_labels.get(key))
        logger.debug("Decided label sync action", label_key=key, decision=decision.value)
        if decision is SyncDecision.CREATE:
            plan.to_create.append(desired_labels[key])
        elif decision is SyncDecision.UPDATE:
            plan.to_update[desired_labels[key]] = remote_labels[key]
        else:
            plan.to_delete.append(remote_labels[key])
    return plan


async def create_labels(labels: Iterable[LabelModel] | None, github_client: GitHubClientBase) -> list[str]:
    """Create each label in the repository, in order. Returns the created names."""
    if labels is None:
        raise InvalidArgumentError("labels")
    created: list[str] = []
    for label in labels:
        logger.info("Creating label", label_name=label.name)
        await github_client.create_label(label.name, label.color, label.description)
        created.append(label.name)
    return created


async def update_labels(labels: Mapping[LabelModel, RemoteLabel] | None) -> list[str]:
    """Overwrite each remote label with its desired name, color and description, in order."""
    if labels is None:
        raise InvalidArgumentError("labels")
    updated: list[str] = []
    for label, remote_label in labels.items():
        logger.info("Updating label", label_name=remote_label.name, new_label_name=label.name)
        await remote_label.update(label.name, label.color, label.description)
        updated.append(label.name)
    return updated


async def delete_labels(remote_labels: Iterable[RemoteLabel] | None) -> list[str]:
    """Delete each remote label, in order."""
    if remote_labels is None:
        raise InvalidArgumentError("remote_labels")
    deleted: list[str] = []
    for remote_label in remote_labels:
        logger.info("Deleting label", label_name=remote_label.name)
        await remote_label.delete()
        deleted.append(remote_label.name)
    return deleted


async def apply_label_sync_plan(plan: LabelSyncPlan, github_client: GitHubClientBase, skip_delete: bool = False) -> LabelSyncResult:
    """Apply a plan: create, then update, then delete unless deletion is skipped."""
    result = LabelSyncResult(skip_delete=skip_delete)
    result.created = await create_labels(plan.to_create, github_client)
    result.updated = await update_labels(plan.to_update)
    if not skip_delete:
        result.deleted = await delete_labels(plan.to_delete)
    return result
