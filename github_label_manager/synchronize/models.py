"""Internal data models for label synchronization."""

from dataclasses import dataclass, field
from enum import Enum

from github_label_manager.schemas.labels import LabelModel
from github_label_manager.synchronize.types import RemoteLabel


class SyncDecision(Enum):
    """Enum for sync decisions."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


DesiredLabels = dict[str, LabelModel]
"""Case-insensitive label key -> desired label, merged from every source."""

RemoteLabels = dict[str, RemoteLabel]
"""Case-insensitive label key -> label handle currently in the repository."""


@dataclass
class LabelSyncPlan:
    """The three disjoint action sets computed by reconciling desired and remote labels.

    Each collection is ordered by case-insensitive label name.
    """

    to_create: list[LabelModel] = field(default_factory=list)
    to_update: dict[LabelModel, RemoteLabel] = field(default_factory=dict)
    to_delete: list[RemoteLabel] = field(default_factory=list)
