"""Contains results of application execution."""

from dataclasses import dataclass, field


@dataclass
class LabelSyncResult:
    """Names of the labels touched by a synchronization run, in execution order."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    skip_delete: bool = False
