"""Reads the labels currently defined in the target repository."""

import structlog
from githubkit.versions.latest.models import Label

from github_label_manager.github.abc import GitHubClientBase
from github_label_manager.schemas.labels import label_key
from github_label_manager.synchronize.models import RemoteLabels

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GitHubLabelHandle:
    """Remote label handle backed by a githubkit Label and the adapter that listed it."""

    def __init__(self, github_client: GitHubClientBase, github_label: Label) -> None:
        self.github_client = github_client
        self.github_label = github_label

    @property
    def name(self) -> str:
        return self.github_label.name

    async def update(self, name: str, color: str, description: str | None) -> None:
        await self.github_client.update_label(self.name, new_name=name, color=color, description=description)

    async def delete(self) -> None:
        await self.github_client.delete_label(self.name)

    def __repr__(self) -> str:
        return f"GitHubLabelHandle(name={self.name!r})"


async def read_remote_labels(github_client: GitHubClientBase) -> RemoteLabels:
    """List the repository's labels, keyed by case-insensitive name.

    Should the API ever report two names that collide case-insensitively, the
    later one in the listing wins. API errors propagate unchanged.
    """
    remote_labels: RemoteLabels = {}
    for github_label in await github_client.list_labels():
        remote_labels[label_key(github_label.name)] = GitHubLabelHandle(github_client, github_label)
    logger.info("Fetched labels from repository", label_count=len(remote_labels))
    return remote_labels
