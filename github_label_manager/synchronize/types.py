"""Type hints for the synchronize module."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RemoteLabel(Protocol):
    """Handle on a label that currently exists in the target repository.

    Handles are only ever produced by listing the repository; the synchronization
    core never constructs one.
    """

    @property
    def name(self) -> str:
        """Current name of the label in the repository."""
        ...

    async def update(self, name: str, color: str, description: str | None) -> None:
        """Overwrite the label's name, color and description (None clears the description)."""
        ...

    async def delete(self) -> None:
        """Delete the label from the repository."""
        ...
