"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients, limited to the label operations used by synchronization."""

    # Connection
    @abstractmethod
    async def validate_connection(self) -> None:
        """Fail fast if the API endpoint, credentials or repository cannot be reached."""
        pass

    # Label CRUD
    @abstractmethod
    async def list_labels(self, **kwargs: Any) -> list[Any]:
        """List all labels for a repository."""
        pass

    @abstractmethod
    async def create_label(self, name: str, color: str, description: str | None = None, **kwargs: Any) -> Any:
        """Create a label for a repository."""
        pass

    @abstractmethod
    async def update_label(
        self,
        name: str,
        new_name: str,
        color: str,
        description: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Overwrite a label's name, color and description."""
        pass

    @abstractmethod
    async def delete_label(self, name: str) -> Any:
        """Delete a label for a repository."""
        pass
