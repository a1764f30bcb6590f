"""Contains utility functions for GitHub interactions."""

from typing import NamedTuple


class RepositoryRef(NamedTuple):
    """Owner and name of a GitHub repository."""

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


def split_repository(repo: str | None) -> RepositoryRef:
    """Split an 'owner/repo' identifier (as found in GITHUB_REPOSITORY) into its parts."""
    if repo is None:
        raise ValueError("A target repository is required - set --repo or GITHUB_REPOSITORY.")
    parts = repo.strip("/").split("/")
    if len(parts) != 2 or not all(part.strip() for part in parts):
        raise ValueError(f"Repository must be in the format 'owner/repo' with no extra parts, got '{repo}'.")
    return RepositoryRef(owner=parts[0], name=parts[1])
