"""Custom exceptions raised while synchronizing GitHub labels."""

from typing import Any


class LabelSyncError(Exception):
    """Base class for every error raised by the label synchronization pipeline."""


class InvalidArgumentError(LabelSyncError, ValueError):
    """Raised when a required collection or parameter is unset."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required argument '{name}' must not be None.")
        self.name = name


class UnsupportedFormatError(LabelSyncError):
    """Raised when a label source is neither YAML (.yaml/.yml) nor JSON (.json)."""

    def __init__(self, locator: str) -> None:
        super().__init__(f"Unsupported label source format (expected .yaml, .yml or .json): {locator}")
        self.locator = locator


class SourceUnavailableError(LabelSyncError):
    """Raised when a label source file does not exist or a URL cannot be opened."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(f"Label source '{locator}' is unavailable: {reason}")
        self.locator = locator
        self.reason = reason


class LabelSourceParseError(LabelSyncError):
    """Raised when a label source is not syntactically valid JSON or YAML."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(f"Failed to parse label source '{locator}': {reason}")
        self.locator = locator
        self.reason = reason


class MissingRequiredFieldError(LabelSyncError):
    """Raised when a label record lacks a name or color (or the document is not a list of records)."""

    def __init__(self, locator: str, errors: list[dict[str, Any]]) -> None:
        details = "; ".join(f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in errors)
        super().__init__(f"Invalid label record(s) in '{locator}': {details}")
        self.locator = locator
        self.errors = errors


class GitHubConnectionError(LabelSyncError):
    """Raised when the GitHub API endpoint or credentials could not be validated."""


class RemoteOperationError(LabelSyncError):
    """Raised when a list/create/update/delete call against the GitHub API fails."""

    def __init__(self, operation: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"GitHub {operation} failed: {message}")
        self.operation = operation
        self.status_code = status_code


class LabelSynchronizationError(LabelSyncError):
    """Terminal failure of a synchronization run; the triggering error is chained as its cause."""
