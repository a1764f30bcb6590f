"""Fixtures for unit tests."""

from pathlib import Path
from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

LABEL_FIXTURES_DIR = Path(__file__).parent / "fixtures" / "labels"


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


class FakeRemoteLabel:
    """In-memory stand-in for a label handle listed from a repository."""

    def __init__(self, name: str) -> None:
        self._name = name
        self.update = AsyncMock()
        self.delete = AsyncMock()

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"FakeRemoteLabel({self._name!r})"


@pytest.fixture
def remote_label() -> Callable[[str], FakeRemoteLabel]:
    """Factory for fake remote label handles."""
    return FakeRemoteLabel


@pytest.fixture
def remote_labels() -> Callable[..., dict[str, FakeRemoteLabel]]:
    """Factory for remote label mappings keyed by case-insensitive name."""

    def _remote_labels(*names: str) -> dict[str, FakeRemoteLabel]:
        return {name.casefold(): FakeRemoteLabel(name) for name in names}

    return _remote_labels


@pytest.fixture
def github_label() -> Callable[[str], MagicMock]:
    """Factory for objects shaped like githubkit Label models."""

    def _github_label(name: str) -> MagicMock:
        label = MagicMock()
        label.name = name
        return label

    return _github_label


@pytest.fixture
def label_fixtures_dir() -> Path:
    """Directory holding labels.yaml, labels.yml and labels.json."""
    return LABEL_FIXTURES_DIR
