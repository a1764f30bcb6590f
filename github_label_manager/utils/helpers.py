"""General utility functions and helper classes."""

from pathlib import PurePosixPath
from typing import Iterable
from urllib.parse import urlsplit

from github_label_manager.utils.constants import HTTP_URL_PATTERN


def split_multiline_input(values: Iterable[str]) -> list[str]:
    """Flatten multi-line input values into a list of non-blank, stripped lines.

    GitHub Actions passes list inputs as a single newline-separated string, while
    the command line may repeat the option. Both forms are accepted and their
    order is preserved.
    """
    lines: list[str] = []
    for value in values:
        for line in value.splitlines():
            line = line.strip()
            if line:
                lines.append(line)
    return lines


def is_http_locator(locator: str) -> bool:
    """Return True if the locator is an HTTP(S) URL (scheme is matched case-insensitively)."""
    return HTTP_URL_PATTERN.match(locator) is not None


def get_locator_extension(locator: str) -> str:
    """Return the lowercased file extension of a label source locator, without the dot.

    For URLs only the path component is considered, so query strings and
    fragments do not affect the result. Returns an empty string when the
    locator has no extension.
    """
    path = urlsplit(locator).path if is_http_locator(locator) else locator
    # Normalise Windows separators so the suffix is taken from the last component.
    suffix = PurePosixPath(path.replace("\\", "/")).suffix
    return suffix[1:].lower()
