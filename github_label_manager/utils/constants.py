"""Shared constants used across the application."""

import re

# GitHub Constants
# ----------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""Default GitHub API URL (override for GitHub Enterprise Server)."""

GITHUB_LABELS_PAGE_SIZE = 100
"""Maximum page size accepted by the list-labels endpoint."""

# Label Source Constants
# ----------------------

HTTP_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
"""Pattern to match label sources that must be fetched over HTTP(S)."""

YAML_EXTENSIONS = frozenset({"yaml", "yml"})
"""File extensions parsed as YAML label sources."""

JSON_EXTENSIONS = frozenset({"json"})
"""File extensions parsed as JSON label sources."""

SOURCE_FETCH_TIMEOUT = 30.0
"""Timeout in seconds when fetching a label source over HTTP(S)."""
