"""Contains utility functions for working with YAML label sources."""

from typing import IO, Any

from ruamel.yaml import YAML

# The base loader resolves every scalar to a string, so hex colors such as
# 000000 or 1e4567 keep their text instead of becoming numbers.
yaml = YAML(typ="base")

YAML_NULL_SCALARS = frozenset({"", "~", "null", "Null", "NULL"})
"""Scalars that YAML resolves to null; the base loader leaves them as strings."""


def load_yaml_stream(stream: IO[str] | IO[bytes]) -> Any:
    """Load a single YAML document from an open stream, keeping scalars as text.

    An empty document is returned as None; callers decide how to treat it.
    """
    return yaml.load(stream)
