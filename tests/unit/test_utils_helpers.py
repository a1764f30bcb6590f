"""Unit tests for utility helper functions: split_multiline_input, is_http_locator and get_locator_extension."""

import pytest

from github_label_manager.utils.helpers import get_locator_extension, is_http_locator, split_multiline_input


@pytest.mark.parametrize(
    "values,expected",
    [
        (["labels.yaml"], ["labels.yaml"]),
        (["labels.yaml\nlabels.json"], ["labels.yaml", "labels.json"]),
        (["  labels.yaml  \n\n\tlabels.json\n"], ["labels.yaml", "labels.json"]),
        (["a.yml", "b.json\nc.yaml"], ["a.yml", "b.json", "c.yaml"]),
        (["a.yml\r\nb.yml"], ["a.yml", "b.yml"]),
        (["", "   "], []),
        ([], []),
    ],
)
def test_split_multiline_input(values: list[str], expected: list[str]) -> None:
    """Test split_multiline_input with repeated and newline-separated values."""
    assert split_multiline_input(values) == expected


@pytest.mark.parametrize(
    "locator,expected",
    [
        ("http://example.com/labels.yaml", True),
        ("https://example.com/labels.yaml", True),
        ("HTTPS://example.com/labels.yaml", True),
        ("hTtP://example.com/labels.yaml", True),
        ("ftp://example.com/labels.yaml", False),
        ("labels.yaml", False),
        ("./http/labels.yaml", False),
        ("https:/example.com/labels.yaml", False),
    ],
)
def test_is_http_locator(locator: str, expected: bool) -> None:
    """Test is_http_locator with URLs and local paths."""
    assert is_http_locator(locator) is expected


@pytest.mark.parametrize(
    "locator,expected",
    [
        ("labels.yaml", "yaml"),
        ("labels.YML", "yml"),
        ("dir.d/labels.JSON", "json"),
        ("dir.d\\labels.json", "json"),
        ("labels", ""),
        ("dir.yaml/labels", ""),
        ("https://example.com/labels.yml?format=raw#top", "yml"),
        ("https://example.com/labels?file=labels.json", ""),
    ],
)
def test_get_locator_extension(locator: str, expected: str) -> None:
    """Test get_locator_extension for paths and URLs."""
    assert get_locator_extension(locator) == expected
