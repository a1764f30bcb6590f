"""Loads desired label definitions from local or remote JSON/YAML sources.

Sources are processed in the order given. Labels are keyed by their
case-insensitive name, and a later definition (from a later source, or later in
the same source) replaces an earlier one.
"""

import io
from contextlib import contextmanager
from enum import Enum
from typing import IO, Any, Iterator, Sequence

import requests
import structlog
from pydantic import ValidationError
from ruamel.yaml.error import YAMLError

from github_label_manager.schemas.labels import LabelListAdapter, LabelModel
from github_label_manager.synchronize.exceptions import (
    InvalidArgumentError,
    LabelSourceParseError,
    MissingRequiredFieldError,
    SourceUnavailableError,
    UnsupportedFormatError,
)
from github_label_manager.synchronize.models import DesiredLabels
from github_label_manager.utils.constants import JSON_EXTENSIONS, SOURCE_FETCH_TIMEOUT, YAML_EXTENSIONS
from github_label_manager.utils.helpers import get_locator_extension, is_http_locator
from github_label_manager.utils.yaml import YAML_NULL_SCALARS, load_yaml_stream

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SourceFormat(Enum):
    """Serialization format of a label source."""

    YAML = "yaml"
    JSON = "json"


def detect_source_format(locator: str) -> SourceFormat:
    """Determine the source format from the locator's extension (case-insensitive)."""
    extension = get_locator_extension(locator)
    if extension in YAML_EXTENSIONS:
        return SourceFormat.YAML
    if extension in JSON_EXTENSIONS:
        return SourceFormat.JSON
    raise UnsupportedFormatError(locator)


@contextmanager
def open_label_source(locator: str) -> Iterator[IO[bytes]]:
    """Open a binary read stream on a label source, released when the context exits.

    HTTP(S) URLs are fetched with requests; anything else is a local file path.
    """
    if is_http_locator(locator):
        try:
            response = requests.get(locator, timeout=SOURCE_FETCH_TIMEOUT)
        except requests.RequestException as e:
            raise SourceUnavailableError(locator, str(e)) from e
        with response:
            try:
                response.raise_for_status()
                content = response.content
            except requests.RequestException as e:
                raise SourceUnavailableError(locator, str(e)) from e
            with io.BytesIO(content) as stream:
                yield stream
        return

    try:
        stream = open(locator, "rb")
    except OSError as e:
        raise SourceUnavailableError(locator, e.strerror or str(e)) from e
    with stream:
        yield stream


def restore_yaml_nulls(data: Any) -> Any:
    """Turn null scalars in label records back into None.

    Record values are read as text, so an empty `description:` arrives as an
    empty string and `description: ~` as "~"; both mean the field is unset.
    """
    if not isinstance(data, list):
        return data
    return [
        {key: None if isinstance(value, str) and value in YAML_NULL_SCALARS else value for key, value in record.items()} if isinstance(record, dict) else record
        for record in data
    ]


def parse_label_source(locator: str, stream: IO[bytes], source_format: SourceFormat) -> list[LabelModel]:
    """Parse and validate a list of label records from an open stream."""
    try:
        if source_format is SourceFormat.YAML:
            data = load_yaml_stream(stream)
            # An empty YAML document defines no labels.
            return LabelListAdapter.validate_python([] if data is None else restore_yaml_nulls(data))
        return LabelListAdapter.validate_json(stream.read())
    except YAMLError as e:
        raise LabelSourceParseError(locator, str(e)) from e
    except ValidationError as e:
        errors = e.errors(include_url=False)
        if any(error["type"] == "json_invalid" for error in errors):
            raise LabelSourceParseError(locator, str(errors[0]["msg"])) from e
        raise MissingRequiredFieldError(locator, errors) from e


def load_label_source(locator: str) -> list[LabelModel]:
    """Fetch and parse a single label source."""
    source_format = detect_source_format(locator)
    with open_label_source(locator) as stream:
        return parse_label_source(locator, stream, source_format)


def load_desired_labels(locators: Sequence[str] | None) -> DesiredLabels:
    """Merge every label source into a single case-insensitive desired-state mapping."""
    if locators is None:
        raise InvalidArgumentError("locators")

    desired_labels: DesiredLabels = {}
    for locator in locators:
        logger.info("Processing label source", source=locator)
        labels = load_label_source(locator)
        for label in labels:
            desired_labels[label.key] = label
        logger.info("Fetched labels from source", source=locator, label_count=len(labels))
    return desired_labels
