"""Pydantic schema for the label definitions read from JSON or YAML sources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


def label_key(name: str) -> str:
    """Return the case-insensitive identity of a label name.

    Every container and comparison in the synchronization pipeline goes through
    this function, so two names differing only by case always refer to the same
    label. Unicode case folding is locale independent.
    """
    return name.casefold()


class LabelModel(BaseModel):
    """Pydantic model for a desired GitHub label.

    Identity, hashing and ordering use the case-insensitive name only; color and
    description are carried along for create and update calls.
    """

    # JSON sources may give colors as bare numbers (e.g. 123456).
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    name: str = Field(min_length=1)
    color: str = Field(min_length=1)
    description: str | None = None

    @property
    def key(self) -> str:
        return label_key(self.name)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LabelModel):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, LabelModel):
            return NotImplemented
        return self.key < other.key


LabelListAdapter: TypeAdapter[list[LabelModel]] = TypeAdapter(list[LabelModel])
"""Validates a label source document: a list of label records."""
