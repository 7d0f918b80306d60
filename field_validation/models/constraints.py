"""
Field Constraint Metadata

Declarative per-field metadata read by the length validator.

Records declare their limits on dataclass fields:

    @dataclass
    class UserImport:
        name: str = length_field(30, label="User name")
        remark: str = length_field(headers=("Remark", "Notes"))

FieldLength carries the declared limit, ColumnHeaders carries the export
aliases (the column headers a spreadsheet export would use). Both live in
the dataclass field metadata under their own keys so either can be
declared without the other.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

FIELD_LENGTH_KEY = "field_length"
COLUMN_HEADERS_KEY = "column_headers"


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty or whitespace-only strings."""
    return text is None or not text.strip()


@dataclass(frozen=True)
class FieldLength:
    """
    Maximum permitted length of one field.

    Attributes:
        max_length: Limit; only values > 0 are active
        label: Human-readable field name used in messages
        message: printf-style template taking (label, limit, actual)
    """
    max_length: int = 0
    label: Optional[str] = None
    message: Optional[str] = None

    @property
    def active(self) -> bool:
        return self.max_length > 0

    @property
    def has_label(self) -> bool:
        return not is_blank(self.label)

    @property
    def has_message(self) -> bool:
        return not is_blank(self.message)


@dataclass(frozen=True)
class ColumnHeaders:
    """Alternate header names a field is exported under."""
    headers: Tuple[str, ...] = ()

    def __post_init__(self):
        # A single header may be given as a plain string
        headers = (self.headers,) if isinstance(self.headers, str) else tuple(self.headers)
        object.__setattr__(self, "headers", headers)

    @property
    def usable(self) -> Tuple[str, ...]:
        """Headers that are not blank, in declaration order."""
        return tuple(h for h in self.headers if not is_blank(h))


def length_field(
    max_length: int = 0,
    *,
    label: Optional[str] = None,
    message: Optional[str] = None,
    headers: Optional[Union[str, Tuple[str, ...]]] = None,
    **field_kwargs: Any
) -> Any:
    """
    Declare a dataclass field with length metadata.

    Args:
        max_length: Declared limit (0 leaves the limit to external config)
        label: Human-readable name for messages
        message: Custom message template, e.g. "Field: %s, Limit: %d, Actual: %d"
        headers: Export column headers, also used as config lookup keys
        **field_kwargs: Passed through to dataclasses.field (default, repr, ...)

    Returns:
        A dataclasses.Field carrying the metadata
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    if max_length or label or message:
        metadata[FIELD_LENGTH_KEY] = FieldLength(max_length, label, message)
    if headers:
        metadata[COLUMN_HEADERS_KEY] = ColumnHeaders(headers)
    if "default" not in field_kwargs and "default_factory" not in field_kwargs:
        field_kwargs["default"] = None
    return dataclasses.field(metadata=metadata, **field_kwargs)
