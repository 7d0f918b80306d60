"""
Field Validation Models Module

Defines constraint metadata and violation data structures.
"""

from .constraints import (
    FieldLength,
    ColumnHeaders,
    length_field,
    is_blank,
    FIELD_LENGTH_KEY,
    COLUMN_HEADERS_KEY,
)
from .violation import FieldViolation, RowViolation

__all__ = [
    "FieldLength",
    "ColumnHeaders",
    "length_field",
    "is_blank",
    "FIELD_LENGTH_KEY",
    "COLUMN_HEADERS_KEY",
    "FieldViolation",
    "RowViolation",
]
