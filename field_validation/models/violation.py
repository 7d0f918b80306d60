"""
Length Violation Data Models

Defines the data structures returned by the field length validator.

Design Philosophy:
- Immutable (dataclasses with frozen=True)
- Self-documenting (the rendered message travels with the numbers)
- Serializable (to_dict for JSON output)
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class FieldViolation:
    """
    A single field whose measured length exceeds its limit.

    Attributes:
        field_name: Attribute name on the record
        label: Human-readable name used in the message
        limit: Resolved maximum length
        actual: Measured length of the current value
        message: Rendered error message
    """
    field_name: str
    label: str
    limit: int
    actual: int
    message: str

    @property
    def excess(self) -> int:
        """How many units the value is over its limit."""
        return self.actual - self.limit

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'field_name': self.field_name,
            'label': self.label,
            'limit': self.limit,
            'actual': self.actual,
            'message': self.message
        }

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class RowViolation:
    """
    A FieldViolation tagged with the 1-based position of its record in a batch.
    """
    row_index: int
    violation: FieldViolation

    @property
    def field_name(self) -> str:
        return self.violation.field_name

    @property
    def label(self) -> str:
        return self.violation.label

    @property
    def limit(self) -> int:
        return self.violation.limit

    @property
    def actual(self) -> int:
        return self.violation.actual

    @property
    def message(self) -> str:
        return self.violation.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {'row_index': self.row_index, **self.violation.to_dict()}

    def __str__(self) -> str:
        """Display form: 'Row <n> <message>'."""
        return f"Row {self.row_index} {self.violation.message}"
