"""
Field Validation Errors

Exceptions raised when the validator itself is misconfigured.

Length violations are never raised: they are returned as data
(FieldViolation / RowViolation). Only setup problems that the caller
has to fix surface as exceptions.
"""

from typing import Optional


class FieldAccessError(RuntimeError):
    """
    A field could not be read from a record.

    Raised when attribute access fails for a field that the enumerator
    reported (missing attribute, failing property, restricted descriptor).
    The original exception is chained as __cause__.

    Attributes:
        field_name: Name of the unreadable field
        record_type: Type of the record being validated
    """

    def __init__(self, field_name: str, record_type: type, reason: Optional[str] = None):
        self.field_name = field_name
        self.record_type = record_type
        message = f"Cannot read field '{field_name}' of {record_type.__name__} for validation"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ConfigurationError(ValueError):
    """Invalid external field limit configuration."""
