"""
Field Validation Package

Field length validation for imported records.

Main Components:
- engine: Per-record and batch validation
- checks: Field enumeration, limit/label resolution, length rules, messages
- models: Constraint metadata and violation data structures
- config: YAML-backed external field limits
- metrics: Prometheus-compatible metrics

Quick Start:
    from dataclasses import dataclass
    from field_validation import length_field, validate_batch_as_messages

    @dataclass
    class UserRow:
        name: str = length_field(30, label="User name")

    errors = validate_batch_as_messages(rows)
"""

from .length_validator import (
    LengthValidator,
    validate_record,
    validate_batch,
    validate_batch_as_messages,
    get_validator,
)
from .models import FieldLength, ColumnHeaders, length_field, FieldViolation, RowViolation
from .engine import FieldLengthEngine
from .config import load_field_limits
from .errors import FieldAccessError, ConfigurationError
from .metrics import get_metrics

__version__ = "1.0.0"

__all__ = [
    "LengthValidator",
    "validate_record",
    "validate_batch",
    "validate_batch_as_messages",
    "get_validator",
    "FieldLength",
    "ColumnHeaders",
    "length_field",
    "FieldViolation",
    "RowViolation",
    "FieldLengthEngine",
    "load_field_limits",
    "FieldAccessError",
    "ConfigurationError",
    "get_metrics",
]
