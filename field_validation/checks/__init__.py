"""
Field Validation Checks Package

Building blocks of the length validator:
- fields: Field enumeration across the inheritance chain, value access
- resolver: Limit and label resolution (declared metadata / external map)
- length: Type-aware length calculation
- messages: Violation message rendering
"""

from .fields import FieldDescriptor, enumerate_fields, enumerate_record_fields, read_value
from .resolver import (
    LimitMatch,
    build_candidate_keys,
    resolve_limit,
    resolve_limit_match,
    resolve_label,
)
from .length import calculate_length
from .messages import build_message, DEFAULT_MESSAGE

__all__ = [
    'FieldDescriptor',
    'enumerate_fields',
    'enumerate_record_fields',
    'read_value',
    'LimitMatch',
    'build_candidate_keys',
    'resolve_limit',
    'resolve_limit_match',
    'resolve_label',
    'calculate_length',
    'build_message',
    'DEFAULT_MESSAGE'
]
