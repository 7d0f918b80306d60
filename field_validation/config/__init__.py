"""
Field Validation Config Module

YAML-backed external field limit configuration.
"""

from .loader import (
    FieldLimitsConfig,
    parse_field_limits,
    load_field_limits,
    load_field_limits_from_env,
    FIELD_LIMITS_PATH_ENV,
)

__all__ = [
    "FieldLimitsConfig",
    "parse_field_limits",
    "load_field_limits",
    "load_field_limits_from_env",
    "FIELD_LIMITS_PATH_ENV",
]
