"""
Field Length Validation Module

Main entry point for field length validation.

This module ties together:
1. External limit configuration (mapping or YAML file)
2. The validation engine
3. Optional metrics

Usage:
    from field_validation import validate_record, validate_batch_as_messages

    errors = validate_batch_as_messages(rows, {"remark": 200})
    if errors:
        # Report back to the uploader
        pass
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .config import load_field_limits
from .engine import FieldLengthEngine
from .metrics import get_metrics
from .models import FieldViolation, RowViolation

logger = logging.getLogger(__name__)


class LengthValidator:
    """
    High-level API for field length validation.

    Integrates configured limits, the engine and metrics.
    """

    def __init__(
        self,
        field_limits: Optional[Mapping[str, int]] = None,
        limits_path: Optional[Union[str, Path]] = None,
        enable_metrics: bool = False,
        dedupe_shadowed: bool = False
    ):
        """
        Initialize length validator.

        Args:
            field_limits: Default external limits (name -> limit)
            limits_path: YAML file with more default limits; entries in
                field_limits take precedence over the file
            enable_metrics: Whether to record into the global metrics collector
            dedupe_shadowed: Check redeclared fields only once
        """
        limits: Dict[str, int] = {}
        if limits_path is not None:
            limits.update(load_field_limits(limits_path))
        if field_limits:
            limits.update(field_limits)
        self.field_limits = limits

        self.engine = FieldLengthEngine(dedupe_shadowed=dedupe_shadowed)

        self.enable_metrics = enable_metrics
        self.metrics = get_metrics() if enable_metrics else None

    def _limits_for(self, external_limits: Optional[Mapping[str, int]]) -> Mapping[str, int]:
        # A per-call mapping replaces the configured defaults
        return self.field_limits if external_limits is None else external_limits

    def validate(
        self,
        record: Any,
        external_limits: Optional[Mapping[str, int]] = None
    ) -> List[FieldViolation]:
        """
        Validate a single record.

        Args:
            record: Object to validate
            external_limits: Limits for this call (defaults to configured limits)

        Returns:
            List of FieldViolation
        """
        start_time = time.time()
        violations = self.engine.validate_record(record, self._limits_for(external_limits))

        if self.enable_metrics and self.metrics and record is not None:
            self.metrics.record_record(violations, time.time() - start_time)

        return violations

    def validate_batch(
        self,
        records: Optional[Iterable[Any]],
        external_limits: Optional[Mapping[str, int]] = None
    ) -> List[RowViolation]:
        """
        Validate a batch of records.

        Args:
            records: Ordered records
            external_limits: Limits for this call (defaults to configured limits)

        Returns:
            List of RowViolation
        """
        if records is None:
            return []
        records = list(records)

        start_time = time.time()
        violations = self.engine.validate_batch(records, self._limits_for(external_limits))

        if self.enable_metrics and self.metrics:
            self.metrics.record_batch(len(records), violations, time.time() - start_time)

        return violations

    def validate_batch_as_messages(
        self,
        records: Optional[Iterable[Any]],
        external_limits: Optional[Mapping[str, int]] = None
    ) -> List[str]:
        """Validate a batch and render each violation as 'Row <n> <message>'."""
        return [str(row) for row in self.validate_batch(records, external_limits)]

    def validate_batch_flat(
        self,
        records: Optional[Iterable[Any]],
        external_limits: Optional[Mapping[str, int]] = None
    ) -> List[str]:
        """Validate a batch and return the bare violation messages."""
        return [row.message for row in self.validate_batch(records, external_limits)]

    def has_violations(
        self,
        record: Any,
        external_limits: Optional[Mapping[str, int]] = None
    ) -> bool:
        """True if the record has at least one field over its limit."""
        return bool(self.validate(record, external_limits))


# Convenience functions for direct usage

_default_validator: Optional[LengthValidator] = None


def get_validator() -> LengthValidator:
    """Get default validator instance (singleton, no limits, no metrics)."""
    global _default_validator
    if _default_validator is None:
        _default_validator = LengthValidator()
    return _default_validator


def validate_record(
    record: Any,
    external_limits: Optional[Mapping[str, int]] = None
) -> List[FieldViolation]:
    """
    Validate a single record using the default validator.

    Args:
        record: Object to validate
        external_limits: name -> limit mapping

    Returns:
        List of FieldViolation
    """
    return get_validator().validate(record, external_limits)


def validate_batch(
    records: Optional[Iterable[Any]],
    external_limits: Optional[Mapping[str, int]] = None
) -> List[RowViolation]:
    """
    Validate a batch of records using the default validator.

    Args:
        records: Ordered records
        external_limits: name -> limit mapping

    Returns:
        List of RowViolation
    """
    return get_validator().validate_batch(records, external_limits)


def validate_batch_as_messages(
    records: Optional[Iterable[Any]],
    external_limits: Optional[Mapping[str, int]] = None
) -> List[str]:
    """Validate a batch using the default validator, as 'Row <n> <message>' strings."""
    return get_validator().validate_batch_as_messages(records, external_limits)
