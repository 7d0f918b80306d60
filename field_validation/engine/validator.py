"""
Field Length Engine

The core orchestrator that, for each record:
1. Enumerates the fields of the record type and its ancestors
2. Resolves each field's limit (declared metadata, then external map)
3. Reads and measures the current value
4. Renders a message for every field over its limit

Batch validation runs the same steps over an ordered collection and tags
every violation with the 1-based row of its record.

The engine keeps no state between calls; one instance can be shared freely.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from ..models.violation import FieldViolation, RowViolation
from ..checks import (
    enumerate_record_fields,
    read_value,
    resolve_limit_match,
    resolve_label,
    calculate_length,
    build_message,
)

logger = logging.getLogger(__name__)


class FieldLengthEngine:
    """
    Validates field lengths of arbitrary records.

    Usage:
        engine = FieldLengthEngine()
        violations = engine.validate_record(user, {"remark": 200})

        for row in engine.validate_batch(users):
            print(row)   # "Row 3 Field [Name] must not exceed ..."
    """

    def __init__(self, dedupe_shadowed: bool = False):
        """
        Initialize the engine.

        Args:
            dedupe_shadowed: Check a field redeclared in a subclass only once
                (most-derived declaration) instead of once per declaring class
        """
        self.dedupe_shadowed = dedupe_shadowed

    def validate_record(
        self,
        record: Any,
        external_limits: Optional[Mapping[str, int]] = None
    ) -> List[FieldViolation]:
        """
        Validate the field lengths of a single record.

        Args:
            record: Object to validate (None yields no violations)
            external_limits: name -> limit mapping; keys may be field names,
                declared labels or export headers

        Returns:
            List of FieldViolation in field enumeration order

        Raises:
            FieldAccessError: If a field value cannot be read
        """
        if record is None:
            return []
        limits = external_limits or {}

        violations = []
        for descriptor in enumerate_record_fields(record, self.dedupe_shadowed):
            match = resolve_limit_match(descriptor, limits)
            if match is None or match.limit <= 0:
                continue

            value = read_value(record, descriptor)
            if value is None:
                continue

            actual = calculate_length(value)
            if actual <= match.limit:
                continue

            label = resolve_label(descriptor, match.key)
            message = build_message(descriptor.constraint, label, match.limit, actual)
            violations.append(FieldViolation(
                field_name=descriptor.name,
                label=label,
                limit=match.limit,
                actual=actual,
                message=message
            ))
            logger.debug(f"Field '{descriptor.name}' of {type(record).__name__} "
                         f"exceeds limit {match.limit} (actual {actual})")

        return violations

    def validate_batch(
        self,
        records: Optional[Iterable[Any]],
        external_limits: Optional[Mapping[str, int]] = None
    ) -> List[RowViolation]:
        """
        Validate every record of a batch.

        Validation is exhaustive: all records are checked, and rows are
        numbered from 1 in iteration order.

        Args:
            records: Ordered records (None or empty yields no violations)
            external_limits: name -> limit mapping applied to every record

        Returns:
            List of RowViolation, grouped by row in input order
        """
        if records is None:
            return []
        limits = external_limits or {}

        results = []
        row_count = 0
        for row_index, record in enumerate(records, start=1):
            row_count = row_index
            for violation in self.validate_record(record, limits):
                results.append(RowViolation(row_index, violation))

        if results:
            logger.info(f"Validated {row_count} records: {len(results)} field length violations")
        return results

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
        """Validate a batch and return the bare messages, without row prefixes."""
        return [row.message for row in self.validate_batch(records, external_limits)]

    def __repr__(self) -> str:
        return f"FieldLengthEngine(dedupe_shadowed={self.dedupe_shadowed})"
