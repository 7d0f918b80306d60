"""
Prometheus Metrics for Field Length Validation

Exposes validation counters in Prometheus text format.

Metrics Exposed:
- fieldlength_records_total: Records validated
- fieldlength_records_with_violations: Records with at least one violation
- fieldlength_violations_total: Field violations, labelled by field label
- fieldlength_validation_duration_seconds: Per-call validation time
"""

from collections import defaultdict
from typing import Any, Dict, Optional, Sequence, Union
import time

from ..models.violation import FieldViolation, RowViolation


class ValidationMetrics:
    """
    Collects and formats field length validation metrics.

    Usage:
        metrics = ValidationMetrics()
        metrics.record_record(violations, duration_seconds=0.0004)
        print(metrics.export_text())
    """

    def __init__(self):
        """Initialize metrics collectors."""
        self.records_total = 0
        self.records_with_violations = 0
        self.violations_total = 0
        self.violations_by_label: Dict[str, int] = defaultdict(int)

        # Processing time histogram (buckets in seconds)
        self.duration_buckets = [0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0]
        self.duration_counts = defaultdict(int)
        self.duration_sum = 0.0
        self.duration_count = 0

        self.start_time = time.time()

    def record_record(
        self,
        violations: Sequence[Union[FieldViolation, RowViolation]],
        duration_seconds: Optional[float] = None
    ) -> None:
        """
        Record the outcome of validating one record.

        Args:
            violations: Violations found on the record
            duration_seconds: Validation time, if measured
        """
        self.records_total += 1
        if violations:
            self.records_with_violations += 1
        self._count_violations(violations)
        self._observe_duration(duration_seconds)

    def record_batch(
        self,
        record_count: int,
        violations: Sequence[RowViolation],
        duration_seconds: Optional[float] = None
    ) -> None:
        """
        Record the outcome of validating a batch.

        Args:
            record_count: Number of records in the batch
            violations: Row violations found in the batch
            duration_seconds: Validation time for the whole batch, if measured
        """
        self.records_total += record_count
        self.records_with_violations += len({v.row_index for v in violations})
        self._count_violations(violations)
        self._observe_duration(duration_seconds)

    def _count_violations(self, violations: Sequence[Union[FieldViolation, RowViolation]]) -> None:
        for violation in violations:
            self.violations_total += 1
            self.violations_by_label[violation.label] += 1

    def _observe_duration(self, duration_seconds: Optional[float]) -> None:
        if duration_seconds is None:
            return
        self.duration_sum += duration_seconds
        self.duration_count += 1
        for bucket in self.duration_buckets:
            if duration_seconds <= bucket:
                self.duration_counts[bucket] += 1

    def export_text(self) -> str:
        """
        Export metrics in Prometheus text format.

        Returns:
            Metrics formatted as Prometheus text exposition format
        """
        lines = []

        lines.append("# HELP fieldlength_records_total Total number of records validated")
        lines.append("# TYPE fieldlength_records_total counter")
        lines.append(f"fieldlength_records_total {self.records_total}")
        lines.append("")

        lines.append("# HELP fieldlength_records_with_violations Records with at least one violation")
        lines.append("# TYPE fieldlength_records_with_violations counter")
        lines.append(f"fieldlength_records_with_violations {self.records_with_violations}")
        lines.append("")

        lines.append("# HELP fieldlength_violations_total Field length violations by field label")
        lines.append("# TYPE fieldlength_violations_total counter")
        for label, count in sorted(self.violations_by_label.items()):
            escaped = label.replace('\\', '\\\\').replace('"', '\\"')
            lines.append(f'fieldlength_violations_total{{label="{escaped}"}} {count}')
        lines.append("")

        lines.append("# HELP fieldlength_validation_duration_seconds Validation processing time distribution")
        lines.append("# TYPE fieldlength_validation_duration_seconds histogram")
        # duration_counts is already cumulative: each observation lands in every bucket >= it
        for bucket in sorted(self.duration_buckets):
            lines.append(
                f'fieldlength_validation_duration_seconds_bucket{{le="{bucket}"}} {self.duration_counts[bucket]}')
        lines.append(f'fieldlength_validation_duration_seconds_bucket{{le="+Inf"}} {self.duration_count}')
        lines.append(f'fieldlength_validation_duration_seconds_sum {self.duration_sum:.6f}')
        lines.append(f'fieldlength_validation_duration_seconds_count {self.duration_count}')
        lines.append("")

        return "\n".join(lines)

    def export_json(self) -> Dict[str, Any]:
        """Export metrics as a dictionary (for logging/debugging)."""
        violation_rate = (self.records_with_violations /
                          self.records_total) if self.records_total > 0 else 0
        avg_duration = (self.duration_sum /
                        self.duration_count) if self.duration_count > 0 else 0

        return {
            'records_total': self.records_total,
            'records_with_violations': self.records_with_violations,
            'violations_total': self.violations_total,
            'violation_rate': violation_rate,
            'violations_by_label': dict(self.violations_by_label),
            'avg_processing_time_seconds': avg_duration,
            'uptime_seconds': time.time() - self.start_time
        }

    def reset(self) -> None:
        """Reset all metrics (useful for testing)."""
        self.records_total = 0
        self.records_with_violations = 0
        self.violations_total = 0
        self.violations_by_label.clear()
        self.duration_counts.clear()
        self.duration_sum = 0.0
        self.duration_count = 0
        self.start_time = time.time()


# Global metrics instance (singleton pattern)
_global_metrics: Optional[ValidationMetrics] = None


def get_metrics() -> ValidationMetrics:
    """Get global metrics instance (singleton)."""
    global _global_metrics
    if _global_metrics is None:
        _global_metrics = ValidationMetrics()
    return _global_metrics


def reset_metrics() -> None:
    """Reset global metrics instance."""
    global _global_metrics
    if _global_metrics:
        _global_metrics.reset()
