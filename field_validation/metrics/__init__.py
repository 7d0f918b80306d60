"""
Metrics Package

Handles observability and monitoring.
"""

from .prometheus import (
    ValidationMetrics,
    get_metrics,
    reset_metrics
)

__all__ = [
    'ValidationMetrics',
    'get_metrics',
    'reset_metrics'
]
