"""
Field Validation Engine Package

Orchestrates per-record and batch length validation.
"""

from .validator import FieldLengthEngine

__all__ = ["FieldLengthEngine"]
