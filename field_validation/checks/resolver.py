"""
Limit and Label Resolution

Decides which maximum length applies to a field and which name the field
goes by in messages.

Limit precedence:
1. An active FieldLength declared on the field always wins.
2. Otherwise the external limit map is searched with the field's
   candidate keys: field name, declared label, then export headers.
"""

from dataclasses import dataclass
from typing import List, Mapping, Optional

from ..models.constraints import is_blank
from .fields import FieldDescriptor


@dataclass(frozen=True)
class LimitMatch:
    """A resolved limit and the external key that supplied it (None if declared)."""
    limit: int
    key: Optional[str] = None


def build_candidate_keys(descriptor: FieldDescriptor) -> List[str]:
    """
    Keys tried against the external limit map, in priority order.

    Duplicates are dropped, keeping the first occurrence.
    """
    candidates = [descriptor.name]

    constraint = descriptor.constraint
    if constraint is not None and constraint.has_label:
        candidates.append(constraint.label)

    for header in descriptor.headers:
        if not is_blank(header):
            candidates.append(header)

    return list(dict.fromkeys(candidates))


def resolve_limit_match(
    descriptor: FieldDescriptor,
    external_limits: Optional[Mapping[str, int]] = None
) -> Optional[LimitMatch]:
    """
    Resolve the limit for a field, remembering where it came from.

    Args:
        descriptor: Field to resolve
        external_limits: Caller-supplied name -> limit mapping

    Returns:
        LimitMatch, or None if the field has no usable limit
    """
    constraint = descriptor.constraint
    if constraint is not None and constraint.active:
        return LimitMatch(constraint.max_length)

    if not external_limits:
        return None

    for key in build_candidate_keys(descriptor):
        limit = external_limits.get(key)
        if limit is not None and limit > 0:
            return LimitMatch(limit, key)

    return None


def resolve_limit(
    descriptor: FieldDescriptor,
    external_limits: Optional[Mapping[str, int]] = None
) -> Optional[int]:
    """Resolve the limit for a field, or None if nothing applies."""
    match = resolve_limit_match(descriptor, external_limits)
    return match.limit if match else None


def resolve_label(descriptor: FieldDescriptor, matched_key: Optional[str] = None) -> str:
    """
    Human-readable name for a field.

    Preference: declared label, then the export header the external limit
    was found under, then the first export header, then the field name.
    """
    constraint = descriptor.constraint
    if constraint is not None and constraint.has_label:
        return constraint.label

    if matched_key is not None and matched_key in descriptor.headers:
        return matched_key

    for header in descriptor.headers:
        if not is_blank(header):
            return header

    return descriptor.name
