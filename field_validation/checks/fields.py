"""
Field Enumeration

Lists the instance fields of a record type and reads their values.

A field is an annotated attribute declared in a class body. The whole
inheritance chain is walked, most-derived class first, so fields declared
on base classes are validated too. ClassVar and InitVar annotations are
not instance fields and are skipped.

Records built without annotations (plain classes, SimpleNamespace) still
have fields: their assigned slots and instance attributes are listed after
the annotated ones.
"""

import dataclasses
import inspect
import logging
from dataclasses import dataclass
from typing import Any, ClassVar, List, Optional, Tuple, get_origin

from ..errors import FieldAccessError
from ..models.constraints import (
    FieldLength,
    ColumnHeaders,
    FIELD_LENGTH_KEY,
    COLUMN_HEADERS_KEY,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One declared field together with its length metadata.

    Attributes:
        name: Attribute name
        declaring_type: Class whose body declares the field
        constraint: Declared FieldLength, if any
        headers: Non-blank export column headers, in declaration order
    """
    name: str
    declaring_type: type
    constraint: Optional[FieldLength] = None
    headers: Tuple[str, ...] = ()


def _is_static(annotation: Any) -> bool:
    """True for ClassVar / InitVar annotations, including string forms."""
    if isinstance(annotation, str):
        head = annotation.split('[', 1)[0].strip()
        return head.rsplit('.', 1)[-1] in ('ClassVar', 'InitVar')
    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return True
    return isinstance(annotation, dataclasses.InitVar) or annotation is dataclasses.InitVar


def _own_fields(cls: type) -> List[FieldDescriptor]:
    """Fields declared directly in cls, in declaration order."""
    annotations = inspect.get_annotations(cls)
    dataclass_fields = cls.__dict__.get('__dataclass_fields__', {})

    descriptors = []
    for name, annotation in annotations.items():
        if _is_static(annotation):
            continue

        constraint = None
        headers: Tuple[str, ...] = ()
        definition = dataclass_fields.get(name)
        if definition is not None:
            constraint = definition.metadata.get(FIELD_LENGTH_KEY)
            column_headers = definition.metadata.get(COLUMN_HEADERS_KEY)
            if isinstance(column_headers, ColumnHeaders):
                headers = column_headers.usable

        descriptors.append(FieldDescriptor(
            name=name,
            declaring_type=cls,
            constraint=constraint,
            headers=headers
        ))
    return descriptors


def enumerate_fields(record_type: type, dedupe_shadowed: bool = False) -> List[FieldDescriptor]:
    """
    List every instance field of record_type and its ancestors.

    Classes are visited in MRO order (most-derived first, object excluded);
    fields within a class keep declaration order.

    Args:
        record_type: The record's runtime type
        dedupe_shadowed: When False (default) a field redeclared in a
            subclass is listed once per declaring class. When True only
            the most-derived declaration is kept.

    Returns:
        Ordered list of FieldDescriptor
    """
    fields = []
    seen = set()

    for cls in record_type.__mro__:
        if cls is object:
            continue
        for descriptor in _own_fields(cls):
            if dedupe_shadowed:
                if descriptor.name in seen:
                    continue
                seen.add(descriptor.name)
            fields.append(descriptor)

    return fields


def _slot_names(cls: type) -> List[str]:
    slots = cls.__dict__.get('__slots__', ())
    if isinstance(slots, str):
        slots = (slots,)
    return [name for name in slots if name not in ('__dict__', '__weakref__')]


def enumerate_record_fields(record: Any, dedupe_shadowed: bool = False) -> List[FieldDescriptor]:
    """
    List the fields of a record instance.

    Annotated fields come first (see enumerate_fields), followed by
    attributes that are not annotated anywhere: assigned __slots__ in MRO
    order, then the instance __dict__ in insertion order. Unannotated
    attributes carry no metadata, so only the external limit map can
    apply to them.

    Args:
        record: The record being validated
        dedupe_shadowed: Passed through to enumerate_fields

    Returns:
        Ordered list of FieldDescriptor
    """
    record_type = type(record)
    fields = enumerate_fields(record_type, dedupe_shadowed)
    seen = {descriptor.name for descriptor in fields}

    for cls in record_type.__mro__:
        if cls is object:
            continue
        for name in _slot_names(cls):
            # An unset slot has no value to measure
            if name in seen or not hasattr(record, name):
                continue
            seen.add(name)
            fields.append(FieldDescriptor(name=name, declaring_type=cls))

    for name in getattr(record, '__dict__', {}):
        if name in seen or (name.startswith('__') and name.endswith('__')):
            continue
        seen.add(name)
        fields.append(FieldDescriptor(name=name, declaring_type=record_type))

    return fields


def read_value(record: Any, descriptor: FieldDescriptor) -> Any:
    """
    Read the current value of a field.

    Raises:
        FieldAccessError: If the attribute cannot be read
    """
    try:
        return getattr(record, descriptor.name)
    except Exception as e:
        logger.error(f"Failed to read field '{descriptor.name}' of {type(record).__name__}: {e}")
        raise FieldAccessError(descriptor.name, type(record), str(e)) from e
