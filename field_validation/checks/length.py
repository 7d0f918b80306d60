"""
Length Calculation

Measures the "length" of a field value. What length means depends on the
value's type; the rules are tried in a fixed order and the first one that
applies wins:

1. str              -> number of characters
2. numbers          -> characters of the decimal string form (str(value))
3. fixed arrays     -> element count (tuple, bytes, bytearray, memoryview, array)
4. collections      -> element count (list, set, deque, other sized iterables)
5. mappings         -> entry count
6. anything else    -> characters of str(value)
"""

import array
import numbers
from collections.abc import Collection, Mapping
from typing import Any

FIXED_ARRAY_TYPES = (tuple, bytes, bytearray, memoryview, array.array)


def calculate_length(value: Any) -> int:
    """
    Calculate the length of a non-None field value.

    Examples:
        >>> calculate_length("abcd")
        4
        >>> calculate_length(-1234)
        5
        >>> calculate_length({"a": 1})
        1
    """
    if isinstance(value, str):
        return len(value)

    if isinstance(value, numbers.Number):
        return len(str(value))

    if isinstance(value, FIXED_ARRAY_TYPES):
        return len(value)

    if isinstance(value, Collection) and not isinstance(value, Mapping):
        return len(value)

    if isinstance(value, Mapping):
        return len(value)

    return len(str(value))
