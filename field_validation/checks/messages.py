"""
Violation Message Synthesis
"""

from typing import Optional

from ..models.constraints import FieldLength

DEFAULT_MESSAGE = "Field [{label}] must not exceed {limit} characters, current length is {actual}"


def build_message(constraint: Optional[FieldLength], label: str, limit: int, actual: int) -> str:
    """
    Render the message for a length violation.

    A declared template is applied with printf-style formatting to
    (label, limit, actual). Template errors are not caught: a template
    with the wrong placeholders raises whatever the % operator raises.
    """
    if constraint is not None and constraint.has_message:
        return constraint.message % (label, limit, actual)
    return DEFAULT_MESSAGE.format(label=label, limit=limit, actual=actual)
