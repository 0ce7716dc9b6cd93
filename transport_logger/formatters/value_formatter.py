"""
Value formatter

Turns the positional arguments of a log call into the message body.
"""

import pprint
from typing import Any, Iterable

PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def format_value(value: Any, width: int = 80) -> str:
    """
    Render a single value for a log line.

    Primitives are rendered with ``str()``. Anything else is rendered with
    :func:`pprint.pformat`, a debug-oriented inspection rather than JSON.
    Never raises: if inspection fails the default object representation is
    used.

    Args:
        value: Value to render
        width: Line width handed to pprint

    Returns:
        Text representation of value
    """
    if isinstance(value, PRIMITIVE_TYPES):
        try:
            return str(value)
        except Exception:
            return object.__repr__(value)

    try:
        return pprint.pformat(value, width=width)
    except Exception:
        return object.__repr__(value)


def format_values(values: Iterable[Any], separator: str = " ") -> str:
    """
    Render every value and join them in call order.

    Example:
        >>> format_values(["Some info message", "with", 4, "arguments"])
        'Some info message with 4 arguments'
    """
    return separator.join(format_value(value) for value in values)
