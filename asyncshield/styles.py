"""
asyncshield.styles - Return Styles

The closed set of output shapes an async handler can produce.

Example:
    >>> from asyncshield.styles import ReturnStyle
    >>> ReturnStyle("goStyle") is ReturnStyle.GO_STYLE
    True
"""

from enum import Enum
from types import MappingProxyType
from typing import Any


class ReturnStyle(str, Enum):
    """Output shape selected once when an async handler is built."""

    FALSE_STYLE = "false-style"
    TRUE_STYLE = "true-style"
    GO_STYLE = "goStyle"
    ERROR_STYLE = "errorStyle"
    ONLY_ERROR = "only-error"
    BOOLEAN = "boolean"


# Member name -> wire value, e.g. RETURN_STYLES["GO_STYLE"] == "goStyle"
RETURN_STYLES = MappingProxyType({style.name: style.value for style in ReturnStyle})


def coerce_return_style(value: Any) -> ReturnStyle | str:
    """Return the ReturnStyle for a recognised value, else the value as a string.

    Unrecognised styles are kept rather than rejected: they select the
    fallback arm of the handler (return the default handler's value, or
    re-raise after a conditional handler matched). None selects the
    default, GO_STYLE.
    """
    if value is None:
        return ReturnStyle.GO_STYLE
    try:
        return ReturnStyle(value)
    except ValueError:
        return str(value)


__all__ = ["RETURN_STYLES", "ReturnStyle", "coerce_return_style"]
