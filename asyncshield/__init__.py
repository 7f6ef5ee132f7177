"""
asyncshield - Shape the outcome of an awaited operation

Wrap an awaitable once and get back a fixed return shape instead of an
exception: a Go-style (error, data) pair, a boolean, a 0/1 code, the value
with a shielding sentinel, or the error itself. Failures can first run a
first-match-wins chain of conditional handlers.

Example:
    >>> from asyncshield import ReturnStyle, create_async_handler, to_result
    >>> go = create_async_handler(return_style=ReturnStyle.GO_STYLE)
    >>> err, user = await go(fetch_user("bob"))

    >>> result = await to_result(fetch_user("bob"), "Could not load user")
    >>> result.success
    True
"""

__version__ = "0.1.0"

from asyncshield.derivatives import (
    LogAction,
    LogConfig,
    Result,
    is_success,
    to_result,
    value_of,
)
from asyncshield.exceptions import AsyncShieldError, LogConfigError
from asyncshield.handler import (
    AsyncHandlerConfig,
    AsyncWrappedFunction,
    ConditionalHandler,
    create_async_handler,
)
from asyncshield.styles import RETURN_STYLES, ReturnStyle

__all__ = [
    "RETURN_STYLES",
    "AsyncHandlerConfig",
    "AsyncShieldError",
    "AsyncWrappedFunction",
    "ConditionalHandler",
    "LogAction",
    "LogConfig",
    "LogConfigError",
    "Result",
    "ReturnStyle",
    "__version__",
    "create_async_handler",
    "is_success",
    "to_result",
    "value_of",
]
