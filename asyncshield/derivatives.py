"""
asyncshield.derivatives - Ready-made handlers

Three shortcuts over one shared GO_STYLE handler, each with optional
logging of the outcome:

- value_of:   the value, or False on failure
- is_success: True/False
- to_result:  a Result {success, data, error}

A log config is either a message string (logged on failure only) or a
LogConfig/mapping with optional ``success`` and ``error`` entries. Each
entry is a message string or a LogAction ``{"action": fn, "args": [...]}``.
Logging never changes the return value and never raises.

Example:
    >>> data = await value_of(fetch_user("bob"), "Could not load user")
    >>> if data is False:
    ...     return
    >>> result = await to_result(fetch_flag("beta"), {"success": "flag loaded"})
    >>> result.data
    False
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Literal, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
)

from asyncshield.exceptions import LogConfigError
from asyncshield.handler import call_safely, create_async_handler
from asyncshield.settings import get_settings
from asyncshield.styles import ReturnStyle

logger = logging.getLogger(__name__)

T = TypeVar("T")

OutcomeKind = Literal["success", "error"]


# ============================================================================
# Log configuration
# ============================================================================


class LogAction(BaseModel):
    """
    A side effect to run instead of logging a message.

    ``action(*args)`` is called; the failure reason is not appended.
    The keys fn/params are accepted as aliases for action/args.
    """

    model_config = ConfigDict(frozen=True)

    action: Callable[..., Any] = Field(
        ..., validation_alias=AliasChoices("action", "fn")
    )
    args: tuple[Any, ...] = Field(
        default=(), validation_alias=AliasChoices("args", "params")
    )


LogEntry = str | LogAction


class LogConfig(BaseModel):
    """Per-outcome log entries."""

    model_config = ConfigDict(frozen=True)

    success: LogEntry | None = None
    error: LogEntry | None = None

    def entry_for(self, kind: OutcomeKind) -> LogEntry | None:
        return self.success if kind == "success" else self.error


_log_config_adapter: TypeAdapter[str | LogConfig] = TypeAdapter(str | LogConfig)


def resolve_log_config(config: str | LogConfig | Mapping[str, Any]) -> str | LogConfig:
    """Validate a raw log config into a message string or LogConfig.

    Raises:
        LogConfigError: If the config has an unusable shape
    """
    try:
        return _log_config_adapter.validate_python(config)
    except ValidationError as e:
        raise LogConfigError(f"Invalid log config: {e}") from e


def _execute_entry(entry: LogEntry | None, kind: OutcomeKind, reason: Any = None) -> None:
    if not entry:
        return
    if isinstance(entry, LogAction):
        entry.action(*entry.args)
        return
    level = get_settings().level_for(kind)
    if kind == "error":
        logger.log(level, "%s %s", entry, reason)
    else:
        logger.log(level, "%s", entry)


def _emit_log(config: Any, kind: OutcomeKind, reason: Any) -> None:
    resolved = resolve_log_config(config)
    if isinstance(resolved, str):
        # A bare message only describes failures.
        if kind == "error":
            _execute_entry(resolved, kind, reason)
        return
    _execute_entry(resolved.entry_for(kind), kind, reason)


def handle_log(config: Any, kind: OutcomeKind, reason: Any = None) -> None:
    """Run the log entry for an outcome; failures are swallowed."""
    if not config:
        return
    call_safely(_emit_log, config, kind, reason, role="log")


# ============================================================================
# Result
# ============================================================================


class Result(BaseModel):
    """
    Outcome of an awaited operation as data.

    Keeps a successful falsy value (False, None, 0) distinguishable from a
    failure.

    Example:
        >>> result = await to_result(fetch_flag("beta"))
        >>> result.success, result.data, result.error
        (True, False, None)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool = Field(..., description="Whether the operation succeeded")
    data: Any | None = Field(default=None, description="Value if successful")
    error: BaseException | None = Field(default=None, description="Failure reason if failed")

    @classmethod
    def ok(cls, data: Any) -> "Result":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, error: BaseException) -> "Result":
        return cls(success=False, data=None, error=error)

    def unwrap(self) -> Any:
        """Return the data, or raise the stored failure reason."""
        if not self.success and self.error is not None:
            raise self.error
        return self.data


# ============================================================================
# Shortcuts
# ============================================================================

# Shared by all shortcuts; only its (error, data) pair is consumed here.
_go_handler = create_async_handler(return_style=ReturnStyle.GO_STYLE)


async def value_of(operation: Awaitable[T], log_config: Any = None) -> T | Literal[False]:
    """
    Return the operation's value, or False if it raised.

    Not suitable for operations whose legitimate value is False; use
    to_result for those.
    """
    error, data = await _go_handler(operation)
    if error is not None:
        handle_log(log_config, "error", error)
        return False
    handle_log(log_config, "success")
    return data


async def is_success(operation: Awaitable[Any], log_config: Any = None) -> bool:
    """Return True if the operation completed without raising."""
    error, _ = await _go_handler(operation)
    if error is not None:
        handle_log(log_config, "error", error)
        return False
    handle_log(log_config, "success")
    return True


async def to_result(operation: Awaitable[T], log_config: Any = None) -> Result:
    """Return a Result describing how the operation settled."""
    error, data = await _go_handler(operation)
    if error is not None:
        handle_log(log_config, "error", error)
        return Result.fail(error)
    handle_log(log_config, "success")
    return Result.ok(data)


__all__ = [
    "LogAction",
    "LogConfig",
    "LogEntry",
    "Result",
    "handle_log",
    "is_success",
    "resolve_log_config",
    "to_result",
    "value_of",
]
