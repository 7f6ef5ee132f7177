"""
asyncshield.handler - Async Outcome Handler

Builds reusable coroutine functions that await one operation and map its
outcome (value or raised exception) onto a fixed return shape. On failure
an ordered, first-match-wins chain of conditional handlers may run a side
effect before the shape is produced, with a default handler as fallback.

Handler, predicate and action failures are logged at ERROR but never
propagate; the handler's return value is decided by the return style alone.

Example:
    >>> safe = create_async_handler(
    ...     return_style=ReturnStyle.FALSE_STYLE,
    ...     conditional_handler_chain=[
    ...         ConditionalHandler(
    ...             predicate=lambda e: getattr(e, "code", None) == 404,
    ...             action=lambda e: logger.warning("404 handled"),
    ...         )
    ...     ],
    ...     default_handler=lambda e: logger.error("critical: %s", e),
    ... )
    >>> await safe(fetch_post(42))
    False
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, Protocol, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from asyncshield.settings import get_settings
from asyncshield.styles import ReturnStyle, coerce_return_style

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Type aliases for handler roles
Predicate = Callable[[Any], bool]
Action = Callable[[Any], None]
DefaultHandler = Callable[[Any], Any]


def reraise(error: BaseException) -> NoReturn:
    """Default handler: raise the failure reason again."""
    raise error


# ============================================================================
# Outcome
# ============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    """The awaited operation produced a value."""

    value: T


@dataclass(frozen=True)
class Failure:
    """The awaited operation raised."""

    reason: Exception


Outcome = Success[Any] | Failure


async def settle(operation: Awaitable[T]) -> Success[T] | Failure:
    """Await an operation and capture how it settled.

    Only Exception subclasses become a Failure. BaseExceptions such as
    asyncio.CancelledError and KeyboardInterrupt propagate.
    """
    try:
        value = await operation
    except Exception as e:
        return Failure(reason=e)
    return Success(value=value)


# ============================================================================
# Safe invocation
# ============================================================================


def _swallowed_errors_logged() -> bool:
    """Read the log_swallowed_errors setting; unreadable settings mean True."""
    try:
        return get_settings().log_swallowed_errors
    except ValidationError:
        return True


def call_safely(fn: Callable[..., Any], *args: Any, role: str) -> tuple[bool, Any]:
    """Call a side-effect handler, swallowing any Exception it raises.

    Args:
        fn: Handler to call
        *args: Positional arguments for the handler
        role: What the handler is (e.g. "action", "default_handler"), for logs

    Returns:
        (True, result) if the handler returned, (False, None) if it raised
    """
    try:
        return True, fn(*args)
    except Exception:
        if _swallowed_errors_logged():
            handler_name = getattr(fn, "__qualname__", repr(fn))
            logger.error(
                "Swallowed failure in %s %r",
                role,
                handler_name,
                exc_info=True,
                extra={"handler_role": role, "handler_name": handler_name},
            )
        return False, None


# ============================================================================
# Configuration
# ============================================================================


class ConditionalHandler(BaseModel):
    """
    A (predicate, action) pair evaluated against a failure reason.

    The keys if_true/do_it are accepted as aliases for predicate/action.

    Example:
        >>> not_found = ConditionalHandler(
        ...     predicate=lambda e: e.code == 404,
        ...     action=lambda e: cache.evict(e.key),
        ... )
    """

    model_config = ConfigDict(frozen=True)

    predicate: Predicate = Field(
        ...,
        validation_alias=AliasChoices("predicate", "if_true"),
        description="Returns True when this handler applies to the failure reason",
    )
    action: Action = Field(
        ...,
        validation_alias=AliasChoices("action", "do_it"),
        description="Side effect run with the failure reason",
    )

    def matches(self, error: Exception) -> bool:
        """Evaluate the predicate; a predicate that raises does not match."""
        ok, result = call_safely(self.predicate, error, role="predicate")
        return ok and bool(result)


class AsyncHandlerConfig(BaseModel):
    """
    Configuration captured by an async handler.

    Validated at construction and immutable afterwards. None for any field
    selects its default. The return style accepts any value: unrecognised
    styles are kept and select the fallback arm.
    """

    model_config = ConfigDict(frozen=True)

    return_style: ReturnStyle | str = Field(
        default=ReturnStyle.GO_STYLE,
        description="Output shape (see ReturnStyle)",
    )
    conditional_handler_chain: tuple[ConditionalHandler, ...] = Field(
        default=(),
        description="Ordered, first-match-wins handlers run on failure",
    )
    default_handler: DefaultHandler = Field(
        default=reraise,
        description="Runs on failure when no conditional handler matched",
    )

    @field_validator("return_style", mode="before")
    @classmethod
    def validate_return_style(cls, v: Any) -> ReturnStyle | str:
        """Map recognised styles to ReturnStyle, keep anything else as a string."""
        return coerce_return_style(v)

    @field_validator("conditional_handler_chain", mode="before")
    @classmethod
    def validate_chain(cls, v: Any) -> Any:
        """Treat None as an empty chain."""
        return () if v is None else v

    @field_validator("default_handler", mode="before")
    @classmethod
    def validate_default_handler(cls, v: Any) -> Any:
        """Treat None as the re-raising default."""
        return reraise if v is None else v

    @property
    def is_known_style(self) -> bool:
        """True when return_style is one of the ReturnStyle members."""
        return isinstance(self.return_style, ReturnStyle)


class AsyncWrappedFunction(Protocol):
    """A built handler: awaits one operation and returns the shaped outcome."""

    async def __call__(self, operation: Awaitable[T]) -> Any: ...


# ============================================================================
# Factory
# ============================================================================


def create_async_handler(
    config: AsyncHandlerConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> AsyncWrappedFunction:
    """
    Build a reusable async handler.

    Args:
        config: AsyncHandlerConfig, a mapping of its fields, or None
        **options: Field overrides (return_style, conditional_handler_chain,
            default_handler)

    Returns:
        Coroutine function taking one awaitable. It holds no state beyond
        the frozen config, so it can be called repeatedly and concurrently.

    Example:
        >>> go = create_async_handler()
        >>> err, data = await go(fetch_user("bob"))
    """
    if isinstance(config, AsyncHandlerConfig):
        if options:
            config = AsyncHandlerConfig.model_validate({**_config_fields(config), **options})
    else:
        config = AsyncHandlerConfig.model_validate({**(config or {}), **options})

    if not config.is_known_style:
        logger.warning(
            "Unrecognised return style %r; failures will use the fallback path",
            config.return_style,
        )

    style = config.return_style
    chain = config.conditional_handler_chain
    default_handler = config.default_handler

    def on_success(value: Any) -> Any:
        if style is ReturnStyle.GO_STYLE:
            return (None, value)
        if style is ReturnStyle.ONLY_ERROR:
            return 0
        if style is ReturnStyle.BOOLEAN:
            return True
        return value

    def run_chain(error: Exception) -> bool:
        """Run the first matching conditional action. Returns True on a match."""
        for conditional in chain:
            if conditional.matches(error):
                call_safely(conditional.action, error, role="action")
                return True
        return False

    def on_failure(error: Exception) -> Any:
        matched = run_chain(error)

        if style is ReturnStyle.GO_STYLE:
            return (error, None)
        if style is ReturnStyle.ONLY_ERROR:
            return 1
        if style is ReturnStyle.BOOLEAN:
            return False
        if style in (ReturnStyle.FALSE_STYLE, ReturnStyle.TRUE_STYLE):
            if not matched:
                call_safely(default_handler, error, role="default_handler")
            return style is ReturnStyle.TRUE_STYLE
        if style is ReturnStyle.ERROR_STYLE:
            return error

        # Fallback: escalate through the default handler, or re-raise once a
        # conditional handler has already dealt with the failure.
        if not matched:
            return default_handler(error)
        raise error

    async def handler(operation: Awaitable[T]) -> Any:
        outcome = await settle(operation)
        if isinstance(outcome, Failure):
            return on_failure(outcome.reason)
        return on_success(outcome.value)

    return handler


def _config_fields(config: AsyncHandlerConfig) -> dict[str, Any]:
    return {name: getattr(config, name) for name in AsyncHandlerConfig.model_fields}


__all__ = [
    "Action",
    "AsyncHandlerConfig",
    "AsyncWrappedFunction",
    "ConditionalHandler",
    "DefaultHandler",
    "Failure",
    "Outcome",
    "Predicate",
    "Success",
    "call_safely",
    "create_async_handler",
    "reraise",
    "settle",
]
