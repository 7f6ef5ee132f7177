"""
asyncshield.demo - Shielding walkthrough

A FALSE_STYLE handler with a 404 conditional handler and a logging
default handler, run over a success, a handled 404 and a critical 500.
"""

import asyncio
import logging
from typing import Any

from asyncshield.handler import AsyncWrappedFunction, ConditionalHandler, create_async_handler
from asyncshield.styles import ReturnStyle

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Simulated HTTP failure carrying a status code."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code


async def fetch_success(data: Any, delay: float = 0.01) -> Any:
    await asyncio.sleep(delay)
    return data


async def fetch_failure(code: int, message: str, delay: float = 0.01) -> Any:
    await asyncio.sleep(delay)
    raise FetchError(code, message)


def build_safe_handler() -> AsyncWrappedFunction:
    """FALSE_STYLE handler: 404s are handled quietly, anything else is logged."""
    return create_async_handler(
        return_style=ReturnStyle.FALSE_STYLE,
        conditional_handler_chain=[
            ConditionalHandler(
                predicate=lambda e: getattr(e, "code", None) == 404,
                action=lambda e: logger.warning("[SAFE] 404 handled"),
            )
        ],
        default_handler=lambda e: logger.error(
            "[SAFE] Critical error logged: %s (shielding)", e
        ),
    )


async def run_demo(delay: float = 0.01) -> dict[str, Any]:
    """Run the three scenarios and return their results by name."""
    safe = build_safe_handler()
    return {
        "success": await safe(fetch_success({"id": 1}, delay)),
        "handled_404": await safe(fetch_failure(404, "Not Found", delay)),
        "critical_500": await safe(fetch_failure(500, "Server Explosion", delay)),
    }
