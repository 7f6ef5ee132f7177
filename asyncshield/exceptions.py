"""
asyncshield.exceptions - Custom exceptions

Failures of the wrapped operation are never wrapped in these types; they
are passed through unmodified. These exceptions only describe problems with
asyncshield's own configuration.
"""


class AsyncShieldError(Exception):
    """Base exception for all asyncshield errors."""


class LogConfigError(AsyncShieldError):
    """
    Raised when a log configuration cannot be resolved.

    This can occur due to:
    - An entry that is neither a message string nor an action descriptor
    - An action descriptor whose action is not callable
    - Arguments that are not a sequence

    The derivatives swallow this error: a bad log configuration never
    changes their return value.
    """


__all__ = ["AsyncShieldError", "LogConfigError"]
