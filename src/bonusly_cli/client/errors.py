"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class BonuslyError(Exception):
    """Base exception for bonusly-cli."""

    exit_code: int = 1


class TransportError(BonuslyError):
    """The request failed before any response body was available."""

    exit_code = 2


class RequestTimeoutError(TransportError):
    """The request was cancelled because its timeout elapsed."""


class MalformedResponseError(BonuslyError):
    """The response body is not a valid envelope for the operation.

    The underlying parse or validation error is chained as ``__cause__``.
    """

    exit_code = 3

    def __init__(
        self, operation: str, detail: str = "", status_code: int | None = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        msg = f"{operation}: malformed response"
        if status_code is not None:
            msg += f" (HTTP {status_code})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class NormalizationError(BonuslyError):
    """A single field could not be converted to its typed value."""

    exit_code = 4

    def __init__(self, field: str, value: str, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}': {value!r} ({reason})")


class InvalidDateFormatError(NormalizationError):
    """A date-only field is not formatted as YYYY-MM-DD."""


class InvalidURLError(NormalizationError):
    """A URL field holds a string that is not a valid URL."""


class APIError(BonuslyError):
    """The API answered with ``success: false``."""

    exit_code = 5

    def __init__(self, operation: str, message: str = "") -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


class ConfigurationError(BonuslyError):
    """No usable client configuration could be resolved."""

    exit_code = 6


class ValidationError(BonuslyError):
    """Request parameters were rejected before sending."""

    exit_code = 7

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "Validation error")


def error_handler(func: F) -> F:
    """Decorator that catches BonuslyError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except BonuslyError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
