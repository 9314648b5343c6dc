"""
Boundary adapter from raising code to Result values.

This module provides a decorator that runs a synchronous callable and returns
its outcome as a Result: ``Ok`` with the return value, or ``Err`` with the
message of a captured exception. Used at the edge where exception-based code
(third-party clients, parsers, the standard library) meets Result-based code.
"""

import logging
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from tagged_result.config import get_settings
from tagged_result.result import Err, Ok, Result

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def as_result(
    *exceptions: type[BaseException],
    message: str | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, str]]]:
    """
    Decorator for turning raised exceptions into Err results.

    The wrapped callable returns ``Ok(value)`` when it returns normally and
    ``Err(str(exc))`` when it raises one of ``exceptions``. Exceptions not
    listed propagate unchanged.

    Args:
        exceptions: Exception types to capture (default: Exception)
        message: Fixed error message to use instead of ``str(exc)``

    Returns:
        Decorator producing a Result-returning callable

    Raises:
        TypeError: If any of ``exceptions`` is not an exception type

    Example:
        >>> @as_result(KeyError, message="User not found")
        ... def find_user(users: dict, user_id: int) -> dict:
        ...     return users[user_id]
        >>> find_user({}, 999)
        Err('User not found')
    """
    captured = exceptions or (Exception,)
    for exc_type in captured:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise TypeError(f"as_result() expects exception types, got {exc_type!r}")

    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, str]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, str]:
            # Invalid configuration must fail every call, not only captured ones
            settings = get_settings()
            try:
                value = func(*args, **kwargs)
            except captured as e:
                if settings.log_captured_exceptions:
                    logger.log(
                        logging.getLevelName(settings.captured_log_level),
                        f"{func.__name__} raised {type(e).__name__}: {e}",
                    )
                return Err(message if message is not None else str(e))
            return Ok(value)

        return wrapper

    return decorator
