"""Result-pair wrapper for optional actions."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

T = TypeVar("T")


async def safe_call(func: Callable[[], Awaitable[T]]) -> tuple[Exception | None, T | None]:
    """Await ``func()`` and return ``(error, value)`` instead of raising.

    Exactly one element of the pair is set: ``(None, value)`` on success,
    ``(error, None)`` on failure. Only ``Exception`` subclasses are captured,
    so cancellation and ``KeyboardInterrupt`` still propagate.

    Args:
        func: Zero-argument callable returning an awaitable.

    Returns:
        Tuple of (error, value).
    """
    try:
        value = await func()
    except Exception as e:
        return (e, None)
    return (None, value)
