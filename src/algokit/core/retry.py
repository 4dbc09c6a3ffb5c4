"""Retry and error-wrapping helpers for caller-supplied operations."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

from tenacity import RetryCallState, Retrying, stop_after_attempt, wait_fixed


logger = logging.getLogger(__name__)

R = TypeVar("R")


def is_error_like(value: Any) -> bool:
    """Return True for exceptions and for objects shaped like one.

    An object counts when it has a ``name`` attribute and a string ``message``.
    """

    if isinstance(value, BaseException):
        return True
    return hasattr(value, "name") and isinstance(getattr(value, "message", None), str)


def _prefixed(exc: Exception, message: str) -> Exception:
    """Return an exception of the same type whose text starts with ``message``.

    Single-argument exceptions are rewritten in place. Exceptions whose text is
    not built from their first argument (``OSError`` and friends) are left
    untouched and a new instance of the same type is returned instead.
    """

    original_args = exc.args
    if len(original_args) <= 1:
        head = str(original_args[0]) if original_args else str(exc)
        exc.args = (f"{message}: {head}",)
        if str(exc).lstrip("'\"").startswith(message):
            return exc
        exc.args = original_args

    try:
        return type(exc)(f"{message}: {exc}")
    except TypeError:
        return RuntimeError(f"{message}: {exc}")


def wrap_error(fn: Callable[..., R], message: str) -> Callable[..., R]:
    """Return a wrapper that prefixes ``message`` onto errors raised by ``fn``.

    The exception type is kept. When a fresh exception has to be built, the
    original is chained as its ``__cause__``.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            wrapped = _prefixed(exc, message)
            if wrapped is exc:
                raise
            raise wrapped from exc

    return wrapper


def _log_retry(retry_state: RetryCallState) -> None:
    logger.debug(
        "Attempt %d failed (%s); retrying",
        retry_state.attempt_number,
        retry_state.outcome.exception() if retry_state.outcome else None,
    )


def retry(
    operation: Callable[[], R],
    *,
    retries: int = 3,
    delay_s: float = 0.0,
    should_retry: Optional[Callable[[Exception, int], bool]] = None,
) -> R:
    """Call ``operation`` until it succeeds or the attempts run out.

    Args:
        operation: Zero-argument callable to run.
        retries: Extra attempts after the first one.
        delay_s: Seconds to sleep between attempts.
        should_retry: Optional predicate ``(error, attempt) -> bool`` where
            ``attempt`` is 0-based; returning False stops retrying and
            re-raises the error.

    Returns:
        The first successful result.
    """

    if retries < 0:
        raise ValueError("retries must be >= 0")

    def wants_retry(retry_state: RetryCallState) -> bool:
        error = retry_state.outcome.exception()
        if error is None or not isinstance(error, Exception):
            return False
        return should_retry is None or bool(should_retry(error, retry_state.attempt_number - 1))

    retrying = Retrying(
        stop=stop_after_attempt(retries + 1),
        wait=wait_fixed(delay_s),
        retry=wants_retry,
        before_sleep=_log_retry,
        reraise=True,
    )
    return retrying(operation)
