"""
fuzzkit.polling — Bounded polling loops.

A check is a zero-argument callable that returns None while the thing
it waits for is not ready, and the result once it is:

    job = poll(lambda: queue.get_nowait_or_none(), timeout=5.0, interval=0.1)

Every loop is a tenacity.Retrying that retries on a None result.  It runs
on the calling thread and only ever blocks it in its own sleep.
Exceptions raised by the check propagate to the caller.
"""

import logging
import math
import time
from typing import Callable, Optional, TypeVar

import tenacity

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Seconds between two "Still polling..." records.
POLL_LOG_INTERVAL = 60.0


class _ProgressLog:
    """before_sleep hook: counts polls, reports them at most once per POLL_LOG_INTERVAL."""

    def __init__(self) -> None:
        self._next_log = time.monotonic() + POLL_LOG_INTERVAL
        self._count = 0

    def __call__(self, retry_state: tenacity.RetryCallState) -> None:
        self._count += 1
        now = time.monotonic()
        if now > self._next_log:
            logger.info("Still polling... (%d polls since last log)", self._count)
            self._next_log = now + POLL_LOG_INTERVAL
            self._count = 0


def _gave_up(retry_state: tenacity.RetryCallState) -> None:
    logger.debug("Polling gave up after %d checks", retry_state.attempt_number)
    return None


def _not_ready(value: object) -> bool:
    return value is None


def _check_duration(name: str, value: float) -> None:
    if not (value >= 0 and math.isfinite(value)):
        raise InvalidArgumentError(
            name, f"{name} must be a finite non-negative number, got {value}", value=value,
        )


def _no_sleep(seconds: float) -> None:
    pass


def _deadline_retryer(timeout: float, interval: Optional[float]) -> tenacity.Retrying:
    deadline = time.monotonic() + timeout

    def past_deadline(retry_state: tenacity.RetryCallState) -> bool:
        return time.monotonic() >= deadline

    def until_deadline(retry_state: tenacity.RetryCallState) -> float:
        return max(0.0, min(interval, deadline - time.monotonic()))

    return tenacity.Retrying(
        retry=tenacity.retry_if_result(_not_ready),
        stop=past_deadline,
        wait=tenacity.wait_none() if interval is None else until_deadline,
        sleep=_no_sleep if interval is None else time.sleep,
        before_sleep=_ProgressLog(),
        retry_error_callback=_gave_up,
    )


def poll(
    check: Callable[[], Optional[T]],
    timeout: float,
    interval: float,
) -> Optional[T]:
    """
    Call `check` until it returns a value or `timeout` seconds have passed.

    Sleeps `interval` seconds between unsuccessful checks, but never past
    the deadline: the last sleep is shortened to the remaining time and
    is followed by one final check.

    Returns the first non-None result, or None on timeout.
    """
    _check_duration("timeout", timeout)
    _check_duration("interval", interval)
    return _deadline_retryer(timeout, interval)(check)


def busy_poll(check: Callable[[], Optional[T]], timeout: float) -> Optional[T]:
    """Like poll(), without sleeping between checks."""
    _check_duration("timeout", timeout)
    return _deadline_retryer(timeout, None)(check)


def poll_attempts(
    check: Callable[[], Optional[T]],
    max_attempts: int,
    interval: float,
) -> Optional[T]:
    """
    Call `check` at most `max_attempts` times, `interval` seconds apart.

    Returns the first non-None result, or None once the attempts are
    used up.  No sleep follows the last attempt.
    """
    if max_attempts < 1:
        raise InvalidArgumentError(
            "max_attempts", f"max_attempts must be at least 1, got {max_attempts}",
            value=max_attempts,
        )
    _check_duration("interval", interval)

    retryer = tenacity.Retrying(
        retry=tenacity.retry_if_result(_not_ready),
        stop=tenacity.stop_after_attempt(max_attempts),
        wait=tenacity.wait_fixed(interval),
        sleep=time.sleep,
        before_sleep=_ProgressLog(),
        retry_error_callback=_gave_up,
    )
    return retryer(check)


def try_until_true(predicate: Callable[[], bool], timeout: float, interval: float) -> bool:
    """poll() for a boolean predicate: True as soon as it holds, False on timeout."""
    return poll(lambda: True if predicate() else None, timeout, interval) is not None


def try_until_true_attempts(
    predicate: Callable[[], bool],
    max_attempts: int,
    interval: float,
) -> bool:
    """poll_attempts() for a boolean predicate."""
    return poll_attempts(lambda: True if predicate() else None, max_attempts, interval) is not None
