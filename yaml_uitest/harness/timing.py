"""Delay, polling and retry primitives shared by every scenario."""

from __future__ import annotations

import time
from typing import Callable, TypeVar

from selenium.common.exceptions import StaleElementReferenceException

from ..config import DEFAULT_POLL_INTERVAL_MS, DEFAULT_STALE_RETRIES
from ..errors import FatalUIError, WaitTimeoutError
from ..runs.events import EventWriter

T = TypeVar("T")

Clock = Callable[[], float]
Sleep = Callable[[float], None]


def hard_delay(milliseconds: int | float, *, sleep: Sleep = time.sleep) -> None:
    """Block for a fixed time to let the workbench re-render.

    Prefer `wait_until` whenever there is something observable to wait for.
    """
    sleep(max(0.0, float(milliseconds)) / 1000.0)


def wait_until(
    predicate: Callable[[], T],
    timeout_ms: int,
    message: str,
    *,
    interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    clock: Clock = time.monotonic,
    sleep: Sleep = time.sleep,
    events: EventWriter | None = None,
) -> T:
    """Poll `predicate` until it returns a truthy value and return that value.

    Exceptions from the predicate mean "not yet", except `FatalUIError`, which
    is re-raised immediately. The predicate is always evaluated once more at
    the deadline, and `WaitTimeoutError` is raised only after `timeout_ms` has
    fully elapsed. There is no way to tell a slow UI from a broken one here;
    callers that can detect a broken UI should raise `FatalUIError`.
    """
    timeout_s = max(0, timeout_ms) / 1000.0
    interval_s = max(1, interval_ms) / 1000.0
    started = clock()
    deadline = started + timeout_s
    last_error: Exception | None = None
    attempts = 0
    while True:
        attempts += 1
        try:
            result = predicate()
        except FatalUIError:
            raise
        except Exception as exc:
            last_error = exc
        else:
            if result:
                return result
        now = clock()
        if now >= deadline:
            elapsed_ms = int(round((now - started) * 1000))
            if events is not None:
                events.emit(
                    "wait_timeout",
                    message=message,
                    timeout_ms=timeout_ms,
                    elapsed_ms=elapsed_ms,
                    attempts=attempts,
                    last_error=last_error,
                )
            raise WaitTimeoutError(message, timeout_ms=timeout_ms, elapsed_ms=elapsed_ms) from last_error
        sleep(min(interval_s, deadline - now))


def attempt_name(index: int) -> str:
    if index == 0:
        return "first"
    if index == 1:
        return "retry"
    return f"retry{index}"


def retry_on_stale(
    action: Callable[[str], T],
    *,
    retries: int = DEFAULT_STALE_RETRIES,
    events: EventWriter | None = None,
) -> T:
    """Run `action(attempt_name)`, rerunning it when an element goes stale.

    Only `StaleElementReferenceException` triggers a rerun; everything else,
    including assertion failures, propagates from the first attempt.
    """
    attempts = max(0, retries) + 1
    for index in range(attempts):
        name = attempt_name(index)
        try:
            return action(name)
        except StaleElementReferenceException as exc:
            if index + 1 >= attempts:
                raise
            if events is not None:
                events.emit("stale_retry", attempt=name, error=exc)
    raise AssertionError("unreachable")
