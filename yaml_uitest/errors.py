"""Harness exception types."""

from __future__ import annotations


class HarnessError(RuntimeError):
    """Base class for failures raised by the harness itself."""


class WaitTimeoutError(HarnessError, TimeoutError):
    def __init__(self, message: str, *, timeout_ms: int, elapsed_ms: int) -> None:
        super().__init__(message)
        self.timeout_ms = timeout_ms
        self.elapsed_ms = elapsed_ms


class FatalUIError(HarnessError):
    """Raised when the UI is in a state no retry can recover from.

    Polling stops on this error instead of treating it as "not ready yet".
    """


class CommandPromptUnavailable(FatalUIError):
    def __init__(self, attempts: int) -> None:
        super().__init__(f"Failed to open command prompt after {attempts} attempts")
        self.attempts = attempts


class SessionConfigError(HarnessError):
    pass
