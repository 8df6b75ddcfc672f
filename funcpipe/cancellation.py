"""Cooperative cancellation signals checked between pipeline steps.

A signal is anything with an `is_set()` method, so a plain `threading.Event` works. A
`CancellationToken` adds a reason and an optional deadline.
"""

import threading
import time
from typing import Protocol, runtime_checkable

from funcpipe.errors import CancellationError, DeadlineExceededError


@runtime_checkable
class CancellationSignal(Protocol):
    """Caller-owned signal requesting that a pipeline stops before its next step."""

    def is_set(self) -> bool:
        """Return True once cancellation has been requested."""
        ...


class _NeverCancelled:
    def is_set(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NEVER_CANCELLED"


NEVER_CANCELLED: CancellationSignal = _NeverCancelled()
"""Signal that never fires."""


class CancellationToken:
    """Cancellation signal with an optional reason and deadline.

    It can be cancelled from any thread. The deadline is a `time.monotonic()` timestamp; once it
    passes, the token reports itself as set.

    Args:
        deadline: Monotonic time after which the token counts as cancelled.
    """

    def __init__(self, deadline: float | None = None) -> None:
        self._event = threading.Event()
        self._reason: str | None = None
        self._deadline = deadline

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Create a token that fires `seconds` from now."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation. Only the first reason is kept."""
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set() or self.deadline_exceeded()

    def deadline_exceeded(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def reason(self) -> str | None:
        return self._reason

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def error(self, position: int | None = None) -> CancellationError | None:
        """Build the error describing why the token fired, or None if it has not."""
        if self._event.is_set():
            return CancellationError(self._reason, position)
        if self.deadline_exceeded():
            return DeadlineExceededError(position)
        return None


def check_cancelled(signal: CancellationSignal, position: int) -> CancellationError | None:
    """Return the cancellation error for `signal` at `position`, or None if it has not fired."""
    if not signal.is_set():
        return None
    if isinstance(signal, CancellationToken):
        return signal.error(position)
    return CancellationError(position=position)
