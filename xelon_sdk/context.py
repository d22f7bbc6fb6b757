"""
Cancellation and deadline handling for API calls.
"""

import threading
import time
from typing import Optional, Type

from .exceptions import DeadlineExceededError, RequestCancelledError, XelonContextError

CANCELED_MESSAGE = "context canceled"
DEADLINE_EXCEEDED_MESSAGE = "context deadline exceeded"


class RequestContext:
    """
    Carries a cancellation signal and an optional deadline for API calls.

    A context can be shared between threads and between several calls. Once
    done (cancelled or past its deadline) it stays done, and :meth:`err`
    always reports the same reason, as a new exception instance per call.

    Example:
        >>> ctx = RequestContext(timeout=5)
        >>> devices, response = client.devices.list(ctx=ctx)
    """

    def __init__(self, timeout: Optional[float] = None, deadline: Optional[float] = None):
        """
        Args:
            timeout: Seconds from now after which the context expires.
            deadline: Absolute expiry as a ``time.monotonic()`` value. When both
                are given the earlier one wins.
        """
        if timeout is not None:
            expiry = time.monotonic() + timeout
            deadline = expiry if deadline is None else min(deadline, expiry)
        self._deadline = deadline
        self._lock = threading.Lock()
        self._reason: Optional[Type[XelonContextError]] = None

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def cancel(self) -> None:
        """Cancel the context. Calls using it fail with :class:`RequestCancelledError`."""
        with self._lock:
            if self._reason is None:
                self._reason = RequestCancelledError

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def done(self) -> bool:
        return self._done_reason() is not None

    def err(self) -> Optional[XelonContextError]:
        """Return the reason the context is done, or None while it is still active."""
        reason = self._done_reason()
        if reason is None:
            return None
        if reason is RequestCancelledError:
            return RequestCancelledError(CANCELED_MESSAGE)
        return DeadlineExceededError(DEADLINE_EXCEEDED_MESSAGE)

    def _done_reason(self) -> Optional[Type[XelonContextError]]:
        with self._lock:
            if self._reason is None and self._deadline is not None:
                if time.monotonic() >= self._deadline:
                    self._reason = DeadlineExceededError
            return self._reason


def background() -> RequestContext:
    """Return a context that is never cancelled and has no deadline."""
    return RequestContext()
