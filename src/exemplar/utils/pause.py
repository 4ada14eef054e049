"""Cancellable wall-clock pause."""

from __future__ import annotations

import logging
import threading
import time

logger = logging.getLogger(__name__)


def pause(seconds: float, cancel: threading.Event | None = None) -> bool:
    """Block the calling thread for `seconds` of wall-clock time.

    When `cancel` is given the wait ends as soon as the event is set. The
    event is never cleared, so the caller can still observe the cancellation
    after this returns.

    Args:
        seconds: Duration of the pause. Zero returns immediately.
        cancel: Optional cooperative cancellation signal.

    Returns:
        True if the full duration elapsed, False if the pause was cancelled.

    Raises:
        ValueError: If `seconds` is negative.
    """
    if seconds < 0:
        raise ValueError(f"pause duration must be non-negative, got {seconds}")

    if cancel is None:
        time.sleep(seconds)
        return True

    if cancel.wait(timeout=seconds):
        logger.debug("Pause of %.3fs cancelled", seconds)
        return False
    return True
