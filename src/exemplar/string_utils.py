"""String utilities.

All functions accept `None` as the absent value and map it to a defined
result instead of raising.
"""

from __future__ import annotations

import logging
import re
import threading

from exemplar import config
from exemplar.utils.pause import pause

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def reverse(text: str | None) -> str | None:
    """Return `text` reversed, or None when `text` is None."""
    if text is None:
        return None
    return text[::-1]


def is_palindrome(text: str | None) -> bool:
    """Check whether `text` reads the same forward and backward.

    The comparison runs on the lower-cased text with every character outside
    `[a-z0-9]` removed, so case, spaces and punctuation are ignored. None is
    never a palindrome; any string that normalizes to nothing (including "")
    is, since the empty sequence equals its own reverse.
    """
    if text is None:
        return False
    cleaned = _NON_ALNUM.sub("", text.lower())
    return cleaned == cleaned[::-1]


def process_with_delay(
    text: str | None, *, cancel: threading.Event | None = None
) -> str:
    """Upper-case `text` and append the processed suffix after a delay.

    Blocks for `config.PROCESS_DELAY` seconds first; `cancel` ends the wait
    early without changing the result.

    Args:
        text: String to process.
        cancel: Optional cooperative cancellation signal.

    Returns:
        "" for None or "", otherwise `text.upper()` followed by "-PROCESSED".
    """
    if not pause(config.PROCESS_DELAY, cancel):
        logger.debug("process_with_delay cancelled during delay")
    if not text:
        return ""
    return text.upper() + config.PROCESSED_SUFFIX
