"""Integer calculator.

`Calculator` carries no state; every method is a pure function of its
arguments, except `complex_calculation`, which also blocks on the wall clock.
"""

from __future__ import annotations

import logging
import threading

from exemplar import config
from exemplar.domain.errors import DivisionByZeroError
from exemplar.utils.pause import pause

logger = logging.getLogger(__name__)


class Calculator:
    """Four integer binary operations plus one artificially delayed computation."""

    @staticmethod
    def add(a: int, b: int) -> int:
        """Return the sum of `a` and `b`."""
        return a + b

    @staticmethod
    def subtract(a: int, b: int) -> int:
        """Return `a` minus `b`."""
        return a - b

    @staticmethod
    def multiply(a: int, b: int) -> int:
        """Return the product of `a` and `b`."""
        return a * b

    @staticmethod
    def divide(a: int, b: int) -> int:
        """Divide `a` by `b`, truncating the quotient toward zero.

        Unlike Python's floor division, `divide(-7, 2)` is `-3`.

        Args:
            a: Dividend.
            b: Divisor, must be non-zero.

        Returns:
            The truncated quotient.

        Raises:
            DivisionByZeroError: If `b` is zero.
        """
        if b == 0:
            raise DivisionByZeroError(a)
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient

    @staticmethod
    def complex_calculation(
        value: int, *, cancel: threading.Event | None = None
    ) -> int:
        """Return `value * value + 10` after a simulated slow computation.

        The call blocks for `config.COMPLEX_CALCULATION_DELAY` seconds. If
        `cancel` is set before or during the wait, the wait ends early and the
        event is left set; the result is the same either way.

        Args:
            value: The input value.
            cancel: Optional cooperative cancellation signal.

        Returns:
            The square of `value` plus ten.
        """
        if not pause(config.COMPLEX_CALCULATION_DELAY, cancel):
            logger.debug("complex_calculation(%d) cancelled during delay", value)
        return value * value + 10
