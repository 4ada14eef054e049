"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Arithmetic errors
# ============================================================================


class DivisionByZeroError(DomainError, ZeroDivisionError):
    """Raised when an integer division is attempted with a zero divisor."""

    def __init__(self, dividend: int) -> None:
        super().__init__("Division by zero")
        self.dividend = dividend
