"""EXEMPLAR

A small integer calculator and a set of string utilities, kept deliberately
simple so that the accompanying test suite can showcase pytest features:
grouped tests, fixtures, parametrization, property tests and expected failures.
"""

from exemplar.calculator import Calculator
from exemplar.domain.errors import DivisionByZeroError, DomainError
from exemplar.string_utils import is_palindrome, process_with_delay, reverse

__all__ = [
    "Calculator",
    "DivisionByZeroError",
    "DomainError",
    "__version__",
    "is_palindrome",
    "process_with_delay",
    "reverse",
]
__version__ = "0.1.0"
