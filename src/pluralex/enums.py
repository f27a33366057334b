"""Enumerations for pluralex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category.

    StrEnum provides automatic string conversion: str(PluralCategory.ONE) == "one"
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"
    """Catch-all category defined by every locale."""


class ArgumentKind(StrEnum):
    """How a template argument is bound.

    StrEnum provides automatic string conversion: str(ArgumentKind.KEYED) == "keyed"
    """

    POSITIONAL = "positional"
    """Bound by zero-based index: {0}"""

    KEYED = "keyed"
    """Bound by name: {name}"""


__all__ = [
    "ArgumentKind",
    "PluralCategory",
]
