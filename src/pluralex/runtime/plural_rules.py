"""CLDR plural rules using Babel.

Provides plural category selection for all locales using Babel's CLDR data,
and the PluralResolver interface the translator depends on. Locale
sensitivity lives entirely here; the translator only asks for a category.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from collections.abc import Callable
from decimal import Decimal
from typing import Protocol, runtime_checkable

from babel.core import UnknownLocaleError

from pluralex.locale_utils import get_babel_locale

__all__ = [
    "CallablePluralResolver",
    "LocalePluralResolver",
    "PluralResolver",
    "as_plural_resolver",
    "select_plural_category",
]

type PluralOperand = int | float | Decimal


@runtime_checkable
class PluralResolver(Protocol):
    """Maps a numeric value to a CLDR plural category."""

    def category_for(self, value: PluralOperand) -> str:
        """Return "zero", "one", "two", "few", "many" or "other"."""
        ...  # pragma: no cover  # Protocol stub - not executable


def select_plural_category(n: PluralOperand, locale: str) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "lv_LV", "en-US", "ar")

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(0, "lv_LV")
        'zero'
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(42, "ja_JP")
        'other'

    Architecture:
        Uses Babel's Locale.plural_form, a CLDR-compliant PluralRule covering
        all categories and operands (n, i, v, w, f, t, e) for 200+ locales.

        If locale parsing fails, falls back to simple one/other rule.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        # Most common pattern: n == 1 -> "one", else -> "other"
        return "one" if abs(n) == 1 else "other"

    return locale_obj.plural_form(n)


class LocalePluralResolver:
    """PluralResolver backed by a locale's CLDR rules.

    Example:
        >>> resolver = LocalePluralResolver("pl")
        >>> resolver.category_for(3)
        'few'
    """

    __slots__ = ("_locale",)

    def __init__(self, locale: str) -> None:
        self._locale = locale

    @property
    def locale(self) -> str:
        """Locale code used for rule selection (read-only)."""
        return self._locale

    def category_for(self, value: PluralOperand) -> str:
        """Return the CLDR plural category of value for this locale."""
        return select_plural_category(value, self._locale)

    def __repr__(self) -> str:
        return f"LocalePluralResolver({self._locale!r})"


class CallablePluralResolver:
    """PluralResolver adapting a plain function value -> category."""

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[PluralOperand], str]) -> None:
        self._func = func

    def category_for(self, value: PluralOperand) -> str:
        """Delegate to the wrapped function."""
        return self._func(value)


def as_plural_resolver(
    resolver: PluralResolver | Callable[[PluralOperand], str],
) -> PluralResolver:
    """Adapt a resolver or a plain callable to the PluralResolver interface.

    Args:
        resolver: Object with category_for(), or callable value -> category

    Returns:
        PluralResolver instance

    Raises:
        TypeError: If resolver is neither
    """
    if isinstance(resolver, PluralResolver):
        return resolver
    if callable(resolver):
        return CallablePluralResolver(resolver)
    msg = f"Expected PluralResolver or callable, got {type(resolver).__name__}"
    raise TypeError(msg)
