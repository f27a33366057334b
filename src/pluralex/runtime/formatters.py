"""Built-in formatters with locale-aware number and date formatting.

Templates reference formatters by name (``{0|number}``, ``{due|date}``).
Applications register their own; this module supplies the common ones:

    uppercase, lowercase  - str.upper / str.lower of the value
    identity              - value unchanged
    ignore                - value dropped (renders nothing)
    replace(search, repl) - factory for substring replacement
    number(locale)        - Babel format_decimal (CLDR grouping/decimals)
    date(locale)          - Babel format_date
    time(locale)          - Babel format_time

Example:
    >>> registry = create_default_registry("de")
    >>> registry.call("number", 1234.5)
    '1.234,5'

Python 3.13+. Uses Babel for i18n.
"""

import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from pluralex.constants import DEFAULT_LOCALE
from pluralex.locale_utils import get_babel_locale

from .formatter_registry import Formatter, FormatterRegistry

__all__ = [
    "create_default_registry",
    "date_formatter",
    "identity",
    "ignore",
    "lowercase",
    "number_formatter",
    "replace_formatter",
    "time_formatter",
    "uppercase",
]

logger = logging.getLogger(__name__)

type DateStyle = Literal["short", "medium", "long", "full"]


def _resolve_locale(locale_code: str) -> Locale:
    """Babel locale for locale_code, falling back to the default locale."""
    try:
        return get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
        return get_babel_locale(DEFAULT_LOCALE)


def uppercase(value: Any) -> str:
    """Upper-case the string form of value."""
    return str(value).upper()


def lowercase(value: Any) -> str:
    """Lower-case the string form of value."""
    return str(value).lower()


def identity(value: Any) -> Any:
    """Return value unchanged."""
    return value


def ignore(_value: Any) -> str:
    """Drop the value; the placeholder renders as empty text."""
    return ""


def replace_formatter(search: str, replacement: str) -> Formatter:
    """Create a formatter replacing every occurrence of search.

    Example:
        >>> registry.register("noDashes", replace_formatter("-", " "))
    """

    def replace(value: Any) -> str:
        return str(value).replace(search, replacement)

    return replace


def number_formatter(
    locale_code: str = DEFAULT_LOCALE,
    *,
    pattern: str | None = None,
) -> Formatter:
    """Create a locale-aware number formatter.

    Args:
        locale_code: BCP 47 or POSIX locale identifier
        pattern: Babel number pattern (default: locale's decimal pattern)
            Examples:
            - "#,##0.00": Always show 2 decimals
            - "#,##0.00;(#,##0.00)": Negatives in parentheses (accounting)

    Returns:
        Formatter int | float | Decimal -> str

    Examples:
        >>> number_formatter("en-US")(1234.5)
        '1,234.5'
        >>> number_formatter("lv-LV")(1234.5)
        '1 234,5'

    CLDR Compliance:
        Uses Babel's format_decimal() which implements CLDR rules.
    """
    babel_locale = _resolve_locale(locale_code)

    def number(value: int | float | Decimal) -> str:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            msg = f"number expects int, float or Decimal, got {type(value).__name__}"
            raise TypeError(msg)
        return str(babel_numbers.format_decimal(value, format=pattern, locale=babel_locale))

    return number


def _as_datetime(value: date | datetime | str) -> date | datetime:
    """Accept date/datetime objects and ISO 8601 strings."""
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return value


def date_formatter(
    locale_code: str = DEFAULT_LOCALE,
    *,
    style: DateStyle = "medium",
    pattern: str | None = None,
) -> Formatter:
    """Create a locale-aware date formatter.

    Args:
        locale_code: BCP 47 or POSIX locale identifier
        style: CLDR date style (default: "medium")
        pattern: Custom CLDR date pattern (overrides style), e.g. "yyyy-MM-dd"

    Returns:
        Formatter date | datetime | ISO string -> str

    Example:
        >>> date_formatter("en-US", style="short")(date(2025, 10, 27))
        '10/27/25'
    """
    babel_locale = _resolve_locale(locale_code)
    date_format = pattern if pattern is not None else style

    def format_date(value: date | datetime | str) -> str:
        return str(
            babel_dates.format_date(_as_datetime(value), format=date_format, locale=babel_locale)
        )

    return format_date


def time_formatter(
    locale_code: str = DEFAULT_LOCALE,
    *,
    style: DateStyle = "short",
    pattern: str | None = None,
) -> Formatter:
    """Create a locale-aware time formatter.

    Args:
        locale_code: BCP 47 or POSIX locale identifier
        style: CLDR time style (default: "short")
        pattern: Custom CLDR time pattern (overrides style), e.g. "HH:mm"

    Returns:
        Formatter time | datetime | ISO string -> str
    """
    babel_locale = _resolve_locale(locale_code)
    time_format = pattern if pattern is not None else style

    def format_time(value: time | datetime | str) -> str:
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        return str(babel_dates.format_time(value, format=time_format, locale=babel_locale))

    return format_time


def create_default_registry(locale_code: str = DEFAULT_LOCALE) -> FormatterRegistry:
    """Create a registry with the built-in formatters for a locale.

    Registered names: uppercase, lowercase, identity, ignore, number,
    date, time. Returns a fresh registry; callers may register more
    formatters without affecting other registries.

    Args:
        locale_code: Locale for number/date/time formatting

    Returns:
        FormatterRegistry with built-in formatters
    """
    registry = FormatterRegistry()
    registry.register("uppercase", uppercase)
    registry.register("lowercase", lowercase)
    registry.register("identity", identity)
    registry.register("ignore", ignore)
    registry.register("number", number_formatter(locale_code))
    registry.register("date", date_formatter(locale_code))
    registry.register("time", time_formatter(locale_code))
    return registry
