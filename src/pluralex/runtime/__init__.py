"""Template runtime package.

Provides the translator, parse cache, plural rules, formatters and the
TemplateBundle API. Depends on the syntax package for parsing.

Python 3.13+.
"""

from pluralex.diagnostics import ValidationResult

from .bundle import TemplateBundle
from .cache import ParseCache
from .formatter_registry import Formatter, FormatterRegistry
from .formatters import (
    create_default_registry,
    date_formatter,
    number_formatter,
    replace_formatter,
    time_formatter,
)
from .plural_rules import (
    LocalePluralResolver,
    PluralResolver,
    as_plural_resolver,
    select_plural_category,
)
from .translator import TemplateArgs, TemplateTranslator, translate

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "LocalePluralResolver",
    "ParseCache",
    "PluralResolver",
    "TemplateArgs",
    "TemplateBundle",
    "TemplateTranslator",
    "ValidationResult",
    "as_plural_resolver",
    "create_default_registry",
    "date_formatter",
    "number_formatter",
    "replace_formatter",
    "select_plural_category",
    "time_formatter",
    "translate",
]
