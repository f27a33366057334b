"""Shared constants for pluralex.

Placing constants here avoids circular imports between the syntax,
runtime and introspection packages and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Plural categories
    "PLURAL_CATEGORIES",
    "SHORTHAND_PLURAL_CATEGORIES",
    "ZERO_ONE_OTHER_CATEGORIES",
    "EXPLICIT_PLURAL_CATEGORIES",
    "MAX_PLURAL_FORMS",
    # Argument model
    "NUMBER_TYPE",
    "UNKNOWN_TYPE",
    # Locale
    "DEFAULT_LOCALE",
    # Syntax
    "PLURAL_VALUE_MARKER",
    "OPTIONAL_MARKER",
    "FORM_LABEL_SEPARATOR",
]

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# CLDR plural categories in canonical order. "other" is always last and is
# the catch-all every locale defines.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Category sequences used to label unlabeled plural forms by position.
SHORTHAND_PLURAL_CATEGORIES: tuple[str, ...] = ("one", "other")
ZERO_ONE_OTHER_CATEGORIES: tuple[str, ...] = ("zero", "one", "other")

# Categories assigned to the leading forms of a 4+ form block; the last
# form always becomes "other".
EXPLICIT_PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many")

MAX_PLURAL_FORMS: int = len(PLURAL_CATEGORIES)

# ============================================================================
# ARGUMENT MODEL
# ============================================================================

# Resolved type for an untyped argument that drives a plural block.
NUMBER_TYPE: str = "number"

# Resolved type for an untyped argument with no further evidence.
UNKNOWN_TYPE: str = "unknown"

# ============================================================================
# LOCALE
# ============================================================================

DEFAULT_LOCALE: str = "en"

# ============================================================================
# SYNTAX
# ============================================================================

# `{?}` inside a plural form inserts the value driving the block.
PLURAL_VALUE_MARKER: str = "?"

# `{name?}` marks an argument as optional.
OPTIONAL_MARKER: str = "?"

# `one=apple|other=apples` labels plural forms explicitly.
FORM_LABEL_SEPARATOR: str = "="
