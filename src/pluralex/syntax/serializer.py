"""Serialize template parts back to template syntax.

Converts part sequences to raw template strings. Useful for:
- Tooling that rewrites templates (renaming arguments, adding formatters)
- Code generators that embed normalized templates
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

from collections.abc import Sequence

from pluralex.constants import FORM_LABEL_SEPARATOR, OPTIONAL_MARKER, PLURAL_VALUE_MARKER
from pluralex.enums import PluralCategory

from .ast import Argument, FormElement, Part, PluralBlock, PluralForm, PluralValue, Text
from .parser import positional_categories
from .primitives import parse_form_label, split_key_prefix

__all__ = ["serialize"]


def serialize(parts: Sequence[Part]) -> str:
    """Serialize a part sequence to template source.

    Args:
        parts: Parts as produced by the parser (or built programmatically)

    Returns:
        Template source that parses back to the same parts

    Example:
        >>> from pluralex.syntax import parse, serialize
        >>> serialize(parse("{0:number|timesTen} apple{{s}}"))
        '{0:number|timesTen} apple{{s}}'
    """
    return "".join(_serialize_part(part) for part in parts)


def _serialize_part(part: Part | FormElement) -> str:
    match part:
        case Text():
            return part.value
        case Argument():
            return _serialize_argument(part)
        case PluralValue():
            return "{" + PLURAL_VALUE_MARKER + "}"
        case PluralBlock():
            return _serialize_plural(part)


def _serialize_argument(argument: Argument) -> str:
    identity = str(argument.key)
    if argument.optional:
        identity += OPTIONAL_MARKER
    type_part = f":{argument.type_tag}" if argument.type_tag else ""
    formatter_part = "".join(f"|{name}" for name in argument.formatters)
    return "{" + identity + type_part + formatter_part + "}"


def _serialize_form(form: PluralForm) -> str:
    return "".join(_serialize_part(element) for element in form.elements)


def _serialize_plural(block: PluralBlock) -> str:
    prefix = f"{block.key}:" if block.explicit_key else ""
    categories = tuple(form.category for form in block.forms)
    texts = [_serialize_form(form) for form in block.forms]

    if _is_shorthand(block, texts):
        body = texts[1]
    elif _is_positional(block, categories, texts):
        body = "|".join(texts)
    else:
        body = "|".join(
            f"{category}{FORM_LABEL_SEPARATOR}{text}"
            for category, text in zip(categories, texts, strict=True)
        )
    return "{{" + prefix + body + "}}"


def _is_shorthand(block: PluralBlock, texts: list[str]) -> bool:
    """Check if the block can be written with a single form (apple{{s}})."""
    if len(block.forms) != 2:  # noqa: PLR2004 - one/other pair
        return False
    singular, plural = block.forms
    if singular.category != PluralCategory.ONE or plural.category != PluralCategory.OTHER:
        return False
    if singular.elements:
        return False
    # A lone form that looks like "key:" or "category=" would be re-read as such
    other = texts[1]
    return ":" not in other and parse_form_label(other) is None


def _is_positional(
    block: PluralBlock, categories: tuple[str, ...], texts: list[str]
) -> bool:
    """Check if unlabeled forms re-parse to the same categories and texts."""
    if len(texts) < 2 or categories != positional_categories(len(texts)):  # noqa: PLR2004
        return False
    if not block.explicit_key and split_key_prefix("|".join(texts)) is not None:
        return False
    return not all(parse_form_label(text) is not None for text in texts)
