"""Primitive parsing utilities for the template parser.

Low-level parsers for argument identities, argument placeholder content and
plural form labels. All functions are pure and return None when the input
does not have the expected shape, letting callers degrade to literal text.
"""

import re

from pluralex.constants import OPTIONAL_MARKER
from pluralex.enums import PluralCategory
from pluralex.syntax.ast import Argument, ArgumentKey, NamedKey, PositionalKey

__all__ = [
    "is_identifier",
    "parse_argument_content",
    "parse_form_label",
    "parse_identity",
    "split_key_prefix",
    "split_top_level",
]

# ASCII digits only. str.isdigit() returns True for Unicode digits like "²"
# which int() rejects.
_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_FORM_LABEL_PATTERN = re.compile(r"\s*(zero|one|two|few|many|other)\s*=")


def is_identifier(text: str) -> bool:
    """Check if text is a keyed argument name: [A-Za-z_][A-Za-z0-9_]*"""
    return _IDENTIFIER_PATTERN.fullmatch(text) is not None


def parse_identity(text: str) -> tuple[ArgumentKey, bool] | None:
    """Parse an argument identity.

    Surrounding whitespace is insignificant. A trailing "?" marks the
    argument optional.

    Args:
        text: Raw identity text (between "{" and the first ":" or "|")

    Returns:
        (key, optional) or None if text is neither an index nor a name

    Examples:
        >>> parse_identity(" 0 ")
        (PositionalKey(index=0), False)
        >>> parse_identity("name?")
        (NamedKey(name='name'), True)
        >>> parse_identity("two words") is None
        True
    """
    identity = text.strip()
    optional = identity.endswith(OPTIONAL_MARKER)
    if optional:
        identity = identity[: -len(OPTIONAL_MARKER)].rstrip()

    if not identity:
        return None
    if all(char in _ASCII_DIGITS for char in identity):
        return PositionalKey(int(identity)), optional
    if is_identifier(identity):
        return NamedKey(identity), optional
    return None


def parse_argument_content(content: str) -> Argument | None:
    """Parse the content of a single-brace placeholder.

    Grammar: identity [":" type] ("|" formatter)*

    Formatter names are trimmed; dashes and inner spaces are kept as part
    of the name. Empty type tags and empty formatter names are dropped.

    Args:
        content: Text between "{" and "}"

    Returns:
        Argument, or None if the identity is invalid

    Examples:
        >>> parse_argument_content("0:number|timesTen")
        Argument(key=PositionalKey(index=0), type_tag='number', formatters=('timesTen',), ...)
        >>> parse_argument_content("0| custom formatter | and-another ").formatters
        ('custom formatter', 'and-another')
    """
    identity_part, *formatter_parts = content.split("|")
    identity_text, _, type_text = identity_part.partition(":")

    identity = parse_identity(identity_text)
    if identity is None:
        return None
    key, optional = identity

    type_tag = type_text.strip() or None
    formatters = tuple(name.strip() for name in formatter_parts if name.strip())
    return Argument(key=key, type_tag=type_tag, formatters=formatters, optional=optional)


def parse_form_label(form: str) -> tuple[PluralCategory, str] | None:
    """Split an explicitly labeled plural form.

    Example:
        >>> parse_form_label("few = a few apples")
        (<PluralCategory.FEW: 'few'>, 'a few apples')

    Returns:
        (category, remaining text) or None if the form carries no label
    """
    match = _FORM_LABEL_PATTERN.match(form)
    if match is None:
        return None
    return PluralCategory(match.group(1)), form[match.end() :].lstrip()


def split_key_prefix(body: str) -> tuple[ArgumentKey, str] | None:
    """Split a leading "key:" off a plural block body.

    The text before the first ":" must hold no "|" or "{" and must be a
    valid identity.

    Example:
        >>> split_key_prefix("count:item|items")
        (NamedKey(name='count'), 'item|items')
        >>> split_key_prefix("Note| a: b") is None
        True
    """
    colon = body.find(":")
    if colon == -1:
        return None
    head = body[:colon]
    if "|" in head or "{" in head:
        return None
    identity = parse_identity(head)
    if identity is None:
        return None
    key, _ = identity
    return key, body[colon + 1 :]


def split_top_level(text: str, separator: str = "|") -> list[str]:
    """Split text on separator, ignoring separators inside {...}.

    Plural forms may contain argument placeholders with their own formatter
    pipes ("{0|upper} item|{0|upper} items"), which must not split forms.
    """
    pieces: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "{":
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
        elif char == separator and depth == 0:
            pieces.append(text[start:index])
            start = index + 1
    pieces.append(text[start:])
    return pieces
