"""Template syntax package.

Provides the part model, parser and serializer. Separate from runtime to
enable tooling (linters, type generators, editors) without the rendering
machinery.

Python 3.13+.
"""

from .ast import (
    Argument,
    ArgumentKey,
    FormElement,
    NamedKey,
    Part,
    PluralBlock,
    PluralForm,
    PluralValue,
    PositionalKey,
    Text,
)
from .cursor import Cursor, ParseResult
from .parser import TemplateParser
from .serializer import serialize

__all__ = [
    "Argument",
    "ArgumentKey",
    "Cursor",
    "FormElement",
    "NamedKey",
    "ParseResult",
    "Part",
    "PluralBlock",
    "PluralForm",
    "PluralValue",
    "PositionalKey",
    "TemplateParser",
    "Text",
    "parse",
    "serialize",
]


def parse(raw: str) -> tuple[Part, ...]:
    """Parse a raw template into parts.

    Convenience function for TemplateParser().parse(). Never raises:
    malformed placeholders become literal text.

    Args:
        raw: Template source

    Returns:
        Immutable part sequence

    Example:
        >>> from pluralex.syntax import parse
        >>> parse("Hi {name}!")
        (Text(value='Hi '), Argument(key=NamedKey(name='name'), ...), Text(value='!'))
    """
    parser = TemplateParser()
    return parser.parse(raw)
