"""Template parser.

Converts a raw template string into an immutable sequence of parts
(:mod:`pluralex.syntax.ast`). The parser is total: malformed placeholders
degrade to literal text and parsing never raises.

Architecture:
    Parsing runs in two passes.

    1. Scan: an immutable :class:`~pluralex.syntax.cursor.Cursor` walks the
       source and produces literal text, arguments and raw plural bodies.
       Adjacent literal text is coalesced.
    2. Bind: every plural block is bound to its driving argument and its
       forms are labeled and parsed. Binding needs the whole scan because
       a leading plural block binds to the first argument that follows it.

Grammar:
    text        := any characters; "{" that does not open a valid
                   placeholder and every "}" are literal
    argument    := "{" identity [":" type] ("|" formatter)* "}"
    identity    := digits | identifier ["?"]
    plural      := "{{" [identity ":"] form ("|" form)* "}}"
    form        := (category "=")? (text | argument | "{?}")*

Implicit plural binding:
    A plural block without "key:" binds to the nearest preceding argument.
    With no preceding argument it binds to the first argument of the
    template, and with no argument at all to position 0.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from pluralex.constants import (
    EXPLICIT_PLURAL_CATEGORIES,
    MAX_PLURAL_FORMS,
    PLURAL_VALUE_MARKER,
    SHORTHAND_PLURAL_CATEGORIES,
    ZERO_ONE_OTHER_CATEGORIES,
)
from pluralex.enums import PluralCategory
from pluralex.syntax.ast import (
    Argument,
    ArgumentKey,
    FormElement,
    Part,
    PluralBlock,
    PluralForm,
    PluralValue,
    PositionalKey,
    Text,
)
from pluralex.syntax.cursor import Cursor, ParseResult
from pluralex.syntax.primitives import (
    parse_argument_content,
    parse_form_label,
    split_key_prefix,
    split_top_level,
)

__all__ = ["TemplateParser", "positional_categories"]


@dataclass(frozen=True, slots=True)
class _RawPlural:
    """Plural block body awaiting binding (scan pass output)."""

    body: str


type _ScannedPart = Text | Argument | _RawPlural


def positional_categories(form_count: int) -> tuple[PluralCategory, ...]:
    """Categories assigned to unlabeled plural forms, by form count.

    Args:
        form_count: Number of forms written in the block (>= 2)

    Returns:
        Category for each form that is kept, in order. For 7+ forms the
        result is shorter than form_count: forms past the sixth position
        are dropped and the last form becomes "other".

    Examples:
        >>> positional_categories(2)
        (<PluralCategory.ONE: 'one'>, <PluralCategory.OTHER: 'other'>)
        >>> [str(c) for c in positional_categories(4)]
        ['zero', 'one', 'two', 'other']
    """
    match form_count:
        case 2:
            names = SHORTHAND_PLURAL_CATEGORIES
        case 3:
            names = ZERO_ONE_OTHER_CATEGORIES
        case _:
            leading = EXPLICIT_PLURAL_CATEGORIES[: min(form_count, MAX_PLURAL_FORMS) - 1]
            names = (*leading, PluralCategory.OTHER.value)
    return tuple(PluralCategory(name) for name in names)


class TemplateParser:
    """Parser for pluralizable message templates.

    Stateless and reentrant: one instance may be shared across threads.

    Example:
        >>> parser = TemplateParser()
        >>> parser.parse("{0} apple{{s}}")
        (Argument(key=PositionalKey(index=0), ...), Text(value=' apple'), PluralBlock(...))
    """

    __slots__ = ()

    def parse(self, raw: str) -> tuple[Part, ...]:
        """Parse a raw template into parts.

        Args:
            raw: Template source

        Returns:
            Immutable part sequence; empty for an empty template
        """
        scanned = self._scan(raw, allow_plural=True, allow_value=False)
        return self._bind(scanned)

    # ------------------------------------------------------------------
    # Pass 1: scanning
    # ------------------------------------------------------------------

    def _scan(
        self, source: str, *, allow_plural: bool, allow_value: bool
    ) -> list[_ScannedPart | PluralValue]:
        """Split source into literal text, arguments and plural bodies."""
        parts: list[_ScannedPart | PluralValue] = []
        buffer: list[str] = []
        cursor = Cursor(source, 0)

        def flush() -> None:
            if buffer:
                parts.append(Text("".join(buffer)))
                buffer.clear()

        while not cursor.is_eof:
            if cursor.current != "{":
                end = cursor.find("{")
                buffer.append(cursor.slice_to(end))
                cursor = cursor.advance_to(end)
                continue

            scanned: ParseResult[_ScannedPart | PluralValue] | None = None
            if allow_plural and cursor.startswith("{{"):
                scanned = self._scan_plural(cursor)
            if scanned is None:
                scanned = self._scan_placeholder(cursor, allow_value=allow_value)

            if scanned is None:
                # Not a placeholder: the brace is literal text
                buffer.append("{")
                cursor = cursor.advance()
                continue

            flush()
            parts.append(scanned.value)
            cursor = scanned.cursor

        flush()
        return parts

    def _scan_placeholder(
        self, cursor: Cursor, *, allow_value: bool
    ) -> ParseResult[_ScannedPart | PluralValue] | None:
        """Scan "{...}" at cursor; None if it is not a valid placeholder."""
        body_start = cursor.advance()
        close = body_start.find("}")
        if close == len(cursor.source):
            return None

        content = body_start.slice_to(close)
        if "{" in content:
            return None
        after = cursor.advance_to(close + 1)

        if allow_value and content.strip() == PLURAL_VALUE_MARKER:
            return ParseResult(PluralValue(), after)

        argument = parse_argument_content(content)
        if argument is None:
            return None
        return ParseResult(argument, after)

    def _scan_plural(self, cursor: Cursor) -> ParseResult[_ScannedPart | PluralValue] | None:
        """Scan "{{...}}" at cursor, balancing single braces inside forms."""
        source = cursor.source
        body_start = cursor.pos + 2
        depth = 0
        index = body_start
        while index < len(source):
            char = source[index]
            if char == "{":
                depth += 1
            elif char == "}":
                if depth > 0:
                    depth -= 1
                elif source.startswith("}}", index):
                    body = source[body_start:index]
                    return ParseResult(_RawPlural(body), cursor.advance_to(index + 2))
            index += 1
        return None

    # ------------------------------------------------------------------
    # Pass 2: binding
    # ------------------------------------------------------------------

    def _bind(self, scanned: list[_ScannedPart | PluralValue]) -> tuple[Part, ...]:
        """Resolve plural keys and build the final part sequence."""
        first_key = next(
            (part.key for part in scanned if isinstance(part, Argument)),
            PositionalKey(0),
        )
        last_key: ArgumentKey | None = None
        parts: list[Part] = []

        for part in scanned:
            match part:
                case Argument():
                    last_key = part.key
                    parts.append(part)
                case _RawPlural():
                    fallback = last_key if last_key is not None else first_key
                    parts.append(self._build_plural(part.body, fallback))
                case Text():
                    parts.append(part)
                case PluralValue():  # pragma: no cover - allow_value=False
                    parts.append(Text("{?}"))

        return tuple(parts)

    def _build_plural(self, body: str, fallback_key: ArgumentKey) -> PluralBlock:
        """Build a plural block from its raw body."""
        key = fallback_key
        explicit_key = False

        prefixed = split_key_prefix(body)
        if prefixed is not None:
            key, body = prefixed
            explicit_key = True

        texts = split_top_level(body)
        labeled = [parse_form_label(text) for text in texts]

        if all(label is not None for label in labeled):
            pairs = [label for label in labeled if label is not None]
        elif len(texts) == 1:
            pairs = [(PluralCategory.ONE, ""), (PluralCategory.OTHER, texts[0])]
        else:
            categories = positional_categories(len(texts))
            kept = [*texts[: len(categories) - 1], texts[-1]]
            pairs = list(zip(categories, kept, strict=True))

        forms = tuple(
            PluralForm(category=category, elements=self._parse_form(text))
            for category, text in pairs
        )
        return PluralBlock(key=key, forms=forms, explicit_key=explicit_key)

    def _parse_form(self, text: str) -> tuple[FormElement, ...]:
        """Parse one plural form: literal text, arguments and "{?}"."""
        elements: list[FormElement] = []
        for part in self._scan(text, allow_plural=False, allow_value=True):
            match part:
                case Text() | Argument() | PluralValue():
                    elements.append(part)
                case _RawPlural():  # pragma: no cover - allow_plural=False
                    elements.append(Text("{{" + part.body + "}}"))
        return tuple(elements)
