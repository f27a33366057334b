"""Template translator - renders part sequences to strings.

Walks the parts left to right, interpolating argument values through their
formatter chains and selecting plural forms via an injected plural resolver.

Thread Safety:
    The translator holds only its injected collaborators and keeps no
    per-call state, so one instance may serve any number of concurrent
    callers. Output is fully determined by the parts, arguments, resolver
    and formatters: no locale detection happens here.

Python 3.13+.
"""

import logging
import math
from collections.abc import Callable, Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from pluralex.enums import PluralCategory
from pluralex.syntax.ast import (
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

from .formatter_registry import Formatter, FormatterRegistry
from .plural_rules import PluralOperand, PluralResolver, as_plural_resolver

__all__ = ["TemplateArgs", "TemplateTranslator", "translate"]

logger = logging.getLogger(__name__)

# Positional templates take a sequence, keyed templates a mapping.
type TemplateArgs = Sequence[Any] | Mapping[str | int, Any]

_NAN = Decimal("NaN")


class TemplateTranslator:
    """Renders parsed templates with injected plural rules and formatters.

    Error handling:
        - Missing arguments render as empty text (the argument extractor
          reports misnumbered arguments before render time)
        - Non-numeric plural values select the "other" form
        - Unknown formatter names raise FormatterNotFoundError
        - Formatters raising TypeError/ValueError raise FormatterFailedError

    Example:
        >>> translator = TemplateTranslator(LocalePluralResolver("en"), {})
        >>> translator.translate(parse("{0} apple{{s}}"), [2])
        '2 apples'
    """

    __slots__ = ("_formatters", "_plural_resolver")

    def __init__(
        self,
        plural_resolver: PluralResolver | Callable[[PluralOperand], str],
        formatters: FormatterRegistry | Mapping[str, Formatter],
    ) -> None:
        """Initialize translator.

        Args:
            plural_resolver: PluralResolver, or callable value -> category
            formatters: FormatterRegistry, or mapping name -> callable
        """
        self._plural_resolver = as_plural_resolver(plural_resolver)
        if isinstance(formatters, FormatterRegistry):
            self._formatters = formatters
        else:
            self._formatters = FormatterRegistry.from_mapping(formatters)

    def translate(self, parts: Sequence[Part], args: TemplateArgs = ()) -> str:
        """Render parts with args.

        Args:
            parts: Parsed template
            args: Sequence for positional templates, mapping for keyed ones

        Returns:
            Rendered string

        Raises:
            FormatterNotFoundError: A referenced formatter is not registered
            FormatterFailedError: A formatter rejected its input
        """
        return "".join(self._render_part(part, args) for part in parts)

    def _render_part(self, part: Part, args: TemplateArgs) -> str:
        match part:
            case Text():
                return part.value
            case Argument():
                return self._render_argument(part, args)
            case PluralBlock():
                return self._render_plural(part, args)

    def _render_argument(self, argument: Argument, args: TemplateArgs) -> str:
        value = _lookup(argument.key, args)
        for name in argument.formatters:
            value = self._formatters.call(name, value)
        return _to_text(value)

    def _render_plural(self, block: PluralBlock, args: TemplateArgs) -> str:
        value = _lookup(block.key, args)
        number = _to_number(value)
        form = self._select_form(block, number)
        if form is None:
            return ""
        return "".join(self._render_form_element(element, value, args) for element in form.elements)

    def _render_form_element(self, element: FormElement, value: Any, args: TemplateArgs) -> str:
        match element:
            case Text():
                return element.value
            case Argument():
                return self._render_argument(element, args)
            case PluralValue():
                return _to_text(value)

    def _select_form(self, block: PluralBlock, number: PluralOperand) -> PluralForm | None:
        """Pick the form for number, falling back to "other"."""
        # Finite check comes first: comparing a signaling NaN raises
        if not _is_finite(number):
            return _find_form(block, PluralCategory.OTHER)

        if number == 0:
            zero_form = _find_form(block, PluralCategory.ZERO)
            if zero_form is not None:
                return zero_form

        category = self._plural_resolver.category_for(number)

        form = _find_form(block, category)
        if form is None:
            form = _find_form(block, PluralCategory.OTHER)
        return form


def translate(
    parts: Sequence[Part],
    plural_resolver: PluralResolver | Callable[[PluralOperand], str],
    formatters: FormatterRegistry | Mapping[str, Formatter],
    args: TemplateArgs = (),
) -> str:
    """Render parts with args.

    Convenience function for TemplateTranslator(...).translate().

    Example:
        >>> translate(
        ...     parse("{0|double|exclaim}"),
        ...     lambda n: "other",
        ...     {"double": lambda v: v * 2, "exclaim": lambda v: f"{v}!"},
        ...     [3],
        ... )
        '6!'
    """
    return TemplateTranslator(plural_resolver, formatters).translate(parts, args)


def _lookup(key: ArgumentKey, args: TemplateArgs) -> Any:
    """Resolve an argument value; absent values resolve to None."""
    match key:
        case PositionalKey(index=index):
            if isinstance(args, Mapping):
                if index in args:
                    return args[index]
                return args.get(str(index))
            if isinstance(args, (str, bytes)):
                return None
            return args[index] if index < len(args) else None
        case NamedKey(name=name):
            if isinstance(args, Mapping):
                return args.get(name)
            return None


def _find_form(block: PluralBlock, category: str) -> PluralForm | None:
    return next((form for form in block.forms if form.category == category), None)


def _to_number(value: Any) -> PluralOperand:
    """Coerce a plural-driving value to a number; NaN when impossible."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            pass
    logger.debug("Plural value %r is not numeric; selecting 'other'", value)
    return _NAN


def _is_finite(number: PluralOperand) -> bool:
    if isinstance(number, Decimal):
        return number.is_finite()
    return math.isfinite(number)


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
