"""Tests for the template translator.

Covers interpolation, formatter chains, plural selection (zero rule,
fallback to "other", non-numeric values), argument binding and the
render-time error contract.
"""

import logging
from decimal import Decimal
from typing import Any

import pytest

from pluralex.diagnostics import (
    DiagnosticCode,
    FormatterFailedError,
    FormatterNotFoundError,
    TemplateResolutionError,
)
from pluralex.runtime import (
    FormatterRegistry,
    LocalePluralResolver,
    TemplateTranslator,
    translate,
)
from pluralex.runtime.plural_rules import PluralOperand
from pluralex.syntax import parse

EN = LocalePluralResolver("en")


def _render(source: str, args: Any = (), formatters: Any = None) -> str:
    return translate(parse(source), EN, formatters or {}, args)


class _RecordingResolver:
    """Resolver returning a fixed category and recording its inputs."""

    def __init__(self, category: str) -> None:
        self.category = category
        self.calls: list[PluralOperand] = []

    def category_for(self, value: PluralOperand) -> str:
        self.calls.append(value)
        return self.category


class TestInterpolation:
    """Text and argument rendering."""

    def test_text_only_renders_itself(self) -> None:
        """Templates without placeholders render verbatim."""
        assert _render("Hello, world!") == "Hello, world!"

    def test_empty_parts(self) -> None:
        """Empty part sequence renders empty."""
        assert translate((), EN, {}, ()) == ""

    def test_positional_arguments(self) -> None:
        """{0} {1} bind by position."""
        assert _render("{0} + {1}", [1, 2]) == "1 + 2"

    def test_keyed_arguments(self) -> None:
        """{name} binds from a mapping."""
        assert _render("Hi {name}!", {"name": "Ada"}) == "Hi Ada!"

    def test_type_tag_ignored_at_runtime(self) -> None:
        """Type tags have no runtime effect."""
        assert _render("{0:number}", [7]) == "7"

    def test_missing_argument_renders_empty(self) -> None:
        """Absent values render as empty text."""
        assert _render("Hi {name}!", {}) == "Hi !"
        assert _render("{0} and {1}", ["a"]) == "a and "

    def test_none_renders_empty(self) -> None:
        """None renders as empty text."""
        assert _render("[{0}]", [None]) == "[]"

    def test_positional_from_mapping(self) -> None:
        """Positional keys resolve from a mapping by int or str index."""
        assert _render("{0}/{1}", {0: "a", "1": "b"}) == "a/b"

    def test_keyed_from_sequence_renders_empty(self) -> None:
        """A sequence cannot supply keyed arguments."""
        assert _render("Hi {name}!", ["Ada"]) == "Hi !"

    def test_string_args_are_not_a_sequence(self) -> None:
        """A bare string is not split into positional characters."""
        assert _render("{0}", "abc") == ""


class TestFormatters:
    """Formatter chains."""

    def test_chain_applies_left_to_right(self) -> None:
        """{0|double|exclaim} with 3 renders '6!'."""
        formatters = {"double": lambda v: v * 2, "exclaim": lambda v: f"{v}!"}
        assert _render("{0|double|exclaim}", [3], formatters) == "6!"

    def test_registry_accepted(self) -> None:
        """A FormatterRegistry works like a mapping."""
        registry = FormatterRegistry()
        registry.register("timesTen", lambda v: v * 10)
        assert _render("{0|timesTen}", [4], registry) == "40"

    def test_formatter_names_with_spaces(self) -> None:
        """Names keep inner spaces."""
        formatters = {"custom formatter": lambda v: f"<{v}>"}
        assert _render("{0| custom formatter }", ["x"], formatters) == "<x>"

    def test_formatter_receives_none_for_missing(self) -> None:
        """Formatters still run for absent values."""
        assert _render("{0|show}", [], {"show": repr}) == "None"

    def test_unknown_formatter_raises(self) -> None:
        """Unregistered names raise FormatterNotFoundError."""
        with pytest.raises(FormatterNotFoundError) as exc_info:
            _render("{0|shout}", ["hi"])
        assert exc_info.value.formatter_name == "shout"
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.FORMATTER_NOT_FOUND

    def test_failing_formatter_wrapped(self) -> None:
        """ValueError from a formatter becomes FormatterFailedError."""
        with pytest.raises(FormatterFailedError) as exc_info:
            _render("{0|toInt}", ["abc"], {"toInt": int})
        assert exc_info.value.formatter_name == "toInt"
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert isinstance(exc_info.value, TemplateResolutionError)

    def test_other_exceptions_propagate(self) -> None:
        """Only TypeError/ValueError are wrapped."""

        def broken(_value: object) -> str:
            msg = "bug"
            raise RuntimeError(msg)

        with pytest.raises(RuntimeError, match="bug"):
            _render("{0|broken}", [1], {"broken": broken})

    def test_formatter_inside_plural_form(self) -> None:
        """Arguments in forms go through their chains."""
        formatters = {"upper": str.upper}
        source = "{0} {{{1|upper} file|{1|upper} files}}"
        assert _render(source, [2, "new"], formatters) == "2 NEW files"


class TestPluralSelection:
    """Plural form selection."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(1, "1 apple"), (2, "2 apples"), (0, "0 apples")],
    )
    def test_shorthand(self, count: int, expected: str) -> None:
        """{0} apple{{s}} in English."""
        assert _render("{0} apple{{s}}", [count]) == expected

    def test_zero_form_for_zero(self) -> None:
        """A zero form wins for 0 even when the locale has no zero category."""
        source = "{{count:no items|one item|{?} items}}"
        assert _render(source, {"count": 0}) == "no items"
        assert _render(source, {"count": 1}) == "one item"
        assert _render(source, {"count": 4}) == "4 items"

    def test_zero_rule_skips_resolver(self) -> None:
        """The resolver is not consulted when the zero form applies."""
        resolver = _RecordingResolver("other")
        translate(parse("{{none|one|many}}"), resolver, {}, [0])
        assert resolver.calls == []

    def test_fallback_to_other(self) -> None:
        """A category without a form falls back to 'other'."""
        resolver = _RecordingResolver("few")
        assert translate(parse("{0} {{item|items}}"), resolver, {}, [3]) == "3 items"
        assert resolver.calls == [3]

    def test_no_other_form_renders_empty(self) -> None:
        """Without a matching or 'other' form the block renders nothing."""
        assert _render("[{0}{{one=x}}]", [5]) == "[5]"

    def test_callable_resolver(self) -> None:
        """Plain callables work as resolvers."""
        assert translate(parse("{{a|b}}"), lambda n: "one", {}, [99]) == "a"

    def test_numeric_string_value(self) -> None:
        """Numeric strings are coerced to Decimal."""
        resolver = _RecordingResolver("one")
        assert translate(parse("{0} apple{{s}}"), resolver, {}, ["1"]) == "1 apple"
        assert resolver.calls == [Decimal(1)]

    def test_decimal_value(self) -> None:
        """Decimal values select by their numeric value."""
        assert _render("{0} apple{{s}}", [Decimal("1")]) == "1 apple"

    def test_non_numeric_value_selects_other(self, caplog: pytest.LogCaptureFixture) -> None:
        """Values that cannot be numbers select 'other' without the resolver."""
        resolver = _RecordingResolver("one")
        with caplog.at_level(logging.DEBUG, logger="pluralex.runtime.translator"):
            result = translate(parse("{0} apple{{s}}"), resolver, {}, ["many"])
        assert result == "many apples"
        assert resolver.calls == []
        assert "not numeric" in caplog.text

    def test_missing_value_selects_other(self) -> None:
        """An absent plural value selects 'other'."""
        assert _render("apple{{s}}", []) == "apples"

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), Decimal("NaN"), Decimal("sNaN"), "sNaN", "-Infinity"],
    )
    def test_non_finite_values_select_other(self, value: object) -> None:
        """NaN and infinity never reach the resolver."""
        resolver = _RecordingResolver("one")
        assert translate(parse("apple{{s}}"), resolver, {}, [value]) == "apples"
        assert resolver.calls == []

    @pytest.mark.parametrize("value", [Decimal("sNaN"), "sNaN"])
    def test_signaling_nan_skips_zero_form(self, value: object) -> None:
        """A signaling NaN selects 'other' even when a zero form exists."""
        source = "{{n:none|one|{?} many}}"
        assert _render(source, {"n": value}) == f"{value} many"

    def test_bool_counts_as_integer(self) -> None:
        """True drives the plural as 1."""
        assert _render("apple{{s}}", [True]) == "apple"

    def test_plural_value_renders_driving_value(self) -> None:
        """{?} renders the bound value as text."""
        assert _render("{{n:one|{?} of them}}", {"n": 12}) == "12 of them"

    def test_implicit_binding_to_nearest_argument(self) -> None:
        """Unkeyed blocks follow the closest preceding argument."""
        source = "{0} apple{{s}} and {1} pear{{s}}"
        assert _render(source, [1, 3]) == "1 apple and 3 pears"

    def test_leading_block_uses_first_argument(self) -> None:
        """A block before any argument binds to the first argument."""
        assert _render("{{One|Many}} items: {count}", {"count": 1}) == "One items: 1"


class TestTemplateTranslator:
    """Reusable translator instances."""

    def test_reusable_across_calls(self) -> None:
        """One translator renders many templates."""
        translator = TemplateTranslator(EN, {"upper": str.upper})
        assert translator.translate(parse("{0|upper}"), ["a"]) == "A"
        assert translator.translate(parse("{0} apple{{s}}"), [2]) == "2 apples"

    def test_default_args(self) -> None:
        """Args default to an empty sequence."""
        assert TemplateTranslator(EN, {}).translate(parse("plain")) == "plain"

    def test_invalid_resolver_rejected(self) -> None:
        """Resolvers must be PluralResolver objects or callables."""
        with pytest.raises(TypeError):
            TemplateTranslator(42, {})  # type: ignore[arg-type]

    def test_deterministic(self) -> None:
        """Same inputs render identically."""
        parts = parse("{0} apple{{s}}")
        translator = TemplateTranslator(EN, {})
        assert translator.translate(parts, [5]) == translator.translate(parts, [5])
