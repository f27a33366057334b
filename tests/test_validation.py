"""Tests for validate_templates() - whole-dictionary validation."""

import logging

import pytest

from pluralex.diagnostics import DiagnosticCode, ValidationResult
from pluralex.runtime.cache import ParseCache
from pluralex.validation import validate_templates

DICTIONARY = {
    "APPLES": "{0} apple{{s}}",
    "HI": "Hi {name}!",
    "SKIP": "{0} {2}",
    "MIXED": "{hi} {0}",
}


class TestValidateTemplates:
    """Consolidated results."""

    def test_consistent_dictionary(self) -> None:
        """No warnings for consistent templates."""
        result = validate_templates({"A": "{0} {1}", "B": "plain"})
        assert isinstance(result, ValidationResult)
        assert result.is_valid
        assert result.warning_count == 0
        assert result.template_count == 2

    def test_collects_all_warnings_in_order(self) -> None:
        """Warnings follow dictionary order, two per problem template."""
        result = validate_templates(DICTIONARY)
        assert not result.is_valid
        assert [w.format_warning() for w in result.warnings] == [
            "translation 'SKIP' => argument {1} expected, but {2} found",
            "translation 'SKIP' => make sure to not skip an index",
            "translation 'MIXED' => argument {1} expected, but {hi} found",
            "translation 'MIXED' => you can't mix keyed and index-based args",
        ]

    def test_arguments_per_template(self) -> None:
        """Every template gets its descriptors, problem templates included."""
        result = validate_templates(DICTIONARY)
        assert list(result.arguments) == ["APPLES", "HI", "SKIP", "MIXED"]
        assert result.arguments["APPLES"][0].resolved_type == "number"
        assert [d.name for d in result.arguments["SKIP"]] == ["0", "2"]

    def test_warnings_for(self) -> None:
        """Warnings can be filtered by template."""
        result = validate_templates(DICTIONARY)
        mixed = result.warnings_for("MIXED")
        assert len(mixed) == 2
        assert mixed[1].code is DiagnosticCode.MIXED_ARGUMENT_KINDS
        assert result.warnings_for("HI") == ()

    def test_logs_each_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each diagnostic is logged at WARNING in report format."""
        with caplog.at_level(logging.WARNING, logger="pluralex.validation.dictionary"):
            validate_templates({"TEST": "{0} {2}"})
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert messages == [
            "translation 'TEST' => argument {1} expected, but {2} found",
            "translation 'TEST' => make sure to not skip an index",
        ]

    def test_uses_cache(self) -> None:
        """Parsing goes through a provided cache."""
        cache = ParseCache()
        validate_templates(DICTIONARY, cache=cache)
        assert len(cache) == len(DICTIONARY)

    def test_empty_dictionary(self) -> None:
        """Nothing to validate is valid."""
        result = validate_templates({})
        assert result.is_valid
        assert result.template_count == 0


class TestValidationResultFormat:
    """ValidationResult.format()."""

    def test_format_valid(self) -> None:
        """Summary for a clean dictionary."""
        result = validate_templates({"A": "{0}"})
        assert result.format() == "Validation passed: 1 template(s), no warnings"

    def test_format_with_warnings(self) -> None:
        """One line per warning with its code."""
        result = validate_templates({"TEST": "{0} {2}"})
        assert result.format().splitlines() == [
            "Warnings (2):",
            "  [NON_CONTIGUOUS_INDEX]: translation 'TEST' => argument {1} expected, but {2} found",
            "  [NON_CONTIGUOUS_INDEX]: translation 'TEST' => make sure to not skip an index",
        ]

    def test_format_without_warning_lines(self) -> None:
        """include_warnings=False keeps only the summary."""
        result = validate_templates({"TEST": "{0} {2}"})
        assert result.format(include_warnings=False) == "Warnings (2):"
