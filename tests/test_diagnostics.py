"""Tests for diagnostics: records, templates, formatter and exceptions."""

import json

import pytest

from pluralex.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    FormatterFailedError,
    FormatterNotFoundError,
    OutputFormat,
    PluralexError,
    TemplateResolutionError,
)
from pluralex.validation import validate_templates


class TestDiagnostic:
    """Diagnostic record."""

    def test_str_is_message(self) -> None:
        """str() returns the bare message."""
        diagnostic = ErrorTemplate.skipped_index("TEST")
        assert str(diagnostic) == "make sure to not skip an index"

    def test_format_warning_with_template(self) -> None:
        """Report line names the template."""
        diagnostic = ErrorTemplate.mixed_argument_kinds("TEST")
        assert diagnostic.format_warning() == (
            "translation 'TEST' => you can't mix keyed and index-based args"
        )

    def test_format_warning_without_template(self) -> None:
        """Without a template id the message stands alone."""
        diagnostic = Diagnostic(code=DiagnosticCode.FORMATTER_FAILED, message="boom")
        assert diagnostic.format_warning() == "boom"

    def test_code_values(self) -> None:
        """Codes are stable numbers."""
        assert DiagnosticCode.MIXED_ARGUMENT_KINDS.value == 1001
        assert DiagnosticCode.NON_CONTIGUOUS_INDEX.value == 1002
        assert DiagnosticCode.FORMATTER_NOT_FOUND.value == 2001
        assert DiagnosticCode.FORMATTER_FAILED.value == 2002

    def test_argument_expected_template(self) -> None:
        """argument_expected() builds the expected/found message."""
        diagnostic = ErrorTemplate.argument_expected(
            1, "hi", "TEST", code=DiagnosticCode.MIXED_ARGUMENT_KINDS
        )
        assert diagnostic.message == "argument {1} expected, but {hi} found"
        assert diagnostic.severity == "warning"
        assert diagnostic.template_id == "TEST"

    def test_resolution_diagnostics_are_errors(self) -> None:
        """Formatter diagnostics default to error severity."""
        diagnostic = ErrorTemplate.formatter_not_found("shout")
        assert diagnostic.severity == "error"
        assert diagnostic.formatter_name == "shout"


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_format(self) -> None:
        """Rust style lists location and help."""
        output = ErrorTemplate.skipped_index("TEST").format_error()
        assert output.splitlines() == [
            "warning[NON_CONTIGUOUS_INDEX]: make sure to not skip an index",
            "  --> translation 'TEST'",
            "  = help: Positional arguments must be numbered 0, 1, 2, ...",
        ]

    def test_rust_format_formatter_name(self) -> None:
        """Resolution errors name the formatter."""
        output = ErrorTemplate.formatter_not_found("shout").format_error()
        assert output.startswith("error[FORMATTER_NOT_FOUND]: Formatter 'shout' is not registered")
        assert "  = formatter: shout" in output

    def test_simple_format(self) -> None:
        """Simple style is one line with the code."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.skipped_index("TEST")) == (
            "NON_CONTIGUOUS_INDEX: translation 'TEST' => make sure to not skip an index"
        )

    def test_json_format(self) -> None:
        """JSON style is machine readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.mixed_argument_kinds("TEST")))
        assert data["code"] == "MIXED_ARGUMENT_KINDS"
        assert data["code_value"] == 1001
        assert data["template_id"] == "TEST"
        assert data["severity"] == "warning"
        assert "formatter_name" not in data

    def test_color(self) -> None:
        """Color wraps the severity in ANSI codes."""
        formatter = DiagnosticFormatter(color=True)
        output = formatter.format(ErrorTemplate.skipped_index("TEST"))
        assert output.startswith("\033[1;33mwarning\033[0m")

    def test_sanitize_truncates(self) -> None:
        """Long messages are truncated when sanitizing."""
        formatter = DiagnosticFormatter(sanitize=True, max_content_length=10)
        diagnostic = Diagnostic(code=DiagnosticCode.FORMATTER_FAILED, message="x" * 50)
        assert formatter.format(diagnostic).startswith("error[FORMATTER_FAILED]: xxxxxxxxxx...")

    def test_format_all(self) -> None:
        """Diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.skipped_index("A"), ErrorTemplate.skipped_index("B")]
        )
        assert output.count("\n\n") == 1

    def test_format_validation_result(self) -> None:
        """Validation results get a summary and simple lines."""
        formatter = DiagnosticFormatter()
        invalid = validate_templates({"TEST": "{hi} {0}"})
        output = formatter.format_validation_result(invalid)
        assert output.startswith("Validation found 2 warning(s) in 1 template(s)")
        assert "  MIXED_ARGUMENT_KINDS: translation 'TEST' =>" in output
        valid = validate_templates({"OK": "{0}"})
        assert formatter.format_validation_result(valid) == "Validation passed: 1 template(s)"


class TestErrors:
    """Exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Formatter errors are resolution errors."""
        assert issubclass(TemplateResolutionError, PluralexError)
        assert issubclass(FormatterNotFoundError, TemplateResolutionError)
        assert issubclass(FormatterFailedError, TemplateResolutionError)

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = PluralexError("plain")
        assert str(error) == "plain"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages are formatted Rust-style."""
        diagnostic = ErrorTemplate.formatter_failed("toInt", "bad literal")
        error = FormatterFailedError(diagnostic, formatter_name="toInt")
        assert error.diagnostic is diagnostic
        assert error.formatter_name == "toInt"
        assert "Formatter 'toInt' failed: bad literal" in str(error)

    def test_raise_and_catch_base(self) -> None:
        """Callers can catch the base class."""
        with pytest.raises(PluralexError):
            raise FormatterNotFoundError(ErrorTemplate.formatter_not_found("x"))
