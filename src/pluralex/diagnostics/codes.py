"""Diagnostic codes and data structures.

Defines diagnostic codes and the structured diagnostic record shared by the
argument extractor (structural warnings) and the translator (configuration
errors).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Structural template warnings (argument model consistency)
        2000-2999: Resolution errors (render-time configuration failures)
    """

    # Structural warnings (1000-1999)
    MIXED_ARGUMENT_KINDS = 1001
    NON_CONTIGUOUS_INDEX = 1002

    # Resolution errors (2000-2999)
    FORMATTER_NOT_FOUND = 2001
    FORMATTER_FAILED = 2002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    reporting collaborator to decide formatting and destination.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        template_id: Identity of the owning template (e.g. its dictionary key)
        hint: Suggestion for fixing the problem
        formatter_name: Formatter involved (resolution errors)
        severity: "warning" for structural issues, "error" otherwise
    """

    code: DiagnosticCode
    message: str
    template_id: str | None = None
    hint: str | None = None
    formatter_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_warning(self) -> str:
        """Format as a one-line report prefixed with the owning template.

        Example output:
            translation 'TEST' => argument {1} expected, but {2} found

        Returns:
            Report line; the bare message when no template id is attached
        """
        if self.template_id is None:
            return self.message
        return f"translation '{self.template_id}' => {self.message}"

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[FORMATTER_NOT_FOUND]: Formatter 'shout' is not registered
              = formatter: shout
              = help: Register the formatter before rendering templates that use it

        Returns:
            Formatted diagnostic
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
