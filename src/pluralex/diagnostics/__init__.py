"""Diagnostic system for pluralex.

Provides structured diagnostics with codes and hints, the exception
hierarchy for render-time failures, and the dictionary validation result.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatterFailedError,
    FormatterNotFoundError,
    PluralexError,
    TemplateResolutionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormatterFailedError",
    "FormatterNotFoundError",
    "OutputFormat",
    "PluralexError",
    "TemplateResolutionError",
    "ValidationResult",
]
