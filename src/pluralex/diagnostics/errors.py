"""pluralex exception hierarchy with structured diagnostics.

Structural template problems are never raised; they are collected as
Diagnostic records. Only render-time configuration errors propagate as
exceptions, from the single translate() call that triggered them.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PluralexError(Exception):
    """Base exception for all pluralex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TemplateResolutionError(PluralexError):
    """Runtime error while rendering a template.

    Fatal for the render call that raised it; does not affect the parse
    cache or other templates.
    """


class FormatterNotFoundError(TemplateResolutionError):
    """Template references a formatter absent from the registry.

    Caller configuration error: register the formatter before rendering.
    """

    def __init__(self, message: str | Diagnostic, *, formatter_name: str = "") -> None:
        """Initialize FormatterNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            formatter_name: Name that failed to resolve
        """
        super().__init__(message)
        self.formatter_name = formatter_name


class FormatterFailedError(TemplateResolutionError):
    """Registered formatter rejected its input.

    Raised when the formatter raises TypeError or ValueError. Other
    exceptions indicate bugs in the formatter and propagate unchanged.
    """

    def __init__(self, message: str | Diagnostic, *, formatter_name: str = "") -> None:
        """Initialize FormatterFailedError.

        Args:
            message: Error message string OR Diagnostic object
            formatter_name: Name of the failing formatter
        """
        super().__init__(message)
        self.formatter_name = formatter_name
