"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable messages
        - Consistent formatting
        - Documentation of all diagnostic cases
    """

    MIXED_ARGUMENTS_MESSAGE = "you can't mix keyed and index-based args"
    SKIPPED_INDEX_MESSAGE = "make sure to not skip an index"

    @staticmethod
    def argument_expected(
        expected: int,
        found: str,
        template_id: str,
        *,
        code: DiagnosticCode,
    ) -> Diagnostic:
        """Argument found where another positional index was expected.

        Args:
            expected: Positional index that should have come next
            found: Identity actually found (keyed name or later index)
            template_id: Owning template
            code: MIXED_ARGUMENT_KINDS or NON_CONTIGUOUS_INDEX

        Returns:
            Warning diagnostic
        """
        msg = f"argument {{{expected}}} expected, but {{{found}}} found"
        return Diagnostic(
            code=code,
            message=msg,
            template_id=template_id,
            severity="warning",
        )

    @staticmethod
    def mixed_argument_kinds(template_id: str) -> Diagnostic:
        """Template uses both keyed and positional arguments.

        Args:
            template_id: Owning template

        Returns:
            Warning diagnostic for MIXED_ARGUMENT_KINDS
        """
        return Diagnostic(
            code=DiagnosticCode.MIXED_ARGUMENT_KINDS,
            message=ErrorTemplate.MIXED_ARGUMENTS_MESSAGE,
            template_id=template_id,
            hint="Use either {0}-style or {name}-style arguments in one template",
            severity="warning",
        )

    @staticmethod
    def skipped_index(template_id: str) -> Diagnostic:
        """Positional indices are not contiguous from zero.

        Args:
            template_id: Owning template

        Returns:
            Warning diagnostic for NON_CONTIGUOUS_INDEX
        """
        return Diagnostic(
            code=DiagnosticCode.NON_CONTIGUOUS_INDEX,
            message=ErrorTemplate.SKIPPED_INDEX_MESSAGE,
            template_id=template_id,
            hint="Positional arguments must be numbered 0, 1, 2, ...",
            severity="warning",
        )

    @staticmethod
    def formatter_not_found(formatter_name: str) -> Diagnostic:
        """Formatter referenced by a template is not registered.

        Args:
            formatter_name: Name that failed to resolve

        Returns:
            Diagnostic for FORMATTER_NOT_FOUND
        """
        msg = f"Formatter '{formatter_name}' is not registered"
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NOT_FOUND,
            message=msg,
            hint="Register the formatter before rendering templates that use it",
            formatter_name=formatter_name,
        )

    @staticmethod
    def formatter_failed(formatter_name: str, reason: str) -> Diagnostic:
        """Formatter raised while transforming a value.

        Args:
            formatter_name: Name of the failing formatter
            reason: Error text from the formatter

        Returns:
            Diagnostic for FORMATTER_FAILED
        """
        msg = f"Formatter '{formatter_name}' failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_FAILED,
            message=msg,
            hint="Check that the argument value has the type the formatter expects",
            formatter_name=formatter_name,
        )
