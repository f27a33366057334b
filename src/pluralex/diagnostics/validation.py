"""Validation result for a dictionary of templates.

Consolidates the argument models and structural warnings produced for every
template of a dictionary into one immutable object, ready to hand to a
type-generation or reporting collaborator.

Python 3.13+.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from pluralex.introspection.arguments import ArgumentDescriptor

__all__ = ["ValidationResult"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Unified validation result for a template dictionary.

    Warnings do not make templates unusable: every template still has a
    best-effort argument model and renders.

    Attributes:
        arguments: Argument descriptors per template id, in dictionary order
        warnings: Structural diagnostics for all templates, in dictionary order

    Example:
        >>> result = validate_templates({"TEST": "{0} {2}"})
        >>> result.is_valid
        False
        >>> [w.format_warning() for w in result.warnings]
        ["translation 'TEST' => argument {1} expected, but {2} found",
         "translation 'TEST' => make sure to not skip an index"]
    """

    arguments: Mapping[str, tuple["ArgumentDescriptor", ...]] = field(default_factory=dict)
    warnings: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True when no template produced a diagnostic."""
        return len(self.warnings) == 0

    @property
    def warning_count(self) -> int:
        """Number of diagnostics across all templates."""
        return len(self.warnings)

    @property
    def template_count(self) -> int:
        """Number of validated templates."""
        return len(self.arguments)

    def warnings_for(self, template_id: str) -> tuple[Diagnostic, ...]:
        """Diagnostics belonging to one template."""
        return tuple(w for w in self.warnings if w.template_id == template_id)

    def format(self, *, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            include_warnings: If True (default), include one line per warning.

        Returns:
            Summary line, optionally followed by warning lines
        """
        if self.is_valid:
            return f"Validation passed: {self.template_count} template(s), no warnings"

        lines = [f"Warnings ({self.warning_count}):"]
        if include_warnings:
            lines.extend(f"  [{w.code.name}]: {w.format_warning()}" for w in self.warnings)
        return "\n".join(lines)
