"""Dictionary validation: argument models and diagnostics for many templates.

Runs the argument extractor over every template of a dictionary (template
id -> raw template) and consolidates the results. Warnings are also logged,
one line per diagnostic, in the caller-facing format
``translation '<id>' => <message>``.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pluralex.diagnostics import Diagnostic, ValidationResult
from pluralex.introspection import ArgumentDescriptor, introspect_template

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pluralex.runtime.cache import ParseCache

__all__ = ["validate_templates"]

logger = logging.getLogger(__name__)


def validate_templates(
    templates: Mapping[str, str],
    *,
    cache: ParseCache | None = None,
) -> ValidationResult:
    """Validate every template of a dictionary.

    Args:
        templates: Mapping template id -> raw template
        cache: Parse cache shared with rendering (default: parse directly)

    Returns:
        ValidationResult with per-template descriptors and all warnings

    Example:
        >>> result = validate_templates({"HI": "Hi {name}!", "TEST": "{hi} {0}"})
        >>> result.warning_count
        2
    """
    arguments: dict[str, tuple[ArgumentDescriptor, ...]] = {}
    warnings: list[Diagnostic] = []

    for template_id, raw in templates.items():
        info = introspect_template(raw, template_id, cache=cache)
        arguments[template_id] = info.arguments
        for diagnostic in info.diagnostics:
            logger.warning("%s", diagnostic.format_warning())
        warnings.extend(info.diagnostics)

    logger.debug(
        "Validated %d templates: %d warnings",
        len(arguments),
        len(warnings),
    )

    return ValidationResult(arguments=arguments, warnings=tuple(warnings))
