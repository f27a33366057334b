"""Validation utilities for template dictionaries.

Standalone validation, separated from TemplateBundle so build tooling can
check templates without rendering anything.

Python 3.13+.
"""

from pluralex.validation.dictionary import (
    validate_templates,
)

__all__ = [
    "validate_templates",
]
