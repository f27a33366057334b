"""Hypothesis strategies for pluralex property-based testing.

Usage:
    from tests.strategies import plain_text, positional_templates, chaos_sources
"""

from .templates import (
    FORMATTER_NAMES,
    argument_placeholders,
    chaos_sources,
    identifiers,
    labeled_plural_blocks,
    plain_text,
    plural_blocks,
    positional_templates,
)

__all__ = [
    "FORMATTER_NAMES",
    "argument_placeholders",
    "chaos_sources",
    "identifiers",
    "labeled_plural_blocks",
    "plain_text",
    "plural_blocks",
    "positional_templates",
]
