"""pluralex - pluralizable text templates with argument introspection.

Renders parameterized templates such as ``"{0} apple{{s}}"`` into localized
strings, and extracts a structured argument model from them for static
validation and tooling. Plural categories come from CLDR via Babel.

Public API:
    TemplateBundle - Single-locale template dictionary and rendering
    parse_template - Parse template source to parts
    serialize_template - Serialize parts to template source
    translate - Render parts with explicit plural rules and formatters
    extract_arguments - Argument model and numbering diagnostics
    validate_templates - Validate a whole template dictionary

Exceptions:
    PluralexError - Base exception class
    TemplateResolutionError - Render-time failures
    FormatterNotFoundError - Unknown formatter referenced by a template
    FormatterFailedError - Formatter rejected its input

Submodules:
    pluralex.syntax.ast - Part model (Text, Argument, PluralBlock, ...)
    pluralex.introspection - Argument descriptors and template introspection
    pluralex.diagnostics - Diagnostics, error types and validation results
    pluralex.runtime.formatters - Built-in formatters (Babel number/date/time)
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    FormatterFailedError,
    FormatterNotFoundError,
    PluralexError,
    TemplateResolutionError,
)
from .introspection import extract_arguments, introspect_template
from .runtime import TemplateBundle, translate
from .syntax import parse as parse_template
from .syntax import serialize as serialize_template
from .validation import validate_templates

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("pluralex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FormatterFailedError",
    "FormatterNotFoundError",
    "PluralexError",
    "TemplateBundle",
    "TemplateResolutionError",
    "__version__",
    "extract_arguments",
    "introspect_template",
    "parse_template",
    "serialize_template",
    "translate",
    "validate_templates",
]
