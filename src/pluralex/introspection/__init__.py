"""Template introspection: argument models and numbering diagnostics.

Python 3.13+.
"""

from .arguments import (
    ArgumentDescriptor,
    TemplateIntrospection,
    extract_arguments,
    introspect_template,
)

__all__ = [
    "ArgumentDescriptor",
    "TemplateIntrospection",
    "extract_arguments",
    "introspect_template",
]
