"""Formatter registry: named value transforms used by templates.

A template such as ``{0|timesTen|wrapWithHtmlSpan}`` names formatters that
the translator resolves here and applies left to right. Names are opaque
strings: dashes and inner spaces ("custom formatter") are part of the name.

Architecture:
    - FormatterRegistry: Manages formatter registration, lookup and calling
    - resolve() has a defined failure mode (FormatterNotFoundError)
    - call() maps argument errors to FormatterFailedError

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from pluralex.diagnostics import ErrorTemplate, FormatterFailedError, FormatterNotFoundError

__all__ = ["Formatter", "FormatterRegistry"]

# Formatters receive the (possibly already transformed) argument value and
# return the next value. Values are application-defined.
type Formatter = Callable[[Any], Any]


class FormatterRegistry:
    """Manages formatters referenced by templates.

    Supports dict-like introspection:
        - list_formatters(): List all registered formatter names
        - __iter__: Iterate over formatter names
        - __len__: Count registered formatters
        - __contains__: Check if formatter exists (supports 'in' operator)

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Thread Safety:
        Not synchronized. Register formatters before sharing the registry
        across threads; lookups on a fully configured registry are safe.

    Example:
        >>> registry = FormatterRegistry()
        >>> registry.register("timesTen", lambda value: value * 10)
        >>> "timesTen" in registry
        True
        >>> registry.call("timesTen", 4)
        40
    """

    __slots__ = ("_formatters",)

    def __init__(self) -> None:
        """Initialize empty formatter registry."""
        self._formatters: dict[str, Formatter] = {}

    @classmethod
    def from_mapping(cls, formatters: Mapping[str, Formatter]) -> "FormatterRegistry":
        """Create a registry from a name -> callable mapping."""
        registry = cls()
        for name, func in formatters.items():
            registry.register(name, func)
        return registry

    def register(self, name: str, func: Formatter) -> None:
        """Register a formatter under name, replacing any previous one.

        Args:
            name: Name used in templates (after "|")
            func: Callable value -> value

        Raises:
            ValueError: If name is empty or surrounded by whitespace
            TypeError: If func is not callable
        """
        if not name or name != name.strip():
            msg = f"Invalid formatter name: {name!r}"
            raise ValueError(msg)
        if not callable(func):
            msg = f"Formatter '{name}' must be callable, got {type(func).__name__}"
            raise TypeError(msg)
        self._formatters[name] = func

    def resolve(self, name: str) -> Formatter:
        """Look up a formatter by name.

        Raises:
            FormatterNotFoundError: If name is not registered
        """
        func = self._formatters.get(name)
        if func is None:
            raise FormatterNotFoundError(
                ErrorTemplate.formatter_not_found(name), formatter_name=name
            )
        return func

    def call(self, name: str, value: Any) -> Any:
        """Apply a formatter to value.

        Only TypeError and ValueError are wrapped: they typically mean the
        value has the wrong type or shape for the formatter. Other
        exceptions indicate bugs in the formatter and propagate unchanged.

        Raises:
            FormatterNotFoundError: If name is not registered
            FormatterFailedError: If the formatter raised TypeError/ValueError
        """
        func = self.resolve(name)
        try:
            return func(value)
        except (TypeError, ValueError) as e:
            raise FormatterFailedError(
                ErrorTemplate.formatter_failed(name, str(e)), formatter_name=name
            ) from e

    def has_formatter(self, name: str) -> bool:
        """Check if formatter is registered."""
        return name in self._formatters

    def list_formatters(self) -> list[str]:
        """List all registered formatter names in registration order."""
        return list(self._formatters.keys())

    def copy(self) -> "FormatterRegistry":
        """Shallow copy, so callers can extend a shared registry in isolation."""
        new_registry = FormatterRegistry()
        new_registry._formatters = self._formatters.copy()
        return new_registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    def __repr__(self) -> str:
        return f"FormatterRegistry(formatters={len(self._formatters)})"
