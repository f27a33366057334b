"""TemplateBundle - Main API for single-locale template rendering.

Python 3.13+. External dependency: Babel (CLDR locale data).
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pluralex.diagnostics import Diagnostic, ValidationResult
from pluralex.introspection import TemplateIntrospection, introspect_template
from pluralex.validation import validate_templates

from .cache import ParseCache
from .formatter_registry import Formatter, FormatterRegistry
from .formatters import create_default_registry
from .plural_rules import LocalePluralResolver, PluralOperand, PluralResolver
from .translator import TemplateTranslator

__all__ = ["TemplateBundle"]

logger = logging.getLogger(__name__)

# Debug messages are high-volume; shorter output keeps logs manageable.
_LOG_TRUNCATE_DEBUG: int = 50


class TemplateBundle:
    """Template dictionary for one locale.

    Holds raw templates keyed by template id, parses them through an owned
    (or injected) ParseCache and renders them with the locale's plural
    rules and formatters.

    Error handling:
        - Structural problems (mixed or skipped argument numbering) are
          returned from add_templates() and logged, never raised
        - Unknown template ids render as the id itself (logged)
        - Unknown or failing formatters raise from format()

    Thread Safety:
        The parse cache is synchronized. Templates and formatters are not:
        add them before sharing the bundle across threads.

    Example:
        >>> bundle = TemplateBundle("en")
        >>> bundle.add_templates({"APPLES": "{0} apple{{s}}", "HI": "Hi {name}!"})
        ()
        >>> bundle.format("APPLES", 2)
        '2 apples'
        >>> bundle.format("HI", name="Ada")
        'Hi Ada!'
    """

    __slots__ = (
        "_cache",
        "_formatters",
        "_locale",
        "_plural_resolver",
        "_templates",
        "_translator",
    )

    def __init__(
        self,
        locale: str,
        /,
        *,
        formatters: FormatterRegistry | Mapping[str, Formatter] | None = None,
        plural_resolver: PluralResolver | Callable[[PluralOperand], str] | None = None,
        cache: ParseCache | None = None,
    ) -> None:
        """Initialize bundle for a locale.

        Args:
            locale: Locale code (e.g., "en_US", "lv", "pl-PL")
            formatters: Formatter registry or mapping (default: built-ins for locale)
            plural_resolver: Plural rules (default: CLDR rules for locale)
            cache: Parse cache (default: new cache owned by this bundle)

        Raises:
            ValueError: If locale is empty
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)

        self._locale = locale
        self._templates: dict[str, str] = {}

        if formatters is None:
            self._formatters = create_default_registry(locale)
        elif isinstance(formatters, FormatterRegistry):
            self._formatters = formatters
        else:
            self._formatters = FormatterRegistry.from_mapping(formatters)

        self._plural_resolver = (
            plural_resolver if plural_resolver is not None else LocalePluralResolver(locale)
        )
        self._cache = cache if cache is not None else ParseCache()
        self._translator = TemplateTranslator(self._plural_resolver, self._formatters)

        logger.info(
            "TemplateBundle initialized for locale: %s (formatters=%d)",
            locale,
            len(self._formatters),
        )

    @property
    def locale(self) -> str:
        """Locale code for this bundle (read-only)."""
        return self._locale

    @property
    def formatters(self) -> FormatterRegistry:
        """Formatter registry used for rendering."""
        return self._formatters

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(TemplateBundle("lv_LV"))
            "TemplateBundle(locale='lv_LV', templates=0)"
        """
        return f"TemplateBundle(locale={self._locale!r}, templates={len(self._templates)})"

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: object) -> bool:
        return template_id in self._templates

    def add_templates(self, templates: Mapping[str, str]) -> tuple[Diagnostic, ...]:
        """Add templates, replacing existing ones with the same id.

        Every template is parsed and checked for argument numbering
        problems. Problem templates are still added and render on a best
        effort basis.

        Args:
            templates: Mapping template id -> raw template

        Returns:
            Diagnostics for the added templates (empty when all consistent)
        """
        diagnostics: list[Diagnostic] = []
        for template_id, raw in templates.items():
            info = introspect_template(raw, template_id, cache=self._cache)
            if template_id in self._templates:
                logger.debug("Overwriting template: %s", template_id)
            self._templates[template_id] = raw
            logger.debug("Registered template: %s", template_id)
            for diagnostic in info.diagnostics:
                logger.warning("%s", diagnostic.format_warning())
            diagnostics.extend(info.diagnostics)

        logger.info(
            "Added %d templates for locale %s (%d warnings)",
            len(templates),
            self._locale,
            len(diagnostics),
        )
        return tuple(diagnostics)

    def validate(self) -> ValidationResult:
        """Validate all templates currently in the bundle.

        Returns:
            ValidationResult covering every template id
        """
        return validate_templates(self._templates, cache=self._cache)

    def has_template(self, template_id: str) -> bool:
        """Check if template exists."""
        return template_id in self._templates

    def get_template_ids(self) -> list[str]:
        """Get all template ids in insertion order."""
        return list(self._templates.keys())

    def get_template(self, template_id: str) -> str | None:
        """Raw template source, or None if absent."""
        return self._templates.get(template_id)

    def format(self, template_id: str, /, *args: Any, **kwargs: Any) -> str:
        """Render a template.

        Positional templates take positional arguments, keyed templates
        take keyword arguments.

        Args:
            template_id: Template identifier
            *args: Values for {0}, {1}, ...
            **kwargs: Values for {name} placeholders

        Returns:
            Rendered string, or template_id itself if the template is unknown

        Raises:
            ValueError: If both positional and keyword arguments are given
            FormatterNotFoundError: A referenced formatter is not registered
            FormatterFailedError: A formatter rejected its input

        Example:
            >>> bundle.format("CART", 3)
            'You have 3 items'
        """
        if args and kwargs:
            msg = "Pass either positional or keyword arguments, not both"
            raise ValueError(msg)

        raw = self._templates.get(template_id)
        if raw is None:
            logger.warning("Template '%s' not found", template_id)
            return template_id

        parts = self._cache.get_parts(raw)
        result = self._translator.translate(parts, kwargs if kwargs else args)
        logger.debug(
            "Rendered template '%s': %s", template_id, result[:_LOG_TRUNCATE_DEBUG]
        )
        return result

    def introspect(self, template_id: str) -> TemplateIntrospection:
        """Get complete introspection data for a template.

        Raises:
            KeyError: If template doesn't exist
        """
        if template_id not in self._templates:
            msg = f"Template '{template_id}' not found"
            raise KeyError(msg)
        return introspect_template(self._templates[template_id], template_id, cache=self._cache)

    def add_formatter(self, name: str, func: Formatter) -> None:
        """Register a formatter on this bundle's registry.

        Example:
            >>> bundle.add_formatter("timesTen", lambda value: value * 10)
        """
        self._formatters.register(name, func)
        logger.debug("Added custom formatter: %s", name)

    def clear_cache(self) -> None:
        """Clear the parse cache. Templates stay registered."""
        self._cache.clear()
        logger.debug("Cache manually cleared")

    def get_cache_stats(self) -> dict[str, int | float]:
        """Get parse cache statistics.

        Returns:
            Dict with size, hits, misses and hit_rate (0.0-100.0)
        """
        return self._cache.get_stats()
