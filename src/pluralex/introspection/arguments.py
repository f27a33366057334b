"""Argument extraction for template part sequences.

Walks a parsed template and reconciles every placeholder and plural-bound
key into one descriptor per argument identity, then checks the template's
argument numbering:

- a template's arguments are either all positional or all keyed;
- distinct positional indices form the contiguous range 0..max.

Only the highest-priority problem is reported, as a pair of warning
diagnostics, so a template with mixed kinds is not also reported for gaps.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, assert_never

from pluralex.constants import NUMBER_TYPE, UNKNOWN_TYPE
from pluralex.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate
from pluralex.enums import ArgumentKind
from pluralex.syntax import parse
from pluralex.syntax.ast import (
    Argument,
    NamedKey,
    PluralBlock,
    PositionalKey,
    Text,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from pluralex.runtime.cache import ParseCache
    from pluralex.syntax.ast import ArgumentKey, Part

__all__ = [
    "ArgumentDescriptor",
    "TemplateIntrospection",
    "extract_arguments",
    "introspect_template",
]


# ==============================================================================
# ARGUMENT MODEL (Frozen Dataclasses with Slots)
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ArgumentDescriptor:
    """Reconciled metadata for one argument of a template."""

    key: ArgumentKey
    """Positional index or keyed name."""

    type_tag: str | None = None
    """Declared type tag (last non-empty declaration wins)."""

    formatters: tuple[str, ...] = ()
    """Formatter chain (last non-empty chain wins)."""

    order: int = 0
    """Position of the first reference among the template's arguments."""

    pluralized: bool = False
    """True if the argument drives at least one plural block."""

    optional: bool = False
    """True if any reference marked the argument optional."""

    @property
    def kind(self) -> ArgumentKind:
        """Positional or keyed."""
        match self.key:
            case PositionalKey():
                return ArgumentKind.POSITIONAL
            case NamedKey():
                return ArgumentKind.KEYED
            case _:
                assert_never(self.key)

    @property
    def resolved_type(self) -> str:
        """Declared type, "number" for untyped plural drivers, else "unknown".

        Example:
            >>> extract_arguments(parse("{0} apple{{s}}"), "T")[0][0].resolved_type
            'number'
        """
        if self.type_tag:
            return self.type_tag
        if self.pluralized:
            return NUMBER_TYPE
        return UNKNOWN_TYPE

    @property
    def name(self) -> str:
        """Identity as written in templates ("0", "count")."""
        return str(self.key)


@dataclass(frozen=True, slots=True)
class TemplateIntrospection:
    """Complete introspection result for one template.

    Attributes:
        template_id: Template identifier
        parts: Parsed part sequence
        arguments: Argument descriptors (positional by index, then keyed)
        diagnostics: Structural warnings (empty when consistent)
    """

    template_id: str
    parts: tuple[Part, ...]
    arguments: tuple[ArgumentDescriptor, ...] = field(default=())
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def is_consistent(self) -> bool:
        """True when the template produced no diagnostics."""
        return not self.diagnostics

    @property
    def is_keyed(self) -> bool:
        """True when the template has arguments and all of them are keyed."""
        return bool(self.arguments) and all(
            a.kind is ArgumentKind.KEYED for a in self.arguments
        )

    def positional(self) -> tuple[ArgumentDescriptor, ...]:
        """Positional descriptors sorted by index."""
        return tuple(a for a in self.arguments if a.kind is ArgumentKind.POSITIONAL)

    def keyed(self) -> tuple[ArgumentDescriptor, ...]:
        """Keyed descriptors in first-seen order."""
        return tuple(a for a in self.arguments if a.kind is ArgumentKind.KEYED)

    def get(self, name: str | int) -> ArgumentDescriptor | None:
        """Descriptor for an identity ("0", 0 or "count"), or None."""
        wanted = str(name)
        return next((a for a in self.arguments if a.name == wanted), None)


# ==============================================================================
# EXTRACTION
# ==============================================================================


class _DescriptorTable:
    """Mutable accumulator reconciling repeated references."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: dict[ArgumentKey, ArgumentDescriptor] = {}

    def add(
        self,
        key: ArgumentKey,
        *,
        type_tag: str | None = None,
        formatters: tuple[str, ...] = (),
        pluralized: bool = False,
        optional: bool = False,
    ) -> None:
        current = self._entries.get(key)
        if current is None:
            self._entries[key] = ArgumentDescriptor(
                key=key,
                type_tag=type_tag or None,
                formatters=formatters,
                order=len(self._entries),
                pluralized=pluralized,
                optional=optional,
            )
            return
        self._entries[key] = ArgumentDescriptor(
            key=key,
            type_tag=type_tag or current.type_tag,
            formatters=formatters or current.formatters,
            order=current.order,
            pluralized=current.pluralized or pluralized,
            optional=current.optional or optional,
        )

    def descriptors(self) -> tuple[ArgumentDescriptor, ...]:
        positional = sorted(
            (d for d in self._entries.values() if isinstance(d.key, PositionalKey)),
            key=lambda d: d.key.index,  # type: ignore[union-attr]
        )
        keyed = sorted(
            (d for d in self._entries.values() if isinstance(d.key, NamedKey)),
            key=lambda d: d.order,
        )
        return (*positional, *keyed)


def _iter_arguments(parts: Sequence[Part]) -> Iterator[Argument | PluralBlock]:
    """Yield arguments and plural blocks in source order, forms included."""
    for part in parts:
        match part:
            case Text():
                continue
            case Argument():
                yield part
            case PluralBlock():
                yield part
                for form in part.forms:
                    for element in form.elements:
                        if isinstance(element, Argument):
                            yield element
            case _:
                assert_never(part)


def _check_numbering(
    descriptors: tuple[ArgumentDescriptor, ...], template_id: str
) -> tuple[Diagnostic, ...]:
    indices = {d.key.index for d in descriptors if isinstance(d.key, PositionalKey)}
    names = [d for d in descriptors if isinstance(d.key, NamedKey)]

    if indices and names:
        expected = next(i for i in range(len(indices) + 1) if i not in indices)
        first_keyed = min(names, key=lambda d: d.order)
        return (
            ErrorTemplate.argument_expected(
                expected,
                first_keyed.name,
                template_id,
                code=DiagnosticCode.MIXED_ARGUMENT_KINDS,
            ),
            ErrorTemplate.mixed_argument_kinds(template_id),
        )

    if indices and max(indices) != len(indices) - 1:
        expected = next(i for i in range(max(indices)) if i not in indices)
        found = min(i for i in indices if i > expected)
        return (
            ErrorTemplate.argument_expected(
                expected,
                str(found),
                template_id,
                code=DiagnosticCode.NON_CONTIGUOUS_INDEX,
            ),
            ErrorTemplate.skipped_index(template_id),
        )

    return ()


def extract_arguments(
    parts: Sequence[Part], template_id: str
) -> tuple[tuple[ArgumentDescriptor, ...], tuple[Diagnostic, ...]]:
    """Extract the argument model of a parsed template.

    Args:
        parts: Parsed template
        template_id: Identifier carried by the diagnostics

    Returns:
        Tuple of (descriptors, diagnostics). Descriptors list positional
        arguments by index, then keyed arguments in first-seen order.

    Example:
        >>> _, diagnostics = extract_arguments(parse("{hi} {0}"), "TEST")
        >>> [d.message for d in diagnostics]
        ['argument {1} expected, but {hi} found', "you can't mix keyed and index-based args"]
    """
    table = _DescriptorTable()
    for node in _iter_arguments(parts):
        match node:
            case Argument():
                table.add(
                    node.key,
                    type_tag=node.type_tag,
                    formatters=node.formatters,
                    optional=node.optional,
                )
            case PluralBlock():
                table.add(node.key, pluralized=True)

    descriptors = table.descriptors()
    return descriptors, _check_numbering(descriptors, template_id)


def introspect_template(
    raw: str, template_id: str, *, cache: ParseCache | None = None
) -> TemplateIntrospection:
    """Parse and introspect a raw template.

    Args:
        raw: Template source
        template_id: Template identifier
        cache: Parse cache to use (default: parse directly)

    Returns:
        TemplateIntrospection with parts, descriptors and diagnostics
    """
    if cache is not None:
        parts = cache.get_parts(raw)
    else:
        parts = parse(raw)

    arguments, diagnostics = extract_arguments(parts, template_id)
    return TemplateIntrospection(
        template_id=template_id,
        parts=parts,
        arguments=arguments,
        diagnostics=diagnostics,
    )
