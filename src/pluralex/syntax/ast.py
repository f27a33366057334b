"""Template part model.

In-memory representation of a parsed template. Data only: every node is a
frozen, slotted dataclass, so part sequences are immutable, hashable and
safe to share between threads once parsed.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from pluralex.enums import PluralCategory

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Argument identity
    "PositionalKey",
    "NamedKey",
    "ArgumentKey",
    # Parts
    "Text",
    "Argument",
    "PluralValue",
    "PluralForm",
    "PluralBlock",
    # Type aliases
    "FormElement",
    "Part",
]

# ============================================================================
# ARGUMENT IDENTITY
# ============================================================================


@dataclass(frozen=True, slots=True)
class PositionalKey:
    """Argument bound by zero-based position: {0}"""

    index: int

    def __post_init__(self) -> None:
        """Validate index invariant."""
        if self.index < 0:
            msg = f"Positional index must be >= 0, got {self.index}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True, slots=True)
class NamedKey:
    """Argument bound by name: {name}"""

    name: str

    def __str__(self) -> str:
        return self.name


type ArgumentKey = PositionalKey | NamedKey


# ============================================================================
# PARTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text, emitted verbatim."""

    value: str


@dataclass(frozen=True, slots=True)
class Argument:
    """Argument placeholder.

    Examples:
        {0}                 -> Argument(PositionalKey(0))
        {name:string}       -> Argument(NamedKey("name"), type_tag="string")
        {0|upper|exclaim}   -> Argument(PositionalKey(0), formatters=("upper", "exclaim"))
        {nickname?}         -> Argument(NamedKey("nickname"), optional=True)

    Attributes:
        key: Positional or keyed identity
        type_tag: Opaque declared type, used only for static validation
        formatters: Formatter names applied left to right before insertion
        optional: Declared with a trailing "?"
    """

    key: ArgumentKey
    type_tag: str | None = None
    formatters: tuple[str, ...] = ()
    optional: bool = False


@dataclass(frozen=True, slots=True)
class PluralValue:
    """The value driving the enclosing plural block: {?}

    Only valid inside a plural form.
    """


type FormElement = Text | Argument | PluralValue


@dataclass(frozen=True, slots=True)
class PluralForm:
    """One labeled alternative of a plural block."""

    category: PluralCategory
    elements: tuple[FormElement, ...]


@dataclass(frozen=True, slots=True)
class PluralBlock:
    """Plural placeholder selecting a form by plural category.

    Examples:
        apple{{s}}                   -> forms one="" / other="s", implicit key
        {{count:item|items}}         -> forms one / other, bound to {count}
        {{none|one|{?} many}}        -> forms zero / one / other

    Attributes:
        key: Argument whose numeric value drives selection
        forms: Alternatives in source order
        explicit_key: Key was written in the block ("key:") rather than inferred
    """

    key: ArgumentKey
    forms: tuple[PluralForm, ...]
    explicit_key: bool = False


type Part = Text | Argument | PluralBlock
