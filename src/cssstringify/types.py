# Selector token model consumed by the stringifier
# Mirrors the flat token stream produced by css-what style parsers

from __future__ import annotations

from typing import Any, Literal, Union


class SelectorType:
    CHILD: str = "child"  # a > b
    PARENT: str = "parent"  # a < b (non-standard)
    SIBLING: str = "sibling"  # a ~ b
    ADJACENT: str = "adjacent"  # a + b
    DESCENDANT: str = "descendant"  # a b
    COLUMN_COMBINATOR: str = "column-combinator"  # a || b
    UNIVERSAL: str = "universal"  # *
    TAG: str = "tag"  # div
    PSEUDO_ELEMENT: str = "pseudo-element"  # ::before
    PSEUDO: str = "pseudo"  # :hover, :not(...)
    ATTRIBUTE: str = "attribute"  # [href], #id, .class


TRAVERSAL_TYPES: frozenset[str] = frozenset(
    {
        SelectorType.CHILD,
        SelectorType.PARENT,
        SelectorType.SIBLING,
        SelectorType.ADJACENT,
        SelectorType.DESCENDANT,
        SelectorType.COLUMN_COMBINATOR,
    }
)


class AttributeAction:
    EQUALS: str = "equals"  # [a="b"]
    ELEMENT: str = "element"  # [a~="b"]
    START: str = "start"  # [a^="b"]
    END: str = "end"  # [a$="b"]
    ANY: str = "any"  # [a*="b"]
    NOT: str = "not"  # [a!="b"]
    HYPHEN: str = "hyphen"  # [a|="b"]
    EXISTS: str = "exists"  # [a]


class IgnoreCase:
    """Case sensitivity flag of an attribute selector.

    ``QUIRKS`` is what a parser records for ``#id`` and ``.class``: matching
    follows the document mode. ``UNSET`` is a bracketed selector written
    without a flag. Neither renders a suffix, but only ``QUIRKS`` may be
    collapsed back into shorthand.
    """

    INSENSITIVE: Literal[True] = True  # [a="b" i]
    SENSITIVE: Literal[False] = False  # [a="b" s]
    QUIRKS: Literal["quirks"] = "quirks"
    UNSET: None = None


IgnoreCaseMode = Union[bool, Literal["quirks"], None]


class _BaseToken:
    __slots__ = ()

    type: str

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _BaseToken):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return all(getattr(self, slot) == getattr(other, slot) for slot in self.__slots__)


class Traversal(_BaseToken):
    """A combinator between two compound selectors."""

    __slots__ = ("type",)

    def __init__(self, selector_type: str) -> None:
        if selector_type not in TRAVERSAL_TYPES:
            raise ValueError(f"Not a combinator type: {selector_type!r}")
        self.type = selector_type

    def __repr__(self) -> str:
        return f"Traversal({self.type!r})"


class UniversalSelector(_BaseToken):
    __slots__ = ("namespace",)

    type: str = SelectorType.UNIVERSAL
    namespace: str | None

    def __init__(self, namespace: str | None = None) -> None:
        self.namespace = namespace

    def __repr__(self) -> str:
        if self.namespace is not None:
            return f"UniversalSelector(namespace={self.namespace!r})"
        return "UniversalSelector()"


class TagSelector(_BaseToken):
    __slots__ = ("name", "namespace")

    type: str = SelectorType.TAG
    name: str
    namespace: str | None

    def __init__(self, name: str, namespace: str | None = None) -> None:
        self.name = name
        self.namespace = namespace

    def __repr__(self) -> str:
        if self.namespace is not None:
            return f"TagSelector({self.name!r}, namespace={self.namespace!r})"
        return f"TagSelector({self.name!r})"


class PseudoElementSelector(_BaseToken):
    __slots__ = ("name",)

    type: str = SelectorType.PSEUDO_ELEMENT
    name: str

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"PseudoElementSelector({self.name!r})"


class PseudoSelector(_BaseToken):
    """A pseudo-class, optionally with a string or nested selector argument."""

    __slots__ = ("data", "name")

    type: str = SelectorType.PSEUDO
    name: str
    data: str | list[list[Any]] | None

    def __init__(self, name: str, data: str | list[list[Any]] | None = None) -> None:
        self.name = name
        self.data = data  # None for :hover, str for :lang(en), selector list for :not(a, b)

    def __repr__(self) -> str:
        if self.data is not None:
            return f"PseudoSelector({self.name!r}, data={self.data!r})"
        return f"PseudoSelector({self.name!r})"


class AttributeSelector(_BaseToken):
    """An attribute test; also the parsed form of ``#id`` and ``.class``."""

    __slots__ = ("action", "ignore_case", "name", "namespace", "value")

    type: str = SelectorType.ATTRIBUTE
    name: str
    action: str
    value: str
    ignore_case: IgnoreCaseMode
    namespace: str | None

    def __init__(
        self,
        name: str,
        action: str,
        value: str = "",
        ignore_case: IgnoreCaseMode = IgnoreCase.UNSET,
        namespace: str | None = None,
    ) -> None:
        self.name = name
        self.action = action
        self.value = value  # Ignored when action is EXISTS
        self.ignore_case = ignore_case
        self.namespace = namespace

    def __repr__(self) -> str:
        parts = [f"AttributeSelector({self.name!r}, {self.action!r}"]
        if self.action != AttributeAction.EXISTS:
            parts.append(f", value={self.value!r}")
        if self.ignore_case is not None:
            parts.append(f", ignore_case={self.ignore_case!r}")
        if self.namespace is not None:
            parts.append(f", namespace={self.namespace!r}")
        parts.append(")")
        return "".join(parts)


Token = Union[
    Traversal,
    UniversalSelector,
    TagSelector,
    PseudoElementSelector,
    PseudoSelector,
    AttributeSelector,
]

# One compound/complex selector, and a comma-separated list of them
SelectorSequence = list[Token]
SelectorList = list[SelectorSequence]


def is_traversal(token: Token) -> bool:
    """Return True if ``token`` is a combinator rather than a simple selector."""
    return token.type in TRAVERSAL_TYPES
