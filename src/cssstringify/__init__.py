from .stringify import (
    ATTRIBUTE_VALUE_CHARS,
    NAME_CHARS,
    PSEUDO_VALUE_CHARS,
    StringifyError,
    escape_name,
    stringify,
    stringify_sequence,
    stringify_token,
)
from .types import (
    AttributeAction,
    AttributeSelector,
    IgnoreCase,
    PseudoElementSelector,
    PseudoSelector,
    SelectorList,
    SelectorSequence,
    SelectorType,
    TagSelector,
    Token,
    Traversal,
    UniversalSelector,
    is_traversal,
)

__all__ = [
    "ATTRIBUTE_VALUE_CHARS",
    "NAME_CHARS",
    "PSEUDO_VALUE_CHARS",
    "AttributeAction",
    "AttributeSelector",
    "IgnoreCase",
    "PseudoElementSelector",
    "PseudoSelector",
    "SelectorList",
    "SelectorSequence",
    "SelectorType",
    "StringifyError",
    "TagSelector",
    "Token",
    "Traversal",
    "UniversalSelector",
    "escape_name",
    "is_traversal",
    "stringify",
    "stringify_sequence",
    "stringify_token",
]
