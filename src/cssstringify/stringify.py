"""Selector serialization: turns a parsed token tree back into selector text."""

from __future__ import annotations

from collections.abc import Iterable

from .types import AttributeAction, AttributeSelector, IgnoreCase, PseudoSelector, SelectorType, Token


class StringifyError(RuntimeError):
    """Raised when a token has no textual form (renderer and model out of sync)."""


# Characters that need a backslash inside a quoted attribute value
ATTRIBUTE_VALUE_CHARS: frozenset[str] = frozenset({"\\", '"'})

# Pseudo-class arguments are not quoted, so parentheses must be escaped too
PSEUDO_VALUE_CHARS: frozenset[str] = ATTRIBUTE_VALUE_CHARS | {"(", ")"}

# Identifiers must not be misread as combinators, operators or separators
NAME_CHARS: frozenset[str] = PSEUDO_VALUE_CHARS | {
    "~",
    "^",
    "$",
    "*",
    "+",
    "!",
    "|",
    ":",
    "[",
    "]",
    " ",
    ".",
}

_COMBINATORS: dict[str, str] = {
    SelectorType.CHILD: " > ",
    SelectorType.PARENT: " < ",
    SelectorType.SIBLING: " ~ ",
    SelectorType.ADJACENT: " + ",
    SelectorType.DESCENDANT: " ",
    SelectorType.COLUMN_COMBINATOR: " || ",
}

_ACTION_SYMBOLS: dict[str, str] = {
    AttributeAction.EQUALS: "",
    AttributeAction.ELEMENT: "~",
    AttributeAction.START: "^",
    AttributeAction.END: "$",
    AttributeAction.ANY: "*",
    AttributeAction.NOT: "!",
    AttributeAction.HYPHEN: "|",
}


def escape_name(text: str, forbidden: frozenset[str] | set[str]) -> str:
    """Prefix every character of ``text`` found in ``forbidden`` with a backslash.

    The input string is returned as-is when nothing needed escaping.
    """
    parts: list[str] = []
    start = 0
    for pos, ch in enumerate(text):
        if ch in forbidden:
            # Copy the untouched run, then the escaped character
            parts.append(text[start:pos])
            parts.append("\\")
            parts.append(ch)
            start = pos + 1

    if not parts:
        return text
    parts.append(text[start:])
    return "".join(parts)


def _format_namespace(namespace: str | None) -> str:
    if namespace is None:
        return ""
    if namespace == "*":
        return "*|"
    return f"{escape_name(namespace, NAME_CHARS)}|"


def _namespaced_name(name: str, namespace: str | None) -> str:
    return _format_namespace(namespace) + escape_name(name, NAME_CHARS)


def _action_symbol(action: str) -> str:
    try:
        return _ACTION_SYMBOLS[action]
    except KeyError:
        # EXISTS has no operator and is rendered before we get here
        raise StringifyError(f"No operator for attribute action {action!r}") from None


def _case_suffix(ignore_case: bool | str | None) -> str:
    if ignore_case is IgnoreCase.UNSET or ignore_case == IgnoreCase.QUIRKS:
        return ""
    return " i" if ignore_case else " s"


def _stringify_attribute(token: AttributeSelector) -> str:
    name: str = token.name
    action: str = token.action
    value: str = token.value

    # Shorthand only when it parses back to exactly this token
    if token.ignore_case == IgnoreCase.QUIRKS and token.namespace is None:
        if name == "id" and action == AttributeAction.EQUALS:
            return f"#{escape_name(value, NAME_CHARS)}"
        if name == "class" and action == AttributeAction.ELEMENT:
            return f".{escape_name(value, NAME_CHARS)}"

    named = _namespaced_name(name, token.namespace)
    if action == AttributeAction.EXISTS:
        return f"[{named}]"

    symbol = _action_symbol(action)
    escaped = escape_name(value, ATTRIBUTE_VALUE_CHARS)
    return f'[{named}{symbol}="{escaped}"{_case_suffix(token.ignore_case)}]'


def _stringify_pseudo(token: PseudoSelector) -> str:
    name = escape_name(token.name, NAME_CHARS)
    data = token.data
    if data is None:
        return f":{name}"
    if isinstance(data, str):
        return f":{name}({escape_name(data, PSEUDO_VALUE_CHARS)})"
    # Nested selector list, e.g. :not(a, b)
    return f":{name}({stringify(data)})"


def stringify_token(token: Token) -> str:
    """Convert a single selector token to its textual form."""
    token_type = token.type

    combinator = _COMBINATORS.get(token_type)
    if combinator is not None:
        return combinator

    if token_type == SelectorType.UNIVERSAL:
        return f"{_format_namespace(token.namespace)}*"

    if token_type == SelectorType.TAG:
        return _namespaced_name(token.name, token.namespace)

    if token_type == SelectorType.PSEUDO_ELEMENT:
        return f"::{escape_name(token.name, NAME_CHARS)}"

    if token_type == SelectorType.PSEUDO:
        return _stringify_pseudo(token)

    if token_type == SelectorType.ATTRIBUTE:
        return _stringify_attribute(token)

    raise StringifyError(f"Unknown selector token type: {token_type!r}")


def stringify_sequence(tokens: Iterable[Token]) -> str:
    """Concatenate the tokens of one selector; combinators carry their own spacing."""
    return "".join(stringify_token(token) for token in tokens)


def stringify(selector: Iterable[Iterable[Token]]) -> str:
    """Turn a parsed selector list back into a string.

    Each inner sequence is one selector; alternatives are joined with ``", "``.

    >>> from cssstringify.types import TagSelector, Traversal, SelectorType
    >>> stringify([[TagSelector("a"), Traversal(SelectorType.CHILD), TagSelector("b")]])
    'a > b'
    """
    return ", ".join(stringify_sequence(tokens) for tokens in selector)
