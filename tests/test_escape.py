"""Tests for the escaper and its character classes."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from cssstringify import ATTRIBUTE_VALUE_CHARS, NAME_CHARS, PSEUDO_VALUE_CHARS, escape_name

CHAR_CLASSES = st.sampled_from([ATTRIBUTE_VALUE_CHARS, PSEUDO_VALUE_CHARS, NAME_CHARS])

# Text biased towards characters that need escaping
selector_text = st.text(alphabet=st.sampled_from(sorted(NAME_CHARS) + list("abc-_é9")) | st.characters())


def _unescape(text: str) -> str:
    out: list[str] = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            out.append(next(chars))
        else:
            out.append(ch)
    return "".join(out)


def _has_unescaped(text: str, forbidden: frozenset[str]) -> bool:
    escaped = False
    for ch in text:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch in forbidden:
            return True
    return escaped


def test_character_classes_nest():
    assert ATTRIBUTE_VALUE_CHARS == {"\\", '"'}
    assert PSEUDO_VALUE_CHARS == ATTRIBUTE_VALUE_CHARS | {"(", ")"}
    assert NAME_CHARS == PSEUDO_VALUE_CHARS | set("~^$*+!|:[] .")


def test_clean_input_returned_unchanged():
    text = "plain-name_1"
    assert escape_name(text, NAME_CHARS) is text


def test_empty_string():
    assert escape_name("", NAME_CHARS) == ""


def test_escapes_each_forbidden_char():
    assert escape_name("a.b c", NAME_CHARS) == "a\\.b\\ c"


def test_escapes_backslash():
    assert escape_name("a\\b", ATTRIBUTE_VALUE_CHARS) == "a\\\\b"


def test_escapes_at_both_ends():
    assert escape_name('"x"', ATTRIBUTE_VALUE_CHARS) == '\\"x\\"'


def test_consecutive_forbidden_chars():
    assert escape_name("()", PSEUDO_VALUE_CHARS) == "\\(\\)"


def test_class_only_escapes_its_members():
    assert escape_name("a.b", ATTRIBUTE_VALUE_CHARS) == "a.b"
    assert escape_name("(x)", ATTRIBUTE_VALUE_CHARS) == "(x)"


def test_accepts_plain_set():
    assert escape_name("a-b", {"-"}) == "a\\-b"


@given(text=selector_text, forbidden=CHAR_CLASSES)
def test_no_unescaped_forbidden_chars(text, forbidden):
    assert not _has_unescaped(escape_name(text, forbidden), forbidden)


@given(text=selector_text, forbidden=CHAR_CLASSES)
def test_unescape_reconstructs_input(text, forbidden):
    assert _unescape(escape_name(text, forbidden)) == text


@given(text=selector_text, forbidden=CHAR_CLASSES)
def test_identity_on_clean_input(text, forbidden):
    clean = "".join(ch for ch in text if ch not in forbidden)
    assert escape_name(clean, forbidden) == clean


@given(text=selector_text, forbidden=CHAR_CLASSES)
def test_adds_one_backslash_per_forbidden_char(text, forbidden):
    count = sum(1 for ch in text if ch in forbidden)
    assert len(escape_name(text, forbidden)) == len(text) + count
