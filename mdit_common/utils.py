"""Helpers for writing markdown rules: entities, escaping, indentation and tabs."""

from __future__ import annotations

import re
import unicodedata
from html.entities import html5

__all__ = [
    "is_valid_entity_code",
    "get_entity_from_str",
    "replace_entity_pattern",
    "unescape_all",
    "escape_html",
    "normalize_reference",
    "rfind_and_count",
    "find_indent_of",
    "cut_right_whitespace_with_tabstops",
    "calc_right_whitespace_with_tabstops",
    "is_punct_char",
]

_UNESCAPE_MD_RE = r"""\\([!"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~])"""
_ENTITY_RE = r"&([A-Za-z#][A-Za-z0-9]{1,31});"

_DIGITAL_ENTITY_RE = re.compile(r"&#(x[a-f0-9]{1,8}|[0-9]{1,8});", re.IGNORECASE)
_UNESCAPE_ALL_RE = re.compile(f"{_UNESCAPE_MD_RE}|{_ENTITY_RE}")
_SPACE_RE = re.compile(r"\s+")

_HTML_ESCAPES = str.maketrans({"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;"})

_PUNCT_CATEGORIES = frozenset({"Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po"})


def is_valid_entity_code(code: int) -> bool:
    """Return True if a code taken from a numeric entity is a safe, printable character."""
    if 0xD800 <= code <= 0xDFFF:
        return False
    if 0xFDD0 <= code <= 0xFDEF:
        return False
    if (code & 0xFFFF) in (0xFFFF, 0xFFFE):
        return False
    if code <= 0x08:
        return False
    if code == 0x0B:
        return False
    if 0x0E <= code <= 0x1F:
        return False
    if 0x7F <= code <= 0x9F:
        return False
    if code > 0x10FFFF:
        return False
    return True


def get_entity_from_str(text: str) -> str | None:
    """Return the characters a named entity such as ``&amp;`` stands for, or None."""
    if len(text) < 3 or not text.startswith("&") or not text.endswith(";"):
        return None
    return html5.get(text[1:])


def replace_entity_pattern(text: str) -> str | None:
    """Decode a named or numeric entity, or return None if it is not a valid one."""
    entity = get_entity_from_str(text)
    if entity is not None:
        return entity
    match = _DIGITAL_ENTITY_RE.fullmatch(text)
    if match is None:
        return None
    digits = match.group(1)
    if digits[0] in "xX":
        code = int(digits[1:], 16)
    else:
        code = int(digits, 10)
    return chr(code) if is_valid_entity_code(code) else None


def _unescape_match(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if escaped is not None:
        return escaped
    whole = match.group(0)
    replacement = replace_entity_pattern(whole)
    return whole if replacement is None else replacement


def unescape_all(text: str) -> str:
    """Unescape both entities (``&quot;``) and backslash escapes (``\\"``)."""
    if "\\" not in text and "&" not in text:
        return text
    return _UNESCAPE_ALL_RE.sub(_unescape_match, text)


def escape_html(text: str) -> str:
    """Escape ``" < > &`` with the corresponding HTML entities."""
    return text.translate(_HTML_ESCAPES)


def normalize_reference(text: str) -> str:
    """Case-fold and collapse whitespace so equal reference labels compare equal."""
    collapsed = _SPACE_RE.sub(" ", text.strip())
    return collapsed.lower().upper()


def rfind_and_count(source: str, char: str) -> int:
    """Count characters after the last occurrence of ``char`` (all of them if absent)."""
    index = source.rfind(char)
    return len(source) if index < 0 else len(source) - index - 1


def find_indent_of(line: str, pos: int) -> tuple[int, int]:
    """Measure indent from ``pos`` with tabstop 4; return (indent, first non-space index)."""
    indent = 0
    for ch in line[pos:]:
        if ch == "\t":
            indent += 4 - rfind_and_count(line[:pos], "\t") % 4
        elif ch == " ":
            indent += 1
        else:
            break
        pos += 1
    return indent, pos


def calc_right_whitespace_with_tabstops(source: str, indent: int) -> tuple[int, int]:
    """Return (spaces to prepend, index to cut from) for a trailing width of ``indent``."""
    start = len(source)
    chars = reversed(list(enumerate(source)))

    while indent > 0:
        item = next(chars, None)
        if item is None:
            start = 0
            break
        pos, ch = item
        if ch == "\t":
            # the previous tab always ends on a tabstop, so counting can stop there
            tab_width = 4 - rfind_and_count(source[:pos], "\t") % 4
            if indent < tab_width:
                return indent, start
            indent -= tab_width
        else:
            indent -= 1
        start = pos

    return 0, start


def cut_right_whitespace_with_tabstops(source: str, indent: int) -> str:
    """Return the trailing part of ``source`` that is ``indent`` columns wide.

    A tab that would be split is replaced with the matching number of spaces.
    """
    num_spaces, start = calc_right_whitespace_with_tabstops(source, indent)
    return " " * num_spaces + source[start:]


def is_punct_char(ch: str) -> bool:
    """Return True if the character belongs to a Unicode punctuation category."""
    return unicodedata.category(ch) in _PUNCT_CATEGORIES