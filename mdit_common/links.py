"""Parsers for the ``<destination>`` and ``"title"`` parts of links."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import unescape_all

__all__ = ["LinkFragment", "parse_link_destination", "parse_link_title"]

_MAX_PAREN_NESTING = 32


@dataclass(frozen=True)
class LinkFragment:
    """A parsed part of a link.

    ``pos`` is the index just past the fragment, ``lines`` the number of
    line breaks inside it and ``text`` its unescaped content.
    """

    pos: int
    lines: int
    text: str


def _is_space_or_control(ch: str) -> bool:
    return ch <= " " or ch == "\x7f"


def _parse_bracketed_destination(text: str, start: int, end: int) -> LinkFragment | None:
    chars = iter(text[start + 1 : end])
    pos = start + 1
    for ch in chars:
        if ch in "\n<":
            return None
        if ch == ">":
            return LinkFragment(pos + 1, 0, unescape_all(text[start + 1 : pos]))
        if ch == "\\":
            if next(chars, None) is None:
                return None
            pos += 2
        else:
            pos += 1
    return None


def _parse_bare_destination(text: str, start: int, end: int) -> LinkFragment | None:
    chars = iter(text[start:end])
    pos = start
    level = 0
    for ch in chars:
        if _is_space_or_control(ch):
            break
        if ch == "\\":
            escaped = next(chars, None)
            if escaped is None or escaped == " ":
                break
            pos += 2
        elif ch == "(":
            level += 1
            if level > _MAX_PAREN_NESTING:
                return None
            pos += 1
        elif ch == ")":
            if level == 0:
                break
            level -= 1
            pos += 1
        else:
            pos += 1

    if level != 0:
        return None
    return LinkFragment(pos, 0, unescape_all(text[start:pos]))


def parse_link_destination(text: str, start: int, end: int) -> LinkFragment | None:
    """Parse a link destination, ``<href>`` or bare, in ``text[start:end]``.

    Returns None if no valid destination starts at ``start``.
    """
    if text[start:end].startswith("<"):
        return _parse_bracketed_destination(text, start, end)
    return _parse_bare_destination(text, start, end)


_TITLE_CLOSERS = {'"': '"', "'": "'", "(": ")"}


def parse_link_title(text: str, start: int, end: int) -> LinkFragment | None:
    """Parse a link title, ``"title"``, ``'title'`` or ``(title)``, in ``text[start:end]``.

    Returns None if no valid title starts at ``start``.
    """
    chars = iter(text[start:end])
    marker = _TITLE_CLOSERS.get(next(chars, ""))
    if marker is None:
        return None

    pos = start + 1
    lines = 0
    for ch in chars:
        if ch == marker:
            return LinkFragment(pos + 1, lines, unescape_all(text[start + 1 : pos]))
        if ch == "(" and marker == ")":
            return None
        if ch == "\n":
            lines += 1
            pos += 1
        elif ch == "\\":
            if next(chars, None) is None:
                return None
            pos += 2
        else:
            pos += 1
    return None