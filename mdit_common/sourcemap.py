"""Source positions: byte offsets and their line/column equivalents."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import NamedTuple

__all__ = ["SourceWithLineStarts", "SourcePos"]


class _Mark(NamedTuple):
    offset: int
    line: int
    column: int


class SourceWithLineStarts:
    """Holds source text and maps UTF-8 byte offsets to ``(line, column)``."""

    def __init__(self, src: str) -> None:
        self.src = src
        self._char_offsets: list[int] = []
        marks = [_Mark(0, 1, 0)]
        line, column, offset = 1, 0, 0
        for index, ch in enumerate(src):
            self._char_offsets.append(offset)
            if ch == "\r" and src[index + 1 : index + 2] == "\n":
                column += 1
            elif ch in "\r\n":
                line += 1
                column = 0
                marks.append(_Mark(offset + 1, line, column))
            else:
                if column > 0 and column % 16 == 0:
                    marks.append(_Mark(offset, line, column))
                column += 1
            offset += len(ch.encode("utf-8"))
        self._marks = marks
        self._mark_offsets = [mark.offset for mark in marks]

    def position(self, byte_offset: int) -> tuple[int, int]:
        """Return ``(line, column)`` of the character at ``byte_offset``."""
        target = byte_offset + 1  # include the current character
        mark = self._marks[bisect_right(self._mark_offsets, target) - 1]
        first = bisect_left(self._char_offsets, mark.offset)
        last = bisect_left(self._char_offsets, target)
        return mark.line, mark.column + max(0, last - first)


@dataclass(frozen=True)
class SourcePos:
    """Byte offsets of a node: its first character and the one after its end."""

    start: int = 0
    end: int = 0

    @property
    def byte_offsets(self) -> tuple[int, int]:
        return self.start, self.end

    def positions(
        self, source_map: SourceWithLineStarts
    ) -> tuple[tuple[int, int], tuple[int, int]]:
        """Return ``((line_start, column_start), (line_end, column_end))``."""
        end = self.end - 1 if self.end > 0 else self.end
        return source_map.position(self.start), source_map.position(end)

    def __repr__(self) -> str:
        return repr(self.byte_offsets)