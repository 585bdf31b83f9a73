"""Ordered rule registry with before/after constraints and dependency checks."""

from __future__ import annotations

import enum
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

__all__ = ["CyclicDependencyError", "MissingDependencyError", "RuleItem", "Ruler"]

M = TypeVar("M", bound=Hashable)
T = TypeVar("T")


class CyclicDependencyError(ValueError):
    """Raised when rule constraints cannot all be satisfied."""


class MissingDependencyError(LookupError):
    """Raised when a rule requires a mark that no rule carries."""


class _Priority(enum.Enum):
    NORMAL = enum.auto()
    BEFORE_ALL = enum.auto()
    AFTER_ALL = enum.auto()


class _Constraint(enum.Enum):
    BEFORE = enum.auto()
    AFTER = enum.auto()
    REQUIRE = enum.auto()


def _fmt(mark: Any) -> str:
    return f'"{mark}"' if isinstance(mark, str) else repr(mark)


@dataclass(eq=False)
class RuleItem(Generic[M, T]):
    """A rule added to a :class:`Ruler`; its methods adjust where it is placed."""

    marks: list[M]
    value: T
    _on_change: Callable[[], None] = field(repr=False)
    priority: _Priority = _Priority.NORMAL
    constraints: list[tuple[_Constraint, M]] = field(default_factory=list)

    def _constrain(self, kind: _Constraint, mark: M) -> RuleItem[M, T]:
        self.constraints.append((kind, mark))
        self._on_change()
        return self

    def before(self, mark: M) -> RuleItem[M, T]:
        """Place this rule before any rule identified by ``mark``, if one exists."""
        return self._constrain(_Constraint.BEFORE, mark)

    def after(self, mark: M) -> RuleItem[M, T]:
        """Place this rule after any rule identified by ``mark``, if one exists."""
        return self._constrain(_Constraint.AFTER, mark)

    def before_all(self) -> RuleItem[M, T]:
        """Place this rule as early as its constraints allow."""
        self.priority = _Priority.BEFORE_ALL
        self._on_change()
        return self

    def after_all(self) -> RuleItem[M, T]:
        """Place this rule as late as its constraints allow."""
        self.priority = _Priority.AFTER_ALL
        self._on_change()
        return self

    def alias(self, mark: M) -> RuleItem[M, T]:
        """Give this rule another identifier, so rules can be grouped."""
        self.marks.append(mark)
        self._on_change()
        return self

    def require(self, mark: M) -> RuleItem[M, T]:
        """Require a rule identified by ``mark`` to exist when compiling."""
        return self._constrain(_Constraint.REQUIRE, mark)


class Ruler(Generic[M, T]):
    """Collection of rules ``(mark, value)`` iterated in dependency order."""

    def __init__(self) -> None:
        self._items: list[RuleItem[M, T]] = []
        self._compiled: list[T] | None = None

    def _invalidate(self) -> None:
        self._compiled = None

    def add(self, mark: M, value: T) -> RuleItem[M, T]:
        """Add a rule identified by ``mark`` with payload ``value``."""
        item = RuleItem([mark], value, self._invalidate)
        self._items.append(item)
        self._invalidate()
        return item

    def remove(self, mark: M) -> None:
        """Remove every rule identified by ``mark``."""
        self._items = [item for item in self._items if mark not in item.marks]
        self._invalidate()

    def __contains__(self, mark: object) -> bool:
        return any(mark in item.marks for item in self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.compile())

    def __repr__(self) -> str:
        names = ", ".join(_fmt(item.marks[0]) for item in self._items)
        return f"Ruler([{names}])"

    def compile(self) -> list[T]:
        """Return rule values in an order satisfying every constraint."""
        if self._compiled is None:
            self._compiled = self._compile()
        return list(self._compiled)

    def _compile(self) -> list[T]:
        items = self._items
        by_mark: dict[M, list[int]] = {}
        order: list[int] = []
        before_all_len = 0
        after_all_len = 0

        for idx, item in enumerate(items):
            if item.priority is _Priority.NORMAL:
                order.insert(len(order) - after_all_len, idx)
            elif item.priority is _Priority.BEFORE_ALL:
                order.insert(before_all_len, idx)
                before_all_len += 1
            else:
                order.append(idx)
                after_all_len += 1
            for mark in item.marks:
                by_mark.setdefault(mark, []).append(idx)

        # graph[idx] holds the rules that must come before rule idx
        graph: list[set[int]] = [set() for _ in items]
        for idx in order:
            item = items[idx]
            for kind, mark in item.constraints:
                if kind is _Constraint.BEFORE:
                    for other in by_mark.get(mark, ()):
                        graph[other].add(idx)
                elif kind is _Constraint.AFTER:
                    graph[idx].update(by_mark.get(mark, ()))
                elif mark not in by_mark:
                    raise MissingDependencyError(
                        f"missing dependency: {_fmt(item.marks[0])} requires {_fmt(mark)}"
                    )

        result: list[T] = []
        inserted = [False] * len(items)
        remaining = len(items)
        while remaining:
            ready = next((i for i in order if not inserted[i] and not graph[i]), None)
            if ready is None:
                raise CyclicDependencyError(self._describe_cycle(order, graph))
            result.append(items[ready].value)
            inserted[ready] = True
            remaining -= 1
            for deps in graph:
                deps.discard(ready)
        return result

    def _describe_cycle(self, order: list[int], graph: list[set[int]]) -> str:
        for idx in order:
            seen: dict[int, int] = {}
            stack = [idx]
            while stack:
                current = stack.pop()
                for nxt in graph[current]:
                    if nxt in seen:
                        continue
                    stack.append(nxt)
                    seen[nxt] = current
                    if nxt == idx:
                        path = [idx]
                        node = seen[idx]
                        while node not in path:
                            path.append(node)
                            node = seen[node]
                        path.append(node)
                        names = " < ".join(
                            _fmt(self._items[i].marks[0]) for i in reversed(path)
                        )
                        return f"cyclic dependency: {names}"
        return "cyclic dependency"