"""A type identity that compares by type and prints as the type's name."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["TypeKey"]


@dataclass(frozen=True)
class TypeKey:
    """Type object and type name fused together.

    Equality and hashing use only the type; printing shows only the name.
    """

    id: type
    name: str = field(compare=False)

    @classmethod
    def of(cls, value_type: type) -> TypeKey:
        """Return the key of ``value_type``."""
        return cls(value_type, f"{value_type.__module__}.{value_type.__qualname__}")

    def __repr__(self) -> str:
        return self.name

    __str__ = __repr__