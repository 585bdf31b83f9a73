"""Building blocks for markdown parsers: rule ordering, source maps, entity, indent and link helpers."""

__version__ = "0.6.1"

__all__ = ["links", "ruler", "sourcemap", "typekey", "utils"]