# mdit-common

Small, self-contained building blocks for writing markdown parsers and
their plugins. Pure Python, with no dependencies outside the standard
library.

## Modules

### `mdit_common.ruler`

A plugin manager that orders rules by their dependencies.

- `Ruler.add(mark, value)` adds a rule and returns a `RuleItem`. You can
  chain these methods on the `RuleItem`:
  - `before(mark)` and `after(mark)` place the rule relative to the rules
    that carry `mark`. They have no effect when no rule carries it.
  - `before_all()` and `after_all()` place the rule as early or as late as
    its constraints allow.
  - `alias(mark)` gives the rule an extra mark, so several rules can be
    grouped.
  - `require(mark)` makes compiling fail with `MissingDependencyError`
    when no rule carries `mark`.
- `Ruler.remove(mark)` drops every rule that carries `mark`.
- `mark in ruler` checks whether any rule carries `mark`.
- `iter(ruler)` and `Ruler.compile()` give the values in resolved order.
  The order is cached until the rules change.
- Constraints that cannot all be met raise `CyclicDependencyError`. Its
  message shows the cycle, for example
  `cyclic dependency: "A" < "B" < "C" < "A"`.

```python
from mdit_common.ruler import Ruler

chain = Ruler()
chain.add("hello", lambda parts: parts.append("hello"))
chain.add("world", lambda parts: parts.append("world"))
chain.add("open", lambda parts: parts.append("[ ")).before("hello")
chain.add("close", lambda parts: parts.append(" ]")).after("world")
chain.add("comma", lambda parts: parts.append(", ")).after("hello").before("world")
chain.add("bang", lambda parts: parts.append("!")).require("world").after("world").before_all()

parts = []
for rule in chain:
    rule(parts)
assert "".join(parts) == "[ hello, world! ]"
```

### `mdit_common.sourcemap`

- `SourceWithLineStarts(src)` maps UTF-8 byte offsets in `src` to
  `(line, column)` pairs with `position(byte_offset)`. Lines start at 1.
  A lone `\r`, a lone `\n` and a `\r\n` pair each count as one line break.
- `SourcePos(start, end)` holds the byte offset of a node's first
  character and the offset just past its end. `byte_offsets` returns both
  offsets. `positions(source_map)` returns
  `((line_start, column_start), (line_end, column_end))`.

```python
from mdit_common.sourcemap import SourcePos, SourceWithLineStarts

source_map = SourceWithLineStarts("123\n456")
assert SourcePos(4, 7).positions(source_map) == ((2, 1), (2, 3))
```

### `mdit_common.utils`

- Entities: `get_entity_from_str` looks up named HTML entities such as
  `&amp;`. `replace_entity_pattern` also decodes numeric ones such as
  `&#x2014;`. `is_valid_entity_code` rejects surrogates, non-characters,
  control codes and values out of range.
- `unescape_all` decodes entities and backslash escapes.
- `escape_html` escapes `&`, `<`, `>` and `"`.
- `normalize_reference` trims a reference label, collapses its whitespace
  and folds its case.
- Tab stops of four: `find_indent_of(line, pos)` returns the indent width
  and the index of the first character that is not a space.
  `calc_right_whitespace_with_tabstops` and
  `cut_right_whitespace_with_tabstops` take a trailing part of a given
  width. A tab that would be split becomes spaces.
- `rfind_and_count(source, char)` counts the characters after the last
  occurrence of `char`.
- `is_punct_char(ch)` tests whether `ch` is in a Unicode punctuation
  category.

```python
from mdit_common.utils import cut_right_whitespace_with_tabstops, normalize_reference, unescape_all

assert unescape_all("&amp; \\*") == "& *"
assert normalize_reference("Foo   Bar") == normalize_reference("foo bar")
assert cut_right_whitespace_with_tabstops("\t\t", 6) == "  \t"
```

### `mdit_common.typekey`

`TypeKey.of(some_type)` gives a hashable key. Two keys are equal when they
refer to the same type. A key prints as the type's qualified name.

### `mdit_common.links`

`parse_link_destination(text, start, end)` parses the `<href>` part of a
link, in either its bracketed or its bare form. `parse_link_title(text,
start, end)` parses the `"title"` part, which may also be written
`'title'` or `(title)`. Both return a `LinkFragment` with these fields:

- `pos`: the index just past the fragment.
- `lines`: the number of line breaks inside the fragment.
- `text`: the unescaped content.

Both return `None` when no valid fragment starts at `start`.

```python
from mdit_common.links import parse_link_destination, parse_link_title

assert parse_link_destination("<a b>", 0, 5).text == "a b"
assert parse_link_title('"hi" x', 0, 6).pos == 4
```

## What it does not do

This package is not a markdown parser. It has no block or inline parsing,
no syntax tree, no HTML renderer and no command-line tool. It supplies only
the pieces listed above.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```