# hclassist

Small building blocks for editor and language-server tooling that works with
HCL documents.

## What is inside

- `hclassist.geometry`: frozen `Pos` (line, column, byte) and `Range`
  (filename, start, end) values. `Range.is_empty()` is true when start and end
  have the same byte offset. `contains_pos(r, pos)` tests whether a position
  falls inside a range, both ends included, by line and column.
  `range_over(a, b)` returns the smallest range covering both; an empty range
  is ignored in favour of the other.
- `hclassist.hcl_node`: `build_hcl_node(tokens)` turns a sequence of `Token`
  objects (a `TokenType`, the token's text and its `Range`) into a tree of
  `HclNode` values, for example the body of a `jsonencode(...)` call. It copes
  with input that is still being typed, such as missing values or unclosed
  brackets, and logs a warning through the `logging` module when it meets
  something unexpected. Array elements are keyed `"<key>.<index>"`. It returns
  `None` when closing brackets pop the outermost level at the end of input, and
  raises `ValueError` when tokens follow such a bracket.
  `HclNode.range()`, `HclNode.is_value_array()` and `HclNode.is_value_map()`
  describe a node; `hcl_node_arrays_of_pos(node, pos)` returns the chain of
  keyed nodes, outermost first, that encloses a cursor position.
- `hclassist.mdplain`: `clean(markdown)` removes markdown syntax (emphasis,
  headers, links, images, code spans, HTML tags and more) in a simple,
  rule-based way so the text reads well as plain text.
- `hclassist.pathcmp`: `path_equals(path1, path2)` compares two paths after
  normalising them (`.` and `..` segments, repeated separators). On Windows the
  drive is compared without regard to case and the rest of the path exactly;
  elsewhere the whole cleaned path is compared exactly.
- `hclassist.pathtpl`: `PathTemplate(name, text)` parses a templated path such
  as `/tmp/ls-{{ pid }}-{{ timestamp }}.log`, and `execute()` renders it.
  `parse_raw_path(name, raw_path)` does both in one call. The functions
  available are `timestamp` (the Unix time at which the template was created),
  `pid` and `ppid`; `{{ . }}` renders as `<no value>`, `{{/* ... */}}` is a
  comment, and `{{-` / `-}}` trim the surrounding whitespace. A malformed
  template or an unknown function raises `TemplateError`, a `ValueError`.

## What it does not do

There is no HCL lexer or parser here: `build_hcl_node` works on tokens that the
caller has already produced. The package is a library only; it has no command
and no language server of its own.

## Installation

```
pip install hclassist
```

The package has no runtime dependencies. Install the test extra with
`pip install hclassist[test]` to run the test suite with `pytest`.

## Example

```python
from hclassist.mdplain import clean
from hclassist.pathcmp import path_equals
from hclassist.pathtpl import parse_raw_path

clean("Desc **2**")                               # "Desc 2"
path_equals("/home/user/tf", "/home/user/./tf")   # True
parse_raw_path("log", "/tmp/ls-{{ pid }}.log")    # e.g. "/tmp/ls-12345.log"
```