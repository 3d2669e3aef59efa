import pytest

from hclassist.geometry import Pos, Range, contains_pos
from hclassist.hcl_node import (
    HclNode,
    Token,
    TokenType,
    build_hcl_node,
    hcl_node_arrays_of_pos,
)

T = TokenType


def _lex(pairs):
    """Give each (type, text) pair a source range; a type of None is skipped text."""
    line, column, offset = 1, 1, 0
    tokens = []
    for kind, text in pairs:
        start = Pos(line=line, column=column, byte=offset)
        for char in text:
            if char == "\n":
                line += 1
                column = 1
            else:
                column += 1
            offset += len(char.encode())
        end = Pos(line=line, column=column, byte=offset)
        if kind is not None:
            tokens.append(Token(kind, text, Range(start=start, end=end)))
    return tokens


def _simple_object():
    return _lex(
        [
            (T.OBRACE, "{"),
            (T.NEWLINE, "\n"),
            (None, "  "),
            (T.IDENT, "a"),
            (None, " "),
            (T.EQUAL, "="),
            (None, " "),
            (T.NUMBER_LIT, "1"),
            (T.NEWLINE, "\n"),
            (T.CBRACE, "}"),
            (T.NEWLINE, "\n"),
            (T.EOF, ""),
        ]
    )


def _array_object(elements):
    return _lex(
        [
            (T.OBRACE, "{"),
            (T.NEWLINE, "\n"),
            (T.IDENT, "a"),
            (None, " "),
            (T.EQUAL, "="),
            (None, " "),
            (T.OBRACK, "["),
            *elements,
            (T.CBRACK, "]"),
            (T.NEWLINE, "\n"),
            (T.CBRACE, "}"),
        ]
    )


def test_simple_object():
    root = build_hcl_node(_simple_object())
    assert list(root.children) == ["dummy"]
    dummy = root.children["dummy"]
    assert list(dummy.children) == ["a"]
    leaf = dummy.children["a"]
    assert leaf.key == "a"
    assert leaf.value == "1"
    assert leaf.children is None
    assert dummy.is_value_map()
    assert not leaf.is_value_map()


def test_parent_value_range_covers_children():
    root = build_hcl_node(_simple_object())
    dummy = root.children["dummy"]
    leaf = dummy.children["a"]
    parent = dummy.range()
    assert contains_pos(parent, leaf.range().start)
    assert contains_pos(parent, leaf.range().end)


def test_node_range_spans_key_and_value():
    tokens = _simple_object()
    leaf = build_hcl_node(tokens).children["dummy"].children["a"]
    ident = next(t for t in tokens if t.type is T.IDENT)
    number = next(t for t in tokens if t.type is T.NUMBER_LIT)
    assert leaf.range().start == ident.range.start
    assert leaf.range().end == number.range.end


def test_array_elements():
    tokens = _array_object(
        [(T.NUMBER_LIT, "1"), (T.COMMA, ","), (None, " "), (T.NUMBER_LIT, "2")]
    )
    array = build_hcl_node(tokens).children["dummy"].children["a"]
    assert list(array.children) == ["a.0", "a.1"]
    assert array.children["a.0"].value == "1"
    assert array.children["a.1"].value == "2"
    assert array.is_value_array()
    assert not array.is_value_map()


def test_trailing_comma_adds_no_empty_element():
    tokens = _array_object([(T.NUMBER_LIT, "1"), (T.COMMA, ","), (None, " ")])
    array = build_hcl_node(tokens).children["dummy"].children["a"]
    assert list(array.children) == ["a.0"]


def test_object_inside_array():
    tokens = _array_object(
        [
            (T.OBRACE, "{"),
            (T.IDENT, "b"),
            (T.EQUAL, "="),
            (T.NUMBER_LIT, "1"),
            (T.CBRACE, "}"),
        ]
    )
    array = build_hcl_node(tokens).children["dummy"].children["a"]
    assert list(array.children) == ["a.0"]
    element = array.children["a.0"]
    assert element.children["b"].value == "1"
    assert array.is_value_array()


def test_missing_value_gets_placeholder_range():
    tokens = _lex(
        [
            (T.OBRACE, "{"),
            (T.NEWLINE, "\n"),
            (T.IDENT, "a"),
            (None, " "),
            (T.EQUAL, "="),
            (T.NEWLINE, "\n"),
            (T.CBRACE, "}"),
        ]
    )
    leaf = build_hcl_node(tokens).children["dummy"].children["a"]
    assert leaf.value is None
    assert not leaf.value_range.is_empty()
    assert leaf.value_range.start.line == leaf.equal_range.end.line
    assert leaf.value_range.start.column == leaf.equal_range.end.column + 1
    assert leaf.value_range.end.line == leaf.value_range.start.line + 1


def test_value_tokens_are_concatenated():
    tokens = _lex(
        [
            (T.OBRACE, "{"),
            (T.IDENT, "a"),
            (T.EQUAL, "="),
            (T.OQUOTE, '"'),
            (T.QUOTED_LIT, "x"),
            (T.CQUOTE, '"'),
            (T.NEWLINE, "\n"),
            (T.IDENT, "b"),
            (T.EQUAL, "="),
            (T.IDENT, "foo"),
            (T.DOT, "."),
            (T.IDENT, "bar"),
            (T.NEWLINE, "\n"),
            (T.CBRACE, "}"),
        ]
    )
    dummy = build_hcl_node(tokens).children["dummy"]
    assert dummy.children["a"].value == '"x"'
    assert dummy.children["b"].value == "foo.bar"


def test_comment_with_newline_ends_entry():
    tokens = _lex(
        [
            (T.OBRACE, "{"),
            (T.IDENT, "a"),
            (T.EQUAL, "="),
            (T.NUMBER_LIT, "1"),
            (T.COMMENT, "# note\n"),
            (T.IDENT, "b"),
            (T.EQUAL, "="),
            (T.NUMBER_LIT, "2"),
            (T.NEWLINE, "\n"),
            (T.CBRACE, "}"),
        ]
    )
    dummy = build_hcl_node(tokens).children["dummy"]
    assert dummy.children["a"].value == "1"
    assert dummy.children["b"].value == "2"


def test_inline_comment_is_not_part_of_value():
    tokens = _lex(
        [
            (T.OBRACE, "{"),
            (T.IDENT, "a"),
            (T.EQUAL, "="),
            (T.NUMBER_LIT, "1"),
            (T.COMMENT, "/* c */"),
            (T.CBRACE, "}"),
        ]
    )
    dummy = build_hcl_node(tokens).children["dummy"]
    assert dummy.children["a"].value == "1"


def test_arrays_of_pos_returns_chain():
    tokens = _simple_object()
    root = build_hcl_node(tokens)
    number = next(t for t in tokens if t.type is T.NUMBER_LIT)
    chain = hcl_node_arrays_of_pos(root, number.range.start)
    assert [node.key for node in chain] == ["dummy", "a"]


def test_arrays_of_pos_outside_and_none():
    root = build_hcl_node(_simple_object())
    assert hcl_node_arrays_of_pos(root, Pos(line=40, column=1, byte=500)) == []
    assert hcl_node_arrays_of_pos(None, Pos(line=1, column=1, byte=0)) == []


def test_closing_the_outermost_level_returns_none():
    assert build_hcl_node(_lex([(T.CBRACE, "}")])) is None


def test_tokens_after_outermost_level_raise():
    with pytest.raises(ValueError):
        build_hcl_node(_lex([(T.CBRACE, "}"), (T.IDENT, "a")]))


def test_empty_input_gives_empty_root():
    root = build_hcl_node([])
    assert root.children == {}
    assert root.key == ""


def test_leaf_with_value_is_neither_array_nor_map():
    node = HclNode(key="a", value="1")
    assert not node.is_value_array()
    assert not node.is_value_map()