"""A loose tree of keys and values built from the tokens of an HCL object literal.

The builder tolerates incomplete input (missing values, unclosed brackets) so
that it can be used while a document is still being edited.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from hclassist.geometry import Pos, Range, contains_pos, range_over

_log = logging.getLogger(__name__)


class TokenType(Enum):
    """Kinds of lexical tokens the tree builder distinguishes."""

    OBRACE = auto()
    CBRACE = auto()
    OBRACK = auto()
    CBRACK = auto()
    OPAREN = auto()
    CPAREN = auto()
    OQUOTE = auto()
    CQUOTE = auto()
    OHEREDOC = auto()
    CHEREDOC = auto()
    TEMPLATE_INTERP = auto()
    TEMPLATE_CONTROL = auto()
    TEMPLATE_SEQ_END = auto()
    QUOTED_LIT = auto()
    STRING_LIT = auto()
    NUMBER_LIT = auto()
    IDENT = auto()
    COMMENT = auto()
    NEWLINE = auto()
    EQUAL = auto()
    COMMA = auto()
    COLON = auto()
    DOT = auto()
    ELLIPSIS = auto()
    OPERATOR = auto()
    EOF = auto()
    OTHER = auto()


@dataclass(frozen=True)
class Token:
    """A lexical token: its kind, its source text and where it lies."""

    type: TokenType
    text: str
    range: Range = field(default_factory=Range)


@dataclass
class HclNode:
    """A key with either a literal value or child nodes.

    Leaves have ``children`` set to None; objects and arrays have a dict,
    possibly empty. Array elements are keyed ``"<key>.<index>"``.
    """

    key: str = ""
    value: str | None = None
    key_range: Range = field(default_factory=Range)
    value_range: Range = field(default_factory=Range)
    equal_range: Range = field(default_factory=Range)
    children: dict[str, HclNode] | None = None

    def range(self) -> Range:
        """Return the range covering the key, the equals sign and the value."""
        return range_over(
            range_over(self.key_range, self.value_range), self.equal_range
        )

    def _child_nodes(self):
        return (self.children or {}).values()

    def is_value_array(self) -> bool:
        """Return True when every child is an element of this node's array."""
        if self.value is not None:
            return False
        prefix = self.key + "."
        return all(child.key.startswith(prefix) for child in self._child_nodes())

    def is_value_map(self) -> bool:
        """Return True when no child is an element of this node's array."""
        if self.value is not None:
            return False
        prefix = self.key + "."
        return not any(child.key.startswith(prefix) for child in self._child_nodes())


def hcl_node_arrays_of_pos(hcl_node: HclNode | None, pos: Pos) -> list[HclNode]:
    """Return the chain of keyed nodes, outermost first, whose range holds ``pos``."""
    if hcl_node is None or not contains_pos(hcl_node.range(), pos):
        return []
    result = [hcl_node] if hcl_node.key else []
    for child in hcl_node._child_nodes():
        nested = hcl_node_arrays_of_pos(child, pos)
        if nested:
            return result + nested
    return result


@dataclass
class _State:
    node: HclNode
    key: str | None = None
    value: str | None = None
    key_range: Range = field(default_factory=Range)
    value_range: Range = field(default_factory=Range)
    equal_range: Range = field(default_factory=Range)
    index: int | None = None
    expect_key: bool = False

    def current_key(self) -> str:
        key = self.key if self.key is not None else "key_placeholder"
        if self.index is not None:
            return f"{key}.{self.index}"
        return key

    def append_value(self, token: Token) -> None:
        self.value = token.text if self.value is None else self.value + token.text
        self.value_range = range_over(self.value_range, token.range)

    def close_entry(self) -> None:
        """Store the pending key/value pair and wait for the next key."""
        key = self.current_key()
        self.node.children[key] = HclNode(
            key=key,
            value=self.value,
            key_range=self.key_range,
            value_range=self.value_range,
            equal_range=self.equal_range,
        )
        self.key = None
        self.value = None
        self.expect_key = True


def build_hcl_node(tokens) -> HclNode | None:
    """Build a node tree from a sequence of tokens.

    Returns None when closing brackets pop the outermost level at the end of
    input; raises ValueError when tokens follow such a closing bracket.
    """
    stack = [_State(node=HclNode(children={}), key="dummy")]

    for token in tokens:
        if not stack:
            raise ValueError(f"unbalanced input: unexpected token {token.text!r}")
        state = stack[-1]
        kind = token.type

        if kind is TokenType.OBRACE:
            key = state.current_key()
            if state.expect_key:
                _log.warning("expect key but got {")
            node = HclNode(
                key=key,
                key_range=state.key_range,
                value_range=token.range,
                equal_range=state.equal_range,
                children={},
            )
            state.node.children[key] = node
            # inside an array the next thing is another value, as in p = [{}]
            state.expect_key = state.index is None
            stack.append(_State(node=node, expect_key=True))

        elif kind is TokenType.CBRACE:
            if not state.expect_key:
                _log.warning("expect value but got }")
                key = state.current_key()
                state.node.children[key] = HclNode(
                    key=key,
                    value=state.value,
                    key_range=state.key_range,
                    value_range=state.value_range,
                    equal_range=state.equal_range,
                )
            state.node.value_range = range_over(state.node.value_range, token.range)
            stack.pop()

        elif kind is TokenType.OBRACK:
            if state.expect_key:
                _log.warning("expect key but got [")
            key = state.current_key()
            node = HclNode(
                key=key,
                key_range=state.key_range,
                equal_range=state.equal_range,
                value_range=token.range,
                children={},
            )
            state.node.children[key] = node
            state.expect_key = True
            stack.append(_State(node=node, key=state.key, index=0))

        elif kind is TokenType.CBRACK:
            key = state.current_key()
            if key not in state.node.children:
                _log.warning("expect value but got ]")
                # an empty trailing element is not an element
                if not state.value_range.is_empty():
                    state.node.children[key] = HclNode(
                        key=key, value=state.value, value_range=state.value_range
                    )
            state.node.value_range = range_over(state.node.value_range, token.range)
            stack.pop()

        elif kind is TokenType.IDENT:
            if state.expect_key:
                state.key = token.text
                state.key_range = token.range
                state.index = None
                state.value = None
                state.value_range = Range()
                state.equal_range = Range()
                state.expect_key = False
            else:
                state.append_value(token)

        elif kind is TokenType.EQUAL:
            if state.expect_key:
                _log.warning("expect key but got =")
                state.expect_key = False
            state.equal_range = token.range

        elif kind is TokenType.NEWLINE:
            if not state.expect_key and state.index is None:
                state.close_entry()

        elif kind is TokenType.COMMA:
            if state.expect_key:
                _log.warning("expect key but got ,")
            elif state.index is None:
                _log.warning("unexpected symbol: ,")
            else:
                if state.value is not None:
                    key = state.current_key()
                    state.node.children[key] = HclNode(
                        key=key, value=state.value, value_range=state.value_range
                    )
                state.index += 1
                state.value = None
                state.value_range = Range()

        elif kind is TokenType.COMMENT:
            if token.text.endswith("\n"):
                if not state.expect_key and state.index is None:
                    state.close_entry()

        elif not state.expect_key:
            state.append_value(token)

    if not stack:
        return None

    root = stack[0].node
    _update_value_range(root)
    _fix_empty_value_range(root)
    return root


def _update_value_range(node: HclNode) -> None:
    for child in node._child_nodes():
        _update_value_range(child)
        node.value_range = range_over(node.value_range, child.range())


def _fix_empty_value_range(node: HclNode) -> None:
    if node.children is None:
        if (
            not node.key_range.is_empty()
            and not node.equal_range.is_empty()
            and node.value_range.is_empty()
        ):
            end = node.equal_range.end
            node.value_range = Range(
                start=Pos(line=end.line, column=end.column + 1, byte=end.byte),
                end=Pos(line=end.line + 1, column=0, byte=end.byte + 1),
            )
    else:
        for child in node.children.values():
            _fix_empty_value_range(child)