"""Text encoding of n-ary trees and of fixed-arity trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

MAX_ARITY = 10


@dataclass
class NaryNode:
    """A node with any number of children."""

    val: int = 0
    children: List[NaryNode] = field(default_factory=list)


@dataclass
class FixedNode:
    """A node with exactly ``arity`` child slots, each a node or ``None``."""

    val: int
    children: Tuple[Optional[FixedNode], ...]

    def __post_init__(self) -> None:
        self.children = tuple(self.children)
        if not 1 <= len(self.children) <= MAX_ARITY:
            raise ValueError(f"arity must be between 1 and {MAX_ARITY}")

    @property
    def arity(self) -> int:
        return len(self.children)


Node = Union[NaryNode, FixedNode]


def _encode_nary(node: NaryNode) -> str:
    if not isinstance(node, NaryNode):
        raise ValueError("Invalid tree")
    return f"[{node.val}" + "".join(_encode_nary(c) for c in node.children) + "]"


def _encode_fixed(node: Optional[FixedNode], arity: int) -> str:
    if node is None:
        return "(NULL)"
    if not isinstance(node, FixedNode) or node.arity != arity:
        raise ValueError("Invalid tree")
    return f"({node.val}" + "".join(_encode_fixed(c, arity) for c in node.children) + ")"


def encode_tree(root: Node) -> str:
    """Encode an n-ary tree as ``[v...]`` or a fixed tree as ``N(v...)``."""
    if isinstance(root, NaryNode):
        return _encode_nary(root)
    if isinstance(root, FixedNode):
        return f"{root.arity}{_encode_fixed(root, root.arity)}"
    raise ValueError("Invalid tree")


class _Reader:
    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def take(self) -> str:
        char = self.peek()
        self.pos += 1
        return char

    def expect(self, char: str) -> None:
        if self.take() != char:
            raise ValueError("Bad input")

    def number(self) -> int:
        digits = self.take() if self.peek() == "-" else ""
        while self.peek().isdigit() and self.peek().isascii():
            digits += self.take()
        try:
            return int(digits)
        except ValueError:
            raise ValueError("Bad input") from None


def _decode_nary(reader: _Reader) -> NaryNode:
    node = NaryNode(reader.number())
    while reader.peek() != "]":
        reader.expect("[")
        node.children.append(_decode_nary(reader))
    reader.take()
    return node


def _decode_fixed(reader: _Reader, arity: int) -> Optional[FixedNode]:
    if reader.peek() == "N":
        reader.take()
        for char in "ULL)":
            reader.expect(char)
        return None
    val = reader.number()
    children = []
    for _ in range(arity):
        reader.expect("(")
        children.append(_decode_fixed(reader, arity))
    reader.expect(")")
    return FixedNode(val, tuple(children))


def decode_tree(encoded: str) -> Optional[Node]:
    """Decode text produced by :func:`encode_tree`; characters after the tree are ignored."""
    if not encoded:
        raise ValueError("Bad input")
    if encoded[0] == "[":
        return _decode_nary(_Reader(encoded, 1))
    reader = _Reader(encoded, 1)
    reader.expect("(")
    lead = encoded[0]
    if not ("0" <= lead <= "9"):
        raise ValueError("Invalid tree")
    arity = max(int(lead), 1)
    return _decode_fixed(reader, arity)