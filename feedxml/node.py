"""Nodes of a parsed XML tree and a navigable view over them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class _Kind(enum.Enum):
    ELEMENT = enum.auto()
    ATTRIBUTE = enum.auto()
    TEXT = enum.auto()
    CDATA = enum.auto()
    COMMENT = enum.auto()
    PROCESSING_INSTRUCTION = enum.auto()
    DOCUMENT = enum.auto()


@dataclass(eq=False, repr=False)
class _Node:
    """One node of the tree, linked to its parent and its siblings."""

    kind: _Kind
    name: str = ""
    content: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)
    parent: _Node | None = None
    prev: _Node | None = None
    next: _Node | None = None

    def append(self, child: _Node) -> _Node:
        child.parent = self
        if self.children:
            last = self.children[-1]
            last.next = child
            child.prev = last
        self.children.append(child)
        return child

    def clone(self) -> _Node:
        """Return a deep copy of this node and its subtree, detached from any parent."""
        copy = _Node(self.kind, self.name, self.content, list(self.attributes))
        for child in self.children:
            copy.append(child.clone())
        return copy


def _is_empty_or_whitespace(text: str) -> bool:
    return not text.strip()


class XMLNode:
    """A view of one node in a parsed XML tree."""

    __slots__ = ("_node",)

    def __init__(self, node):
        if node is None:
            raise ValueError("an XMLNode cannot wrap a missing node")
        self._node = node

    def __eq__(self, other):
        if not isinstance(other, XMLNode):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return id(self._node)

    def __repr__(self):
        return f"XMLNode({self._node.kind.name.lower()}, {self._node.name!r})"

    @property
    def name(self) -> str:
        return self._node.name

    @property
    def has_child(self) -> bool:
        return bool(self._node.children)

    @property
    def has_next_sibling(self) -> bool:
        return self._node.next is not None

    @property
    def has_prev_sibling(self) -> bool:
        return self._node.prev is not None

    @property
    def has_parent(self) -> bool:
        return self._node.parent is not None

    @property
    def has_attribute(self) -> bool:
        return bool(self._node.attributes)

    @property
    def child(self) -> XMLNode:
        """The first child; raises ValueError if there is none."""
        children = self._node.children
        return XMLNode(children[0] if children else None)

    @property
    def next_sibling(self) -> XMLNode:
        """The next sibling; raises ValueError if there is none."""
        return XMLNode(self._node.next)

    @property
    def prev_sibling(self) -> XMLNode:
        """The previous sibling; raises ValueError if there is none."""
        return XMLNode(self._node.prev)

    @property
    def parent(self) -> XMLNode:
        """The parent node; raises ValueError if there is none."""
        return XMLNode(self._node.parent)

    @property
    def first_attribute_name(self) -> str:
        attributes = self._node.attributes
        return attributes[0][0] if attributes else ""

    @property
    def first_attribute_value(self) -> str:
        attributes = self._node.attributes
        return attributes[0][1] if attributes else ""

    @property
    def attributes(self) -> list[tuple[str, str]]:
        """All attributes as (name, value) pairs in document order."""
        return list(self._node.attributes)

    @property
    def is_element_node(self) -> bool:
        return self._node.kind is _Kind.ELEMENT

    @property
    def is_attribute_node(self) -> bool:
        return self._node.kind is _Kind.ATTRIBUTE

    @property
    def is_text_node(self) -> bool:
        return self._node.kind is _Kind.TEXT

    @property
    def is_comment_node(self) -> bool:
        return self._node.kind is _Kind.COMMENT

    def _text_of_children(self, *first_kinds: _Kind) -> str:
        children = self._node.children
        if not children or children[0].kind not in first_kinds:
            return ""
        return "".join(
            child.content
            for child in children
            if child.kind in (_Kind.TEXT, _Kind.CDATA)
        )

    @property
    def plain_text_content(self) -> str:
        """The text inside the node if its first child is a text node, else ''."""
        return self._text_of_children(_Kind.TEXT)

    @property
    def cdata_text(self) -> str:
        """The text inside the node if its first child is a CDATA section, else ''."""
        return self._text_of_children(_Kind.CDATA)

    @property
    def content_both(self) -> str:
        """The text inside the node if its first child is text or CDATA, else ''."""
        return self._text_of_children(_Kind.TEXT, _Kind.CDATA)

    def skip_empty_comment_and_text_siblings(self) -> None:
        """Move forward past comment and blank text siblings, stopping at the last sibling."""
        while (
            self.is_comment_node
            or (self.is_text_node and _is_empty_or_whitespace(self.content_both))
        ) and self.has_next_sibling:
            self._node = self._node.next