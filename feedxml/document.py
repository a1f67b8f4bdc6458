"""Parsing XML text or files into a tree of nodes."""

from __future__ import annotations

from pathlib import Path
from xml.parsers import expat

from .node import XMLNode, _Kind, _Node


def _local_name(name: str) -> str:
    return name.rpartition(":")[2]


def _is_namespace_declaration(name: str) -> bool:
    return name == "xmlns" or name.startswith("xmlns:")


class _TreeBuilder:
    """Builds a node tree from expat events."""

    def __init__(self) -> None:
        self.document = _Node(_Kind.DOCUMENT)
        self._current = self.document
        self._in_cdata = False
        self._open_text: _Node | None = None
        parser = expat.ParserCreate()
        parser.ordered_attributes = True
        parser.StartElementHandler = self._start
        parser.EndElementHandler = self._end
        parser.CharacterDataHandler = self._characters
        parser.CommentHandler = self._comment
        parser.ProcessingInstructionHandler = self._instruction
        parser.StartCdataSectionHandler = self._start_cdata
        parser.EndCdataSectionHandler = self._end_cdata
        self._parser = parser

    def feed(self, data: bytes | str) -> _Node:
        self._parser.Parse(data, True)
        return self.document

    def _start(self, name: str, attrs: list[str]) -> None:
        self._open_text = None
        pairs = zip(attrs[0::2], attrs[1::2])
        attributes = [
            (_local_name(key), value)
            for key, value in pairs
            if not _is_namespace_declaration(key)
        ]
        element = _Node(_Kind.ELEMENT, _local_name(name), attributes=attributes)
        self._current = self._current.append(element)

    def _end(self, _name: str) -> None:
        self._open_text = None
        self._current = self._current.parent

    def _characters(self, data: str) -> None:
        if self._current is self.document:
            return
        if self._open_text is not None:
            self._open_text.content += data
            return
        if self._in_cdata:
            node = _Node(_Kind.CDATA, "", data)
        else:
            node = _Node(_Kind.TEXT, "text", data)
        self._open_text = self._current.append(node)

    def _comment(self, data: str) -> None:
        self._open_text = None
        self._current.append(_Node(_Kind.COMMENT, "comment", data))

    def _instruction(self, target: str, data: str) -> None:
        self._open_text = None
        self._current.append(_Node(_Kind.PROCESSING_INSTRUCTION, target, data))

    def _start_cdata(self) -> None:
        self._open_text = None
        self._in_cdata = True
        # An empty CDATA section still forms a node.
        if self._current is not self.document:
            self._open_text = self._current.append(_Node(_Kind.CDATA))

    def _end_cdata(self) -> None:
        self._open_text = None
        self._in_cdata = False


def _parse(data: bytes | str) -> _Node | None:
    try:
        return _TreeBuilder().feed(data)
    except expat.ExpatError:
        return None


class XMLDocument:
    """A parsed XML document; unparsable input leaves it unparsed rather than raising."""

    def __init__(self, file_name):
        try:
            data = Path(file_name).read_bytes()
        except OSError:
            self._doc: _Node | None = None
        else:
            self._doc = _parse(data)

    @classmethod
    def from_string(cls, text):
        """Parse a document held in a str or bytes value."""
        document = cls.__new__(cls)
        document._doc = _parse(text)
        return document

    def _root_element(self) -> _Node | None:
        if self._doc is None:
            return None
        return next(
            (child for child in self._doc.children if child.kind is _Kind.ELEMENT),
            None,
        )

    @property
    def is_parsed(self) -> bool:
        return self._doc is not None

    @property
    def is_empty(self) -> bool:
        return self._root_element() is None

    @property
    def well_formed(self) -> bool:
        return self._doc is not None

    @property
    def root_node(self) -> XMLNode:
        """The root element; raises ValueError if the document is unparsed or empty."""
        root = self._root_element()
        if root is None:
            raise ValueError(
                "the document must be parsed and not empty to have a root node"
            )
        return XMLNode(root)

    def __copy__(self):
        duplicate = type(self).__new__(type(self))
        duplicate._doc = None if self._doc is None else self._doc.clone()
        return duplicate