# feedxml

A lightweight XML document and node model for walking feed files (RSS and
similar) node by node. Text, CDATA and comment nodes are kept as siblings
of elements, so a reader moves through a document in the order it is laid
out in the file. It uses only the standard library.

## Installation

```
pip install feedxml
```

## Loading a document

```python
from feedxml.document import XMLDocument

doc = XMLDocument("feed.xml")                        # parse a file
doc = XMLDocument.from_string("<rss><channel/></rss>")  # str or bytes

if doc.is_parsed and not doc.is_empty:
    root = doc.root_node
```

Loading never raises. A file that cannot be read, or input that is not
well-formed XML, leaves the document unparsed:

- `is_parsed` is `True` when parsing produced a document;
- `well_formed` is `True` for well-formed input (and so matches
  `is_parsed`);
- `is_empty` is `True` when the document has no root element;
- `root_node` is the root element as an `XMLNode`, and raises
  `ValueError` if the document is unparsed or empty.

`copy.copy(doc)` gives an independent deep copy of the whole tree.

## Walking nodes

```python
node = root.child
node.skip_empty_comment_and_text_siblings()
while True:
    if node.is_element_node:
        print(node.name, node.content_both, node.attributes)
    if not node.has_next_sibling:
        break
    node = node.next_sibling
```

An `XMLNode` (in `feedxml.node`) offers these read-only properties:

- navigation: `child` (first child), `next_sibling`, `prev_sibling`,
  `parent`, each raising `ValueError` when there is no such node, and
  `has_child`, `has_next_sibling`, `has_prev_sibling`, `has_parent`;
- node kind: `is_element_node`, `is_attribute_node`, `is_text_node`,
  `is_comment_node`;
- `name`: the element's local name (any namespace prefix removed); text
  nodes are named `"text"` and comments `"comment"`;
- content: `plain_text_content` when the first child is text,
  `cdata_text` when the first child is a CDATA section, `content_both`
  when it is either. Each joins the text and CDATA children together, and
  is an empty string when the first child is not of the matching kind;
- attributes: `has_attribute`, `first_attribute_name`,
  `first_attribute_value` (empty strings when there are none), and
  `attributes`, a list of `(name, value)` pairs in document order.
  Namespace prefixes are removed from attribute names and `xmlns`
  declarations are left out.

One method changes the view in place:
`skip_empty_comment_and_text_siblings()` moves the node forward past
comments and whitespace-only text, stopping at the first other node or at
the last sibling.

Two `XMLNode` objects are equal when they view the same node of the same
tree.

## What it does not do

This package only reads and navigates XML. It does not interpret RSS or
any other feed format, does not modify documents, and cannot write XML
back out.

## Running the tests

```
pip install -e ".[test]"
pytest
```