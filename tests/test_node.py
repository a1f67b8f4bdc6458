import pytest

from feedxml.document import XMLDocument
from feedxml.node import XMLNode

SAMPLE = (
    '<?xml version="1.0"?>\n'
    '<rss version="2.0"><channel>\n'
    "  <!-- note -->\n"
    "  <title>Feed &amp; more</title>\n"
    "  <description><![CDATA[<b>bold</b>]]></description>\n"
    "  <link/>\n"
    "</channel></rss>"
)


def _root(text=SAMPLE):
    return XMLDocument.from_string(text).root_node


def _title():
    node = _root().child.child
    node.skip_empty_comment_and_text_siblings()
    return node


def test_root_name_and_attributes():
    root = _root()
    assert root.name == "rss"
    assert root.has_attribute
    assert root.first_attribute_name == "version"
    assert root.first_attribute_value == "2.0"
    assert root.attributes == [("version", "2.0")]


def test_root_is_element_with_document_parent():
    root = _root()
    assert root.is_element_node
    assert root.has_parent
    assert not root.parent.is_element_node


def test_child_and_parent_round_trip():
    root = _root()
    channel = root.child
    assert channel.name == "channel"
    assert channel.parent == root


def test_first_child_is_whitespace_text():
    channel = _root().child
    first = channel.child
    assert first.is_text_node
    assert not first.has_prev_sibling
    assert first.next_sibling.is_comment_node


def test_skip_reaches_first_element():
    title = _title()
    assert title.is_element_node
    assert title.name == "title"


def test_sibling_navigation_round_trip():
    title = _title()
    assert title.next_sibling.prev_sibling == title
    assert title.prev_sibling.next_sibling == title


def test_plain_text_content():
    title = _title()
    assert title.plain_text_content == "Feed & more"
    assert title.content_both == title.plain_text_content
    assert title.cdata_text == ""


def test_cdata_text():
    description = _title().next_sibling
    description.skip_empty_comment_and_text_siblings()
    assert description.name == "description"
    assert description.cdata_text == "<b>bold</b>"
    assert description.content_both == "<b>bold</b>"
    assert description.plain_text_content == ""


def test_empty_element_has_no_child():
    node = _root("<r><link/></r>").child
    assert node.name == "link"
    assert not node.has_child
    assert node.plain_text_content == ""
    assert node.content_both == ""
    with pytest.raises(ValueError):
        node.child


def test_missing_sibling_raises():
    root = _root("<r/>")
    assert not root.has_next_sibling
    with pytest.raises(ValueError):
        root.next_sibling


def test_no_attributes():
    root = _root("<r/>")
    assert not root.has_attribute
    assert root.first_attribute_name == ""
    assert root.first_attribute_value == ""
    assert root.attributes == []


def test_wrapping_none_raises():
    with pytest.raises(ValueError):
        XMLNode(None)


def test_namespace_prefix_and_declarations():
    root = _root('<a xmlns:atom="urn:x"><atom:link href="h" rel="self"/></a>')
    assert not root.has_attribute
    link = root.child
    assert link.name == "link"
    assert link.attributes == [("href", "h"), ("rel", "self")]


def test_mixed_text_and_cdata_concatenate():
    root = _root("<p>one<![CDATA[two]]>three</p>")
    assert root.plain_text_content == "one" + "two" + "three"
    assert root.cdata_text == ""


def test_adjacent_cdata_sections_stay_separate():
    root = _root("<p><![CDATA[a]]><![CDATA[b]]></p>")
    first = root.child
    assert first.has_next_sibling
    assert root.cdata_text == "ab"


def test_attribute_entities_are_resolved():
    root = _root('<e a="x &amp; y"/>')
    assert root.first_attribute_value == "x & y"


def test_skip_stops_at_last_sibling():
    comment = _root("<r><!-- c --></r>").child
    comment.skip_empty_comment_and_text_siblings()
    assert comment.is_comment_node
    assert not comment.has_next_sibling


def test_skip_leaves_element_in_place():
    root = _root("<r><a/><!-- c --><b/></r>")
    node = root.child
    node.skip_empty_comment_and_text_siblings()
    assert node.name == "a"


def test_attribute_kind_is_not_reported_for_elements():
    root = _root()
    assert not root.is_attribute_node
    assert not root.is_text_node
    assert not root.is_comment_node