"""Tests for the XML tree printer."""

import pytest
from lxml import etree

from syndic_core.exceptions import InvalidElementError
from syndic_core.schemas import CDataNode, ElementNode, TextNode, XmlDocument, text_element
from syndic_rss.printer import print_document


def _doc(*elements: ElementNode) -> XmlDocument:
    return XmlDocument(elements=list(elements))


def test_declaration_and_indentation() -> None:
    root = ElementNode(
        name="rss",
        attributes={"version": "2.0"},
        elements=[ElementNode(name="channel", elements=[text_element("title", "Hello")])],
    )
    assert print_document(_doc(root), indent=4) == (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<rss version="2.0">\n'
        "    <channel>\n"
        "        <title>Hello</title>\n"
        "    </channel>\n"
        "</rss>"
    )


def test_zero_indent_prints_on_one_line() -> None:
    root = ElementNode(name="a", elements=[text_element("b", "c")])
    assert print_document(_doc(root), indent=0) == '<?xml version="1.0" encoding="utf-8"?><a><b>c</b></a>'


def test_attribute_only_element_is_self_closing() -> None:
    link = ElementNode(name="atom:link", attributes={"href": "https://example.com/", "rel": "hub"})
    assert print_document(_doc(link), indent=0).endswith('<atom:link href="https://example.com/" rel="hub"/>')


def test_none_attributes_are_omitted() -> None:
    category = text_element("category", "News", {"domain": None})
    assert print_document(_doc(category), indent=0).endswith("<category>News</category>")


def test_text_is_escaped_once() -> None:
    root = ElementNode(
        name="root",
        elements=[
            text_element("raw", "a & b < c"),
            text_element("sanitized", "https://example.com/?a=1&amp;b=2"),
        ],
    )
    xml = print_document(_doc(root), indent=0)
    assert "<raw>a &amp; b &lt; c</raw>" in xml
    assert "<sanitized>https://example.com/?a=1&amp;b=2</sanitized>" in xml
    assert "&amp;amp;" not in xml


def test_attribute_values_are_quoted_and_escaped() -> None:
    node = ElementNode(name="x", attributes={"title": 'Say "hi" & <bye>', "href": "https://e.com/?a&amp;b"})
    xml = print_document(_doc(node), indent=0)
    assert 'title="Say &quot;hi&quot; &amp; &lt;bye&gt;"' in xml
    assert 'href="https://e.com/?a&amp;b"' in xml


def test_cdata_is_written_raw() -> None:
    node = ElementNode(name="description", elements=[CDataNode(cdata="A & B <p>")])
    assert print_document(_doc(node), indent=0).endswith("<description><![CDATA[A & B <p>]]></description>")


def test_cdata_terminator_is_split() -> None:
    node = ElementNode(name="d", elements=[CDataNode(cdata="x]]>y")])
    assert "<d><![CDATA[x]]]]><![CDATA[>y]]></d>" in print_document(_doc(node), indent=0)


def test_scalar_text_values() -> None:
    root = ElementNode(
        name="root",
        elements=[text_element("ttl", 60), text_element("flag", True), text_element("off", False)],
    )
    xml = print_document(_doc(root), indent=0)
    assert "<ttl>60</ttl>" in xml
    assert "<flag>true</flag>" in xml
    assert "<off>false</off>" in xml


def test_mixed_content_puts_each_child_on_its_own_line() -> None:
    root = ElementNode(name="p", elements=[TextNode(text="lead"), text_element("b", "bold")])
    assert print_document(_doc(root), indent=2).splitlines()[1:] == [
        "<p>",
        "  lead",
        "  <b>bold</b>",
        "</p>",
    ]


@pytest.mark.parametrize("name", ["", "has space", "a<b", 'q"uote'])
def test_invalid_element_name_raises(name: str) -> None:
    with pytest.raises(InvalidElementError):
        print_document(_doc(ElementNode(name=name, attributes={})))


def test_invalid_attribute_name_raises() -> None:
    with pytest.raises(InvalidElementError):
        print_document(_doc(ElementNode(name="x", attributes={"bad name": "1"})))


def test_deep_tree_prints_without_recursion() -> None:
    depth = 3000
    node = text_element("leaf", "x")
    for _ in range(depth):
        node = ElementNode(name="n", elements=[node])

    xml = print_document(_doc(node), indent=0)
    assert xml.count("<n>") == depth
    assert xml.count("</n>") == depth
    assert "<leaf>x</leaf>" in xml


def test_xml_illegal_characters_are_dropped() -> None:
    root = ElementNode(
        name="item",
        attributes={"note": "a\x0bb"},
        elements=[
            text_element("title", "tab\tok\x00\x1f"),
            ElementNode(name="body", elements=[CDataNode(cdata="x\x0cy\ufffe")]),
        ],
    )
    xml = print_document(_doc(root), indent=0)
    assert '<item note="ab">' in xml
    assert "<title>tab\tok</title>" in xml
    assert "<body><![CDATA[xy]]></body>" in xml

    parsed = etree.fromstring(xml.encode("utf-8"))
    assert parsed.findtext("title") == "tab\tok"
