"""
XML tree printer.

Serializes an ``XmlDocument`` into indented XML text. Element and attribute
names are written as given, so prefixed names such as ``atom:link`` need no
namespace bookkeeping here.
"""

import re
from xml.sax.saxutils import escape

from syndic_core.config import settings
from syndic_core.exceptions import InvalidElementError
from syndic_core.schemas import Attributes, CDataNode, ElementNode, TextNode, XmlDocument

_NAME_RE = re.compile(r"^[^\s<>&\"'/=!?]+$")

# Characters outside the XML 1.0 Char production; they are dropped on output
_ILLEGAL_CHARS_RE = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def _check_name(name: str) -> str:
    if not _NAME_RE.match(name):
        raise InvalidElementError(f"Invalid XML name: {name!r}")
    return name


def _normalize(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    # Already-escaped ampersands are collapsed so they are escaped exactly once
    return _ILLEGAL_CHARS_RE.sub("", str(value)).replace("&amp;", "&")


def _escape_text(value: str | int | float | bool) -> str:
    return escape(_normalize(value))


def _escape_attribute(value: str | int | float) -> str:
    return escape(_normalize(value), {'"': "&quot;"})


def _format_attributes(attributes: Attributes | None) -> str:
    if not attributes:
        return ""
    return "".join(
        f' {_check_name(key)}="{_escape_attribute(value)}"'
        for key, value in attributes.items()
        if value is not None
    )


def _format_leaf(node: TextNode | CDataNode) -> str:
    if isinstance(node, CDataNode):
        cdata = _ILLEGAL_CHARS_RE.sub("", node.cdata)
        return "<![CDATA[" + cdata.replace("]]>", "]]]]><![CDATA[>") + "]]>"
    if isinstance(node, TextNode):
        return _escape_text(node.text)
    raise InvalidElementError(f"Unsupported node type: {type(node).__name__}")


def _write_element(root: ElementNode, lines: list[str], unit: str) -> None:
    # Explicit stack instead of recursion so nesting depth is unbounded
    stack: list[tuple[object, int, bool]] = [(root, 0, False)]

    while stack:
        node, depth, closing = stack.pop()
        pad = unit * depth

        if not isinstance(node, ElementNode):
            lines.append(pad + _format_leaf(node))  # type: ignore[arg-type]
            continue

        if closing:
            lines.append(f"{pad}</{node.name}>")
            continue

        tag = f"<{_check_name(node.name)}{_format_attributes(node.attributes)}"
        children = node.elements or []

        if not children:
            lines.append(f"{pad}{tag}/>")
        elif not any(isinstance(child, ElementNode) for child in children):
            text = "".join(_format_leaf(child) for child in children)  # type: ignore[arg-type]
            lines.append(f"{pad}{tag}>{text}</{node.name}>")
        else:
            lines.append(f"{pad}{tag}>")
            stack.append((node, depth, True))
            for child in reversed(children):
                stack.append((child, depth + 1, False))


def print_document(document: XmlDocument, indent: int | None = None) -> str:
    """
    Serialize a document to XML text.

    Args:
        document: Declaration attributes and root elements.
        indent: Spaces per nesting level. Defaults to ``settings.xml_indent``;
            0 prints everything on one line.

    Returns:
        XML string starting with the ``<?xml ...?>`` declaration.

    Raises:
        InvalidElementError: If an element or attribute name is not printable.
    """
    spaces = settings.xml_indent if indent is None else indent
    unit = " " * spaces

    lines = [f"<?xml{_format_attributes(document.declaration)}?>"]
    for element in document.elements:
        _write_element(element, lines, unit)

    return ("\n" if spaces else "").join(lines)
