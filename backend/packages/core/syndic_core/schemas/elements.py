"""
Element tree schemas.

A markup tree is a closed union of three node kinds: text leaves, CDATA
leaves and named branches. The same three kinds exist twice:

* ``Element`` is the generic tree the printer consumes. Leaves carry no name.
* ``Extension`` is the tree callers attach to feeds and items. Every node,
  leaves included, carries a name.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, model_validator

Attributes = dict[str, str | int | float | None]
"""Attribute map. ``None`` values are dropped by the printer."""

TextValue = str | int | float | bool


class TextNode(BaseModel):
    """Unnamed text leaf."""

    type: Literal["text"] = "text"
    text: TextValue
    attributes: Attributes | None = None


class CDataNode(BaseModel):
    """Unnamed character-data leaf."""

    type: Literal["cdata"] = "cdata"
    cdata: str
    attributes: Attributes | None = None


class _BranchBase(BaseModel):
    type: Literal["element"] = "element"
    name: str
    attributes: Attributes | None = None

    @model_validator(mode="after")
    def require_content(self) -> Any:
        if getattr(self, "elements", None) is None and self.attributes is None:
            raise ValueError(f"element {self.name!r} needs child elements or attributes")
        return self


class ElementNode(_BranchBase):
    """Named branch holding generic child elements."""

    elements: list["Element"] | None = None


Element = Annotated[Union[TextNode, CDataNode, ElementNode], Field(discriminator="type")]


class TextExtension(TextNode):
    """Named text leaf supplied by the caller."""

    name: str


class CDataExtension(CDataNode):
    """Named character-data leaf supplied by the caller."""

    name: str


class ElementExtension(_BranchBase):
    """Named branch holding further extensions."""

    elements: list["Extension"] | None = None


Extension = Annotated[
    Union[TextExtension, CDataExtension, ElementExtension], Field(discriminator="type")
]

ElementNode.model_rebuild()
ElementExtension.model_rebuild()


class XmlDocument(BaseModel):
    """A printable document: XML declaration attributes plus root elements."""

    declaration: Attributes = Field(
        default_factory=lambda: {"version": "1.0", "encoding": "utf-8"}
    )
    elements: list[ElementNode] = Field(default_factory=list)


def text_element(name: str, text: TextValue, attributes: Attributes | None = None) -> ElementNode:
    """Build ``<name>text</name>``."""
    return ElementNode(name=name, attributes=attributes, elements=[TextNode(text=text)])


def cdata_element(name: str, cdata: str, attributes: Attributes | None = None) -> ElementNode:
    """Build ``<name><![CDATA[cdata]]></name>``."""
    return ElementNode(name=name, attributes=attributes, elements=[CDataNode(cdata=cdata)])
