"""
Pydantic schemas for feed input and markup trees.
"""

from .elements import (
    Attributes,
    CDataExtension,
    CDataNode,
    Element,
    ElementExtension,
    ElementNode,
    Extension,
    TextExtension,
    TextNode,
    XmlDocument,
    cdata_element,
    text_element,
)
from .feed import Author, Category, Enclosure, FeedLinks, FeedOptions, Item

__all__ = [
    # Elements
    "Attributes",
    "TextNode",
    "CDataNode",
    "ElementNode",
    "Element",
    "TextExtension",
    "CDataExtension",
    "ElementExtension",
    "Extension",
    "XmlDocument",
    "text_element",
    "cdata_element",
    # Feed
    "Author",
    "Category",
    "Enclosure",
    "FeedLinks",
    "FeedOptions",
    "Item",
]
