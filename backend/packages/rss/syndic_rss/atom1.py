"""
Atom 1.0 renderer.

Maps a feed onto the Atom vocabulary (RFC 4287).
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from syndic_core import get_logger
from syndic_core.config import settings
from syndic_core.schemas import (
    Author,
    Category,
    ElementNode,
    Item,
    XmlDocument,
    cdata_element,
    text_element,
)

from .extensions import serialize_extensions
from .printer import print_document
from .utils import describe_enclosure, pick_enclosure, resolve_guid, sanitize, to_iso8601

if TYPE_CHECKING:
    from .feed import Feed

logger = get_logger(__name__)

NS_ATOM = "http://www.w3.org/2005/Atom"


def _person_element(name: str, person: Author) -> ElementNode | None:
    """Build an ``author``/``contributor`` construct; None if it would be empty."""
    children: list[ElementNode] = []
    if person.name:
        children.append(text_element("name", person.name))
    if person.email:
        children.append(text_element("email", person.email))
    if person.link:
        children.append(text_element("uri", sanitize(person.link)))  # type: ignore[arg-type]
    if not children:
        return None
    return ElementNode(name=name, elements=children)


def _category_element(category: Category) -> ElementNode | None:
    term = category.term or category.name
    if not term:
        return None
    return ElementNode(
        name="category",
        attributes={"label": category.name, "scheme": category.scheme, "term": term},
    )


def _link_element(href: str, rel: str | None = None, **attributes: str | int | None) -> ElementNode:
    return ElementNode(name="link", attributes={"rel": rel, "href": sanitize(href), **attributes})


def _entry_element(item: Item, fallback_updated: datetime) -> ElementNode:
    children: list[ElementNode] = []

    if item.title:
        children.append(cdata_element("title", item.title, {"type": "html"}))

    guid = resolve_guid(item)
    if guid is not None:
        children.append(text_element("id", sanitize(guid[0])))  # type: ignore[arg-type]

    if item.link:
        children.append(_link_element(item.link))

    updated = item.date or item.published or fallback_updated
    children.append(text_element("updated", to_iso8601(updated)))

    if item.description:
        children.append(cdata_element("summary", item.description, {"type": "html"}))

    if item.content:
        children.append(cdata_element("content", item.content, {"type": "html"}))

    for author in item.author:
        element = _person_element("author", author)
        if element is not None:
            children.append(element)

    for category in item.category:
        element = _category_element(category)
        if element is not None:
            children.append(element)

    for contributor in item.contributor:
        element = _person_element("contributor", contributor)
        if element is not None:
            children.append(element)

    if item.published:
        children.append(text_element("published", to_iso8601(item.published)))

    if item.copyright:
        children.append(text_element("rights", item.copyright))

    picked = pick_enclosure(item)
    if picked is not None:
        enclosure = describe_enclosure(picked[1], picked[0])
        children.append(
            _link_element(
                enclosure.url,
                "enclosure",
                type=enclosure.type,
                length=enclosure.length,
                title=enclosure.title,
            )
        )

    children.extend(serialize_extensions(item.extensions))

    return ElementNode(name="entry", elements=children)


def build_atom1(feed: "Feed") -> XmlDocument:
    """
    Build the Atom 1.0 element tree for a feed.

    Args:
        feed: Feed to render. It is not modified.

    Returns:
        Printable document with a single ``feed`` root.

    Raises:
        MalformedURLError: If an enclosure URL cannot be parsed.
    """
    options = feed.options
    updated = options.updated or datetime.now(UTC)

    children: list[ElementNode] = [
        text_element("id", options.id),
        text_element("title", options.title),
        text_element("updated", to_iso8601(updated)),
        text_element("generator", options.generator or settings.generator),
    ]

    if options.author:
        author = _person_element("author", options.author)
        if author is not None:
            children.append(author)

    if options.link:
        children.append(_link_element(options.link, "alternate"))

    self_url = options.feed or options.feed_links.atom
    if self_url:
        children.append(_link_element(self_url, "self"))

    if options.hub:
        children.append(_link_element(options.hub, "hub"))

    if options.description:
        children.append(text_element("subtitle", options.description))
    if options.image:
        children.append(text_element("logo", options.image))
    if options.favicon:
        children.append(text_element("icon", options.favicon))
    if options.copyright:
        children.append(text_element("rights", options.copyright))

    for category in feed.categories:
        children.append(ElementNode(name="category", attributes={"term": category}))

    for contributor in feed.contributors:
        element = _person_element("contributor", contributor)
        if element is not None:
            children.append(element)

    for item in feed.items:
        children.append(_entry_element(item, updated))

    children.extend(serialize_extensions(feed.extensions))

    root = ElementNode(name="feed", attributes={"xmlns": NS_ATOM}, elements=children)
    return XmlDocument(elements=[root])


def render_atom1(feed: "Feed") -> str:
    """
    Render a feed as Atom 1.0 XML.

    Args:
        feed: Feed to render.

    Returns:
        XML string with a UTF-8 declaration.
    """
    logger.debug(
        "Rendering Atom 1.0 feed",
        extra={"feed_id": feed.options.id, "item_count": len(feed.items)},
    )
    return print_document(build_atom1(feed))
