"""
RSS 2.0 renderer.

Maps a feed onto the RSS 2.0 vocabulary:
https://validator.w3.org/feed/docs/rss2.html
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from syndic_core import get_logger
from syndic_core.config import settings
from syndic_core.schemas import (
    Attributes,
    Enclosure,
    ElementNode,
    FeedOptions,
    Item,
    XmlDocument,
    cdata_element,
    text_element,
)

from .extensions import serialize_extensions
from .printer import print_document
from .utils import (
    describe_enclosure,
    format_duration,
    pick_enclosure,
    resolve_guid,
    sanitize,
    to_http_date,
)

if TYPE_CHECKING:
    from .feed import Feed

logger = get_logger(__name__)

NS_ATOM = "http://www.w3.org/2005/Atom"
NS_DC = "http://purl.org/dc/elements/1.1/"
NS_CONTENT = "http://purl.org/rss/1.0/modules/content/"
NS_GOOGLEPLAY = "http://www.google.com/schemas/play-podcasts/1.0"
NS_ITUNES = "http://www.itunes.com/dtds/podcast-1.0.dtd"


class _Namespaces:
    """Tracks which optional vocabularies a render actually used."""

    def __init__(self) -> None:
        self.atom = False
        self.content = False


def _image_element(options: FeedOptions) -> ElementNode:
    children = [
        text_element("title", options.title),
        # Left unescaped; only the link child is sanitized
        text_element("url", options.image),  # type: ignore[arg-type]
    ]
    if options.link:
        children.append(text_element("link", sanitize(options.link)))  # type: ignore[arg-type]
    return ElementNode(name="image", elements=children)


def _self_or_hub_link(options: FeedOptions) -> ElementNode | None:
    """Hub link wins over the self link; at most one is emitted."""
    if options.hub:
        return ElementNode(name="atom:link", attributes={"href": sanitize(options.hub), "rel": "hub"})

    self_url = options.feed or options.feed_links.rss
    if self_url:
        return ElementNode(
            name="atom:link",
            attributes={
                "href": sanitize(self_url),
                "rel": "self",
                "type": "application/rss+xml",
            },
        )
    return None


def _enclosure_elements(item: Item, podcast: bool) -> list[ElementNode]:
    """
    Render the one enclosure an item gets, plus ``itunes:duration`` for
    podcast audio.
    """
    picked = pick_enclosure(item)
    if picked is None:
        return []

    mime_category, source = picked
    enclosure = describe_enclosure(source, mime_category)

    duration = None
    if mime_category == "audio" and podcast and isinstance(source, Enclosure) and source.duration:
        duration = source.duration
        enclosure = enclosure.model_copy(update={"duration": None})

    attributes: Attributes = {
        "url": sanitize(enclosure.url),
        "length": enclosure.length,
        "type": enclosure.type,
        "title": enclosure.title,
        "duration": enclosure.duration,
    }
    elements = [ElementNode(name="enclosure", attributes=attributes)]

    if duration:
        elements.append(text_element("itunes:duration", format_duration(duration)))

    return elements


def _item_element(item: Item, podcast: bool, namespaces: _Namespaces) -> ElementNode:
    children: list[ElementNode] = []

    if item.title:
        children.append(cdata_element("title", item.title))

    if item.link:
        children.append(text_element("link", sanitize(item.link)))  # type: ignore[arg-type]

    guid = resolve_guid(item)
    if guid is not None:
        value, is_permalink = guid
        if is_permalink:
            value = sanitize(value)  # type: ignore[assignment]
        children.append(
            text_element("guid", value, {"isPermaLink": "true" if is_permalink else "false"})
        )

    if item.published:
        children.append(text_element("pubDate", to_http_date(item.published)))
    elif item.date:
        children.append(text_element("pubDate", to_http_date(item.date)))

    if item.description:
        children.append(cdata_element("description", item.description))

    if item.content:
        namespaces.content = True
        children.append(cdata_element("content:encoded", item.content))

    for author in item.author:
        # RSS wants "email (name)"; authors missing either are skipped
        if author.email and author.name:
            children.append(text_element("author", f"{author.email} ({author.name})"))

    for category in item.category:
        if category.name:
            children.append(text_element("category", category.name, {"domain": category.domain}))

    children.extend(_enclosure_elements(item, podcast))
    children.extend(serialize_extensions(item.extensions))

    return ElementNode(name="item", elements=children)


def _podcast_elements(options: FeedOptions) -> list[ElementNode]:
    """Google Play and iTunes channel tags."""
    elements: list[ElementNode] = []

    if options.category:
        elements.append(text_element("googleplay:category", options.category))
        elements.append(text_element("itunes:category", options.category))

    author = options.author
    if author and author.email:
        elements.append(text_element("googleplay:owner", author.email))
        elements.append(
            ElementNode(
                name="itunes:owner",
                elements=[text_element("itunes:email", author.email)],
            )
        )
    if author and author.name:
        elements.append(text_element("googleplay:author", author.name))
        elements.append(text_element("itunes:author", author.name))

    if options.image:
        elements.append(
            ElementNode(name="googleplay:image", attributes={"href": sanitize(options.image)})
        )

    return elements


def build_rss2(feed: "Feed") -> XmlDocument:
    """
    Build the RSS 2.0 element tree for a feed.

    Namespace declarations are only added to the ``rss`` element for
    features the feed actually uses.

    Args:
        feed: Feed to render. It is not modified.

    Returns:
        Printable document with a single ``rss`` root.

    Raises:
        MalformedURLError: If an enclosure URL cannot be parsed.
    """
    options = feed.options
    namespaces = _Namespaces()

    rss_attributes: Attributes = {"version": "2.0"}
    channel: list[ElementNode] = []

    channel.append(text_element("title", options.title))
    if options.link:
        channel.append(text_element("link", sanitize(options.link)))  # type: ignore[arg-type]
    if options.description:
        channel.append(text_element("description", options.description))
    channel.append(text_element("lastBuildDate", to_http_date(options.updated or datetime.now(UTC))))
    channel.append(text_element("docs", options.docs or settings.rss_docs_url))
    channel.append(text_element("generator", options.generator or settings.generator))

    if options.language:
        channel.append(text_element("language", options.language))
    if options.ttl:
        channel.append(text_element("ttl", options.ttl))

    if options.image:
        channel.append(_image_element(options))

    if options.copyright:
        channel.append(text_element("copyright", options.copyright))

    for category in feed.categories:
        channel.append(text_element("category", category))

    link = _self_or_hub_link(options)
    if link is not None:
        namespaces.atom = True
        channel.append(link)

    for item in feed.items:
        channel.append(_item_element(item, options.podcast, namespaces))

    if namespaces.content:
        rss_attributes["xmlns:dc"] = NS_DC
        rss_attributes["xmlns:content"] = NS_CONTENT

    channel.extend(serialize_extensions(feed.extensions))

    if namespaces.atom:
        rss_attributes["xmlns:atom"] = NS_ATOM

    if options.podcast:
        rss_attributes["xmlns:googleplay"] = NS_GOOGLEPLAY
        rss_attributes["xmlns:itunes"] = NS_ITUNES
        channel.extend(_podcast_elements(options))

    rss = ElementNode(
        name="rss",
        attributes=rss_attributes,
        elements=[ElementNode(name="channel", elements=channel)],
    )
    return XmlDocument(elements=[rss])


def render_rss2(feed: "Feed") -> str:
    """
    Render a feed as RSS 2.0 XML.

    Args:
        feed: Feed to render.

    Returns:
        XML string with a UTF-8 declaration.
    """
    logger.debug(
        "Rendering RSS 2.0 feed",
        extra={"feed_id": feed.options.id, "item_count": len(feed.items)},
    )
    return print_document(build_rss2(feed))
