"""JSON Feed 1.1 renderer (https://www.jsonfeed.org/version/1.1/)."""

import json
from typing import TYPE_CHECKING, Any

from syndic_core import get_logger
from syndic_core.config import settings
from syndic_core.schemas import Author, Item

from .extensions import merge_json_extensions
from .utils import describe_enclosure, pick_enclosure, resolve_guid, to_iso8601

if TYPE_CHECKING:
    from .feed import Feed

logger = get_logger(__name__)

JSONFEED_VERSION_URL = "https://jsonfeed.org/version/1.1"

# Top-level and item keys defined by JSON Feed 1.1; extensions never take them
FEED_KEYS = frozenset(
    {
        "version",
        "title",
        "home_page_url",
        "feed_url",
        "description",
        "user_comment",
        "next_url",
        "icon",
        "favicon",
        "author",
        "authors",
        "language",
        "expired",
        "hubs",
        "items",
    }
)
ITEM_KEYS = frozenset(
    {
        "id",
        "url",
        "external_url",
        "title",
        "content_html",
        "content_text",
        "summary",
        "image",
        "banner_image",
        "date_published",
        "date_modified",
        "author",
        "authors",
        "tags",
        "language",
        "attachments",
    }
)


def _compact(obj: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None or an empty list."""
    return {k: v for k, v in obj.items() if v is not None and v != []}


def _author(author: Author) -> dict[str, Any]:
    return _compact({"name": author.name, "url": author.link, "avatar": author.avatar})


def _authors(authors: list[Author]) -> list[dict[str, Any]]:
    return [a for a in (_author(author) for author in authors) if a]


def _attachments(item: Item) -> list[dict[str, Any]]:
    picked = pick_enclosure(item)
    if picked is None:
        return []

    enclosure = describe_enclosure(picked[1], picked[0])
    return [
        _compact(
            {
                "url": enclosure.url,
                "mime_type": enclosure.type,
                "title": enclosure.title,
                "size_in_bytes": enclosure.length,
                "duration_in_seconds": enclosure.duration,
            }
        )
    ]


def _item(item: Item) -> dict[str, Any]:
    guid = resolve_guid(item)
    image = item.image if isinstance(item.image, str) or item.image is None else item.image.url

    obj = _compact(
        {
            "id": guid[0] if guid else None,
            "url": item.link,
            "title": item.title,
            "summary": item.description,
            "content_html": item.content,
            "image": image,
            "date_published": to_iso8601(item.published) if item.published else None,
            "date_modified": to_iso8601(item.date) if item.date else None,
            "authors": _authors(item.author),
            "tags": [category.name for category in item.category if category.name],
            "attachments": _attachments(item),
        }
    )
    return merge_json_extensions(obj, item.extensions, ITEM_KEYS)


def build_json1(feed: "Feed") -> dict[str, Any]:
    """
    Build the JSON Feed object for a feed.

    Args:
        feed: Feed to render. It is not modified.

    Returns:
        JSON-compatible dict.

    Raises:
        MalformedURLError: If an enclosure URL cannot be parsed.
    """
    options = feed.options

    obj = _compact(
        {
            "version": JSONFEED_VERSION_URL,
            "title": options.title,
            "home_page_url": options.link,
            "feed_url": options.feed_links.json_ or options.feed,
            "description": options.description,
            "icon": options.image,
            "favicon": options.favicon,
            "language": options.language,
            "authors": _authors([options.author]) if options.author else None,
            "hubs": [{"type": "WebSub", "url": options.hub}] if options.hub else None,
        }
    )
    merge_json_extensions(obj, feed.extensions, FEED_KEYS)

    obj["items"] = [_item(item) for item in feed.items]
    return obj


def render_json1(feed: "Feed", indent: int | None = None) -> str:
    """
    Render a feed as JSON Feed text.

    Args:
        feed: Feed to render.
        indent: JSON indentation. Defaults to ``settings.json_indent``.

    Returns:
        JSON string.
    """
    logger.debug(
        "Rendering JSON feed",
        extra={"feed_id": feed.options.id, "item_count": len(feed.items)},
    )
    return json.dumps(
        build_json1(feed),
        indent=settings.json_indent if indent is None else indent,
        ensure_ascii=False,
    )
