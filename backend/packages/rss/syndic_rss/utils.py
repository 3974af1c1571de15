"""
Shared helpers for the feed renderers.

URL escaping, date formatting and the field-resolution rules every
output format applies the same way.
"""

from datetime import UTC, datetime
from email.utils import format_datetime
from urllib.parse import urlsplit

from syndic_core.exceptions import MalformedURLError
from syndic_core.schemas import Enclosure, Item


def sanitize(url: str | None) -> str | None:
    """
    Escape ampersands in a URL-bearing value.

    Args:
        url: Value to escape. ``None`` passes through.

    Returns:
        The value with every ``&`` replaced by ``&amp;``.
    """
    if url is None:
        return None
    return url.replace("&", "&amp;")


def ensure_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def to_http_date(value: datetime) -> str:
    """Format as an RFC 7231 HTTP-date, e.g. ``Mon, 19 Oct 2026 08:00:00 GMT``."""
    return format_datetime(ensure_utc(value), usegmt=True)


def to_iso8601(value: datetime) -> str:
    """Format as ISO 8601 with millisecond precision and a ``Z`` suffix."""
    return ensure_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_duration(seconds: int) -> str:
    """
    Format a duration for ``itunes:duration``.

    The hours segment is left out when it is zero: 125 becomes ``2:05``
    and 3725 becomes ``1:02:05``.
    """
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def media_subtype(url: str) -> str:
    """
    Derive a MIME subtype from the file extension of a URL path.

    Args:
        url: Absolute URL of the media resource.

    Returns:
        The text after the last ``.`` of the URL path.

    Raises:
        MalformedURLError: If the URL has no scheme or host, or cannot be parsed.
    """
    try:
        parts = urlsplit(url)
        parts.port  # raises on a non-numeric port
    except ValueError as e:
        raise MalformedURLError(url, str(e)) from e

    if not parts.scheme or not parts.netloc:
        raise MalformedURLError(url)

    return parts.path.split(".")[-1]


def resolve_guid(item: Item) -> tuple[str, bool] | None:
    """
    Pick the stable identifier of an item.

    Priority is ``guid``, then ``id``, then ``link``. Only the link
    fallback counts as a permalink.

    Returns:
        Tuple of (value, is_permalink), or None if the item has none of the three.
    """
    if item.guid:
        return item.guid, False
    elif item.id:
        return item.id, False
    elif item.link:
        return item.link, True
    return None


def pick_enclosure(item: Item) -> tuple[str, str | Enclosure] | None:
    """
    Select the single media attachment rendered for an item.

    Priority is video, then audio, then image, then the generic enclosure.

    Returns:
        Tuple of (media category, enclosure), or None if the item has no media.
    """
    if item.video:
        return "video", item.video
    elif item.audio:
        return "audio", item.audio
    elif item.image:
        return "image", item.image
    elif item.enclosure:
        # Plain enclosures share the image category
        return "image", item.enclosure
    return None


def describe_enclosure(enclosure: str | Enclosure, mime_category: str) -> Enclosure:
    """
    Fill in the media type and length of an enclosure.

    A bare URL gets ``length=0`` and a ``<category>/<extension>`` type. A
    structured enclosure gets the same defaults, overridden by any field it
    sets itself. The input is never modified.

    Raises:
        MalformedURLError: If the enclosure URL cannot be parsed.
    """
    url = enclosure if isinstance(enclosure, str) else enclosure.url
    described = Enclosure(url=url, length=0, type=f"{mime_category}/{media_subtype(url)}")

    if isinstance(enclosure, Enclosure):
        described = described.model_copy(update=enclosure.model_dump(exclude_none=True))

    return described
