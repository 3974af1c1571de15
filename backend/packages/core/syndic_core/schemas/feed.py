"""
Feed and item schemas.

Input models describing a feed before it is rendered.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .elements import Extension


class Author(BaseModel):
    """Person credited on a feed or item."""

    name: str | None = None
    email: str | None = None
    link: str | None = None
    avatar: str | None = None


class Category(BaseModel):
    """Item category."""

    name: str | None = None
    domain: str | None = None
    scheme: str | None = None
    term: str | None = None


class Enclosure(BaseModel):
    """External media resource attached to an item."""

    url: str
    type: str | None = None
    length: int | None = None
    title: str | None = None
    duration: int | None = None  # seconds


class FeedLinks(BaseModel):
    """Per-format self URLs."""

    model_config = ConfigDict(populate_by_name=True)

    rss: str | None = None
    atom: str | None = None
    json_: str | None = Field(default=None, alias="json")


class FeedOptions(BaseModel):
    """Feed-level metadata."""

    id: str
    title: str
    updated: datetime | None = None
    generator: str | None = None
    language: str | None = None
    ttl: int | None = None

    feed: str | None = None
    feed_links: FeedLinks = Field(default_factory=FeedLinks)
    hub: str | None = None
    docs: str | None = None

    podcast: bool = False
    category: str | None = None

    author: Author | None = None
    link: str | None = None
    description: str | None = None
    image: str | None = None
    favicon: str | None = None
    copyright: str | None = None


class Item(BaseModel):
    """One feed entry."""

    title: str | None = None
    id: str | None = None
    link: str | None = None
    date: datetime | None = None

    description: str | None = None
    content: str | None = None
    category: list[Category] = Field(default_factory=list)

    guid: str | None = None

    image: str | Enclosure | None = None
    audio: str | Enclosure | None = None
    video: str | Enclosure | None = None
    enclosure: str | Enclosure | None = None

    author: list[Author] = Field(default_factory=list)
    contributor: list[Author] = Field(default_factory=list)

    published: datetime | None = None
    copyright: str | None = None

    extensions: list[Extension] = Field(default_factory=list)
