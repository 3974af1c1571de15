"""Global pytest fixtures for testing."""

import contextlib
from datetime import UTC, datetime

import dotenv
import pytest

from syndic_core.schemas import Author, Enclosure, FeedOptions, Item
from syndic_rss import Feed

with contextlib.suppress(OSError):
    dotenv.load_dotenv()


FIXED_UPDATED = datetime(2026, 10, 19, 8, 30, 0, tzinfo=UTC)


@pytest.fixture
def feed_options() -> FeedOptions:
    """Minimal valid feed options with a fixed update time."""
    return FeedOptions(
        id="https://example.com/",
        title="Example Feed",
        link="https://example.com/",
        description="Things that happened",
        updated=FIXED_UPDATED,
    )


@pytest.fixture
def feed(feed_options: FeedOptions) -> Feed:
    """Empty feed built from ``feed_options``."""
    return Feed(feed_options)


@pytest.fixture
def full_feed() -> Feed:
    """Feed exercising most fields of every format."""
    feed = Feed(
        FeedOptions(
            id="https://example.com/",
            title="Full Feed",
            link="https://example.com/?a=1&b=2",
            description="A & B",
            updated=FIXED_UPDATED,
            language="en",
            ttl=60,
            image="https://example.com/logo.png",
            favicon="https://example.com/favicon.ico",
            copyright="All rights reserved 2026",
            feed="https://example.com/feed.xml",
            author=Author(name="Jane Doe", email="jane@example.com", link="https://example.com/jane"),
        )
    )
    feed.add_category("Technology")
    feed.add_category("Science")
    feed.add_contributor(Author(name="John Roe", email="john@example.com"))
    feed.add_item(
        Item(
            title="First <post>",
            id="post-1",
            link="https://example.com/posts/1?ref=feed&src=rss",
            description="Summary & more",
            content="<p>Hello</p>",
            date=datetime(2026, 10, 18, 12, 0, 0, tzinfo=UTC),
            published=datetime(2026, 10, 17, 12, 0, 0, tzinfo=UTC),
            author=[Author(name="Jane Doe", email="jane@example.com")],
            image=Enclosure(url="https://example.com/img/1.jpg", length=1234),
        )
    )
    feed.add_item(
        Item(
            title="Second post",
            link="https://example.com/posts/2",
            date=datetime(2026, 10, 16, 9, 15, 0, tzinfo=UTC),
        )
    )
    return feed
