"""
Feed aggregate.

Collects feed metadata, items, categories, contributors and extensions,
and renders them in any of the supported formats.
"""

from syndic_core.schemas import Author, Extension, FeedOptions, Item

from .atom1 import render_atom1
from .json1 import render_json1
from .rss2 import render_rss2


class Feed:
    """
    Feed under construction.

    Collections only grow, in insertion order; nothing is deduplicated.
    Rendering never modifies the feed, but the feed must not be appended
    to while a render is in progress.
    """

    def __init__(self, options: FeedOptions):
        """
        Initialize feed.

        Args:
            options: Feed-level metadata.
        """
        self.options = options
        self.items: list[Item] = []
        self.categories: list[str] = []
        self.contributors: list[Author] = []
        self.extensions: list[Extension] = []

    def add_item(self, item: Item) -> None:
        """Append an item."""
        self.items.append(item)

    def add_category(self, category: str) -> None:
        """Append a channel-level category name."""
        self.categories.append(category)

    def add_contributor(self, contributor: Author) -> None:
        """Append a feed contributor."""
        self.contributors.append(contributor)

    def add_extension(self, extension: Extension) -> None:
        """Append a feed-level extension."""
        self.extensions.append(extension)

    def rss2(self) -> str:
        """Return the feed as RSS 2.0 XML."""
        return render_rss2(self)

    def atom1(self) -> str:
        """Return the feed as Atom 1.0 XML."""
        return render_atom1(self)

    def json1(self) -> str:
        """Return the feed as JSON Feed text."""
        return render_json1(self)
