"""Tests for feed and element tree schemas."""

import pytest
from pydantic import ValidationError

from syndic_core.schemas import (
    CDataExtension,
    CDataNode,
    ElementExtension,
    ElementNode,
    Enclosure,
    FeedLinks,
    FeedOptions,
    Item,
    TextExtension,
    TextNode,
    cdata_element,
    text_element,
)


class TestElementNodes:
    """Test the generic element tree."""

    def test_branch_without_children_or_attributes_is_rejected(self):
        """A branch must carry children, attributes, or both."""
        with pytest.raises(ValidationError):
            ElementNode(name="empty")

    def test_branch_with_only_attributes_is_valid(self):
        node = ElementNode(name="atom:link", attributes={"href": "https://example.com/"})
        assert node.elements is None
        assert node.attributes == {"href": "https://example.com/"}

    def test_branch_with_empty_children_is_valid(self):
        node = ElementNode(name="channel", elements=[])
        assert node.elements == []

    def test_children_are_discriminated_by_type(self):
        node = ElementNode.model_validate(
            {
                "name": "item",
                "elements": [
                    {"type": "text", "text": "plain"},
                    {"type": "cdata", "cdata": "<b>raw</b>"},
                    {"type": "element", "name": "guid", "attributes": {"isPermaLink": "false"}},
                ],
            }
        )
        assert isinstance(node.elements[0], TextNode)
        assert isinstance(node.elements[1], CDataNode)
        assert isinstance(node.elements[2], ElementNode)

    def test_text_value_keeps_scalar_type(self):
        assert TextNode(text=True).text is True
        assert TextNode(text=60).text == 60
        assert TextNode(text="60").text == "60"

    def test_helpers_wrap_a_single_leaf(self):
        title = text_element("title", "Hello", {"lang": "en"})
        assert title.name == "title"
        assert title.attributes == {"lang": "en"}
        assert isinstance(title.elements[0], TextNode)

        body = cdata_element("description", "A & B")
        assert isinstance(body.elements[0], CDataNode)
        assert body.elements[0].cdata == "A & B"


class TestExtensions:
    """Test the named extension tree."""

    def test_leaf_extensions_require_a_name(self):
        with pytest.raises(ValidationError):
            TextExtension.model_validate({"type": "text", "text": "value"})
        with pytest.raises(ValidationError):
            CDataExtension.model_validate({"type": "cdata", "cdata": "value"})

    def test_nested_extension_from_dict(self):
        extension = ElementExtension.model_validate(
            {
                "type": "element",
                "name": "media:group",
                "elements": [
                    {"type": "text", "name": "media:title", "text": "Clip"},
                    {
                        "type": "element",
                        "name": "media:content",
                        "attributes": {"url": "https://example.com/clip.mp4"},
                    },
                ],
            }
        )
        assert isinstance(extension.elements[0], TextExtension)
        assert extension.elements[0].name == "media:title"
        assert isinstance(extension.elements[1], ElementExtension)

    def test_empty_extension_branch_is_rejected(self):
        with pytest.raises(ValidationError):
            ElementExtension(name="custom")


class TestFeedSchemas:
    """Test feed input records."""

    def test_feed_options_require_id_and_title(self):
        with pytest.raises(ValidationError):
            FeedOptions(title="No id")  # type: ignore[call-arg]
        with pytest.raises(ValidationError):
            FeedOptions(id="no-title")  # type: ignore[call-arg]

    def test_feed_options_defaults(self):
        options = FeedOptions(id="feed", title="Feed")
        assert options.podcast is False
        assert options.feed_links == FeedLinks()
        assert options.author is None

    def test_feed_links_accepts_json_alias(self):
        links = FeedLinks.model_validate({"json": "https://example.com/feed.json"})
        assert links.json_ == "https://example.com/feed.json"

    def test_item_media_accepts_url_or_enclosure(self):
        item = Item(
            audio="https://example.com/ep.mp3",
            video={"url": "https://example.com/ep.mp4", "duration": 60},
        )
        assert item.audio == "https://example.com/ep.mp3"
        assert isinstance(item.video, Enclosure)
        assert item.video.duration == 60

    def test_item_collections_default_to_empty(self):
        item = Item()
        assert item.author == []
        assert item.category == []
        assert item.extensions == []

    def test_item_extensions_are_parsed(self):
        item = Item(extensions=[{"type": "text", "name": "dc:creator", "text": "Jane"}])
        assert isinstance(item.extensions[0], TextExtension)
