"""
Feed rendering package.

Provides RSS 2.0, Atom 1.0 and JSON Feed output for feeds built with
the ``Feed`` aggregate.
"""

from .atom1 import build_atom1, render_atom1
from .extensions import extension_to_json, serialize_extension
from .feed import Feed
from .json1 import build_json1, render_json1
from .printer import print_document
from .rss2 import build_rss2, render_rss2
from .utils import sanitize

__all__ = [
    "Feed",
    "build_rss2",
    "render_rss2",
    "build_atom1",
    "render_atom1",
    "build_json1",
    "render_json1",
    "serialize_extension",
    "extension_to_json",
    "print_document",
    "sanitize",
]
