"""
Error types raised while rendering feeds.
"""


class SyndicError(Exception):
    """Base class for all Syndic errors."""


class MalformedURLError(SyndicError, ValueError):
    """An enclosure URL could not be parsed."""

    def __init__(self, url: str, reason: str = "missing scheme or host"):
        self.url = url
        self.reason = reason
        super().__init__(f"Malformed URL {url!r}: {reason}")


class InvalidElementError(SyndicError, ValueError):
    """The printer was handed a node it cannot serialize."""
