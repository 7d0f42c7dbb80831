"""
errors.py - Crawler Error Taxonomy

SetupError is fatal and raised before any worker starts.
TransportError is raised by the fetcher and recovered by the worker.
ExtractionError may be raised by a link extractor; the worker recovers from it.
FrontierError signals broken pop/mark_done accounting.
"""


class CrawlerError(Exception):
    """Base class for crawler errors."""


class SetupError(CrawlerError):
    """Missing seeds, invalid configuration or unavailable log sink."""


class TransportError(CrawlerError):
    """The request could not be completed (DNS, connection, timeout...)."""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class ExtractionError(CrawlerError):
    """A document could not be parsed."""


class FrontierError(CrawlerError):
    """mark_done() was called without a matching pop."""
