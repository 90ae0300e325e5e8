"""Custom exceptions for WordCrawl services."""
from typing import Optional


class CrawlerError(Exception):
    """Base class for errors raised while crawling a page for words."""


class HttpFetchError(CrawlerError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class HttpStatusError(HttpFetchError):
    """Raised when the server answers with a non-success status code."""

    def __init__(self, url: str, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        detail = f"status {status_code}"
        if reason:
            detail = f"{detail} {reason}"
        super().__init__(url, detail)


class FetchCancelledError(HttpFetchError):
    """Raised when a fetch is cancelled through its stop event. Never retried."""

    def __init__(self, url: str):
        super().__init__(url, "cancelled")


class TraversalInvariantError(CrawlerError):
    """Raised when the document tree has a shape that cannot legally occur,
    e.g. a document node nested as the child of another node."""


class RootNotFoundError(CrawlerError):
    """Raised when the traversal root anchor is missing from the document."""

    def __init__(self, anchor_id: str):
        self.anchor_id = anchor_id
        super().__init__(f"No element with id '{anchor_id}' found in document")


class SettingsFileError(CrawlerError):
    """Raised when a YAML settings file cannot be read or has the wrong shape."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Settings file '{path}' {reason}")
