"""Domain objects for WordCrawl - explicit re-exports to satisfy linters."""
from .crawl_settings import CrawlerSettings as CrawlerSettings
from .crawl_state import CrawlState as CrawlState
from .crawler_result import CrawlerResult as CrawlerResult
from .http_response import HttpResponse as HttpResponse
from .indexed_heap import IndexedMinHeap as IndexedMinHeap
from .node_kind import NodeKind as NodeKind
from .visited_tracker import NodeVisitedTracker as NodeVisitedTracker

__all__ = [
    "CrawlerSettings",
    "CrawlState",
    "CrawlerResult",
    "HttpResponse",
    "IndexedMinHeap",
    "NodeKind",
    "NodeVisitedTracker",
]
