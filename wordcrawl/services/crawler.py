import logging
from typing import Dict, FrozenSet, Iterable, Optional

import requests

from wordcrawl.domain.crawl_settings import CrawlerSettings
from wordcrawl.domain.crawl_state import CrawlState
from wordcrawl.domain.crawler_result import CrawlerResult
from wordcrawl.exceptions import HttpFetchError, TraversalInvariantError
from wordcrawl.services.document_parser import DocumentParser
from wordcrawl.services.fetcher import Fetcher, RetryingFetcher
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.top_k_tracker import DEFAULT_WORD_LIMIT, TopKTracker
from wordcrawl.services.tree_traversal import TreeTraversal
from wordcrawl.services.word_collector import WordCollector

logger = logging.getLogger(__name__)


class Crawler:
    """Crawls one page and keeps the most frequent words of a region of it.

    A crawl moves through IDLE -> FETCHING -> PARSING -> TRAVERSING and ends
    in SUCCEEDED or FAILED. Errors raised while crawling never escape
    `crawl()`: they are logged and returned inside a failed CrawlerResult,
    which carries no words. Starting a crawl mid-crawl is a RuntimeError.

    One crawl per instance at a time; the word table and the HTTP session
    belong to the instance. Use it as a context manager, or call `close()`,
    to release the session.
    """

    def __init__(
        self,
        word_limit: Optional[int] = DEFAULT_WORD_LIMIT,
        excluded_words: Optional[Iterable[str]] = None,
        base_address: Optional[str] = None,
        *,
        settings: Optional[CrawlerSettings] = None,
        fetcher: Optional[Fetcher] = None,
        document_parser: Optional[DocumentParser] = None,
        traversal: Optional[TreeTraversal] = None,
    ):
        self.settings = settings or CrawlerSettings.from_env()
        self._word_limit = word_limit if word_limit is not None and word_limit > 0 else DEFAULT_WORD_LIMIT
        self._excluded_words = frozenset(excluded_words or ())
        self._base_address = base_address or self.settings.base_address

        self._tracker = TopKTracker(self._word_limit)
        self._collector = WordCollector(self._tracker, self._excluded_words)
        self.document_parser = document_parser or DocumentParser()
        self.traversal = traversal or TreeTraversal()

        # The session is only ours to close when we built the fetcher ourselves.
        self._session: Optional[requests.Session] = None
        if fetcher is None:
            self._session = requests.Session()
            http_service = HttpService(
                self.settings.user_agent,
                http_client=self._session.get,
                timeout=self.settings.http_timeout,
            )
            fetcher = RetryingFetcher(
                http_service,
                max_retry_attempts=self.settings.max_retry_attempts,
                retry_interval=self.settings.retry_interval,
            )
        self.fetcher = fetcher
        self.state = CrawlState.IDLE

    @property
    def word_limit(self) -> int:
        return self._word_limit

    @property
    def excluded_words(self) -> FrozenSet[str]:
        return self._excluded_words

    @property
    def base_address(self) -> str:
        return self._base_address

    @property
    def word_counts(self) -> Dict[str, int]:
        return dict(self._tracker.word_counts)

    @property
    def most_frequent(self) -> Dict[str, int]:
        return self._tracker.snapshot()

    def _transition(self, state: CrawlState) -> None:
        logger.debug("Crawl of %s: %s -> %s", self._base_address, self.state.value, state.value)
        self.state = state

    def _fail(self, error: BaseException) -> CrawlerResult:
        self._transition(CrawlState.FAILED)
        return CrawlerResult.failure(error)

    def crawl(self, root_node=None, end_name: Optional[str] = None, stop_event=None) -> CrawlerResult:
        """Fetch the base address and count words in the configured region.

        `root_node` overrides the anchor lookup and `end_name` the name of the
        sibling that ends the region; both are mainly for tests. Counts from a
        previous crawl on this instance are discarded first.
        """
        if self.state is not CrawlState.IDLE and not self.state.is_done:
            raise RuntimeError(f"Crawl of {self._base_address} already in progress ({self.state.value})")

        end_name = end_name or self.settings.end_name
        self._tracker.reset()
        self._transition(CrawlState.FETCHING)

        try:
            response = self.fetcher.fetch(self._base_address, stop_event=stop_event)
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", self._base_address, e)
            return self._fail(e)
        except Exception as e:
            logger.error("Fetch error for %s: %s", self._base_address, e, exc_info=True)
            return self._fail(e)

        try:
            self._transition(CrawlState.PARSING)
            document = self.document_parser.parse(response.text)

            self._transition(CrawlState.TRAVERSING)
            if root_node is None:
                root_node = self.document_parser.find_root(document, self.settings.anchor_id)
            self.traversal.traverse(root_node, end_name, self._collector.collect)
        except TraversalInvariantError as e:
            logger.error("Invalid document tree from %s: %s", self._base_address, e, exc_info=True)
            return self._fail(e)
        except Exception as e:
            logger.error("Error counting words from %s: %s", self._base_address, e, exc_info=True)
            return self._fail(e)

        words = self._tracker.snapshot()
        self._transition(CrawlState.SUCCEEDED)
        logger.info(
            "Crawled %s: %s words, %s distinct, %s tracked",
            self._base_address,
            sum(self._tracker.word_counts.values()),
            len(self._tracker.word_counts),
            len(words),
        )
        return CrawlerResult.success(words)

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
