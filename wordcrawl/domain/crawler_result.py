"""Crawler result data model."""
from typing import Dict, NamedTuple, Optional

SUCCESS_CODE = 0
FAILURE_CODE = -1


class CrawlerResult(NamedTuple):
    """Outcome of a single word crawl.

    Failures are carried as values rather than raised, so callers can log
    them and decide what to do. A failed result never carries a word table.
    """
    success_code: int = SUCCESS_CODE
    """0 on success, negative on failure"""

    error: Optional[BaseException] = None
    """Exception that caused the failure, if any"""

    words: Optional[Dict[str, int]] = None
    """Most frequent words mapped to their final counts (success only)"""

    @property
    def succeeded(self) -> bool:
        return self.success_code == SUCCESS_CODE and self.error is None

    @classmethod
    def success(cls, words: Dict[str, int]) -> "CrawlerResult":
        return cls(success_code=SUCCESS_CODE, error=None, words=dict(words))

    @classmethod
    def failure(cls, error: BaseException) -> "CrawlerResult":
        return cls(success_code=FAILURE_CODE, error=error, words=None)
