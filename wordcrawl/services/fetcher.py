from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import FetchCancelledError, HttpFetchError, HttpStatusError
from wordcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Fetch a URL and return a successful HTTP-like response or raise HttpFetchError."""

    def fetch(self, url: str, stop_event=None) -> HttpResponse: ...


class RetryingFetcher:
    """Fetches through `HttpService`, retrying failed attempts.

    A transport error or a non-2xx status counts as a failed attempt. After
    the first attempt, up to `max_retry_attempts` retries are made with a
    fixed `retry_interval` between them; the last error is then raised.

    `stop_event` (anything with `is_set()`, optionally `wait(timeout)`) is
    checked before each attempt and while waiting between attempts. A
    cancelled fetch raises FetchCancelledError and is not retried.
    """

    def __init__(
        self,
        http_service: HttpService,
        max_retry_attempts: int = 3,
        retry_interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._http_service = http_service
        self.max_retry_attempts = max(0, int(max_retry_attempts))
        self.retry_interval = max(0.0, float(retry_interval))
        self._sleep = sleep

    def _is_stopped(self, stop_event) -> bool:
        return stop_event is not None and getattr(stop_event, "is_set", lambda: False)()

    def _wait(self, url: str, stop_event) -> None:
        if stop_event is not None and hasattr(stop_event, "wait"):
            if stop_event.wait(self.retry_interval):
                raise FetchCancelledError(url)
            return
        self._sleep(self.retry_interval)

    def fetch(self, url: str, stop_event=None) -> HttpResponse:
        attempt = 0
        while True:
            if self._is_stopped(stop_event):
                logger.info("Fetch cancelled for %s", url)
                raise FetchCancelledError(url)
            try:
                response = self._http_service.fetch(url)
                if not response.is_success:
                    raise HttpStatusError(url, response.status_code, response.reason)
                return response
            except HttpFetchError as e:
                attempt += 1
                if attempt > self.max_retry_attempts:
                    logger.warning("Giving up on %s after %s attempt(s): %s", url, attempt, e)
                    raise
                logger.warning(
                    "Fetch attempt %s for %s failed: %s; retrying in %ss",
                    attempt,
                    url,
                    e,
                    self.retry_interval,
                )
            self._wait(url, stop_event)
