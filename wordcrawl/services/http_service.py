import logging
from typing import Callable, Dict

import requests

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)

ACCEPT_HTML = "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8"


class HttpService:
    """
    Single GET of an HTML page through an injected `http_client`.

    `http_client` is normally the `get` of a `requests.Session` owned by the
    crawler. Transport failures become HttpFetchError; any status code is
    returned as-is and judged by the caller.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.http_client = http_client
        self.timeout = timeout

    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": ACCEPT_HTML}

    def fetch(self, url: str) -> HttpResponse:
        try:
            resp = self.http_client(url, headers=self.headers(), timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        headers = getattr(resp, "headers", None) or {}
        logger.debug("GET %s -> %s (%s chars)", url, resp.status_code, len(resp.text or ""))
        return HttpResponse(
            status_code=resp.status_code,
            text=resp.text,
            content_type=headers.get("Content-Type"),
            reason=getattr(resp, "reason", None),
        )
