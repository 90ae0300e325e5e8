from types import SimpleNamespace
from unittest.mock import Mock

import pytest
import requests

from wordcrawl.exceptions import HttpFetchError
from wordcrawl.services.http_service import ACCEPT_HTML, HttpService

PAGE = "https://en.wikipedia.org/wiki/Microsoft"


def _client(status_code=200, text="<html></html>", headers=None, reason="OK"):
    response = SimpleNamespace(status_code=status_code, text=text, headers=headers or {}, reason=reason)
    return Mock(return_value=response)


def test_fetch_returns_page():
    client = _client(text="<p>History</p>", headers={"Content-Type": "text/html; charset=UTF-8"})
    response = HttpService("WordCrawl/test", http_client=client).fetch(PAGE)
    assert response.status_code == 200
    assert response.text == "<p>History</p>"
    assert response.content_type == "text/html; charset=UTF-8"
    assert response.reason == "OK"
    assert response.is_success


def test_fetch_sends_html_headers_and_timeout():
    client = _client()
    HttpService("WordCrawl/test", http_client=client, timeout=3).fetch(PAGE)
    client.assert_called_once_with(
        PAGE,
        headers={"User-Agent": "WordCrawl/test", "Accept": ACCEPT_HTML},
        timeout=3,
    )


@pytest.mark.parametrize("error", [
    requests.exceptions.Timeout("timed out"),
    requests.exceptions.ConnectionError("refused"),
    requests.exceptions.InvalidURL("bad url"),
])
def test_transport_errors_become_fetch_errors(error):
    client = Mock(side_effect=error)
    with pytest.raises(HttpFetchError) as excinfo:
        HttpService("WordCrawl/test", http_client=client).fetch(PAGE)
    assert excinfo.value.url == PAGE
    assert excinfo.value.original is error
    assert PAGE in str(excinfo.value)


def test_error_status_is_returned_not_raised():
    client = _client(status_code=404, text="missing", reason="Not Found")
    response = HttpService("WordCrawl/test", http_client=client).fetch(PAGE)
    assert response.status_code == 404
    assert response.reason == "Not Found"
    assert not response.is_success


def test_response_without_headers_or_reason():
    client = Mock(return_value=SimpleNamespace(status_code=200, text="body"))
    response = HttpService("WordCrawl/test", http_client=client).fetch(PAGE)
    assert response.content_type is None
    assert response.reason is None


def test_non_transport_errors_propagate():
    client = Mock(side_effect=RuntimeError("bug in client"))
    with pytest.raises(RuntimeError):
        HttpService("WordCrawl/test", http_client=client).fetch(PAGE)
