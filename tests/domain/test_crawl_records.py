import pytest

from wordcrawl.domain import CrawlState
from wordcrawl.domain.crawl_settings import CrawlerSettings
from wordcrawl.domain.crawler_result import FAILURE_CODE, SUCCESS_CODE, CrawlerResult
from wordcrawl.domain.http_response import HttpResponse


def test_success_result_copies_words():
    words = {"he": 5}
    result = CrawlerResult.success(words)
    words["he"] = 1
    assert result.succeeded
    assert result.success_code == SUCCESS_CODE
    assert result.words == {"he": 5}


def test_failure_result_has_no_words():
    error = RuntimeError("boom")
    result = CrawlerResult.failure(error)
    assert not result.succeeded
    assert result.success_code == FAILURE_CODE
    assert result.error is error
    assert result.words is None


@pytest.mark.parametrize("status,ok", [(200, True), (204, True), (301, False), (404, False), (500, False)])
def test_http_response_success_range(status, ok):
    assert HttpResponse(status, "").is_success is ok


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("WORDCRAWL_BASE_ADDRESS", "http://env.test/page")
    monkeypatch.setenv("WORDCRAWL_MAX_RETRY_ATTEMPTS", "5")
    monkeypatch.setenv("WORDCRAWL_RETRY_INTERVAL", "0.5")
    monkeypatch.setenv("WORDCRAWL_END_NAME", "h3")
    monkeypatch.setenv("WORDCRAWL_HTTP_TIMEOUT", "soon")
    settings = CrawlerSettings.from_env()
    assert settings.base_address == "http://env.test/page"
    assert settings.max_retry_attempts == 5
    assert settings.retry_interval == 0.5
    assert settings.end_name == "h3"
    # invalid values fall back to the default
    assert settings.http_timeout == CrawlerSettings().http_timeout


def test_crawl_state_is_done():
    assert CrawlState.SUCCEEDED.is_done
    assert CrawlState.FAILED.is_done
    assert not CrawlState.TRAVERSING.is_done
