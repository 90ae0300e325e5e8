from dataclasses import replace
from typing import List, NamedTuple, Optional

from wordcrawl.domain.crawl_settings import CrawlerSettings
from wordcrawl.utils.text_utils import tokenize


class ParsedSettings(NamedTuple):
    settings: CrawlerSettings
    word_limit: Optional[int] = None
    excluded_words: Optional[List[str]] = None


class CrawlerSettingsParser:
    """Parse a YAML dict into crawler settings.

    Responsibility: schema/validation for settings files. It does NOT
    perform filesystem IO. Values missing from the file keep the ones in
    `base` (normally the environment defaults); unknown keys are ignored.

    Recognised layout::

        base_address: https://example.com/page
        word_limit: 10
        excluded_words: [the, a]      # or "the,a"
        http:
          timeout: 10
          user_agent: WordCrawl/0.1
          max_retry_attempts: 3
          retry_interval: 1.0
        traversal:
          anchor_id: History
          end_name: h2
    """

    def parse(self, data: dict, base: Optional[CrawlerSettings] = None) -> ParsedSettings:
        base = base or CrawlerSettings()
        http = data.get("http") or {}
        traversal = data.get("traversal") or {}

        changes = {}
        if data.get("base_address"):
            changes["base_address"] = str(data["base_address"])
        if http.get("user_agent"):
            changes["user_agent"] = str(http["user_agent"])
        if http.get("timeout") is not None:
            changes["http_timeout"] = int(http["timeout"])
        if http.get("max_retry_attempts") is not None:
            changes["max_retry_attempts"] = int(http["max_retry_attempts"])
        if http.get("retry_interval") is not None:
            changes["retry_interval"] = float(http["retry_interval"])
        if traversal.get("anchor_id"):
            changes["anchor_id"] = str(traversal["anchor_id"])
        if traversal.get("end_name"):
            changes["end_name"] = str(traversal["end_name"])

        word_limit = data.get("word_limit")
        return ParsedSettings(
            settings=replace(base, **changes),
            word_limit=int(word_limit) if word_limit is not None else None,
            excluded_words=self._parse_excluded_words(data.get("excluded_words")),
        )

    def _parse_excluded_words(self, value) -> Optional[List[str]]:
        if value is None:
            return None
        if isinstance(value, str):
            return tokenize(value.strip().replace(" ", ","), ",")
        return [str(word) for word in value]
