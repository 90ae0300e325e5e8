from __future__ import annotations

from dataclasses import dataclass

from wordcrawl import config


@dataclass(frozen=True)
class CrawlerSettings:
    """Network and traversal settings for a crawler.

    Word limit and excluded words are not part of this record: they are
    per-crawler arguments, while these values are usually shared by every
    crawler in a process.
    """

    base_address: str = config.DEFAULT_BASE_ADDRESS
    user_agent: str = config.DEFAULT_USER_AGENT
    http_timeout: int = config.DEFAULT_HTTP_TIMEOUT
    max_retry_attempts: int = config.DEFAULT_MAX_RETRY_ATTEMPTS
    retry_interval: float = config.DEFAULT_RETRY_INTERVAL
    anchor_id: str = config.DEFAULT_ANCHOR_ID
    end_name: str = config.DEFAULT_END_NAME

    @classmethod
    def from_env(cls) -> CrawlerSettings:
        return cls(
            base_address=config.get_str_env("WORDCRAWL_BASE_ADDRESS", config.DEFAULT_BASE_ADDRESS),
            user_agent=config.get_str_env("USER_AGENT", config.DEFAULT_USER_AGENT),
            http_timeout=config.get_int_env("WORDCRAWL_HTTP_TIMEOUT", config.DEFAULT_HTTP_TIMEOUT),
            max_retry_attempts=config.get_int_env("WORDCRAWL_MAX_RETRY_ATTEMPTS", config.DEFAULT_MAX_RETRY_ATTEMPTS),
            retry_interval=config.get_float_env("WORDCRAWL_RETRY_INTERVAL", config.DEFAULT_RETRY_INTERVAL),
            anchor_id=config.get_str_env("WORDCRAWL_ROOT_ANCHOR_ID", config.DEFAULT_ANCHOR_ID),
            end_name=config.get_str_env("WORDCRAWL_END_NAME", config.DEFAULT_END_NAME),
        )
