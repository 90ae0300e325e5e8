"""Dependency injection container for the application."""
from dependency_injector import containers, providers

from wordcrawl import config as env
from wordcrawl.domain.crawl_settings import CrawlerSettings
from wordcrawl.services.crawl_policy import NodeCrawlPolicy
from wordcrawl.services.crawler import Crawler
from wordcrawl.services.document_parser import DocumentParser
from wordcrawl.services.settings_file_store import SettingsFileStore
from wordcrawl.services.settings_parser import CrawlerSettingsParser
from wordcrawl.services.tree_traversal import TreeTraversal


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# WORDCRAWL_BASE_ADDRESS (str, default: "https://en.wikipedia.org/wiki/Microsoft")
#   Page fetched by the crawler unless a base address is passed explicitly.
#
# USER_AGENT (str, default: "WordCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# WORDCRAWL_HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for each outbound HTTP request.
#
# WORDCRAWL_MAX_RETRY_ATTEMPTS (int, default: 3)
#   Retries after a failed first attempt (transport error or non-2xx status).
#
# WORDCRAWL_RETRY_INTERVAL (float seconds, default: 1.0)
#   Fixed delay between fetch attempts.
#
# WORDCRAWL_ROOT_ANCHOR_ID (str, default: "History")
#   Element id whose parent becomes the traversal root.
#
# WORDCRAWL_END_NAME (str, default: "h2")
#   Name of the sibling element that ends the traversed region.
ENV = {
    "BASE_ADDRESS": env.get_str_env("WORDCRAWL_BASE_ADDRESS", env.DEFAULT_BASE_ADDRESS),
    "USER_AGENT": env.get_str_env("USER_AGENT", env.DEFAULT_USER_AGENT),
    "HTTP_TIMEOUT": env.get_int_env("WORDCRAWL_HTTP_TIMEOUT", env.DEFAULT_HTTP_TIMEOUT),
    "MAX_RETRY_ATTEMPTS": env.get_int_env("WORDCRAWL_MAX_RETRY_ATTEMPTS", env.DEFAULT_MAX_RETRY_ATTEMPTS),
    "RETRY_INTERVAL": env.get_float_env("WORDCRAWL_RETRY_INTERVAL", env.DEFAULT_RETRY_INTERVAL),
    "ROOT_ANCHOR_ID": env.get_str_env("WORDCRAWL_ROOT_ANCHOR_ID", env.DEFAULT_ANCHOR_ID),
    "END_NAME": env.get_str_env("WORDCRAWL_END_NAME", env.DEFAULT_END_NAME),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WordCrawl."""

    # Configuration
    config = providers.Configuration(default=ENV)

    settings = providers.Factory(
        CrawlerSettings,
        base_address=config.BASE_ADDRESS.as_(str),
        user_agent=config.USER_AGENT.as_(str),
        http_timeout=config.HTTP_TIMEOUT.as_(int),
        max_retry_attempts=config.MAX_RETRY_ATTEMPTS.as_(int),
        retry_interval=config.RETRY_INTERVAL.as_(float),
        anchor_id=config.ROOT_ANCHOR_ID.as_(str),
        end_name=config.END_NAME.as_(str),
    )

    settings_file_store = providers.Singleton(SettingsFileStore)

    settings_parser = providers.Singleton(CrawlerSettingsParser)

    # Stateless collaborators - one per process is enough
    document_parser = providers.Singleton(DocumentParser)

    node_policy = providers.Singleton(NodeCrawlPolicy)

    tree_traversal = providers.Singleton(
        TreeTraversal,
        policy=node_policy,
    )

    # Each crawler owns its word table and HTTP session, so build a new one per call.
    crawler = providers.Factory(
        Crawler,
        settings=settings,
        document_parser=document_parser,
        traversal=tree_traversal,
    )
