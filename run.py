import argparse
import logging
import sys
from typing import List, Optional

from dependency_injector import providers

from wordcrawl import config
from wordcrawl.container import Container
from wordcrawl.exceptions import SettingsFileError
from wordcrawl.logging_setup import configure_logging
from wordcrawl.services.top_k_tracker import DEFAULT_WORD_LIMIT
from wordcrawl.utils.formatting import format_word_list, format_word_table
from wordcrawl.utils.text_utils import tokenize

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wordcrawl",
        description="Count the most frequent words in a section of a web page.",
    )
    parser.add_argument("log_level", nargs="?", default="information",
                        help="verbose, debug, information, warning, error or fatal")
    parser.add_argument("word_limit", nargs="?", default=None,
                        help="number of words to report (default 10)")
    parser.add_argument("excluded_words", nargs="?", default=None,
                        help="words to ignore, separated by commas or spaces")
    parser.add_argument("--config", dest="config_path", default=None,
                        help="YAML settings file")
    parser.add_argument("--url", dest="base_address", default=None,
                        help="page to crawl instead of the configured one")
    return parser.parse_args(argv)


def parse_word_limit(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_excluded_words(raw: Optional[str]) -> Optional[List[str]]:
    if raw is None:
        return None
    return tokenize(raw.strip().replace(" ", ","), ",")


def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, config.log_file())

    container = container or Container()

    word_limit = parse_word_limit(args.word_limit)
    if args.word_limit is not None and word_limit is None:
        logger.debug("Could not set word limit to desired configuration %s.", args.word_limit)
    excluded_words = parse_excluded_words(args.excluded_words)

    if args.config_path:
        try:
            data = container.settings_file_store().load_yaml_dict(args.config_path)
            parsed = container.settings_parser().parse(data, base=container.settings())
        except (SettingsFileError, ValueError, TypeError) as e:
            logger.error("Could not load settings from %s: %s", args.config_path, e)
            return 1
        container.settings.override(providers.Object(parsed.settings))
        if word_limit is None:
            word_limit = parsed.word_limit
        if excluded_words is None:
            excluded_words = parsed.excluded_words

    if word_limit is None:
        word_limit = DEFAULT_WORD_LIMIT
    excluded_words = excluded_words or []

    logger.info(
        "Starting Crawler with configurations: Log_Level=%s, Word_Limit=%s, Excluded_Words=%s",
        args.log_level,
        word_limit,
        format_word_list(excluded_words),
    )

    with container.crawler(
        word_limit=word_limit,
        excluded_words=excluded_words,
        base_address=args.base_address,
    ) as crawler:
        result = crawler.crawl()

    if not result.succeeded:
        logger.error("Crawl failed with Error: %s", result.error, exc_info=result.error)
        return 1

    logger.info("\n***MOST FREQUENT***\n%s", format_word_table(result.words))
    return 0


if __name__ == '__main__':
    sys.exit(main())
