import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup, Tag

from wordcrawl.exceptions import RootNotFoundError

logger = logging.getLogger(__name__)


class DocumentParser:
    """Parses markup into a BeautifulSoup tree and locates the traversal root.

    Parsing is tolerant: malformed markup still yields a best-effort tree.
    Attribute values are kept exactly as written, so `class` stays one string
    instead of being split into a list.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (
            lambda html: BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
        )

    def parse(self, markup: Optional[str]) -> BeautifulSoup:
        return self._soup_factory(markup or "")

    def find_root(self, document: BeautifulSoup, anchor_id: str) -> Tag:
        """Return the parent of the element whose id is `anchor_id`.

        On article pages the anchor is the span inside a section heading, so
        its parent is the heading that opens the section.
        """
        anchor = document.find(id=anchor_id)
        if anchor is None or anchor.parent is None:
            raise RootNotFoundError(anchor_id)
        logger.debug("Traversal root for anchor %r is <%s>", anchor_id, anchor.parent.name)
        return anchor.parent
