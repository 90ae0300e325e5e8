import logging
from typing import Iterable

from wordcrawl.domain.node_kind import NodeKind, classify_node

logger = logging.getLogger(__name__)

SKIPPED_ELEMENT_NAMES = frozenset({"sup"})
THUMBNAIL_CONTAINER_NAME = "div"
THUMBNAIL_CLASSES = frozenset({"thumb tleft", "thumb tright"})


def class_value(node) -> str:
    """Return the node's class attribute as a string.

    Documents from DocumentParser keep the attribute as written. A class list
    from a default BeautifulSoup parse is joined with single spaces.
    """
    get = getattr(node, "get", None)
    if get is None:
        return ""
    value = get("class")
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return " ".join(value)


class NodeCrawlPolicy:
    """Decides which document nodes contribute words.

    Comments and declarations never do. Footnote markers (`sup`) and floated
    thumbnail containers are skipped along with everything inside them.
    """

    def __init__(
        self,
        skipped_names: Iterable[str] = SKIPPED_ELEMENT_NAMES,
        thumbnail_classes: Iterable[str] = THUMBNAIL_CLASSES,
        thumbnail_container: str = THUMBNAIL_CONTAINER_NAME,
    ):
        self.skipped_names = frozenset(skipped_names)
        self.thumbnail_classes = frozenset(thumbnail_classes)
        self.thumbnail_container = thumbnail_container

    def should_crawl(self, node) -> bool:
        if node is None:
            return False

        kind = classify_node(node)
        if kind in (NodeKind.COMMENT, NodeKind.DECLARATION):
            return False
        if kind is NodeKind.TEXT:
            return True

        if node.name in self.skipped_names:
            logger.debug("Skipping <%s> subtree", node.name)
            return False
        if node.name == self.thumbnail_container and class_value(node) in self.thumbnail_classes:
            logger.debug("Skipping thumbnail container %r", class_value(node))
            return False
        return True
