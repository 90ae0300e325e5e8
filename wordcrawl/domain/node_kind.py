from enum import Enum

from bs4 import BeautifulSoup, Comment, NavigableString, Tag
from bs4.element import PreformattedString

from wordcrawl.exceptions import TraversalInvariantError


class NodeKind(Enum):
    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    # doctype, CDATA, processing instructions and other declarations
    DECLARATION = "declaration"


def classify_node(node) -> NodeKind:
    """Map a parsed BeautifulSoup node to the kind the traversal cares about.

    Order matters: BeautifulSoup is a Tag, and Comment is a preformatted
    NavigableString.
    """
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, Comment):
        return NodeKind.COMMENT
    if isinstance(node, PreformattedString):
        return NodeKind.DECLARATION
    if isinstance(node, NavigableString):
        return NodeKind.TEXT
    raise TraversalInvariantError(f"Unsupported node type in document tree: {type(node).__name__}")
