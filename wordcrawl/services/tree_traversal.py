import logging
from typing import Callable, Optional

from wordcrawl.domain.node_kind import NodeKind, classify_node
from wordcrawl.domain.visited_tracker import NodeVisitedTracker
from wordcrawl.exceptions import TraversalInvariantError
from wordcrawl.services.crawl_policy import NodeCrawlPolicy

logger = logging.getLogger(__name__)

TextSink = Callable[[str], object]


class TreeTraversal:
    """Depth-first walk over a bounded slice of a parsed document.

    The slice starts at a root node and runs along the root's sibling chain
    until a sibling named `end_name` (exclusive) or the end of the chain.
    Every text fragment that should count is passed to `on_text` in document
    order within each subtree.
    """

    def __init__(self, policy: Optional[NodeCrawlPolicy] = None):
        self.policy = policy or NodeCrawlPolicy()

    def traverse(self, root, end_name: str, on_text: TextSink) -> int:
        """Descend `root` and each following sibling up to `end_name`.

        Returns the number of sibling subtrees descended.
        """
        if root is None:
            raise ValueError("root is required for traversal")

        visited = NodeVisitedTracker()
        descended = 0
        node = root
        while True:
            self.descend(node, on_text, visited)
            descended += 1
            node = node.next_sibling
            if node is None or node.name == end_name:
                break

        logger.debug("Traversed %s sibling subtree(s), %s node(s) visited", descended, len(visited))
        return descended

    def descend(self, node, on_text: TextSink, visited: Optional[NodeVisitedTracker] = None) -> None:
        """Depth-first descent of one subtree using an explicit stack."""
        if visited is None:
            visited = NodeVisitedTracker()

        stack = [node]
        while stack:
            current = stack.pop()
            kind = classify_node(current)
            if kind is NodeKind.TEXT:
                on_text(str(current))
                continue
            if visited.is_visited(current) or not self.policy.should_crawl(current):
                continue

            visited.mark(current)
            for child in current.children:
                child_kind = classify_node(child)
                if child_kind in (NodeKind.COMMENT, NodeKind.DECLARATION):
                    continue
                if child_kind is NodeKind.DOCUMENT:
                    raise TraversalInvariantError(
                        f"Document cannot be a child of <{current.name}>"
                    )
                if child_kind is NodeKind.TEXT:
                    on_text(str(child))
                    continue
                if not visited.is_visited(child) and self.policy.should_crawl(child):
                    stack.append(child)
