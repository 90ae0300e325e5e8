from typing import Dict


class NodeVisitedTracker:
    """
    Tracks which document nodes have been descended during one traversal.

    Nodes are keyed by identity rather than flagged through their own
    attributes, so the parsed document is never mutated and the same tree
    can be traversed again with a fresh tracker. A tracker is meant to live
    for a single traversal call and be discarded afterwards.
    """

    def __init__(self):
        # Holding the node keeps its id() from being reused while we track it.
        self._visited: Dict[int, object] = {}

    def mark(self, node) -> None:
        """Mark a node as visited."""
        self._visited[id(node)] = node

    def is_visited(self, node) -> bool:
        """Check if a node has been visited."""
        return id(node) in self._visited

    def __len__(self) -> int:
        return len(self._visited)
