import logging
from typing import Dict

from wordcrawl.domain.indexed_heap import IndexedMinHeap

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIMIT = 10


class TopKTracker:
    """Incrementally tracks the most frequent words, one occurrence at a time.

    `word_counts` holds the count of every word ever recorded. Alongside it a
    min-heap of at most `word_limit` words (priority = count) answers "what
    are the current top words" without rescanning the whole table.

    A word that is not tracked only gets in when the heap has room, or when
    its count is at least the count of the current minimum, which it then
    displaces. Among equal minimums the entry that has gone longest without
    an update is evicted first. This compares against the minimum at
    insertion time only, so under adversarial orderings the tracked set can
    differ from the true top-K.
    """

    def __init__(self, word_limit: int = DEFAULT_WORD_LIMIT):
        if word_limit <= 0:
            raise ValueError("word_limit must be positive")
        self.word_limit = word_limit
        self.word_counts: Dict[str, int] = {}
        self._heap = IndexedMinHeap()

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, word) -> bool:
        return word in self._heap

    def record_occurrence(self, word: str) -> int:
        """Count one occurrence of `word` and return its new count."""
        count = self.word_counts.get(word, 0) + 1
        self.word_counts[word] = count

        if word in self._heap:
            self._heap.update(word, count)
            return count

        if len(self._heap) < self.word_limit:
            self._heap.push(word, count)
        else:
            lowest, _ = self._heap.peek()
            if count < self.word_counts[lowest]:
                return count
            self._heap.push(word, count)

        if len(self._heap) > self.word_limit:
            evicted, priority = self._heap.pop()
            logger.debug("Removed %r with priority %s from top words", evicted, priority)
        return count

    def snapshot(self) -> Dict[str, int]:
        """Tracked words mapped to their authoritative count in `word_counts`."""
        return {word: self.word_counts[word] for word in self._heap}

    def reset(self) -> None:
        self.word_counts = {}
        self._heap = IndexedMinHeap()
