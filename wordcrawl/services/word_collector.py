from typing import Iterable, Optional

from wordcrawl.services.top_k_tracker import TopKTracker
from wordcrawl.utils.text_utils import clean, is_valid_word, tokenize


class WordCollector:
    """Turns raw text fragments into word occurrences on a TopKTracker.

    Exclusion is exact and case sensitive: "The" is counted even when "the"
    is excluded.
    """

    def __init__(self, tracker: TopKTracker, excluded_words: Optional[Iterable[str]] = None):
        self.tracker = tracker
        self.excluded_words = frozenset(excluded_words or ())

    def collect(self, text: Optional[str]) -> int:
        """Record every accepted word in `text`; return how many were recorded."""
        recorded = 0
        for token in tokenize(clean(text)):
            if token in self.excluded_words or not is_valid_word(token):
                continue
            self.tracker.record_occurrence(token)
            recorded += 1
        return recorded
