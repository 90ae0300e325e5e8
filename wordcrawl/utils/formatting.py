from typing import Dict, Iterable, Optional

EMPTY = "{ }"


def format_word_table(words: Optional[Dict[str, int]]) -> str:
    """Render word counts one per line, most frequent first.

    Ties are ordered alphabetically so output is stable between runs.
    """
    if not words:
        return EMPTY
    ordered = sorted(words.items(), key=lambda item: (-item[1], item[0]))
    return "\n".join(f"{word}: {count}" for word, count in ordered)


def format_word_list(words: Optional[Iterable[str]]) -> str:
    values = list(words or [])
    if not values:
        return EMPTY
    return ",".join(values)
