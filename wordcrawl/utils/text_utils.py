from typing import List, Optional

# Applied in order before filtering; "'s" is dropped so possessives collapse onto their noun.
_REPLACEMENTS = (
    ("\n", " "),
    ("\t", " "),
    ("\r", " "),
    ("-", " "),
    ("'s", ""),
)


def clean(value: Optional[str], trim: bool = False) -> str:
    """Strip a text fragment down to letters, digits and whitespace.

    Line breaks, tabs and hyphens become spaces and possessive "'s" is removed
    before anything else. With `trim`, leading and trailing whitespace is
    stripped right after those replacements, so punctuation at either end
    leaves its neighbouring spaces behind. Empty or None input returns "".
    """
    if not value:
        return ""

    for old, new in _REPLACEMENTS:
        value = value.replace(old, new)
    if trim:
        value = value.strip()

    return "".join(c for c in value if c.isalpha() or c.isdecimal() or c.isspace())


def tokenize(value: Optional[str], separator: Optional[str] = None) -> List[str]:
    """Split `value` into non-empty tokens, preserving order.

    With no separator the string is split on runs of whitespace. An empty
    separator returns the whole value as a single token.
    """
    if not value:
        return []
    if separator == "":
        return [value]
    return [token for token in value.split(separator) if token]


def is_valid_word(value: Optional[str]) -> bool:
    """A word is non-empty and made only of letters. "a" and "I" count."""
    if not value:
        return False
    return all(c.isalpha() for c in value)
