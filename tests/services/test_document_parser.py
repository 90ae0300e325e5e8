from unittest.mock import MagicMock

import pytest

from wordcrawl.exceptions import RootNotFoundError
from wordcrawl.services.document_parser import DocumentParser

ARTICLE = """
<html><body>
<h2><span class="mw-headline" id="History">History</span></h2>
<p>Founded long ago.</p>
<h2><span class="mw-headline" id="Products">Products</span></h2>
</body></html>
"""


def test_parse_tolerates_malformed_markup():
    document = DocumentParser().parse("<div><p>unclosed <b>tags")
    assert document.find("b").get_text() == "tags"


def test_parse_empty_or_none_markup():
    parser = DocumentParser()
    assert parser.parse(None).contents == []
    assert parser.parse("").contents == []


def test_find_root_returns_anchor_parent():
    parser = DocumentParser()
    root = parser.find_root(parser.parse(ARTICLE), "History")
    assert root.name == "h2"
    assert root.get_text() == "History"


def test_find_root_missing_anchor_raises():
    parser = DocumentParser()
    with pytest.raises(RootNotFoundError) as excinfo:
        parser.find_root(parser.parse(ARTICLE), "Legacy")
    assert excinfo.value.anchor_id == "Legacy"


def test_custom_soup_factory_is_used():
    factory = MagicMock()
    parser = DocumentParser(soup_factory=factory)
    parser.parse("<p>x</p>")
    factory.assert_called_once_with("<p>x</p>")
