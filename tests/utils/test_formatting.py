from wordcrawl.utils.formatting import format_word_list, format_word_table


def test_word_table_sorted_by_count_then_word():
    table = format_word_table({"his": 4, "he": 5, "a": 4, "the": 3})
    assert table.splitlines() == ["he: 5", "a: 4", "his: 4", "the: 3"]


def test_word_table_empty():
    assert format_word_table({}) == "{ }"
    assert format_word_table(None) == "{ }"


def test_word_list():
    assert format_word_list(["he", "a"]) == "he,a"
    assert format_word_list([]) == "{ }"
    assert format_word_list(None) == "{ }"
