import pytest

from noted.tokenizer import tokenize


@pytest.mark.parametrize(
    "line, expected",
    [
        ("", []),
        ("no quotations here", ["no", "quotations", "here"]),
        ("some 'quotes here'", ["some", "quotes here"]),
        ("'please parse ' ' this sentence'", ["please parse ", " this sentence"]),
        ("     ", []),
        ("''''''", []),
    ],
)
def test_tokenize_examples(line, expected):
    assert tokenize(line) == expected


def test_double_quotes_work_like_single_quotes():
    assert tokenize('add test "This is a test note!"') == [
        "add",
        "test",
        "This is a test note!",
    ]


def test_mismatched_quote_characters_still_close():
    assert tokenize("'mixed quotes\" after") == ["mixed quotes", "after"]


def test_repeated_spaces_do_not_make_empty_tokens():
    assert tokenize("  a   b  ") == ["a", "b"]


def test_only_space_separates_tokens():
    assert tokenize("a\tb c") == ["a\tb", "c"]


def test_unbalanced_quote_flushes_trailing_text():
    assert tokenize("add 'never closed") == ["add", "never closed"]


def test_quote_inside_word_joins_with_preceding_text():
    # Opening a quote does not flush, so the prefix sticks to the quoted part
    assert tokenize("ab'c d'e") == ["abc d", "e"]


def test_empty_quotes_between_words_are_dropped():
    assert tokenize("a '' b") == ["a", "b"]
