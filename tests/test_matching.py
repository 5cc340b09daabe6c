import pytest

from pickmenu.matching import cistrstr, match_items, tokenize


def test_cistrstr_finds_case_insensitively():
    haystack = "Hello World"
    assert cistrstr(haystack, "WORLD") == haystack.index("World")


def test_cistrstr_missing_returns_none():
    assert cistrstr("abc", "x") is None


def test_cistrstr_empty_haystack_never_matches():
    assert cistrstr("", "") is None


def test_cistrstr_empty_needle_matches_at_start():
    assert cistrstr("abc", "") == 0


@pytest.mark.parametrize("text", ["", "   ", "a", " a  b ", "foo bar baz"])
def test_tokenize_drops_empty_pieces(text):
    tokens = tokenize(text)
    assert all(tokens)
    assert " ".join(tokens) == " ".join(text.split())


def test_exact_then_prefix_then_substring():
    items = ["foobar", "bar", "barfoo", "foo"]
    assert match_items(items, "foo") == ["foo", "foobar", "barfoo"]


def test_all_tokens_must_match():
    items = ["foo bar", "barfoo", "foobar", "baz"]
    result = match_items(items, "foo bar")
    assert result == ["foo bar", "foobar", "barfoo"]


def test_empty_text_keeps_everything_in_order():
    items = ["c", "a", "b"]
    assert match_items(items, "") == items


def test_case_sensitivity_switch():
    items = ["foo", "Foobar"]
    assert match_items(items, "FOO") == []
    assert match_items(items, "FOO", case_insensitive=True) == ["foo", "Foobar"]


def test_result_is_subset_of_input_without_duplicates():
    items = ["alpha", "beta", "gamma", "alphabet", "delta"]
    result = match_items(items, "a l")
    assert len(result) == len(set(result))
    assert set(result) <= set(items)
    assert all("a" in r and "l" in r for r in result)


def test_objects_are_matched_by_their_string():
    class Labelled:
        def __init__(self, label):
            self.label = label

        def __str__(self):
            return self.label

    first, second = Labelled("one"), Labelled("two")
    assert match_items([first, second], "tw") == [second]