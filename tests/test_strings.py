import pytest

from contestkit.strings import (
    limit_ones,
    rotation_shift,
    smallest_chosen_word,
    super_balanced_length,
)


def _windows_ok(text, k, m):
    return all(text[i : i + k].count("1") <= m for i in range(len(text) - k + 1))


@pytest.mark.parametrize(
    "s, k, m",
    [
        ("11111", 2, 1),
        ("1101101111", 3, 2),
        ("0000", 2, 0),
        ("1111", 4, 0),
        ("1010110111", 5, 3),
    ],
)
def test_limit_ones_respects_every_window(s, k, m):
    changes, text = limit_ones(s, k, m)
    assert len(text) == len(s)
    assert _windows_ok(text, k, m)
    changed = [i for i, (a, b) in enumerate(zip(s, text)) if a != b]
    assert len(changed) == changes
    assert all(s[i] == "1" and text[i] == "0" for i in changed)


def test_limit_ones_worked_example():
    assert limit_ones("11111", 2, 1) == (2, "10101")


def test_limit_ones_leaves_valid_string_alone():
    s = "100100100"
    changes, text = limit_ones(s, 3, 1)
    assert text == s
    assert changes == 0


@pytest.mark.parametrize("k", [0, 6])
def test_limit_ones_rejects_bad_window(k):
    with pytest.raises(ValueError):
        limit_ones("10101", k, 1)


def test_limit_ones_rejects_negative_limit():
    with pytest.raises(ValueError):
        limit_ones("101", 2, -1)


@pytest.mark.parametrize("shift", [0, 1, 2, 3, 4])
def test_rotation_shift_finds_shift(shift):
    s = "abcdef"
    t = s[shift:] + s[:shift]
    assert rotation_shift(s, t) == shift


def test_rotation_shift_all_but_one_reports_length():
    s = "abcdef"
    t = s[-1:] + s[:-1]
    assert rotation_shift(s, t) == len(s)


def test_rotation_shift_no_match_reports_length():
    s = "abc"
    assert rotation_shift(s, "xyz") == len(s)


def test_rotation_shift_rejects_length_mismatch():
    with pytest.raises(ValueError):
        rotation_shift("abc", "ab")


def test_smallest_chosen_word_worked_example():
    assert smallest_chosen_word("a", "dcba", "c") == "aac"


def test_smallest_chosen_word_keeps_prefix_and_suffix():
    prefix, pool, suffix = "he", "zqmbaxc", "lo"
    word = smallest_chosen_word(prefix, pool, suffix)
    assert word.startswith(prefix)
    assert word.endswith(suffix)
    middle = word[len(prefix) : len(word) - len(suffix)]
    assert list(middle) == sorted(middle)
    remaining = iter(pool)
    assert all(ch in remaining for ch in middle)


def test_smallest_chosen_word_skips_larger_characters():
    assert smallest_chosen_word("pre", "xyz", "b") == "pre" + "b"


def test_smallest_chosen_word_rejects_empty_suffix():
    with pytest.raises(ValueError):
        smallest_chosen_word("a", "b", "")


@pytest.mark.parametrize("s", ["()", "(())", "((()))"])
def test_super_balanced_length_nested(s):
    assert super_balanced_length(s) == len(s)


def test_super_balanced_length_closing_first():
    assert super_balanced_length("))((") == 0