"""Tests for padding, centering, trimming, wrapping, columns and lists.

Widths used below: blank 4, '.' 2, 'i' 2, most letters and digits 6.
"""
import pytest

from chatlayout.config import CHAT_WIDTH, FORMATTING_CHAR
from chatlayout.core.exceptions import ConfigurationError, InvalidPadCharacter
from chatlayout.core.layout import (center, pad_left, pad_right, to_list,
                                    trim, two_column_align, wrap)
from chatlayout.core.widths import get_width

SAMPLES = [
    "",
    "A",
    "AB§cCD",
    "§aspawn §7- §fthe main §lhub",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit",
    "§c§lX§r",
    "i.i.i.i",
]


def markers_intact(text: str) -> bool:
    """Whether every marker in the text is followed by its code character."""
    i = 0
    while i < len(text):
        if text[i] == FORMATTING_CHAR:
            if i + 1 >= len(text):
                return False
            i += 2
        else:
            i += 1
    return True


# Padding

def test_pad_right_appends_whole_pad_characters():
    assert pad_right("AB", " ", 20) == "AB  "


def test_pad_left_prepends_whole_pad_characters():
    assert pad_left("AB", " ", 20) == "  AB"


def test_pad_floors_the_remainder():
    # 9 remaining pixels fit four 2-pixel dots
    assert pad_right("AB", ".", 21) == "AB...."
    assert pad_left("AB", ".", 21) == "....AB"


def test_pad_leaves_wide_strings_unchanged():
    assert pad_right("ABCD", " ", 20) == "ABCD"
    assert pad_left("ABCD", " ", 24) == "ABCD"


def test_pad_defaults_to_chat_width_and_blank():
    padded = pad_right("")
    assert padded == " " * (CHAT_WIDTH // 4)


def test_pad_ignores_formatting_when_measuring():
    assert pad_right("§cAB", " ", 20) == "§cAB  "


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("pad_char", [" ", ".", "@"])
def test_padded_width_is_within_one_pad_character(text, pad_char):
    target = 400
    for padded in (pad_right(text, pad_char, target), pad_left(text, pad_char, target)):
        assert target - get_width(pad_char) < get_width(padded) <= target


@pytest.mark.parametrize("pad_char", [FORMATTING_CHAR, "€"])
def test_pad_rejects_zero_width_characters(pad_char):
    with pytest.raises(InvalidPadCharacter) as excinfo:
        pad_right("AB", pad_char, 20)
    assert excinfo.value.pad_char == pad_char
    with pytest.raises(InvalidPadCharacter):
        pad_left("AB", pad_char, 20)
    with pytest.raises(InvalidPadCharacter):
        center("AB", pad_char, 20)


@pytest.mark.parametrize("pad_char", ["", "ab"])
def test_pad_rejects_anything_but_one_character(pad_char):
    with pytest.raises(ConfigurationError):
        pad_right("AB", pad_char, 20)


# Centering

def test_center_pads_both_sides():
    assert center("AB", " ", 30) == "  AB  "


def test_center_floors_twice_on_odd_remainders():
    # 14 remaining pixels are 3 blanks, halved to 1 blank per side
    assert center("AB", " ", 26) == " AB "


def test_center_leaves_wide_strings_unchanged():
    assert center("ABCDEF", " ", 20) == "ABCDEF"


# Trimming

def test_trim_keeps_formatting_sequence_with_its_prefix():
    assert trim("AB§cCD", 12) == "AB§c"


def test_trim_drops_formatting_sequence_with_its_tail():
    assert trim("AB§cCD", 11) == "A"


def test_trim_returns_empty_string_when_nothing_fits():
    assert trim("ABC", 5) == ""
    assert trim("", 10) == ""
    assert trim("ABC", -1) == ""


def test_trim_removes_dangling_marker():
    assert trim("AB§", 100) == "AB"


@pytest.mark.parametrize("text", SAMPLES)
def test_trim_is_identity_when_text_fits(text):
    assert trim(text, get_width(text)) == text
    assert trim(text) == text


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("target", [0, 1, 5, 6, 12, 13, 40, 100])
def test_trim_result_is_a_fitting_prefix_with_intact_markers(text, target):
    result = trim(text, target)
    assert text.startswith(result)
    assert get_width(result) <= target
    assert markers_intact(result)


def test_trim_returns_longest_fitting_prefix():
    text = "Lorem ipsum dolor"
    result = trim(text, 50)
    assert get_width(text[:len(result) + 1]) > 50


# Wrapping

def test_wrap_breaks_between_words():
    assert wrap("one two three", "", 40) == "one two\nthree"


def test_wrap_prefixes_new_lines():
    assert wrap("one two three", "> ", 40) == "one two\n> three"


def test_wrap_collapses_whitespace():
    assert wrap("  one   two \t three  ") == "one two three"


def test_wrap_empty_string():
    assert wrap("") == ""
    assert wrap("   ") == ""


def test_wrap_splits_words_wider_than_a_line():
    assert wrap("aaaaaaaaaa", "", 30) == "aaaaa\naaaaa"


def test_wrap_continues_long_word_on_current_line():
    assert wrap("hi aaaaaaaaaa", "", 30) == "hi aaa\naaaaa\naa"


def test_wrap_moves_long_word_without_trailing_blank():
    # 'hi' plus a blank plus one 'a' is 18px, wider than the line
    assert wrap("hi aaaaaaaaaa", "", 14) == "hi\naa\naa\naa\naa\naa"


def test_wrap_separates_prefix_from_split_word():
    assert wrap("one two three", ">", 40) == "one two\n> three"
    assert wrap("one two aaaaaaaaaaaaaaaaa", ">", 40) == \
        "one two\n> aaaaa\n> aaaaa\n> aaaaa\n> aa"


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("target", [7, 20, 40])
def test_wrapped_lines_have_no_trailing_blank(text, target):
    for line in wrap(text, "", target).split("\n"):
        assert not line.endswith(" ")


def test_wrap_does_not_start_with_an_empty_line():
    assert wrap("abcd", "", 24) == "abcd"
    assert wrap("ab", "", 4) == "a\nb"


def test_wrap_keeps_formatting_sequences_together():
    wrapped = wrap("aaa§caaa", "", 18)
    assert wrapped == "aaa§c\naaa"
    assert all(markers_intact(line) for line in wrapped.split("\n"))


def test_wrap_measures_without_formatting():
    assert wrap("§cone §ltwo three", "", 40) == "§cone §ltwo\nthree"


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("target", [7, 20, 40, 100])
def test_wrapped_lines_fit(text, target):
    for line in wrap(text, "", target).split("\n"):
        assert get_width(line) <= target
        assert markers_intact(line)


# Two columns

def test_two_column_align_fills_the_gap():
    # 100 - 21 - 24 = 55 pixels of 2-pixel dots
    assert two_column_align("Left", "Right", ".", 100) == "Left" + "." * 27 + "Right"


def test_two_column_align_trims_the_wider_column():
    assert two_column_align("AAAAA", "BB", " ", 40) == "AAAA BB"
    assert two_column_align("BB", "AAAAA", " ", 40) == "BB AAAA"


def test_two_column_align_trims_the_right_column_on_ties():
    assert two_column_align("AAA", "BBB", " ", 30) == "AAA B"


def test_two_column_align_with_no_room_left():
    aligned = two_column_align("AAA", "BB", " ", 30)
    assert aligned == "AA BB"
    assert get_width(aligned) <= 30


def test_two_column_align_rejects_zero_width_fill():
    with pytest.raises(InvalidPadCharacter):
        two_column_align("Left", "Right", FORMATTING_CHAR, 100)


# Lists

def test_to_list_resets_formatting_between_entries():
    assert to_list(["first entry", "second entry"], "-", 60) == \
        "- first\n  entry\n§r- second\n  entry"


def test_to_list_defaults():
    assert to_list(["a", "b"]) == "- a\n§r- b"


def test_to_list_without_entries():
    assert to_list([]) == ""


def test_to_list_rejects_zero_width_bullet():
    with pytest.raises(InvalidPadCharacter):
        to_list(["a"], "•")


def test_to_list_lines_fit():
    rendered = to_list(SAMPLES[1:], "*", 80)
    for line in rendered.split("\n"):
        assert get_width(line) <= 80


@pytest.mark.parametrize("text", SAMPLES)
def test_prefixed_wrapped_lines_fit(text):
    lines = wrap(text, "  ", 100).split("\n")
    assert all(get_width(line) <= 100 for line in lines)
    assert all(line.startswith("  ") for line in lines[1:])
