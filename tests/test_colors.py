"""Tests for formatting codes."""
import pytest

from chatlayout.core.colors import (ChatColor, last_formatting,
                                    strip_formatting,
                                    translate_alternate_codes)


def test_chat_color_string_is_marker_and_code():
    assert str(ChatColor.RESET) == "§r"
    assert str(ChatColor.GOLD) == "§6"


@pytest.mark.parametrize("code, expected", [
    ("c", ChatColor.RED),
    ("C", ChatColor.RED),
    ("l", ChatColor.BOLD),
    ("r", ChatColor.RESET),
    ("z", None),
    ("", None),
    ("ab", None),
])
def test_by_code(code, expected):
    assert ChatColor.by_code(code) is expected


def test_color_and_format_flags():
    assert ChatColor.BOLD.is_format
    assert not ChatColor.BOLD.is_color
    assert ChatColor.AQUA.is_color
    assert not ChatColor.RESET.is_color
    assert not ChatColor.RESET.is_format


def test_strip_formatting():
    assert strip_formatting("§cRed§r text") == "Red text"
    assert strip_formatting("no codes") == "no codes"
    assert strip_formatting("A§") == "A"
    # any character following the marker is its code
    assert strip_formatting("§zA") == "A"


def test_translate_alternate_codes():
    assert translate_alternate_codes("&cRed & more &z") == "§cRed & more &z"
    assert translate_alternate_codes("&CRed") == "§cRed"
    assert translate_alternate_codes("trailing &") == "trailing &"
    assert translate_alternate_codes("#aText", alt_char="#") == "§aText"


def test_last_formatting():
    assert last_formatting("§cRed §lbold") == "§c§l"
    assert last_formatting("§l§cColor resets formats") == "§c"
    assert last_formatting("§c§r") == "§r"
    assert last_formatting("plain") == ""
    assert last_formatting("§zunknown") == ""


def test_last_formatting_pairs_sequences_from_the_left():
    # the second marker is the code of the first, 'c' is visible text
    assert last_formatting("§§cX") == ""
    assert last_formatting("§a§§l") == "§a"
    assert last_formatting("§cX§") == "§c"
