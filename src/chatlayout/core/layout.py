"""
Width-aware layout of chat lines.

This module provides padding, centering, trimming, word wrapping, two-column
alignment and bulleted lists for a chat surface of a known pixel width. All
functions are pure: they take a string and return a new one.
"""
from typing import Iterable, List, Set

from chatlayout.config import (CHAT_WIDTH, DEFAULT_BULLET_CHAR,
                               DEFAULT_PAD_CHAR, FORMATTING_CHAR,
                               LIST_CONTINUATION_PREFIX)
from chatlayout.core.colors import ChatColor
from chatlayout.core.exceptions import ConfigurationError, InvalidPadCharacter
from chatlayout.core.widths import char_width, get_width


def _pad_width(pad_char: str, parameter: str = "pad_char") -> int:
    """Get the width of a pad character, rejecting characters that cannot pad."""
    if not isinstance(pad_char, str) or len(pad_char) != 1:
        raise ConfigurationError(f"Expected a single character, got {pad_char!r}", parameter)
    width = char_width(pad_char)
    if width == 0:
        raise InvalidPadCharacter("Character has no width and cannot be used for padding", pad_char)
    return width


def _pad_count(text: str, pad_char: str, padded_width: int) -> int:
    pad_width = _pad_width(pad_char)
    remaining = padded_width - get_width(text)
    if remaining <= 0:
        return 0
    return remaining // pad_width


def pad_right(text: str, pad_char: str = DEFAULT_PAD_CHAR, padded_width: int = CHAT_WIDTH) -> str:
    """Pad the string on the right until it has the given width.

    Args:
        text: The string to pad
        pad_char: The padding character
        padded_width: The width of the padded string in pixels

    Returns:
        The padded string. It may fall short of the target by less than the
        width of one padding character.

    Raises:
        InvalidPadCharacter: If the padding character has no width
    """
    return text + pad_char * _pad_count(text, pad_char, padded_width)


def pad_left(text: str, pad_char: str = DEFAULT_PAD_CHAR, padded_width: int = CHAT_WIDTH) -> str:
    """Pad the string on the left until it has the given width.

    Args:
        text: The string to pad
        pad_char: The padding character
        padded_width: The width of the padded string in pixels

    Returns:
        The padded string

    Raises:
        InvalidPadCharacter: If the padding character has no width
    """
    return pad_char * _pad_count(text, pad_char, padded_width) + text


def center(text: str, pad_char: str = DEFAULT_PAD_CHAR, padded_width: int = CHAT_WIDTH) -> str:
    """Center the string relative to the given width by padding both sides.

    The number of padding characters per side is floored twice, so odd
    remainders leave the result up to one padding character short on each
    side. Existing layouts depend on this.

    Raises:
        InvalidPadCharacter: If the padding character has no width
    """
    padding = pad_char * (_pad_count(text, pad_char, padded_width) // 2)
    return padding + text + padding


def _split_points(text: str) -> Set[int]:
    """Get the cut positions that would separate a marker from its code character.

    Sequences are paired left to right, so a marker that is itself the code
    of a preceding marker does not open a new sequence.
    """
    points = set()
    i = 0
    while i < len(text):
        if text[i] == FORMATTING_CHAR:
            points.add(i + 1)
            i += 2
        else:
            i += 1
    return points


def _visible_widths(text: str) -> List[int]:
    """Get the width each position contributes to the rendered string."""
    widths = []
    in_sequence = False
    for char in text:
        if in_sequence:
            widths.append(0)
            in_sequence = False
        elif char == FORMATTING_CHAR:
            widths.append(0)
            in_sequence = True
        else:
            widths.append(char_width(char))
    return widths


def trim(text: str, trimmed_width: int = CHAT_WIDTH) -> str:
    """Trim the string until it has at most the given width.

    The longest prefix that fits is returned. A formatting sequence is never
    cut in half: it is either kept entirely or removed together with
    everything after it.

    Args:
        text: The string to trim
        trimmed_width: The maximal width of the trimmed string in pixels

    Returns:
        The trimmed string, empty if not even the first character fits
    """
    split_points = _split_points(text)
    widths = _visible_widths(text)
    width = sum(widths)

    for end in range(len(text), 0, -1):
        if end not in split_points and width <= trimmed_width:
            return text[:end]
        width -= widths[end - 1]
    return ""


class _Line:
    """Characters of the line currently being built, with their rendered width."""

    def __init__(self, seed: str = ""):
        self.text = ""
        self.width = 0
        self._in_sequence = False
        self.append(seed)
        self.seed_length = len(self.text)

    def append(self, text: str):
        for char in text:
            if self._in_sequence:
                self._in_sequence = False
            elif char == FORMATTING_CHAR:
                self._in_sequence = True
            else:
                self.width += char_width(char)
        self.text += text

    @property
    def has_content(self) -> bool:
        """Whether anything beyond the seed prefix has been added."""
        return len(self.text) > self.seed_length

    def needs_separator(self) -> bool:
        return bool(self.text) and not self.text.endswith(" ")


def _units(word: str) -> List[str]:
    """Split a word into characters, keeping each formatting sequence as one unit."""
    units = []
    i = 0
    while i < len(word):
        step = 2 if word[i] == FORMATTING_CHAR else 1
        units.append(word[i:i + step])
        i += step
    return units


def _wrapped_join(parts: Iterable[str], new_line_prefix: str, wrapped_width: int) -> str:
    """Join the parts with blanks, wrapping into lines of at most the given width.

    Every line but the first starts with the prefix. Parts wider than a whole
    line are split between characters.
    """
    lines = []
    line = _Line()
    space_width = char_width(" ")

    def commit():
        nonlocal line
        lines.append(line.text)
        line = _Line(new_line_prefix)

    def separate():
        # a blank is only needed if the line does not end in one (e.g. from the prefix)
        if line.needs_separator():
            line.append(" ")

    for part in parts:
        if get_width(part) > wrapped_width:
            # the part cannot fit on any line, fill up lines char by char
            units = _units(part)
            blank_width = space_width if line.needs_separator() else 0
            if line.has_content and line.width + blank_width + get_width(units[0]) > wrapped_width:
                commit()
            separate()
            line.append(units[0])
            for unit in units[1:]:
                if line.width + get_width(unit) > wrapped_width:
                    commit()
                    separate()
                line.append(unit)
        else:
            if line.has_content and line.width + get_width(part) + space_width > wrapped_width:
                commit()
            separate()
            line.append(part)

    if line.text:
        lines.append(line.text)
    return "\n".join(lines)


def wrap(text: str, new_line_prefix: str = "", wrapped_width: int = CHAT_WIDTH) -> str:
    """Wrap the string into multiple lines that are at most as wide as the given width.

    Words are separated on whitespace; repeated whitespace collapses. Words
    are only split when they are wider than a whole line.

    Args:
        text: The string to wrap
        new_line_prefix: The prefix for created new lines
        wrapped_width: The width of each line in pixels

    Returns:
        The wrapped lines joined by newlines
    """
    return _wrapped_join(text.split(), new_line_prefix, wrapped_width)


def two_column_align(left_column: str, right_column: str, pad_char: str = DEFAULT_PAD_CHAR,
                     total_width: int = CHAT_WIDTH) -> str:
    """Lay out two columns, the left one aligned left and the right one aligned right.

    If both columns together are wider than the total width, the wider one is
    trimmed so that both fit with a single padding character in between. On a
    tie the right column is trimmed.

    Args:
        left_column: The contents of the left column
        right_column: The contents of the right column
        pad_char: The padding character between the columns
        total_width: The width covered by the layout in pixels

    Returns:
        The aligned line

    Raises:
        InvalidPadCharacter: If the padding character has no width
    """
    pad_width = _pad_width(pad_char)
    left_width = get_width(left_column)
    right_width = get_width(right_column)
    remaining = total_width - left_width - right_width

    if remaining > 0:
        return left_column + pad_char * (remaining // pad_width) + right_column

    remaining -= pad_width
    if left_width > right_width:
        left_column = trim(left_column, left_width + remaining)
    else:
        right_column = trim(right_column, right_width + remaining)
    return left_column + pad_char + right_column


def to_list(entries: Iterable[str], bullet_char: str = DEFAULT_BULLET_CHAR, max_width: int = CHAT_WIDTH) -> str:
    """Create an unnumbered list, one entry per bullet point.

    Entries wider than the given width continue on following lines, indented
    to the text after the bullet. Formatting of one entry is reset before
    the next one starts.

    Args:
        entries: The list's entries
        bullet_char: The character displayed as bullet point before each entry
        max_width: The maximal width of each line in pixels

    Returns:
        The rendered list

    Raises:
        InvalidPadCharacter: If the bullet character has no width
    """
    _pad_width(bullet_char, "bullet_char")
    list_prefix = bullet_char + " "

    rendered = []
    for entry in entries:
        parts = [list_prefix] + entry.split()
        rendered.append(_wrapped_join(parts, LIST_CONTINUATION_PREFIX, max_width))
    return ("\n" + str(ChatColor.RESET)).join(rendered)
