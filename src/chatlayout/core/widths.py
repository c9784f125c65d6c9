"""
Pixel widths of characters in the chat surface.

The widths were taken from the font metrics of older clients. Characters
that are not listed are treated as zero-width; this is an approximation for
glyphs the table does not cover, not an error.
"""
from types import MappingProxyType

from chatlayout.config import FORMATTING_CHAR
from chatlayout.core.colors import strip_formatting

_WIDTH_GROUPS = (
    (0, FORMATTING_CHAR),
    (2, "!,.:;i|¡"),
    (3, "'lìí"),
    (4, " I[]tï×"),
    (5, "\"()*<>fk{}"),
    (6, "#$%&+-/0123456789=?ABCDEFGHJKLMNOPQRSTUVWXYZ\\^_abcdeghjmnopqrsuvwxyz"
        "⌂ÇüéâäàåçêëèîÄÅÉæÆôöòûùÿÖÜø£ØƒáóúñÑªº¿¬½¼«»"),
    (7, "@~®"),
)

CHAR_WIDTHS = MappingProxyType({
    char: width
    for width, chars in _WIDTH_GROUPS
    for char in chars
})


def char_width(char: str) -> int:
    """Get the width of a single character in pixels, 0 if it is not in the table."""
    return CHAR_WIDTHS.get(char, 0)


def get_width(text: str) -> int:
    """Get the width of the given string in pixels. Formatting codes are ignored.

    Args:
        text: The string to measure

    Returns:
        The sum of the widths of all characters left after stripping
        formatting sequences
    """
    return sum(char_width(char) for char in strip_formatting(text))
