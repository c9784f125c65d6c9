"""
Formatting codes understood by the chat surface.

A formatting sequence is the marker character followed by exactly one code
character. Sequences are zero-width and must be kept together when text is
cut or wrapped.
"""
import enum
import re

from chatlayout.config import ALTERNATE_FORMATTING_CHAR, FORMATTING_CHAR

_STRIP_PATTERN = re.compile(re.escape(FORMATTING_CHAR) + ".?", re.DOTALL)


class ChatColor(enum.Enum):
    """Colours and formats addressable through formatting codes."""
    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def code(self) -> str:
        return self.value

    @property
    def is_format(self) -> bool:
        return self.value in "klmno"

    @property
    def is_color(self) -> bool:
        return not self.is_format and self is not ChatColor.RESET

    @classmethod
    def by_code(cls, code: str):
        """Return the member for a code character, or None if it is not a valid code."""
        if len(code) != 1:
            return None
        try:
            return cls(code.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return FORMATTING_CHAR + self.value


def strip_formatting(text: str) -> str:
    """Remove every formatting sequence from the text.

    A marker at the very end of the text, without a code character,
    is removed as well.
    """
    return _STRIP_PATTERN.sub("", text)


def translate_alternate_codes(text: str, alt_char: str = ALTERNATE_FORMATTING_CHAR) -> str:
    """Replace an alternate code character with the marker where it precedes a valid code.

    Args:
        text: Text containing alternate codes such as ``&c``
        alt_char: The character used in place of the marker

    Returns:
        Text with the marker in place of every alternate code character that
        introduces a valid formatting code
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == alt_char and ChatColor.by_code(chars[i + 1]) is not None:
            chars[i] = FORMATTING_CHAR
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)


def last_formatting(text: str) -> str:
    """Get the formatting sequences still in effect at the end of the text.

    Sequences are paired left to right. Formats stack on top of the last
    colour; a colour or reset code clears everything before it.
    """
    active = []
    for match in _STRIP_PATTERN.finditer(text):
        color = ChatColor.by_code(match.group()[1:])
        if color is None:
            continue
        if not color.is_format:
            active = []
        active.append(str(color))
    return "".join(active)
