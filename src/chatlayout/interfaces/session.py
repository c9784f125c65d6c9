"""
Session settings for the chatlayout playground.

Holds the line width, padding character and bullet character that layout
commands use, validating every change.
"""
from chatlayout.config import CHAT_WIDTH, DEFAULT_BULLET_CHAR, DEFAULT_PAD_CHAR
from chatlayout.core.exceptions import ConfigurationError, InvalidPadCharacter
from chatlayout.core.widths import char_width


def _validate_char(value: str, parameter: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigurationError(f"Expected a single character, got {value!r}", parameter)
    if char_width(value) == 0:
        raise InvalidPadCharacter("Character has no width in the chat surface", value)
    return value


class SessionSettings:
    """Layout parameters shared by all commands of one session."""

    def __init__(self, width: int = CHAT_WIDTH, pad_char: str = DEFAULT_PAD_CHAR,
                 bullet_char: str = DEFAULT_BULLET_CHAR):
        self.width = width
        self.pad_char = pad_char
        self.bullet_char = bullet_char

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int):
        if value is None or value <= 0:
            raise ConfigurationError(f"Width must be a positive number of pixels, got {value}", "width")
        self._width = value

    @property
    def pad_char(self) -> str:
        return self._pad_char

    @pad_char.setter
    def pad_char(self, value: str):
        self._pad_char = _validate_char(value, "pad_char")

    @property
    def bullet_char(self) -> str:
        return self._bullet_char

    @bullet_char.setter
    def bullet_char(self, value: str):
        self._bullet_char = _validate_char(value, "bullet_char")

    def __str__(self) -> str:
        return f"width={self.width}px, pad={self.pad_char!r}, bullet={self.bullet_char!r}"
