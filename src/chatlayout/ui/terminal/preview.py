"""
Terminal preview of laid-out chat lines.

Formatting sequences are turned into prompt_toolkit styles so a layout can be
checked in a terminal with its colors and formats applied.
"""
from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from chatlayout.config import FORMATTING_CHAR
from chatlayout.core.colors import ChatColor, last_formatting
from chatlayout.ui.resources import CHAT_FORMAT_STYLES, CHAT_PALETTE

StyleFragment = Tuple[str, str]


class _ChatStyle:
    """Color and formats in effect while walking through a chat line."""

    def __init__(self):
        self.color = ""
        self.formats: List[str] = []

    def apply(self, color: ChatColor):
        if color is ChatColor.RESET:
            self.color = ""
            self.formats = []
        elif color.is_format:
            style = CHAT_FORMAT_STYLES[color]
            if style not in self.formats:
                self.formats.append(style)
        else:
            # a color code also clears the formats
            self.color = CHAT_PALETTE[color]
            self.formats = []

    def __str__(self) -> str:
        return " ".join(([self.color] if self.color else []) + self.formats)


def chat_line_to_fragments(line: str) -> List[StyleFragment]:
    """Convert one chat line into (style, text) fragments without formatting sequences.

    Args:
        line: A line that may contain formatting sequences

    Returns:
        Fragments with consecutive characters of the same style merged
    """
    fragments: List[StyleFragment] = []
    style = _ChatStyle()
    buffer = ""

    i = 0
    while i < len(line):
        char = line[i]
        if char != FORMATTING_CHAR:
            buffer += char
            i += 1
            continue

        if buffer:
            fragments.append((str(style), buffer))
            buffer = ""
        color = ChatColor.by_code(line[i + 1]) if i + 1 < len(line) else None
        if color is not None:
            style.apply(color)
        i += 2

    if buffer:
        fragments.append((str(style), buffer))
    return fragments


def to_formatted_text(text: str) -> FormattedText:
    """Convert laid-out text, possibly spanning several lines, into formatted text.

    Formatting carries over line breaks, the same way the chat surface
    renders a multi-line message.
    """
    fragments: List[StyleFragment] = []
    carried = ""
    for index, line in enumerate(text.split("\n")):
        if index:
            fragments.append(("", "\n"))
        line = carried + line
        fragments.extend(chat_line_to_fragments(line))
        carried = last_formatting(line)
    return FormattedText(fragments)
