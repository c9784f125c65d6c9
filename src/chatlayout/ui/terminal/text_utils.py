"""
Text framing utilities for the terminal preview.

This module draws a box around laid-out chat lines and labels every line
with its width in pixels, so overflowing lines stand out.
"""
from typing import List

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from chatlayout.config import CHAT_WIDTH, PIXEL_LABEL_WIDTH
from chatlayout.core.colors import strip_formatting
from chatlayout.core.widths import get_width
from chatlayout.ui.resources import BORDER_STYLES, UIColors
from chatlayout.ui.terminal.preview import to_formatted_text


def display_columns(line: str) -> int:
    """Get the number of terminal columns a chat line occupies once formatting is removed."""
    return len(strip_formatting(line))


def pad_right(fragments: list, current_columns: int, target_columns: int) -> list:
    """Pad formatted fragments with spaces to reach the target number of columns.

    Args:
        fragments: The (style, text) fragments of one line
        current_columns: Columns the fragments occupy
        target_columns: The desired number of columns

    Returns:
        The fragments, with an unstyled padding fragment appended if needed
    """
    if current_columns < target_columns:
        return fragments + [("", " " * (target_columns - current_columns))]
    return fragments


def pixel_label(width: int, chat_width: int) -> tuple:
    """Get the fragment labelling a line with its pixel width."""
    style = UIColors.OVERFLOW_FG if width > chat_width else UIColors.PIXEL_LABEL_FG
    return style, f"{width}px".rjust(PIXEL_LABEL_WIDTH)


def get_framed_text(text: str, title: str = None, chat_width: int = CHAT_WIDTH,
                    border_style: str = "solid") -> FormattedText:
    """Create formatted text showing the chat lines inside a box.

    Args:
        text: The laid-out text, lines separated by newlines
        title: Optional title to display above the box
        chat_width: Width of the chat surface, lines wider than it are highlighted
        border_style: Box style - "solid" for normal borders, "dashed" for dashed borders

    Returns:
        Formatted text ready to be printed with prompt_toolkit
    """
    style = BORDER_STYLES.get(border_style, BORDER_STYLES["solid"])
    frame = UIColors.FRAME_FG

    lines = text.split("\n")
    inner_width = max(display_columns(line) for line in lines)

    # split the formatted text back into lines so formatting carries over
    formatted_lines: List[list] = [[]]
    for fragment_style, fragment_text in to_formatted_text(text):
        if fragment_text == "\n":
            formatted_lines.append([])
        else:
            formatted_lines[-1].append((fragment_style, fragment_text))

    result = []
    if title:
        result.append((f"{UIColors.TITLE_FG} bold", f"{title}\n"))

    horizontal = style['horizontal'] * (inner_width + 2)
    result.append((frame, f"{style['top_left']}{horizontal}{style['top_right']}\n"))

    for line, fragments in zip(lines, formatted_lines):
        result.append((frame, f"{style['vertical']} "))
        result.extend(pad_right(fragments, display_columns(line), inner_width))
        result.append((frame, f" {style['vertical']}"))
        result.append(pixel_label(get_width(line), chat_width))
        result.append(("", "\n"))

    result.append((frame, f"{style['bottom_left']}{horizontal}{style['bottom_right']}"))
    return FormattedText(result)


def print_framed_text(text: str, title: str = None, chat_width: int = CHAT_WIDTH,
                      border_style: str = "solid") -> None:
    """Print the chat lines inside a box, each labelled with its pixel width.

    Args:
        text: The laid-out text, lines separated by newlines
        title: Optional title to display above the box
        chat_width: Width of the chat surface
        border_style: Box style - "solid" for normal borders, "dashed" for dashed borders
    """
    print_formatted_text(get_framed_text(text, title, chat_width, border_style))
