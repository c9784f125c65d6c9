"""
Copyright (c) 2025 The chatlayout authors

This file is part of chatlayout.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

UI resources for the chatlayout playground.

This module contains centralized UI elements like banners, colors, border
styles and help text used when previewing layouts in a terminal.
"""
from chatlayout.core.colors import ChatColor

# Emoji constants
class Emojis:
    """Class containing emoji constants to ensure consistent usage throughout the code."""
    ERROR = "❌"
    INFO = "ℹ️"
    BYE = "👋"

# Border styles for box drawing
BORDER_STYLES = {
    "solid": {
        "top_left": "┌",
        "top_right": "┐",
        "bottom_left": "└",
        "bottom_right": "┘",
        "horizontal": "─",
        "vertical": "│"
    },
    "dashed": {
        "top_left": "┌",
        "top_right": "┐",
        "bottom_left": "└",
        "bottom_right": "┘",
        "horizontal": "┄",
        "vertical": "┆"
    }
}

# UI Color Configuration
class UIColors:
    """Color definitions for the preview frame."""
    FRAME_FG = "#888888"
    TITLE_FG = "#ffffff"
    PIXEL_LABEL_FG = "#666666"
    OVERFLOW_FG = "#dd0000"

    INFO_FG = "#888888"
    ERROR_FG = "#dd0000"

# Foreground colors of the chat surface, keyed by color
CHAT_PALETTE = {
    ChatColor.BLACK: "#000000",
    ChatColor.DARK_BLUE: "#0000aa",
    ChatColor.DARK_GREEN: "#00aa00",
    ChatColor.DARK_AQUA: "#00aaaa",
    ChatColor.DARK_RED: "#aa0000",
    ChatColor.DARK_PURPLE: "#aa00aa",
    ChatColor.GOLD: "#ffaa00",
    ChatColor.GRAY: "#aaaaaa",
    ChatColor.DARK_GRAY: "#555555",
    ChatColor.BLUE: "#5555ff",
    ChatColor.GREEN: "#55ff55",
    ChatColor.AQUA: "#55ffff",
    ChatColor.RED: "#ff5555",
    ChatColor.LIGHT_PURPLE: "#ff55ff",
    ChatColor.YELLOW: "#ffff55",
    ChatColor.WHITE: "#ffffff",
}

# prompt_toolkit style attributes for the format codes
CHAT_FORMAT_STYLES = {
    ChatColor.MAGIC: "blink",
    ChatColor.BOLD: "bold",
    ChatColor.STRIKETHROUGH: "strike",
    ChatColor.UNDERLINE: "underline",
    ChatColor.ITALIC: "italic",
}

BANNER = r"""
  ┌─────────────────────────────────────────────┐
  │  chatlayout - pixel width layout playground │
  └─────────────────────────────────────────────┘"""

# Help text for the playground
HELP_TEXT = """
COMMANDS:
    width TEXT, w TEXT: Show the pixel width of TEXT
    pad-right TEXT, pr TEXT: Pad TEXT on the right to the line width
    pad-left TEXT, pl TEXT: Pad TEXT on the left to the line width
    center TEXT, c TEXT: Center TEXT within the line width
    trim TEXT, t TEXT: Cut TEXT down to the line width
    wrap TEXT, wr TEXT: Wrap TEXT into lines of the line width
    columns LEFT | RIGHT, col LEFT | RIGHT: Align two columns
    list A | B | C, l A | B | C: Render a bulleted list

SETTINGS:
    set-width N, sw N: Set the line width in pixels
    set-pad C, sp C: Set the padding character ('space' for a blank)
    set-bullet C, sb C: Set the bullet character
    settings: Show the current settings

FORMATTING:
    Use &0-&9 and &a-&f for colors, &k-&o for formats and &r to reset,
    e.g. 'wrap &cRed &lbold&r text'.

    exit, quit, q: Exit the playground
    help, h, ?: View this help message
"""


# Standardized Message Formatting Functions
def format_error_message(message: str) -> str:
    """Format an error message with consistent emoji and structure.

    Args:
        message: The error message content

    Returns:
        Formatted error message string
    """
    return f"\n{Emojis.ERROR} {message}"


def format_info_message(message: str) -> str:
    """Format an info message with consistent emoji and structure."""
    return f"\n{Emojis.INFO} {message}"
