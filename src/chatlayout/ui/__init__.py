"""
UI package for chatlayout.

This package contains the terminal preview and the resources used by the
playground.
"""
from chatlayout.ui.resources import (BORDER_STYLES, CHAT_PALETTE, Emojis,
                                     UIColors)
from chatlayout.ui.terminal import get_framed_text, print_framed_text

__all__ = [
    # Preview
    'get_framed_text',
    'print_framed_text',

    # Resources
    'Emojis',
    'UIColors',
    'BORDER_STYLES',
    'CHAT_PALETTE',
]
