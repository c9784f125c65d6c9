"""
chatlayout - width-aware layout of chat lines.

Pads, centers, trims, wraps and aligns strings for a chat surface of a known
pixel width, treating formatting sequences as zero-width.
"""
from chatlayout.core.exceptions import (ChatLayoutError, ConfigurationError,
                                        InvalidPadCharacter)
from chatlayout.core.layout import (center, pad_left, pad_right, to_list,
                                    trim, two_column_align, wrap)
from chatlayout.core.widths import char_width, get_width

__version__ = "1.0.0"

__all__ = [
    'char_width',
    'get_width',
    'pad_right',
    'pad_left',
    'center',
    'trim',
    'wrap',
    'two_column_align',
    'to_list',
    'ChatLayoutError',
    'InvalidPadCharacter',
    'ConfigurationError'
]
