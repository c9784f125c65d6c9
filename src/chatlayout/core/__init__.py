"""
Core functionality for the chatlayout package.

This package contains the width table, the layout operations, command
processing and exception handling.
"""
from chatlayout.core.colors import (ChatColor, last_formatting,
                                    strip_formatting,
                                    translate_alternate_codes)
from chatlayout.core.commands import Command, CommandManager
from chatlayout.core.completer import CommandCompleter
from chatlayout.core.exceptions import (ChatLayoutError, ConfigurationError,
                                        InvalidPadCharacter)
from chatlayout.core.layout import (center, pad_left, pad_right, to_list,
                                    trim, two_column_align, wrap)
from chatlayout.core.widths import CHAR_WIDTHS, char_width, get_width

__all__ = [
    'CHAR_WIDTHS',
    'char_width',
    'get_width',
    'pad_right',
    'pad_left',
    'center',
    'trim',
    'wrap',
    'two_column_align',
    'to_list',
    'ChatColor',
    'strip_formatting',
    'translate_alternate_codes',
    'last_formatting',
    'Command',
    'CommandManager',
    'CommandCompleter',
    'ChatLayoutError',
    'InvalidPadCharacter',
    'ConfigurationError'
]
