"""
Terminal preview of layouts using prompt_toolkit.

This package converts laid-out chat text into prompt_toolkit formatted
text and prints it inside a frame.
"""
from chatlayout.ui.terminal.preview import (chat_line_to_fragments,
                                            to_formatted_text)
from chatlayout.ui.terminal.text_utils import (display_columns,
                                               get_framed_text,
                                               print_framed_text)

__all__ = [
    'chat_line_to_fragments',
    'to_formatted_text',
    'display_columns',
    'get_framed_text',
    'print_framed_text'
]
