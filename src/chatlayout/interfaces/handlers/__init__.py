"""
Command handlers package for the chatlayout playground.

This package contains individual command handlers that implement
the Command Handler pattern for better separation of concerns.
"""

from chatlayout.interfaces.handlers.layout import (AlignmentHandler,
                                                   TextFlowHandler)
from chatlayout.interfaces.handlers.settings import SettingsHandler

__all__ = [
    'AlignmentHandler',
    'TextFlowHandler',
    'SettingsHandler',
]
