"""
Custom exceptions for the chatlayout package.

This module defines specific exception types for better error handling
and user feedback throughout the package.
"""


class ChatLayoutError(Exception):
    """Base exception class for all chatlayout-specific errors."""
    pass


class InvalidPadCharacter(ChatLayoutError):
    """Exception raised when a pad, fill or bullet character has no width."""

    def __init__(self, message: str, pad_char: str = None):
        super().__init__(message)
        self.pad_char = pad_char

    def __str__(self):
        base_msg = super().__str__()
        if self.pad_char is not None:
            base_msg += f" (Character: {self.pad_char!r})"
        return base_msg


class ConfigurationError(ChatLayoutError):
    """Exception raised when a layout parameter is invalid."""

    def __init__(self, message: str, parameter: str = None):
        super().__init__(message)
        self.parameter = parameter

    def __str__(self):
        base_msg = super().__str__()
        if self.parameter:
            base_msg += f" (Parameter: {self.parameter})"
        return base_msg
