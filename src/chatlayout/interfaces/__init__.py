"""
Interfaces package for chatlayout.

This package contains the user interfaces for trying out the layout
functionality provided by the core package.
"""
from chatlayout.interfaces.cli import CliInterface
from chatlayout.interfaces.command_handlers import (CommandHandler,
                                                    CommandHandlerRegistry,
                                                    CommandResult)
from chatlayout.interfaces.session import SessionSettings

__all__ = [
    'CliInterface',
    'SessionSettings',
    'CommandHandler',
    'CommandResult',
    'CommandHandlerRegistry'
]
