"""
Settings command handlers for the session width, padding and bullet characters.
"""

from typing import List

from chatlayout.core.commands import (Command, SetBulletCommand, SetPadCommand,
                                      SettingsCommand, SetWidthCommand)
from chatlayout.interfaces.command_handlers import CommandHandler, CommandResult


class SettingsHandler(CommandHandler):
    """Handles commands that change or show the session settings."""

    def get_supported_command_types(self) -> List[str]:
        return ['SetWidthCommand', 'SetPadCommand', 'SetBulletCommand', 'SettingsCommand']

    def validate(self, command: Command) -> bool:
        if isinstance(command, SetWidthCommand):
            return command.width is not None
        if isinstance(command, (SetPadCommand, SetBulletCommand)):
            return command.char is not None
        return True

    def _execute(self, command: Command, cli_interface) -> CommandResult:
        settings = cli_interface.settings

        if isinstance(command, SetWidthCommand):
            previous = settings.width
            settings.width = command.width
            return CommandResult(True, f"Line width changed from {previous}px to {settings.width}px")
        elif isinstance(command, SetPadCommand):
            previous = settings.pad_char
            settings.pad_char = command.char
            return CommandResult(True, f"Padding character changed from {previous!r} to {settings.pad_char!r}")
        elif isinstance(command, SetBulletCommand):
            previous = settings.bullet_char
            settings.bullet_char = command.char
            return CommandResult(True, f"Bullet character changed from {previous!r} to {settings.bullet_char!r}")
        elif isinstance(command, SettingsCommand):
            return CommandResult(True, f"Current settings: {settings}")
        else:
            return CommandResult(False, f"Unsupported command type: {command.__class__.__name__}")
