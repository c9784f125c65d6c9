"""
Layout command handlers: measuring, padding, alignment and text flow.
"""

from typing import List

from chatlayout.core.commands import (CenterCommand, ColumnsCommand, Command,
                                      LayoutCommand, ListCommand,
                                      PadLeftCommand, PadRightCommand,
                                      TrimCommand, WidthCommand, WrapCommand)
from chatlayout.core.layout import (center, pad_left, pad_right, to_list,
                                    trim, two_column_align, wrap)
from chatlayout.core.widths import get_width
from chatlayout.interfaces.command_handlers import CommandHandler, CommandResult


class AlignmentHandler(CommandHandler):
    """Handles single-line commands: width, padding, centering and two columns."""

    def get_supported_command_types(self) -> List[str]:
        return ['WidthCommand', 'PadRightCommand', 'PadLeftCommand', 'CenterCommand', 'ColumnsCommand']

    def validate(self, command: Command) -> bool:
        if isinstance(command, LayoutCommand):
            return bool(command.payload)
        return True

    def _execute(self, command: Command, cli_interface) -> CommandResult:
        settings = cli_interface.settings

        if isinstance(command, WidthCommand):
            width = get_width(command.payload)
            return CommandResult(True, f"{width}px", {'output': command.payload, 'width': width})
        elif isinstance(command, PadRightCommand):
            output = pad_right(command.payload, settings.pad_char, settings.width)
        elif isinstance(command, PadLeftCommand):
            output = pad_left(command.payload, settings.pad_char, settings.width)
        elif isinstance(command, CenterCommand):
            output = center(command.payload, settings.pad_char, settings.width)
        elif isinstance(command, ColumnsCommand):
            output = two_column_align(command.left, command.right, settings.pad_char, settings.width)
        else:
            return CommandResult(False, f"Unsupported command type: {command.__class__.__name__}")

        return CommandResult(True, f"{get_width(output)}px of {settings.width}px", {'output': output})


class TextFlowHandler(CommandHandler):
    """Handles commands that cut or flow text: trim, wrap and lists."""

    def get_supported_command_types(self) -> List[str]:
        return ['TrimCommand', 'WrapCommand', 'ListCommand']

    def validate(self, command: Command) -> bool:
        if isinstance(command, ListCommand):
            return bool(command.entries)
        if isinstance(command, LayoutCommand):
            return bool(command.payload)
        return True

    def _execute(self, command: Command, cli_interface) -> CommandResult:
        settings = cli_interface.settings

        if isinstance(command, TrimCommand):
            output = trim(command.payload, settings.width)
            removed = len(command.payload) - len(output)
            return CommandResult(True, f"Removed {removed} characters", {'output': output})
        elif isinstance(command, WrapCommand):
            output = wrap(command.payload, wrapped_width=settings.width)
        elif isinstance(command, ListCommand):
            output = to_list(command.entries, settings.bullet_char, settings.width)
        else:
            return CommandResult(False, f"Unsupported command type: {command.__class__.__name__}")

        line_count = output.count("\n") + 1 if output else 0
        return CommandResult(True, f"{line_count} lines", {'output': output})
