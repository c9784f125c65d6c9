"""
Command management and processing for the chatlayout playground.

This module handles command recognition and parsing independent of the
user interface. Payload text may use the alternate code character for
formatting codes; it is translated to the marker while parsing.
"""
import re
from typing import Callable, Dict, List, Optional

from chatlayout.core.colors import translate_alternate_codes

COLUMN_SEPARATOR = "|"


class Command:
    """Base class for all commands."""

    def __init__(self, text: str, args: List[str]):
        self.text = text
        self.args = args

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.args})"


class LayoutCommand(Command):
    """Base class for commands that lay out the text following the command name."""

    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        stripped = text.strip()
        raw_payload = stripped[len(args[0]):].strip() if args else ""
        self.payload = translate_alternate_codes(raw_payload)


class WidthCommand(LayoutCommand):
    """Command to measure the pixel width of the payload."""
    pass


class PadRightCommand(LayoutCommand):
    """Command to pad the payload on the right."""
    pass


class PadLeftCommand(LayoutCommand):
    """Command to pad the payload on the left."""
    pass


class CenterCommand(LayoutCommand):
    """Command to center the payload."""
    pass


class TrimCommand(LayoutCommand):
    """Command to trim the payload to the session width."""
    pass


class WrapCommand(LayoutCommand):
    """Command to wrap the payload into lines."""
    pass


class ColumnsCommand(LayoutCommand):
    """Command to align two columns separated by '|'."""

    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        left, _, right = self.payload.partition(COLUMN_SEPARATOR)
        self.left = left.strip()
        self.right = right.strip()


class ListCommand(LayoutCommand):
    """Command to render a bulleted list from entries separated by '|'."""

    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        self.entries = [entry.strip() for entry in self.payload.split(COLUMN_SEPARATOR) if entry.strip()]


class SetWidthCommand(Command):
    """Command to set the session width in pixels."""

    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        self.width = None
        if len(args) >= 2:
            try:
                self.width = int(args[1])
            except ValueError:
                pass


class _SetCharCommand(Command):

    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        # args are lowercased, take the value as typed
        values = text.split()[1:]
        value = values[0] if len(values) == 1 else None
        if value is not None and value.lower() == "space":
            value = " "
        self.char = value


class SetPadCommand(_SetCharCommand):
    """Command to set the padding character."""
    pass


class SetBulletCommand(_SetCharCommand):
    """Command to set the bullet character."""
    pass


class SettingsCommand(Command):
    """Command to display the current session settings."""
    pass


class CommandManager:
    """Manager for command parsing."""

    def __init__(self):
        self.command_patterns: Dict[str, Callable[[str, List[str]], Command]] = {
            r'^(w|width)(\s+.*)?$': WidthCommand,
            r'^(pr|pad-right)(\s+.*)?$': PadRightCommand,
            r'^(pl|pad-left)(\s+.*)?$': PadLeftCommand,
            r'^(c|center)(\s+.*)?$': CenterCommand,
            r'^(t|trim)(\s+.*)?$': TrimCommand,
            r'^(wr|wrap)(\s+.*)?$': WrapCommand,
            r'^(col|columns)(\s+.*)?$': ColumnsCommand,
            r'^(l|list)(\s+.*)?$': ListCommand,
            r'^(sw|set-width)\s+-?\d+$': SetWidthCommand,
            r'^(sp|set-pad)\s+\S+$': SetPadCommand,
            r'^(sb|set-bullet)\s+\S+$': SetBulletCommand,
            r'^settings$': SettingsCommand,
        }

    def parse_input(self, text: str) -> Optional[Command]:
        """Parse input to determine which command it is.

        Args:
            text: Input text

        Returns:
            Command object if input is a command, None otherwise
        """
        if not text or not text.strip():
            return None

        # Patterns only look at the command name, keep the payload as typed
        text_lower = text.lower().strip()

        for pattern, create_command in self.command_patterns.items():
            if re.match(pattern, text_lower, re.DOTALL):
                args = text_lower.split()
                return create_command(text, args)

        return None

    def is_command(self, text: str) -> bool:
        """Check if text is a recognized command."""
        return self.parse_input(text) is not None
