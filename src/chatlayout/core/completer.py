"""
Command completion functionality for the chatlayout playground.
"""
from prompt_toolkit.completion import Completer, Completion


class CommandCompleter(Completer):
    """Completer for playground commands with descriptions."""

    def __init__(self):
        """Initialize the command completer with available commands."""
        self.command_list = [
            # Session commands
            ("exit", "Exit the playground"),
            ("quit", "Exit the playground"),
            ("help", "Show help information"),
            ("settings", "Show width, padding and bullet settings"),

            # Layout commands
            ("width", "Measure the pixel width of text"),
            ("pad-right", "Pad text on the right"),
            ("pad-left", "Pad text on the left"),
            ("center", "Center text"),
            ("trim", "Trim text to the line width"),
            ("wrap", "Wrap text into lines"),
            ("columns", "Align 'left | right' in two columns"),
            ("list", "Render 'a | b | c' as a bulleted list"),

            # Settings
            ("set-width", "Set the line width in pixels"),
            ("set-pad", "Set the padding character ('space' for a blank)"),
            ("set-bullet", "Set the bullet character"),
        ]

        self.commands = [cmd for cmd, _ in self.command_list]

    def get_completions(self, document, complete_event):
        """Get command completions based on the user's input.

        Args:
            document: The Document instance for the current input
            complete_event: The CompleteEvent that triggered this completion

        Yields:
            Completion instances for matching commands with descriptions
        """
        text = document.text_before_cursor.lstrip()

        # Only complete the command name, not the text after it
        if ' ' in text:
            return

        for command, description in self.command_list:
            if command.startswith(text.lower()):
                yield Completion(
                    command,
                    start_position=-len(text),
                    display_meta=description
                )
