"""
Copyright (c) 2025 The chatlayout authors

This file is part of chatlayout.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

CLI interface for the chatlayout playground.

This module connects the layout core with a prompt_toolkit based terminal
session, so layouts can be tried out and checked against the width table.
"""
from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import InMemoryHistory

from chatlayout.config import EXIT_COMMANDS, HELP_COMMANDS, PROMPT_TEXT
from chatlayout.core.commands import CommandManager
from chatlayout.core.completer import CommandCompleter
from chatlayout.interfaces.command_handlers import (CommandHandlerRegistry,
                                                    CommandResult)
from chatlayout.interfaces.session import SessionSettings
from chatlayout.ui.resources import (BANNER, HELP_TEXT, Emojis, UIColors,
                                     format_error_message, format_info_message)
from chatlayout.ui.terminal.text_utils import print_framed_text
from chatlayout.utils.logging_config import get_logger, setup_logging


class CliInterface:
    """CLI interface for the chatlayout playground."""

    def __init__(self, settings: SessionSettings = None, command_manager: CommandManager = None,
                 verbose: bool = False):
        """Initialize the CLI interface.

        Args:
            settings: Session settings, defaults to the chat surface defaults
            command_manager: Command manager to use
            verbose: Enable verbose logging
        """
        self.settings = settings or SessionSettings()
        self.command_manager = command_manager or CommandManager()
        self.verbose = verbose

        # Setup centralized logging
        setup_logging(verbose)
        self.logger = get_logger(__name__)

        self.command_registry = CommandHandlerRegistry()

    def _print_message(self, message: str, style: str = UIColors.INFO_FG):
        print_formatted_text(FormattedText([(style, message)]))

    def _display_result(self, result: CommandResult, title: str):
        """Show the outcome of a command in the terminal."""
        if not result.success:
            self._print_message(format_error_message(result.message), UIColors.ERROR_FG)
            return
        if result.output is not None:
            print_framed_text(result.output, title, self.settings.width)
        if result.message:
            self._print_message(format_info_message(result.message))

    def handle_command(self, cmd_text: str) -> CommandResult:
        """Parse and execute one command line.

        Args:
            cmd_text: The command as typed

        Returns:
            The result of the command
        """
        cmd_lower = cmd_text.lower().strip()

        if cmd_lower in HELP_COMMANDS:
            self._print_message(HELP_TEXT)
            return CommandResult(True)

        command = self.command_manager.parse_input(cmd_text)
        if not command:
            result = CommandResult(False, f"Unknown command: '{cmd_text.strip()}'")
        else:
            result = self._process_command(command)

        self._display_result(result, cmd_text.strip())
        return result

    def _process_command(self, command) -> CommandResult:
        """Process a parsed command using the handler registry."""
        command_type = command.__class__.__name__

        handler = self.command_registry.get_handler(command_type)
        if not handler:
            return CommandResult(False, f"No handler available for command: {command_type}")

        self.logger.debug(f"Using handler {handler.__class__.__name__} for command: {command_type}")
        return handler.handle(command, self)

    def run_once(self, cmd_text: str) -> int:
        """Execute a single command and return the process exit status."""
        self.logger.info(f"Running single command: '{cmd_text[:50]}'")
        result = self.handle_command(cmd_text)
        return 0 if result.success else 1

    def interactive_session(self):
        """Run an interactive session until the user exits."""
        self.logger.info(f"Starting interactive session ({self.settings})")
        self._print_message(BANNER, UIColors.TITLE_FG)
        self._print_message(format_info_message(f"Settings: {self.settings}. Type 'help' for commands."))

        session = PromptSession(
            history=InMemoryHistory(),
            completer=CommandCompleter(),
            auto_suggest=AutoSuggestFromHistory()
        )

        while True:
            try:
                cmd_text = session.prompt(PROMPT_TEXT)
            except (KeyboardInterrupt, EOFError):
                break

            if not cmd_text.strip():
                continue
            if cmd_text.lower().strip() in EXIT_COMMANDS:
                break

            self.handle_command(cmd_text)

        self._print_message(f"\n{Emojis.BYE} Goodbye!")
        self.logger.info("Interactive session ended")
