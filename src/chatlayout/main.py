"""
Copyright (c) 2025 The chatlayout authors

This file is part of chatlayout.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the LICENSE file in the
root directory of this source tree.

chatlayout - Main entry point for the layout playground.
"""
import argparse
import sys

from chatlayout.config import CHAT_WIDTH, DEFAULT_BULLET_CHAR, DEFAULT_PAD_CHAR
from chatlayout.core.exceptions import ChatLayoutError
from chatlayout.interfaces import CliInterface, SessionSettings
from chatlayout.ui.resources import format_error_message


def main(argv=None):
    """Main entry point for the application."""
    parser = argparse.ArgumentParser(description="Lay out chat lines by pixel width and preview them")
    parser.add_argument("-c", "--command", default=None,
                        help="Run a single command, e.g. \"wrap some text\", and exit")
    parser.add_argument("-w", "--width", type=int, default=CHAT_WIDTH,
                        help=f"Line width in pixels (default: {CHAT_WIDTH})")
    parser.add_argument("-p", "--pad", default=DEFAULT_PAD_CHAR,
                        help=f"Padding character (default: {DEFAULT_PAD_CHAR!r})")
    parser.add_argument("-b", "--bullet", default=DEFAULT_BULLET_CHAR,
                        help=f"Bullet character for lists (default: {DEFAULT_BULLET_CHAR!r})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging for debugging")

    args = parser.parse_args(argv)

    try:
        settings = SessionSettings(args.width, args.pad, args.bullet)
    except ChatLayoutError as e:
        print(format_error_message(f"Invalid settings: {e}"))
        sys.exit(1)

    cli = CliInterface(settings, verbose=args.verbose)

    if args.command is not None:
        sys.exit(cli.run_once(args.command))

    try:
        cli.interactive_session()
    except KeyboardInterrupt:
        print("\n\nSession terminated by user. Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
