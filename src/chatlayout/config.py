"""
Configuration settings for the chatlayout package.
All constants and configuration variables are defined here.
"""
from pathlib import Path

# Chat surface settings
CHAT_WIDTH = 318  # 325
DEFAULT_PAD_CHAR = " "
DEFAULT_BULLET_CHAR = "-"
LIST_CONTINUATION_PREFIX = "  "

# Formatting codes
FORMATTING_CHAR = "§"
ALTERNATE_FORMATTING_CHAR = "&"

# Terminal preview settings
PIXEL_LABEL_WIDTH = 7

# Interactive session
PROMPT_TEXT = "chatlayout> "
EXIT_COMMANDS = ("exit", "quit", "q")
HELP_COMMANDS = ("help", "h", "?")

# Logging
LOGS_DIR = Path.home() / ".chatlayout" / "logs"
LOG_FILE_NAME = "chatlayout.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
