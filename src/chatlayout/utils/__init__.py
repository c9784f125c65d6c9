"""
Utility functions for the chatlayout package.
"""
from chatlayout.utils.logging_config import get_logger, setup_logging
