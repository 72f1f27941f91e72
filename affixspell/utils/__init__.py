"""Utility functions for affixspell."""

from affixspell.utils.constants import Constants
from affixspell.utils.debug import is_debug_word, log_debug_word, log_if_debug_word
from affixspell.utils.helpers import expand_file_path, load_word_file, read_text_file
from affixspell.utils.logging import setup_logger

__all__ = [
    "Constants",
    "is_debug_word",
    "log_debug_word",
    "log_if_debug_word",
    "expand_file_path",
    "load_word_file",
    "read_text_file",
    "setup_logger",
]
