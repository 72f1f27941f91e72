"""Shared utility functions."""

import os
from pathlib import Path


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def read_text_file(filepath: str) -> str:
    """Read a UTF-8 text file, expanding ~ in the path."""
    return Path(os.path.expanduser(filepath)).read_text(encoding="utf-8")


def load_word_file(filepath: str | None) -> list[str]:
    """Load words to check from a file, one per line.

    Blank lines and lines starting with '#' are skipped. Surrounding
    whitespace is kept so the checker's own trimming applies.
    """
    if not filepath:
        return []

    words = []
    with open(os.path.expanduser(filepath), "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if line.strip() and not line.lstrip().startswith("#"):
                words.append(line)
    return words
