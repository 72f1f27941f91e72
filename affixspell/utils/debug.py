"""Per-word debug tracing helpers."""

from loguru import logger

from affixspell.utils.constants import Constants


def is_debug_word(word: str, debug_words: frozenset[str]) -> bool:
    """Check whether a word (after trimming) is being traced.

    Matching is case-insensitive so 'HELLO' is traced when 'hello' is listed.
    """
    if not debug_words:
        return False
    return word.strip().lower() in debug_words


def log_debug_word(word: str, message: str, stage: str) -> None:
    """Log a trace message for a debug word."""
    logger.debug(f"[{Constants.DEBUG_WORD_PREFIX}: '{word}'] [{stage}] {message}")


def log_if_debug_word(word: str, message: str, stage: str, debug_words: frozenset[str]) -> None:
    """Log a trace message only when the word is being traced."""
    if is_debug_word(word, debug_words):
        log_debug_word(word, message, stage)
