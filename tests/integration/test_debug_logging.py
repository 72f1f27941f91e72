"""Regression tests for debug-word tracing.

Traced words must log their path through checking and suggestion so
unexpected decisions can be explained from the log alone.
"""

import io

import pytest
from loguru import logger

from affixspell import Dictionary, Spellchecker
from affixspell.utils.logging import setup_logger


@pytest.fixture
def log_capture():
    """Capture DEBUG messages in a StringIO sink."""
    setup_logger(verbose=True, debug=True)
    capture = io.StringIO()
    handler_id = logger.add(capture, level="DEBUG", format="{message}")
    try:
        yield capture
    finally:
        logger.remove(handler_id)


def _spellchecker(debug_words) -> Spellchecker:
    dictionary = Dictionary(
        {"hello": [[]], "Hello": [["K"]], "fone": [[]]},
        flags={"KEEPCASE": "K"},
        replacement_table=[("ph", "f")],
    )
    return Spellchecker(dictionary, debug_words=debug_words)


def test_traces_keepcase_rejection(log_capture) -> None:
    """The KEEPCASE short-circuit is explained for traced words."""
    _spellchecker(["hello"]).check("HELLO")
    log_text = log_capture.getvalue()
    assert "[DEBUG WORD: 'HELLO'] [Check] rejected: capitalized form 'Hello' is KEEPCASE" in log_text, (
        f"Expected KEEPCASE trace, captured messages:\n{log_text}"
    )


def test_traces_replacement_suggestion(log_capture) -> None:
    """A REP hit is traced in the suggestion stage."""
    _spellchecker(["phone"]).suggest("phone")
    log_text = log_capture.getvalue()
    assert "[DEBUG WORD: 'phone'] [Suggest]" in log_text, (
        f"Expected suggestion trace, captured messages:\n{log_text}"
    )


def test_untraced_words_are_silent(log_capture) -> None:
    """Words not listed produce no per-word trace."""
    _spellchecker(["world"]).check("HELLO")
    assert "DEBUG WORD" not in log_capture.getvalue()
