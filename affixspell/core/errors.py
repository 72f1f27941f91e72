"""Exceptions raised by affixspell."""


class SpellcheckError(Exception):
    """Base class for all affixspell errors."""


class NoDictionaryLoadedError(SpellcheckError):
    """Raised when a lookup is attempted before any dictionary is active."""

    def __init__(self, message: str = "No dictionary loaded") -> None:
        super().__init__(message)


class DictionaryParseError(SpellcheckError):
    """Raised when affix or word-list source text is malformed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
