"""Spellchecker facade over a swappable dictionary."""

import threading
from dataclasses import dataclass
from typing import Iterable

from loguru import logger

from affixspell.core import FlagEvaluator, NoDictionaryLoadedError, SuggestionEngine, WordAcceptance
from affixspell.core.types import RuleCode
from affixspell.dictionary import Dictionary, DictionaryHandle, DictionarySnapshot, build_snapshot
from affixspell.utils.constants import Constants


@dataclass(frozen=True)
class _Session:
    """Components bound to a single dictionary."""

    dictionary: DictionaryHandle
    flags: FlagEvaluator
    acceptance: WordAcceptance
    suggestions: SuggestionEngine


class Spellchecker:
    """Checks words and suggests corrections against the active dictionary.

    `use` and `parse` replace the active dictionary wholesale by publishing a
    new session in one assignment. Each operation reads the session once, so
    it runs against a single dictionary even if another thread swaps it.
    """

    def __init__(
        self,
        dictionary: DictionaryHandle | DictionarySnapshot | None = None,
        max_distance: int = Constants.DEFAULT_MAX_EDIT_DISTANCE,
        debug_words: Iterable[str] = (),
    ) -> None:
        self.max_distance = max_distance
        self.debug_words = frozenset(word.lower() for word in debug_words)
        self._swap_lock = threading.Lock()
        self._session: _Session | None = None

        if dictionary is not None:
            self.use(dictionary)

    def _build_session(self, dictionary: DictionaryHandle) -> _Session:
        flags = FlagEvaluator(dictionary)
        acceptance = WordAcceptance(dictionary, flags, self.debug_words)
        suggestions = SuggestionEngine(
            dictionary, acceptance, flags, self.max_distance, self.debug_words
        )
        return _Session(dictionary, flags, acceptance, suggestions)

    def _active(self) -> _Session:
        session = self._session
        if session is None:
            raise NoDictionaryLoadedError()
        return session

    @property
    def dictionary(self) -> DictionaryHandle | None:
        """The active dictionary, or None."""
        session = self._session
        return session.dictionary if session else None

    @property
    def is_loaded(self) -> bool:
        return self._session is not None

    def use(self, dictionary: DictionaryHandle | DictionarySnapshot) -> None:
        """Activate a prebuilt dictionary or a parsed snapshot."""
        if isinstance(dictionary, DictionarySnapshot):
            dictionary = Dictionary.from_snapshot(dictionary)

        session = self._build_session(dictionary)
        with self._swap_lock:
            self._session = session
        logger.debug("Activated new dictionary")

    def parse(self, source: tuple[str, str]) -> DictionarySnapshot:
        """Build a dictionary from (affix text, word-list text) and activate it.

        Returns:
            The snapshot, for caching with save_snapshot
        """
        aff_text, dic_text = source
        snapshot = build_snapshot(aff_text, dic_text)
        self.use(snapshot)
        return snapshot

    def check(self, word: str) -> bool:
        """Check a word, trying capitalization variants."""
        return self._active().acceptance.check(word)

    def check_exact(self, word: str) -> bool:
        """Check a spelling without changing it."""
        return self._active().acceptance.check_exact(word)

    def has_flag(
        self, word: str, flag_name: str, explicit_rule_codes: Iterable[RuleCode] | None = None
    ) -> bool:
        """Check whether a word carries a flag."""
        return self._active().flags.has_flag(word, flag_name, explicit_rule_codes)

    def suggest(self, word: str, limit: int | None = Constants.DEFAULT_SUGGESTION_LIMIT) -> list[str]:
        """Suggest corrections for a misspelled word."""
        return self._active().suggestions.suggest(word, limit)
