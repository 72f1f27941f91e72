"""Correction suggestions for misspelled words.

Based on Norvig's spelling corrector: candidates produced by more distinct
edit paths rank higher.
"""

from collections import Counter
from typing import TYPE_CHECKING, Iterable

from loguru import logger

from affixspell.core.acceptance import WordAcceptance
from affixspell.core.flags import FlagEvaluator
from affixspell.core.types import SuggestionCandidate
from affixspell.utils.constants import Constants
from affixspell.utils.debug import log_if_debug_word

if TYPE_CHECKING:
    from affixspell.dictionary.handle import DictionaryHandle


def rank_candidates(candidates: Iterable[str]) -> list[SuggestionCandidate]:
    """Weight candidates by occurrence count and rank them.

    The ranking is a stable ascending sort on weight followed by a reversal
    of the whole list, so among equal weights the candidate generated first
    ends up last.

    Args:
        candidates: Generated words, one occurrence per edit path

    Returns:
        Candidates ordered from most to least supported
    """
    weights = Counter(candidates)

    ranked = sorted(weights.items(), key=lambda item: item[1])
    ranked.reverse()

    return [SuggestionCandidate(word, weight) for word, weight in ranked]


class SuggestionEngine:
    """Produces ranked corrections for words rejected by WordAcceptance."""

    def __init__(
        self,
        dictionary: "DictionaryHandle",
        acceptance: WordAcceptance,
        flags: FlagEvaluator,
        max_distance: int = Constants.DEFAULT_MAX_EDIT_DISTANCE,
        debug_words: frozenset[str] = frozenset(),
    ) -> None:
        self.dictionary = dictionary
        self.acceptance = acceptance
        self.flags = flags
        self.max_distance = max_distance
        self.debug_words = debug_words

    def _trace(self, word: str, message: str) -> None:
        log_if_debug_word(word, message, "Suggest", self.debug_words)

    def _replacement_pass(self, word: str) -> str | None:
        """Return the first replacement-table correction that is an accepted word."""
        for entry in self.dictionary.replacement_table:
            if not entry.applies_to(word):
                continue

            corrected = entry.apply(word)
            if self.acceptance.check(corrected):
                self._trace(word, f"replacement {entry.source!r} -> {entry.target!r} gave '{corrected}'")
                return corrected
        return None

    def suggest(self, word: str, limit: int | None = Constants.DEFAULT_SUGGESTION_LIMIT) -> list[str]:
        """Return suggestions for a misspelled word.

        Correct words get no suggestions. A replacement-table hit is returned
        on its own. Otherwise edit-distance candidates are ranked, cut to
        `limit`, and NOSUGGEST words are dropped from what remains, so fewer
        than `limit` suggestions may be returned.

        Args:
            word: The misspelling
            limit: Maximum number of suggestions (falsy means the default)

        Returns:
            Suggested words, best first
        """
        if not limit:
            limit = Constants.DEFAULT_SUGGESTION_LIMIT

        if self.acceptance.check(word):
            return []

        corrected = self._replacement_pass(word)
        if corrected is not None:
            return [corrected]

        candidates = self.dictionary.find_similar_words(word, self.max_distance)
        ranked = rank_candidates(candidates)
        logger.debug(f"Ranked {len(ranked)} distinct candidates for '{word}'")

        suggestions = []
        for candidate in ranked[: max(limit, 0)]:
            if self.flags.has_flag(candidate.word, Constants.NOSUGGEST):
                self._trace(word, f"dropped NOSUGGEST candidate '{candidate.word}'")
                continue
            suggestions.append(candidate.word)

        self._trace(word, f"suggestions: {suggestions}")
        return suggestions
