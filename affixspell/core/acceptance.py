"""Word acceptance: exact lookups, case variants and compound fallback."""

from typing import TYPE_CHECKING

from affixspell.core.flags import FlagEvaluator
from affixspell.utils.constants import Constants
from affixspell.utils.debug import log_if_debug_word

if TYPE_CHECKING:
    from affixspell.dictionary.handle import DictionaryHandle


class WordAcceptance:
    """Decides whether a token is a correctly spelled word.

    `check` is the public entry point and tries capitalization variants;
    `check_exact` looks up a spelling without changing it.
    """

    def __init__(
        self,
        dictionary: "DictionaryHandle",
        flags: FlagEvaluator,
        debug_words: frozenset[str] = frozenset(),
    ) -> None:
        self.dictionary = dictionary
        self.flags = flags
        self.debug_words = debug_words

    def _trace(self, word: str, message: str) -> None:
        log_if_debug_word(word, message, "Check", self.debug_words)

    def _matches_compound_rule(self, word: str) -> bool:
        """Test a spelling absent from the table against the compound rules.

        Compound rules are only consulted when the dictionary defines
        COMPOUNDMIN and the word is at least that long.
        """
        compound_min = self.flags.flag_code(Constants.COMPOUNDMIN)
        if compound_min is None or len(word) < int(compound_min):
            return False

        for rule in self.dictionary.compound_rules:
            if rule.matches(word):
                self._trace(word, f"matched compound rule {rule!r}")
                return True
        return False

    def check_exact(self, word: str) -> bool:
        """Check whether a spelling exists in the dictionary as a standalone word.

        A spelling is accepted if at least one of its homographs is not
        restricted to compounds. Spellings missing from the table fall back
        to the compound rules.
        """
        homographs = self.dictionary.dictionary_table.get(word)

        if homographs is None:
            return self._matches_compound_rule(word)

        for rule_codes in homographs:
            if not self.flags.has_flag(word, Constants.ONLYINCOMPOUND, rule_codes):
                return True

        self._trace(word, "every homograph is ONLYINCOMPOUND")
        return False

    def check(self, word: str) -> bool:
        """Check whether a word or one of its capitalization variants is known.

        The word is trimmed, then tried as-is. An all-uppercase word is tried
        in capitalized form, and finally the lowercase form is tried. A
        KEEPCASE flag on the variant being tried rejects the word outright.
        """
        trimmed = word.strip()

        if self.check_exact(trimmed):
            self._trace(trimmed, "accepted as exact match")
            return True

        if trimmed.upper() == trimmed:
            capitalized = trimmed[:1] + trimmed[1:].lower()

            if self.flags.has_flag(capitalized, Constants.KEEPCASE):
                self._trace(trimmed, f"rejected: capitalized form '{capitalized}' is KEEPCASE")
                return False

            if self.check_exact(capitalized):
                self._trace(trimmed, f"accepted via capitalized form '{capitalized}'")
                return True

        lowercase = trimmed.lower()

        if lowercase != trimmed:
            if self.flags.has_flag(lowercase, Constants.KEEPCASE):
                self._trace(trimmed, f"rejected: lowercase form '{lowercase}' is KEEPCASE")
                return False

            if self.check_exact(lowercase):
                self._trace(trimmed, f"accepted via lowercase form '{lowercase}'")
                return True

        self._trace(trimmed, "rejected")
        return False
