"""Flag lookups against the active dictionary."""

from typing import TYPE_CHECKING, Iterable

from affixspell.core.types import RuleCode

if TYPE_CHECKING:
    from affixspell.dictionary.handle import DictionaryHandle


class FlagEvaluator:
    """Resolves whether a word, or an explicit rule-code set, carries a named flag.

    Flags not declared by the dictionary always resolve to False. Without
    explicit codes the lookup is made against the union of every homograph of
    the word, so KEEPCASE and NOSUGGEST hold if *any* sense carries them.
    """

    def __init__(self, dictionary: "DictionaryHandle") -> None:
        self.dictionary = dictionary

    def flag_code(self, flag_name: str) -> RuleCode | None:
        """Return the rule code bound to a flag name, or None if the dictionary does not use it."""
        if flag_name not in self.dictionary.flags:
            return None
        return self.dictionary.flags[flag_name]

    def rule_codes(self, word: str) -> frozenset[RuleCode]:
        """Union of rule codes across all homographs of a spelling.

        Unknown spellings yield an empty set.
        """
        homographs = self.dictionary.dictionary_table.get(word)
        if not homographs:
            return frozenset()
        return frozenset().union(*homographs)

    def has_flag(
        self,
        word: str,
        flag_name: str,
        explicit_rule_codes: Iterable[RuleCode] | None = None,
    ) -> bool:
        """Check whether a word carries a flag.

        Args:
            word: Spelling to look up (ignored when explicit codes are given)
            flag_name: Flag directive name, e.g. "KEEPCASE"
            explicit_rule_codes: Test exactly this set instead of the word's union

        Returns:
            True if the flag's rule code is present
        """
        code = self.flag_code(flag_name)
        if code is None:
            return False

        if explicit_rule_codes is None:
            return code in self.rule_codes(word)
        return code in explicit_rule_codes
