"""The dictionary handle consumed by the decision core."""

from typing import Iterable, Mapping, Protocol, Sequence

from loguru import logger

from affixspell.core.types import Homograph, RuleCode
from affixspell.dictionary.edits import find_similar_words
from affixspell.dictionary.matchers import CompoundRule, RegexCompoundRule, ReplacementEntry
from affixspell.dictionary.snapshot import DictionarySnapshot
from affixspell.utils.constants import Constants


class DictionaryHandle(Protocol):
    """Read-only tables and candidate generator the core relies on."""

    dictionary_table: Mapping[str, Sequence[Homograph]]
    flags: Mapping[str, RuleCode]
    compound_rules: Sequence[CompoundRule]
    replacement_table: Sequence[ReplacementEntry]

    def find_similar_words(self, word: str, max_distance: int) -> list[str]:
        """Known words within max_distance edits, one entry per edit path."""


class Dictionary:
    """Concrete, immutable dictionary built from structured tables.

    Attributes:
        dictionary_table: Spelling -> tuple of homograph rule-code sets
        flags: Flag name -> rule code (COMPOUNDMIN maps to an int)
        compound_rules: Ordered whole-word matchers
        replacement_table: Ordered REP entries
        alphabet: Characters used by the edit-distance generator
    """

    def __init__(
        self,
        dictionary_table: Mapping[str, Iterable[Iterable[RuleCode]]],
        flags: Mapping[str, RuleCode] | None = None,
        compound_rules: Iterable[CompoundRule | str] = (),
        replacement_table: Iterable[tuple[str, str]] = (),
        try_characters: str = "",
    ) -> None:
        table: dict[str, tuple[Homograph, ...]] = {}
        for spelling, homographs in dictionary_table.items():
            frozen = tuple(frozenset(rule_codes) for rule_codes in homographs)
            # Spellings without homographs are treated as absent
            if frozen:
                table[spelling] = frozen

        self.dictionary_table = table
        self.flags = dict(flags or {})
        self.compound_rules = tuple(
            RegexCompoundRule(rule) if isinstance(rule, str) else rule for rule in compound_rules
        )
        self.replacement_table = tuple(ReplacementEntry(*entry) for entry in replacement_table)
        self.try_characters = try_characters
        self.alphabet = try_characters or "".join(sorted(set("".join(table))))

    @classmethod
    def from_snapshot(cls, snapshot: DictionarySnapshot) -> "Dictionary":
        """Build a dictionary from serialized tables."""
        dictionary = cls(
            snapshot.dictionary_table,
            flags=snapshot.flags,
            compound_rules=snapshot.compound_rules,
            replacement_table=snapshot.replacement_table,
            try_characters=snapshot.try_characters,
        )
        logger.debug(
            f"Built dictionary with {len(dictionary.dictionary_table)} spellings, "
            f"{len(dictionary.compound_rules)} compound rules, "
            f"{len(dictionary.replacement_table)} replacements"
        )
        return dictionary

    def to_snapshot(self) -> DictionarySnapshot:
        """Serialize the tables.

        Rule codes, including the codes bound to flag names, are written as
        strings; COMPOUNDMIN stays numeric.

        Raises:
            TypeError: If a compound rule is not regex-backed
        """
        patterns = []
        for rule in self.compound_rules:
            if not isinstance(rule, RegexCompoundRule):
                raise TypeError(f"Cannot serialize compound rule {rule!r}")
            patterns.append(rule.pattern)

        return DictionarySnapshot(
            dictionary_table={
                spelling: [sorted(str(code) for code in homograph) for homograph in homographs]
                for spelling, homographs in self.dictionary_table.items()
            },
            flags={
                name: value if name == Constants.COMPOUNDMIN else str(value)
                for name, value in self.flags.items()
            },
            compound_rules=patterns,
            replacement_table=[tuple(entry) for entry in self.replacement_table],
            try_characters=self.try_characters,
        )

    def __contains__(self, spelling: object) -> bool:
        return spelling in self.dictionary_table

    def __len__(self) -> int:
        return len(self.dictionary_table)

    def find_similar_words(self, word: str, max_distance: int) -> list[str]:
        """Spellings present in the table within max_distance edits of word."""
        return find_similar_words(word, max_distance, self.alphabet, self.__contains__)
