"""Dictionary tables, matchers and source parsing."""

from affixspell.dictionary.edits import edits1, find_similar_words
from affixspell.dictionary.handle import Dictionary, DictionaryHandle
from affixspell.dictionary.matchers import CompoundRule, RegexCompoundRule, ReplacementEntry
from affixspell.dictionary.parsing import (
    AffixData,
    build_snapshot,
    expand_compound_rules,
    parse_affix_source,
    parse_flags,
    parse_word_list,
)
from affixspell.dictionary.snapshot import DictionarySnapshot, load_snapshot, save_snapshot

__all__ = [
    "AffixData",
    "CompoundRule",
    "Dictionary",
    "DictionaryHandle",
    "DictionarySnapshot",
    "RegexCompoundRule",
    "ReplacementEntry",
    "build_snapshot",
    "edits1",
    "expand_compound_rules",
    "find_similar_words",
    "load_snapshot",
    "parse_affix_source",
    "parse_flags",
    "parse_word_list",
    "save_snapshot",
]
