"""Type definitions for affixspell."""

from dataclasses import dataclass

# Rule codes are flag characters/strings from the affix file; numeric
# directives such as COMPOUNDMIN share the flag table as ints.
RuleCode = str | int

# One sense of a spelling: the set of rule codes it carries
Homograph = frozenset[RuleCode]


@dataclass(frozen=True)
class SuggestionCandidate:
    """A generated correction and how many edit paths produced it."""

    word: str
    weight: int
