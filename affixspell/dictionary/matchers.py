"""Compound-rule and replacement matchers."""

import re
from typing import NamedTuple, Protocol


class CompoundRule(Protocol):
    """Whole-string matcher used as a fallback for words missing from the table."""

    def matches(self, word: str) -> bool:
        """Return True if the whole word matches the rule."""


class RegexCompoundRule:
    """Compound rule backed by a regular expression.

    The pattern must match the entire word. Matching is case-insensitive.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._regex = re.compile(pattern, re.IGNORECASE)

    def matches(self, word: str) -> bool:
        return self._regex.fullmatch(word) is not None

    def __repr__(self) -> str:
        return f"RegexCompoundRule({self.pattern!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RegexCompoundRule) and other.pattern == self.pattern

    def __hash__(self) -> int:
        return hash(self.pattern)


class ReplacementEntry(NamedTuple):
    """A (from, to) pair from the REP table."""

    source: str
    target: str

    def applies_to(self, word: str) -> bool:
        """Whether the source substring occurs in the word."""
        return self.source in word

    def apply(self, word: str) -> str:
        """Replace the first occurrence of the source substring."""
        return word.replace(self.source, self.target, 1)
