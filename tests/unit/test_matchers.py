"""Unit tests for compound and replacement matchers."""

from affixspell.dictionary import RegexCompoundRule, ReplacementEntry


class TestRegexCompoundRule:
    """Test RegexCompoundRule behavior."""

    def test_matches_whole_word(self) -> None:
        """The pattern must cover the entire word."""
        rule = RegexCompoundRule("(foo|bar)+")
        assert rule.matches("foobar") and not rule.matches("foobarx")

    def test_trailing_newline_does_not_match(self) -> None:
        """A trailing newline is part of the word, not an end anchor."""
        assert not RegexCompoundRule("(foo)+").matches("foo\n")

    def test_case_insensitive(self) -> None:
        """Compound rules ignore case."""
        assert RegexCompoundRule("(foo|bar)+").matches("FooBar")


class TestReplacementEntry:
    """Test ReplacementEntry behavior."""

    def test_applies_when_source_present(self) -> None:
        """An entry applies when its source occurs anywhere in the word."""
        assert ReplacementEntry("ph", "f").applies_to("alpha")

    def test_not_applied_when_source_absent(self) -> None:
        """An entry does not apply without its source."""
        assert not ReplacementEntry("ph", "f").applies_to("alfa")

    def test_apply_replaces_first_occurrence(self) -> None:
        """Only the first occurrence is replaced."""
        assert ReplacementEntry("a", "o").apply("banana") == "bonana"

    def test_is_a_pair(self) -> None:
        """Entries unpack as (source, target)."""
        source, target = ReplacementEntry("ph", "f")
        assert (source, target) == ("ph", "f")
