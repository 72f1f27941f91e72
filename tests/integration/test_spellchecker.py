"""Integration tests for the Spellchecker facade.

These build dictionaries from affix/word-list text and exercise checking,
suggestions and dictionary replacement end to end.
"""

import threading

import pytest

from affixspell import (
    Dictionary,
    DictionarySnapshot,
    NoDictionaryLoadedError,
    Spellchecker,
    load_snapshot,
    save_snapshot,
)

AFF = """
TRY esianrtolcdugmphbyfvkwz
KEEPCASE K
NOSUGGEST !
ONLYINCOMPOUND c
COMPOUNDMIN 3
REP 1
REP ph f
COMPOUNDRULE 1
COMPOUNDRULE ab
"""

DIC = """9
hello
Hello/K
world
help
fone
damn/!
foot/ca
ball/b
ipod/K
"""


@pytest.fixture
def spellchecker() -> Spellchecker:
    checker = Spellchecker()
    checker.parse((AFF, DIC))
    return checker


class TestNoDictionary:
    """Operations without an active dictionary fail fast."""

    def test_check_raises(self) -> None:
        """check without a dictionary raises NoDictionaryLoadedError."""
        with pytest.raises(NoDictionaryLoadedError, match="No dictionary loaded"):
            Spellchecker().check("hello")

    def test_check_exact_raises(self) -> None:
        """check_exact without a dictionary raises NoDictionaryLoadedError."""
        with pytest.raises(NoDictionaryLoadedError):
            Spellchecker().check_exact("hello")

    def test_suggest_raises(self) -> None:
        """suggest without a dictionary raises NoDictionaryLoadedError."""
        with pytest.raises(NoDictionaryLoadedError):
            Spellchecker().suggest("helo")

    def test_has_flag_raises(self) -> None:
        """has_flag without a dictionary raises NoDictionaryLoadedError."""
        with pytest.raises(NoDictionaryLoadedError):
            Spellchecker().has_flag("hello", "KEEPCASE")

    def test_not_loaded(self) -> None:
        """A fresh spellchecker reports no dictionary."""
        assert not Spellchecker().is_loaded


class TestCheck:
    """End-to-end checking against a parsed dictionary."""

    def test_plain_word(self, spellchecker) -> None:
        """Words in the word list are accepted."""
        assert spellchecker.check("world")

    def test_keepcase_capitalized_form(self, spellchecker) -> None:
        """The KEEPCASE entry is accepted as written."""
        assert spellchecker.check("Hello")

    def test_keepcase_blocks_all_caps(self, spellchecker) -> None:
        """All caps is rejected because the capitalized form is KEEPCASE."""
        assert not spellchecker.check("HELLO")

    def test_all_caps_of_regular_word(self, spellchecker) -> None:
        """All caps is accepted for ordinary words."""
        assert spellchecker.check("WORLD")

    def test_keepcase_lowercase_entry(self, spellchecker) -> None:
        """A KEEPCASE lowercase entry rejects other case forms."""
        assert not spellchecker.check("IPOD")

    def test_compound_only_word_rejected(self, spellchecker) -> None:
        """ONLYINCOMPOUND words are not accepted alone."""
        assert not spellchecker.check("foot")

    def test_compound_accepted(self, spellchecker) -> None:
        """Words matching a compound rule are accepted."""
        assert spellchecker.check("football")

    def test_compound_rule_order_enforced(self, spellchecker) -> None:
        """Compound parts must follow the rule's order."""
        assert not spellchecker.check("ballfoot")

    def test_check_exact_does_not_vary_case(self, spellchecker) -> None:
        """check_exact does not try case variants."""
        assert not spellchecker.check_exact("World")

    def test_has_flag(self, spellchecker) -> None:
        """Flags from the word list are visible through the facade."""
        assert spellchecker.has_flag("damn", "NOSUGGEST")


class TestSuggest:
    """End-to-end suggestions with the real edit-distance generator."""

    def test_no_suggestions_for_correct_word(self, spellchecker) -> None:
        """Correct words need no suggestions."""
        assert spellchecker.suggest("hello") == []

    def test_replacement_table_hit(self, spellchecker) -> None:
        """A REP correction is returned alone."""
        assert spellchecker.suggest("phone") == ["fone"]

    def test_edit_distance_suggestion(self, spellchecker) -> None:
        """A one-letter typo is corrected."""
        assert spellchecker.suggest("wrld")[0] == "world"

    def test_nosuggest_word_never_offered(self, spellchecker) -> None:
        """NOSUGGEST words are filtered from suggestions."""
        assert "damn" not in spellchecker.suggest("dam")

    def test_respects_limit(self, spellchecker) -> None:
        """At most limit suggestions are returned."""
        assert len(spellchecker.suggest("helo", limit=1)) <= 1


class TestDictionaryLifecycle:
    """Activating, replacing and persisting dictionaries."""

    def test_parse_returns_snapshot(self) -> None:
        """parse returns the structured tables it activated."""
        snapshot = Spellchecker().parse((AFF, DIC))
        assert isinstance(snapshot, DictionarySnapshot) and "hello" in snapshot.dictionary_table

    def test_use_replaces_dictionary_wholesale(self, spellchecker) -> None:
        """After use, words from the old dictionary are gone."""
        spellchecker.use(Dictionary({"bonjour": [[]]}))
        assert spellchecker.check("bonjour") and not spellchecker.check("hello")

    def test_use_accepts_snapshot(self) -> None:
        """A snapshot can be activated directly."""
        checker = Spellchecker(DictionarySnapshot(dictionary_table={"hola": [[]]}))
        assert checker.check("Hola")

    def test_snapshot_file_round_trip(self, spellchecker, tmp_path) -> None:
        """A saved snapshot reproduces the same decisions."""
        path = tmp_path / "dict.json"
        save_snapshot(spellchecker.dictionary.to_snapshot(), str(path))
        reloaded = Spellchecker(load_snapshot(str(path)))
        words = ["hello", "Hello", "HELLO", "football", "foot", "phone"]
        assert [reloaded.check(w) for w in words] == [spellchecker.check(w) for w in words]

    def test_integer_rule_codes_survive_snapshot(self) -> None:
        """Integer rule codes keep their flag bindings through a snapshot."""
        dictionary = Dictionary({"Hello": [[1]], "hello": [[]]}, flags={"KEEPCASE": 1, "COMPOUNDMIN": 3})
        reloaded = Spellchecker(dictionary.to_snapshot())
        assert (
            not Spellchecker(dictionary).check("HELLO")
            and not reloaded.check("HELLO")
            and reloaded.dictionary.flags["COMPOUNDMIN"] == 3
        )

    def test_spelling_without_homographs_is_absent(self) -> None:
        """A spelling listed with no homographs is not in the dictionary."""
        dictionary = Dictionary({"ghost": [], "host": [[]]})
        assert "ghost" not in dictionary and not Spellchecker(dictionary).check("ghost")

    def test_swap_during_reads(self, spellchecker) -> None:
        """Concurrent swaps never leave checks without a dictionary."""
        errors = []

        def reader() -> None:
            try:
                for _ in range(200):
                    spellchecker.check("hello")
            except Exception as e:  # pylint: disable=broad-except
                errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for _ in range(50):
            spellchecker.use(Dictionary({"hello": [[]]}))
        for thread in threads:
            thread.join()

        assert errors == []
