"""Serializable dictionary snapshot."""

from pathlib import Path

from pydantic import BaseModel, Field

from affixspell.utils.helpers import expand_file_path


class DictionarySnapshot(BaseModel):
    """Structured tables of a parsed dictionary.

    This is what `Spellchecker.parse` returns for caching, and what
    `Spellchecker.use` accepts to activate a dictionary without re-parsing.
    """

    # spelling -> homographs, each a list of rule codes
    dictionary_table: dict[str, list[list[str]]] = Field(default_factory=dict)
    flags: dict[str, int | str] = Field(default_factory=dict)
    # Regular expressions matched against the whole word
    compound_rules: list[str] = Field(default_factory=list)
    replacement_table: list[tuple[str, str]] = Field(default_factory=list)
    try_characters: str = ""


def save_snapshot(snapshot: DictionarySnapshot, path: str) -> None:
    """Write a snapshot as JSON."""
    Path(expand_file_path(path)).write_text(snapshot.model_dump_json(), encoding="utf-8")


def load_snapshot(path: str) -> DictionarySnapshot:
    """Read a snapshot written by save_snapshot.

    Raises:
        pydantic.ValidationError: If the file does not hold a valid snapshot
    """
    text = Path(expand_file_path(path)).read_text(encoding="utf-8")
    return DictionarySnapshot.model_validate_json(text)
