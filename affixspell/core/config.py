"""Configuration model and loading."""

import argparse
import json

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from affixspell.utils.constants import Constants
from affixspell.utils.helpers import expand_file_path


class Config(BaseModel):
    """Runtime configuration, merged from a JSON file and CLI arguments."""

    # Dictionary sources
    aff: str | None = None
    dic: str | None = None
    snapshot: str | None = None
    save_snapshot: str | None = None

    # Words to check
    input: str | None = None
    words: list[str] = Field(default_factory=list)

    # Suggestions
    limit: int = Field(default=Constants.DEFAULT_SUGGESTION_LIMIT, ge=1)
    max_distance: int = Field(default=Constants.DEFAULT_MAX_EDIT_DISTANCE, ge=1)

    # Output
    verbose: bool = False
    debug: bool = False
    debug_words: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("aff", "dic", "snapshot", "save_snapshot", "input")
    @classmethod
    def expand_paths(cls, value: str | None) -> str | None:
        """Expand ~ in file paths."""
        return expand_file_path(value)

    @field_validator("debug_words", mode="before")
    @classmethod
    def parse_string_set(cls, value):
        """Accept a comma-separated string or a list; words are lowercased."""
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = value.split(",")
        return frozenset(word.strip().lower() for word in value if word.strip())

    @model_validator(mode="after")
    def validate_cross_fields(self) -> "Config":
        """Check that related options are given together."""
        if (self.aff is None) != (self.dic is None):
            raise ValueError("aff and dic must be given together")
        if self.debug_words and not self.debug:
            raise ValueError("debug_words requires debug")
        if self.debug:
            self.verbose = True
        return self

    @property
    def has_source(self) -> bool:
        """Whether a dictionary source is configured."""
        return self.snapshot is not None or self.aff is not None


def load_config(
    json_path: str | None,
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> Config:
    """Load configuration from JSON and CLI args.

    CLI arguments override values from the JSON file. Arguments left at
    None (or an empty list) are treated as not given.

    Args:
        json_path: Optional JSON configuration file
        args: Parsed CLI arguments
        parser: Parser used to report configuration errors

    Returns:
        Validated Config
    """
    data = {}

    if json_path:
        try:
            with open(expand_file_path(json_path), "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            parser.error(f"Could not read config file {json_path}: {e}")

    for key, value in vars(args).items():
        if key == "config" or value is None or value == []:
            continue
        data[key] = value

    try:
        return Config(**data)
    except ValidationError as e:
        parser.error(str(e))
