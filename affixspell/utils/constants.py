"""Constants used throughout the affixspell codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Suggestions
    DEFAULT_SUGGESTION_LIMIT = 5
    """Number of suggestions returned when no limit is given."""

    DEFAULT_MAX_EDIT_DISTANCE = 2
    """Edit radius requested from the candidate generator."""

    # Flag names consumed by the decision core
    KEEPCASE = "KEEPCASE"
    """Entry's case form must not be substituted with another case variant."""

    ONLYINCOMPOUND = "ONLYINCOMPOUND"
    """Homograph is only valid inside a compound word."""

    NOSUGGEST = "NOSUGGEST"
    """Word is never offered as a suggestion."""

    COMPOUNDMIN = "COMPOUNDMIN"
    """Minimum word length eligible for compound-rule matching."""

    # Affix file syntax
    COMMENT_MARKER = "#"
    """Lines starting with this are ignored in .aff and .dic sources."""

    FLAG_SEPARATOR = "/"
    """Separates a spelling from its flags in .dic lines."""

    # Debug output
    DEBUG_WORD_PREFIX = "DEBUG WORD"
    """Tag used for per-word trace messages."""
