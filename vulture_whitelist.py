"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic, argparse entry points, Protocols)
that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - used by framework via @field_validator decorator
_.expand_paths  # noqa: F821  # unused method (affixspell/core/config.py:36)
_.parse_string_set  # noqa: F821  # unused method (affixspell/core/config.py:42)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (affixspell/core/config.py:51)

# Protocol attributes - satisfied structurally by Dictionary
dictionary_table  # noqa: F821  # unused variable (affixspell/dictionary/handle.py:16)
compound_rules  # noqa: F821  # unused variable (affixspell/dictionary/handle.py:18)

# Public API used by library callers, not by the CLI
is_loaded  # noqa: F821  # unused property (affixspell/spellchecker.py:68)
