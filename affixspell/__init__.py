"""affixspell - Hunspell-style spellchecking against affix dictionaries.

Checks words (with case variants and compound rules) and ranks
edit-distance suggestions.
"""

from .core import Config, DictionaryParseError, NoDictionaryLoadedError, SpellcheckError, load_config
from .dictionary import Dictionary, DictionarySnapshot, build_snapshot, load_snapshot, save_snapshot
from .spellchecker import Spellchecker

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Dictionary",
    "DictionaryParseError",
    "DictionarySnapshot",
    "NoDictionaryLoadedError",
    "SpellcheckError",
    "Spellchecker",
    "build_snapshot",
    "load_config",
    "load_snapshot",
    "save_snapshot",
]
