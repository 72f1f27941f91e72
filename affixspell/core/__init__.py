"""Core decision logic for affixspell."""

from .acceptance import WordAcceptance
from .config import Config, load_config
from .errors import DictionaryParseError, NoDictionaryLoadedError, SpellcheckError
from .flags import FlagEvaluator
from .suggestion import SuggestionEngine, rank_candidates
from .types import Homograph, RuleCode, SuggestionCandidate

__all__ = [
    "Config",
    "DictionaryParseError",
    "FlagEvaluator",
    "Homograph",
    "NoDictionaryLoadedError",
    "RuleCode",
    "SpellcheckError",
    "SuggestionCandidate",
    "SuggestionEngine",
    "WordAcceptance",
    "load_config",
    "rank_candidates",
]
