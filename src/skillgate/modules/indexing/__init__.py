"""Public API for the indexing module."""

from .internal import SkillIndex, IntentStrategy, intent_strategy, matched_fields, trigger_match
from .public import INDEX_VERSION, SkillIndexData, SkillIndexEntry

__all__ = [
    "SkillIndex",
    "IntentStrategy",
    "intent_strategy",
    "trigger_match",
    "matched_fields",
    "INDEX_VERSION",
    "SkillIndexData",
    "SkillIndexEntry",
]
