from .index import SkillIndex
from .matching import (
    IntentStrategy,
    glob_to_regex,
    intent_strategy,
    match_context,
    match_file,
    match_intent,
    matched_fields,
    trigger_match,
)

__all__ = [
    "SkillIndex",
    "IntentStrategy",
    "glob_to_regex",
    "intent_strategy",
    "match_context",
    "match_file",
    "match_intent",
    "matched_fields",
    "trigger_match",
]
