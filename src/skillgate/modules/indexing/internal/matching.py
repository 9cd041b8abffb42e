"""Trigger matching.

Intent patterns carry an explicit strategy: ``regex`` when the pattern
compiles, ``substring`` otherwise. The choice is made once per pattern and
can be inspected with :func:`intent_strategy`.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache
from typing import Optional, Pattern, Tuple

from skillgate.modules.skills.public.types import SkillTriggers

from ..public.types import TriggerField


class IntentStrategy(str, Enum):
    REGEX = "regex"
    SUBSTRING = "substring"


@lru_cache(maxsize=1024)
def _compile_intent(pattern: str) -> Tuple[IntentStrategy, Optional[Pattern[str]]]:
    try:
        return IntentStrategy.REGEX, re.compile(pattern, re.IGNORECASE)
    except re.error:
        return IntentStrategy.SUBSTRING, None


def intent_strategy(pattern: str) -> IntentStrategy:
    return _compile_intent(pattern)[0]


def match_intent(pattern: str, intent: str) -> bool:
    strategy, compiled = _compile_intent(pattern)
    if strategy is IntentStrategy.REGEX:
        return compiled.search(intent) is not None
    return pattern.lower() in intent.lower()


@lru_cache(maxsize=1024)
def glob_to_regex(pattern: str) -> Pattern[str]:
    """``*`` matches any run, ``?`` one character; the rest is literal."""
    parts = []
    for ch in pattern:
        if ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        else:
            parts.append(re.escape(ch))
    return re.compile("".join(parts), re.DOTALL)


def match_file(pattern: str, file: str) -> bool:
    return glob_to_regex(pattern).fullmatch(file) is not None


def match_context(pattern: str, context: str) -> bool:
    return pattern.lower() in context.lower()


def trigger_match(
    triggers: Optional[SkillTriggers],
    intent: Optional[str] = None,
    file: Optional[str] = None,
    context: Optional[str] = None,
) -> Optional[TriggerField]:
    """Return the first field (intent, file, context) that matches, or None."""
    if triggers is None:
        return None
    if intent and any(match_intent(p, intent) for p in triggers.intents):
        return "intent"
    if file and any(match_file(p, file) for p in triggers.files):
        return "file"
    if context and any(match_context(p, context) for p in triggers.contexts):
        return "context"
    return None


def matched_fields(
    triggers: Optional[SkillTriggers],
    intent: Optional[str] = None,
    file: Optional[str] = None,
    context: Optional[str] = None,
) -> set[str]:
    """All fields that match (used for overlap detection)."""
    if triggers is None:
        return set()
    fields = set()
    if intent and any(match_intent(p, intent) for p in triggers.intents):
        fields.add("intent")
    if file and any(match_file(p, file) for p in triggers.files):
        fields.add("file")
    if context and any(match_context(p, context) for p in triggers.contexts):
        fields.add("context")
    return fields


__all__ = [
    "IntentStrategy",
    "intent_strategy",
    "match_intent",
    "glob_to_regex",
    "match_file",
    "match_context",
    "trigger_match",
    "matched_fields",
]
