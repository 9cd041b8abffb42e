from .conflicts import ConflictResolver
from .scorer import CorpusEntry, RelevanceScorer, skill_text
from .session import SkillSession
from .token_counter import CHARS_PER_TOKEN, TokenCounter, heuristic_token_count

__all__ = [
    "ConflictResolver",
    "CorpusEntry",
    "RelevanceScorer",
    "skill_text",
    "SkillSession",
    "TokenCounter",
    "heuristic_token_count",
    "CHARS_PER_TOKEN",
]
