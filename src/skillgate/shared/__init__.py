"""Shared configuration, types, errors and helpers."""

from .config import Config, SKILLGATE_HOME
from .errors import (
    EmbeddingProviderError,
    IndexCorruptError,
    SkillgateError,
    SkillNotFoundError,
    SkillParseError,
)
from .types import FrozenModel

__all__ = [
    "Config",
    "SKILLGATE_HOME",
    "FrozenModel",
    "SkillgateError",
    "SkillNotFoundError",
    "SkillParseError",
    "IndexCorruptError",
    "EmbeddingProviderError",
]
