from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, List

from skillgate.modules.embeddings import EmbeddingBackend, cosine_similarity
from skillgate.modules.indexing import SkillIndexEntry
from skillgate.shared.errors import EmbeddingProviderError

from ..public.types import ScoredSkill


@dataclass(frozen=True)
class CorpusEntry:
    name: str
    description: str
    embedding: List[float]


def skill_text(name: str, description: str) -> str:
    """Text embedded for a skill: readable name followed by description."""
    return f"{name.replace('-', ' ')} {description}".strip()


class RelevanceScorer:
    """Ranks indexed skills against free-text queries by cosine similarity."""

    def __init__(self, backend: EmbeddingBackend):
        self.backend = backend
        self._sources: List[tuple[str, str]] = []
        self._corpus: List[CorpusEntry] = []
        self._indexed = False

    @property
    def is_indexed(self) -> bool:
        return self._indexed

    @property
    def corpus_names(self) -> List[str]:
        return [entry.name for entry in self._corpus]

    def index_skills(self, entries: Iterable[SkillIndexEntry]) -> None:
        """Replace the corpus with embeddings of ``entries``."""
        self._sources = [(entry.name, entry.description) for entry in entries]
        try:
            self._corpus = self._embed_corpus()
        except EmbeddingProviderError as exc:
            self.backend.degrade(str(exc))
            self._corpus = self._embed_corpus()
        self._indexed = True

    def _embed_corpus(self) -> List[CorpusEntry]:
        corpus: List[CorpusEntry] = []
        for name, description in self._sources:
            vector = self.backend.embed(f"skill:{name}", skill_text(name, description))
            if not vector:
                print(f"Skipping skill {name}: empty embedding", file=sys.stderr)
                continue
            corpus.append(CorpusEntry(name=name, description=description, embedding=vector))
        return corpus

    def _embed_query(self, query: str) -> List[float]:
        return self.backend.embed(f"query:{query}", query)

    def score_against_query(self, query: str) -> List[ScoredSkill]:
        """Similarity-descending ranking; ties keep corpus order."""
        if not self._corpus:
            return []
        try:
            query_vec = self._embed_query(query)
        except EmbeddingProviderError as exc:
            self.backend.degrade(str(exc))
            self._corpus = self._embed_corpus()
            query_vec = self._embed_query(query)

        scored = []
        for entry in self._corpus:
            if len(entry.embedding) != len(query_vec):
                print(
                    f"Skipping skill {entry.name}: embedding dimension mismatch",
                    file=sys.stderr,
                )
                continue
            scored.append(
                ScoredSkill(
                    name=entry.name,
                    score=cosine_similarity(query_vec, entry.embedding),
                    match_type="similarity",
                )
            )
        # list.sort is stable, so equal scores keep insertion order
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored


__all__ = ["RelevanceScorer", "CorpusEntry", "skill_text"]
