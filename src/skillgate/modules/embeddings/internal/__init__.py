from .backend import EmbeddingBackend
from .cache import CACHE_VERSION, EmbeddingCache, content_hash
from .factory import create_backend, create_embedder
from .heuristic import HeuristicEmbedder, tokenize
from .providers import GeminiEmbedder, OpenAIEmbedder, create_provider_embedder
from .similarity import cosine_similarity

__all__ = [
    "EmbeddingBackend",
    "EmbeddingCache",
    "CACHE_VERSION",
    "content_hash",
    "HeuristicEmbedder",
    "tokenize",
    "OpenAIEmbedder",
    "GeminiEmbedder",
    "create_provider_embedder",
    "cosine_similarity",
    "create_backend",
    "create_embedder",
]
