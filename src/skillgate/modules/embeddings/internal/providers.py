"""Model-backed embedders (OpenAI, Gemini)."""

from __future__ import annotations

from typing import List

from skillgate.shared.config import Config
from skillgate.shared.errors import EmbeddingProviderError


class OpenAIEmbedder:
    def __init__(self, api_key: str, model: str):
        self.api_key = api_key
        self.model = model
        self.name = f"openai:{model}"
        self._client = None

    def _get_client(self):
        if self._client is None:
            from openai import OpenAI  # lazy import

            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def embed(self, text: str) -> List[float]:
        text = text.replace("\n", " ")
        try:
            resp = self._get_client().embeddings.create(input=[text], model=self.model)
            return list(resp.data[0].embedding)
        except Exception as exc:
            raise EmbeddingProviderError("openai", exc) from exc


class GeminiEmbedder:
    def __init__(self, api_key: str, model: str):
        self.api_key = api_key
        self.model = model
        self.name = f"gemini:{model}"
        self._client = None

    def _get_client(self):
        if self._client is None:
            from google import genai  # lazy import

            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def embed(self, text: str) -> List[float]:
        text = text.replace("\n", " ")
        try:
            result = self._get_client().models.embed_content(
                model=self.model, contents=text
            )
        except Exception as exc:
            raise EmbeddingProviderError("gemini", exc) from exc
        if not result.embeddings:
            raise EmbeddingProviderError(
                "gemini", ValueError("Gemini embedding response missing embeddings")
            )
        return list(result.embeddings[0].values)


def create_provider_embedder(config: Config):
    """Model-backed embedder for the configured provider; None for 'none'."""
    provider = config.embedding_provider
    if provider == "none":
        return None
    if provider == "openai":
        return OpenAIEmbedder(config.openai_api_key, config.openai_embedding_model)
    if provider == "gemini":
        return GeminiEmbedder(config.gemini_api_key, config.gemini_embedding_model)
    raise ValueError(f"Unsupported embedding_provider: {provider}")


__all__ = ["OpenAIEmbedder", "GeminiEmbedder", "create_provider_embedder"]
