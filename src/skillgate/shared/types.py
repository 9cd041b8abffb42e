"""Shared base types."""

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Immutable result/record model."""

    model_config = ConfigDict(frozen=True)


__all__ = ["FrozenModel"]
