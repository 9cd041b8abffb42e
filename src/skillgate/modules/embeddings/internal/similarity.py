import math
from typing import Sequence


def cosine_similarity(u: Sequence[float], v: Sequence[float]) -> float:
    """Dot product over norms; 0.0 when either vector has zero magnitude."""
    if len(u) != len(v):
        raise ValueError(f"Vector dimension mismatch: {len(u)} != {len(v)}")
    if not u:
        return 0.0

    dot = math.fsum(a * b for a, b in zip(u, v))
    norm_u = math.sqrt(math.fsum(a * a for a in u))
    norm_v = math.sqrt(math.fsum(b * b for b in v))
    if norm_u == 0.0 or norm_v == 0.0:
        return 0.0
    # Clamp rounding drift so identical vectors give exactly 1.0
    return max(-1.0, min(1.0, dot / (norm_u * norm_v)))


__all__ = ["cosine_similarity"]
