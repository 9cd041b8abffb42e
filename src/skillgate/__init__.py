"""SkillGate: skill retrieval, ranking and token-budgeted activation."""

__version__ = "0.1.0"
