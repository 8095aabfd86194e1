"""Model package for termai."""

from termai.models.ai_config import DEFAULT_API_BASE, AiConfig
from termai.models.generate import GenerateChunk, GenerateRequest

__all__ = [
    "AiConfig",
    "DEFAULT_API_BASE",
    "GenerateChunk",
    "GenerateRequest",
]
