"""
Provider package for AI abstraction.
Enables switching between the Gemini Developer API and Vertex AI.
"""

from .ai_provider import (
    AIProviderError,
    AIProviderInterface,
    GeminiProvider,
    GenerationError,
    VertexAIProvider,
    get_ai_provider,
)

__all__ = [
    "AIProviderError",
    "AIProviderInterface",
    "GeminiProvider",
    "GenerationError",
    "VertexAIProvider",
    "get_ai_provider",
]
