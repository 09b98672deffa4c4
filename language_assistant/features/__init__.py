"""
Feature package containing the AI-powered assistant services.
"""

from .errors import AssistantError, AudioUnavailable, ValidationSkipped
from .grammar import GrammarCorrectionError, GrammarService
from .translate import TranslationError, TranslationService
from .word_meaning import DefinitionUnavailable, WordMeaningService

__all__ = [
    "AssistantError",
    "AudioUnavailable",
    "DefinitionUnavailable",
    "GrammarCorrectionError",
    "GrammarService",
    "TranslationError",
    "TranslationService",
    "ValidationSkipped",
    "WordMeaningService",
]
