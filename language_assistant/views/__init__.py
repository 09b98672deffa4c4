"""
View controllers: per-task input text and request lifecycle state.
"""

from .assistant_views import GrammarView, TranslateView, WordMeaningView
from .base import RequestInFlight, ViewController
from .session import VIEW_NAMES, AssistantSession, SessionStore

__all__ = [
    "AssistantSession",
    "GrammarView",
    "RequestInFlight",
    "SessionStore",
    "TranslateView",
    "VIEW_NAMES",
    "ViewController",
    "WordMeaningView",
]
