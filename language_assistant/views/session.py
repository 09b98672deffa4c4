"""
In-memory registry of per-browser-session views. Nothing is persisted.
"""

from collections import OrderedDict

from language_assistant import config
from language_assistant.logger import logger
from language_assistant.views.assistant_views import GrammarView, TranslateView, WordMeaningView
from language_assistant.views.base import ViewController


class AssistantSession:
    """The three assistant views of one browser session."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.views: dict[str, ViewController] = {
            view.name: view for view in (TranslateView(), GrammarView(), WordMeaningView())
        }

    def view(self, name: str) -> ViewController:
        return self.views[name]


class SessionStore:
    """
    Bounded LRU map of session id to AssistantSession.

    Looking a session up marks it most recently used; once ``max_sessions``
    is exceeded the least recently used session is dropped.
    """

    def __init__(self, max_sessions: int | None = None):
        self._sessions: OrderedDict[str, AssistantSession] = OrderedDict()
        self.max_sessions = max_sessions if max_sessions is not None else config.MAX_SESSIONS

    def get(self, session_id: str) -> AssistantSession | None:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def get_or_create(self, session_id: str) -> AssistantSession:
        session = self.get(session_id)
        if session is None:
            session = AssistantSession(session_id)
            self._sessions[session_id] = session
            logger.debug("Session created", extra={"session_id": session_id})
            while len(self._sessions) > self.max_sessions:
                evicted_id, _ = self._sessions.popitem(last=False)
                logger.debug("Session evicted", extra={"session_id": evicted_id})
        return session

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


VIEW_NAMES = (TranslateView.name, GrammarView.name, WordMeaningView.name)
