from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TaskKind(str, Enum):
    TRANSLATE = "translate"
    CORRECT_GRAMMAR = "correct_grammar"
    DEFINE_WORD = "define_word"


class AssistantRequest(BaseModel):
    """
    A single user submission. Ephemeral, never persisted.
    """

    task_kind: TaskKind
    input_text: str


class WordMeaningResult(BaseModel):
    """
    Merged outcome of a word lookup.

    Audio payloads are base64-encoded 16-bit PCM; ``None`` when that voice
    could not be generated.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Markdown explanation of the word, trimmed")
    uk_audio: str | None = Field(default=None, description="UK pronunciation audio (base64 PCM)")
    us_audio: str | None = Field(default=None, description="US pronunciation audio (base64 PCM)")

    @classmethod
    def empty(cls) -> "WordMeaningResult":
        return cls(text="")


class RequestStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RequestLifecycleState(BaseModel):
    """
    Lifecycle of the most recent request of a view.

    ``payload`` is only set when SUCCEEDED and ``message`` only when FAILED.
    """

    model_config = ConfigDict(frozen=True)

    status: RequestStatus = RequestStatus.IDLE
    payload: Any = None
    message: str | None = None

    @classmethod
    def idle(cls) -> "RequestLifecycleState":
        return cls()

    @classmethod
    def pending(cls) -> "RequestLifecycleState":
        return cls(status=RequestStatus.PENDING)

    @classmethod
    def succeeded(cls, payload: Any) -> "RequestLifecycleState":
        return cls(status=RequestStatus.SUCCEEDED, payload=payload)

    @classmethod
    def failed(cls, message: str) -> "RequestLifecycleState":
        return cls(status=RequestStatus.FAILED, message=message)

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING


class ViewSnapshot(BaseModel):
    """Serialisable state of one view, as returned by the HTTP API."""

    view: str
    input_text: str = ""
    status: RequestStatus = RequestStatus.IDLE
    result: str | None = Field(default=None, description="Markdown text of a succeeded request")
    uk_audio: str | None = None
    us_audio: str | None = None
    html: str | None = Field(default=None, description="Rendered result with mounted widgets")
    error: str | None = None
