from .assistant import (
    AssistantRequest,
    RequestLifecycleState,
    RequestStatus,
    TaskKind,
    ViewSnapshot,
    WordMeaningResult,
)

__all__ = [
    "AssistantRequest",
    "RequestLifecycleState",
    "RequestStatus",
    "TaskKind",
    "ViewSnapshot",
    "WordMeaningResult",
]
