"""
Assistant Router
Handles translation, grammar correction and word meaning requests.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from language_assistant.logger import get_service_logger
from language_assistant.schemas import RequestStatus, ViewSnapshot
from language_assistant.views import VIEW_NAMES, RequestInFlight, SessionStore
from language_assistant.views.base import ViewController

log = get_service_logger("Assistant")

router = APIRouter(tags=["Assistant"])

sessions = SessionStore()


class SubmitRequest(BaseModel):
    session_id: str
    text: str = ""


def _check_view_name(view: str):
    if view not in VIEW_NAMES:
        raise HTTPException(status_code=404, detail=f"Unknown view '{view}'")


def _get_view(session_id: str, view: str) -> ViewController:
    _check_view_name(view)
    return sessions.get_or_create(session_id).view(view)


def _existing_snapshot(session_id: str, view: str) -> ViewSnapshot:
    """Snapshot of a view, or an idle one for a session that was never used."""
    _check_view_name(view)
    session = sessions.get(session_id)
    if session is None:
        return ViewSnapshot(view=view, status=RequestStatus.IDLE)
    return session.view(view).snapshot()


async def _submit(view_name: str, request: SubmitRequest) -> ViewSnapshot:
    view = _get_view(request.session_id, view_name)
    try:
        await view.submit(request.text)
    except RequestInFlight as e:
        log.warning("submit", "Rejected concurrent submit", view=view_name, session_id=request.session_id)
        raise HTTPException(status_code=409, detail=str(e)) from e
    return view.snapshot()


@router.post("/translate", response_model=ViewSnapshot)
async def translate(request: SubmitRequest):
    return await _submit("translate", request)


@router.post("/grammar", response_model=ViewSnapshot)
async def correct_grammar(request: SubmitRequest):
    return await _submit("grammar", request)


@router.post("/word-meaning", response_model=ViewSnapshot)
async def word_meaning(request: SubmitRequest):
    return await _submit("word-meaning", request)


@router.get("/views/{session_id}/{view}", response_model=ViewSnapshot)
async def get_view(session_id: str, view: str):
    return _existing_snapshot(session_id, view)


@router.post("/views/{session_id}/{view}/reset", response_model=ViewSnapshot)
async def reset_view(session_id: str, view: str):
    _check_view_name(view)
    session = sessions.get(session_id)
    if session is not None:
        session.view(view).reset()
    return _existing_snapshot(session_id, view)
