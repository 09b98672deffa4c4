import asyncio
from abc import ABC, abstractmethod
from typing import Any

from language_assistant.features.errors import AssistantError, ValidationSkipped
from language_assistant.logger import get_service_logger
from language_assistant.presentation import ResultPresenter
from language_assistant.schemas import RequestLifecycleState, RequestStatus, ViewSnapshot
from language_assistant.utils import normalize_input

log = get_service_logger("View")


class RequestInFlight(Exception):
    """A submit arrived while the view still has a pending request."""

    def __init__(self, view: str):
        self.view = view
        super().__init__(f"A request is already in progress for view '{view}'")


class ViewController(ABC):
    """
    Holds the input text and request lifecycle of one assistant view.

    Idle -> Pending -> Succeeded | Failed; the next submit re-enters Pending.
    Each submit or reset takes a new sequence number and a settlement is only
    applied if its number is still current.
    """

    name: str = "view"

    def __init__(self, presenter: ResultPresenter | None = None):
        self.input_text = ""
        self.state = RequestLifecycleState.idle()
        self.presenter = presenter or ResultPresenter()
        self.html: str | None = None
        self._sequence = 0

    @abstractmethod
    async def _perform(self, text: str) -> Any:
        """Run the task for validated input and return the success payload."""
        ...

    @abstractmethod
    def _render(self, payload: Any) -> str:
        ...

    def _validate(self, text: str) -> str:
        if not normalize_input(text):
            raise ValidationSkipped()
        return text

    @property
    def is_pending(self) -> bool:
        return self.state.is_pending

    async def submit(self, text: str | None = None) -> RequestLifecycleState:
        if self.state.is_pending:
            raise RequestInFlight(self.name)
        if text is not None:
            self.input_text = text

        try:
            task_input = self._validate(self.input_text)
        except ValidationSkipped:
            log.debug("submit", "Empty input ignored", view=self.name)
            return self.state

        self._sequence += 1
        token = self._sequence
        self.state = RequestLifecycleState.pending()
        self.html = self.presenter.present("")

        try:
            payload = await self._perform(task_input)
            outcome = RequestLifecycleState.succeeded(payload)
        except asyncio.CancelledError:
            if token == self._sequence:
                log.info("submit", "Request cancelled", view=self.name)
                self.state = RequestLifecycleState.idle()
            raise
        except AssistantError as e:
            outcome = RequestLifecycleState.failed(e.user_message)
        except Exception as e:
            log.exception("submit", "Unexpected failure", view=self.name, error=str(e))
            outcome = RequestLifecycleState.failed(AssistantError.default_message)

        if token != self._sequence:
            log.info("submit", "Discarding stale response", view=self.name, token=token)
            return self.state

        self.state = outcome
        if outcome.status == RequestStatus.SUCCEEDED:
            self.html = self._render(outcome.payload)
        log.info("submit", "Request settled", view=self.name, status=outcome.status.value)
        return outcome

    def reset(self):
        """Return to Idle; a request still in flight will be ignored when it settles."""
        self._sequence += 1
        self.input_text = ""
        self.state = RequestLifecycleState.idle()
        self.html = self.presenter.present("")

    def snapshot(self) -> ViewSnapshot:
        snapshot = ViewSnapshot(
            view=self.name,
            input_text=self.input_text,
            status=self.state.status,
            error=self.state.message,
        )
        if self.state.status == RequestStatus.SUCCEEDED:
            snapshot = snapshot.model_copy(update={"html": self.html, **self._payload_fields(self.state.payload)})
        return snapshot

    def _payload_fields(self, payload: Any) -> dict:
        return {"result": payload}
