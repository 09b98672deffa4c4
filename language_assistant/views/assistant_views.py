from language_assistant.features import GrammarService, TranslationService, WordMeaningService
from language_assistant.schemas import WordMeaningResult
from language_assistant.utils import normalize_input
from language_assistant.views.base import ViewController


class TranslateView(ViewController):
    name = "translate"

    def __init__(self, service: TranslationService | None = None, **kwargs):
        super().__init__(**kwargs)
        self.service = service or TranslationService()

    async def _perform(self, text: str) -> str:
        return await self.service.translate_and_check(text)

    def _render(self, payload: str) -> str:
        return self.presenter.present(payload)


class GrammarView(ViewController):
    name = "grammar"

    def __init__(self, service: GrammarService | None = None, **kwargs):
        super().__init__(**kwargs)
        self.service = service or GrammarService()

    async def _perform(self, text: str) -> str:
        return await self.service.correct_grammar(text)

    def _render(self, payload: str) -> str:
        return self.presenter.present(payload)


class WordMeaningView(ViewController):
    name = "word-meaning"

    def __init__(self, service: WordMeaningService | None = None, **kwargs):
        super().__init__(**kwargs)
        self.service = service or WordMeaningService()

    def _validate(self, text: str) -> str:
        return normalize_input(super()._validate(text))

    async def _perform(self, text: str) -> WordMeaningResult:
        return await self.service.get_word_meaning(text)

    def _render(self, payload: WordMeaningResult) -> str:
        return self.presenter.present(payload.text, uk_audio=payload.uk_audio, us_audio=payload.us_audio)

    def _payload_fields(self, payload: WordMeaningResult) -> dict:
        return {"result": payload.text, "uk_audio": payload.uk_audio, "us_audio": payload.us_audio}
