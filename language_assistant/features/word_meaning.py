"""
Word meaning lookup: a Vietnamese explanation of an English word plus
UK / US pronunciation audio.

The definition and both audio clips are requested concurrently and merged
once all three calls have settled. The definition is mandatory; a missing
voice only removes that play button.
"""

from language_assistant import config
from language_assistant.features.errors import AssistantError, AudioUnavailable
from language_assistant.logger import get_service_logger
from language_assistant.prompts import build_prompt
from language_assistant.providers import GenerationError, get_ai_provider
from language_assistant.schemas import AssistantRequest, TaskKind, WordMeaningResult
from language_assistant.utils import Settlement, normalize_input, settle_all

log = get_service_logger("WordMeaning")


class DefinitionUnavailable(AssistantError):
    """The definition text could not be generated."""

    default_message = "Sorry, an error occurred while checking the word. Please try again."


class WordMeaningService:
    """Combines one text generation call and two speech calls per word."""

    def __init__(self, uk_voice: str | None = None, us_voice: str | None = None):
        self.ai_provider = get_ai_provider()
        self.uk_voice = uk_voice or config.VOICE_UK
        self.us_voice = us_voice or config.VOICE_US

    async def _definition(self, word: str) -> str:
        request = AssistantRequest(task_kind=TaskKind.DEFINE_WORD, input_text=word)
        return await self.ai_provider.generate(build_prompt(request))

    async def _pronunciation(self, word: str, voice: str) -> str:
        try:
            return await self.ai_provider.generate_speech(word, voice)
        except GenerationError as e:
            raise AudioUnavailable(voice, str(e)) from e

    def _audio_or_none(self, settlement: Settlement, word: str, accent: str) -> str | None:
        if settlement.ok:
            return settlement.value
        log.warning(
            "merge",
            f"Could not generate {accent} audio",
            word=word,
            error=str(settlement.error),
        )
        return None

    async def get_word_meaning(self, english_word: str) -> WordMeaningResult:
        word = normalize_input(english_word)
        if not word:
            return WordMeaningResult.empty()

        log.info("lookup", "Fetching definition and pronunciation", word=word)
        text_outcome, uk_outcome, us_outcome = await settle_all(
            self._definition(word),
            self._pronunciation(word, self.uk_voice),
            self._pronunciation(word, self.us_voice),
        )

        if not text_outcome.ok:
            log.error(
                "merge",
                "Error during word meaning text generation",
                word=word,
                error=str(text_outcome.error),
            )
            raise DefinitionUnavailable() from text_outcome.error

        result = WordMeaningResult(
            text=(text_outcome.value or "").strip(),
            uk_audio=self._audio_or_none(uk_outcome, word, "UK"),
            us_audio=self._audio_or_none(us_outcome, word, "US"),
        )
        log.info(
            "lookup",
            "Word meaning completed",
            word=word,
            has_uk_audio=result.uk_audio is not None,
            has_us_audio=result.us_audio is not None,
        )
        return result
