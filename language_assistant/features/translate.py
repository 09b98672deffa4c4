"""
Vietnamese to English translation with context variants.
"""

from language_assistant.features.errors import AssistantError
from language_assistant.logger import logger
from language_assistant.prompts import build_prompt
from language_assistant.providers import GenerationError, get_ai_provider
from language_assistant.schemas import AssistantRequest, TaskKind
from language_assistant.utils import normalize_input


class TranslationError(AssistantError):
    """Translation-specific exception."""

    default_message = "Sorry, an error occurred during translation. Please try again."


class TranslationService:
    """Translation service using AI provider."""

    def __init__(self):
        self.ai_provider = get_ai_provider()

    async def translate_and_check(self, vietnamese_text: str) -> str:
        """
        Translate a Vietnamese sentence into English in three contexts.

        Returns:
            Markdown with one ### heading per context, or "" for empty input.
        """
        if not normalize_input(vietnamese_text):
            return ""

        request = AssistantRequest(task_kind=TaskKind.TRANSLATE, input_text=vietnamese_text)
        prompt = build_prompt(request)
        try:
            logger.debug(f"Translating text of {len(vietnamese_text)} chars")
            translation = await self.ai_provider.generate(prompt)
        except GenerationError as e:
            logger.error(
                "Error during translation",
                extra={"text_length": len(vietnamese_text), "error": str(e)},
            )
            raise TranslationError() from e

        translation = translation.strip()
        logger.info(
            "Translation completed",
            extra={"text_length": len(vietnamese_text), "output_length": len(translation)},
        )
        return translation
