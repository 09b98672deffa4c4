"""
English grammar correction with explanations and alternative rewrites.
"""

from language_assistant.features.errors import AssistantError
from language_assistant.logger import logger
from language_assistant.prompts import build_prompt
from language_assistant.providers import GenerationError, get_ai_provider
from language_assistant.schemas import AssistantRequest, TaskKind
from language_assistant.utils import normalize_input


class GrammarCorrectionError(AssistantError):
    """Grammar correction-specific exception."""

    default_message = "Sorry, an error occurred while correcting grammar. Please try again."


class GrammarService:
    """Grammar checking service using AI provider."""

    def __init__(self):
        self.ai_provider = get_ai_provider()

    async def correct_grammar(self, english_text: str) -> str:
        """
        Check an English sentence and explain every fix.

        The returned markdown carries the headings "Corrected Sentence",
        "Corrections & Explanations" and "Alternative Rewrites".
        """
        if not normalize_input(english_text):
            return ""

        request = AssistantRequest(task_kind=TaskKind.CORRECT_GRAMMAR, input_text=english_text)
        prompt = build_prompt(request)
        try:
            correction = await self.ai_provider.generate(prompt)
        except GenerationError as e:
            logger.error(
                "Error during grammar correction",
                extra={"text_length": len(english_text), "error": str(e)},
            )
            raise GrammarCorrectionError() from e

        correction = correction.strip()
        logger.info(
            "Grammar correction completed",
            extra={"text_length": len(english_text), "output_length": len(correction)},
        )
        return correction
