"""
Tests for the translation service.
"""

from unittest.mock import AsyncMock, patch

import pytest

from language_assistant.prompts import build_translate_prompt
from language_assistant.providers import GenerationError


@pytest.mark.asyncio
async def test_translate_and_check(mock_ai_provider):
    """Test sentence translation."""
    mock_ai_provider.generate = AsyncMock(return_value="\n### Formal\n**Have a nice day!**\n  ")

    with patch("language_assistant.features.translate.get_ai_provider", return_value=mock_ai_provider):
        from language_assistant.features.translate import TranslationService

        service = TranslationService()
        result = await service.translate_and_check("Chúc bạn một ngày tốt lành!")

        assert result == "### Formal\n**Have a nice day!**"
        prompt = mock_ai_provider.generate.call_args.args[0]
        assert prompt == build_translate_prompt("Chúc bạn một ngày tốt lành!")
        assert 'Vietnamese: "Chúc bạn một ngày tốt lành!"' in prompt


@pytest.mark.asyncio
async def test_translate_empty_input(mock_ai_provider):
    """Whitespace-only input returns nothing without calling the model."""
    with patch("language_assistant.features.translate.get_ai_provider", return_value=mock_ai_provider):
        from language_assistant.features.translate import TranslationService

        service = TranslationService()
        result = await service.translate_and_check("   ")

        assert result == ""
        mock_ai_provider.generate.assert_not_called()


@pytest.mark.asyncio
async def test_translate_failure(mock_ai_provider):
    """Provider failures become a user-facing TranslationError."""
    cause = GenerationError("500 INTERNAL")
    mock_ai_provider.generate = AsyncMock(side_effect=cause)

    with patch("language_assistant.features.translate.get_ai_provider", return_value=mock_ai_provider):
        from language_assistant.features.translate import TranslationError, TranslationService

        service = TranslationService()
        with pytest.raises(TranslationError) as exc_info:
            await service.translate_and_check("Xin chào")

        assert exc_info.value.user_message == (
            "Sorry, an error occurred during translation. Please try again."
        )
        assert "500" not in exc_info.value.user_message
        assert exc_info.value.__cause__ is cause
