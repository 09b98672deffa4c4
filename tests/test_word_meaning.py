"""
Tests for the word meaning orchestrator and its partial-failure policy.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from language_assistant.features import DefinitionUnavailable, WordMeaningService
from language_assistant.prompts import (
    UK_AUDIO_PLACEHOLDER,
    US_AUDIO_PLACEHOLDER,
    build_word_meaning_prompt,
)
from language_assistant.providers import GenerationError
from language_assistant.schemas import WordMeaningResult


@pytest.fixture
def service(mock_ai_provider):
    with patch("language_assistant.features.word_meaning.get_ai_provider", return_value=mock_ai_provider):
        yield WordMeaningService(uk_voice="Puck", us_voice="Zephyr"), mock_ai_provider


def _speech_by_voice(**outcomes):
    async def generate_speech(text, voice, model=None):
        outcome = outcomes[voice]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return AsyncMock(side_effect=generate_speech)


@pytest.mark.asyncio
@pytest.mark.parametrize("word", ["", "   ", "\n\t"])
async def test_empty_word_makes_no_calls(service, word):
    svc, provider = service

    result = await svc.get_word_meaning(word)

    assert result == WordMeaningResult.empty()
    provider.generate.assert_not_called()
    provider.generate_speech.assert_not_called()


@pytest.mark.asyncio
async def test_all_calls_succeed(service):
    svc, provider = service
    provider.generate = AsyncMock(return_value="\n  ### Nghĩa của từ\nNhân từ  \n")
    provider.generate_speech = _speech_by_voice(Puck="dWs=", Zephyr="dXM=")

    result = await svc.get_word_meaning("  benevolent ")

    assert result.text == "### Nghĩa của từ\nNhân từ"
    assert result.uk_audio == "dWs="
    assert result.us_audio == "dXM="
    # The trimmed word is what gets sent
    assert "Word: \"benevolent\"" in provider.generate.call_args.args[0]
    voices = sorted(call.args[1] for call in provider.generate_speech.call_args_list)
    assert voices == ["Puck", "Zephyr"]


@pytest.mark.asyncio
async def test_text_failure_dominates_audio_success(service):
    svc, provider = service
    cause = GenerationError("model overloaded")
    provider.generate = AsyncMock(side_effect=cause)
    provider.generate_speech = _speech_by_voice(Puck="dWs=", Zephyr="dXM=")

    with pytest.raises(DefinitionUnavailable) as exc_info:
        await svc.get_word_meaning("benevolent")

    assert exc_info.value.user_message == (
        "Sorry, an error occurred while checking the word. Please try again."
    )
    assert exc_info.value.__cause__ is cause
    # Audio calls were still issued and allowed to settle
    assert provider.generate_speech.await_count == 2


@pytest.mark.asyncio
async def test_single_audio_failure_degrades_gracefully(service):
    svc, provider = service
    provider.generate = AsyncMock(return_value="definition")
    provider.generate_speech = _speech_by_voice(Puck=GenerationError("tts down"), Zephyr="dXM=")

    result = await svc.get_word_meaning("benevolent")

    assert result.text == "definition"
    assert result.uk_audio is None
    assert result.us_audio == "dXM="


@pytest.mark.asyncio
async def test_both_audio_failures_still_return_definition(service):
    svc, provider = service
    provider.generate = AsyncMock(return_value="definition")
    provider.generate_speech = AsyncMock(side_effect=GenerationError("tts down"))

    result = await svc.get_word_meaning("benevolent")

    assert result == WordMeaningResult(text="definition", uk_audio=None, us_audio=None)


@pytest.mark.asyncio
async def test_audio_failure_is_logged_as_warning(service):
    svc, provider = service
    provider.generate = AsyncMock(return_value="definition")
    provider.generate_speech = _speech_by_voice(Puck="dWs=", Zephyr=GenerationError("tts down"))

    with patch("language_assistant.features.word_meaning.log") as mock_log:
        await svc.get_word_meaning("benevolent")

    mock_log.warning.assert_called_once()
    assert "US" in mock_log.warning.call_args.args[1]


@pytest.mark.asyncio
async def test_calls_are_issued_concurrently(service):
    svc, provider = service
    in_flight = 0
    peak = 0

    async def tracked(result):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return result

    async def generate(prompt, model=None):
        return await tracked("definition")

    async def generate_speech(text, voice, model=None):
        return await tracked("YQ==")

    provider.generate = AsyncMock(side_effect=generate)
    provider.generate_speech = AsyncMock(side_effect=generate_speech)

    await svc.get_word_meaning("benevolent")

    assert peak == 3


@pytest.mark.asyncio
async def test_benevolent_scenario_keeps_placeholders(service, word_meaning_markdown):
    svc, provider = service
    provider.generate = AsyncMock(return_value=word_meaning_markdown)
    provider.generate_speech = _speech_by_voice(Puck="dWs=", Zephyr="dXM=")

    result = await svc.get_word_meaning("benevolent")

    assert result.uk_audio is not None
    assert result.us_audio is not None
    assert UK_AUDIO_PLACEHOLDER in result.text
    assert US_AUDIO_PLACEHOLDER in result.text


def test_result_is_immutable():
    result = WordMeaningResult(text="x")
    with pytest.raises(Exception):
        result.text = "y"


@pytest.mark.asyncio
async def test_definition_uses_word_meaning_prompt(service):
    svc, provider = service
    provider.generate = AsyncMock(return_value="definition")

    await svc.get_word_meaning("  serene ")

    provider.generate.assert_awaited_once_with(build_word_meaning_prompt("serene"))
