"""
Tests for prompt construction.
"""

from language_assistant.prompts import (
    EXAMPLE_COPY_PLACEHOLDER,
    GRAMMAR_HEADINGS,
    PRONUNCIATION_COPY_PLACEHOLDER,
    UK_AUDIO_PLACEHOLDER,
    US_AUDIO_PLACEHOLDER,
    build_grammar_prompt,
    build_prompt,
    build_translate_prompt,
    build_word_meaning_prompt,
)
from language_assistant.schemas import AssistantRequest, TaskKind


def test_translate_prompt_embeds_text_verbatim():
    prompt = build_translate_prompt('Anh ấy nói "xin chào" {vui vẻ}')

    assert 'Vietnamese: "Anh ấy nói "xin chào" {vui vẻ}"' in prompt
    assert "three different translations" in prompt


def test_grammar_prompt_lists_headings_in_order():
    prompt = build_grammar_prompt("He don't know what to do.")

    positions = [prompt.index(f'titled "{heading}"') for heading in GRAMMAR_HEADINGS]
    assert positions == sorted(positions)
    assert prompt.rstrip().endswith('Original Sentence: "He don\'t know what to do."')


def test_word_meaning_prompt_requires_placeholders():
    prompt = build_word_meaning_prompt("benevolent")

    for marker in (
        UK_AUDIO_PLACEHOLDER,
        US_AUDIO_PLACEHOLDER,
        PRONUNCIATION_COPY_PLACEHOLDER,
        EXAMPLE_COPY_PLACEHOLDER,
    ):
        assert marker in prompt
    assert '<span class="phonetic-text">' in prompt
    assert '"Nghĩa của từ"' in prompt
    assert 'Word: "benevolent"' in prompt


def test_build_prompt_dispatches_on_task_kind():
    request = AssistantRequest(task_kind=TaskKind.CORRECT_GRAMMAR, input_text="I has a cat.")
    assert build_prompt(request) == build_grammar_prompt("I has a cat.")

    request = AssistantRequest(task_kind=TaskKind.DEFINE_WORD, input_text="serene")
    assert build_prompt(request) == build_word_meaning_prompt("serene")

    request = AssistantRequest(task_kind=TaskKind.TRANSLATE, input_text="Cảm ơn")
    assert build_prompt(request) == build_translate_prompt("Cảm ơn")
