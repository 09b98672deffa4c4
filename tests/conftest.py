"""
Pytest configuration and fixtures for the language assistant tests.
"""

import base64
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment before importing app modules
os.environ["GEMINI_API_KEY"] = "test-api-key"
os.environ["AI_PROVIDER"] = "gemini"


@pytest.fixture
def mock_ai_provider():
    """Create a mock AI provider for testing."""
    provider = MagicMock()
    provider.generate = AsyncMock(return_value="Mock AI response")
    provider.generate_speech = AsyncMock(return_value=base64.b64encode(b"\x00\x01" * 240).decode())
    return provider


@pytest.fixture
def installed_provider(mock_ai_provider, monkeypatch):
    """Install the mock as the process-wide provider singleton."""
    from language_assistant.providers import ai_provider

    monkeypatch.setattr(ai_provider, "_ai_provider_instance", mock_ai_provider)
    return mock_ai_provider


@pytest.fixture
def pcm_audio():
    """Base64 16-bit PCM, 10 ms at 24 kHz mono."""
    return base64.b64encode(b"\x10\x00\xf0\xff" * 120).decode()


@pytest.fixture
def word_meaning_markdown():
    """Definition text shaped like the word meaning prompt requests."""
    return """### Nghĩa của từ
Nhân từ, rộng lượng.

### Word Type
Adjective

### Pronunciation
* UK: <span class="phonetic-text">/bəˈnevələnt/</span> <span data-placeholder="uk-audio"></span><span data-copy-placeholder="pronunciation"></span>
* US: <span class="phonetic-text">/bəˈnevələnt/</span> <span data-placeholder="us-audio"></span><span data-copy-placeholder="pronunciation"></span>

### Word Forms
* Noun: benevolence

### Example Sentences
* She is a benevolent leader.
  *Cô ấy là một nhà lãnh đạo nhân từ.* <span data-copy-placeholder="example"></span>
* He made a benevolent donation.
  *Anh ấy đã quyên góp một cách hào phóng.* <span data-copy-placeholder="example"></span>
"""
