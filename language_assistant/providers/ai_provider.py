import base64
from abc import ABC, abstractmethod
from typing import Any

from google import genai
from google.genai import types

from language_assistant import config
from language_assistant.logger import logger


class AIProviderError(Exception):
    """Base exception for AI Provider errors."""

    pass


class GenerationError(AIProviderError):
    """A single generation call failed. The provider cause is chained."""

    pass


class AIProviderInterface(ABC):
    """Abstract interface for AI providers."""

    @abstractmethod
    async def generate(self, prompt: str, model: str | None = None) -> str:
        """Generate text from a prompt."""
        ...

    @abstractmethod
    async def generate_speech(self, text: str, voice: str, model: str | None = None) -> str:
        """Synthesize speech for a short text; returns base64-encoded PCM audio."""
        ...


def _http_options() -> types.HttpOptions | None:
    if config.REQUEST_TIMEOUT_SECONDS is None:
        return None
    # The SDK expects milliseconds
    return types.HttpOptions(timeout=int(config.REQUEST_TIMEOUT_SECONDS * 1000))


def _extract_audio(response: Any) -> str | None:
    candidates = getattr(response, "candidates", None) or []
    if not candidates or candidates[0].content is None:
        return None
    parts = candidates[0].content.parts or []
    if not parts or parts[0].inline_data is None:
        return None
    data = parts[0].inline_data.data
    if not data:
        return None
    if isinstance(data, str):
        return data
    return base64.b64encode(data).decode("ascii")


class GenAIProvider(AIProviderInterface):
    """Shared implementation over the google-genai async client."""

    name = "genai"

    def __init__(self, client: genai.Client, model: str, tts_model: str):
        self.client = client
        self.model = model
        self.tts_model = tts_model

    async def generate(self, prompt: str, model: str | None = None) -> str:
        """Generate text response from prompt."""
        target_model = model or self.model
        try:
            logger.debug(
                f"{self.name} generate request",
                extra={"prompt_length": len(prompt), "model": target_model},
            )
            response = await self.client.aio.models.generate_content(
                model=target_model,
                contents=prompt,
            )
        except Exception as e:
            logger.exception(
                f"{self.name} generation failed",
                extra={"error": str(e), "model": target_model},
            )
            raise GenerationError(f"Generation failed: {e}") from e

        result = response.text or ""
        logger.debug(
            f"{self.name} generate response",
            extra={"response_length": len(result), "model": target_model},
        )
        return result

    async def generate_speech(self, text: str, voice: str, model: str | None = None) -> str:
        """Generate spoken audio for ``text`` with a prebuilt voice."""
        target_model = model or self.tts_model
        config_params = types.GenerateContentConfig(
            response_modalities=["AUDIO"],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice),
                )
            ),
        )
        try:
            logger.debug(
                f"{self.name} speech request",
                extra={"text_length": len(text), "voice": voice, "model": target_model},
            )
            response = await self.client.aio.models.generate_content(
                model=target_model,
                contents=[types.Content(parts=[types.Part(text=text)])],
                config=config_params,
            )
        except Exception as e:
            logger.exception(
                f"{self.name} speech generation failed",
                extra={"error": str(e), "voice": voice, "model": target_model},
            )
            raise GenerationError(f"Speech generation failed: {e}") from e

        audio = _extract_audio(response)
        if audio is None:
            logger.error(
                f"{self.name} speech response had no audio",
                extra={"voice": voice, "model": target_model},
            )
            raise GenerationError(f"No audio returned for voice {voice}")
        return audio


class GeminiProvider(GenAIProvider):
    """Gemini Developer API provider."""

    name = "gemini"

    def __init__(self):
        api_key = config.GEMINI_API_KEY
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable is required")
        client = genai.Client(api_key=api_key, vertexai=False, http_options=_http_options())
        super().__init__(client, config.MODEL_TEXT, config.MODEL_TTS)
        logger.info(f"GeminiProvider initialized with model: {self.model}, tts: {self.tts_model}")


class VertexAIProvider(GenAIProvider):
    """
    Vertex AI provider implementation using Google GenAI SDK.

    To use Vertex AI, set:
    - AI_PROVIDER=vertex
    - GCP_PROJECT_ID=your-project-id
    - GCP_LOCATION=us-central1
    """

    name = "vertex"

    def __init__(self):
        self.project_id = config.GCP_PROJECT_ID
        self.location = config.GCP_LOCATION

        if not self.project_id:
            logger.warning(
                "GCP_PROJECT_ID not set for VertexAIProvider. Relying on default credentials/config."
            )

        client = genai.Client(
            vertexai=True,
            project=self.project_id,
            location=self.location,
            http_options=_http_options(),
        )
        super().__init__(client, config.MODEL_TEXT, config.MODEL_TTS)
        logger.info(
            f"VertexAIProvider initialized: project={self.project_id}, location={self.location}, model={self.model}"
        )


_ai_provider_instance: AIProviderInterface | None = None


def get_ai_provider() -> AIProviderInterface:
    """
    Factory function to get the configured AI provider (singleton).

    Set AI_PROVIDER environment variable:
    - "gemini" (default): Use Gemini API directly
    - "vertex": Use Vertex AI (requires GCP setup)
    """
    global _ai_provider_instance

    if _ai_provider_instance is not None:
        return _ai_provider_instance

    if config.AI_PROVIDER == "vertex":
        _ai_provider_instance = VertexAIProvider()
    else:
        _ai_provider_instance = GeminiProvider()

    return _ai_provider_instance
