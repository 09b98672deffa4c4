"""
Decoding of TTS payloads for in-browser playback.

The speech model returns raw little-endian 16-bit PCM (24 kHz, mono) as
base64. Browsers cannot play headerless PCM, so it is wrapped in a WAV
container and served as a data URI.
"""

import base64
import binascii
import io
import wave

from language_assistant import config
from language_assistant.logger import logger


class AudioDecodeError(Exception):
    """Audio payload could not be decoded."""

    pass


class AudioContext:
    """Long-lived decoding context; one per presenter, created on first use."""

    def __init__(
        self,
        sample_rate: int = config.AUDIO_SAMPLE_RATE,
        channels: int = config.AUDIO_CHANNELS,
        sample_width: int = 2,
    ):
        self.sample_rate = sample_rate
        self.channels = channels
        self.sample_width = sample_width
        logger.debug(
            "Audio context created",
            extra={"sample_rate": sample_rate, "channels": channels},
        )

    @property
    def frame_size(self) -> int:
        return self.sample_width * self.channels

    def decode(self, audio_b64: str) -> bytes:
        """Decode base64 PCM and return a complete WAV file."""
        try:
            pcm = base64.b64decode(audio_b64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise AudioDecodeError(f"Invalid base64 audio: {e}") from e

        if not pcm:
            raise AudioDecodeError("Empty audio payload")

        # Drop a trailing partial frame
        usable = len(pcm) - (len(pcm) % self.frame_size)
        if usable == 0:
            raise AudioDecodeError("Audio payload shorter than one frame")

        buffer = io.BytesIO()
        with wave.open(buffer, "wb") as wav:
            wav.setnchannels(self.channels)
            wav.setsampwidth(self.sample_width)
            wav.setframerate(self.sample_rate)
            wav.writeframes(pcm[:usable])
        return buffer.getvalue()

    def to_data_uri(self, audio_b64: str) -> str:
        wav_bytes = self.decode(audio_b64)
        return "data:audio/wav;base64," + base64.b64encode(wav_bytes).decode("ascii")

