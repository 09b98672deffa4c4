"""
Runtime configuration for the language assistant.

Values come from the environment (optionally a local .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# AI provider
AI_PROVIDER = os.getenv("AI_PROVIDER", "gemini").lower()
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GCP_PROJECT_ID = os.getenv("GCP_PROJECT_ID")
GCP_LOCATION = os.getenv("GCP_LOCATION", "us-central1")

# Models
MODEL_TEXT = os.getenv("MODEL_TEXT", "gemini-2.5-flash")
MODEL_TTS = os.getenv("MODEL_TTS", "gemini-2.5-flash-preview-tts")

# Prebuilt voices used to approximate UK / US pronunciation
VOICE_UK = os.getenv("VOICE_UK", "Puck")
VOICE_US = os.getenv("VOICE_US", "Zephyr")

# TTS output is raw 16-bit PCM
AUDIO_SAMPLE_RATE = int(os.getenv("AUDIO_SAMPLE_RATE", "24000"))
AUDIO_CHANNELS = int(os.getenv("AUDIO_CHANNELS", "1"))

_timeout = os.getenv("REQUEST_TIMEOUT_SECONDS")
REQUEST_TIMEOUT_SECONDS: float | None = float(_timeout) if _timeout else None

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if origin.strip()
]

# Least recently used sessions are dropped beyond this many
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))
