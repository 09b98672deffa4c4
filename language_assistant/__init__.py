"""AI language assistant: translation, grammar correction and word lookup powered by Gemini."""

__version__ = "1.0.0"
