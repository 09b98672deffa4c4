class AssistantError(Exception):
    """
    Base class for failures surfaced to the user.

    ``user_message`` is safe to display; provider details stay in the chained cause.
    """

    default_message = "An unexpected error occurred."

    def __init__(self, user_message: str | None = None):
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


class ValidationSkipped(Exception):
    """Input was empty after trimming; the request is silently dropped."""

    pass


class AudioUnavailable(Exception):
    """One pronunciation voice could not be generated. Diagnostic only."""

    def __init__(self, voice: str, reason: str = ""):
        self.voice = voice
        self.reason = reason
        super().__init__(f"Audio unavailable for voice {voice}: {reason}" if reason else voice)
