from .audio import AudioContext, AudioDecodeError
from .renderer import MountRegistry, ResultPresenter, render_markdown
from .widgets import AudioPlayerWidget, CopyButtonWidget

__all__ = [
    "AudioContext",
    "AudioDecodeError",
    "AudioPlayerWidget",
    "CopyButtonWidget",
    "MountRegistry",
    "ResultPresenter",
    "render_markdown",
]
