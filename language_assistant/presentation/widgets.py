"""
Interactive controls mounted into rendered results.

Widgets render to plain markup; the page script wires the behaviour
(playback, clipboard) through their ``data-*`` attributes.
"""

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag


@dataclass(frozen=True)
class AudioPlayerWidget:
    src: str

    def render(self, soup: BeautifulSoup) -> Tag:
        button = soup.new_tag(
            "button",
            attrs={
                "type": "button",
                "class": "audio-player",
                "aria-label": "Play pronunciation",
                "data-action": "play-audio",
            },
        )
        audio = soup.new_tag("audio", attrs={"preload": "none", "src": self.src})
        button.append(audio)
        return button


@dataclass(frozen=True)
class CopyButtonWidget:
    text: str
    label: str = "Copy example"

    def render(self, soup: BeautifulSoup) -> Tag:
        return soup.new_tag(
            "button",
            attrs={
                "type": "button",
                "class": "copy-button",
                "aria-label": self.label,
                "data-action": "copy",
                "data-copy-text": self.text,
            },
        )


Widget = AudioPlayerWidget | CopyButtonWidget
