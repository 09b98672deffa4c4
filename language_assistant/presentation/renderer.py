"""
Result rendering: markdown to HTML, then widgets mounted onto the
placeholder markers the prompts ask the model to emit.
"""

import copy
from dataclasses import dataclass

import markdown
from bs4 import BeautifulSoup, Tag

from language_assistant.logger import get_service_logger
from language_assistant.presentation.audio import AudioContext, AudioDecodeError
from language_assistant.presentation.widgets import AudioPlayerWidget, CopyButtonWidget, Widget

log = get_service_logger("Presenter")

MARKDOWN_EXTENSIONS = ["nl2br", "fenced_code", "tables", "sane_lists"]


def render_markdown(text: str) -> str:
    """Render markdown with hard line breaks; inline HTML is kept as-is."""
    if not text:
        return ""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


@dataclass
class MountedWidget:
    key: str
    widget: Widget
    placeholder: Tag
    node: Tag

    def unmount(self):
        self.node.extract()


class MountRegistry:
    """Tracks widgets mounted at named insertion points."""

    def __init__(self):
        self._mounted: dict[str, MountedWidget] = {}

    def mount(self, key: str, placeholder: Tag, widget: Widget, soup: BeautifulSoup) -> MountedWidget:
        if key in self._mounted:
            self.unmount(key)
        node = widget.render(soup)
        placeholder.append(node)
        handle = MountedWidget(key=key, widget=widget, placeholder=placeholder, node=node)
        self._mounted[key] = handle
        return handle

    def unmount(self, key: str):
        handle = self._mounted.pop(key, None)
        if handle is not None:
            handle.unmount()

    def unmount_all(self):
        for key in list(self._mounted):
            self.unmount(key)

    def get(self, key: str) -> MountedWidget | None:
        return self._mounted.get(key)

    def keys(self) -> list[str]:
        return list(self._mounted)

    def __contains__(self, key: str) -> bool:
        return key in self._mounted

    def __len__(self) -> int:
        return len(self._mounted)


def _is_empty(tag: Tag) -> bool:
    return not tag.contents


class ResultPresenter:
    """
    Renders one view's result. Every call to ``present`` tears down the
    widgets of the previous render before mounting new ones.
    """

    def __init__(self):
        self.registry = MountRegistry()
        self._audio_context: AudioContext | None = None

    @property
    def audio_context(self) -> AudioContext:
        if self._audio_context is None:
            self._audio_context = AudioContext()
        return self._audio_context

    def present(self, text: str, uk_audio: str | None = None, us_audio: str | None = None) -> str:
        self.registry.unmount_all()
        if not text:
            return ""

        soup = BeautifulSoup(render_markdown(text), "html.parser")
        self._mount_audio(soup, "uk", uk_audio)
        self._mount_audio(soup, "us", us_audio)
        self._mount_example_copy_buttons(soup)
        self._mount_pronunciation_copy_buttons(soup)
        return str(soup)

    def _mount_audio(self, soup: BeautifulSoup, accent: str, audio_b64: str | None):
        if not audio_b64:
            return
        key = f"{accent}-audio"
        placeholder = soup.select_one(f'[data-placeholder="{key}"]')
        if placeholder is None or not _is_empty(placeholder):
            return
        try:
            src = self.audio_context.to_data_uri(audio_b64)
        except AudioDecodeError as e:
            log.error("mount", "Failed to decode audio", accent=accent, error=str(e))
            return
        self.registry.mount(key, placeholder, AudioPlayerWidget(src=src), soup)

    def _mount_example_copy_buttons(self, soup: BeautifulSoup):
        selector = '[data-copy-placeholder="example"]'
        for index, placeholder in enumerate(soup.select(selector)):
            parent_li = placeholder.find_parent("li")
            if parent_li is None or not _is_empty(placeholder):
                continue
            li_clone = copy.copy(parent_li)
            for marker in li_clone.select(selector):
                marker.decompose()
            text_to_copy = collapse_whitespace(li_clone.get_text())
            if text_to_copy:
                self.registry.mount(
                    f"example-{index}", placeholder, CopyButtonWidget(text=text_to_copy), soup
                )

    def _mount_pronunciation_copy_buttons(self, soup: BeautifulSoup):
        placeholders = soup.select('[data-copy-placeholder="pronunciation"]')
        for index, placeholder in enumerate(placeholders):
            parent_li = placeholder.find_parent("li")
            if parent_li is None or not _is_empty(placeholder):
                continue
            phonetic = parent_li.select_one(".phonetic-text")
            text_to_copy = phonetic.get_text().strip() if phonetic else ""
            if text_to_copy:
                self.registry.mount(
                    f"pronunciation-{index}",
                    placeholder,
                    CopyButtonWidget(text=text_to_copy, label="Copy pronunciation"),
                    soup,
                )
