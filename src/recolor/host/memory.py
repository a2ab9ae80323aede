"""In-memory host implementing every collaborator protocol.

Used by the command line (where there is no running editor) and by tests.
Themes are plain mappings of group name to definition; activating one
replaces the live highlight state with a fresh copy and fires the
theme-activated listeners, the same way an editor's ColorScheme event would.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Optional

from recolor.core.constants import DEFAULT_THEME
from recolor.host.base import HighlightDef, Inspection, Level


@dataclass
class StaticTheme:
    """Theme accessor that always reports the same name."""
    name: str = DEFAULT_THEME

    def current_theme(self) -> str:
        return self.name


@dataclass
class Message:
    text: str
    level: Level


class MemoryHost:
    """
    A fake editor holding themes, live highlights, a clipboard and a prompt.

    Prompt answers are queued with ``queue_answer``; an empty queue answers
    None (cancelled).
    """

    def __init__(
        self,
        themes: Optional[Mapping[str, Mapping[str, HighlightDef]]] = None,
        theme: Optional[str] = None,
    ) -> None:
        self.themes: dict[str, dict[str, HighlightDef]] = {
            name: dict(groups) for name, groups in (themes or {}).items()
        }
        self._theme = theme or next(iter(self.themes), DEFAULT_THEME)
        self.highlights: dict[str, HighlightDef] = dict(self.themes.get(self._theme, {}))
        self.clipboard = ""
        self.messages: list[Message] = []
        self.prompts: list[tuple[str, str]] = []
        self.inspection = Inspection()
        self.activations: list[str] = []
        self._answers: deque[Optional[str]] = deque()
        self._listeners: list[Callable[[], None]] = []

    # ThemeAccessor

    def current_theme(self) -> str:
        return self._theme

    # ThemeActivator

    def activate(self, theme: str) -> None:
        self._theme = theme
        self.highlights = dict(self.themes.get(theme, {}))
        self.activations.append(theme)
        for listener in list(self._listeners):
            listener()

    def on_theme_activated(self, callback: Callable[[], None]) -> None:
        """Register a callback fired after every theme activation."""
        self._listeners.append(callback)

    # HighlightBackend

    def get(self, name: str) -> Optional[HighlightDef]:
        return self.highlights.get(name)

    def set(self, name: str, definition: HighlightDef) -> None:
        self.highlights[name] = definition

    def names(self) -> list[str]:
        return list(self.highlights)

    # Clipboard

    def read(self) -> str:
        return self.clipboard

    def write(self, text: str) -> None:
        self.clipboard = text

    # Prompt

    def queue_answer(self, *answers: Optional[str]) -> None:
        self._answers.extend(answers)

    def ask(self, label: str, default: str) -> Optional[str]:
        self.prompts.append((label, default))
        if self._answers:
            return self._answers.popleft()
        return None

    # CursorProvider

    def inspect(self) -> Inspection:
        return self.inspection

    # Notifier

    def notify(self, message: str, level: Level = Level.INFO) -> None:
        self.messages.append(Message(message, level))

    def messages_at(self, level: Level) -> list[str]:
        return [m.text for m in self.messages if m.level == level]

    @property
    def last_message(self) -> Optional[Message]:
        return self.messages[-1] if self.messages else None

    def define(self, groups: Iterable[tuple[str, HighlightDef]]) -> None:
        """Set several live highlight definitions at once."""
        for name, definition in groups:
            self.highlights[name] = definition
