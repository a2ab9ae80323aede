"""Protocols for the editor-side collaborators recolor depends on.

The core never talks to an editor directly. Each concern below is a small
protocol so a host integration (or the in-memory host used by the CLI and
tests) can supply it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional, Protocol, Union, runtime_checkable

from recolor.core.constants import CHANNELS


@dataclass(frozen=True)
class Direct:
    """A highlight group that owns its colors."""
    fg: Optional[str] = None
    bg: Optional[str] = None
    sp: Optional[str] = None

    def get(self, channel: str) -> Optional[str]:
        return getattr(self, channel)

    def with_color(self, channel: str, color: str) -> Direct:
        return replace(self, **{channel: color})

    def colors(self) -> dict[str, str]:
        """Set channels only, in fg/bg/sp order."""
        return {ch: getattr(self, ch) for ch in CHANNELS if getattr(self, ch)}


@dataclass(frozen=True)
class Link:
    """A highlight group that aliases another group."""
    target: str


HighlightDef = Union[Direct, Link]


class Level(Enum):
    """Severity of a user-visible message."""
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class TreesitterCapture:
    capture: str
    hl_group: Optional[str] = None


@dataclass(frozen=True)
class SyntaxItem:
    hl_group: str
    hl_group_link: Optional[str] = None


@dataclass
class Inspection:
    """Everything highlighting a single document position, by provenance."""
    treesitter: list[TreesitterCapture] = field(default_factory=list)
    syntax: list[SyntaxItem] = field(default_factory=list)
    semantic_tokens: list[str] = field(default_factory=list)
    extmarks: list[str] = field(default_factory=list)


@runtime_checkable
class ThemeAccessor(Protocol):
    def current_theme(self) -> str:
        """Name of the active theme."""
        ...


@runtime_checkable
class HighlightBackend(Protocol):
    """Live highlight state of the editor."""

    def get(self, name: str) -> Optional[HighlightDef]:
        """Definition of a group without following links, None if undefined."""
        ...

    def set(self, name: str, definition: HighlightDef) -> None:
        ...

    def names(self) -> list[str]:
        ...


@runtime_checkable
class CursorProvider(Protocol):
    def inspect(self) -> Inspection:
        """Highlights active at the cursor position."""
        ...


@runtime_checkable
class Clipboard(Protocol):
    def read(self) -> str:
        ...

    def write(self, text: str) -> None:
        ...


@runtime_checkable
class Prompt(Protocol):
    def ask(self, label: str, default: str) -> Optional[str]:
        """User-entered text, or None when cancelled."""
        ...


@runtime_checkable
class ThemeActivator(Protocol):
    def activate(self, theme: str) -> None:
        """Re-run theme setup, restoring its original colors."""
        ...


@runtime_checkable
class ThemeEvents(Protocol):
    def on_theme_activated(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` after every theme activation."""
        ...


@runtime_checkable
class Notifier(Protocol):
    def notify(self, message: str, level: Level = Level.INFO) -> None:
        ...
