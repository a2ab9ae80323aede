"""Editor-side collaborator protocols and the in-memory host."""

from recolor.host.base import (
    Clipboard,
    CursorProvider,
    Direct,
    HighlightBackend,
    HighlightDef,
    Inspection,
    Level,
    Link,
    Notifier,
    Prompt,
    SyntaxItem,
    ThemeAccessor,
    ThemeActivator,
    ThemeEvents,
    TreesitterCapture,
)
from recolor.host.memory import MemoryHost, Message, StaticTheme

__all__ = [
    "Clipboard",
    "CursorProvider",
    "Direct",
    "HighlightBackend",
    "HighlightDef",
    "Inspection",
    "Level",
    "Link",
    "Notifier",
    "Prompt",
    "SyntaxItem",
    "ThemeAccessor",
    "ThemeActivator",
    "ThemeEvents",
    "TreesitterCapture",
    "MemoryHost",
    "Message",
    "StaticTheme",
]
