"""Key bindings: map key events to picker intents for each mode.

Normal modes (categories, cursor, edited):
    j/k, Down/Up    Move selection
    , / .           Hue -/+
    [ / ]           Brightness -/+
    { / }           Saturation -/+
    Tab / S-Tab     Next/previous channel
    #               Pick color (prompt)
    y / p           Copy / paste hex
    u               Undo tweaks of selected group
    U               Undo all tweaks (edited mode only)
    q / Esc         Close

Browse mode keeps letters free for the search, so commands move to Ctrl:
    C-j/C-n, C-k    Move selection
    C-y / C-p       Copy / paste
    C-u             Undo selected group
    C-c             Clear search
    BS              Delete last search character
    Esc             Close
    [A-Za-z0-9_@-]  Append to search
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from recolor.picker.picker import Picker
from recolor.picker.state import PickerMode


class Key(Enum):
    """Named keys the picker reacts to."""
    UP = auto()
    DOWN = auto()
    TAB = auto()
    SHIFT_TAB = auto()
    ESCAPE = auto()
    BACKSPACE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a named key, or a character with an optional Ctrl."""
    key: Optional[Key] = None
    char: Optional[str] = None
    ctrl: bool = False

    NAMED = {
        "up": Key.UP,
        "down": Key.DOWN,
        "tab": Key.TAB,
        "s-tab": Key.SHIFT_TAB,
        "esc": Key.ESCAPE,
        "bs": Key.BACKSPACE,
    }

    @classmethod
    def parse(cls, notation: str) -> KeyEvent:
        """
        Build an event from vim-style notation.

        Examples: "j", "<Tab>", "<S-Tab>", "<Esc>", "<BS>", "<C-j>".
        """
        if len(notation) > 2 and notation.startswith("<") and notation.endswith(">"):
            inner = notation[1:-1]
            named = cls.NAMED.get(inner.lower())
            if named is not None:
                return cls(key=named)
            if inner[:2].lower() == "c-" and len(inner) == 3:
                return cls(char=inner[2], ctrl=True)
            raise ValueError(f"Unknown key notation: {notation!r}")
        if len(notation) != 1:
            raise ValueError(f"Unknown key notation: {notation!r}")
        return cls(char=notation)


Action = Callable[[Picker], object]

SEARCH_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_@-"
)


def _adjusters() -> dict[str, Action]:
    return {
        ",": lambda p: p.adjust_hue(-p.config.hue_step),
        ".": lambda p: p.adjust_hue(p.config.hue_step),
        "[": lambda p: p.adjust_brightness(-p.config.brightness_step),
        "]": lambda p: p.adjust_brightness(p.config.brightness_step),
        "{": lambda p: p.adjust_saturation(-p.config.saturation_step),
        "}": lambda p: p.adjust_saturation(p.config.saturation_step),
        "#": lambda p: p.pick(),
        "<Tab>": lambda p: p.cycle_channel(),
        "<S-Tab>": lambda p: p.cycle_channel(reverse=True),
        "<Down>": lambda p: p.move(1),
        "<Up>": lambda p: p.move(-1),
        "<Esc>": lambda p: p.close(),
    }


def _normal_bindings(undo_all: bool) -> dict[KeyEvent, Action]:
    bindings = _adjusters()
    bindings.update({
        "j": lambda p: p.move(1),
        "k": lambda p: p.move(-1),
        "u": lambda p: p.undo_group(),
        "y": lambda p: p.copy(),
        "p": lambda p: p.paste(),
        "q": lambda p: p.close(),
    })
    if undo_all:
        bindings["U"] = lambda p: p.undo_all()
    return {KeyEvent.parse(k): action for k, action in bindings.items()}


def _browse_bindings() -> dict[KeyEvent, Action]:
    bindings = _adjusters()
    bindings.update({
        "<C-j>": lambda p: p.move(1),
        "<C-n>": lambda p: p.move(1),
        "<C-k>": lambda p: p.move(-1),
        "<C-p>": lambda p: p.paste(),
        "<C-u>": lambda p: p.undo_group(),
        "<C-y>": lambda p: p.copy(),
        "<C-c>": lambda p: p.search_clear(),
        "<BS>": lambda p: p.search_backspace(),
    })
    return {KeyEvent.parse(k): action for k, action in bindings.items()}


KEYMAPS: dict[PickerMode, dict[KeyEvent, Action]] = {
    PickerMode.CATEGORIES: _normal_bindings(undo_all=False),
    PickerMode.CURSOR: _normal_bindings(undo_all=False),
    PickerMode.EDITED: _normal_bindings(undo_all=True),
    PickerMode.BROWSE: _browse_bindings(),
}


def handle_key(picker: Picker, event: KeyEvent) -> bool:
    """Dispatch a key to the picker. Returns True if the key was consumed."""
    if picker.mode is None:
        return False

    action = KEYMAPS[picker.mode].get(event)
    if action is not None:
        action(picker)
        return True

    if (
        picker.mode is PickerMode.BROWSE
        and event.char is not None
        and not event.ctrl
        and event.char in SEARCH_CHARS
    ):
        picker.search_append(event.char)
        return True

    return False
