"""Interactive highlight-group picker."""

from recolor.picker.keymap import Key, KeyEvent, handle_key
from recolor.picker.picker import Picker
from recolor.picker.state import PickerItem, PickerMode, PickerState
from recolor.picker.view import PickerView

__all__ = [
    "Key",
    "KeyEvent",
    "handle_key",
    "Picker",
    "PickerItem",
    "PickerMode",
    "PickerState",
    "PickerView",
]
