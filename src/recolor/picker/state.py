"""Picker session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Protocol


class PickerMode(Enum):
    """What the picker is listing."""
    CATEGORIES = "categories"   # curated groups by category
    CURSOR = "cursor"           # groups found at the cursor
    BROWSE = "browse"           # every group, with search
    EDITED = "edited"           # tweaked groups of the current theme


class PickerItem(Protocol):
    """Anything the picker can list: a group name and its display channel."""

    @property
    def name(self) -> str: ...

    @property
    def channel(self) -> str: ...


@dataclass
class PickerState:
    """
    Everything a picker session owns.

    ``selected`` is 1-based. ``group_channels`` remembers the active channel
    per group for this session only; ``all_groups`` is the unfiltered browse
    snapshot that every search re-filters from.
    """
    mode: Optional[PickerMode] = None
    items: list[Any] = field(default_factory=list)
    selected: int = 1
    group_channels: dict[str, str] = field(default_factory=dict)
    search_query: str = ""
    all_groups: Optional[list[Any]] = None

    @property
    def is_open(self) -> bool:
        return self.mode is not None

    @property
    def total_count(self) -> int:
        """Size of the unfiltered list (browse) or of the current list."""
        if self.all_groups is not None:
            return len(self.all_groups)
        return len(self.items)

    @property
    def selected_item(self) -> Optional[Any]:
        if self.items and 1 <= self.selected <= len(self.items):
            return self.items[self.selected - 1]
        return None

    def reset(self) -> None:
        self.mode = None
        self.items = []
        self.selected = 1
        self.group_channels = {}
        self.search_query = ""
        self.all_groups = None
