"""Collect the highlight groups active at a document position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from recolor.host.base import Inspection
from recolor.registry import HighlightRegistry


@dataclass(frozen=True)
class CursorGroup:
    """A group found at the cursor and where it came from."""
    name: str
    channel: str
    source: str


def collect_cursor_groups(inspection: Inspection, registry: HighlightRegistry) -> list[CursorGroup]:
    """
    Flatten an inspection into de-duplicated groups.

    Order is treesitter captures, syntax items (followed by their link
    target), semantic tokens, then extmarks. Each name appears once, tagged
    with the first source that produced it.
    """
    seen: set[str] = set()
    result: list[CursorGroup] = []

    def add(name: Optional[str], source: str) -> None:
        if not name or name in seen:
            return
        seen.add(name)
        result.append(CursorGroup(name, registry.primary_channel(name), source))

    for capture in inspection.treesitter:
        hl_group = capture.hl_group or capture.capture
        add(hl_group, "treesitter")
        if capture.capture != hl_group:
            add(capture.capture, "treesitter")

    for item in inspection.syntax:
        add(item.hl_group, "syntax")
        if item.hl_group_link and item.hl_group_link != item.hl_group:
            add(item.hl_group_link, "syntax (link)")

    for name in inspection.semantic_tokens:
        add(name, "semantic")

    for name in inspection.extmarks:
        add(name, "extmark")

    return result
