"""Browse every highlight group with fuzzy filtering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

from rapidfuzz import fuzz

from recolor.host.base import Link
from recolor.registry import HighlightRegistry


@dataclass(frozen=True)
class BrowseEntry:
    """A group as listed in browse mode."""
    name: str
    channel: str
    is_link: bool = False
    link_target: Optional[str] = None


Named = TypeVar("Named", bound=BrowseEntry)


def get_all_groups(registry: HighlightRegistry) -> list[BrowseEntry]:
    """Every defined group, sorted case-insensitively by name."""
    entries = []
    for name in registry.group_names():
        definition = registry.get_definition(name)
        if isinstance(definition, Link):
            entries.append(BrowseEntry(name, "fg", is_link=True, link_target=definition.target))
        else:
            entries.append(BrowseEntry(name, registry.primary_channel(name)))
    entries.sort(key=lambda e: e.name.lower())
    return entries


def is_subsequence(query: str, text: str) -> bool:
    """True if every character of query appears in text, in order."""
    it = iter(text)
    return all(ch in it for ch in query)


def filter_groups(groups: Sequence[Named], query: str) -> list[Named]:
    """
    Fuzzy-filter groups by name.

    An empty query returns the groups unchanged. Otherwise only names that
    contain the query as a case-insensitive subsequence are kept, best match
    first (WRatio score, then shorter name, then original position). The
    result is NOT alphabetical.
    """
    if not query:
        return list(groups)

    needle = query.lower()
    scored = []
    for index, group in enumerate(groups):
        haystack = group.name.lower()
        if not is_subsequence(needle, haystack):
            continue
        score = fuzz.WRatio(needle, haystack)
        scored.append((-score, len(group.name), index, group))

    scored.sort(key=lambda row: row[:3])
    return [row[3] for row in scored]
