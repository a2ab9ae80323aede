"""Curated highlight groups organized into display categories."""

from __future__ import annotations

from dataclasses import dataclass

from recolor.core.constants import BG, FG


@dataclass(frozen=True)
class CategoryEntry:
    """A curated group and the channel shown first for it."""
    name: str
    channel: str


@dataclass(frozen=True)
class Category:
    """A named, ordered list of curated groups."""
    name: str
    groups: tuple[CategoryEntry, ...]


@dataclass(frozen=True)
class FlatEntry:
    """A category entry flattened for list navigation (indices are 1-based)."""
    category_index: int
    group_index: int
    category_name: str
    entry: CategoryEntry

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def channel(self) -> str:
        return self.entry.channel


def _entries(*pairs: tuple[str, str]) -> tuple[CategoryEntry, ...]:
    return tuple(CategoryEntry(name, channel) for name, channel in pairs)


CATEGORIES: tuple[Category, ...] = (
    Category("Base UI", _entries(
        ("Normal", BG),
        ("NormalFloat", BG),
        ("CursorLine", BG),
        ("CursorColumn", BG),
        ("Visual", BG),
        ("Search", BG),
        ("IncSearch", BG),
        ("MatchParen", BG),
    )),
    Category("Gutter", _entries(
        ("LineNr", FG),
        ("CursorLineNr", FG),
        ("SignColumn", BG),
        ("Folded", BG),
    )),
    Category("Syntax", _entries(
        ("Comment", FG),
        ("String", FG),
        ("Function", FG),
        ("Keyword", FG),
        ("Type", FG),
        ("Constant", FG),
        ("Identifier", FG),
        ("Operator", FG),
    )),
    Category("Treesitter", _entries(
        ("@comment", FG),
        ("@string", FG),
        ("@function", FG),
        ("@keyword", FG),
        ("@type", FG),
        ("@constant", FG),
        ("@variable", FG),
    )),
    Category("Diagnostics", _entries(
        ("DiagnosticError", FG),
        ("DiagnosticWarn", FG),
        ("DiagnosticInfo", FG),
        ("DiagnosticHint", FG),
    )),
    Category("UI Feedback", _entries(
        ("Pmenu", BG),
        ("PmenuSel", BG),
        ("FloatBorder", FG),
        ("ErrorMsg", FG),
        ("WarningMsg", FG),
    )),
)


def build_flat_list(categories: tuple[Category, ...] = CATEGORIES) -> list[FlatEntry]:
    """Flatten categories into a single navigation list, preserving order."""
    flat: list[FlatEntry] = []
    for cat_idx, category in enumerate(categories, start=1):
        for grp_idx, entry in enumerate(category.groups, start=1):
            flat.append(FlatEntry(cat_idx, grp_idx, category.name, entry))
    return flat
