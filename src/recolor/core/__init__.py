"""Core color types and data: engine, constants, curated categories."""

from recolor.core.categories import CATEGORIES, Category, CategoryEntry, FlatEntry, build_flat_list
from recolor.core.constants import BG, CHANNELS, FG, SP

__all__ = [
    "CATEGORIES",
    "Category",
    "CategoryEntry",
    "FlatEntry",
    "build_flat_list",
    "BG",
    "CHANNELS",
    "FG",
    "SP",
]
