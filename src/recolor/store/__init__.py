"""Persistent per-theme tweak storage."""

from recolor.store.tree import TweakTree
from recolor.store.tweaks import TweakedGroup, TweakStore

__all__ = ["TweakTree", "TweakStore", "TweakedGroup"]
