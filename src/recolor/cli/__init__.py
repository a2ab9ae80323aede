"""Command line interface for recolor."""
