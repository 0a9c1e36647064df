"""Choss: rules engine and move-search AI for a chess variant."""

__version__ = "0.1.0"
