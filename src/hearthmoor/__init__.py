"""Hearthmoor MUD - world content loading and in-memory world model."""

__version__ = "0.1.0"
