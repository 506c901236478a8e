"""Game world and systems for Hearthmoor MUD."""
