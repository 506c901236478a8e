"""
Room module for Hearthmoor MUD.

Defines the Room class representing a location in the game world.
"""

import copy
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .events import EventEmitter, Listener
from .localization import localize

REFERENCE_LOCALE = "en"


class Room(BaseModel):
    """
    Represents a room (location) in the game world.

    Attributes:
        location: Globally unique room identifier (e.g., 1001)
        title: Display title, a bare string or a locale -> string mapping
        description: Full description, a bare string or a locale mapping
        exits: Ordered exit records (e.g., {"direction": "north", "location": 1002})
        area: Identifier of the area this room belongs to
        filename: Source file the room was loaded from
        file_index: Record key of the room inside its source file

    Occupancy (items and npcs) holds identifiers only; the instances are
    owned elsewhere.
    """

    model_config = ConfigDict(extra="allow")

    location: Any = Field(..., description="Unique room location")
    title: Any = Field(..., description="Room title, localizable")
    description: Any = Field(..., description="Room description, localizable")
    exits: Any = Field(default_factory=list, description="Exit records in display order")
    area: str | None = Field(default=None, description="Owning area identifier")
    filename: str = Field(default="", description="Source file, for diagnostics")
    file_index: Any = Field(default=None, description="Record key in the source file")

    _items: tuple[str, ...] = PrivateAttr(default=())
    _npcs: tuple[str, ...] = PrivateAttr(default=())
    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)
    _events: EventEmitter = PrivateAttr(default_factory=EventEmitter)

    def get_location(self) -> Any:
        return self.location

    def get_area(self) -> str | None:
        return self.area

    def _exit_records(self) -> list[Mapping[str, Any]]:
        """
        Get the stored exit records, checking their shape.

        Raises:
            TypeError: If exits is not a list of mappings
        """
        if self.exits is None:
            return []
        if not isinstance(self.exits, list) or not all(
            isinstance(record, Mapping) for record in self.exits
        ):
            raise TypeError(
                f"Exits of room '{self.location}' must be a list of mappings, "
                f"got {type(self.exits).__name__}"
            )
        return self.exits

    def get_exits(self) -> list[dict[str, Any]]:
        """Get copies of the exit records so callers cannot edit the room."""
        return [dict(record) for record in self._exit_records()]

    def get_items(self) -> tuple[str, ...]:
        return self._items

    def get_npcs(self) -> tuple[str, ...]:
        return self._npcs

    def get_title(self, locale: str) -> str:
        """Get the title, localized if possible."""
        return localize(self.title, locale)

    def get_description(self, locale: str) -> str:
        """Get the description, localized if possible."""
        return localize(self.description, locale)

    def get_leave_message(self, exit: dict[str, Any], locale: str) -> str | None:
        """
        Get the leave message for an exit, localized if possible.

        Args:
            exit: One of this room's exit records
            locale: The locale code to resolve

        Returns:
            The localized message, or None if the exit has no leave message
        """
        message = exit.get("leave_message")
        if message is None:
            return None
        return localize(message, locale)

    def get_exit(self, direction: str) -> dict[str, Any] | None:
        """
        Get the exit record for a direction.

        Args:
            direction: The direction to check (e.g., "north")

        Returns:
            A copy of the exit record, or None if there is no such exit
        """
        wanted = direction.lower()
        for record in self._exit_records():
            if str(record.get("direction", "")).lower() == wanted:
                return dict(record)
        return None

    def get_available_exits(self) -> list[str]:
        """Get the exit directions in the order they were defined."""
        return [
            str(record["direction"]) for record in self._exit_records() if "direction" in record
        ]

    # Occupancy. Writers swap in a new tuple under the room lock, so readers
    # always see a complete snapshot without taking the lock.

    def add_item(self, uid: str) -> None:
        """Add an item to the room; adding a present item does nothing."""
        with self._lock:
            if uid not in self._items:
                self._items = (*self._items, uid)

    def remove_item(self, uid: str) -> None:
        """Remove an item from the room; absent items are ignored."""
        with self._lock:
            self._items = tuple(i for i in self._items if i != uid)

    def has_item(self, uid: str) -> bool:
        return uid in self._items

    def add_npc(self, uid: str) -> None:
        """Add an npc to the room; adding a present npc does nothing."""
        with self._lock:
            if uid not in self._npcs:
                self._npcs = (*self._npcs, uid)

    def remove_npc(self, uid: str) -> None:
        """Remove an npc from the room; absent npcs are ignored."""
        with self._lock:
            self._npcs = tuple(i for i in self._npcs if i != uid)

    def has_npc(self, uid: str) -> bool:
        return uid in self._npcs

    @property
    def events(self) -> EventEmitter:
        """The room's event emitter, used by attached behaviors."""
        return self._events

    def on(self, event: str, listener: Listener) -> None:
        self._events.on(event, listener)

    def emit(self, event: str, *args: Any, **kwargs: Any) -> bool:
        return self._events.emit(event, *args, **kwargs)

    def flatten(self, locale: str = REFERENCE_LOCALE) -> dict[str, Any]:
        """
        Flatten into a simple structure with title and description resolved.

        Args:
            locale: Locale used to resolve the localizable fields

        Returns:
            Dictionary with title, description, exits, location and area
        """
        return {
            "title": self.get_title(locale),
            "description": self.get_description(locale),
            "exits": self.get_exits(),
            "location": self.location,
            "area": self.area,
        }

    def stringify(self) -> dict[str, Any]:
        """Get the raw room structure with unresolved title and description."""
        return {
            "title": self.title,
            "description": self.description,
            "exits": copy.deepcopy(self.exits),
            "location": self.location,
            "area": self.area,
        }

    def format_description(self, locale: str = REFERENCE_LOCALE) -> str:
        """
        Format the full room description for display to players.

        Returns:
            Formatted string with room title, description, and exits
        """
        title = self.get_title(locale)
        lines = [
            f"\n{title}",
            "-" * len(title),
            self.get_description(locale).strip(),
        ]

        directions = self.get_available_exits()
        if directions:
            lines.append(f"\n[Exits: {', '.join(directions)}]")
        else:
            lines.append("\n[Exits: none]")

        return "\n".join(lines)
