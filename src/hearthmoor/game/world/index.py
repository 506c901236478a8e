"""
World index module for Hearthmoor MUD.

Holds the areas and rooms produced by a load pass. The index is filled once
by the loader, sealed, and only read afterwards.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import structlog

from .area import Area
from .errors import WorldLoadError
from .room import Room

logger = structlog.get_logger(__name__)


class WorldIndex:
    """
    In-memory store of areas and rooms.

    Rooms are keyed by location, areas by their manifest key. Pass the index
    to the systems that need it rather than reaching for a global.
    """

    def __init__(self) -> None:
        """Initialize an empty, unsealed index."""
        self._areas: dict[str, Area] = {}
        self._rooms: dict[Any, Room] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Stop accepting registrations."""
        self._sealed = True

    def _check_open(self) -> None:
        if self._sealed:
            raise WorldLoadError("World index is sealed; content can only be loaded once")

    def register_area(self, area: Area) -> None:
        """
        Register an area under its id.

        Raises:
            WorldLoadError: If the index has been sealed
        """
        self._check_open()
        self._areas[area.id] = area

    def register_room(self, room: Room) -> None:
        """
        Register a room under its location.

        A room already registered at the same location is replaced.

        Raises:
            WorldLoadError: If the index has been sealed
        """
        self._check_open()
        location = room.get_location()
        previous = self._rooms.get(location)
        if previous is not None:
            logger.warning(
                "room_location_overwritten",
                location=location,
                previous_file=previous.filename,
                previous_index=previous.file_index,
                file=room.filename,
                index=room.file_index,
            )
        self._rooms[location] = room

    def get_room_at(self, location: Any) -> Room | None:
        """
        Get a room at a specific location.

        Args:
            location: The room location

        Returns:
            The Room instance, or None if not found
        """
        return self._rooms.get(location)

    def get_area(self, area_id: str) -> Area | None:
        """
        Get an area by its id.

        Args:
            area_id: The manifest key of the area

        Returns:
            The Area instance, or None if not found
        """
        return self._areas.get(area_id)

    def rooms_in_area(self, area_id: str) -> list[Room]:
        """Get all rooms belonging to an area, in load order."""
        return [room for room in self._rooms.values() if room.area == area_id]

    @property
    def areas(self) -> Mapping[str, Area]:
        return MappingProxyType(self._areas)

    @property
    def rooms(self) -> Mapping[Any, Room]:
        return MappingProxyType(self._rooms)

    @property
    def area_count(self) -> int:
        return len(self._areas)

    @property
    def room_count(self) -> int:
        return len(self._rooms)

    def __contains__(self, location: object) -> bool:
        return location in self._rooms
