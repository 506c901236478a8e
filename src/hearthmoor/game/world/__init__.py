"""World management - areas, rooms, behaviors, and content loading."""

from .area import Area
from .behaviors import BehaviorContext, BehaviorRegistry, RoomHook
from .errors import (
    AreaDefinitionError,
    ContentParseError,
    DiscoveryError,
    ManifestMissingError,
    RoomValidationError,
    WorldLoadError,
)
from .events import EventEmitter
from .index import WorldIndex
from .loader import (
    WorldLoader,
    create_room_from_data,
    load_world,
    load_yaml_file,
    room_is_valid,
    validate_room_data,
)
from .localization import UNTRANSLATED, localize
from .room import Room

__all__ = [
    "Area",
    "Room",
    "WorldIndex",
    "WorldLoader",
    "load_world",
    "load_yaml_file",
    "validate_room_data",
    "room_is_valid",
    "create_room_from_data",
    "BehaviorRegistry",
    "BehaviorContext",
    "RoomHook",
    "EventEmitter",
    "localize",
    "UNTRANSLATED",
    "WorldLoadError",
    "DiscoveryError",
    "ManifestMissingError",
    "ContentParseError",
    "AreaDefinitionError",
    "RoomValidationError",
]
