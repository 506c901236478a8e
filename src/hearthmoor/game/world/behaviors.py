"""
Room behavior registry for Hearthmoor MUD.

Behaviors are registered by name at startup. When a room is built, the
registry looks up the names listed under the room's ``behaviors`` key and
subscribes the listeners each factory returns on the room's event emitter.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from .events import Listener

if TYPE_CHECKING:
    from .room import Room

logger = structlog.get_logger(__name__)


@dataclass
class BehaviorContext:
    """
    Context handed to behavior factories.

    Contains the room's source record and the directories a behavior may
    read localized strings or scripts from.
    """

    config: dict[str, Any]
    l10n_dir: Path
    scripts_dir: Path
    area: str | None = None
    options: dict[str, Any] = field(default_factory=dict)


BehaviorFactory = Callable[["Room", BehaviorContext], Mapping[str, Listener]]

# (room config, localization dir, behavior script dir, constructed room)
RoomHook = Callable[[dict[str, Any], Path, Path, "Room"], None]


def _behavior_options(config: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Normalize the ``behaviors`` key to a name -> options mapping."""
    declared = config.get("behaviors")
    if not declared:
        return {}

    if isinstance(declared, str):
        return {declared: {}}

    if isinstance(declared, Mapping):
        return {
            str(name): dict(options) if isinstance(options, Mapping) else {}
            for name, options in declared.items()
        }

    if isinstance(declared, (list, tuple, set)):
        return {str(name): {} for name in declared}

    logger.warning(
        "behaviors_declaration_invalid",
        value=repr(declared),
        location=config.get("location"),
    )
    return {}


class BehaviorRegistry:
    """
    Registry of room behavior factories.

    Instances are callable with the room hook signature, so a registry can
    be handed straight to the world loader.
    """

    def __init__(self) -> None:
        """Initialize empty behavior registry."""
        self._factories: dict[str, BehaviorFactory] = {}

    def register(self, name: str, factory: BehaviorFactory) -> None:
        """
        Register a behavior factory.

        Args:
            name: Behavior name as written in room files
            factory: Callable returning an event -> listener mapping

        Raises:
            ValueError: If the name is empty or already registered
        """
        if not name:
            raise ValueError("Behavior must have a name")

        if name in self._factories:
            raise ValueError(f"Behavior '{name}' already registered")

        self._factories[name] = factory
        logger.debug("behavior_registered", name=name)

    def get(self, name: str) -> BehaviorFactory | None:
        return self._factories.get(name)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __call__(
        self, config: dict[str, Any], l10n_dir: Path, scripts_dir: Path, room: "Room"
    ) -> None:
        """
        Attach the behaviors declared in a room record to the room.

        Unknown behaviors and failing factories are logged and skipped; the
        room keeps whatever attached successfully.
        """
        for name, options in _behavior_options(config).items():
            factory = self._factories.get(name)
            if factory is None:
                logger.warning(
                    "behavior_not_registered",
                    behavior=name,
                    location=room.get_location(),
                )
                continue

            context = BehaviorContext(
                config=config,
                l10n_dir=l10n_dir,
                scripts_dir=scripts_dir,
                area=room.get_area(),
                options=options,
            )

            try:
                listeners = factory(room, context) or {}
                if not isinstance(listeners, Mapping):
                    raise TypeError(
                        f"factory returned {type(listeners).__name__}, expected a mapping"
                    )
                for event, listener in listeners.items():
                    room.on(event, listener)
            except Exception as e:
                logger.error(
                    "behavior_attach_failed",
                    behavior=name,
                    location=room.get_location(),
                    error=str(e),
                )
                continue

            logger.debug(
                "behavior_attached",
                behavior=name,
                location=room.get_location(),
                events=sorted(listeners),
            )
