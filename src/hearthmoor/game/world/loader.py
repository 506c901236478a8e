"""
World loader module for Hearthmoor MUD.

Discovers area directories, loads their manifests and room files, and fills
a WorldIndex. A broken area, file or record is logged and skipped; it never
stops the rest of the world from loading.
"""

import asyncio
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from hearthmoor.config import Settings, get_settings

from .area import Area
from .behaviors import BehaviorRegistry, RoomHook
from .errors import (
    AreaDefinitionError,
    ContentParseError,
    DiscoveryError,
    ManifestMissingError,
    RoomValidationError,
    WorldLoadError,
)
from .index import WorldIndex
from .room import Room

logger = structlog.get_logger(__name__)

REQUIRED_ROOM_FIELDS = ("title", "description", "location")
ROOM_FILE_SUFFIXES = (".yml", ".yaml")


def load_yaml_file(file_path: Path) -> Any:
    """
    Load a YAML content file.

    Args:
        file_path: Path to the YAML file

    Returns:
        The decoded document (None for an empty file)

    Raises:
        ContentParseError: If the file cannot be read or parsed
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return yaml.safe_load(f)

    except yaml.YAMLError as e:
        raise ContentParseError(f"YAML parsing error in {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ContentParseError(f"Invalid encoding in {file_path}: {e}") from e
    except OSError as e:
        raise ContentParseError(f"Error reading {file_path}: {e}") from e


def validate_room_data(room_data: Any, file_path: Path) -> None:
    """
    Validate that a room record has all required fields.

    Only presence is checked; the shape of the values is left to the room's
    accessors. Stops at the first missing field.

    Args:
        room_data: Decoded room record
        file_path: Path to the source file (for error messages)

    Raises:
        RoomValidationError: If the record is not a mapping or misses a field
    """
    if not isinstance(room_data, Mapping):
        raise RoomValidationError(f"Room record in {file_path} is not a mapping")

    for field in REQUIRED_ROOM_FIELDS:
        if field not in room_data:
            raise RoomValidationError(f"Room in {file_path} missing required field: {field}")


def room_is_valid(room_data: Any) -> bool:
    """Check a room record against the required-field contract."""
    try:
        validate_room_data(room_data, Path("<record>"))
    except RoomValidationError:
        return False
    return True


def create_room_from_data(
    room_data: dict[str, Any],
    hook: RoomHook | None = None,
    l10n_dir: Path = Path("."),
    scripts_dir: Path = Path("."),
) -> Room:
    """
    Create a Room instance from a validated record and attach its behaviors.

    Args:
        room_data: Room record, already stamped with area and provenance
        hook: Behavior hook called with the record, directories and room
        l10n_dir: Localization directory handed to the hook
        scripts_dir: Behavior script directory handed to the hook

    Returns:
        Room instance

    Raises:
        RoomValidationError: If Pydantic validation or the hook fails
    """
    try:
        room = Room(**room_data)
    except (ValidationError, TypeError) as e:
        raise RoomValidationError(
            f"Failed to create room '{room_data.get('location', 'unknown')}': {e}"
        ) from e

    if hook is not None:
        try:
            hook(room_data, l10n_dir, scripts_dir, room)
        except Exception as e:
            raise RoomValidationError(
                f"Behavior hook failed for room '{room.get_location()}': {e}"
            ) from e

    return room


class WorldLoader:
    """
    Loads area directories into a WorldIndex.

    Layout of the content root::

        <root>/<area dir>/manifest.yml   area metadata, one record
        <root>/<area dir>/*.yml          room records keyed by any index
    """

    def __init__(
        self,
        root_dir: Path | None = None,
        index: WorldIndex | None = None,
        hook: RoomHook | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.root_dir = Path(root_dir) if root_dir is not None else self.settings.content_dir
        self.index = index if index is not None else WorldIndex()
        self.hook: RoomHook = hook if hook is not None else BehaviorRegistry()
        self.problems: list[WorldLoadError] = []
        self._verbose = False

    def load(
        self, verbose: bool = False, on_complete: Callable[[], None] | None = None
    ) -> WorldIndex:
        """
        Load every area under the root directory.

        Args:
            verbose: Log progress as well as failures
            on_complete: Called once after every area has been attempted

        Returns:
            The sealed WorldIndex

        Raises:
            DiscoveryError: If the root directory cannot be enumerated; the
                completion callback is not called in that case
        """
        self._start(verbose)
        return self._finish(self._discover(), on_complete)

    async def load_async(
        self, verbose: bool = False, on_complete: Callable[[], None] | None = None
    ) -> WorldIndex:
        """Like load(), but enumerates the root directory off the event loop."""
        self._start(verbose)
        area_dirs = await asyncio.to_thread(self._discover)
        return self._finish(area_dirs, on_complete)

    def _start(self, verbose: bool) -> None:
        if self.index.sealed:
            raise WorldLoadError("World index already loaded; restart to reload content")
        self._verbose = verbose
        self.problems = []

    def _finish(
        self, area_dirs: list[Path], on_complete: Callable[[], None] | None
    ) -> WorldIndex:
        for area_dir in area_dirs:
            self._load_area(area_dir)

        logger.info(
            "world_loaded",
            areas=self.index.area_count,
            rooms=self.index.room_count,
            problems=len(self.problems),
        )

        if on_complete is not None:
            on_complete()

        self.index.seal()
        return self.index

    def _progress(self, event: str, **kw: Any) -> None:
        if self._verbose:
            logger.info(event, **kw)

    def _problem(self, error: WorldLoadError, event: str, **kw: Any) -> None:
        self.problems.append(error)
        logger.warning(event, error=str(error), **kw)

    def _discover(self) -> list[Path]:
        """List candidate area directories; anything that is not a directory is ignored."""
        if not self.root_dir.is_dir():
            error = DiscoveryError(f"Content directory not found: {self.root_dir}")
            logger.error("world_discovery_failed", root=str(self.root_dir), error=str(error))
            raise error

        try:
            entries = sorted(self.root_dir.iterdir())
        except OSError as e:
            error = DiscoveryError(f"Cannot read content directory {self.root_dir}: {e}")
            logger.error("world_discovery_failed", root=str(self.root_dir), error=str(error))
            raise error from e

        return [entry for entry in entries if entry.is_dir()]

    def _load_area(self, area_dir: Path) -> None:
        self._progress("area_examining", directory=str(area_dir))

        try:
            files = sorted(area_dir.iterdir())
        except OSError as e:
            self._problem(
                WorldLoadError(f"Cannot list area directory {area_dir}: {e}"),
                "area_listing_failed",
                directory=str(area_dir),
            )
            return

        manifest_path = area_dir / self.settings.manifest_name
        if manifest_path not in files:
            self._problem(
                ManifestMissingError(f"No {self.settings.manifest_name} in {area_dir}"),
                "area_manifest_missing",
                directory=str(area_dir),
            )
            return

        try:
            manifest = load_yaml_file(manifest_path)
        except ContentParseError as e:
            self._problem(e, "area_manifest_parse_failed", file=str(manifest_path))
            return

        if manifest is None:
            manifest = {}
        if not isinstance(manifest, Mapping):
            self._problem(
                AreaDefinitionError(f"Manifest {manifest_path} must map area keys to records"),
                "area_manifest_invalid",
                file=str(manifest_path),
            )
            return

        area_id = self._register_area(manifest, manifest_path, default=area_dir.name)

        for room_file in files:
            if room_file == manifest_path or not self._is_room_file(room_file):
                continue
            self._load_room_file(room_file, area_id)

    def _register_area(self, manifest: Mapping[Any, Any], manifest_path: Path, default: str) -> str:
        """
        Register the first titled record of a manifest.

        Returns:
            The id rooms of this directory are stamped with
        """
        accepted: str | None = None
        first_key: str | None = None

        for key, record in manifest.items():
            area_id = str(key)
            if first_key is None:
                first_key = area_id

            if accepted is not None:
                self._problem(
                    AreaDefinitionError(
                        f"More than one area defined in {manifest_path}; skipping '{area_id}'"
                    ),
                    "area_extra_definition",
                    file=str(manifest_path),
                    area=area_id,
                )
                break

            if not isinstance(record, Mapping) or "title" not in record:
                self._problem(
                    AreaDefinitionError(f"Area '{area_id}' in {manifest_path} has no title"),
                    "area_missing_title",
                    file=str(manifest_path),
                    area=area_id,
                )
                continue

            fields = dict(record)
            if "id" in fields:
                fields["manifest_id"] = fields.pop("id")
                logger.warning(
                    "area_id_field_renamed",
                    file=str(manifest_path),
                    area=area_id,
                    kept_as="manifest_id",
                )
            try:
                area = Area(id=area_id, **fields)
            except (ValidationError, TypeError) as e:
                self._problem(
                    AreaDefinitionError(f"Invalid area '{area_id}' in {manifest_path}: {e}"),
                    "area_invalid",
                    file=str(manifest_path),
                    area=area_id,
                )
                continue

            self.index.register_area(area)
            accepted = area_id
            self._progress("area_loaded", area=area_id, title=area.title)

        if accepted is None and first_key is None:
            self._problem(
                AreaDefinitionError(f"Manifest {manifest_path} defines no area"),
                "area_manifest_empty",
                file=str(manifest_path),
            )

        return accepted or first_key or default

    def _is_room_file(self, path: Path) -> bool:
        return (
            path.is_file()
            and "manifest" not in path.name
            and path.suffix.lower() in ROOM_FILE_SUFFIXES
        )

    def _load_room_file(self, room_file: Path, area_id: str) -> None:
        try:
            room_defs = load_yaml_file(room_file)
            if not isinstance(room_defs, Mapping):
                raise ContentParseError(
                    f"Room file {room_file} must map record keys to room records"
                )
        except ContentParseError as e:
            self._problem(e, "room_file_parse_failed", file=str(room_file))
            return

        for file_index, room_data in room_defs.items():
            try:
                validate_room_data(room_data, room_file)
                record = dict(room_data)
                if record.get("exits") is None:
                    record["exits"] = []
                record["area"] = area_id
                record["filename"] = str(room_file)
                record["file_index"] = file_index
                room = create_room_from_data(
                    record,
                    hook=self.hook,
                    l10n_dir=self.settings.l10n_scripts_dir,
                    scripts_dir=self.settings.room_scripts_dir,
                )
            except RoomValidationError as e:
                self._problem(e, "room_invalid", file=str(room_file), index=file_index)
                continue

            try:
                self.index.register_room(room)
            except TypeError as e:
                self._problem(
                    RoomValidationError(
                        f"Room location {room.get_location()!r} in {room_file} "
                        f"cannot be used as a key: {e}"
                    ),
                    "room_invalid",
                    file=str(room_file),
                    index=file_index,
                )
                continue

            self._progress("room_loaded", location=room.get_location(), area=area_id)


def load_world(
    content_dir: Path | None = None,
    hook: RoomHook | None = None,
    verbose: bool | None = None,
) -> WorldIndex:
    """
    Load the game world from the content directory.

    This is the main entry point for loading the game world.

    Args:
        content_dir: Root content directory. If None, uses the configured one.
        hook: Behavior hook for new rooms. If None, no behaviors are attached.
        verbose: Log load progress. If None, uses the configured default.

    Returns:
        The loaded, sealed WorldIndex

    Raises:
        DiscoveryError: If the content directory cannot be enumerated
    """
    settings = get_settings()
    loader = WorldLoader(content_dir, hook=hook, settings=settings)
    return loader.load(verbose=settings.verbose_load if verbose is None else verbose)
