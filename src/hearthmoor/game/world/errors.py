"""Exceptions raised while loading world content."""


class WorldLoadError(Exception):
    """Raised when there's an error loading world data."""

    pass


class DiscoveryError(WorldLoadError):
    """Raised when the root content directory cannot be enumerated."""

    pass


class ManifestMissingError(WorldLoadError):
    """Raised when an area directory has no manifest file."""

    pass


class ContentParseError(WorldLoadError):
    """Raised when a manifest or room file cannot be decoded."""

    pass


class AreaDefinitionError(WorldLoadError):
    """Raised when a manifest area record is unusable or superfluous."""

    pass


class RoomValidationError(WorldLoadError):
    """Raised when room validation fails."""

    pass
