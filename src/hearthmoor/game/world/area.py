"""
Area module for Hearthmoor MUD.

An area is the metadata record declared by an area directory's manifest.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .localization import localize


class Area(BaseModel):
    """
    A named world region.

    Attributes:
        id: Manifest key of the area (e.g., "village")
        title: Display title, a bare string or a locale -> string mapping

    Any other manifest fields are kept verbatim as extra attributes.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="Unique area identifier")
    title: Any = Field(..., description="Area title, localizable")

    def get_title(self, locale: str) -> str:
        """Get the title, localized if possible."""
        return localize(self.title, locale)

    def get_extra(self, key: str, default: Any = None) -> Any:
        """Get a pass-through manifest field."""
        return (self.model_extra or {}).get(key, default)
