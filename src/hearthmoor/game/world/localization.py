"""
Localizable field helpers for Hearthmoor MUD.

A localizable field is either a bare string, shown for every locale, or a
mapping from locale code to string.
"""

from collections.abc import Mapping
from typing import Any

UNTRANSLATED = "UNTRANSLATED - Contact an admin"

LocalizableText = str | Mapping[str, str]


def localize(value: Any, locale: str) -> str:
    """
    Resolve a localizable field for a locale.

    Args:
        value: A bare string or a mapping of locale code to string
        locale: The locale code to resolve (e.g., "en")

    Returns:
        The bare string, the mapped entry for the locale, or UNTRANSLATED
        when the mapping has no entry for it

    Raises:
        TypeError: If the value is neither a string nor a mapping
    """
    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        return value.get(locale, UNTRANSLATED)

    raise TypeError(
        f"Localizable field must be a string or a locale mapping, got {type(value).__name__}"
    )
