"""Tests for localizable field resolution."""

import pytest

from hearthmoor.game.world import UNTRANSLATED, localize


class TestLocalize:
    """Test the localizable field rule."""

    def test_bare_string_ignores_locale(self):
        """A bare string is returned for every locale."""
        assert localize("Square", "en") == "Square"
        assert localize("Square", "es") == "Square"
        assert localize("Square", "") == "Square"

    def test_locale_map_present(self):
        """A locale map returns the entry for the requested locale."""
        assert localize({"en": "Well", "es": "Pozo"}, "es") == "Pozo"

    def test_locale_map_absent(self):
        """A locale map without the requested locale returns the sentinel."""
        assert localize({"en": "Well"}, "fr") == UNTRANSLATED
        assert UNTRANSLATED == "UNTRANSLATED - Contact an admin"

    @pytest.mark.parametrize("value", [None, 42, ["en", "Well"]])
    def test_invalid_shape_raises(self, value):
        """Anything other than a string or mapping is rejected at read time."""
        with pytest.raises(TypeError):
            localize(value, "en")
