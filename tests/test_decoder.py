"""Tests for stylegen.core.decoder."""

from __future__ import annotations

import pytest

from stylegen.core.decoder import decode_style_name
from stylegen.core.models import StyleIdentity


class TestDecodeStyleName:
    def test_plain_leaf(self):
        assert decode_style_name("Acme/Light/Button") == StyleIdentity(
            brand="Acme", system_theme="Light", leaf_name="Button", custom_theme=None
        )

    def test_custom_theme(self):
        identity = decode_style_name("Acme/Light/Theme/ThemeFirst/Primary")
        assert identity is not None
        assert identity.brand == "Acme"
        assert identity.system_theme == "Light"
        assert identity.custom_theme == "ThemeFirst"
        assert identity.leaf_name == "Primary"

    def test_leaf_keeps_remaining_segments(self):
        identity = decode_style_name("Acme/Dark/Theme/ThemeThird/Text/Primary/Muted")
        assert identity is not None
        assert identity.custom_theme == "ThemeThird"
        assert identity.leaf_name == "Text/Primary/Muted"

    def test_nested_leaf_without_theme(self):
        identity = decode_style_name("Acme/Dark/Surface/Card")
        assert identity is not None
        assert identity.custom_theme is None
        assert identity.leaf_name == "Surface/Card"

    @pytest.mark.parametrize("name", ["justoneword", "", "Acme/Light", "Acme/Light/"])
    def test_missing_segments_decode_to_none(self, name):
        assert decode_style_name(name) is None

    def test_theme_segment_without_leaf_is_a_plain_leaf(self):
        identity = decode_style_name("Acme/Light/Theme/ThemeFirst")
        assert identity is not None
        assert identity.custom_theme is None
        assert identity.leaf_name == "ThemeFirst"

    def test_lone_theme_segment_is_a_leaf(self):
        identity = decode_style_name("Acme/Light/Theme")
        assert identity is not None
        assert identity.leaf_name == "Theme"

    def test_theme_must_match_exactly(self):
        identity = decode_style_name("Acme/Light/Themes/ThemeFirst/Primary")
        assert identity is not None
        assert identity.custom_theme is None
        assert identity.leaf_name == "Themes/ThemeFirst/Primary"
