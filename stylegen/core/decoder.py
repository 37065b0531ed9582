"""Decode hierarchical style names."""

from __future__ import annotations

from stylegen.core.constants import NAME_SEPARATOR, THEME_SEGMENT
from stylegen.core.models import StyleIdentity


def decode_style_name(name: str) -> StyleIdentity | None:
    """Split ``Brand/SystemTheme[/Theme/Variant]/Leaf`` into its parts.

    Returns ``None`` when the brand or system theme segment is missing or
    nothing is left for the leaf. A ``Theme`` segment only opens a custom
    theme when both the variant and a leaf follow it; otherwise the
    remainder is taken as the leaf unchanged.
    """
    brand, sep, rest = name.partition(NAME_SEPARATOR)
    if not sep:
        return None
    system_theme, sep, rest = rest.partition(NAME_SEPARATOR)
    if not sep:
        return None

    custom_theme: str | None = None
    head, sep, tail = rest.partition(NAME_SEPARATOR)
    if sep and head == THEME_SEGMENT:
        rest = tail
        variant, sep, leaf = rest.partition(NAME_SEPARATOR)
        if sep:
            custom_theme = variant
            rest = leaf

    if not rest:
        return None
    return StyleIdentity(
        brand=brand,
        system_theme=system_theme,
        leaf_name=rest,
        custom_theme=custom_theme,
    )
