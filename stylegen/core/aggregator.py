"""Group decoded styles into brand, system theme and variant layers."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Mapping

from stylegen.core.constants import THEME_SEGMENT
from stylegen.core.decoder import decode_style_name
from stylegen.core.models import (
    AggregatedCatalog,
    ColorEntry,
    ColorValue,
    FontEntry,
    FontMetrics,
    RawStyle,
    ThemeLayers,
    ThemeVariant,
)
from stylegen.core.theme_rank import sort_theme_variants

logger = logging.getLogger(__name__)

ColorLookup = Callable[[str], ColorValue | None]
FontLookup = Callable[[str], FontMetrics | None]


def iter_color_entries(
    raw_styles: Mapping[str, RawStyle],
    color_lookup: ColorLookup,
) -> Iterator[ColorEntry]:
    """Yield an entry for every style that has a color and a decodable name.

    Styles without either are expected in a catalog and are left out.
    """
    for style_id, style in raw_styles.items():
        color = color_lookup(style_id)
        if color is None:
            continue
        identity = decode_style_name(style.name)
        if identity is None:
            logger.debug("skipping color style with undecodable name %r", style.name)
            continue
        yield ColorEntry(identity=identity, color=color, source_style=style)


def iter_font_entries(
    raw_styles: Mapping[str, RawStyle],
    font_lookup: FontLookup,
) -> Iterator[FontEntry]:
    """Yield an entry for every style with matching font metrics."""
    for style_id, style in raw_styles.items():
        metrics = font_lookup(style_id)
        if metrics is None:
            continue
        yield FontEntry(
            source_style=style,
            font_family=metrics.font_family,
            font_weight=metrics.font_weight,
            font_size=metrics.font_size,
        )


def build_theme_layers(entries: Iterable[ColorEntry]) -> ThemeLayers:
    """Split entries into base colors and rank-ordered variant buckets."""
    catalog_order = list(entries)
    seen_variants: list[str] = []
    for entry in catalog_order:
        variant = entry.identity.custom_theme
        if variant is not None and variant not in seen_variants:
            seen_variants.append(variant)

    ordered = sorted(catalog_order, key=lambda entry: entry.leaf_name)
    base_colors = tuple(entry for entry in ordered if entry.identity.custom_theme is None)
    by_variant = {
        variant: tuple(entry for entry in ordered if entry.identity.custom_theme == variant)
        for variant in seen_variants
    }
    variant_order = tuple(
        ThemeVariant(case_key=variant.replace(THEME_SEGMENT, ""), raw_key=variant)
        for variant in sort_theme_variants(seen_variants)
    )
    return ThemeLayers(
        base_colors=base_colors,
        variant_order=variant_order,
        by_variant=by_variant,
    )


def aggregate(
    raw_styles: Mapping[str, RawStyle],
    color_lookup: ColorLookup,
    font_lookup: FontLookup,
) -> AggregatedCatalog:
    """Decode, sort and group a style catalog.

    Entries keep catalog order between equal leaf names, and partitions are
    keyed by ``(brand.lower(), system_theme)``.
    """
    catalog_order = list(iter_color_entries(raw_styles, color_lookup))

    partitions: dict[tuple[str, str], list[ColorEntry]] = {}
    for entry in catalog_order:
        key = (entry.identity.brand.lower(), entry.identity.system_theme)
        partitions.setdefault(key, []).append(entry)

    fonts = sorted(iter_font_entries(raw_styles, font_lookup), key=lambda font: font.source_style.name)

    catalog = AggregatedCatalog(
        colors=tuple(sorted(catalog_order, key=lambda entry: entry.leaf_name)),
        fonts=tuple(fonts),
        layers=build_theme_layers(catalog_order),
        by_brand_and_system_theme={
            key: build_theme_layers(entries) for key, entries in sorted(partitions.items())
        },
    )
    logger.debug(
        "aggregated %d colors, %d fonts in %d partitions",
        len(catalog.colors),
        len(catalog.fonts),
        len(catalog.by_brand_and_system_theme),
    )
    return catalog
