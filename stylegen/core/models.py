"""Style catalog models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CatalogValidationError(ValueError):
    """Raised when a catalog document fails validation."""


class StyleType(str, Enum):
    """Figma style kinds."""

    FILL = "FILL"
    TEXT = "TEXT"
    EFFECT = "EFFECT"
    GRID = "GRID"


@dataclass(frozen=True, slots=True)
class RawStyle:
    """A named style as published in the catalog."""

    key: str
    name: str
    style_type: StyleType
    description: str | None = None


@dataclass(frozen=True, slots=True)
class ColorValue:
    """RGBA channels in the 0..1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class FontMetrics:
    """Typography attributes of a text style."""

    font_family: str
    font_weight: float
    font_size: float


@dataclass(frozen=True, slots=True)
class StyleIdentity:
    """Structured form of a ``Brand/SystemTheme[/Theme/Variant]/Leaf`` name."""

    brand: str
    system_theme: str
    leaf_name: str
    custom_theme: str | None = None


@dataclass(frozen=True, slots=True)
class ColorEntry:
    """A decoded color style together with its resolved color."""

    identity: StyleIdentity
    color: ColorValue
    source_style: RawStyle

    @property
    def leaf_name(self) -> str:
        return self.identity.leaf_name


@dataclass(frozen=True, slots=True)
class FontEntry:
    """A text style together with its resolved font metrics."""

    source_style: RawStyle
    font_family: str
    font_weight: float
    font_size: float

    @property
    def leaf_name(self) -> str:
        return self.source_style.name


@dataclass(frozen=True, slots=True)
class ThemeVariant:
    """A custom theme option: enum case key plus the raw grouping key."""

    case_key: str
    raw_key: str


@dataclass(frozen=True, slots=True)
class ThemeLayers:
    """Base colors plus per-variant overlays for one scope."""

    base_colors: tuple[ColorEntry, ...] = ()
    variant_order: tuple[ThemeVariant, ...] = ()
    by_variant: Mapping[str, tuple[ColorEntry, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_variant", MappingProxyType(dict(self.by_variant)))

    def variant_colors(self, raw_key: str) -> tuple[ColorEntry, ...]:
        return tuple(self.by_variant.get(raw_key, ()))

    def unique_colors(self) -> tuple[ColorEntry, ...]:
        """Base colors followed by the first variant's colors.

        Every variant defines the same set of colors, so the first one
        stands in for all of them when declaring properties.
        """
        if not self.variant_order:
            return self.base_colors
        return self.base_colors + self.variant_colors(self.variant_order[0].raw_key)

    def entries(self) -> tuple[ColorEntry, ...]:
        result = list(self.base_colors)
        for variant in self.variant_order:
            result.extend(self.variant_colors(variant.raw_key))
        return tuple(result)


@dataclass(frozen=True, slots=True)
class AggregatedCatalog:
    """All decoded colors and fonts of one catalog, grouped for rendering."""

    colors: tuple[ColorEntry, ...] = ()
    fonts: tuple[FontEntry, ...] = ()
    layers: ThemeLayers = field(default_factory=ThemeLayers)
    by_brand_and_system_theme: Mapping[tuple[str, str], ThemeLayers] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "by_brand_and_system_theme",
            MappingProxyType(dict(self.by_brand_and_system_theme)),
        )

    @property
    def base_colors(self) -> tuple[ColorEntry, ...]:
        return self.layers.base_colors

    @property
    def variant_order(self) -> tuple[ThemeVariant, ...]:
        return self.layers.variant_order

    @property
    def by_variant(self) -> Mapping[str, tuple[ColorEntry, ...]]:
        return self.layers.by_variant

    def partition(self, brand: str, system_theme: str) -> ThemeLayers | None:
        return self.by_brand_and_system_theme.get((brand.lower(), system_theme))

    def brands(self) -> list[str]:
        return sorted({brand for brand, _theme in self.by_brand_and_system_theme})

    def system_themes(self, brand: str) -> list[str]:
        brand = brand.lower()
        return sorted(
            theme for key_brand, theme in self.by_brand_and_system_theme if key_brand == brand
        )
