"""Generation driver: aggregate a catalog once, write every requested file."""

from __future__ import annotations

import logging
from pathlib import Path

from stylegen.config.settings import GeneratorSettings
from stylegen.core.aggregator import aggregate
from stylegen.core.catalog import StyleCatalog
from stylegen.core.constants import GRADIENTS_NAME, SCHEME_PROTOCOL_NAME
from stylegen.core.gradients import collect_gradients
from stylegen.core.models import AggregatedCatalog, ColorEntry, FontEntry, ThemeLayers
from stylegen.core.naming import capitalize_first, escape_identifier, resolve_names
from stylegen.errors import ErrorCode, StyleGenError, classify_exception
from stylegen.render.android import render_android_colors
from stylegen.render.formatting import write_text
from stylegen.render.ios import render_fonts, render_gradients, render_scheme, render_theme_class

logger = logging.getLogger(__name__)

BRAND_PLACEHOLDER = "@BRAND"


class StyleGenerator:
    """Writes Android and iOS sources for one style catalog."""

    def __init__(self, catalog: StyleCatalog, settings: GeneratorSettings) -> None:
        self._catalog = catalog
        self._settings = settings
        self._aggregated: AggregatedCatalog | None = None
        self._color_names: dict[ColorEntry, str] = {}
        self._font_names: dict[FontEntry, str] = {}

    @property
    def aggregated(self) -> AggregatedCatalog:
        if self._aggregated is None:
            self._aggregated = self._process()
        return self._aggregated

    def _process(self) -> AggregatedCatalog:
        catalog = self._catalog
        aggregated = aggregate(catalog.styles, catalog.color_for, catalog.font_for)
        self._color_names = resolve_names(
            aggregated.colors,
            prefix=self._settings.color_prefix,
            trim_trailing_digits=self._settings.trim_ending_digits,
        )
        self._font_names = resolve_names(
            aggregated.fonts,
            trim_trailing_digits=self._settings.trim_ending_digits,
        )
        logger.info(
            "catalog %r: %d colors, %d fonts, brands=%s",
            catalog.name,
            len(aggregated.colors),
            len(aggregated.fonts),
            ", ".join(aggregated.brands()) or "-",
        )
        return aggregated

    # -- android --

    def generate_android(self, output: Path) -> Path:
        """Write ``colors.xml`` for the selected partition, or the whole catalog.

        Base colors and the first variant's colors are written, each
        resource name once.
        """
        brand = self._settings.current_app_name
        system_theme = self._settings.current_system_theme
        layers = self.aggregated.layers
        if brand and system_theme:
            layers = self.aggregated.partition(brand, system_theme) or ThemeLayers()

        palette: list[ColorEntry] = []
        written_names: set[str] = set()
        for entry in layers.unique_colors():
            name = self._color_names[entry]
            if name in written_names:
                continue
            written_names.add(name)
            palette.append(entry)
        self._save(render_android_colors(palette, self._color_names), output)
        return output

    # -- ios --

    def generate_ios_fonts(self, output: Path) -> Path:
        self._save(render_fonts(self.aggregated.fonts, self._font_names), output)
        return output

    def generate_ios(self, base_dir: Path) -> list[Path]:
        """Write themes or gradients for every configured brand."""
        source = self._settings.source
        if not source:
            raise StyleGenError(ErrorCode.CONFIG_MISSING, message="No iOS source selected (themes or gradients)")
        if not self._settings.ios_brand_output:
            raise StyleGenError(ErrorCode.CONFIG_MISSING, message="No iOS brand output folder configured")

        written: list[Path] = []
        for brand in self._settings.brands:
            brand_folder = resolve_path(
                base_dir, Path(self._settings.ios_brand_output.replace(BRAND_PLACEHOLDER, brand))
            )
            folders = [brand_folder]
            current_folder = self._settings.ios_output
            if brand == self._settings.current_app_name and current_folder is not None:
                folders.append(resolve_path(base_dir, current_folder))

            for folder in folders:
                if source == "themes":
                    written.extend(self._generate_theme(brand, folder / "Theme"))
                else:
                    written.append(self._generate_gradients(brand, folder / GRADIENTS_NAME))
        return written

    def _generate_theme(self, brand: str, folder: Path) -> list[Path]:
        written: list[Path] = []
        for system_theme in self._settings.system_themes:
            layers = self.aggregated.partition(brand, system_theme) or ThemeLayers()
            class_name = capitalize_first(escape_identifier(f"{system_theme}{SCHEME_PROTOCOL_NAME}"))
            output = folder / f"{class_name}.swift"
            text = render_theme_class(
                class_name,
                layers,
                self._color_names,
                extended_srgb=self._settings.use_extended_srgb,
            )
            self._save(text, output)
            written.append(output)

        output = folder / f"{SCHEME_PROTOCOL_NAME}.swift"
        self._save(render_scheme(self._scheme_layers(brand), self._color_names), output)
        written.append(output)
        return written

    def _scheme_layers(self, brand: str) -> ThemeLayers:
        for system_theme in self._settings.system_themes:
            layers = self.aggregated.partition(brand, system_theme)
            if layers is not None:
                return layers
        for system_theme in self.aggregated.system_themes(brand):
            layers = self.aggregated.partition(brand, system_theme)
            if layers is not None:
                return layers
        return ThemeLayers()

    def _generate_gradients(self, brand: str, folder: Path) -> Path:
        gradients = {}
        for system_theme in self._settings.system_themes:
            layers = self.aggregated.partition(brand, system_theme) or ThemeLayers()
            gradients[system_theme] = collect_gradients(layers.entries())
        output = folder / f"{GRADIENTS_NAME}.swift"
        self._save(render_gradients(GRADIENTS_NAME, gradients), output)
        return output

    def _save(self, text: str, output: Path) -> None:
        logger.info("Generate: %s", output)
        try:
            write_text(text, output)
        except OSError as exc:
            raise classify_exception(exc, path=output) from exc


def resolve_path(base_dir: Path, path: Path) -> Path:
    path = path.expanduser()
    return path if path.is_absolute() else base_dir / path
