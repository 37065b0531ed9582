"""
Command line interface.

Commands:
- generate: fetch (or read the cached) Figma file and write style sources
- inspect: print the brand / system theme / variant tree of a saved file
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from stylegen import __version__
from stylegen.app import LOGGER_NAME, configure_logging, run_generation
from stylegen.config.settings import GeneratorSettings
from stylegen.core.aggregator import aggregate
from stylegen.core.catalog import load_catalog
from stylegen.core.models import CatalogValidationError
from stylegen.core.naming import resolve_names
from stylegen.errors import StyleGenError, classify_exception, format_error_for_user

app = typer.Typer(help="Generate Android and iOS style sources from a Figma style catalog.")


def _fail(error: Exception) -> typer.Exit:
    error = classify_exception(error)
    logging.getLogger(LOGGER_NAME).debug("generation failed: %s", error.to_dict())
    typer.echo(f"Error: {format_error_for_user(error)}", err=True)
    return typer.Exit(code=1)


@app.command("generate")
def generate_command(
    file_key: Optional[str] = typer.Argument(None, help="Figma file key"),
    token: Optional[str] = typer.Option(None, "--token", "-a", help="Figma personal access token"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    cache_path: Optional[str] = typer.Option(None, "--cache-path", help="Downloaded JSON cache path"),
    android_output: Optional[str] = typer.Option(None, "--android-output", help="Android colors.xml output file"),
    ios_output: Optional[str] = typer.Option(None, "--ios-output", help="iOS current app output folder"),
    ios_brand_output: Optional[str] = typer.Option(
        None, "--ios-brand-output", help="iOS brands output folder, @BRAND is replaced by the brand"
    ),
    ios_typo_output: Optional[str] = typer.Option(None, "--ios-typo-output", help="iOS fonts output file"),
    color_prefix: Optional[str] = typer.Option(None, "--color-prefix", help="Generated color prefix"),
    trim_ending: Optional[bool] = typer.Option(
        None, "--trim-ending/--no-trim-ending", help="Trim ending digits when unambiguous"
    ),
    use_srgb: Optional[bool] = typer.Option(
        None, "--use-srgb/--no-use-srgb", help="Use extended sRGB color space (iOS)"
    ),
    current_app_name: Optional[str] = typer.Option(None, "--current-app-name", help="Current app (brand) name"),
    current_system_theme: Optional[str] = typer.Option(
        None, "--current-system-theme", help="System theme used for the Android palette"
    ),
    source: Optional[str] = typer.Option(None, "--source", help="iOS output kind: themes or gradients"),
    brands: Optional[List[str]] = typer.Option(None, "--brand", "-b", help="Brand to generate (repeatable)"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--quiet", help="Debug logging"),
) -> None:
    """Generate style sources for the configured platforms."""
    try:
        settings = GeneratorSettings.load(config).with_overrides(
            file_key=file_key,
            token=token,
            cache_path=cache_path,
            android_output=android_output,
            ios_output=ios_output,
            ios_brand_output=ios_brand_output,
            ios_typo_output=ios_typo_output,
            color_prefix=color_prefix,
            trim_ending_digits=trim_ending,
            use_extended_srgb=use_srgb,
            current_app_name=current_app_name,
            current_system_theme=current_system_theme,
            source=source,
            brands=brands or None,
            verbose=verbose,
        )
        logger = configure_logging(settings)
        logger.info("stylegen %s", __version__)
        written = run_generation(settings, Path.cwd())
    except (StyleGenError, OSError) as exc:
        raise _fail(exc) from exc

    typer.echo(f"Generated {len(written)} file(s)")


@app.command("inspect")
def inspect_command(
    path: Path = typer.Argument(..., help="Saved Figma file JSON"),
    color_prefix: str = typer.Option("", "--color-prefix", help="Generated color prefix"),
    trim_ending: bool = typer.Option(False, "--trim-ending", help="Trim ending digits when unambiguous"),
) -> None:
    """Print how the catalog's styles decode and group."""
    try:
        catalog = load_catalog(path)
    except CatalogValidationError as exc:
        raise _fail(classify_exception(exc, path=path)) from exc

    aggregated = aggregate(catalog.styles, catalog.color_for, catalog.font_for)
    names = resolve_names(aggregated.colors, prefix=color_prefix, trim_trailing_digits=trim_ending)

    typer.echo(f"{catalog.name or path.name}: {len(aggregated.colors)} colors, {len(aggregated.fonts)} fonts")
    for (brand, system_theme), layers in aggregated.by_brand_and_system_theme.items():
        typer.echo(f"{brand} / {system_theme}")
        for entry in layers.base_colors:
            typer.echo(f"  {names[entry]}  ({entry.leaf_name})")
        for variant in layers.variant_order:
            typer.echo(f"  [{variant.raw_key}]")
            for entry in layers.variant_colors(variant.raw_key):
                typer.echo(f"    {names[entry]}  ({entry.leaf_name})")


def main() -> None:
    app()
