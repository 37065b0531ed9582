"""Run bootstrap: logging setup and the end-to-end generation run."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from stylegen.config.settings import GeneratorSettings
from stylegen.core.catalog import StyleCatalog, parse_catalog
from stylegen.core.fetcher import fetch_catalog_document
from stylegen.errors import ErrorCode, StyleGenError, classify_exception
from stylegen.generator import StyleGenerator, resolve_path

LOGGER_NAME = "stylegen"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(settings: GeneratorSettings) -> logging.Logger:
    """Attach console and optional rotating file handlers to the app logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if settings.verbose else logging.INFO)
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(console)

    log_dir = settings.log_dir
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_dir / "stylegen.log",
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def load_style_catalog(settings: GeneratorSettings, base_dir: Path) -> StyleCatalog:
    if not settings.file_key:
        raise StyleGenError(ErrorCode.CONFIG_MISSING, message="No Figma file key given")
    cache_path = settings.cache_path
    if cache_path is not None:
        cache_path = resolve_path(base_dir, cache_path)
    document = fetch_catalog_document(settings.file_key, settings.token or None, cache_path)
    try:
        return parse_catalog(document)
    except ValueError as exc:
        raise classify_exception(exc, path=cache_path) from exc


def run_generation(settings: GeneratorSettings, base_dir: Path) -> list[Path]:
    """Load the catalog and write every output the settings ask for."""
    logger = logging.getLogger(LOGGER_NAME)
    catalog = load_style_catalog(settings, base_dir)
    generator = StyleGenerator(catalog, settings)
    written: list[Path] = []

    if settings.android_output is not None:
        written.append(generator.generate_android(resolve_path(base_dir, settings.android_output)))

    if settings.source and settings.ios_brand_output:
        written.extend(generator.generate_ios(base_dir))
    elif settings.source or settings.ios_brand_output:
        logger.warning("iOS generation needs both a source and a brand output folder; skipped")

    if settings.ios_typo_output is not None:
        written.append(generator.generate_ios_fonts(resolve_path(base_dir, settings.ios_typo_output)))

    if not written:
        logger.warning("no outputs configured; nothing was generated")
    return written
