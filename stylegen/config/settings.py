"""Generator settings loaded from an optional YAML file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from stylegen.core.constants import DEFAULT_SYSTEM_THEMES
from stylegen.errors import ErrorCode, StyleGenError

TOKEN_ENV_VAR = "FIGMA_TOKEN"
SOURCES = ("themes", "gradients")
_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0", ""})


class GeneratorSettings:
    """Wraps plain configuration values with cleaning and defaults."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    @classmethod
    def load(cls, path: Path | None) -> GeneratorSettings:
        """Read settings from ``path``; no path means all defaults."""
        if path is None:
            return cls()
        if not path.exists():
            raise StyleGenError(ErrorCode.CONFIG_MISSING, path=path)
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise StyleGenError(
                ErrorCode.CONFIG_INVALID, path=path, details={"original": str(exc)}
            ) from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise StyleGenError(ErrorCode.CONFIG_INVALID, path=path, details={"reason": "expected a mapping"})
        return cls(data)

    def with_overrides(self, **overrides: Any) -> GeneratorSettings:
        """Return a copy where every non-None override replaces the file value."""
        values = dict(self._values)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return GeneratorSettings(values)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)

    # -- catalog --

    @property
    def file_key(self) -> str:
        return self._str("file_key")

    @property
    def token(self) -> str:
        return self._str("token") or os.environ.get(TOKEN_ENV_VAR, "").strip()

    @property
    def cache_path(self) -> Path | None:
        return self._path("cache_path")

    # -- naming --

    @property
    def color_prefix(self) -> str:
        return self._str("color_prefix")

    @property
    def trim_ending_digits(self) -> bool:
        return self._bool("trim_ending_digits")

    @property
    def use_extended_srgb(self) -> bool:
        return self._bool("use_extended_srgb")

    # -- outputs --

    @property
    def android_output(self) -> Path | None:
        return self._path("android_output")

    @property
    def ios_output(self) -> Path | None:
        return self._path("ios_output")

    @property
    def ios_brand_output(self) -> str:
        return self._str("ios_brand_output")

    @property
    def ios_typo_output(self) -> Path | None:
        return self._path("ios_typo_output")

    # -- selection --

    @property
    def current_app_name(self) -> str:
        return self._str("current_app_name").lower()

    @property
    def current_system_theme(self) -> str:
        return self._str("current_system_theme")

    @property
    def source(self) -> str:
        value = self._str("source").lower()
        if value and value not in SOURCES:
            raise StyleGenError(
                ErrorCode.CONFIG_INVALID,
                message=f"Unknown source {value!r}; expected one of {', '.join(SOURCES)}",
            )
        return value

    @property
    def brands(self) -> list[str]:
        brands: list[str] = []
        for brand in self._str_list("brands"):
            if brand.lower() not in brands:
                brands.append(brand.lower())
        return brands

    @property
    def system_themes(self) -> list[str]:
        return self._str_list("system_themes") or list(DEFAULT_SYSTEM_THEMES)

    # -- logging --

    @property
    def log_dir(self) -> Path | None:
        return self._path("log_dir")

    @property
    def verbose(self) -> bool:
        return self._bool("verbose")

    # -- helpers --

    def _str(self, key: str) -> str:
        raw = self._values.get(key)
        if raw is None:
            return ""
        return str(raw).strip()

    def _bool(self, key: str) -> bool:
        raw = self._values.get(key)
        if raw is None:
            return False
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, (int, float)):
            return bool(raw)
        value = str(raw).strip().lower()
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        raise StyleGenError(
            ErrorCode.CONFIG_INVALID,
            message=f"{key} must be true or false, got {raw!r}",
        )

    def _path(self, key: str) -> Path | None:
        value = self._str(key)
        return Path(value).expanduser() if value else None

    def _str_list(self, key: str) -> list[str]:
        raw = self._values.get(key)
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = raw.split(",")
        if not isinstance(raw, (list, tuple)):
            return []
        cleaned: list[str] = []
        for item in raw:
            value = str(item).strip()
            if value and value not in cleaned:
                cleaned.append(value)
        return cleaned
