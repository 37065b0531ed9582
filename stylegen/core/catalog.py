"""Figma file document parsing and style lookups."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Mapping

from stylegen.core.models import (
    CatalogValidationError,
    ColorValue,
    FontMetrics,
    RawStyle,
    StyleType,
)

_MAX_DOCUMENT_BYTES = 256 * 1024 * 1024


@dataclass(frozen=True, slots=True)
class StyleCatalog:
    """Published styles of a file plus the nodes that use them."""

    name: str
    version: str
    styles: dict[str, RawStyle]
    fill_nodes: dict[str, Mapping[str, Any]] = field(default_factory=dict)
    text_nodes: dict[str, Mapping[str, Any]] = field(default_factory=dict)

    def color_for(self, style_id: str) -> ColorValue | None:
        node = self.fill_nodes.get(style_id)
        if node is None:
            return None
        return _solid_color(node)

    def font_for(self, style_id: str) -> FontMetrics | None:
        node = self.text_nodes.get(style_id)
        if node is None:
            return None
        return _font_metrics(node)


def load_catalog(path: Path) -> StyleCatalog:
    """Read a file document saved as JSON."""
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise CatalogValidationError(f"Unable to stat {path}: {exc}") from exc
    if size > _MAX_DOCUMENT_BYTES:
        raise CatalogValidationError(f"{path}: file exceeds max size ({_MAX_DOCUMENT_BYTES} bytes)")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogValidationError(f"Invalid JSON in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogValidationError(f"Unable to read {path}: {exc}") from exc
    return parse_catalog(data)


def parse_catalog(data: object) -> StyleCatalog:
    """Build a catalog from a decoded ``GET /v1/files/:key`` response."""
    if not isinstance(data, dict):
        raise CatalogValidationError("Expected a JSON object at the document root")
    document = data.get("document")
    if not isinstance(document, dict):
        raise CatalogValidationError("Document root is missing the 'document' node")
    raw_styles = data.get("styles", {})
    if not isinstance(raw_styles, dict):
        raise CatalogValidationError("'styles' must be an object keyed by style id")

    styles: dict[str, RawStyle] = {}
    for style_id, value in raw_styles.items():
        style = _parse_style(value)
        if style is not None:
            styles[str(style_id)] = style

    fill_nodes: dict[str, Mapping[str, Any]] = {}
    text_nodes: dict[str, Mapping[str, Any]] = {}
    for node in _walk(document):
        refs = node.get("styles")
        if not isinstance(refs, dict):
            continue
        fill_id = refs.get("fill")
        if isinstance(fill_id, str) and fill_id not in fill_nodes and _solid_color(node):
            fill_nodes[fill_id] = node
        text_id = refs.get("text")
        if isinstance(text_id, str) and text_id not in text_nodes and _font_metrics(node):
            text_nodes[text_id] = node

    return StyleCatalog(
        name=str(data.get("name", "")),
        version=str(data.get("version", "")),
        styles=styles,
        fill_nodes=fill_nodes,
        text_nodes=text_nodes,
    )


def _parse_style(value: object) -> RawStyle | None:
    if not isinstance(value, dict):
        return None
    name = value.get("name")
    if not isinstance(name, str):
        return None
    try:
        style_type = StyleType(value.get("styleType"))
    except ValueError:
        return None
    description = value.get("description")
    return RawStyle(
        key=str(value.get("key", "")),
        name=name,
        style_type=style_type,
        description=description if isinstance(description, str) else None,
    )


def _walk(node: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        children = current.get("children")
        if isinstance(children, list):
            stack.extend(reversed([child for child in children if isinstance(child, dict)]))


def _solid_color(node: Mapping[str, Any]) -> ColorValue | None:
    fills = node.get("fills")
    if not isinstance(fills, list):
        return None
    for paint in fills:
        if not isinstance(paint, dict) or paint.get("type") != "SOLID":
            continue
        color = paint.get("color")
        if not isinstance(color, dict):
            continue
        try:
            opacity = float(paint.get("opacity", 1.0))
            return ColorValue(
                r=float(color["r"]),
                g=float(color["g"]),
                b=float(color["b"]),
                a=float(color.get("a", 1.0)) * opacity,
            )
        except (KeyError, TypeError, ValueError):
            continue
    return None


def _font_metrics(node: Mapping[str, Any]) -> FontMetrics | None:
    style = node.get("style")
    if not isinstance(style, dict):
        return None
    family = style.get("fontFamily")
    if not isinstance(family, str) or not family:
        return None
    try:
        return FontMetrics(
            font_family=family,
            font_weight=float(style.get("fontWeight", 400)),
            font_size=float(style["fontSize"]),
        )
    except (KeyError, TypeError, ValueError):
        return None
