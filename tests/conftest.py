"""Shared catalog builders for stylegen tests."""

from __future__ import annotations

import logging
from typing import Any

import pytest


def build_document(
    colors: list[tuple] = (),
    fonts: list[tuple] = (),
    extra_styles: dict[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build a minimal ``GET /v1/files/:key`` response.

    ``colors`` items are ``(name, rgba)`` or ``(name, rgba, description)``;
    ``fonts`` items are ``(name, family, weight, size)``.
    """
    styles: dict[str, dict[str, Any]] = {}
    nodes: list[dict[str, Any]] = []
    for index, item in enumerate(colors):
        name, (r, g, b, a) = item[0], item[1]
        description = item[2] if len(item) > 2 else ""
        style_id = f"C:{index}"
        styles[style_id] = {
            "key": f"color-key-{index}",
            "name": name,
            "styleType": "FILL",
            "description": description,
        }
        nodes.append(
            {
                "id": f"10:{index}",
                "name": name,
                "type": "RECTANGLE",
                "styles": {"fill": style_id},
                "fills": [{"type": "SOLID", "color": {"r": r, "g": g, "b": b, "a": a}}],
            }
        )
    for index, (name, family, weight, size) in enumerate(fonts):
        style_id = f"T:{index}"
        styles[style_id] = {
            "key": f"text-key-{index}",
            "name": name,
            "styleType": "TEXT",
            "description": "",
        }
        nodes.append(
            {
                "id": f"20:{index}",
                "name": name,
                "type": "TEXT",
                "styles": {"text": style_id},
                "style": {"fontFamily": family, "fontWeight": weight, "fontSize": size},
            }
        )
    styles.update(extra_styles or {})
    return {
        "name": "Design System",
        "version": "42",
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {"id": "1:0", "name": "Page", "type": "CANVAS", "children": nodes},
            ],
        },
        "styles": styles,
    }


@pytest.fixture
def sample_document() -> dict[str, Any]:
    return build_document(
        colors=[
            ("Acme/Light/Theme/ThemeSecond/Primary", (0.0, 0.0, 1.0, 1.0)),
            ("Acme/Light/Theme/ThemeFirst/Primary", (1.0, 0.0, 0.0, 1.0)),
            ("Acme/Light/Button", (0.0, 0.0, 0.0, 1.0)),
            ("Acme/Dark/Button", (1.0, 1.0, 1.0, 1.0)),
            ("Acme/Dark/Theme/ThemeFirst/Primary", (0.5, 0.0, 0.0, 1.0)),
            ("Acme/Dark/Theme/ThemeSecond/Primary", (0.0, 0.0, 0.5, 1.0)),
            ("Other/Light/Accent", (0.2, 0.4, 0.6, 0.5), "Gradient/1/Start: #FF0000"),
            ("justoneword", (0.3, 0.3, 0.3, 1.0)),
        ],
        fonts=[
            ("Heading/Large", "Inter", 700, 24),
            ("Body", "Inter", 400, 16),
        ],
    )


@pytest.fixture
def reset_app_logger():
    """Detach handlers that configure_logging leaves on the app logger."""
    yield
    logger = logging.getLogger("stylegen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
