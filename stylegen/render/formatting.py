"""Value formatting shared by the renderers."""

from __future__ import annotations

import re
from pathlib import Path

from stylegen.core.models import ColorValue, FontEntry

INDENT = "    "

SWIFT_FILE_PREFIX = "// Generated by stylegen. Do not edit.\n\nimport UIKit\n"
ANDROID_FILE_PREFIX = '<?xml version="1.0" encoding="utf-8"?>\n<!-- Generated by stylegen. Do not edit. -->\n<resources>'
ANDROID_FILE_SUFFIX = "</resources>\n"

_DOUBLE_HYPHEN_RE = re.compile(r"-(?=-)")

# UIFont.Weight cases by CSS weight, upper bound inclusive.
_FONT_WEIGHTS: tuple[tuple[float, str], ...] = (
    (100, "ultraLight"),
    (200, "thin"),
    (300, "light"),
    (400, "regular"),
    (500, "medium"),
    (600, "semibold"),
    (700, "bold"),
    (800, "heavy"),
)


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def _unit(value: float) -> str:
    return f"{max(0.0, min(1.0, value)):.3f}"


def android_hex_color(color: ColorValue) -> str:
    """Format as Android ``#AARRGGBB``."""
    return "#{:02X}{:02X}{:02X}{:02X}".format(
        _channel(color.a), _channel(color.r), _channel(color.g), _channel(color.b)
    )


def swift_ui_color(color: ColorValue, *, extended_srgb: bool = False) -> str:
    if extended_srgb:
        components = ", ".join(_unit(value) for value in (color.r, color.g, color.b, color.a))
        return (
            "UIColor(cgColor: CGColor(colorSpace: CGColorSpace(name: CGColorSpace.extendedSRGB)!, "
            f"components: [{components}])!)"
        )
    return (
        f"UIColor(red: {_unit(color.r)}, green: {_unit(color.g)}, "
        f"blue: {_unit(color.b)}, alpha: {_unit(color.a)})"
    )


def swift_font_weight(weight: float) -> str:
    for bound, name in _FONT_WEIGHTS:
        if weight <= bound:
            return name
    return "black"


def swift_system_font(font: FontEntry) -> str:
    size = f"{font.font_size:g}"
    return f"UIFont.systemFont(ofSize: {size}, weight: .{swift_font_weight(font.font_weight)})"


def comment_text(text: str) -> str:
    """Collapse text to a single line safe inside ``//`` and ``<!-- -->``.

    No two hyphens stay adjacent and the text never ends in a hyphen.
    """
    text = _DOUBLE_HYPHEN_RE.sub("- ", " ".join(text.split()))
    if text.endswith("-"):
        text += " "
    return text


def write_text(text: str, output: Path) -> None:
    """Replace ``output`` with ``text``, creating parent folders."""
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.exists():
        output.unlink()
    output.write_text(text, encoding="utf-8")
