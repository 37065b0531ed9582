"""Android ``colors.xml`` rendering."""

from __future__ import annotations

from typing import Mapping, Sequence

from stylegen.core.models import ColorEntry
from stylegen.render.formatting import (
    ANDROID_FILE_PREFIX,
    ANDROID_FILE_SUFFIX,
    INDENT,
    android_hex_color,
    comment_text,
)


def render_android_colors(entries: Sequence[ColorEntry], names: Mapping[ColorEntry, str]) -> str:
    lines = [ANDROID_FILE_PREFIX]
    for entry in entries:
        lines.append(f"{INDENT}<!--{comment_text(entry.source_style.name)}-->")
        lines.append(f'{INDENT}<color name="{names[entry]}">{android_hex_color(entry.color)}</color>')
    lines.append(ANDROID_FILE_SUFFIX)
    return "\n".join(lines)
