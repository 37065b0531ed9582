"""Gradient definitions carried in color style descriptions.

A stop is described as ``Gradient/<id>/<Start|Middle|End>: <value>``; the
three stops sharing an id form one gradient.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from stylegen.core.constants import GRADIENT_PREFIX, GRADIENT_STOPS
from stylegen.core.models import ColorEntry


@dataclass(frozen=True, slots=True)
class Gradient:
    id: int
    colors: tuple[str, ...]

    @property
    def order(self) -> int:
        return self.id


def parse_gradient_stop(description: str | None) -> tuple[int, str, str] | None:
    """Return ``(gradient id, stop label, value)`` or None."""
    if not description:
        return None
    label, sep, value = description.replace(GRADIENT_PREFIX, "").partition(":")
    if not sep:
        return None
    gradient_id, _, stop = label.partition("/")
    try:
        number = int(gradient_id.strip())
    except ValueError:
        return None
    value = value.strip()
    if not value:
        return None
    return number, stop.strip(), value


def collect_gradients(entries: Iterable[ColorEntry]) -> list[Gradient]:
    """Group described stops by id, keeping only complete gradients."""
    stops: dict[int, list[tuple[str, str]]] = {}
    for entry in entries:
        parsed = parse_gradient_stop(entry.source_style.description)
        if parsed is None:
            continue
        number, label, value = parsed
        stops.setdefault(number, []).append((label, value))

    gradients: list[Gradient] = []
    for number in sorted(stops):
        colors: list[str] = []
        for stop in GRADIENT_STOPS:
            value = next((value for label, value in stops[number] if stop in label), None)
            if value is None:
                break
            colors.append(value)
        else:
            gradients.append(Gradient(id=number, colors=tuple(colors)))
    return gradients
