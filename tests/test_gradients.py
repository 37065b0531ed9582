"""Tests for stylegen.core.gradients."""

from __future__ import annotations

from stylegen.core.gradients import Gradient, collect_gradients, parse_gradient_stop
from stylegen.core.models import ColorEntry, ColorValue, RawStyle, StyleIdentity, StyleType


def _entry(leaf: str, description: str | None) -> ColorEntry:
    style = RawStyle(key=leaf, name=f"Acme/Light/{leaf}", style_type=StyleType.FILL, description=description)
    return ColorEntry(
        identity=StyleIdentity(brand="Acme", system_theme="Light", leaf_name=leaf),
        color=ColorValue(0, 0, 0, 1),
        source_style=style,
    )


def test_parse_gradient_stop():
    assert parse_gradient_stop("Gradient/2/Start: #FF0000") == (2, "Start", "#FF0000")
    assert parse_gradient_stop("Gradient/3/End:rgba(0, 0, 0, 0.5)") == (3, "End", "rgba(0, 0, 0, 0.5)")


def test_parse_gradient_stop_rejects_other_descriptions():
    assert parse_gradient_stop(None) is None
    assert parse_gradient_stop("") is None
    assert parse_gradient_stop("Primary brand color") is None
    assert parse_gradient_stop("Gradient/x/Start: #FFF") is None
    assert parse_gradient_stop("Gradient/1/Start:   ") is None


def test_collect_gradients_groups_complete_stops_by_id():
    entries = [
        _entry("a", "Gradient/2/End: #0000FF"),
        _entry("b", "Gradient/2/Start: #FF0000"),
        _entry("c", "Gradient/2/Middle: #00FF00"),
        _entry("d", "Gradient/1/Start: #111111"),
        _entry("e", "Gradient/1/Middle: #222222"),
        _entry("f", "Gradient/1/End: #333333"),
        _entry("g", "plain color"),
    ]
    assert collect_gradients(entries) == [
        Gradient(id=1, colors=("#111111", "#222222", "#333333")),
        Gradient(id=2, colors=("#FF0000", "#00FF00", "#0000FF")),
    ]


def test_incomplete_gradients_are_skipped():
    entries = [
        _entry("a", "Gradient/5/Start: #FF0000"),
        _entry("b", "Gradient/5/End: #0000FF"),
    ]
    assert collect_gradients(entries) == []


def test_gradient_order_is_its_id():
    assert Gradient(id=7, colors=()).order == 7
