"""Tests for stylegen.render."""

from __future__ import annotations

from pathlib import Path

from stylegen.core.aggregator import aggregate
from stylegen.core.gradients import Gradient
from stylegen.core.models import ColorValue, FontEntry, RawStyle, StyleType, ThemeLayers
from stylegen.core.naming import resolve_names
from stylegen.render.android import render_android_colors
from stylegen.render.formatting import (
    android_hex_color,
    comment_text,
    swift_font_weight,
    swift_system_font,
    swift_ui_color,
    write_text,
)
from stylegen.render.ios import render_fonts, render_gradients, render_scheme, render_theme_class

RED = ColorValue(1.0, 0.0, 0.0, 1.0)
HALF_RED = ColorValue(1.0, 0.0, 0.0, 0.5)


def _aggregate(names: list[str]):
    styles = {
        f"S:{index}": RawStyle(key=f"k{index}", name=name, style_type=StyleType.FILL)
        for index, name in enumerate(names)
    }
    colors = {style_id: RED for style_id in styles}
    return aggregate(styles, colors.get, {}.get)


def _themed_layers():
    catalog = _aggregate(
        [
            "Acme/Light/Theme/ThemeSecond/Primary",
            "Acme/Light/Theme/ThemeFirst/Primary",
            "Acme/Light/Button",
        ]
    )
    layers = catalog.partition("acme", "Light")
    assert layers is not None
    return layers, resolve_names(catalog.colors)


class TestFormatting:
    def test_android_hex_color(self):
        assert android_hex_color(RED) == "#FFFF0000"
        assert android_hex_color(HALF_RED) == "#80FF0000"
        assert android_hex_color(ColorValue(1.5, -0.2, 0.0, 1.0)) == "#FFFF0000"

    def test_swift_ui_color(self):
        assert swift_ui_color(HALF_RED) == "UIColor(red: 1.000, green: 0.000, blue: 0.000, alpha: 0.500)"

    def test_swift_ui_color_extended_srgb(self):
        assert swift_ui_color(HALF_RED, extended_srgb=True) == (
            "UIColor(cgColor: CGColor(colorSpace: CGColorSpace(name: CGColorSpace.extendedSRGB)!, "
            "components: [1.000, 0.000, 0.000, 0.500])!)"
        )

    def test_swift_font_weight(self):
        assert swift_font_weight(100) == "ultraLight"
        assert swift_font_weight(400) == "regular"
        assert swift_font_weight(650) == "bold"
        assert swift_font_weight(950) == "black"

    def test_swift_system_font(self):
        style = RawStyle(key="b", name="Body", style_type=StyleType.TEXT)
        font = FontEntry(source_style=style, font_family="Inter", font_weight=600, font_size=14.5)
        assert swift_system_font(font) == "UIFont.systemFont(ofSize: 14.5, weight: .semibold)"

    def test_comment_text(self):
        assert comment_text("Acme/Light/ Button \n Big") == "Acme/Light/ Button Big"
        assert comment_text("a--b") == "a- -b"

    def test_comment_text_never_closes_early(self):
        assert comment_text("a---b") == "a- - -b"
        assert comment_text("Acme/Light/Red-") == "Acme/Light/Red- "
        assert comment_text("Acme/Light/Red--") == "Acme/Light/Red- - "

    def test_write_text_replaces_file(self, tmp_path: Path):
        output = tmp_path / "nested" / "out.swift"
        write_text("first", output)
        write_text("second", output)
        assert output.read_text(encoding="utf-8") == "second"


def test_render_android_colors():
    catalog = _aggregate(["Acme/Light/Red1", "Acme/Light/Blue"])
    names = resolve_names(catalog.colors, trim_trailing_digits=True)
    text = render_android_colors(catalog.colors, names)

    assert text.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert "    <!--Acme/Light/Red1-->" in text
    assert '    <color name="red">#FFFF0000</color>' in text
    assert '    <color name="blue">#FFFF0000</color>' in text
    assert text.index('name="blue"') < text.index('name="red"')
    assert text.endswith("</resources>\n")


class TestThemeClass:
    def test_declares_unique_colors_once(self):
        layers, names = _themed_layers()
        text = render_theme_class("LightColorScheme", layers, names)

        assert "public class LightColorScheme: ColorScheme {" in text
        assert "    public var themeColorType: ThemeColorType" in text
        assert text.count("public var primary = UIColor()") == 1
        assert "public var button = UIColor()" in text

    def test_switch_follows_variant_order(self):
        layers, names = _themed_layers()
        text = render_theme_class("LightColorScheme", layers, names)

        assert "        case .first:\n            setupFirstThemeColorType()" in text
        assert text.index("case .first:") < text.index("case .second:")
        assert "private func setupSecondThemeColorType() {" in text
        assert "    private func setupBaseColors() {\n        button = UIColor(" in text
        assert text.rstrip().endswith("}")

    def test_no_variants_skips_switch(self):
        catalog = _aggregate(["Acme/Light/Button"])
        layers = catalog.partition("acme", "Light")
        text = render_theme_class("LightColorScheme", layers, resolve_names(catalog.colors))
        assert "switch" not in text
        assert "setupBaseColors()" in text

    def test_empty_layers(self):
        text = render_theme_class("DarkColorScheme", ThemeLayers(), {})
        assert "public class DarkColorScheme: ColorScheme {" in text


def test_render_scheme():
    layers, names = _themed_layers()
    text = render_scheme(layers, names)

    assert "public enum ThemeColorType: String, CaseIterable {" in text
    assert '    case first = "ThemeFirst"' in text
    assert '    case second = "ThemeSecond"' in text
    assert "    /// Acme/Light/Button" in text
    assert "    var primary: UIColor { get }" in text
    assert "public enum ColorName: String {" in text
    assert "        case .primary: return primary" in text


def test_render_fonts_only_text_styles():
    body = FontEntry(
        source_style=RawStyle(key="b", name="Body", style_type=StyleType.TEXT),
        font_family="Inter",
        font_weight=400,
        font_size=16,
    )
    fill = FontEntry(
        source_style=RawStyle(key="f", name="Filled", style_type=StyleType.FILL),
        font_family="Inter",
        font_weight=400,
        font_size=16,
    )
    text = render_fonts([body, fill], {body: "body", fill: "filled"})
    assert "public extension UIFont {" in text
    assert "    // Body" in text
    assert "    static let body = UIFont.systemFont(ofSize: 16, weight: .regular)" in text
    assert "filled" not in text


def test_render_gradients():
    text = render_gradients(
        "Gradients",
        {
            "Light": [Gradient(id=1, colors=("#111111", "#222222", "#333333"))],
            "Dark": [],
        },
    )
    assert "public class Gradients {" in text
    assert "    public static var light: [GradientModel] = [" in text
    assert '        .init(id: "1", order: 1, colors: ["#111111", "#222222", "#333333"]),' in text
    assert "    public static var dark: [GradientModel] = [" in text
    assert "public class GradientModel {" in text


def test_android_comment_for_trailing_hyphen():
    catalog = _aggregate(["Acme/Light/Red-"])
    text = render_android_colors(catalog.colors, resolve_names(catalog.colors))
    assert "    <!--Acme/Light/Red- -->" in text
    assert "--->" not in text
