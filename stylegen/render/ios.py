"""Swift source rendering for iOS themes, fonts and gradients."""

from __future__ import annotations

from typing import Mapping, Sequence

from stylegen.core.constants import OPTIONS_ENUM_NAME, SCHEME_PROTOCOL_NAME
from stylegen.core.gradients import Gradient
from stylegen.core.models import ColorEntry, FontEntry, StyleType, ThemeLayers
from stylegen.core.naming import lower_first
from stylegen.render.formatting import (
    INDENT,
    SWIFT_FILE_PREFIX,
    comment_text,
    swift_system_font,
    swift_ui_color,
)

_OPTION_VAR = lower_first(OPTIONS_ENUM_NAME)


def render_theme_class(
    class_name: str,
    layers: ThemeLayers,
    names: Mapping[ColorEntry, str],
    *,
    extended_srgb: bool = False,
) -> str:
    """Render one system theme as a class conforming to the scheme protocol.

    Properties are declared once; the initializer runs the setup function of
    the selected variant and then assigns the base colors.
    """
    lines = [SWIFT_FILE_PREFIX]
    lines.append(f"public class {class_name}: {SCHEME_PROTOCOL_NAME} {{")
    lines.append(f"{INDENT}public var {_OPTION_VAR}: {OPTIONS_ENUM_NAME}\n")
    for entry in layers.unique_colors():
        lines.append(f"{INDENT}public var {names[entry]} = UIColor()")
    lines.append("")

    lines.append(f"{INDENT}public init(with {_OPTION_VAR}: {OPTIONS_ENUM_NAME}) {{")
    lines.append(f"{INDENT * 2}self.{_OPTION_VAR} = {_OPTION_VAR}")
    if layers.variant_order:
        lines.append(f"{INDENT * 2}switch {_OPTION_VAR} {{")
        for variant in layers.variant_order:
            lines.append(f"{INDENT * 2}case .{variant.case_key.lower()}:")
            lines.append(f"{INDENT * 3}setup{variant.case_key}{OPTIONS_ENUM_NAME}()")
        lines.append(f"{INDENT * 2}}}")
    lines.append(f"{INDENT * 2}setupBaseColors()")
    lines.append(f"{INDENT}}}")
    lines.append("")

    lines.extend(_setup_function("setupBaseColors", layers.base_colors, names, extended_srgb))
    for variant in layers.variant_order:
        lines.append("")
        lines.extend(
            _setup_function(
                f"setup{variant.case_key}{OPTIONS_ENUM_NAME}",
                layers.variant_colors(variant.raw_key),
                names,
                extended_srgb,
            )
        )
    lines.append("}\n")
    return "\n".join(lines)


def _setup_function(
    func_name: str,
    entries: Sequence[ColorEntry],
    names: Mapping[ColorEntry, str],
    extended_srgb: bool,
) -> list[str]:
    lines = [f"{INDENT}private func {func_name}() {{"]
    for entry in entries:
        lines.append(f"{INDENT * 2}{names[entry]} = {swift_ui_color(entry.color, extended_srgb=extended_srgb)}")
    lines.append(f"{INDENT}}}")
    return lines


def render_scheme(layers: ThemeLayers, names: Mapping[ColorEntry, str]) -> str:
    """Render the variant enum, the scheme protocol and the color name enum."""
    unique_colors = layers.unique_colors()
    lines = [SWIFT_FILE_PREFIX]

    lines.append(f"public enum {OPTIONS_ENUM_NAME}: String, CaseIterable {{")
    for variant in layers.variant_order:
        lines.append(f'{INDENT}case {variant.case_key.lower()} = "{variant.raw_key}"')
    lines.append("}\n")

    lines.append(f"public protocol {SCHEME_PROTOCOL_NAME} {{")
    lines.append(f"{INDENT}var {_OPTION_VAR}: {OPTIONS_ENUM_NAME} {{ get }}\n")
    for entry in unique_colors:
        lines.append(f"{INDENT}/// {comment_text(entry.source_style.name)}")
        lines.append(f"{INDENT}var {names[entry]}: UIColor {{ get }}")
    lines.append("}\n")

    lines.append("public enum ColorName: String {")
    for entry in unique_colors:
        lines.append(f"{INDENT}case {names[entry]}")
    lines.append("}\n")

    lines.append(f"extension {SCHEME_PROTOCOL_NAME} {{")
    lines.append(f"{INDENT}public subscript(colorName: ColorName) -> UIColor {{")
    lines.append(f"{INDENT * 2}switch colorName {{")
    for entry in unique_colors:
        lines.append(f"{INDENT * 2}case .{names[entry]}: return {names[entry]}")
    lines.append(f"{INDENT * 2}}}")
    lines.append(f"{INDENT}}}")
    lines.append("}\n")
    return "\n".join(lines)


def render_fonts(fonts: Sequence[FontEntry], names: Mapping[FontEntry, str]) -> str:
    lines = [SWIFT_FILE_PREFIX]
    lines.append("public extension UIFont {")
    for font in fonts:
        if font.source_style.style_type is not StyleType.TEXT:
            continue
        lines.append(f"{INDENT}// {comment_text(font.source_style.name)}")
        lines.append(f"{INDENT}static let {names[font]} = {swift_system_font(font)}")
    lines.append("}\n")
    return "\n".join(lines)


def _swift_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_gradients(class_name: str, gradients: Mapping[str, Sequence[Gradient]]) -> str:
    """Render one static gradient list per system theme."""
    lines = [SWIFT_FILE_PREFIX]
    lines.append(f"public class {class_name} {{")
    for index, (system_theme, items) in enumerate(gradients.items()):
        if index:
            lines.append("")
        lines.append(f"{INDENT}public static var {lower_first(system_theme)}: [GradientModel] = [")
        for gradient in items:
            colors = ", ".join(_swift_string(color) for color in gradient.colors)
            lines.append(
                f'{INDENT * 2}.init(id: "{gradient.id}", order: {gradient.order}, colors: [{colors}]),'
            )
        lines.append(f"{INDENT}]")
    lines.append("}")
    lines.append("")

    lines.append("public class GradientModel {")
    lines.append(f"{INDENT}public var id: String")
    lines.append(f"{INDENT}public var order: Int")
    lines.append(f"{INDENT}public var colors: [String]")
    lines.append("")
    lines.append(f"{INDENT}public init(id: String, order: Int, colors: [String]) {{")
    lines.append(f"{INDENT * 2}self.id = id")
    lines.append(f"{INDENT * 2}self.order = order")
    lines.append(f"{INDENT * 2}self.colors = colors")
    lines.append(f"{INDENT}}}")
    lines.append("}\n")
    return "\n".join(lines)
