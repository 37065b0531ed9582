"""Style naming constants."""

from __future__ import annotations

THEME_SEGMENT = "Theme"
NAME_SEPARATOR = "/"

ORDINAL_VALUES: dict[str, int] = {
    "First": 1,
    "Second": 2,
    "Third": 3,
    "Fourth": 4,
    "Fifth": 5,
    "Sixth": 6,
    "Seventh": 7,
    "Eighth": 8,
    "Ninth": 9,
    "Tenth": 10,
    "Eleventh": 11,
    "Twelfth": 12,
    "Thirteenth": 13,
    "Fourteenth": 14,
    "Fifteenth": 15,
    "Sixteenth": 16,
    "Seventeenth": 17,
    "Eighteenth": 18,
    "Nineteenth": 19,
    "Twentieth": 20,
    "Thirtieth": 30,
    "Fortieth": 40,
    "Fiftieth": 50,
    "Sixtieth": 60,
    "Seventieth": 70,
    "Eightieth": 80,
    "Ninetieth": 90,
    "Hundredth": 100,
    "Thousandth": 1000,
}

SCALE_VALUES: frozenset[int] = frozenset({100, 1000})

DEFAULT_SYSTEM_THEMES: tuple[str, ...] = ("Light", "Dark")

OPTIONS_ENUM_NAME = "ThemeColorType"
SCHEME_PROTOCOL_NAME = "ColorScheme"
GRADIENTS_NAME = "Gradients"
GRADIENT_PREFIX = "Gradient/"
GRADIENT_STOPS: tuple[str, ...] = ("Start", "Middle", "End")
