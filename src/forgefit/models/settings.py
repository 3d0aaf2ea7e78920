"""App display settings."""

from dataclasses import dataclass, fields
from enum import Enum


class Language(str, Enum):
    SPANISH = "es"
    ENGLISH = "en"


class FontFamily(str, Enum):
    DEFAULT = "default"
    ROUNDED = "rounded"
    MODERN = "modern"
    CLASSIC = "classic"


class ThemeAccent(str, Enum):
    CARMINE = "carmine"
    NAVY = "navy"
    BLACK = "black"
    FOREST = "forest"


class XpBarTheme(str, Enum):
    MINIMALIST = "minimalist"
    NEON = "neon"
    GRADIENT = "gradient"
    CLASSIC = "classic"
    CYBER = "cyber"


class TextColorScheme(str, Enum):
    WHITE_BLACK = "white-black"
    RED_BLUE = "red-blue"


DEFAULT_XP_BAR_FILL_COLOR = "#FFD700"

# dataclass field -> stored key
_STORAGE_KEYS = {
    "language": "language",
    "font_family": "fontFamily",
    "theme_accent": "themeAccent",
    "xp_bar_theme": "xpBarTheme",
    "xp_bar_fill_color": "xpBarFillColor",
    "text_color_scheme": "textColorScheme",
}


def _coerce(enum_cls: type[Enum], value, default: Enum) -> Enum:
    try:
        return enum_cls(value)
    except ValueError:
        return default


@dataclass
class AppSettings:
    """User-facing preferences. Unknown stored values fall back per field."""

    language: Language = Language.SPANISH
    font_family: FontFamily = FontFamily.DEFAULT
    theme_accent: ThemeAccent = ThemeAccent.CARMINE
    xp_bar_theme: XpBarTheme = XpBarTheme.GRADIENT
    xp_bar_fill_color: str = DEFAULT_XP_BAR_FILL_COLOR
    text_color_scheme: TextColorScheme = TextColorScheme.WHITE_BLACK

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {}
        for name, key in _STORAGE_KEYS.items():
            value = getattr(self, name)
            data[key] = value.value if isinstance(value, Enum) else value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from a possibly partial or stale stored dictionary."""
        defaults = cls()
        fill_color = data.get("xpBarFillColor")
        if not isinstance(fill_color, str) or not fill_color.strip():
            fill_color = DEFAULT_XP_BAR_FILL_COLOR

        return cls(
            language=_coerce(Language, data.get("language"), defaults.language),
            font_family=_coerce(FontFamily, data.get("fontFamily"), defaults.font_family),
            theme_accent=_coerce(ThemeAccent, data.get("themeAccent"), defaults.theme_accent),
            xp_bar_theme=_coerce(XpBarTheme, data.get("xpBarTheme"), defaults.xp_bar_theme),
            xp_bar_fill_color=fill_color,
            text_color_scheme=_coerce(
                TextColorScheme, data.get("textColorScheme"), defaults.text_color_scheme
            ),
        )
