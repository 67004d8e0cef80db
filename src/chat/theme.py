"""Light/dark theme state and the colour palette each one maps to."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class ThemePalette(BaseModel):
    """Tailwind classes the renderer reads for a theme."""

    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    text: str


PALETTES: dict[Theme, ThemePalette] = {
    Theme.LIGHT: ThemePalette(
        primary="bg-white",
        secondary="bg-gray-100",
        accent="bg-cyan-500",
        text="text-gray-800",
    ),
    Theme.DARK: ThemePalette(
        primary="bg-gray-900",
        secondary="bg-gray-800",
        accent="bg-cyan-500",
        text="text-gray-100",
    ),
}


def palette_for(theme: Theme) -> ThemePalette:
    return PALETTES[theme]
