"""Rendering configuration and theming."""

from dataclasses import dataclass

from .color_table import Color


@dataclass(frozen=True)
class RenderContext:
    """Colors and stroke settings shared by a renderer."""

    background_color: Color
    line_width: int = 1

    @classmethod
    def darkmode(cls) -> "RenderContext":
        return cls(background_color=(13, 17, 23))

    @classmethod
    def lightmode(cls) -> "RenderContext":
        return cls(background_color=(238, 238, 238))

    @classmethod
    def from_theme(cls, theme: str) -> "RenderContext":
        """Look up a theme by name ("dark" or "light")."""
        themes = {"dark": cls.darkmode, "light": cls.lightmode}
        factory = themes.get(theme.lower())
        if factory is None:
            available = ", ".join(themes)
            raise ValueError(f"Unknown theme '{theme}'. Available: {available}")
        return factory()
