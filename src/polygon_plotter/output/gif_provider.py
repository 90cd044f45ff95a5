"""GIF output provider."""

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    """Palette GIF; every frame replaces the previous one entirely."""

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 2}
