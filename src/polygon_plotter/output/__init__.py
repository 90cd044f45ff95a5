"""Output providers for different animation formats."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .base import OutputProvider, PillowSequenceOutputProvider
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    media_type: str
    provider_class: type[OutputProvider[Any]]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "gif": OutputFormatSpec(
        extension=".gif",
        media_type="image/gif",
        provider_class=GifOutputProvider,
    ),
    "webp": OutputFormatSpec(
        extension=".webp",
        media_type="image/webp",
        provider_class=WebPOutputProvider,
    ),
}


def resolve_output_provider(file_path: str) -> OutputProvider[Any]:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    return _spec_for_path(file_path).provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def media_type_for_path(file_path: str) -> str:
    """Media type of the format selected by a file path."""
    return _spec_for_path(file_path).media_type


def _spec_for_path(file_path: str) -> OutputFormatSpec:
    ext = Path(file_path).suffix.lower()
    spec = _OUTPUT_FORMATS.get(ext.removeprefix("."))
    if spec is not None:
        return spec
    supported = ", ".join(s.extension for s in _OUTPUT_FORMATS.values())
    raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "PillowSequenceOutputProvider",
    "GifOutputProvider",
    "WebPOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
    "media_type_for_path",
]
