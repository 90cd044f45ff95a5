"""Base classes for animation encoders."""

from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import Generic, Iterator, TypeVar

from PIL import Image

FrameT = TypeVar("FrameT")


class OutputProvider(ABC, Generic[FrameT]):
    """Turns a stream of frames into the bytes of one animation file."""

    def __init__(self, path: str = ""):
        """
        Initialize the provider.

        Args:
            path: Destination file for write()
        """
        self.path = path

    @abstractmethod
    def encode(self, frames: Iterator[FrameT], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Frames in display order
            frame_duration: Milliseconds each frame stays on screen

        Returns:
            Encoded animation, or b"" when there are no frames
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """Write encoded data to self.path, creating missing parent directories."""
        if not self.path:
            raise ValueError("Output path not set")
        target = Path(self.path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)


class PillowSequenceOutputProvider(OutputProvider[Image.Image], ABC):
    """Encoder for the animated formats Pillow can save with save_all."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format name, e.g. ``gif``."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Extra keyword arguments for ``Image.save``."""
        return {}

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        first = next(frames, None)
        if first is None:
            return b""

        buffer = BytesIO()
        first.save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=list(frames),
            duration=max(1, frame_duration),
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()
