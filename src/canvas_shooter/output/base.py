"""Base classes for animation output providers."""

from abc import ABC, abstractmethod
from io import BytesIO
from typing import Iterator

from PIL import Image


class OutputProvider(ABC):
    """Encodes rendered replay frames into a single animated image."""

    def __init__(self, path: str = ""):
        self.path = path

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``gif`` or ``webp``)."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        """
        Encode frames into the output format.

        Args:
            frames: Rendered frames in playback order
            frame_duration: Frame duration in milliseconds

        Returns:
            Encoded animation, or empty bytes when there are no frames
        """
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=frame_duration,
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()

    def write(self, data: bytes) -> None:
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)
