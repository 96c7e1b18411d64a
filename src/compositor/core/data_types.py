"""
Core data types for the compositor.

Provides ImageData (the flat float sample buffer exchanged between nodes),
plus Pixel and Image for hosts that need width/height-aware access.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import NDArray

from compositor.config import RGBA_CHANNELS
from compositor.core.errors import ConsumedBufferError


class ImageData:
    """
    Owned flat buffer of float32 samples.

    Samples are channel-interleaved (RGBA per pixel) and row-major. No
    width or height is carried; shape agreement between connected nodes
    is the caller's responsibility.

    Ownership moves with take(): the buffer hands over its array and
    refuses any further access. Nodes take their inputs when they execute,
    so a buffer is never mutated from two places.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Sequence[float] | NDArray) -> None:
        self._data: NDArray[np.float32] | None = np.array(
            data, dtype=np.float32, copy=True
        ).reshape(-1)

    @classmethod
    def from_owned(cls, data: NDArray) -> ImageData:
        """
        Wrap an array without copying it.

        The caller gives up the array, e.g. one returned by take() or a
        freshly computed result. Arrays that are not contiguous float32
        are still converted.

        Args:
            data: Array to adopt

        Returns:
            New ImageData owning the array
        """
        buffer = cls.__new__(cls)
        buffer._data = np.ascontiguousarray(data, dtype=np.float32).reshape(-1)
        return buffer

    @property
    def consumed(self) -> bool:
        """Whether the samples have been taken out of this buffer."""
        return self._data is None

    @property
    def data(self) -> NDArray[np.float32]:
        """The sample array."""
        if self._data is None:
            raise ConsumedBufferError("ImageData has already been consumed")
        return self._data

    def take(self) -> NDArray[np.float32]:
        """
        Move the samples out of this buffer.

        Returns:
            The sample array; this buffer is consumed afterwards
        """
        data = self.data
        self._data = None
        return data

    def copy(self) -> ImageData:
        """Create an independent copy of this buffer."""
        return ImageData(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:
        return (float(sample) for sample in self.data)

    def __repr__(self) -> str:
        if self._data is None:
            return "ImageData(consumed)"
        return f"ImageData(len={len(self._data)}, dtype={self._data.dtype})"


@dataclass
class Pixel:
    """A single RGBA pixel with float channels."""

    r: float
    g: float
    b: float
    a: float


class Image:
    """
    RGBA image: an ImageData plus its dimensions.

    Attributes:
        data: Flat RGBA samples, width * height * 4 long
    """

    CHANNELS = RGBA_CHANNELS

    def __init__(self, data: ImageData, width: int, height: int) -> None:
        expected = width * height * self.CHANNELS
        if len(data) != expected:
            raise ValueError(
                f"Image of {width}x{height} needs {expected} samples, got {len(data)}"
            )
        self.data = data
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        """Image width in pixels."""
        return self._width

    @property
    def height(self) -> int:
        """Image height in pixels."""
        return self._height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self._width}x{self._height} image"
            )
        return (self._width * y + x) * self.CHANNELS

    def pixel_at(self, x: int, y: int) -> Pixel:
        """Read the pixel at column x, row y."""
        i = self._offset(x, y)
        r, g, b, a = self.data.data[i : i + self.CHANNELS]
        return Pixel(float(r), float(g), float(b), float(a))

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Overwrite the pixel at column x, row y."""
        self.set_rgba(x, y, pixel.r, pixel.g, pixel.b, pixel.a)

    def set_rgba(self, x: int, y: int, r: float, g: float, b: float, a: float) -> None:
        """Overwrite the pixel at column x, row y from separate channels."""
        i = self._offset(x, y)
        self.data.data[i : i + self.CHANNELS] = (r, g, b, a)

    def as_array(self) -> NDArray[np.float32]:
        """Mutable (height, width, 4) view over the samples."""
        return self.data.data.reshape(self._height, self._width, self.CHANNELS)

    def as_raw(self) -> bytes:
        """
        Convert samples to 8-bit RGBA bytes.

        Each sample maps to floor(sample * 256), saturated into [0, 255].
        """
        scaled = np.floor(np.nan_to_num(self.data.data, nan=0.0) * 256.0)
        return np.clip(scaled, 0, 255).astype(np.uint8).tobytes()

    @classmethod
    def from_rgba8(cls, raw: bytes | NDArray[np.uint8], width: int, height: int) -> Image:
        """
        Create an image from 8-bit RGBA bytes.

        Args:
            raw: width * height * 4 bytes, row-major
            width: Image width in pixels
            height: Image height in pixels

        Returns:
            New Image with each byte divided by 256
        """
        samples = np.frombuffer(bytes(raw), dtype=np.uint8).astype(np.float32) / 256.0
        return cls(ImageData.from_owned(samples), width, height)

    def into_image_data(self) -> ImageData:
        """Hand the sample buffer over, for feeding into a node."""
        return self.data

    def __repr__(self) -> str:
        return f"Image(width={self._width}, height={self._height})"
