"""
Tests for core data types: ImageData, Pixel, Image.
"""

import numpy as np
import pytest

from compositor.core.data_types import Image, ImageData, Pixel
from compositor.core.errors import ConsumedBufferError


class TestImageData:
    """Tests for ImageData class."""

    def test_creation_from_list(self):
        """Test creating ImageData from a Python list."""
        buf = ImageData([1.0, 0.5, 0.0, 1.0])

        assert len(buf) == 4
        assert buf.data.dtype == np.float32
        assert list(buf) == [1.0, 0.5, 0.0, 1.0]

    def test_flattens_input(self):
        """Test that multi-dimensional arrays are flattened row-major."""
        buf = ImageData(np.arange(8, dtype=np.float64).reshape(2, 1, 4))

        assert buf.data.shape == (8,)
        assert buf.data.dtype == np.float32
        np.testing.assert_array_equal(buf.data, np.arange(8))

    def test_take_consumes(self):
        """Test that take() hands over the array and consumes the buffer."""
        buf = ImageData([0.25, 0.75])

        data = buf.take()

        np.testing.assert_array_equal(data, [0.25, 0.75])
        assert buf.consumed

    def test_access_after_take_raises(self):
        """Test that a consumed buffer refuses access."""
        buf = ImageData([0.25])
        buf.take()

        with pytest.raises(ConsumedBufferError):
            buf.take()
        with pytest.raises(ConsumedBufferError):
            len(buf)
        with pytest.raises(ConsumedBufferError):
            _ = buf.data

    def test_construction_copies_array(self):
        """Test a buffer built from another buffer's samples does not share them."""
        first = ImageData(np.array([1.0, 2.0], dtype=np.float32))
        second = ImageData(first.data)

        second.data[0] = 99.0

        assert first.data[0] == 1.0

    def test_construction_copies_caller_array(self):
        """Test the caller's array is not aliased."""
        source = np.zeros(3, dtype=np.float32)
        buf = ImageData(source)

        source[1] = 5.0

        assert buf.data[1] == 0.0

    def test_from_owned_adopts_array(self):
        """Test from_owned() passes ownership without copying."""
        source = ImageData([0.25, 0.5])
        taken = source.take()

        adopted = ImageData.from_owned(taken)

        assert adopted.data is taken
        assert source.consumed

    def test_from_owned_converts(self):
        """Test from_owned() still normalizes dtype and shape."""
        adopted = ImageData.from_owned(np.ones((2, 2), dtype=np.float64))

        assert adopted.data.dtype == np.float32
        assert adopted.data.shape == (4,)

    def test_copy_is_independent(self):
        """Test copy() does not share samples."""
        buf = ImageData([0.0, 0.0])
        clone = buf.copy()

        clone.data[0] = 1.0

        assert buf.data[0] == 0.0

    def test_repr(self):
        """Test repr for live and consumed buffers."""
        buf = ImageData([0.0, 1.0])
        assert "len=2" in repr(buf)

        buf.take()
        assert repr(buf) == "ImageData(consumed)"


class TestImage:
    """Tests for Image class."""

    def make_image(self):
        # 2x2 image, pixel (x, y) has red = x, green = y
        samples = []
        for y in range(2):
            for x in range(2):
                samples.extend([x * 0.5, y * 0.5, 0.25, 1.0])
        return Image(ImageData(samples), width=2, height=2)

    def test_dimensions(self):
        """Test width and height."""
        image = self.make_image()

        assert image.width == 2
        assert image.height == 2

    def test_size_mismatch_rejected(self):
        """Test that sample count must match the dimensions."""
        with pytest.raises(ValueError):
            Image(ImageData([0.0] * 15), width=2, height=2)

    def test_pixel_at(self):
        """Test reading pixels row-major."""
        image = self.make_image()

        assert image.pixel_at(0, 0) == Pixel(0.0, 0.0, 0.25, 1.0)
        assert image.pixel_at(1, 0) == Pixel(0.5, 0.0, 0.25, 1.0)
        assert image.pixel_at(0, 1) == Pixel(0.0, 0.5, 0.25, 1.0)

    def test_set_pixel(self):
        """Test writing a pixel."""
        image = self.make_image()

        image.set_pixel(1, 1, Pixel(0.125, 0.25, 0.5, 0.0))

        assert image.pixel_at(1, 1) == Pixel(0.125, 0.25, 0.5, 0.0)
        np.testing.assert_array_equal(image.data.data[12:16], [0.125, 0.25, 0.5, 0.0])

    def test_set_rgba(self):
        """Test writing a pixel from channels."""
        image = self.make_image()

        image.set_rgba(0, 1, 1.0, 1.0, 1.0, 0.5)

        assert image.pixel_at(0, 1) == Pixel(1.0, 1.0, 1.0, 0.5)

    def test_out_of_bounds(self):
        """Test that out-of-bounds coordinates raise."""
        image = self.make_image()

        with pytest.raises(IndexError):
            image.pixel_at(2, 0)
        with pytest.raises(IndexError):
            image.set_rgba(0, -1, 0.0, 0.0, 0.0, 0.0)

    def test_as_array_is_view(self):
        """Test that as_array() writes through to the samples."""
        image = self.make_image()

        view = image.as_array()
        assert view.shape == (2, 2, 4)
        view[1, 0, 0] = 0.75

        assert image.pixel_at(0, 1).r == 0.75

    def test_as_raw(self):
        """Test byte conversion floors and saturates."""
        image = Image(ImageData([0.0, 0.5, 1.0, -0.25]), width=1, height=1)

        assert image.as_raw() == bytes([0, 128, 255, 0])

    def test_from_rgba8(self):
        """Test byte decoding divides by 256."""
        image = Image.from_rgba8(bytes([0, 64, 128, 255]), width=1, height=1)

        assert image.pixel_at(0, 0) == Pixel(0.0, 0.25, 0.5, 255 / 256)

    def test_rgba8_bytes_survive(self):
        """Test that decoded bytes encode back unchanged."""
        raw = bytes(range(0, 256, 16))
        image = Image.from_rgba8(raw, width=2, height=2)

        assert image.as_raw() == raw

    def test_into_image_data(self):
        """Test handing the buffer to a node."""
        image = self.make_image()

        assert image.into_image_data() is image.data
