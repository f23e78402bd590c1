# -*- coding: utf-8 -*-
"""
PNG IO Tests - Unit tests for PngReader and PngWriter.

Tests 8-bit grayscale round trips and rejection of unsupported images.

Dependencies
------------
pytest
Pillow

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import numpy as np
import pytest

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

from ijstretch.exceptions import ValidationError

pytestmark = pytest.mark.skipif(
    not _HAS_PIL, reason="Pillow not installed"
)


class TestPngWriter:
    """Grayscale PNG write tests."""

    def test_write_uint8_roundtrip(self, tmp_path):
        """Write uint8 grayscale, read back with Pillow, verify equality."""
        from ijstretch.IO.png import PngWriter

        data = np.random.randint(0, 256, (32, 48), dtype=np.uint8)
        filepath = tmp_path / "gray.png"

        with PngWriter(filepath) as writer:
            writer.write(data)

        with Image.open(str(filepath)) as img:
            assert img.mode == 'L'
            result = np.array(img)
        np.testing.assert_array_equal(result, data)

    def test_rejects_float(self, tmp_path):
        from ijstretch.IO.png import PngWriter

        with PngWriter(tmp_path / "f.png") as writer:
            with pytest.raises(ValidationError, match="uint8"):
                writer.write(np.zeros((4, 4), dtype=np.float32))

    def test_rejects_rgb(self, tmp_path):
        from ijstretch.IO.png import PngWriter

        with PngWriter(tmp_path / "rgb.png") as writer:
            with pytest.raises(ValidationError, match="2D"):
                writer.write(np.zeros((4, 4, 3), dtype=np.uint8))


class TestPngReader:
    """Grayscale PNG read tests."""

    def test_read_full(self, tmp_path):
        from ijstretch.IO.png import PngReader

        data = np.arange(256, dtype=np.uint8).reshape(16, 16)
        filepath = tmp_path / "ramp.png"
        Image.fromarray(data).save(str(filepath))

        with PngReader(filepath) as reader:
            assert (reader.metadata['rows'], reader.metadata['cols']) == (16, 16)
            assert reader.metadata['mode'] == 'L'
            result = reader.read_full()

        np.testing.assert_array_equal(result, data)
        assert result.flags.writeable

    def test_rejects_rgb(self, tmp_path):
        from ijstretch.IO.png import PngReader

        filepath = tmp_path / "rgb.png"
        Image.fromarray(np.zeros((4, 4, 3), dtype=np.uint8)).save(str(filepath))

        with pytest.raises(ValidationError, match="grayscale"):
            PngReader(filepath)

    def test_missing_file(self, tmp_path):
        from ijstretch.IO.png import PngReader

        with pytest.raises(FileNotFoundError):
            PngReader(tmp_path / "missing.png")
