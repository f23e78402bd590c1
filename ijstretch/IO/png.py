# -*- coding: utf-8 -*-
"""
PNG Reader/Writer - Load and save 8-bit grayscale PNG images.

Reads 8-bit grayscale (mode ``'L'``) PNG files into 2D ``uint8`` arrays and
writes 2D ``uint8`` arrays back, using Pillow. Colour, palette, and 16-bit
images are rejected on read, since the contrast stretch only handles 8-bit
grayscale.

Dependencies
------------
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

# Standard library
import logging
from pathlib import Path
from typing import Union

# Third-party
import numpy as np

try:
    from PIL import Image
    _HAS_PIL = True
except ImportError:
    _HAS_PIL = False

# ijstretch internal
from ijstretch.exceptions import DependencyError, ValidationError
from ijstretch.IO.base import ImageReader, ImageWriter

logger = logging.getLogger(__name__)

GRAYSCALE_MODE = 'L'


def _require_pil() -> None:
    if not _HAS_PIL:
        raise DependencyError(
            "Pillow is required for PNG IO. "
            "Install with: pip install Pillow"
        )


class PngReader(ImageReader):
    """Read an 8-bit grayscale PNG file.

    Parameters
    ----------
    filepath : str or Path
        Input PNG file path.

    Raises
    ------
    DependencyError
        If Pillow is not installed.
    FileNotFoundError
        If the file does not exist.
    ValidationError
        If the image is not 8-bit grayscale.

    Examples
    --------
    >>> from ijstretch.IO.png import PngReader
    >>> with PngReader('input.png') as reader:
    ...     image = reader.read_full()
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        _require_pil()
        super().__init__(filepath)

    def _load_metadata(self) -> None:
        with Image.open(self.filepath) as img:
            self.metadata = {
                'format': img.format,
                'mode': img.mode,
                'rows': img.height,
                'cols': img.width,
            }
        if self.metadata['mode'] != GRAYSCALE_MODE:
            raise ValidationError(
                f"Expected 8-bit grayscale PNG (mode 'L'), got mode "
                f"{self.metadata['mode']!r} in {self.filepath}"
            )
        logger.debug("Opened %s: %dx%d", self.filepath,
                     self.metadata['rows'], self.metadata['cols'])

    def read_full(self) -> np.ndarray:
        """Read the image as a writable 2D ``uint8`` array.

        Returns
        -------
        np.ndarray
            Shape ``(rows, cols)``, dtype uint8.
        """
        with Image.open(self.filepath) as img:
            return np.array(img, dtype=np.uint8)


class PngWriter(ImageWriter):
    """Write 2D ``uint8`` arrays to grayscale PNG files.

    Parameters
    ----------
    filepath : str or Path
        Output PNG file path.

    Raises
    ------
    DependencyError
        If Pillow is not installed.

    Examples
    --------
    >>> from ijstretch.IO.png import PngWriter
    >>> with PngWriter('output.png') as writer:
    ...     writer.write(stretched)
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        _require_pil()
        super().__init__(filepath)

    def write(self, data: np.ndarray) -> None:
        """Write image data to a PNG file.

        Parameters
        ----------
        data : np.ndarray
            2D ``uint8`` array, shape ``(rows, cols)``.

        Raises
        ------
        ValidationError
            If the array is not 2D ``uint8``.
        """
        if data.ndim != 2:
            raise ValidationError(
                f"Expected 2D grayscale (rows, cols), got shape {data.shape}"
            )
        if data.dtype != np.uint8:
            raise ValidationError(
                f"Expected uint8 data for PNG output, got dtype {data.dtype}"
            )

        Image.fromarray(data).save(str(self.filepath), format='PNG')
        logger.debug("Wrote %s", self.filepath)
