# -*- coding: utf-8 -*-
"""
IO Base Classes - Reader and writer interfaces for stretch rasters.

A reader opens a file, checks at construction that it holds something the
stretch can use, and returns the pixels from ``read_full``. A writer
accepts a finished raster. Both work as context managers so the CLI can
treat every format the same way.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

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

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np


class ImageReader(ABC):
    """Read a single raster from *filepath*.

    Attributes
    ----------
    filepath : Path
        Source file.
    metadata : Dict[str, Any]
        Format details filled in by ``_load_metadata``.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    """

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File not found: {self.filepath}")
        self.metadata: Dict[str, Any] = {}
        self._load_metadata()

    @abstractmethod
    def _load_metadata(self) -> None:
        """Populate ``metadata`` and reject unsupported files."""

    @abstractmethod
    def read_full(self) -> np.ndarray:
        """Return the whole image as a writable array."""

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class ImageWriter(ABC):
    """Write a finished raster to *filepath*."""

    def __init__(self, filepath: Union[str, Path]) -> None:
        self.filepath = Path(filepath)

    @abstractmethod
    def write(self, data: np.ndarray) -> None:
        """Encode *data*; raise ``ValidationError`` if the format cannot hold it."""

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
