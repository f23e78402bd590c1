# -*- coding: utf-8 -*-
"""
ijstretch - Saturated auto-contrast stretching for 8-bit grayscale images.

A NumPy port of the ImageJ saturated contrast stretch: the input intensity
bounds are found from the image histogram for a chosen saturation
percentage, then every pixel is linearly remapped onto an output range and
clamped to ``[0, 255]``. Includes an interactive plugin runner and a
command-line host operating on PNG files.

Dependencies
------------
numpy
Pillow (PNG IO only)

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

__version__ = "0.1.0"
__author__ = "Duane Smalley"

from ijstretch.exceptions import (
    IjStretchError,
    ValidationError,
    InvalidSaturation,
    InvalidExplicitBounds,
    ProcessorError,
    DegenerateRange,
    DependencyError,
)
from ijstretch.imagej import (
    BoundPair,
    ContrastStretch,
    compute_histogram,
    find_bounds,
    remap,
)

__all__ = [
    'IjStretchError',
    'ValidationError',
    'InvalidSaturation',
    'InvalidExplicitBounds',
    'ProcessorError',
    'DegenerateRange',
    'DependencyError',
    'BoundPair',
    'ContrastStretch',
    'compute_histogram',
    'find_bounds',
    'remap',
]
