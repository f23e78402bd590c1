# -*- coding: utf-8 -*-
"""
ImageJ Ports - Classic image processing algorithms ported from ImageJ.

Pure-NumPy reimplementations of ImageJ image processing algorithms. Each
class mirrors the original ImageJ behavior as closely as possible,
preserving default parameter values and algorithmic edge cases, and
inherits from ``ImageTransform``. Version strings mirror the ImageJ
release the port was derived from.

Components
----------
Contrast & Enhancement:
- ContrastStretch: Saturated linear stretch for 8-bit grayscale

Attribution
-----------
ImageJ is developed by Wayne Rasband at the U.S. National Institutes of Health.
ImageJ 1.x source code is in the public domain.

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

from ijstretch.imagej.enhance import (
    BoundPair,
    ContrastStretch,
    compute_histogram,
    find_bounds,
    remap,
)

__all__ = [
    'BoundPair',
    'ContrastStretch',
    'compute_histogram',
    'find_bounds',
    'remap',
]
