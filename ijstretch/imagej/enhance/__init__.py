"""ImageJ Process > Enhance Contrast - Contrast and intensity transforms."""
from ijstretch.imagej.enhance.contrast_stretch import (
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
