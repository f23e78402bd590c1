# -*- coding: utf-8 -*-
"""
Contrast Stretch - Saturated auto-contrast for 8-bit grayscale images.

Linearly stretches the intensities of an 8-bit grayscale image so that a
chosen fraction of pixels at each tail of the histogram saturates to the
output extremes. The input bounds are found with two independent
histogram scans (one from black upward, one from white downward); every
pixel is then remapped with a single affine transform, truncated to an
integer and clamped to ``[0, 255]``.

Particularly useful for:
- Low-contrast PAN and EO chips before visual inspection
- Normalizing microscopy frames with a few hot or dead pixels
- Stretching an image into a narrower output band (explicit bounds)

Attribution
-----------
Follows the behavior of ImageJ's Process > Enhance Contrast "saturated
pixels" stretch for 8-bit images (``ij/plugin/ContrastEnhancer.java``),
as exposed by a standalone 8-bit PlugInFilter. ImageJ 1.x source is in
the public domain.

Dependencies
------------
numpy

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

# Standard library
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Annotated, Any, Sequence, Union

# Third-party
import numpy as np

# ijstretch internal
from ijstretch.exceptions import (
    DegenerateRange,
    InvalidExplicitBounds,
    InvalidSaturation,
    ValidationError,
)
from ijstretch.image_processing.base import ImageTransform, processor_version
from ijstretch.image_processing.params import Desc, Range

logger = logging.getLogger(__name__)

BLACK = 0x00
WHITE = 0xFF
N_LEVELS = 256
MAX_SATURATION = 50.0


@dataclass(frozen=True)
class BoundPair:
    """Inclusive intensity interval ``[lo, hi]`` on the 8-bit scale.

    Used both for input bounds discovered from a histogram and for the
    output bounds a stretch maps onto. A pair with ``hi <= lo`` can be
    constructed (histogram scans may cross) but is not usable for a
    stretch; check :attr:`is_valid`.

    Attributes
    ----------
    lo : int
        Lower intensity, in ``[0, 255]``.
    hi : int
        Upper intensity, in ``[0, 255]``.
    """

    lo: int
    hi: int

    def __post_init__(self) -> None:
        for name in ('lo', 'hi'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(
                    f"BoundPair.{name} must be an integer, "
                    f"got {type(value).__name__}"
                )
            if not BLACK <= value <= WHITE:
                raise ValidationError(
                    f"BoundPair.{name} must be in [{BLACK}, {WHITE}], "
                    f"got {value}"
                )

    @property
    def span(self) -> int:
        """Signed width ``hi - lo``."""
        return self.hi - self.lo

    @property
    def is_valid(self) -> bool:
        """Whether the interval has positive width."""
        return self.hi > self.lo


FULL_RANGE = BoundPair(BLACK, WHITE)


def check_saturation(saturation: float) -> None:
    """Raise ``InvalidSaturation`` unless ``0 <= saturation < 50``."""
    if not 0.0 <= saturation < MAX_SATURATION:
        raise InvalidSaturation(
            f"Saturation must be in [0, {MAX_SATURATION:g}), got {saturation}"
        )


def check_output_bounds(new_min: int, new_max: int) -> BoundPair:
    """Validate explicit output bounds and return them as a ``BoundPair``.

    Raises
    ------
    InvalidExplicitBounds
        If either bound lies outside ``[0, 255]`` or ``new_min >= new_max``.
    """
    if not (BLACK <= new_min <= WHITE and BLACK <= new_max <= WHITE):
        raise InvalidExplicitBounds(
            f"Output bounds must be in [{BLACK}, {WHITE}], "
            f"got ({new_min}, {new_max})"
        )
    if new_min >= new_max:
        raise InvalidExplicitBounds(
            f"Output minimum ({new_min}) must be less than "
            f"maximum ({new_max})"
        )
    return BoundPair(int(new_min), int(new_max))


def _check_raster(raster: np.ndarray) -> None:
    if raster.ndim != 2:
        raise ValidationError(
            f"Expected 2D grayscale image, got shape {raster.shape}"
        )
    if raster.dtype != np.uint8:
        raise ValidationError(
            f"Expected 8-bit image (uint8), got dtype {raster.dtype}"
        )


def compute_histogram(raster: np.ndarray) -> np.ndarray:
    """Count pixels at each of the 256 intensity levels.

    Parameters
    ----------
    raster : np.ndarray
        2D ``uint8`` image.

    Returns
    -------
    np.ndarray
        Read-only int64 array of length 256 whose sum is ``raster.size``.

    Raises
    ------
    ValidationError
        If *raster* is not a 2D ``uint8`` array.
    """
    _check_raster(raster)
    histogram = np.bincount(raster.ravel(), minlength=N_LEVELS).astype(np.int64)
    histogram.flags.writeable = False
    return histogram


def find_bounds(
    histogram: Union[np.ndarray, Sequence[int]],
    saturation: float,
) -> BoundPair:
    """Find the input intensity bounds for a saturated stretch.

    Up to ``floor(pixel_count * saturation / 100)`` pixels (at least one)
    are allowed to clip at each end. The lower bound is the first level,
    scanning up from black, at which the running count reaches that
    target; the upper bound is found the same way scanning down from
    white. The two scans are independent, so for large saturations or
    concentrated histograms the result can have ``lo >= hi``. That pair
    is returned unchanged for the caller to reject.

    With ``saturation=0`` this is the plain min/max of the image: the
    first and last non-empty levels.

    Parameters
    ----------
    histogram : array_like
        256 non-negative pixel counts indexed by intensity.
    saturation : float
        Percentage of pixels to saturate at each tail, in ``[0, 50)``.

    Returns
    -------
    BoundPair
        ``(lo, hi)`` input bounds, each in ``[0, 255]``.

    Raises
    ------
    InvalidSaturation
        If *saturation* is outside ``[0, 50)``.
    ValidationError
        If *histogram* does not have 256 non-negative bins.
    """
    check_saturation(saturation)

    counts = np.asarray(histogram, dtype=np.int64)
    if counts.shape != (N_LEVELS,):
        raise ValidationError(
            f"Histogram must have {N_LEVELS} bins, got shape {counts.shape}"
        )
    if np.any(counts < 0):
        raise ValidationError("Histogram counts must be non-negative")

    pixel_count = int(counts.sum())
    target = max(1, math.floor(pixel_count * saturation / 100.0))

    # First index whose cumulative count reaches target; past-the-end when
    # the histogram never gets there.
    idx_min = int(np.searchsorted(np.cumsum(counts), target, side='left'))
    idx_max = WHITE - int(
        np.searchsorted(np.cumsum(counts[::-1]), target, side='left')
    )

    bounds = BoundPair(min(idx_min, WHITE), max(idx_max, BLACK))
    logger.debug(
        "find_bounds: pixels=%d saturation=%g target=%d -> (%d, %d)",
        pixel_count, saturation, target, bounds.lo, bounds.hi,
    )
    return bounds


def remap(
    raster: np.ndarray,
    in_bounds: BoundPair,
    out_bounds: BoundPair = FULL_RANGE,
    in_place: bool = True,
) -> np.ndarray:
    """Linearly map ``in_bounds`` onto ``out_bounds`` for every pixel.

    Each pixel ``v`` becomes
    ``out.lo + (v - in.lo) * (out.hi - out.lo) / (in.hi - in.lo)``,
    truncated toward zero and clamped to ``[0, 255]``. Pixels outside
    ``in_bounds`` extrapolate and are caught by the clamp.

    Parameters
    ----------
    raster : np.ndarray
        2D ``uint8`` image.
    in_bounds : BoundPair
        Input interval; must satisfy ``hi > lo``.
    out_bounds : BoundPair
        Output interval. Default ``(0, 255)``.
    in_place : bool
        Overwrite *raster* and return it (default) or return a new array.

    Returns
    -------
    np.ndarray
        The stretched ``uint8`` image.

    Raises
    ------
    DegenerateRange
        If ``in_bounds.hi <= in_bounds.lo``. *raster* is not modified.
    ValidationError
        If *raster* is not a 2D ``uint8`` array.
    """
    _check_raster(raster)
    if not in_bounds.is_valid:
        raise DegenerateRange(
            f"Input range ({in_bounds.lo}, {in_bounds.hi}) has no width; "
            f"the image is monochrome or the saturation is too high"
        )

    factor = float(out_bounds.span) / float(in_bounds.span)
    logger.debug(
        "remap: (%d, %d) -> (%d, %d), factor=%r",
        in_bounds.lo, in_bounds.hi, out_bounds.lo, out_bounds.hi, factor,
    )

    values = out_bounds.lo + (raster.astype(np.float64) - in_bounds.lo) * factor
    stretched = np.clip(np.trunc(values), BLACK, WHITE).astype(np.uint8)

    if not in_place:
        return stretched
    raster[...] = stretched
    return raster


@processor_version('1.54j')
class ContrastStretch(ImageTransform):
    """Saturated linear contrast stretch for 8-bit grayscale images.

    Computes the histogram of the input, finds the input bounds that leave
    ``saturation`` percent of pixels clipped at each tail, and stretches
    that interval onto ``[out_min, out_max]``.

    Parameters
    ----------
    saturation : float
        Percent of pixels allowed to saturate at each tail, in ``[0, 50)``.
        ``0`` stretches the plain min/max of the image. Default ``0.0``.
    out_min : int
        Lower output intensity, in ``[0, 255]``. Default ``0``.
    out_max : int
        Upper output intensity, in ``[0, 255]``, greater than ``out_min``.
        Default ``255``.

    Raises
    ------
    InvalidSaturation
        If *saturation* is outside ``[0, 50)``.
    InvalidExplicitBounds
        If the output bounds are out of range or not strictly ordered.

    Notes
    -----
    ``apply`` raises ``DegenerateRange`` for monochrome images instead of
    returning an all-black result. The source array is never modified.

    Examples
    --------
    Clip 0.35% of pixels at each end (ImageJ's default):

    >>> from ijstretch.imagej import ContrastStretch
    >>> stretched = ContrastStretch(saturation=0.35).apply(image)

    Map the plain min/max onto a narrower band:

    >>> banded = ContrastStretch(out_min=10, out_max=245).apply(image)
    """

    __imagej_source__ = 'ij/plugin/ContrastEnhancer.java'
    __imagej_version__ = '1.54j'

    saturation: Annotated[
        float, Range(min=0.0, max=MAX_SATURATION),
        Desc('Percent of pixels saturated at each tail, in [0, 50)'),
    ] = 0.0
    out_min: Annotated[int, Range(min=BLACK, max=WHITE), Desc('Output minimum')] = BLACK
    out_max: Annotated[int, Range(min=BLACK, max=WHITE), Desc('Output maximum')] = WHITE

    def __init__(
        self,
        saturation: float = 0.0,
        out_min: int = BLACK,
        out_max: int = WHITE,
    ) -> None:
        check_saturation(saturation)
        check_output_bounds(out_min, out_max)
        self.saturation = saturation
        self.out_min = out_min
        self.out_max = out_max

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Stretch a 2D 8-bit image.

        Parameters
        ----------
        source : np.ndarray
            2D ``uint8`` image. Shape ``(rows, cols)``.
        **kwargs
            Per-call overrides for ``saturation``, ``out_min``, ``out_max``.

        Returns
        -------
        np.ndarray
            Stretched image, dtype uint8, same shape as input.

        Raises
        ------
        ValidationError
            If source is not 2D ``uint8`` or an override is invalid.
        DegenerateRange
            If the input bounds have no width.
        """
        check_saturation(kwargs.get('saturation', self.saturation))
        out_bounds = check_output_bounds(
            kwargs.get('out_min', self.out_min),
            kwargs.get('out_max', self.out_max),
        )
        params = self._resolve_params(kwargs)

        in_bounds = find_bounds(compute_histogram(source), params['saturation'])
        return remap(source, in_bounds, out_bounds, in_place=False)
