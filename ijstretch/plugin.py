# -*- coding: utf-8 -*-
"""
Contrast Plugin - Interactive host flow around the saturated contrast stretch.

Reproduces the parameter dialogue of the 8-bit ImageJ contrast plugin on
top of the pure functions in :mod:`ijstretch.imagej.enhance.contrast_stretch`:

1. Ask for a saturation percentage. A value in ``[0, 50)`` selects
   saturation mode with output bounds ``(0, 255)``.
2. Any other answer falls back to explicit-bounds mode: ask for a new
   minimum and maximum, which become the *output* bounds, while the input
   bounds are the plain min/max of the image. An out-of-range saturation
   is reported first; a cancelled one is not.
3. Refuse monochrome images (input bounds without width), otherwise
   stretch the raster in place.

Prompts and notifications are injected callables, so the same flow can be
driven by a GUI, a terminal, or a pre-filled argument list. Prompt answers
are classified into a ``PromptResult`` rather than overloading a numeric
sentinel for "cancelled".

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
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

# Third-party
import numpy as np

# ijstretch internal
from ijstretch.exceptions import (
    DegenerateRange,
    IjStretchError,
    InvalidExplicitBounds,
    InvalidSaturation,
)
from ijstretch.imagej.enhance.contrast_stretch import (
    BLACK,
    FULL_RANGE,
    WHITE,
    BoundPair,
    check_output_bounds,
    check_saturation,
    compute_histogram,
    find_bounds,
    remap,
)

logger = logging.getLogger(__name__)

#: ``prompt(message, default)`` returns the entered number, or ``None``
#: when the user cancelled.
Prompt = Callable[[str, float], Optional[float]]

#: ``notify(title, message)`` surfaces an error to the user.
Notify = Callable[[str, str], None]

SATURATION_MESSAGE = "Saturation in percent of pixels per tail [0, 50):"
MIN_MESSAGE = "New minimum intensity [0, 255]:"
MAX_MESSAGE = "New maximum intensity [0, 255]:"

ERROR_TITLE = "Invalid limit"
SATURATION_ERROR = (
    "The saturation value lies outside the interval [0, 50)."
)
BOUNDS_ERROR = (
    "At least one of the limits lies outside the interval [0, 255], "
    "or the minimum is not less than the maximum."
)
STRETCH_TITLE = "Contrast stretch"
DEGENERATE_ERROR = "The image is monochrome or an error occurred."


class PromptStatus(Enum):
    """Classification of a single prompt answer."""

    VALID = "valid"
    OUT_OF_RANGE = "out_of_range"
    CANCELLED = "cancelled"


class StretchMode(Enum):
    """How the stretch parameters were obtained."""

    SATURATION = "saturation"
    EXPLICIT_BOUNDS = "explicit_bounds"


@dataclass(frozen=True)
class PromptResult:
    """Outcome of asking the user for one number.

    Attributes
    ----------
    status : PromptStatus
        Whether the answer is usable, out of range, or was cancelled.
    value : float, optional
        The entered number; ``None`` when cancelled.
    """

    status: PromptStatus
    value: Optional[float] = None

    @property
    def ok(self) -> bool:
        return self.status is PromptStatus.VALID


@dataclass(frozen=True)
class StretchOutcome:
    """Parameters of a stretch that was applied.

    Attributes
    ----------
    mode : StretchMode
        Saturation or explicit-bounds acquisition.
    in_bounds : BoundPair
        Histogram-derived input bounds.
    out_bounds : BoundPair
        Output bounds the input interval was mapped onto.
    saturation : float
        Saturation percentage used to find ``in_bounds`` (``0.0`` in
        explicit-bounds mode).
    """

    mode: StretchMode
    in_bounds: BoundPair
    out_bounds: BoundPair
    saturation: float


def acquire_saturation(prompt: Prompt) -> PromptResult:
    """Ask for a saturation percentage and classify the answer."""
    value = prompt(SATURATION_MESSAGE, 0.0)
    if value is None:
        return PromptResult(PromptStatus.CANCELLED)
    try:
        check_saturation(value)
    except InvalidSaturation:
        return PromptResult(PromptStatus.OUT_OF_RANGE, value)
    return PromptResult(PromptStatus.VALID, value)


def _acquire_limit(prompt: Prompt, message: str, default: int) -> PromptResult:
    value = prompt(message, float(default))
    if value is None:
        return PromptResult(PromptStatus.CANCELLED)
    # Dialog answers are truncated to whole intensities
    if not math.isfinite(value) or not BLACK <= math.trunc(value) <= WHITE:
        return PromptResult(PromptStatus.OUT_OF_RANGE, value)
    return PromptResult(PromptStatus.VALID, math.trunc(value))


def acquire_explicit_bounds(prompt: Prompt) -> Optional[BoundPair]:
    """Ask for new output minimum and maximum.

    Both limits are asked for before either is checked.

    Returns
    -------
    BoundPair or None
        The validated output bounds, or ``None`` if either prompt was
        cancelled.

    Raises
    ------
    InvalidExplicitBounds
        If a limit is outside ``[0, 255]`` or ``new_min >= new_max``.
    """
    new_min = _acquire_limit(prompt, MIN_MESSAGE, BLACK)
    new_max = _acquire_limit(prompt, MAX_MESSAGE, WHITE)
    if PromptStatus.CANCELLED in (new_min.status, new_max.status):
        return None
    if not (new_min.ok and new_max.ok):
        raise InvalidExplicitBounds(
            f"Output bounds must be in [{BLACK}, {WHITE}], "
            f"got ({new_min.value}, {new_max.value})"
        )
    return check_output_bounds(int(new_min.value), int(new_max.value))


def _log_notify(title: str, message: str) -> None:
    logger.warning("%s: %s", title, message)


class ContrastPlugin:
    """Interactive saturated contrast stretch for one 8-bit image.

    Parameters
    ----------
    prompt : Prompt
        Callable asking the user for a number; returns ``None`` on cancel.
    notify : Notify, optional
        Callable surfacing an error ``(title, message)`` to the user.
        Defaults to logging a warning.

    Examples
    --------
    >>> answers = iter([0.35])
    >>> plugin = ContrastPlugin(lambda message, default: next(answers))
    >>> outcome = plugin.run(image)
    >>> outcome.mode
    <StretchMode.SATURATION: 'saturation'>
    """

    def __init__(self, prompt: Prompt, notify: Optional[Notify] = None) -> None:
        self.prompt = prompt
        self.notify = notify or _log_notify

    def run(self, raster: np.ndarray) -> Optional[StretchOutcome]:
        """Run the dialogue and stretch *raster* in place.

        Parameters
        ----------
        raster : np.ndarray
            2D ``uint8`` image. Modified in place on success only.

        Returns
        -------
        StretchOutcome or None
            The applied parameters, or ``None`` if the operation was
            cancelled or refused. Refusals are reported through
            ``notify``; ``IjStretchError`` never propagates.
        """
        try:
            return self._run(raster)
        except DegenerateRange as exc:
            logger.info("Stretch refused: %s", exc)
            self.notify(STRETCH_TITLE, DEGENERATE_ERROR)
        except InvalidExplicitBounds as exc:
            logger.info("Stretch refused: %s", exc)
            self.notify(ERROR_TITLE, BOUNDS_ERROR)
        except IjStretchError as exc:
            logger.info("Stretch refused: %s", exc)
            self.notify(STRETCH_TITLE, str(exc))
        return None

    def _run(self, raster: np.ndarray) -> Optional[StretchOutcome]:
        histogram = compute_histogram(raster)

        saturation = acquire_saturation(self.prompt)
        if saturation.ok:
            mode = StretchMode.SATURATION
            percent = saturation.value
            out_bounds = FULL_RANGE
        else:
            if saturation.status is PromptStatus.OUT_OF_RANGE:
                self.notify(ERROR_TITLE, SATURATION_ERROR)
            logger.debug("Saturation %s; asking for explicit bounds",
                         saturation.status.value)
            out_bounds = acquire_explicit_bounds(self.prompt)
            if out_bounds is None:
                logger.debug("Explicit bounds cancelled")
                return None
            mode = StretchMode.EXPLICIT_BOUNDS
            percent = 0.0

        in_bounds = find_bounds(histogram, percent)
        remap(raster, in_bounds, out_bounds, in_place=True)
        logger.info(
            "Stretched (%d, %d) -> (%d, %d) [%s]",
            in_bounds.lo, in_bounds.hi, out_bounds.lo, out_bounds.hi,
            mode.value,
        )
        return StretchOutcome(mode, in_bounds, out_bounds, percent)
