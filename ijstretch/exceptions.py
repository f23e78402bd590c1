# -*- coding: utf-8 -*-
"""
ijstretch Exception Hierarchy - Domain-specific exceptions for contrast stretching.

Provides a small exception hierarchy that lets host integrations (plugin
runners, command-line tools) catch stretch-specific errors distinctly from
Python built-in exceptions. All ijstretch exceptions subclass both
``IjStretchError`` and the appropriate built-in exception so that callers
catching ``ValueError`` or ``RuntimeError`` keep working.

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


class IjStretchError(Exception):
    """Base exception for all ijstretch errors."""


class ValidationError(IjStretchError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for shape and dtype mismatches, malformed histograms, and
    out-of-range parameters.
    """


class InvalidSaturation(ValidationError):
    """Saturation percentage outside the half-open interval ``[0, 50)``."""


class InvalidExplicitBounds(ValidationError):
    """Explicit output bounds outside ``[0, 255]`` or not strictly ordered."""


class ProcessorError(IjStretchError, RuntimeError):
    """Algorithm or processing failure during apply().

    Raised when a processor encounters a non-recoverable error
    during execution (not an input validation issue).
    """


class DegenerateRange(ProcessorError):
    """Input intensity bounds with zero or negative width.

    Signals a monochrome (or empty) image, or a saturation large enough
    that the two histogram scans crossed. The stretch factor is undefined
    and the raster must be left untouched.
    """


class DependencyError(IjStretchError, ImportError):
    """Missing optional dependency required for a specific module.

    Raised when a module requires an optional package (Pillow) that is
    not installed.
    """
