# -*- coding: utf-8 -*-
"""
Command-line Contrast Stretch - Stretch an 8-bit grayscale PNG.

Non-interactive host for :class:`ijstretch.plugin.ContrastPlugin`: the
command-line options answer the plugin's prompts, errors are printed to
stderr, and the stretched image is written to the output path.

Usage:
  ijstretch input.png output.png
  ijstretch input.png output.png --saturation 0.35
  ijstretch input.png output.png --min 10 --max 245
  ijstretch --help

Exit status is 0 when the image was stretched and 1 when the stretch was
refused (invalid limits, monochrome image) or a file could not be
read or written.

Dependencies
------------
Pillow

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
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

# ijstretch internal
from ijstretch.exceptions import IjStretchError
from ijstretch.IO.png import PngReader, PngWriter
from ijstretch.plugin import (
    MAX_MESSAGE,
    MIN_MESSAGE,
    SATURATION_MESSAGE,
    ContrastPlugin,
)

logger = logging.getLogger(__name__)

READ_ERROR_TITLE = "Cannot read input"
WRITE_ERROR_TITLE = "Cannot write output"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="ijstretch",
        description="Saturated linear contrast stretch of an 8-bit grayscale PNG.",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Path to the 8-bit grayscale input PNG.",
    )
    parser.add_argument(
        "output",
        type=Path,
        help="Path for the stretched output PNG.",
    )
    parser.add_argument(
        "--saturation",
        type=float,
        default=None,
        help="Percent of pixels saturated at each tail, in [0, 50) "
             "(default: 0, plain min/max). A value outside that "
             "interval is an error; use --min/--max for explicit bounds.",
    )
    parser.add_argument(
        "--min",
        dest="new_min",
        type=float,
        default=None,
        help="Explicit output minimum in [0, 255] (default: 0).",
    )
    parser.add_argument(
        "--max",
        dest="new_max",
        type=float,
        default=None,
        help="Explicit output maximum in [0, 255] (default: 255).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    args = parser.parse_args(argv)
    if args.saturation is not None and (
        args.new_min is not None or args.new_max is not None
    ):
        parser.error("--saturation cannot be combined with --min/--max")
    return args


class ArgumentPrompt:
    """Answer the plugin's prompts from parsed arguments.

    Giving ``--min``/``--max`` declines the saturation prompt, which routes
    the plugin into its explicit-bounds dialogue; a missing limit takes the
    prompt default. Without ``--min``/``--max`` the bounds prompts are
    cancelled, so an out-of-range ``--saturation`` ends the run instead of
    stretching onto guessed bounds.
    """

    def __init__(self, args: argparse.Namespace) -> None:
        self._explicit = args.new_min is not None or args.new_max is not None
        self._saturation = args.saturation
        self._limits = {MIN_MESSAGE: args.new_min, MAX_MESSAGE: args.new_max}

    def __call__(self, message: str, default: float) -> Optional[float]:
        if message == SATURATION_MESSAGE:
            if self._explicit:
                return None
            return default if self._saturation is None else self._saturation
        if not self._explicit:
            return None
        answer = self._limits[message]
        return default if answer is None else answer


def _print_error(title: str, message: str) -> None:
    print(f"{title}: {message}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``ijstretch`` console script."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with PngReader(args.input) as reader:
            image = reader.read_full()
    except (IjStretchError, OSError) as exc:
        _print_error(READ_ERROR_TITLE, str(exc))
        return 1

    plugin = ContrastPlugin(ArgumentPrompt(args), notify=_print_error)
    outcome = plugin.run(image)
    if outcome is None:
        logger.info("No output written")
        return 1

    try:
        with PngWriter(args.output) as writer:
            writer.write(image)
    except (IjStretchError, OSError) as exc:
        _print_error(WRITE_ERROR_TITLE, str(exc))
        return 1
    print(
        f"Stretched {args.input} -> {args.output}: "
        f"({outcome.in_bounds.lo}, {outcome.in_bounds.hi}) -> "
        f"({outcome.out_bounds.lo}, {outcome.out_bounds.hi})"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
