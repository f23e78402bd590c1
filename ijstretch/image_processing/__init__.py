# -*- coding: utf-8 -*-
"""
Image Processing - Transform base class and tunable parameter markers.

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

from ijstretch.image_processing.base import ImageTransform, processor_version
from ijstretch.image_processing.params import Desc, ParamSpec, Range

__all__ = [
    'ImageTransform',
    'Desc',
    'ParamSpec',
    'Range',
    'processor_version',
]
