# -*- coding: utf-8 -*-
"""
Transform Base Class - Common interface for raster-to-raster processors.

``ImageTransform`` gives every processor the same ``apply(source, **kwargs)``
entry point. Tunable fields declared with ``typing.Annotated`` are collected
when the subclass is defined, and ``_resolve_params`` merges per-call
overrides with the instance values. ``processor_version`` records which
release of the ported algorithm a processor follows.

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
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

# Third-party
import numpy as np

# ijstretch internal
from ijstretch.image_processing.params import ParamSpec, collect_param_specs

logger = logging.getLogger(__name__)


def processor_version(version: str):
    """Class decorator setting ``__processor_version__`` to *version*.

    For ImageJ ports this is the ImageJ release the port follows.
    """
    def decorator(cls):
        cls.__processor_version__ = version
        return cls
    return decorator


class ImageTransform(ABC):
    """Abstract raster transform.

    Subclasses implement ``apply``, which must return a new array and leave
    ``source`` untouched.
    """

    __processor_version__: Optional[str] = None
    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Return every declared parameter, *kwargs* taking precedence.

        Keys in *kwargs* that are not declared parameters are ignored.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValidationError
            If a value is outside its declared range.
        """
        resolved = {}
        for spec in type(self).__param_specs__:
            value = kwargs.get(spec.name, getattr(self, spec.name))
            spec.validate(value)
            resolved[spec.name] = value
        logger.debug("%s params: %s", type(self).__name__, resolved)
        return resolved

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Transform a 2D image.

        Parameters
        ----------
        source : np.ndarray
            Input image, shape ``(rows, cols)``.

        Returns
        -------
        np.ndarray
            Transformed image.
        """
        ...
