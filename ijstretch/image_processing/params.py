# -*- coding: utf-8 -*-
"""
Stretch Parameters - ``typing.Annotated`` constraints for processor fields.

A processor declares each tunable value once, as an annotated class field::

    out_min: Annotated[int, Range(min=0, max=255), Desc('Output minimum')] = 0

``collect_param_specs`` turns those annotations into ``ParamSpec`` records,
which check per-call overrides passed to ``apply(**kwargs)``.

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
import numbers
from dataclasses import dataclass
from typing import Annotated, Any, Optional, Tuple, get_origin, get_type_hints

# ijstretch internal
from ijstretch.exceptions import ValidationError

# Accepted value kinds per declared type; bool is excluded separately.
_NUMERIC_KINDS = {float: numbers.Real, int: numbers.Integral}


class ParamMeta:
    """Marker base: an ``Annotated`` field carrying one of these is tunable."""


class Range(ParamMeta):
    """Inclusive ``[min, max]`` limits; ``None`` leaves a side open."""

    __slots__ = ('min', 'max')

    def __init__(self, min: Optional[float] = None, max: Optional[float] = None) -> None:
        self.min = min
        self.max = max


class Desc(ParamMeta):
    """One-line description, used for ``--help`` style output."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text


@dataclass(frozen=True)
class ParamSpec:
    """A tunable field as seen by ``ImageTransform._resolve_params``.

    Attributes
    ----------
    name : str
        Field name, also the ``apply`` keyword.
    param_type : type
        Declared type, ``int`` or ``float`` for the stretch parameters.
    description : str
        Text from ``Desc``, or empty.
    min_value, max_value : float or None
        Inclusive limits from ``Range``.
    """

    name: str
    param_type: type
    description: str = ''
    min_value: Optional[float] = None
    max_value: Optional[float] = None

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and limits.

        NumPy scalars count as numbers; ``bool`` never does, and a float is
        not accepted where an ``int`` intensity is declared.

        Raises
        ------
        TypeError
            If *value* is not of the declared kind.
        ValidationError
            If *value* is outside ``[min_value, max_value]``.
        """
        kind = _NUMERIC_KINDS.get(self.param_type, self.param_type)
        if isinstance(value, bool) or not isinstance(value, kind):
            raise TypeError(
                f"Parameter '{self.name}' must be "
                f"{self.param_type.__name__}, got {type(value).__name__}"
            )
        if self.min_value is not None and value < self.min_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Build a ``ParamSpec`` for every tunable ``Annotated`` field of *cls*.

    Inherited fields come first. Annotations that cannot be resolved yield
    no specs rather than failing class creation.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    specs = []
    for name, hint in hints.items():
        if get_origin(hint) is not Annotated:
            continue
        metas = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not metas:
            continue
        limits = next((m for m in metas if isinstance(m, Range)), Range())
        desc = next((m.text for m in metas if isinstance(m, Desc)), '')
        specs.append(ParamSpec(
            name=name,
            param_type=hint.__origin__,
            description=desc,
            min_value=limits.min,
            max_value=limits.max,
        ))
    return tuple(specs)
