"""Curve variants.

``Curve`` is the closed union of :class:`Line`, :class:`Circle`,
:class:`Ellipse` and :class:`Helix`.  Every variant offers the same
capability set: ``transform``, ``neg``, ``tangent``, ``on_curve``,
``interpolate``, ``between``, ``get_midpoint``, ``project``, ``distance``
and ``parameter``.  Code that has to treat the variants differently
dispatches with ``isinstance`` and ends in an explicit error for anything
else.
"""

from typing import Union

from brepcore.curves.circle import Circle
from brepcore.curves.ellipse import Ellipse
from brepcore.curves.helix import Helix
from brepcore.curves.line import Line

Curve = Union[Line, Circle, Ellipse, Helix]

CURVE_TYPES = (Line, Circle, Ellipse, Helix)


def is_curve(x) -> bool:
    return isinstance(x, CURVE_TYPES)


__all__ = ['Curve', 'CURVE_TYPES', 'Circle', 'Ellipse', 'Helix', 'Line', 'is_curve']
