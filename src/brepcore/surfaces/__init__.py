"""Surface variants.

``Surface`` is the closed union of :class:`Plane`, :class:`Sphere` and
:class:`Cylinder`.  Every variant offers ``point_at``, ``normal``,
``on_surface``, ``project``, ``normalize``, ``is_normalized``, ``neg``,
``transform``, the geodesic operations ``exp``, ``log``,
``parallel_transport``, ``metric``, ``distance`` and ``geodesic``, plus
``contains_curve`` and ``point_grid``.
"""

from typing import Union

from brepcore.surfaces.cylinder import Cylinder
from brepcore.surfaces.grid import PointGrid
from brepcore.surfaces.plane import Plane
from brepcore.surfaces.sphere import Sphere

Surface = Union[Plane, Sphere, Cylinder]

SURFACE_TYPES = (Plane, Sphere, Cylinder)


def is_surface(x) -> bool:
    return isinstance(x, SURFACE_TYPES)


def point_grid(surface, density, horizon=None) -> PointGrid:
    """Module-level form of ``surface.point_grid``."""
    if not is_surface(surface):
        raise ValueError('Not a surface: {!r}'.format(surface))
    if horizon is None:
        return surface.point_grid(density)
    return surface.point_grid(density, horizon)


__all__ = ['Cylinder', 'Plane', 'PointGrid', 'SURFACE_TYPES', 'Sphere', 'Surface',
           'is_surface', 'point_grid']
