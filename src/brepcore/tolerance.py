"""Numeric tolerances and visualisation constants for brepcore.

These are module-level "constants" in the same spirit as ``epsilon`` and
``pi2`` in a classic geometry core: every tolerance-sensitive predicate in
the package reads them from here.  Redefine them at your peril.

Copyright (c) 2026 brepcore contributors
MIT License
"""

from math import pi
import sys

# Absolute width of the band around zero inside which two bounded scalars
# are considered equal.
epsilon = 1e-9

# Relative rounding error added by every floating point operation.
machine_epsilon = sys.float_info.epsilon

pi2 = 2.0 * pi

# A big number standing in for "infinitely far away".  Only used to draw
# unbounded geometry, never in a correctness decision.
HORIZON_DIST = 100.0

# Default number of polyline points produced when rasterizing an edge.
RASTER_POINTS = 40
