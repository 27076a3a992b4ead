"""Angle bookkeeping shared by the closed planar curves.

Circle and Ellipse both parametrize their points by an angle in
``[0, 2*pi)`` measured in the curve's own frame.  The helpers here turn a
pair of optional endpoint angles into a monotonically increasing sweep,
so that an arc always runs in the direction of the curve.
"""

from brepcore.efloat import PI, PI2, efloat


def sweep(start_angle, end_angle):
    """Return ``(a0, a1)`` with ``a1 > a0`` describing the arc from the
    optional start angle to the optional end angle.

    A missing bound means a full turn from the other one (or from angle
    zero if both are missing).  An end angle that is not after the start
    angle gets a full turn added.
    """
    if start_angle is not None and end_angle is not None:
        a0 = efloat(start_angle)
        a1 = efloat(end_angle)
        if a1.compare(a0) <= 0:
            a1 = a1 + PI2
        return a0, a1
    if start_angle is not None:
        a0 = efloat(start_angle)
        return a0, a0 + PI2
    if end_angle is not None:
        a1 = efloat(end_angle)
        return a1 - PI2, a1
    return efloat(0.0), PI2


def interpolate_angle(start_angle, end_angle, t):
    a0, a1 = sweep(start_angle, end_angle)
    return a0 + (a1 - a0) * t


def angle_between(m, start_angle, end_angle):
    """True if the angle ``m`` lies on the closed arc from start to end.
    With either bound absent every angle is between."""
    if start_angle is None or end_angle is None:
        return True
    a0, a1 = sweep(start_angle, end_angle)
    m = efloat(m)
    if m.compare(a0) < 0:
        m = m + PI2
    return a0 <= m and m <= a1


def midpoint_angle(start_angle, end_angle):
    """Angle halfway along the sweep; the antipode of a single bound."""
    if start_angle is not None and end_angle is None:
        return efloat(start_angle) + PI
    if end_angle is not None and start_angle is None:
        return efloat(end_angle) - PI
    a0, a1 = sweep(start_angle, end_angle)
    return (a0 + a1) * 0.5
