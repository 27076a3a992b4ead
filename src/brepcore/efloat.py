"""Error-tracked scalars for brepcore.

========
Overview
========

Every geometric predicate in brepcore (is this point on the curve, are
these two spheres tangent, does this angle come before that one) is
decided by comparing floating point values.  Raw float comparison is
brittle: two computations of the same quantity rarely agree to the last
bit.  ``BoundedScalar`` pairs a nominal value with a worst-case error
bound, propagates that bound through arithmetic, and compares through a
tolerance band of width ``epsilon`` (see :mod:`brepcore.tolerance`)
widened by the accumulated error.

comparison semantics
====================

* ``a == b`` is always definite: true iff the interval of ``a - b``
  contains zero within tolerance.
* ``a <= b`` and ``a >= b`` are always definite; equality satisfies them.
* ``a < b`` and ``a > b`` are only definite when the operands are
  provably ordered.  When they are equal within tolerance the strict
  ordering is unknowable and :class:`IndeterminateComparison` is raised.
  Callers that need a total answer use :meth:`BoundedScalar.compare`,
  which returns ``-1``, ``0`` or ``1``.

Copyright (c) 2026 brepcore contributors
MIT License
"""

import math

from brepcore.errors import DegenerateOperation, IndeterminateComparison
from brepcore.tolerance import epsilon, machine_epsilon


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def _rounding(v):
    return machine_epsilon * abs(v)


class BoundedScalar:
    """A float together with a worst-case absolute error bound.

    Instances are immutable; every operation returns a new value.
    """

    __slots__ = ('value', 'error')

    def __init__(self, value, error=0.0):
        if isinstance(value, BoundedScalar):
            error = value.error + error
            value = value.value
        if not isgoodnum(value):
            raise ValueError('bad value passed to BoundedScalar: {}'.format(value))
        if not isgoodnum(error) or error < 0:
            raise ValueError('bad error bound passed to BoundedScalar: {}'.format(error))
        self.value = float(value)
        self.error = float(error)

    def __repr__(self):
        return "BoundedScalar({!r}, {!r})".format(self.value, self.error)

    def __str__(self):
        return "{:.12g}±{:.3g}".format(self.value, self.error)

    def __float__(self):
        return self.value

    @property
    def lower_bound(self):
        return self.value - self.error

    @property
    def upper_bound(self):
        return self.value + self.error

    ## arithmetic
    ## ----------

    def __add__(self, other):
        other = coerce(other)
        if other is NotImplemented:
            return other
        v = self.value + other.value
        return BoundedScalar(v, self.error + other.error + _rounding(v))

    __radd__ = __add__

    def __sub__(self, other):
        other = coerce(other)
        if other is NotImplemented:
            return other
        v = self.value - other.value
        return BoundedScalar(v, self.error + other.error + _rounding(v))

    def __rsub__(self, other):
        other = coerce(other)
        if other is NotImplemented:
            return other
        return other.__sub__(self)

    def __mul__(self, other):
        other = coerce(other)
        if other is NotImplemented:
            return other
        v = self.value * other.value
        e = (abs(self.value) * other.error + abs(other.value) * self.error
             + self.error * other.error)
        return BoundedScalar(v, e + _rounding(v))

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = coerce(other)
        if other is NotImplemented:
            return other
        b = abs(other.value)
        if b == 0.0 or b <= other.error:
            raise DegenerateOperation('division by an interval containing zero',
                                      {'divisor': other})
        v = self.value / other.value
        e = (abs(self.value) * other.error + b * self.error) / (b * (b - other.error))
        return BoundedScalar(v, e + _rounding(v))

    def __rtruediv__(self, other):
        other = coerce(other)
        if other is NotImplemented:
            return other
        return other.__truediv__(self)

    def __pow__(self, n):
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise ValueError('only non-negative integer powers are supported')
        result = BoundedScalar(1.0)
        for _ in range(n):
            result = result * self
        return result

    def __neg__(self):
        return BoundedScalar(-self.value, self.error)

    def __abs__(self):
        return BoundedScalar(abs(self.value), self.error)

    ## comparison
    ## ----------

    def compare(self, other):
        """Three-way comparison through the tolerance band.

        Returns ``-1`` if ``self`` is definitely smaller, ``1`` if it is
        definitely larger and ``0`` if the two are equal within tolerance.
        """
        other = coerce(other)
        if other is NotImplemented:
            raise TypeError('cannot compare BoundedScalar with {!r}'.format(other))
        d = self.value - other.value
        tol = epsilon + self.error + other.error + _rounding(d)
        if d > tol:
            return 1
        if d < -tol:
            return -1
        return 0

    def __eq__(self, other):
        if coerce(other) is NotImplemented:
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other):
        if coerce(other) is NotImplemented:
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other):
        c = self.compare(other)
        if c == 0:
            raise IndeterminateComparison('strict ordering of equal values',
                                          {'lhs': self, 'rhs': other})
        return c < 0

    def __gt__(self, other):
        c = self.compare(other)
        if c == 0:
            raise IndeterminateComparison('strict ordering of equal values',
                                          {'lhs': self, 'rhs': other})
        return c > 0

    def __le__(self, other):
        return self.compare(other) <= 0

    def __ge__(self, other):
        return self.compare(other) >= 0

    # tolerance equality is not transitive, so there is no sound hash
    __hash__ = None

    def is_zero(self):
        return self.compare(0.0) == 0

    def is_positive(self):
        """True when the value is definitely greater than zero."""
        return self.compare(0.0) > 0

    def is_negative(self):
        """True when the value is definitely smaller than zero."""
        return self.compare(0.0) < 0


def coerce(x):
    """Return ``x`` as a :class:`BoundedScalar`, or ``NotImplemented``."""
    if isinstance(x, BoundedScalar):
        return x
    if isgoodnum(x):
        return BoundedScalar(x)
    return NotImplemented


def efloat(x):
    """Convenience constructor: exact value with no error."""
    r = coerce(x)
    if r is NotImplemented:
        raise ValueError('cannot convert {!r} to a BoundedScalar'.format(x))
    return r


PI = BoundedScalar(math.pi, _rounding(math.pi))
PI2 = BoundedScalar(2.0 * math.pi, _rounding(2.0 * math.pi))


## elementary functions
## --------------------

def sqrt(x):
    """Square root with error propagation.

    Values inside the tolerance band around zero are clamped to zero;
    definitely negative values raise :class:`DegenerateOperation`.
    """
    x = efloat(x)
    if x.is_negative():
        raise DegenerateOperation('square root of a negative value', {'value': x})
    v = max(x.value, 0.0)
    ex = x.error + (v - x.value)
    r = math.sqrt(v)
    e = math.sqrt(ex)
    if r > 0.0:
        e = min(e, ex / r)
    return BoundedScalar(r, e + _rounding(r))


def sin(x):
    x = efloat(x)
    v = math.sin(x.value)
    return BoundedScalar(v, x.error + machine_epsilon)


def cos(x):
    x = efloat(x)
    v = math.cos(x.value)
    return BoundedScalar(v, x.error + machine_epsilon)


def atan2(y, x):
    """Angle of the vector ``(x, y)`` in ``(-pi, pi]``."""
    y = efloat(y)
    x = efloat(x)
    r2 = x.value * x.value + y.value * y.value
    if r2 == 0.0:
        raise DegenerateOperation('atan2 of the zero vector')
    v = math.atan2(y.value, x.value)
    e = (abs(x.value) * y.error + abs(y.value) * x.error) / r2
    return BoundedScalar(v, min(e, math.pi) + _rounding(v))


def acos(x):
    """Arc cosine, argument clamped to ``[-1, 1]``."""
    x = efloat(x)
    v = max(-1.0, min(1.0, x.value))
    ex = x.error + abs(v - x.value)
    r = math.acos(v)
    e = 2.0 * math.sqrt(ex)
    s = 1.0 - v * v
    if s > 0.0:
        e = min(e, ex / math.sqrt(s))
    return BoundedScalar(r, min(e, math.pi) + _rounding(r))


def bmin(a, b):
    """Return whichever of ``a``, ``b`` has the smaller nominal value."""
    a = efloat(a)
    b = efloat(b)
    return a if a.value <= b.value else b


def bmax(a, b):
    a = efloat(a)
    b = efloat(b)
    return a if a.value >= b.value else b


def wrap_angle(a):
    """Map an angle into ``[0, 2*pi)``, treating values within tolerance of
    a full turn as zero."""
    a = efloat(a)
    v = a.value % (2.0 * math.pi)
    r = BoundedScalar(v, a.error)
    if r == PI2:
        return BoundedScalar(0.0, a.error)
    return r


__all__ = [
    'BoundedScalar',
    'PI',
    'PI2',
    'acos',
    'atan2',
    'bmax',
    'bmin',
    'coerce',
    'cos',
    'efloat',
    'isgoodnum',
    'sin',
    'sqrt',
    'wrap_angle',
]
