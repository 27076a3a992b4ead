"""Polynomial algebra used by the intersection root finders.

Two representations of a univariate polynomial are provided: the
monomial form ``sum(c_i * t**i)`` and the Bernstein form on ``[0, 1]``,
``sum(b_i * C(n, i) * t**i * (1 - t)**(n - i))``.  Both evaluate to the
same values; :func:`evaluate` dispatches on the representation and the
``to_monomial`` / ``to_bernstein`` methods convert between them.

Root finding goes through numpy's companion-matrix eigenvalue solver
followed by a few Newton steps; quadratics use an extended precision
discriminant (mpmath) so that tangency is detected reliably.

Copyright (c) 2026 brepcore contributors
MIT License
"""

from __future__ import annotations

from math import comb
from typing import List, Optional, Sequence

import mpmath as mpm
import numpy as np

from brepcore import efloat as ef
from brepcore.efloat import BoundedScalar, efloat, isgoodnum
from brepcore.tolerance import epsilon


def _as_float(c) -> float:
    if isinstance(c, BoundedScalar):
        return c.value
    if isgoodnum(c):
        return float(c)
    raise ValueError('bad polynomial coefficient: {!r}'.format(c))


class MonomialPolynomial:
    """Polynomial in the monomial basis, coefficients in ascending powers."""

    def __init__(self, coefficients: Sequence[float]):
        coeffs = [_as_float(c) for c in coefficients]
        while len(coeffs) > 1 and coeffs[-1] == 0.0:
            coeffs.pop()
        self.coefficients = coeffs or [0.0]

    @staticmethod
    def zero() -> 'MonomialPolynomial':
        return MonomialPolynomial([0.0])

    def __repr__(self):
        return "MonomialPolynomial({})".format(self.coefficients)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def eval(self, t: float) -> float:
        """Horner evaluation."""
        result = 0.0
        for c in reversed(self.coefficients):
            result = result * t + c
        return result

    def __add__(self, other: 'MonomialPolynomial') -> 'MonomialPolynomial':
        n = max(len(self.coefficients), len(other.coefficients))
        a = self.coefficients + [0.0] * (n - len(self.coefficients))
        b = other.coefficients + [0.0] * (n - len(other.coefficients))
        return MonomialPolynomial([x + y for x, y in zip(a, b)])

    def __mul__(self, other):
        if isinstance(other, MonomialPolynomial):
            result = [0.0] * (len(self.coefficients) + len(other.coefficients) - 1)
            for i, a in enumerate(self.coefficients):
                for j, b in enumerate(other.coefficients):
                    result[i + j] += a * b
            return MonomialPolynomial(result)
        c = _as_float(other)
        return MonomialPolynomial([a * c for a in self.coefficients])

    __rmul__ = __mul__

    def derivative(self) -> 'MonomialPolynomial':
        if self.degree == 0:
            return MonomialPolynomial.zero()
        return MonomialPolynomial([i * c for i, c in enumerate(self.coefficients)][1:])

    def to_bernstein(self, degree: Optional[int] = None) -> 'BernsteinPolynomial':
        """Convert to Bernstein form of the given degree (at least
        ``self.degree``) on ``[0, 1]``."""
        n = self.degree if degree is None else degree
        if n < self.degree:
            raise ValueError('cannot represent degree {} polynomial with degree {} Bernstein basis'
                             .format(self.degree, n))
        a = self.coefficients + [0.0] * (n + 1 - len(self.coefficients))
        # b_k = sum_{i <= k} C(k, i) / C(n, i) * a_i
        b = [sum(comb(k, i) / comb(n, i) * a[i] for i in range(k + 1)) for k in range(n + 1)]
        return BernsteinPolynomial(b)


class BernsteinPolynomial:
    """Polynomial in the Bernstein basis of degree ``len(coefficients) - 1``
    on ``[0, 1]``."""

    def __init__(self, coefficients: Sequence[float]):
        if len(coefficients) == 0:
            raise ValueError('Bernstein polynomial needs at least one coefficient')
        self.coefficients = [_as_float(c) for c in coefficients]

    def __repr__(self):
        return "BernsteinPolynomial({})".format(self.coefficients)

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def eval(self, t: float) -> float:
        """de Casteljau evaluation, numerically stable on ``[0, 1]``."""
        b = list(self.coefficients)
        n = len(b)
        for r in range(1, n):
            for i in range(n - r):
                b[i] = (1.0 - t) * b[i] + t * b[i + 1]
        return b[0]

    def to_monomial(self) -> MonomialPolynomial:
        result = MonomialPolynomial.zero()
        for i, c in enumerate(self.coefficients):
            result = result + bernstein_basis(i, self.degree) * c
        return result

    def has_sign_change(self) -> bool:
        """False when all coefficients share a strict sign, which by the
        convex hull property rules out any root on ``[0, 1]``."""
        return not (all(c > epsilon for c in self.coefficients)
                    or all(c < -epsilon for c in self.coefficients))


def bernstein_basis(i: int, n: int) -> MonomialPolynomial:
    """The ``i``-th Bernstein basis polynomial of degree ``n`` in monomial
    form: ``C(n, i) * t**i * (1 - t)**(n - i)``."""
    if i < 0 or i > n:
        raise ValueError('bad Bernstein basis index {} for degree {}'.format(i, n))
    result = MonomialPolynomial([0.0] * i + [float(comb(n, i))])
    one_minus_t = MonomialPolynomial([1.0, -1.0])
    for _ in range(n - i):
        result = result * one_minus_t
    return result


def evaluate(polynomial, t) -> float:
    """Evaluate a monomial or Bernstein polynomial at ``t``."""
    t = _as_float(t)
    if isinstance(polynomial, (MonomialPolynomial, BernsteinPolynomial)):
        return polynomial.eval(t)
    raise ValueError('not a polynomial: {!r}'.format(polynomial))


def _polish(p: MonomialPolynomial, dp: MonomialPolynomial, t: float) -> float:
    for _ in range(4):
        d = dp.eval(t)
        if d == 0.0:
            break
        step = p.eval(t) / d
        t -= step
        if abs(step) < 1e-15:
            break
    return t


def real_roots(polynomial, lo: Optional[float] = None,
               hi: Optional[float] = None) -> List[float]:
    """Sorted, deduplicated real roots, optionally restricted to
    ``[lo, hi]``."""
    p = polynomial.to_monomial() if isinstance(polynomial, BernsteinPolynomial) else polynomial
    if p.degree == 0:
        return []
    scale = max(abs(c) for c in p.coefficients)
    # leading coefficients that vanish relative to the rest lower the degree
    coeffs = list(p.coefficients)
    while len(coeffs) > 1 and abs(coeffs[-1]) <= epsilon * scale:
        coeffs.pop()
    if len(coeffs) < 2:
        return []
    p = MonomialPolynomial(coeffs)
    lead = coeffs[-1]
    dp = p.derivative()
    candidates = np.roots(np.array(coeffs[::-1], dtype=float) / lead)
    roots = []
    for r in candidates:
        magnitude = max(1.0, abs(r))
        if abs(r.imag) > 1e-6 * magnitude:
            continue
        t = _polish(p, dp, float(r.real))
        if lo is not None and t < lo - epsilon:
            continue
        if hi is not None and t > hi + epsilon:
            continue
        roots.append(t)
    roots.sort()
    deduped = []
    for t in roots:
        if deduped and abs(t - deduped[-1]) <= 1e-7 * max(1.0, abs(t)):
            continue
        deduped.append(t)
    return deduped


def solve_quadratic(a, b, c) -> List[float]:
    """Real roots of ``a t**2 + b t + c`` in ascending order.

    The coefficients may be bounded scalars; their error bounds decide
    whether two roots are distinct.  A double root (the two roots equal
    within tolerance) is returned once, a vanishing ``a`` degrades to the
    linear case.  Root values are computed in extended precision with the
    cancellation-free form ``q = -(b + sign(b) sqrt(d)) / 2``.
    """
    a = efloat(a)
    b = efloat(b)
    c = efloat(c)
    if a.is_zero():
        if b.is_zero():
            return []
        return [(-c / b).value]
    disc = b * b - 4.0 * a * c
    if disc.is_negative():
        return []
    half_gap = ef.sqrt(disc) / (2.0 * abs(a))
    mpa = mpm.mpf(a.value)
    mpb = mpm.mpf(b.value)
    mpc = mpm.mpf(c.value)
    if half_gap.is_zero():
        return [float(-mpb / (2 * mpa))]
    s = mpm.sqrt(mpm.fabs(mpb * mpb - 4 * mpa * mpc))
    q = -(mpb + (s if mpb >= 0 else -s)) / 2
    return sorted([float(q / mpa), float(mpc / q)])


__all__ = [
    'MonomialPolynomial',
    'BernsteinPolynomial',
    'bernstein_basis',
    'evaluate',
    'real_roots',
    'solve_quadratic',
]
