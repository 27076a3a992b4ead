## affine transformations of 3D homogeneous coordinates for brepcore

## Copyright (c) 2026 brepcore contributors
## MIT License

"""Affine transforms for brepcore geometry.

A transform is a 4x4 matrix acting on homogeneous coordinates.  Curves
and surfaces only ever see a ``Transform`` through ``apply`` (points),
``apply_vector`` (directions, translation ignored) and the similarity
queries ``is_uniform`` / ``scale_factor``; the matrix layout itself is an
implementation detail of this module.
"""

from math import cos, sin, pi

from brepcore.efloat import isgoodnum
from brepcore.point import Point
from brepcore.tolerance import epsilon


def _dot4(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


class Transform:
    """4x4 transformation matrix for homogeneous 3D coordinates.

    Rows are stored as lists.  Instances are treated as immutable values:
    composition and application return new objects.
    """

    def __init__(self, a=None):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]

        if isinstance(a, Transform):
            self.m = [list(row) for row in a.m]
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                for i in range(4):
                    for j in range(4):
                        self.m[i][j] = self._checked(a[i][j])
            elif len(a) == 16:
                for i in range(4):
                    for j in range(4):
                        self.m[i][j] = self._checked(a[i*4 + j])
            else:
                raise ValueError('bad thing used in attempt to initialize transform: {}'.format(a))
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize transform: {}'.format(a))

    @staticmethod
    def _checked(x):
        if not isgoodnum(x):
            raise ValueError('bad element in transform initialization: {}'.format(x))
        return float(x)

    def __repr__(self):
        return "Transform({},{},{},{})".format(*self.m)

    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        return self.m[i][j]

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    # compose two transforms (self applied after x), or apply to a point
    def mul(self, x):
        if isinstance(x, Transform):
            return Transform([[_dot4(self.getrow(i), x.getcol(j)) for j in range(4)]
                              for i in range(4)])
        elif isinstance(x, Point):
            return self.apply(x)
        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def __mul__(self, x):
        if isinstance(x, (Transform, Point)):
            return self.mul(x)
        return NotImplemented

    def apply(self, p):
        """Transform the position ``p``."""
        v = [p.x.value, p.y.value, p.z.value, 1.0]
        r = [_dot4(self.m[i], v) for i in range(4)]
        if abs(r[3]) < epsilon:
            raise ValueError('transform maps point to infinity: {}'.format(p))
        return Point(r[0] / r[3], r[1] / r[3], r[2] / r[3])

    def apply_vector(self, v):
        """Transform the direction ``v``; translation does not apply."""
        d = [v.x.value, v.y.value, v.z.value, 0.0]
        return Point(_dot4(self.m[0], d), _dot4(self.m[1], d), _dot4(self.m[2], d))

    def _linear_columns(self):
        return [Point(self.m[0][j], self.m[1][j], self.m[2][j]) for j in range(3)]

    def is_uniform(self):
        """True if the linear part is a rotation/reflection times a uniform
        scale, i.e. the transform maps circles to circles."""
        if any(abs(x) > epsilon for x in self.m[3][:3]) or abs(self.m[3][3] - 1.0) > epsilon:
            return False
        cols = self._linear_columns()
        lengths = [c.norm() for c in cols]
        if lengths[0].is_zero():
            return False
        if not (lengths[0] == lengths[1] and lengths[1] == lengths[2]):
            return False
        return (cols[0].dot(cols[1]).is_zero() and cols[1].dot(cols[2]).is_zero()
                and cols[0].dot(cols[2]).is_zero())

    def scale_factor(self):
        """Length scale of a uniform transform."""
        if not self.is_uniform():
            raise ValueError('scale_factor() requires a uniform transform')
        return self._linear_columns()[0].norm()


# return the generalized arbitrary axis rotation, angle in degrees
def Rotation(axis, angle, inverse=False):
    u = axis.normalize()
    if inverse:
        angle *= -1.0
    rad = (angle % 360.0) * pi / 180.0

    ux = u.x.value
    uy = u.y.value
    uz = u.z.value

    cang = cos(rad)
    cmin = 1.0 - cang
    sang = sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Transform(R)


def Translation(delta, inverse=False):
    if inverse:
        delta = -delta
    T = [[1, 0, 0, delta.x.value],
         [0, 1, 0, delta.y.value],
         [0, 0, 1, delta.z.value],
         [0, 0, 0, 1]]
    return Transform(T)


def Scale(x, y=None, z=None, inverse=False):
    if isgoodnum(x):
        sx = x
        if isgoodnum(y) and isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x, Point):
        sx, sy, sz = x.as_tuple()
    else:
        raise ValueError('bad scaling values passed to Scale')

    if inverse:
        sx = 1.0/sx
        sy = 1.0/sy
        sz = 1.0/sz

    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1.0]]
    return Transform(S)


__all__ = ['Transform', 'Rotation', 'Translation', 'Scale']
