"""Sample grids over surfaces, for display and testing only."""

import numpy as np


def grid_size(density) -> int:
    """Number of samples along one parameter direction."""
    return max(2, int(density + 1.1))


class PointGrid:
    """Finite, restartable iterable of surface points.

    Points are produced lazily from ``evaluate(u, v)`` over the cartesian
    product of two parameter arrays; iterating twice yields the same
    sequence.
    """

    def __init__(self, evaluate, u_values, v_values):
        self._evaluate = evaluate
        self._u = np.asarray(u_values, dtype=float)
        self._v = np.asarray(v_values, dtype=float)

    def __iter__(self):
        for u in self._u:
            for v in self._v:
                yield self._evaluate(float(u), float(v))

    def __len__(self):
        return len(self._u) * len(self._v)

    def __repr__(self):
        return "PointGrid({}x{})".format(len(self._u), len(self._v))


def angle_samples(n):
    """``n`` angles covering a full turn without repeating the seam."""
    return np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)


def centered_samples(n, horizon):
    """``n`` values spread evenly over ``[-horizon / 2, horizon / 2]``."""
    return np.linspace(-0.5 * horizon, 0.5 * horizon, n)
