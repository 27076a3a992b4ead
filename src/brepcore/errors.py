"""Exception hierarchy for brepcore.

Two families of failure exist.  Precondition violations are caller bugs
and abort the operation immediately.  Numeric failures of the bounded
scalar arithmetic (``DegenerateOperation``, ``IndeterminateComparison``)
are raised where an answer cannot be computed at all.  Degenerate but
well-defined geometry (tangency, coincidence, antipodal points) is never
an exception; it is reported through typed results.

Copyright (c) 2026 brepcore contributors
MIT License
"""


class GeometryError(ValueError):
    """Base class of all brepcore errors."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


class PreconditionError(GeometryError):
    """Raised when malformed input reaches a constructor or query."""


class DegenerateOperation(GeometryError):
    """Raised when an operation has no defined result, e.g. x / 0."""


class IndeterminateComparison(GeometryError):
    """Raised when a strict ordering is requested between values that are
    equal within tolerance."""


class UnsupportedOperation(NotImplementedError):
    """Raised by algorithmic branches that are not implemented yet."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


def require(condition, message, **details):
    """Raise :class:`PreconditionError` unless ``condition`` holds."""
    if not condition:
        raise PreconditionError(message, details)


__all__ = [
    'GeometryError',
    'PreconditionError',
    'DegenerateOperation',
    'IndeterminateComparison',
    'UnsupportedOperation',
    'require',
]
