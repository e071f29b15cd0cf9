"""
Exceptions raised by spacegeom computations.

Every failure is a ``GeometryError``, which is also a ``ValueError`` so
that callers used to catching ``ValueError`` for bad geometry keep
working.

- DegenerateInput: zero-length direction/normal vectors, coincident
  points defining a line, collinear points defining a plane.
- NumericInstability: a denominator within epsilon of zero that no
  degeneracy check caught first.
"""


class GeometryError(ValueError):
    """Base exception for spacegeom errors."""

    def __init__(self, message: str, operation: str = ""):
        self.message = message
        self.operation = operation
        super().__init__(message)

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class DegenerateInput(GeometryError):
    """Input geometry does not define the requested object."""
    pass


class NumericInstability(GeometryError):
    """A computation hit a near-zero denominator."""
    pass


__all__ = [
    'GeometryError',
    'DegenerateInput',
    'NumericInstability',
]
