"""
Core protocols for pylinsys.

Matrix and Vector are generic over a scalar type. Rather than leave that
type unconstrained, the Scalar protocol names exactly what the algorithms
need so that a non-conforming element is rejected when a Matrix or Vector is
built, not halfway through an elimination.

We use Protocol (structural typing) rather than ABC (nominal typing) so that
float, int, numpy scalars and fractions.Fraction all qualify without
registration.
"""

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    Minimal arithmetic contract for matrix and vector elements.

    Required: addition, subtraction, multiplication, division, negation,
    equality and conversion to float (used for magnitudes, angles and
    zero-threshold rounding).

    Note:
        runtime_checkable only verifies that the methods exist, not their
        signatures. That is enough to reject strings, None and containers.
    """

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...

    def __neg__(self): ...

    def __eq__(self, other) -> bool: ...

    def __float__(self) -> float: ...


T = TypeVar('T', bound=Scalar)
