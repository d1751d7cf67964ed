"""
Exceptions raised by cachematrix.

InvalidArgumentError covers bad inputs (wrong container, non-identity
right-hand side, malformed matrix). SingularMatrixError covers matrices the
solver cannot invert within tolerance.
"""

import numpy as np


class CacheMatrixError(Exception):
    """Base class for all cachematrix errors."""


class InvalidArgumentError(CacheMatrixError, ValueError):
    """Argument is not a cached matrix, or is not usable for inversion."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """
    Matrix is singular or too ill-conditioned to invert.

    Attributes:
        rcond (float): Reciprocal condition number estimate, if known
    """

    def __init__(self, message: str, rcond: float = None):
        super().__init__(message)
        self.rcond = rcond
