"""
cachematrix: memoized matrix inversion.

Inverting a matrix is expensive, so a CachedMatrix remembers the inverse of
the matrix it holds. resolve_inverse returns the remembered inverse when it
is still valid and computes (and stores) it otherwise. Replacing the matrix
with CachedMatrix.set always discards the stored inverse.

Example:
    >>> x = make_cache_matrix([[4, 9], [11, 2]])
    >>> inv = resolve_inverse(x)
    >>> resolve_inverse(x, verbose=False) is inv
    True
"""

__version__ = "0.1.0"

from cachematrix.config import SolveConfig, get_config, set_config
from cachematrix.errors import CacheMatrixError, InvalidArgumentError, SingularMatrixError
from cachematrix.inverse import cache_solve, is_identity, resolve_inverse, solve
from cachematrix.matrix import CachedMatrix, InverseCache, make_cache_matrix

__all__ = [
    "CachedMatrix",
    "InverseCache",
    "make_cache_matrix",
    "resolve_inverse",
    "cache_solve",
    "solve",
    "is_identity",
    "SolveConfig",
    "get_config",
    "set_config",
    "CacheMatrixError",
    "InvalidArgumentError",
    "SingularMatrixError",
]
