"""
Cached Matrix: a matrix paired with its memoized inverse.

The container holds one matrix and, once computed, its inverse. Replacing the
matrix always discards the inverse, so a cached inverse never outlives the
matrix it was computed from. The inverse itself is computed elsewhere
(see cachematrix.inverse.resolve_inverse) and handed back via set_inverse.
"""

import numpy as np
from typing import Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class InverseCache(Protocol):
    """
    Capability set required by resolve_inverse.

    Any object providing these four methods can be resolved, CachedMatrix
    being the standard implementation.
    """

    def set(self, new_matrix) -> None: ...

    def get(self) -> Optional[np.ndarray]: ...

    def set_inverse(self, inverse: np.ndarray) -> None: ...

    def get_inverse(self) -> Optional[np.ndarray]: ...


class CachedMatrix:
    """
    Mutable holder for a matrix and its cached inverse.

    States:
        empty:  no matrix set, get() returns None
        stale:  matrix set, no inverse cached
        cached: matrix set, inverse cached

    The stored matrix is a private read-only copy, so in-place edits by the
    caller cannot silently invalidate the cached inverse. Use set() to change
    the matrix.
    """

    def __init__(self, matrix=None):
        """
        Initialize the container.

        Args:
            matrix: Optional initial matrix (array-like). None leaves the
                container empty.
        """
        self._matrix = None
        self._inverse = None
        self.set(matrix)

    def set(self, new_matrix):
        """
        Replace the matrix and drop any cached inverse.

        The inverse is cleared unconditionally, even when new_matrix equals
        the current matrix. No shape validation happens here; non-square
        input fails later, at inversion time.

        Args:
            new_matrix: Array-like matrix, or None to empty the container
        """
        if new_matrix is None:
            self._matrix = None
        else:
            matrix = np.array(new_matrix)
            matrix.flags.writeable = False
            self._matrix = matrix
        self._inverse = None

    def get(self) -> Optional[np.ndarray]:
        """Return the current matrix, or None if the container is empty."""
        return self._matrix

    def set_inverse(self, inverse: np.ndarray):
        """
        Store an inverse for the current matrix.

        Meant to be called by resolve_inverse right after a successful
        computation. Storing a value that was not computed from the current
        matrix is allowed but breaks the cache guarantee.

        Args:
            inverse: Inverse of the current matrix
        """
        self._inverse = inverse

    def get_inverse(self) -> Optional[np.ndarray]:
        """
        Return the cached inverse.

        Returns:
            np.ndarray or None: None means no inverse is cached. A cached
            inverse is never None, even if all of its entries are zero.
        """
        return self._inverse

    def clear_inverse(self):
        """Drop the cached inverse while keeping the matrix."""
        self._inverse = None

    def has_inverse(self) -> bool:
        """Check if an inverse is cached."""
        return self._inverse is not None

    def is_empty(self) -> bool:
        """Check if no matrix is set."""
        return self._matrix is None

    @property
    def shape(self) -> Optional[Tuple[int, ...]]:
        """Shape of the current matrix, None when empty."""
        return None if self._matrix is None else self._matrix.shape

    def __repr__(self):
        if self.is_empty():
            return "CachedMatrix(empty)"
        state = "cached" if self.has_inverse() else "stale"
        return f"CachedMatrix(shape={self.shape}, {state})"


def make_cache_matrix(x=None) -> CachedMatrix:
    """
    Build a CachedMatrix.

    Args:
        x: Optional initial matrix (array-like)

    Returns:
        CachedMatrix: New container holding x
    """
    return CachedMatrix(x)
