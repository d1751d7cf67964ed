"""
Inverse resolution with caching.

resolve_inverse returns the cached inverse of a CachedMatrix when one is
present and otherwise computes it with solve(), stores it and returns it.

solve() wraps numpy.linalg.solve with a tolerance check on the reciprocal
condition number (1-norm), so nearly singular matrices are rejected instead
of producing a numerically meaningless inverse:

    rcond(A) = 1 / (||A||_1 ||A^-1||_1)
    rcond(A) < tol  =>  SingularMatrixError
"""

import numpy as np
from typing import Optional

from cachematrix.config import get_config
from cachematrix.errors import InvalidArgumentError, SingularMatrixError
from cachematrix.matrix import InverseCache

CACHE_HIT_MESSAGE = "Returning cached inverse of x"


def is_identity(b, n: int) -> bool:
    """
    Check if b is exactly the n×n identity matrix.

    Args:
        b: Array-like candidate
        n: Expected dimension

    Returns:
        bool: True only for shape (n, n) with ones on the diagonal and
        zeros elsewhere
    """
    b = np.asarray(b)
    return b.shape == (n, n) and np.array_equal(b, np.eye(n))


def reciprocal_condition(a: np.ndarray, inverse: np.ndarray) -> float:
    """
    Reciprocal condition number of a in 1-norm, given its computed inverse.

    Args:
        a: Square matrix, shape (n, n)
        inverse: Inverse of a, as returned by the solver

    Returns:
        float: Value in [0, 1]; 0 when the product of norms is not finite
    """
    with np.errstate(all="ignore"):
        cond = np.linalg.norm(a, 1) * np.linalg.norm(inverse, 1)
    if not np.isfinite(cond) or cond == 0:
        return 0.0
    return float(1.0 / cond)


def solve(a, b=None, tol: Optional[float] = None,
          check_finite: bool = True) -> np.ndarray:
    """
    Solve a x = b, computing the inverse of a when b is omitted.

    Args:
        a: Square numeric matrix, shape (n, n)
        b: Optional right-hand side with n rows (default: identity)
        tol: Tolerance on the reciprocal condition number of a. None uses
            the configured default, 0 disables the check.
        check_finite: Reject matrices containing NaN or inf

    Returns:
        np.ndarray: Solution x (the inverse of a when b is omitted)

    Raises:
        InvalidArgumentError: a is not a finite square numeric matrix, or b
            has the wrong number of rows
        SingularMatrixError: a is singular or too ill-conditioned
    """
    a = np.asarray(a)
    if not (np.issubdtype(a.dtype, np.number) or a.dtype == np.bool_):
        raise InvalidArgumentError(f"Matrix must be numeric, got dtype {a.dtype}")
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise InvalidArgumentError(f"Matrix must be square, got shape {a.shape}")

    a = a.astype(np.result_type(a.dtype, np.float64))
    n = a.shape[0]

    if check_finite and not np.all(np.isfinite(a)):
        raise InvalidArgumentError("Matrix contains NaN or infinite values")

    if b is not None:
        try:
            b = np.asarray(b)
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(f"Right-hand side is not an array: {e}") from e
        if b.ndim not in (1, 2) or b.shape[0] != n:
            raise InvalidArgumentError(
                f"Right-hand side must have {n} rows, got shape {b.shape}"
            )

    if tol is None:
        tol = get_config().tol
    if tol < 0:
        raise InvalidArgumentError(f"tol must be non-negative, got {tol}")

    if n == 0:
        return np.empty((0, 0) if b is None else b.shape, dtype=a.dtype)

    # One factorization yields the inverse; the condition estimate reuses it
    try:
        inverse = np.linalg.solve(a, np.eye(n, dtype=a.dtype))
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(f"Matrix is exactly singular: {e}", rcond=0.0) from e

    if tol > 0:
        rcond = reciprocal_condition(a, inverse)
        if rcond < tol:
            raise SingularMatrixError(
                f"System is computationally singular: "
                f"reciprocal condition number = {rcond:.6g}",
                rcond=rcond,
            )

    if b is None:
        return inverse
    return inverse @ b


def resolve_inverse(x, b=None, tol: Optional[float] = None,
                    verbose: Optional[bool] = None, **solver_options) -> Optional[np.ndarray]:
    """
    Return the inverse of the matrix held by x, computing it only on a miss.

    On a cache hit the stored inverse object is returned as-is. On a miss
    the inverse is computed, stored in x and returned. Errors from the
    solver propagate and leave the cache empty, so the next call retries.

    Args:
        x: Object satisfying InverseCache (normally a CachedMatrix)
        b: Optional right-hand side. Accepted only if it is exactly the
            identity matrix matching the number of rows of x.get().
        tol: Tolerance passed to solve() (None uses the configured default)
        verbose: Print a notice on a cache hit (None uses the configured
            default)
        **solver_options: Further keyword arguments for solve()

    Returns:
        np.ndarray or None: The inverse, or None when x holds no matrix

    Raises:
        InvalidArgumentError: x is not a cached matrix, or b is not the
            matching identity matrix
        SingularMatrixError: The matrix cannot be inverted
    """
    if not isinstance(x, InverseCache):
        raise InvalidArgumentError(
            f"Argument x is not a cached matrix (got {type(x).__name__}). "
            f"Use make_cache_matrix()."
        )

    if verbose is None:
        verbose = get_config().verbose

    if b is not None:
        matrix = x.get()
        message = ("resolve_inverse only computes inverses: if b is given it must be "
                   "an identity matrix with the dimensions of x")
        try:
            shape = np.shape(matrix) if matrix is not None else ()
            matches = len(shape) > 0 and is_identity(b, shape[0])
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(message) from e
        if not matches:
            raise InvalidArgumentError(message)

    inverse = x.get_inverse()
    if inverse is not None:
        if verbose:
            print(CACHE_HIT_MESSAGE)
        return inverse

    matrix = x.get()
    # An empty container resolves to its own empty value
    if matrix is None:
        return matrix

    inverse = solve(matrix, tol=tol, **solver_options)
    inverse.flags.writeable = False
    x.set_inverse(inverse)
    return inverse


cache_solve = resolve_inverse
