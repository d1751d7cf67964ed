"""
Solver defaults.

Defaults can be overridden per call, replaced process-wide with
set_config(), or read from the environment:

    CACHEMATRIX_TOL      float, tolerance on the reciprocal condition number
    CACHEMATRIX_VERBOSE  "0"/"false"/"no"/"off" silences cache-hit notices
"""

import os
from dataclasses import dataclass

import numpy as np

from cachematrix.errors import InvalidArgumentError

# Matches the default tolerance of a LAPACK-backed solve(): machine epsilon
DEFAULT_TOL = float(np.finfo(np.float64).eps)

_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class SolveConfig:
    """
    Defaults used by resolve_inverse when a call does not override them.

    Attributes:
        tol: Matrices with reciprocal condition number below tol are
            treated as singular. 0 disables the check.
        verbose: Print a notice when a cached inverse is returned
    """
    tol: float = DEFAULT_TOL
    verbose: bool = True

    def __post_init__(self):
        if self.tol < 0:
            raise InvalidArgumentError(f"tol must be non-negative, got {self.tol}")

    @classmethod
    def from_env(cls) -> "SolveConfig":
        """
        Build a config from CACHEMATRIX_* environment variables.

        Unset variables keep their defaults.

        Raises:
            InvalidArgumentError: CACHEMATRIX_TOL is not a non-negative float
        """
        tol = os.getenv("CACHEMATRIX_TOL")
        verbose = os.getenv("CACHEMATRIX_VERBOSE")

        try:
            tol = float(tol) if tol else DEFAULT_TOL
        except ValueError as e:
            raise InvalidArgumentError(f"CACHEMATRIX_TOL must be a float, got {tol!r}") from e
        if tol < 0:
            raise InvalidArgumentError(f"CACHEMATRIX_TOL must be non-negative, got {tol}")

        return cls(
            tol=tol,
            verbose=verbose.strip().lower() not in _FALSE_VALUES if verbose else True,
        )


# Read from the environment on first use, not at import
_config = None


def get_config() -> SolveConfig:
    """Return the process-wide default config."""
    global _config
    if _config is None:
        _config = SolveConfig.from_env()
    return _config


def set_config(config: SolveConfig):
    """Replace the process-wide default config."""
    global _config
    _config = config
