"""Initial state distribution container."""
import numpy as np

from ..errors import DimensionMismatch, InvalidArgument


class InitialCondition:
    """Mean and covariance of the initial state.

    Inputs are copied on construction and every accessor returns a fresh
    copy, so callers can modify what they get back without affecting the
    stored values.

    Parameters
    ----------
    mean : ndarray [n]
        Initial state mean
    cov : ndarray [n, n]
        Initial state covariance (symmetric PSD; PSD is not verified)
    """

    def __init__(self, mean, cov):
        mean = np.array(mean, dtype=float, copy=True)
        cov = np.array(cov, dtype=float, copy=True)

        if mean.ndim != 1:
            raise DimensionMismatch(f"mean must be a 1D vector, got shape {mean.shape}")
        n = mean.shape[0]
        if cov.shape != (n, n):
            raise DimensionMismatch(f"cov must be ({n}, {n}), got {cov.shape}")
        if not np.allclose(cov, cov.T):
            raise InvalidArgument("cov must be symmetric")

        self._mean = mean
        self._cov = cov

    @classmethod
    def create(cls, mean, cov) -> "InitialCondition":
        return cls(mean, cov)

    @property
    def dim(self) -> int:
        return self._mean.shape[0]

    def state(self) -> np.ndarray:
        """Initial state mean (copy)."""
        return self._mean.copy()

    def cov(self) -> np.ndarray:
        """Initial state covariance (copy)."""
        return self._cov.copy()

    def __repr__(self):
        return f"InitialCondition(dim={self.dim})"
