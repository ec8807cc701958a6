"""Correlated Gaussian noise sampling."""
import logging

import numpy as np
from scipy import linalg as sla

from ..errors import FactorizationError, InvalidArgument
from .rng import as_random_source

logger = logging.getLogger(__name__)


def _check_count(count, minimum):
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise InvalidArgument(f"Sample count must be an integer, got {count!r}")
    if count < minimum:
        raise InvalidArgument(f"Invalid number of samples requested: {count}")
    return int(count)


def covariance_sqrt(cov):
    """
    Square-root factor L of a covariance matrix, with L @ L.T = cov.

    Uses SVD rather than Cholesky: Cholesky fails or becomes unstable when
    cov is singular or nearly so, which is common for covariances with a
    deterministic channel.

    Parameters
    ----------
    cov : ndarray [n, n]
        Symmetric positive semi-definite covariance

    Returns
    -------
    L : ndarray [n, n]
        U @ diag(sqrt(s)) from cov = U diag(s) V^T
    """
    cov = np.asarray(cov, dtype=float)
    if cov.ndim != 2 or cov.shape[0] != cov.shape[1]:
        raise InvalidArgument(f"Covariance must be a square matrix, got shape {cov.shape}")
    if not np.all(np.isfinite(cov)):
        raise FactorizationError("SVD factorization failed: covariance has non-finite entries")

    try:
        U, s, _ = sla.svd(cov, full_matrices=True, overwrite_a=False)
    except (np.linalg.LinAlgError, ValueError) as e:
        raise FactorizationError(f"SVD factorization failed: {e}") from e

    logger.debug("covariance_sqrt: n=%d, rank=%d", cov.shape[0],
                 int(np.sum(s > s.max(initial=0.0) * 1e-12)))
    return U * np.sqrt(s)


def sample_correlated_gaussian(cov, count, rng=None):
    """
    Draw zero-mean multivariate normal samples with covariance cov.

    Parameters
    ----------
    cov : ndarray [n, n]
        Symmetric positive semi-definite covariance (not modified)
    count : int
        Number of samples, must be at least 2
    rng : RandomSource, int or None
        Source of standard-normal draws

    Returns
    -------
    samples : ndarray [n, count]
        One sample per column
    """
    count = _check_count(count, 2)
    L = covariance_sqrt(cov)
    rng = as_random_source(rng)

    n = L.shape[0]
    Z = np.asarray(rng.standard_normal(n * count), dtype=float).reshape(n, count)
    return L @ Z


def sample_initial_particles(init_cond, count, rng=None):
    """
    Draw particles from the Gaussian described by an initial condition.

    Parameters
    ----------
    init_cond : InitialCondition
        Provides state() [n] and cov() [n, n]
    count : int
        Number of particles, must be at least 2
    rng : RandomSource, int or None

    Returns
    -------
    particles : ndarray [n, count]
        mean + correlated noise, one particle per column
    """
    mean = init_cond.state()
    return mean[:, None] + sample_correlated_gaussian(init_cond.cov(), count, rng)
