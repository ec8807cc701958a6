"""
Metrics for checking simulated trajectories and sampler output.
"""
import numpy as np


def compute_mse(estimated, true):
    """
    Compute Mean Squared Error.

    Parameters
    ----------
    estimated : ndarray
        Estimated values
    true : ndarray
        True values

    Returns
    -------
    float
        Mean squared error
    """
    return np.mean((estimated - true)**2)


def compute_rmse(estimated, true):
    """Root Mean Squared Error."""
    return np.sqrt(compute_mse(estimated, true))


def empirical_covariance(samples):
    """
    Sample covariance of zero-mean samples stored as columns.

    Parameters
    ----------
    samples : ndarray [n, k]
        One sample per column

    Returns
    -------
    ndarray [n, n]
    """
    samples = np.asarray(samples, dtype=float)
    return samples @ samples.T / samples.shape[1]


def relative_frobenius_error(estimate, reference):
    """
    ||estimate - reference||_F / ||reference||_F.

    Falls back to the absolute error when reference is the zero matrix.
    """
    err = np.linalg.norm(estimate - reference, ord='fro')
    ref = np.linalg.norm(reference, ord='fro')
    return err / ref if ref > 0 else err


def index_frequencies(indices, n_bins):
    """
    Empirical frequency of each index in [0, n_bins).

    Parameters
    ----------
    indices : ndarray [k] of int
    n_bins : int

    Returns
    -------
    ndarray [n_bins]
        Frequencies summing to 1
    """
    counts = np.bincount(np.asarray(indices, dtype=int), minlength=n_bins)
    return counts / max(len(indices), 1)
