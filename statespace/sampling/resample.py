"""
Weighted resampling of particle indices.

Contains:
- Roulette wheel draw (fitness proportionate selection)
- Systematic (low variance) resampling
- Effective sample size
"""
import logging

import numpy as np

from ..errors import InvalidArgument
from .rng import as_random_source

logger = logging.getLogger(__name__)


def _check_weights(weights):
    """
    Validate a weight vector.

    Returns the weights as a float array scaled so the largest is 1. The
    proportions are unchanged, and the cumulative sum can neither overflow
    nor lose resolution to subnormal values.
    """
    if weights is None:
        raise InvalidArgument("Invalid probability weights: None")
    w = np.asarray(weights, dtype=float)
    if w.ndim != 1 or w.size == 0:
        raise InvalidArgument(f"Invalid probability weights: {weights!r}")
    if not np.all(np.isfinite(w)):
        raise InvalidArgument("Invalid probability weights: non-finite entries")
    if np.any(w < 0):
        raise InvalidArgument("Invalid probability weights: negative entries")
    if not np.any(w > 0):
        raise InvalidArgument("Invalid probability weights: all weights are zero")
    return w / w.max()


def _check_draws(count):
    if isinstance(count, bool) or not isinstance(count, (int, np.integer)):
        raise InvalidArgument(f"Number of draws must be an integer, got {count!r}")
    if count < 0:
        raise InvalidArgument(f"Invalid number of draws requested: {count}")
    return int(count)


def weighted_draw(weights, count, rng=None):
    """
    Roulette wheel draw from the probability mass function given by weights.

    Weights need not be normalized: uniform draws are scaled by the total
    weight instead. Sampling is with replacement.

    Parameters
    ----------
    weights : array_like [L]
        Non-negative weights, at least one strictly positive
    count : int
        Number of draws
    rng : RandomSource, int or None
        Source of uniform draws on [0, 1)

    Returns
    -------
    indices : ndarray [count] of int
        Drawn indices in draw order
    """
    w = _check_weights(weights)
    count = _check_draws(count)
    rng = as_random_source(rng)

    # cdf is non-decreasing since weights are non-negative
    cdf = np.cumsum(w)
    u = np.asarray(rng.random(count), dtype=float) * cdf[-1]
    # Smallest i such that cdf[i] > u
    idx = np.searchsorted(cdf, u, side='right')
    # u < cdf[-1] always holds in exact arithmetic; rounding may overshoot,
    # in which case fall back to the last index with positive weight
    return np.minimum(idx, np.flatnonzero(w)[-1]).astype(int)


def systematic_resample(weights, rng=None, count=None):
    """Systematic resampling (low variance)."""
    w = _check_weights(weights)
    N = len(w) if count is None else _check_draws(count)
    rng = as_random_source(rng)

    cumsum = np.cumsum(w / w.sum())
    u = (float(rng.random()) + np.arange(N)) / N
    return np.minimum(np.searchsorted(cumsum, u, side='right'), np.flatnonzero(w)[-1])


def effective_sample_size(weights):
    """
    Effective sample size 1 / sum(w_i^2) of the normalized weights.

    Parameters
    ----------
    weights : array_like [N]

    Returns
    -------
    float
        Between 1 and N
    """
    w = _check_weights(weights)
    w = w / w.sum()
    ess = 1.0 / np.sum(w ** 2)
    logger.debug("effective_sample_size: %.2f of %d", ess, len(w))
    return float(ess)
