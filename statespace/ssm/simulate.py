"""Trajectory simulation for linear state space models."""
import numpy as np

from ..errors import DimensionMismatch, InvalidArgument
from ..sampling.gaussian import covariance_sqrt, sample_correlated_gaussian
from ..sampling.rng import as_random_source


def _noise_sequence(cov, dim, T, rng):
    """Noise draws [T, dim] from N(0, cov); zeros when cov is None."""
    if cov is None:
        return np.zeros((T, dim))
    cov = np.asarray(cov, dtype=float)
    if cov.shape != (dim, dim):
        raise DimensionMismatch(f"Noise covariance must be ({dim}, {dim}), got {cov.shape}")
    # The sampler needs at least two samples
    return sample_correlated_gaussian(cov, max(T, 2), rng)[:, :T].T


def simulate(model, init_cond, Q, R, T, rng=None, controls=None):
    """
    Simulate a linear state space model.

    x_0 ~ N(m0, P0)
    x_t = A x_{t-1} + B u_t + q_t,  q_t ~ N(0, Q)
    y_t = C x_t + D u_t + r_t,      r_t ~ N(0, R)

    Parameters
    ----------
    model : LinearSystemModel
    init_cond : InitialCondition
        Initial state distribution
    Q : ndarray [n, n] or None
        Process noise covariance; None for noise-free dynamics
    R : ndarray [p, p] or None
        Measurement noise covariance; None for noise-free observations
    T : int
        Number of time steps
    rng : RandomSource, int or None
    controls : ndarray [T, m], optional
        Control input per time step

    Returns
    -------
    xs : ndarray [T, n]
        Latent states
    ys : ndarray [T, p]
        Observations
    """
    if isinstance(T, bool) or not isinstance(T, (int, np.integer)) or T < 1:
        raise InvalidArgument(f"Number of time steps must be a positive integer, got {T!r}")
    n, p = model.dims()
    if init_cond.dim != n:
        raise DimensionMismatch(f"Initial condition has dimension {init_cond.dim}, model state is {n}")
    if controls is not None:
        controls = np.asarray(controls, dtype=float)
        if controls.shape != (T, model.control_dim):
            raise DimensionMismatch(
                f"controls must be ({T}, {model.control_dim}), got {controls.shape}")

    rng = as_random_source(rng)

    x = init_cond.state() + covariance_sqrt(init_cond.cov()) @ rng.standard_normal(n)
    qs = _noise_sequence(Q, n, T, rng)
    rs = _noise_sequence(R, p, T, rng)

    xs = np.zeros((T, n))
    ys = np.zeros((T, p))

    for t in range(T):
        u = None if controls is None else controls[t]
        x = model.propagate(x, u, qs[t])
        y = model.observe(x, u, rs[t])
        xs[t], ys[t] = x, y

    return xs, ys
