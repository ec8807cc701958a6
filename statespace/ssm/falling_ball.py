"""Falling ball model."""
import numpy as np

from .linear_system import LinearSystemModel


def falling_ball(dt=0.1, gravity=9.81, observe_velocity=False):
    """
    Ball falling under constant gravity, sampled every dt seconds.

    State: [height, velocity]
    Control: [g] - gravitational acceleration enters through B
    Output: [height] or [height, velocity]

    Parameters
    ----------
    dt : float
        Time step
    gravity : float
        Gravitational acceleration used for the returned control vector
    observe_velocity : bool
        If True, C is the identity and both states are observed

    Returns
    -------
    model : LinearSystemModel
    u : ndarray [1]
        Constant control input [gravity]
    """
    A = np.array([
        [1.0, dt],
        [0.0, 1.0]
    ])
    B = np.array([
        [-0.5 * dt**2],
        [-dt]
    ])
    C = np.eye(2) if observe_velocity else np.array([[1.0, 0.0]])
    D = np.zeros((C.shape[0], 1))

    return LinearSystemModel.create(A, B, C, D), np.array([gravity])
