"""Shared pytest fixtures for unit tests."""

import numpy as np
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from statespace.ssm import LinearSystemModel, InitialCondition


@pytest.fixture
def kf_system():
    """2D state, 1D output, 1D control (A, B, C, D matrices)."""
    A = np.array([[1.0, 0.1], [0.0, 0.95]])
    B = np.array([[0.005], [0.1]])
    C = np.array([[1.0, 0.0]])
    D = np.array([[0.5]])
    return A, B, C, D


@pytest.fixture
def controlled_model(kf_system):
    """Model with both control matrices."""
    A, B, C, D = kf_system
    return LinearSystemModel.create(A, B, C, D)


@pytest.fixture
def autonomous_model(kf_system):
    """Model with no control channel."""
    A, _, C, _ = kf_system
    return LinearSystemModel(A, C)


@pytest.fixture
def init_cond():
    """2D initial condition with correlated covariance."""
    return InitialCondition(np.array([1.0, -1.0]), np.array([[0.5, 0.1], [0.1, 0.3]]))


@pytest.fixture
def correlated_cov():
    """3x3 correlated SPD covariance."""
    return np.array([
        [2.0, 0.6, 0.3],
        [0.6, 1.0, -0.2],
        [0.3, -0.2, 0.5]
    ])


@pytest.fixture
def singular_cov():
    """Rank-1 PSD covariance: second channel is a deterministic copy of the first."""
    v = np.array([1.0, 2.0])
    return np.outer(v, v)


def check_psd(matrix, tol=1e-10):
    """Check if matrix is positive semi-definite."""
    return np.all(np.linalg.eigvalsh(matrix) >= -tol)
