"""
Utility Functions.

This module contains utility functions for:
- Metrics computation
"""
from .metrics import (
    compute_mse,
    compute_rmse,
    empirical_covariance,
    relative_frobenius_error,
    index_frequencies,
)

__all__ = [
    'compute_mse',
    'compute_rmse',
    'empirical_covariance',
    'relative_frobenius_error',
    'index_frequencies',
]
