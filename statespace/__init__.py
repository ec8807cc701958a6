"""
statespace: Linear State Space Models and Sampling Primitives

This package contains implementations of:
- Discrete-time affine state space models (propagate / observe)
- Correlated Gaussian noise sampling and weighted resampling
- Utility functions (metrics, run logging)
"""
import logging

from .errors import StateSpaceError, DimensionMismatch, InvalidArgument, FactorizationError
from .ssm import LinearSystemModel, InitialCondition, falling_ball, simulate
from .sampling import (
    RandomSource,
    as_random_source,
    sample_correlated_gaussian,
    covariance_sqrt,
    sample_initial_particles,
    weighted_draw,
    systematic_resample,
    effective_sample_size,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # errors
    'StateSpaceError',
    'DimensionMismatch',
    'InvalidArgument',
    'FactorizationError',
    # models
    'LinearSystemModel',
    'InitialCondition',
    'falling_ball',
    'simulate',
    # sampling
    'RandomSource',
    'as_random_source',
    'sample_correlated_gaussian',
    'covariance_sqrt',
    'sample_initial_particles',
    'weighted_draw',
    'systematic_resample',
    'effective_sample_size',
]
