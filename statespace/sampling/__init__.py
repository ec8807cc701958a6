"""Noise generation and resampling."""
from .rng import RandomSource, as_random_source
from .gaussian import sample_correlated_gaussian, covariance_sqrt, sample_initial_particles
from .resample import weighted_draw, systematic_resample, effective_sample_size

__all__ = [
    'RandomSource',
    'as_random_source',
    'sample_correlated_gaussian',
    'covariance_sqrt',
    'sample_initial_particles',
    'weighted_draw',
    'systematic_resample',
    'effective_sample_size',
]
