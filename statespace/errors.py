"""Exceptions raised by models and samplers."""
import numpy as np


class StateSpaceError(Exception):
    """Base class for all statespace errors."""


class DimensionMismatch(StateSpaceError, ValueError):
    """A vector or matrix does not match the model's declared dimensions."""


class InvalidArgument(StateSpaceError, ValueError):
    """An argument is outside the accepted domain (sample count, weights, ...)."""


class FactorizationError(StateSpaceError, np.linalg.LinAlgError):
    """The covariance decomposition could not be computed."""
