"""Unit tests for InitialCondition."""

import numpy as np
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from statespace.ssm import InitialCondition
from statespace.errors import DimensionMismatch, InvalidArgument


class TestInitialCondition:
    """Tests for the initial condition container."""

    def test_state_copies_are_independent(self, init_cond):
        """Mutating one state() result affects neither earlier results nor the container."""
        first = init_cond.state()
        second = init_cond.state()
        second[:] = 123.0

        np.testing.assert_array_equal(first, [1.0, -1.0])
        np.testing.assert_array_equal(init_cond.state(), [1.0, -1.0])

    def test_cov_copies_are_independent(self, init_cond):
        """Mutating a cov() result does not change the container."""
        cov = init_cond.cov()
        cov[0, 1] = 9.0

        np.testing.assert_array_equal(init_cond.cov(), [[0.5, 0.1], [0.1, 0.3]])

    def test_constructor_copies_inputs(self):
        """Changing the caller's arrays after construction has no effect."""
        mean = np.zeros(2)
        cov = np.eye(2)
        ic = InitialCondition.create(mean, cov)
        mean[0] = 5.0
        cov[1, 1] = 5.0

        np.testing.assert_array_equal(ic.state(), [0.0, 0.0])
        np.testing.assert_array_equal(ic.cov(), np.eye(2))

    def test_dim(self, init_cond):
        assert init_cond.dim == 2

    def test_shape_mismatch(self):
        """cov must be (n, n) for a length-n mean."""
        with pytest.raises(DimensionMismatch):
            InitialCondition(np.zeros(2), np.eye(3))

    def test_asymmetric_cov(self):
        """cov must be symmetric."""
        with pytest.raises(InvalidArgument):
            InitialCondition(np.zeros(2), np.array([[1.0, 0.5], [0.0, 1.0]]))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
