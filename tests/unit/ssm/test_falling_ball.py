"""Unit tests for the falling ball model."""

import numpy as np
import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from statespace.ssm import falling_ball


class TestFallingBall:
    """Falling ball kinematics."""

    def test_dims(self):
        """Height-only model: 2 states, 1 output, 1 control."""
        model, u = falling_ball()

        assert model.dims() == (2, 1)
        assert model.control_dim == 1
        np.testing.assert_allclose(u, [9.81])

    def test_observe_velocity(self):
        """Both states observed when requested."""
        model, _ = falling_ball(observe_velocity=True)

        assert model.dims() == (2, 2)
        np.testing.assert_allclose(model.observe(np.array([3.0, -1.0])), [3.0, -1.0])

    def test_free_fall_matches_kinematics(self):
        """After k steps from rest, h = h0 - g t^2 / 2 and v = -g t."""
        dt, g, h0 = 0.01, 9.81, 100.0
        model, u = falling_ball(dt=dt, gravity=g)
        x = np.array([h0, 0.0])

        for _ in range(100):
            x = model.propagate(x, u)

        t = 100 * dt
        np.testing.assert_allclose(x, [h0 - 0.5 * g * t**2, -g * t], rtol=1e-10)

    def test_output_is_height(self):
        """Observation returns the height, unaffected by the control."""
        model, u = falling_ball()

        np.testing.assert_allclose(model.observe(np.array([2.5, -4.0]), u), [2.5])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
