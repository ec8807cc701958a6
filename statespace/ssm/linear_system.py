"""Discrete-time linear (affine) state space model."""
from typing import Optional, Tuple

import numpy as np

from ..errors import DimensionMismatch


def _frozen_matrix(M, name):
    """Private read-only float copy of a 2D matrix."""
    M = np.array(M, dtype=float, copy=True)
    if M.ndim != 2:
        raise DimensionMismatch(f"{name} must be a 2D matrix, got ndim={M.ndim}")
    M.setflags(write=False)
    return M


def _vector(v, name):
    v = np.asarray(v, dtype=float)
    if v.ndim != 1:
        raise DimensionMismatch(f"{name} must be a 1D vector, got shape {v.shape}")
    return v


class LinearSystemModel:
    """Discrete-time affine dynamical system.

    Model:
        x' = A x + B u + q
        y  = C x + D u + r

    B and D are optional: a model without them has no control channel.
    Matrices are copied on construction and never change afterwards, so a
    model can be shared freely between threads.

    Parameters
    ----------
    A : ndarray [n, n]
        State transition matrix
    C : ndarray [p, n]
        Observation matrix
    B : ndarray [n, m], optional
        Control-to-state matrix
    D : ndarray [p, m], optional
        Control-to-output matrix
    """

    def __init__(self, A, C, B=None, D=None):
        A = _frozen_matrix(A, "A")
        C = _frozen_matrix(C, "C")
        n, p = A.shape[0], C.shape[0]

        if A.shape != (n, n):
            raise DimensionMismatch(f"A must be ({n}, {n}), got {A.shape}")
        if C.shape[1] != n:
            raise DimensionMismatch(f"C must be ({p}, {n}), got {C.shape}")

        m = None
        if B is not None:
            B = _frozen_matrix(B, "B")
            m = B.shape[1]
            if B.shape[0] != n:
                raise DimensionMismatch(f"B must be ({n}, {m}), got {B.shape}")
        if D is not None:
            D = _frozen_matrix(D, "D")
            if m is None:
                m = D.shape[1]
            if D.shape != (p, m):
                raise DimensionMismatch(f"D must be ({p}, {m}), got {D.shape}")

        self._A = A
        self._B = B
        self._C = C
        self._D = D
        self._n = n
        self._p = p
        self._m = 0 if m is None else m

    @classmethod
    def create(cls, A, B=None, C=None, D=None) -> "LinearSystemModel":
        """Build a model from (A, B, C, D); B and D may be omitted, C may not."""
        if C is None:
            raise DimensionMismatch("C is required: the model must have an output matrix")
        return cls(A, C, B=B, D=D)

    @property
    def state_dim(self) -> int:
        return self._n

    @property
    def output_dim(self) -> int:
        return self._p

    @property
    def control_dim(self) -> int:
        """Columns of B (or D); 0 when the model has no control channel."""
        return self._m

    def dims(self) -> Tuple[int, int]:
        """Return (state dimension, output dimension)."""
        return self._n, self._p

    def _check_inputs(self, x, u):
        x = _vector(x, "x")
        if x.shape[0] != self._n:
            raise DimensionMismatch(f"Invalid state vector: expected length {self._n}, got {x.shape[0]}")
        if u is not None:
            u = _vector(u, "u")
            if u.shape[0] != self._m:
                raise DimensionMismatch(f"Invalid input vector: expected length {self._m}, got {u.shape[0]}")
        return x, u

    def propagate(self, x, u=None, q=None) -> np.ndarray:
        """
        Propagate the internal state one step: x' = A x + B u + q.

        Parameters
        ----------
        x : ndarray [n]
            Current state
        u : ndarray [m], optional
            Control input, skipped when None or when the model has no B
        q : ndarray [n], optional
            Process noise, added only when its length is n

        Returns
        -------
        ndarray [n]
            Next state
        """
        x, u = self._check_inputs(x, u)

        out = self._A @ x
        if u is not None and self._B is not None:
            out = out + self._B @ u
        if q is not None:
            q = np.asarray(q, dtype=float)
            if q.shape == (self._n,):
                out = out + q
        return out

    def observe(self, x, u=None, r=None) -> np.ndarray:
        """
        Observe the output for state x: y = C x + D u + r.

        Parameters
        ----------
        x : ndarray [n]
            Current state
        u : ndarray [m], optional
            Control input, skipped when None or when the model has no D
        r : ndarray [p], optional
            Measurement noise, added only when its length is p

        Returns
        -------
        ndarray [p]
            Output vector
        """
        x, u = self._check_inputs(x, u)

        out = self._C @ x
        if u is not None and self._D is not None:
            out = out + self._D @ u
        if r is not None:
            r = np.asarray(r, dtype=float)
            if r.shape == (self._p,):
                out = out + r
        return out

    # Accessors hand out copies; the stored matrices stay read-only.

    @staticmethod
    def _copy_or_empty(M: Optional[np.ndarray]) -> np.ndarray:
        if M is None:
            return np.empty((0, 0))
        return M.copy()

    def state_matrix(self) -> np.ndarray:
        """State transition matrix A."""
        return self._A.copy()

    def state_ctl_matrix(self) -> np.ndarray:
        """Control matrix B, or an empty (0, 0) array if absent."""
        return self._copy_or_empty(self._B)

    def output_matrix(self) -> np.ndarray:
        """Observation matrix C."""
        return self._C.copy()

    def output_ctl_matrix(self) -> np.ndarray:
        """Output control matrix D, or an empty (0, 0) array if absent."""
        return self._copy_or_empty(self._D)

    def __repr__(self):
        return (f"LinearSystemModel(n={self._n}, p={self._p}, m={self._m}, "
                f"B={'yes' if self._B is not None else 'no'}, "
                f"D={'yes' if self._D is not None else 'no'})")
