"""Injectable random source."""
from typing import Optional, Protocol, Union, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of independent standard-normal and uniform draws.

    ``numpy.random.Generator`` satisfies this protocol. Samplers never fall
    back to a process-wide generator: each call uses the source it is given,
    so reproducibility and thread safety are decided by the caller.
    """

    def standard_normal(self, size=None):
        """Draw from N(0, 1)."""
        ...

    def random(self, size=None):
        """Draw from U[0, 1)."""
        ...


def as_random_source(rng: Optional[Union[RandomSource, int]] = None) -> RandomSource:
    """
    Resolve the ``rng`` argument accepted by the samplers.

    Parameters
    ----------
    rng : RandomSource, int or None
        An existing source is returned unchanged. An int is used as a seed
        for ``np.random.default_rng``. None gives a fresh, unseeded generator.

    Returns
    -------
    RandomSource
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    return rng
