"""State Space Model implementations."""
from .linear_system import LinearSystemModel
from .initial_condition import InitialCondition
from .falling_ball import falling_ball
from .simulate import simulate

__all__ = [
    'LinearSystemModel',
    'InitialCondition',
    'falling_ball',
    'simulate',
]
