from .field import Field, FieldBounds
from .prediction import LinearStateEstimator, StateEstimator
from .robot import Robot
from .team import Team
from .world import World

__all__ = [
    "Field",
    "FieldBounds",
    "LinearStateEstimator",
    "StateEstimator",
    "Robot",
    "Team",
    "World",
]
