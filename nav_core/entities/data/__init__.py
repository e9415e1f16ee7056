from .intent import Intent, IntentType, MoveIntent
from .primitive import MovePrimitive, Primitive, PrimitiveType, StopPrimitive
from .vector import Vector2D

__all__ = [
    "Intent",
    "IntentType",
    "MoveIntent",
    "MovePrimitive",
    "Primitive",
    "PrimitiveType",
    "StopPrimitive",
    "Vector2D",
]
