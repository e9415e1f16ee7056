from nav_core.motion_planning.src.common.navigator_schemes import get_navigator
from nav_core.motion_planning.src.navigator import (
    DirectNavigator,
    Navigator,
    NavigatorResult,
    RRTNavigator,
)

__all__ = [
    "get_navigator",
    "DirectNavigator",
    "Navigator",
    "NavigatorResult",
    "RRTNavigator",
]
