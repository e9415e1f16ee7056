from typing import Type

from nav_core.motion_planning.src.navigator import (
    DirectNavigator,
    Navigator,
    RRTNavigator,
)


def get_navigator(scheme_name: str) -> Type[Navigator]:
    """
    Get the navigator class based on the scheme name.
    """
    scheme = scheme_name.lower()

    if scheme == "rrt":
        return RRTNavigator
    elif scheme == "direct":
        return DirectNavigator

    raise ValueError(f"Unknown navigator scheme: {scheme_name}")
