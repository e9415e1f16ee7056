import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence

import numpy as np

from nav_core.config.settings import RRT_PROGRESS_LOG_INTERVAL
from nav_core.entities.data.vector import Vector2D
from nav_core.entities.game.field import FieldBounds
from nav_core.motion_planning.src.planning.config import RRTConfig
from nav_core.motion_planning.src.planning.exit_strategies import (
    ClosestPointExit,
    ExitStrategy,
)
from nav_core.motion_planning.src.planning.geometry import (
    EPSILON,
    points_in_circles,
    segment_intersects_circles,
)
from nav_core.motion_planning.src.planning.obstacles import (
    RobotObstacle,
    obstacles_to_arrays,
)

logger = logging.getLogger(__name__)


class PlanStatus(Enum):
    FOUND = auto()
    EXHAUSTED = auto()  # no collision free path within the iteration budget
    INVALID_REQUEST = auto()  # the goal is outside the planning bounds


@dataclass
class PlanResult:
    status: PlanStatus
    waypoints: List[Vector2D] = field(default_factory=list)
    iterations: int = 0

    @property
    def found(self) -> bool:
        return self.status is PlanStatus.FOUND


class RRTTree:
    """Arena of tree nodes addressed by index. Node 0 is the root and has parent -1.

    Positions live in one preallocated array so nearest neighbour queries are a single vectorised pass.
    """

    def __init__(self, root: np.ndarray, capacity: int):
        self._positions = np.empty((capacity + 1, 2), dtype=float)
        self._parents = np.full(capacity + 1, -1, dtype=np.intp)
        self._positions[0] = root
        self._size = 1

    def __len__(self) -> int:
        return self._size

    def add(self, position: np.ndarray, parent: int) -> int:
        index = self._size
        self._positions[index] = position
        self._parents[index] = parent
        self._size += 1
        return index

    def nearest(self, point: np.ndarray) -> int:
        diff = self._positions[: self._size] - point
        return int(np.argmin(np.einsum("ij,ij->i", diff, diff)))

    def position(self, index: int) -> np.ndarray:
        return self._positions[index]

    def parent(self, index: int) -> int:
        return int(self._parents[index])

    def path_to(self, index: int) -> List[np.ndarray]:
        """Positions from the root to `index`, following parent links."""
        path = []
        while index != -1:
            path.append(self._positions[index].copy())
            index = self.parent(index)
        path.reverse()
        return path


class RRTPlanner:
    """Rapidly-exploring Random Tree planner over circular obstacles.

    This class is stateless between calls: every `plan` builds a fresh tree that is
    discarded once the waypoints are extracted. Pass a seeded `random.Random` for
    reproducible plans.

    Args:
        config (RRTConfig, optional): Planner tuning. Defaults to the values in settings.
        rng (random.Random, optional): Source of randomness.
        exit_strategy (ExitStrategy, optional): How to get out when the start is inside an obstacle.
    """

    def __init__(
        self,
        config: Optional[RRTConfig] = None,
        rng: Optional[random.Random] = None,
        exit_strategy: Optional[ExitStrategy] = None,
    ):
        self.config = config if config is not None else RRTConfig()
        self._rng = rng if rng is not None else random.Random()
        self._exit_strategy = exit_strategy if exit_strategy is not None else ClosestPointExit()

    def plan(
        self,
        start: Vector2D,
        goal: Vector2D,
        obstacles: Sequence[RobotObstacle],
        bounds: FieldBounds,
    ) -> PlanResult:
        """
        Plan a collision free path from start to goal.

        Args:
            start (Vector2D): Where the robot is now.
            goal (Vector2D): Where it should end up.
            obstacles (Sequence[RobotObstacle]): Circles the path must stay out of.
            bounds (FieldBounds): Region random samples are drawn from.

        Returns:
            PlanResult: On success the waypoints run from start to a point within `goal_tolerance` of the goal
            (the goal itself when it can be reached directly from the last tree node).
        """
        start, goal = Vector2D(start), Vector2D(goal)
        goal_arr = goal.to_array()
        centers, radii = obstacles_to_arrays(obstacles)

        if not bounds.contains(goal):
            logger.debug("RRT Planner: Goal %s outside planning bounds", goal)
            return PlanResult(PlanStatus.INVALID_REQUEST)

        if points_in_circles(goal_arr[None, :], centers, radii)[0]:
            logger.debug("RRT Planner: Goal is inside an obstacle - no path there")
            return PlanResult(PlanStatus.EXHAUSTED)

        prefix: List[np.ndarray] = []
        exit_point = self._exit_strategy.get_exit_point(start, obstacles)
        if exit_point is not None:
            logger.debug("RRT Planner: Start is inside an obstacle - leaving via %s", exit_point)
            prefix.append(start.to_array())
            start = exit_point
        start_arr = start.to_array()

        if self._is_clear(start_arr, goal_arr, centers, radii):
            if np.linalg.norm(goal_arr - start_arr) <= self.config.goal_tolerance or self.config.direct_path_shortcut:
                logger.debug("RRT Planner: Goal direct line of sight - Go straight there")
                return self._result(prefix + [start_arr, goal_arr], iterations=0)
        elif np.linalg.norm(goal_arr - start_arr) <= self.config.goal_tolerance:
            return self._result(prefix + [start_arr], iterations=0)

        tree = RRTTree(start_arr, self.config.max_iterations)
        for iteration in range(1, self.config.max_iterations + 1):
            if iteration % RRT_PROGRESS_LOG_INTERVAL == 0:
                logger.debug("RRT info: ITERS: %d nodes: %d", iteration, len(tree))

            sample = self._sample(goal_arr, bounds)
            nearest = tree.nearest(sample)
            origin = tree.position(nearest)

            direction = sample - origin
            length = float(np.linalg.norm(direction))
            if length < EPSILON:
                continue
            new_point = origin + direction * (min(self.config.step_size, length) / length)

            if not self._is_clear(origin, new_point, centers, radii):
                continue
            node = tree.add(new_point, nearest)

            if np.linalg.norm(goal_arr - new_point) <= self.config.goal_tolerance:
                path = tree.path_to(node)
                if np.linalg.norm(goal_arr - new_point) > EPSILON and self._is_clear(new_point, goal_arr, centers, radii):
                    path.append(goal_arr)
                if self.config.simplify_path:
                    path = shortcut_waypoints(path, centers, radii)
                logger.debug("RRT Planner: Path found after %d iterations, %d nodes", iteration, len(tree))
                return self._result(prefix + path, iterations=iteration)

        logger.debug("RRT Planner: No path found in %d iterations", self.config.max_iterations)
        return PlanResult(PlanStatus.EXHAUSTED, iterations=self.config.max_iterations)

    def _sample(self, goal: np.ndarray, bounds: FieldBounds) -> np.ndarray:
        if self._rng.random() < self.config.goal_bias:
            return goal
        return np.array(
            [
                self._rng.uniform(bounds.min_x, bounds.max_x),
                self._rng.uniform(bounds.min_y, bounds.max_y),
            ]
        )

    @staticmethod
    def _is_clear(start: np.ndarray, end: np.ndarray, centers: np.ndarray, radii: np.ndarray) -> bool:
        return not segment_intersects_circles(start, end, centers, radii)

    @staticmethod
    def _result(path: List[np.ndarray], iterations: int) -> PlanResult:
        return PlanResult(PlanStatus.FOUND, [Vector2D(p) for p in path], iterations)


def shortcut_waypoints(path: List[np.ndarray], centers: np.ndarray, radii: np.ndarray) -> List[np.ndarray]:
    """Greedily drop intermediate waypoints that can be skipped without hitting an obstacle.

    From each kept waypoint jump to the furthest later waypoint with a clear straight line to it.
    """
    if len(path) < 3:
        return path

    reduced = [path[0]]
    i = 0
    while i < len(path) - 1:
        j = len(path) - 1
        while j > i + 1 and segment_intersects_circles(path[i], path[j], centers, radii):
            j -= 1
        reduced.append(path[j])
        i = j
    return reduced
