import logging
from typing import Dict, Iterable, Iterator, List, Optional

from nav_core.entities.errors import StaleTimestampError
from nav_core.entities.game.robot import Robot

logger = logging.getLogger(__name__)


class Team:
    """The robots of one side, keyed by id."""

    def __init__(self, robots: Iterable[Robot] = ()):
        self._robots: Dict[int, Robot] = {}
        for robot in robots:
            if robot.id in self._robots:
                raise ValueError(f"Duplicate robot id {robot.id} in team")
            self._robots[robot.id] = robot

    def get_robot_by_id(self, robot_id: int) -> Optional[Robot]:
        return self._robots.get(robot_id)

    @property
    def all_robots(self) -> List[Robot]:
        return list(self._robots.values())

    def update_state(self, new_robot_data: Iterable[Robot]) -> None:
        """Fold a batch of observations into the team.

        Known robots are updated in place, new ones are added. Every observation is
        validated before anything is applied, so a stale sample leaves the whole team untouched.
        """
        new_robot_data = list(new_robot_data)
        # Latest accepted timestamp per id, so repeated ids within the batch must also move forward
        latest: Dict[int, float] = {}
        for new_robot in new_robot_data:
            timestamp = new_robot.last_update_timestamp
            previous = latest.get(new_robot.id)
            if previous is not None:
                if not timestamp >= previous:
                    raise StaleTimestampError(new_robot.id, timestamp, previous)
            elif new_robot.id in self._robots:
                self._robots[new_robot.id].check_timestamp(timestamp)
            latest[new_robot.id] = timestamp

        for new_robot in new_robot_data:
            existing = self._robots.get(new_robot.id)
            if existing is None:
                logger.debug("Robot %d joined the team", new_robot.id)
                self._robots[new_robot.id] = new_robot.copy()
            else:
                existing.update_state_from(new_robot)

    def advance_to_predicted_state(self, timestamp: float) -> None:
        """Advance every robot to its estimated state at `timestamp`, all or nothing."""
        for robot in self._robots.values():
            robot.check_timestamp(timestamp)
        for robot in self._robots.values():
            robot.advance_to_predicted_state(timestamp)

    def __len__(self) -> int:
        return len(self._robots)

    def __iter__(self) -> Iterator[Robot]:
        return iter(self._robots.values())

    def __contains__(self, robot_id: int) -> bool:
        return robot_id in self._robots
