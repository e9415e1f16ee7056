from dataclasses import dataclass, field

from nav_core.entities.game.field import Field, FieldBounds
from nav_core.entities.game.team import Team


@dataclass
class World:
    """Snapshot of everything the navigator reads during one planning cycle.

    Treat it as read-only while a cycle is running; state updates happen between cycles.
    """

    friendly_team: Team = field(default_factory=Team)
    enemy_team: Team = field(default_factory=Team)
    field_bounds: FieldBounds = field(default_factory=lambda: Field.FULL_FIELD_BOUNDS)
