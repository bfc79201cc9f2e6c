import copy
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from utils.constants import QUARTERS, PLAYERS_ON_COURT, DEFAULT_PLAN_NAME
from exceptions.custom_errors import InvalidSlotError


def new_id() -> str:
    """Fresh unique identifier for plans, players and segments."""
    return str(uuid.uuid4())


@dataclass
class Player:
    """A roster entry of a game plan."""

    id: str
    """Caller-supplied unique identifier."""
    name: str
    """Display name. Not required to be unique."""
    jerseyNumber: Optional[str] = None
    """Optional jersey number, kept as text (e.g. "07")."""
    position: Optional[str] = None
    """Optional preferred playing position (e.g. "PG")."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "jerseyNumber": self.jerseyNumber,
            "position": self.position,
        }


@dataclass
class PlayerTimeSegment:
    """One contiguous stint of a player at one court position during one quarter."""

    id: str
    """Unique within the whole schedule."""
    playerId: str
    """Id of the roster player occupying the position."""
    minutes: int
    """Planned minutes, always within [0, quarter duration]."""

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "playerId": self.playerId, "minutes": self.minutes}


# Segments of one court position, in chronological order.
CourtPosition = List[PlayerTimeSegment]


def empty_quarter() -> List[CourtPosition]:
    return [[] for _ in range(PLAYERS_ON_COURT)]


@dataclass
class Schedule:
    """
    Four independent quarters, each holding five court positions, each position
    an ordered list of segments. The last segment of a position is the player
    on court at the end of the quarter.
    """

    quarters: Dict[str, List[CourtPosition]] = field(
        default_factory=lambda: {q: empty_quarter() for q in QUARTERS}
    )

    def positions(self, quarter: str) -> List[CourtPosition]:
        if quarter not in self.quarters:
            raise InvalidSlotError(
                f"Unknown quarter {quarter!r}. Expected one of {', '.join(QUARTERS)}."
            )
        return self.quarters[quarter]

    def position(self, quarter: str, index: int) -> CourtPosition:
        positions = self.positions(quarter)
        if not isinstance(index, int) or not 0 <= index < len(positions):
            raise InvalidSlotError(
                f"Court position {index!r} is out of range (0-{len(positions) - 1})."
            )
        return positions[index]

    def segments(self):
        """Yield (quarter, position_index, segment) for every segment."""
        for quarter in QUARTERS:
            for idx, position in enumerate(self.quarters[quarter]):
                for segment in position:
                    yield quarter, idx, segment

    def copy(self) -> "Schedule":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            q: [[s.to_dict() for s in position] for position in self.quarters[q]]
            for q in QUARTERS
        }


@dataclass
class GamePlan:
    """The named, persistable unit: a roster plus its schedule."""

    id: str
    name: str
    players: List[Player] = field(default_factory=list)
    schedule: Schedule = field(default_factory=Schedule)

    def player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players if p.id == player_id), None)

    def copy(self) -> "GamePlan":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "players": [p.to_dict() for p in self.players],
            "schedule": self.schedule.to_dict(),
        }


def create_empty_schedule() -> Schedule:
    return Schedule()


def new_game_plan(name: str = DEFAULT_PLAN_NAME) -> GamePlan:
    return GamePlan(id=new_id(), name=name)
