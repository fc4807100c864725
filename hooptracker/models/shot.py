"""Shot events recorded into a game's log."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from .zones import CourtPosition, Zone


class ShotType(Enum):
    TWO = '2PT'
    THREE = '3PT'
    FREE_THROW = 'FT'

    @property
    def points(self) -> int:
        return {'2PT': 2, '3PT': 3, 'FT': 1}[self.value]

    @property
    def is_field_goal(self) -> bool:
        return self is not ShotType.FREE_THROW


class ContestLevel(Enum):
    """Defensive pressure on a shot, ordered from none to blocked."""
    UNCONTESTED = 'uncontested'
    LIGHT_CONTEST = 'light_contest'
    MEDIUM_CONTEST = 'medium_contest'
    HEAVY_CONTEST = 'heavy_contest'
    BLOCKED = 'blocked'

    @property
    def ordinal(self) -> int:
        return list(ContestLevel).index(self)

    @classmethod
    def from_ordinal_average(cls, value: float) -> 'ContestLevel':
        """Re-bucket an averaged ordinal back into a level."""
        if value >= 3.5:
            return cls.BLOCKED
        if value >= 2.5:
            return cls.HEAVY_CONTEST
        if value >= 1.5:
            return cls.MEDIUM_CONTEST
        if value >= 0.5:
            return cls.LIGHT_CONTEST
        return cls.UNCONTESTED

    @property
    def label(self) -> str:
        return self.value.replace('_', ' ')


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class DefenderInfo:
    """
    Defender attached to a recorded shot.

    position and distance are None when only the defender's id was recorded.
    contest_level is None when it was neither chosen by the recorder nor
    derivable from a position.
    """
    id: str
    name: str
    position: Optional[Point] = None
    contest_level: Optional[ContestLevel] = None
    distance: Optional[float] = None


@dataclass(frozen=True)
class Shot:
    """A shot attempt with no defender recorded."""
    id: str
    game_id: str
    player_id: str
    x: float
    y: float
    made: bool
    shot_type: ShotType
    quarter: int
    timestamp: datetime
    position: CourtPosition

    @property
    def zone(self) -> Zone:
        return self.position.zone

    @property
    def points(self) -> int:
        return self.shot_type.points if self.made else 0

    @property
    def has_defender(self) -> bool:
        return False

    @property
    def defender_id(self) -> Optional[str]:
        return None

    @property
    def contest_level(self) -> Optional[ContestLevel]:
        return None


@dataclass(frozen=True)
class DefendedShot(Shot):
    """A shot attempt with a defender descriptor attached."""
    defender: DefenderInfo = None

    def __post_init__(self):
        if self.defender is None:
            raise ValueError("DefendedShot requires a defender")

    @property
    def has_defender(self) -> bool:
        return True

    @property
    def defender_id(self) -> Optional[str]:
        return self.defender.id

    @property
    def contest_level(self) -> Optional[ContestLevel]:
        return self.defender.contest_level


AnyShot = Union[Shot, DefendedShot]


@dataclass
class DefenderInput:
    """Defender details supplied by the recorder."""
    id: str
    name: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def position(self) -> Optional[Point]:
        if self.x is None or self.y is None:
            return None
        return Point(self.x, self.y)


@dataclass
class ShotInput:
    """Caller-supplied fields of a shot; zone, id and timestamp are derived."""
    player_id: str
    x: float
    y: float
    made: bool
    shot_type: ShotType
    quarter: int
    defender: Optional[DefenderInput] = None
    defender_id: Optional[str] = None
    contest_level: Optional[ContestLevel] = None

    def __post_init__(self):
        if isinstance(self.shot_type, str):
            self.shot_type = ShotType(self.shot_type)
        if isinstance(self.contest_level, str):
            self.contest_level = ContestLevel(self.contest_level)
        if self.defender is None and self.defender_id is not None:
            self.defender = DefenderInput(id=self.defender_id)
