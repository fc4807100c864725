from dataclasses import dataclass, fields
from enum import Enum
from typing import Union


class StatKey(Enum):
    """Box-score counters that can be incremented directly."""
    TWO_MADE = '2PT_MADE'
    TWO_MISS = '2PT_MISS'
    THREE_MADE = '3PT_MADE'
    THREE_MISS = '3PT_MISS'
    FT_MADE = 'FT_MADE'
    FT_MISS = 'FT_MISS'
    REB_OFF = 'REB_OFF'
    REB_DEF = 'REB_DEF'
    AST = 'AST'
    STL = 'STL'
    BLK = 'BLK'
    TO = 'TO'

    @property
    def attr(self) -> str:
        return _STAT_ATTRS[self]


_STAT_ATTRS = {
    StatKey.TWO_MADE: 'two_made',
    StatKey.TWO_MISS: 'two_miss',
    StatKey.THREE_MADE: 'three_made',
    StatKey.THREE_MISS: 'three_miss',
    StatKey.FT_MADE: 'ft_made',
    StatKey.FT_MISS: 'ft_miss',
    StatKey.REB_OFF: 'reb_off',
    StatKey.REB_DEF: 'reb_def',
    StatKey.AST: 'assists',
    StatKey.STL: 'steals',
    StatKey.BLK: 'blocks',
    StatKey.TO: 'turnovers',
}


@dataclass
class Player:
    """Roster entry for a game."""
    id: str
    name: str
    number: str = ''
    position: str = ''
    is_active: bool = False


@dataclass
class PlayerStats:
    """
    One player's box score for one game.

    Only the make/miss and event counters are stored. Points, attempts and
    percentages are always derived from them.
    """
    two_made: int = 0
    two_miss: int = 0
    three_made: int = 0
    three_miss: int = 0
    ft_made: int = 0
    ft_miss: int = 0
    reb_off: int = 0
    reb_def: int = 0
    assists: int = 0
    steals: int = 0
    blocks: int = 0
    turnovers: int = 0

    def increment(self, key: StatKey) -> None:
        attr = key.attr
        setattr(self, attr, getattr(self, attr) + 1)

    def get(self, key: Union[StatKey, str]) -> int:
        if isinstance(key, str):
            if key == 'PTS':
                return self.points
            key = StatKey(key)
        return getattr(self, key.attr)

    def add(self, other: 'PlayerStats') -> None:
        """Accumulate another box score into this one."""
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    @property
    def points(self) -> int:
        return 2 * self.two_made + 3 * self.three_made + self.ft_made

    @property
    def rebounds(self) -> int:
        return self.reb_off + self.reb_def

    @property
    def fgm(self) -> int:
        return self.two_made + self.three_made

    @property
    def fga(self) -> int:
        return self.two_made + self.two_miss + self.three_made + self.three_miss

    @property
    def fg3m(self) -> int:
        return self.three_made

    @property
    def fg3a(self) -> int:
        return self.three_made + self.three_miss

    @property
    def ftm(self) -> int:
        return self.ft_made

    @property
    def fta(self) -> int:
        return self.ft_made + self.ft_miss

    @property
    def fg_pct(self) -> float:
        return (self.fgm / self.fga * 100) if self.fga > 0 else 0.0

    @property
    def fg3_pct(self) -> float:
        return (self.fg3m / self.fg3a * 100) if self.fg3a > 0 else 0.0

    @property
    def ft_pct(self) -> float:
        return (self.ftm / self.fta * 100) if self.fta > 0 else 0.0

    @property
    def efficiency(self) -> int:
        """EFF: positive contributions minus turnovers and missed shots."""
        return (
            self.points + self.rebounds + self.assists + self.steals + self.blocks
            - self.turnovers - (self.fga - self.fgm) - (self.fta - self.ftm)
        )

    def to_dict(self) -> dict:
        """Box-score view keyed by the counter names, plus derived PTS."""
        data = {key.value: getattr(self, key.attr) for key in StatKey}
        data['PTS'] = self.points
        return data
