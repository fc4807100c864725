from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List

from .player import Player, PlayerStats


class ReportWindow(Enum):
    """How many of the most recent games a report covers."""
    ALL = 'all'
    LAST_5 = 'last5'
    LAST_10 = 'last10'

    @property
    def limit(self):
        return {'all': None, 'last5': 5, 'last10': 10}[self.value]


class LeaderboardCategory(Enum):
    OFFENSE = 'offense'
    DEFENSE = 'defense'
    EFFICIENCY = 'efficiency'


@dataclass
class PlayerAggregate:
    """Summed box score for a player over a set of games."""
    player: Player
    games_played: int = 0
    totals: PlayerStats = field(default_factory=PlayerStats)

    def per_game(self, total: float) -> float:
        return (total / self.games_played) if self.games_played > 0 else 0.0

    @property
    def pts(self) -> float:
        return self.per_game(self.totals.points)

    @property
    def reb(self) -> float:
        return self.per_game(self.totals.rebounds)

    @property
    def ast(self) -> float:
        return self.per_game(self.totals.assists)

    @property
    def stl(self) -> float:
        return self.per_game(self.totals.steals)

    @property
    def blk(self) -> float:
        return self.per_game(self.totals.blocks)

    @property
    def to(self) -> float:
        return self.per_game(self.totals.turnovers)

    @property
    def eff(self) -> float:
        return self.per_game(self.totals.efficiency)

    @property
    def fg_pct(self) -> float:
        return self.totals.fg_pct

    @property
    def fg3_pct(self) -> float:
        return self.totals.fg3_pct

    @property
    def ft_pct(self) -> float:
        return self.totals.ft_pct

    def to_dict(self) -> dict:
        t = self.totals
        return {
            'player_id': self.player.id,
            'name': self.player.name,
            'GP': self.games_played,
            'PTS': self.pts,
            'REB': self.reb,
            'AST': self.ast,
            'STL': self.stl,
            'BLK': self.blk,
            'TO': self.to,
            'FGM': self.per_game(t.fgm),
            'FGA': self.per_game(t.fga),
            'FG_PCT': self.fg_pct,
            'TPM': self.per_game(t.fg3m),
            'TPA': self.per_game(t.fg3a),
            'TP_PCT': self.fg3_pct,
            'FTM': self.per_game(t.ftm),
            'FTA': self.per_game(t.fta),
            'FT_PCT': self.ft_pct,
            'EFF': self.eff,
        }


@dataclass
class GameLine:
    """A player's line in a single game of a report."""
    game_id: str
    game_name: str
    game_date: datetime
    pts: int
    reb: int
    ast: int
    stl: int
    blk: int
    to: int
    eff: int


@dataclass
class PlayerReport:
    aggregate: PlayerAggregate
    game_lines: List[GameLine] = field(default_factory=list)
    flags: List[str] = field(default_factory=list)

    @property
    def player(self) -> Player:
        return self.aggregate.player

    @property
    def games_played(self) -> int:
        return self.aggregate.games_played


@dataclass
class PlayerLeader:
    player: Player
    games_played: int
    value: float


@dataclass
class TeamReport:
    """Team record and per-game averages over a set of games."""
    team: str
    games_played: int
    wins: int
    losses: int
    totals: PlayerStats
    total_points: int
    total_opponent_points: int
    top_scorers: List[PlayerLeader] = field(default_factory=list)
    top_rebounders: List[PlayerLeader] = field(default_factory=list)
    top_playmakers: List[PlayerLeader] = field(default_factory=list)

    def per_game(self, total: float) -> float:
        return (total / self.games_played) if self.games_played > 0 else 0.0

    @property
    def pts(self) -> float:
        return self.per_game(self.total_points)

    @property
    def opp_pts(self) -> float:
        return self.per_game(self.total_opponent_points)

    @property
    def point_differential(self) -> float:
        return self.pts - self.opp_pts

    @property
    def win_pct(self) -> float:
        return (self.wins / self.games_played * 100) if self.games_played > 0 else 0.0

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    @property
    def reb(self) -> float:
        return self.per_game(self.totals.rebounds)

    @property
    def ast(self) -> float:
        return self.per_game(self.totals.assists)

    @property
    def stl(self) -> float:
        return self.per_game(self.totals.steals)

    @property
    def blk(self) -> float:
        return self.per_game(self.totals.blocks)

    @property
    def to(self) -> float:
        return self.per_game(self.totals.turnovers)

    @property
    def fg_pct(self) -> float:
        return self.totals.fg_pct

    @property
    def fg3_pct(self) -> float:
        return self.totals.fg3_pct

    @property
    def ft_pct(self) -> float:
        return self.totals.ft_pct
