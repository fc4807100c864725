from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from .player import Player, PlayerStats
from .shot import Shot


class GameStatus(Enum):
    IN_PROGRESS = 'in-progress'
    COMPLETED = 'completed'


@dataclass
class Score:
    team: int = 0
    opponent: int = 0

    @property
    def differential(self) -> int:
        return self.team - self.opponent


@dataclass
class Game:
    """A tracked game: roster, box scores, score state and the shot log."""
    id: str
    name: str
    team: str
    opponent: str
    date: datetime
    players: List[Player] = field(default_factory=list)
    player_stats: Dict[str, PlayerStats] = field(default_factory=dict)
    score: Score = field(default_factory=Score)
    quarter: int = 1
    time_remaining: str = "12:00"
    status: GameStatus = GameStatus.IN_PROGRESS
    shots: List[Shot] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.status == GameStatus.COMPLETED

    @property
    def is_win(self) -> bool:
        # Ties are not wins
        return self.score.team > self.score.opponent

    @property
    def matchup(self) -> str:
        return f"{self.team} vs {self.opponent}"

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def has_player(self, player_id: str) -> bool:
        return self.get_player(player_id) is not None

    def active_players(self) -> List[Player]:
        return [p for p in self.players if p.is_active]

    def __str__(self) -> str:
        return f"{self.date:%Y-%m-%d} {self.name}: {self.team} {self.score.team}-{self.score.opponent} {self.opponent}"
