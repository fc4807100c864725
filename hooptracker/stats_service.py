"""
Stats Service

Facade that holds the game store and exposes recording and query
operations keyed by game id.
"""

from typing import Dict, Iterable, List, Optional, Union

from .config import Config
from .db.game import GameRepository, InMemoryGameRepository
from .helpers.zone_mapper import normalize_zone_name
from .models.defense import DefenderImpact, MatchupStats, TeamDefensiveImpact
from .models.game import Game, GameStatus
from .models.player import Player, StatKey
from .models.reports import LeaderboardCategory, PlayerAggregate, PlayerReport, ReportWindow, TeamReport
from .models.shot import Shot, ShotInput, ShotType
from .models.zones import ShotEfficiency, Zone, ZoneDefensiveSplit
from .services import defense, reports, shooting
from .services.tracker import GameTracker


class StatsService:
    """
    Single entry point for UI and CLI callers.

    Mutations delegate to GameTracker. Queries are read-only reductions over
    the stored games and return zero-valued results for unknown game ids.
    """

    def __init__(self, repository: GameRepository = None, config: Config = None):
        """
        Initialize the service.

        Args:
            repository: Game store (defaults to a fresh in-memory store)
            config: Configuration object
        """
        self.config = config or Config()
        self.repository = repository if repository is not None else InMemoryGameRepository()
        self.tracker = GameTracker(self.repository, self.config)

    # Game lifecycle

    def create_game(self, name: str, team: str, opponent: str, players: Iterable[Player] = (), **kwargs) -> str:
        return self.tracker.create_game(name, team, opponent, players, **kwargs)

    def delete_game(self, game_id: str) -> bool:
        return self.tracker.delete_game(game_id)

    def get_game(self, game_id: str) -> Optional[Game]:
        return self.tracker.get_game(game_id)

    def get_games(self) -> List[Game]:
        return self.repository.get_all()

    def add_player(self, game_id: str, player: Player) -> None:
        self.tracker.add_player(game_id, player)

    def update_score(self, game_id: str, team: int, opponent: int) -> None:
        self.tracker.update_score(game_id, team, opponent)

    def update_quarter(self, game_id: str, quarter: int) -> None:
        self.tracker.update_quarter(game_id, quarter)

    def update_time(self, game_id: str, time_remaining: str) -> None:
        self.tracker.update_time(game_id, time_remaining)

    def update_status(self, game_id: str, status: Union[GameStatus, str]) -> None:
        self.tracker.update_status(game_id, status)

    # Recording

    def record_shot(self, game_id: str, shot: ShotInput) -> None:
        self.tracker.record_shot(game_id, shot)

    def record_free_throw(self, game_id: str, player_id: str, made: bool, quarter: Optional[int] = None) -> None:
        self.tracker.record_free_throw(game_id, player_id, made, quarter)

    def record_stat(self, game_id: str, player_id: str, stat_key: Union[StatKey, str]) -> None:
        self.tracker.record_stat(game_id, player_id, stat_key)

    def toggle_active(self, game_id: str, player_id: str) -> None:
        self.tracker.toggle_active(game_id, player_id)

    # Shot queries

    def get_shots_by_game(self, game_id: str) -> List[Shot]:
        return self.tracker.get_shots_by_game(game_id)

    def get_shots_by_player(self, game_id: str, player_id: str) -> List[Shot]:
        return self.tracker.get_shots_by_player(game_id, player_id)

    @staticmethod
    def shot_efficiency(shots: Iterable[Shot]) -> ShotEfficiency:
        return shooting.shot_efficiency(shots)

    @staticmethod
    def zone_efficiency_map(shots: Iterable[Shot], include_empty: bool = False) -> Dict[Zone, ShotEfficiency]:
        return shooting.zone_efficiency_map(shots, include_empty)

    def filter_shots(
        self,
        game_id: str,
        player_id: Optional[str] = None,
        quarter: Optional[int] = None,
        shot_type: Optional[ShotType] = None,
    ) -> List[Shot]:
        return shooting.filter_shots(self.get_shots_by_game(game_id), player_id, quarter, shot_type)

    def quarter_breakdown(self, game_id: str, player_id: Optional[str] = None) -> Dict[int, ShotEfficiency]:
        return shooting.quarter_breakdown(self.filter_shots(game_id, player_id=player_id))

    def zone_defensive_split(self, game_id: str, zone: Union[Zone, str]) -> ZoneDefensiveSplit:
        """Contested vs uncontested shooting in one zone; accepts a zone or a zone name."""
        if isinstance(zone, str):
            zone = normalize_zone_name(zone)
        return shooting.zone_defensive_split(self.get_shots_by_game(game_id), zone)

    # Defensive queries

    def defender_impact(self, game_id: str, defender_id: str) -> DefenderImpact:
        return defense.defender_impact(self.repository.get_by_id(game_id), defender_id)

    def team_defensive_impact(self, game_id: str) -> TeamDefensiveImpact:
        return defense.team_defensive_impact(self.repository.get_by_id(game_id))

    def player_matchup_stats(self, game_id: str, offensive_player_id: str, defensive_player_id: str) -> MatchupStats:
        return defense.player_matchup_stats(
            self.repository.get_by_id(game_id), offensive_player_id, defensive_player_id
        )

    # Reports

    def player_report(
        self,
        player_id: str,
        window: Union[ReportWindow, str] = ReportWindow.ALL,
        game_id: Optional[str] = None,
    ) -> Optional[PlayerReport]:
        return reports.player_report(player_id, self.repository.get_by_player(player_id), window, game_id)

    def team_report(
        self,
        window: Union[ReportWindow, str] = ReportWindow.ALL,
        game_id: Optional[str] = None,
    ) -> TeamReport:
        return reports.team_report(self.repository.get_recent(), window, game_id, self.config.report)

    def leaderboard(
        self,
        category: Union[LeaderboardCategory, str] = LeaderboardCategory.OFFENSE,
        game_id: Optional[str] = None,
    ) -> List[PlayerAggregate]:
        return reports.leaderboard(self.repository.get_all(), category, game_id)
