"""Game Tracker - Every mutation of a tracked game goes through here."""

import logging
import uuid
from datetime import datetime
from typing import Iterable, List, Optional, Union

from ..config import Config
from ..db.game import GameRepository
from ..exceptions import InvalidStatKeyError, PlayerNotFoundError
from ..helpers.contest import classify_contest
from ..helpers.zone_mapper import classify_zone
from ..models.game import Game, GameStatus, Score
from ..models.player import Player, PlayerStats, StatKey
from ..models.shot import (
    DefendedShot, DefenderInfo, Shot, ShotInput, ShotType, Point,
)

logger = logging.getLogger(__name__)

# (shot type, made) -> the one counter a recorded shot increments
_OUTCOME_KEYS = {
    (ShotType.TWO, True): StatKey.TWO_MADE,
    (ShotType.TWO, False): StatKey.TWO_MISS,
    (ShotType.THREE, True): StatKey.THREE_MADE,
    (ShotType.THREE, False): StatKey.THREE_MISS,
    (ShotType.FREE_THROW, True): StatKey.FT_MADE,
    (ShotType.FREE_THROW, False): StatKey.FT_MISS,
}


def _to_stat_key(key: Union[StatKey, str]) -> StatKey:
    if isinstance(key, StatKey):
        return key
    try:
        return StatKey(key)
    except ValueError:
        raise InvalidStatKeyError(key) from None


class GameTracker:
    """
    Owns game setup and live recording.

    Operations on an unknown game id are logged and ignored. Operations
    naming a player who is not on the roster raise PlayerNotFoundError
    before anything is changed.
    """

    def __init__(self, repository: GameRepository, config: Config = None):
        """
        Initialize tracker.

        Args:
            repository: Store holding the games
            config: Court and contest geometry (defaults to Config())
        """
        self.repository = repository
        self.config = config or Config()

    # Game lifecycle

    def create_game(
        self,
        name: str,
        team: str,
        opponent: str,
        players: Iterable[Player] = (),
        date: Optional[datetime] = None,
        game_id: Optional[str] = None,
    ) -> str:
        """Create a game with zeroed box scores and return its id."""
        players = list(players)
        game = Game(
            id=game_id or str(uuid.uuid4()),
            name=name,
            team=team,
            opponent=opponent,
            date=date or datetime.now(),
            players=players,
            player_stats={p.id: PlayerStats() for p in players},
            score=Score(),
        )
        self.repository.save(game)
        logger.debug(f"Created game {game.id} ({game.matchup}) with {len(players)} players")
        return game.id

    def delete_game(self, game_id: str) -> bool:
        deleted = self.repository.delete(game_id)
        if deleted:
            logger.debug(f"Deleted game {game_id}")
        return deleted

    def add_player(self, game_id: str, player: Player) -> None:
        """Add a player to the roster with a zeroed box score."""
        game = self._get_game(game_id)
        if game is None:
            return
        if game.has_player(player.id):
            logger.warning(f"Player {player.id} already on roster of game {game_id}")
            return
        game.players.append(player)
        game.player_stats[player.id] = PlayerStats()

    # Recording

    def record_shot(self, game_id: str, shot: ShotInput) -> Optional[Shot]:
        """
        Append an enriched shot to the game's log and update the shooter's box score.

        Args:
            game_id: Game to record into
            shot: Caller-supplied shot fields

        Returns:
            The stored shot, or None when the game does not exist

        Raises:
            PlayerNotFoundError: if the shooter is not on the roster
        """
        game = self._get_game(game_id)
        if game is None:
            return None
        self._require_player(game, shot.player_id)

        court = self.config.court
        position = classify_zone(shot.x, shot.y, court)
        stat_key = _OUTCOME_KEYS[(shot.shot_type, shot.made)]

        fields = dict(
            id=str(uuid.uuid4()),
            game_id=game.id,
            player_id=shot.player_id,
            x=shot.x,
            y=shot.y,
            made=shot.made,
            shot_type=shot.shot_type,
            quarter=shot.quarter,
            timestamp=datetime.now(),
            position=position,
        )
        defender = self._resolve_defender(game, shot)
        if defender is not None:
            recorded = DefendedShot(defender=defender, **fields)
        else:
            recorded = Shot(**fields)

        game.shots.append(recorded)
        game.player_stats.setdefault(shot.player_id, PlayerStats()).increment(stat_key)

        logger.debug(
            f"Shot {recorded.id}: {shot.player_id} {shot.shot_type.value} "
            f"{'made' if shot.made else 'missed'} from {position.zone} ({position.distance:.1f})"
        )
        return recorded

    def record_free_throw(
        self,
        game_id: str,
        player_id: str,
        made: bool,
        quarter: Optional[int] = None,
    ) -> Optional[Shot]:
        """Record a free throw at the fixed free-throw spot."""
        game = self._get_game(game_id)
        if game is None:
            return None
        x, y = self.config.court.free_throw_position
        return self.record_shot(game_id, ShotInput(
            player_id=player_id,
            x=x,
            y=y,
            made=made,
            shot_type=ShotType.FREE_THROW,
            quarter=quarter if quarter is not None else game.quarter,
        ))

    def record_stat(self, game_id: str, player_id: str, stat_key: Union[StatKey, str]) -> None:
        """
        Increment one box-score counter.

        Raises:
            InvalidStatKeyError: if stat_key is not a recordable counter (PTS is derived)
            PlayerNotFoundError: if the player is not on the roster
        """
        key = _to_stat_key(stat_key)
        game = self._get_game(game_id)
        if game is None:
            return
        self._require_player(game, player_id)
        game.player_stats.setdefault(player_id, PlayerStats()).increment(key)
        logger.debug(f"Game {game_id}: {player_id} +1 {key.value}")

    def toggle_active(self, game_id: str, player_id: str) -> None:
        game = self._get_game(game_id)
        if game is None:
            return
        player = self._require_player(game, player_id)
        player.is_active = not player.is_active
        logger.debug(f"Game {game_id}: {player.name} {'on court' if player.is_active else 'benched'}")

    # Game state

    def update_score(self, game_id: str, team: int, opponent: int) -> None:
        if team < 0 or opponent < 0:
            raise ValueError("Scores cannot be negative")
        game = self._get_game(game_id)
        if game is None:
            return
        game.score = Score(team=team, opponent=opponent)

    def update_quarter(self, game_id: str, quarter: int) -> None:
        """Set the current period; 5 and up are overtimes."""
        if quarter < 1:
            raise ValueError(f"Invalid quarter: {quarter}")
        game = self._get_game(game_id)
        if game is None:
            return
        game.quarter = quarter

    def update_time(self, game_id: str, time_remaining: str) -> None:
        game = self._get_game(game_id)
        if game is None:
            return
        game.time_remaining = time_remaining

    def update_status(self, game_id: str, status: Union[GameStatus, str]) -> None:
        """Move a game to a new status. Completion is one-way."""
        status = GameStatus(status)
        game = self._get_game(game_id)
        if game is None:
            return
        if game.is_complete and status != GameStatus.COMPLETED:
            logger.warning(f"Game {game_id} is already completed; ignoring status {status.value}")
            return
        game.status = status

    # Reads

    def get_game(self, game_id: str) -> Optional[Game]:
        return self.repository.get_by_id(game_id)

    def get_shots_by_game(self, game_id: str) -> List[Shot]:
        game = self.repository.get_by_id(game_id)
        return list(game.shots) if game else []

    def get_shots_by_player(self, game_id: str, player_id: str) -> List[Shot]:
        return [s for s in self.get_shots_by_game(game_id) if s.player_id == player_id]

    # Internals

    def _get_game(self, game_id: str) -> Optional[Game]:
        game = self.repository.get_by_id(game_id)
        if game is None:
            logger.warning(f"Game {game_id} not found; ignoring")
        return game

    def _require_player(self, game: Game, player_id: str) -> Player:
        player = game.get_player(player_id)
        if player is None:
            raise PlayerNotFoundError(game.id, player_id)
        return player

    def _resolve_defender(self, game: Game, shot: ShotInput) -> Optional[DefenderInfo]:
        """
        Build the defender descriptor for a shot.

        With a defender position the separation is measured and, unless the
        recorder chose a level, the level is derived from it. Without one
        both stay unknown.
        """
        if shot.defender is None:
            return None

        defender = shot.defender
        name = defender.name
        if name is None:
            roster_entry = game.get_player(defender.id)
            name = roster_entry.name if roster_entry else 'Unknown'

        level = shot.contest_level
        distance = None
        position = defender.position
        if position is not None:
            contest = classify_contest(Point(shot.x, shot.y), position, self.config.contest)
            distance = contest.distance
            if level is None:
                level = contest.level

        return DefenderInfo(
            id=defender.id,
            name=name,
            position=position,
            contest_level=level,
            distance=distance,
        )
