"""Reports - Multi-game player and team aggregation."""

import logging
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd

from ..config import ReportConfig
from ..helpers.box_score import defensive_score, stocks, sum_stats
from ..models.game import Game
from ..models.player import Player, StatKey
from ..models.reports import (
    GameLine, LeaderboardCategory, PlayerAggregate, PlayerLeader,
    PlayerReport, ReportWindow, TeamReport,
)

logger = logging.getLogger(__name__)

# Per-game thresholds read by the insight layer
PRIMARY_SCORER_PTS = 20
RELIABLE_SCORER_PTS = 15
ELITE_REBOUNDER_REB = 10
STRONG_REBOUNDER_REB = 7
ELITE_PLAYMAKER_AST = 7
GOOD_PLAYMAKER_AST = 4
DEFENSIVE_PRESENCE_STOCKS = 3
HOT_THREE_PCT = 40
COLD_THREE_PCT = 30
MIN_THREE_ATTEMPTS_PER_GAME = 3
TURNOVER_PRONE_TO = 3

LEADERBOARD_COLUMNS = [
    'player_id', 'name', 'GP', 'PTS', 'REB', 'AST', 'STL', 'BLK', 'TO',
    'FGM', 'FGA', 'FG_PCT', 'TPM', 'TPA', 'TP_PCT', 'FTM', 'FTA', 'FT_PCT', 'EFF',
]

BOX_SCORE_COLUMNS = (
    ['player_id', 'name', 'number', 'active', 'PTS']
    + [key.value for key in StatKey]
    + ['FG_PCT', 'TP_PCT', 'FT_PCT', 'EFF']
)


def select_games(
    games: Iterable[Game],
    player_id: Optional[str] = None,
    game_id: Optional[str] = None,
    window: Union[ReportWindow, str] = ReportWindow.ALL,
) -> List[Game]:
    """
    Filter games for a report, newest first.

    Args:
        games: Candidate games
        player_id: Keep only games whose roster includes this player
        game_id: Keep only this game
        window: Cap to the most recent 5 or 10 games

    Returns:
        Filtered games sorted by date, newest first (ties keep input order)
    """
    window = ReportWindow(window)
    selected = [
        g for g in games
        if (player_id is None or g.has_player(player_id))
        and (game_id is None or g.id == game_id)
    ]
    selected.sort(key=lambda g: g.date, reverse=True)
    if window.limit is not None:
        selected = selected[:window.limit]
    return selected


def all_players(games: Iterable[Game]) -> List[Player]:
    """Unique players across games, in order of first appearance."""
    seen: Dict[str, Player] = {}
    for game in games:
        for player in game.players:
            seen.setdefault(player.id, player)
    return list(seen.values())


def aggregate_player(player: Player, games: Iterable[Game]) -> PlayerAggregate:
    """Sum a player's box scores over the games that hold one for them."""
    lines = [g.player_stats[player.id] for g in games if player.id in g.player_stats]
    return PlayerAggregate(
        player=player,
        games_played=len(lines),
        totals=sum_stats(lines),
    )


def player_flags(aggregate: PlayerAggregate) -> List[str]:
    """Threshold tags for a player's per-game numbers."""
    if aggregate.games_played == 0:
        return []

    flags = []
    if aggregate.pts > PRIMARY_SCORER_PTS:
        flags.append('primary_scorer')
    elif aggregate.pts > RELIABLE_SCORER_PTS:
        flags.append('reliable_scorer')

    if aggregate.reb > ELITE_REBOUNDER_REB:
        flags.append('elite_rebounder')
    elif aggregate.reb > STRONG_REBOUNDER_REB:
        flags.append('strong_rebounder')

    if aggregate.ast > ELITE_PLAYMAKER_AST:
        flags.append('elite_playmaker')
    elif aggregate.ast > GOOD_PLAYMAKER_AST:
        flags.append('good_playmaker')

    if aggregate.per_game(stocks(aggregate.totals)) > DEFENSIVE_PRESENCE_STOCKS:
        flags.append('defensive_presence')

    enough_threes = aggregate.totals.fg3a >= aggregate.games_played * MIN_THREE_ATTEMPTS_PER_GAME
    if enough_threes and aggregate.fg3_pct > HOT_THREE_PCT:
        flags.append('hot_three')
    elif enough_threes and aggregate.fg3_pct < COLD_THREE_PCT:
        flags.append('cold_three')

    if aggregate.to > TURNOVER_PRONE_TO:
        flags.append('turnover_prone')
    return flags


def player_report(
    player_id: str,
    games: Iterable[Game],
    window: Union[ReportWindow, str] = ReportWindow.ALL,
    game_id: Optional[str] = None,
) -> Optional[PlayerReport]:
    """
    Build a multi-game report for one player.

    Returns:
        PlayerReport, or None when the player is on no roster
    """
    games = list(games)
    player = next((p for p in all_players(games) if p.id == player_id), None)
    if player is None:
        logger.warning(f"Player {player_id} not found in any game")
        return None

    relevant = select_games(games, player_id=player_id, game_id=game_id, window=window)
    aggregate = aggregate_player(player, relevant)

    game_lines = []
    for game in relevant:
        stats = game.player_stats.get(player_id)
        if stats is None:
            continue
        game_lines.append(GameLine(
            game_id=game.id,
            game_name=game.name,
            game_date=game.date,
            pts=stats.points,
            reb=stats.rebounds,
            ast=stats.assists,
            stl=stats.steals,
            blk=stats.blocks,
            to=stats.turnovers,
            eff=stats.efficiency,
        ))

    return PlayerReport(
        aggregate=aggregate,
        game_lines=game_lines,
        flags=player_flags(aggregate),
    )


def _leaders(aggregates: List[PlayerAggregate], value, config: ReportConfig) -> List[PlayerLeader]:
    ranked = sorted(aggregates, key=value, reverse=True)
    return [
        PlayerLeader(player=a.player, games_played=a.games_played, value=value(a))
        for a in ranked[:config.leaders_count]
    ]


def team_report(
    games: Iterable[Game],
    window: Union[ReportWindow, str] = ReportWindow.ALL,
    game_id: Optional[str] = None,
    config: Optional[ReportConfig] = None,
) -> TeamReport:
    """
    Team record, averages and leaders over the selected games.

    A game counts as a win only when the team outscored the opponent, so a
    tie is recorded as a loss.
    """
    config = config or ReportConfig()
    relevant = select_games(games, game_id=game_id, window=window)
    games_played = len(relevant)

    wins = sum(1 for g in relevant if g.is_win)
    totals = sum_stats(s for g in relevant for s in g.player_stats.values())

    # Only players present in enough of the selected games are ranked
    eligible = [
        a for a in (aggregate_player(p, relevant) for p in all_players(relevant))
        if a.games_played > 0 and a.games_played >= games_played * config.min_participation
    ]

    return TeamReport(
        team=relevant[0].team if relevant else '',
        games_played=games_played,
        wins=wins,
        losses=games_played - wins,
        totals=totals,
        total_points=sum(g.score.team for g in relevant),
        total_opponent_points=sum(g.score.opponent for g in relevant),
        top_scorers=_leaders(eligible, lambda a: a.pts, config),
        top_rebounders=_leaders(eligible, lambda a: a.reb, config),
        top_playmakers=_leaders(eligible, lambda a: a.ast, config),
    )


def _category_value(aggregate: PlayerAggregate, category: LeaderboardCategory) -> float:
    if category == LeaderboardCategory.DEFENSE:
        return aggregate.per_game(defensive_score(aggregate.totals))
    if category == LeaderboardCategory.EFFICIENCY:
        return aggregate.eff
    return aggregate.pts


def leaderboard(
    games: Iterable[Game],
    category: Union[LeaderboardCategory, str] = LeaderboardCategory.OFFENSE,
    game_id: Optional[str] = None,
) -> List[PlayerAggregate]:
    """Per-player averages over all games (or one), best first for the category."""
    category = LeaderboardCategory(category)
    games = list(games)
    relevant = [g for g in games if game_id is None or g.id == game_id]

    rows = [aggregate_player(p, relevant) for p in all_players(games)]
    rows = [r for r in rows if r.games_played > 0]
    return sorted(rows, key=lambda r: _category_value(r, category), reverse=True)


def leaderboard_frame(rows: Iterable[PlayerAggregate]) -> pd.DataFrame:
    """Tabular view of leaderboard rows."""
    return pd.DataFrame([r.to_dict() for r in rows], columns=LEADERBOARD_COLUMNS)


def box_score_frame(game: Game) -> pd.DataFrame:
    """One row per rostered player with counters, derived points and percentages."""
    records = []
    for player in game.players:
        stats = game.player_stats.get(player.id)
        if stats is None:
            continue
        record = {
            'player_id': player.id,
            'name': player.name,
            'number': player.number,
            'active': player.is_active,
        }
        record.update(stats.to_dict())
        record['FG_PCT'] = stats.fg_pct
        record['TP_PCT'] = stats.fg3_pct
        record['FT_PCT'] = stats.ft_pct
        record['EFF'] = stats.efficiency
        records.append(record)
    return pd.DataFrame(records, columns=BOX_SCORE_COLUMNS)

