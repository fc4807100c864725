"""Services - Game recording and the aggregation queries over recorded games."""

from .base import Result, ResultStatus, summarize
from .tracker import GameTracker
from .shooting import (
    shot_efficiency,
    zone_efficiency_map,
    zone_defensive_split,
    quarter_breakdown,
    filter_shots,
)
from .defense import defender_impact, team_defensive_impact, player_matchup_stats
from .reports import (
    select_games,
    aggregate_player,
    player_report,
    team_report,
    leaderboard,
    leaderboard_frame,
    box_score_frame,
)

__all__ = [
    'Result',
    'ResultStatus',
    'summarize',
    'GameTracker',
    'shot_efficiency',
    'zone_efficiency_map',
    'zone_defensive_split',
    'quarter_breakdown',
    'filter_shots',
    'defender_impact',
    'team_defensive_impact',
    'player_matchup_stats',
    'select_games',
    'aggregate_player',
    'player_report',
    'team_report',
    'leaderboard',
    'leaderboard_frame',
    'box_score_frame',
]
