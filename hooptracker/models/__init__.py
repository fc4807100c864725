"""Data models - Dataclass and enum definitions for all entities."""

from .player import Player, PlayerStats, StatKey
from .game import Game, GameStatus, Score
from .shot import (
    ShotType, ContestLevel, Point, DefenderInfo, Shot, DefendedShot,
    ShotInput, DefenderInput,
)
from .zones import Zone, CourtPosition, ShotEfficiency, ZoneDefense, ZoneDefensiveSplit, ZoneMap
from .defense import DefenderImpact, TeamDefensiveImpact, MatchupStats
from .reports import (
    ReportWindow, LeaderboardCategory, PlayerAggregate, GameLine,
    PlayerReport, PlayerLeader, TeamReport,
)

__all__ = [
    'Player',
    'PlayerStats',
    'StatKey',
    'Game',
    'GameStatus',
    'Score',
    'ShotType',
    'ContestLevel',
    'Point',
    'DefenderInfo',
    'Shot',
    'DefendedShot',
    'ShotInput',
    'DefenderInput',
    'Zone',
    'CourtPosition',
    'ShotEfficiency',
    'ZoneDefense',
    'ZoneDefensiveSplit',
    'ZoneMap',
    'DefenderImpact',
    'TeamDefensiveImpact',
    'MatchupStats',
    'ReportWindow',
    'LeaderboardCategory',
    'PlayerAggregate',
    'GameLine',
    'PlayerReport',
    'PlayerLeader',
    'TeamReport',
]
