"""HoopTracker - Live basketball stat tracking.

This package records shots and box-score events for games in progress and
derives shooting zones, contest metrics and player/team reports from them.

Modules:
    models - Data models (dataclasses and enums)
    db - Game repositories
    helpers - Pure geometry and box-score functions
    services - Recording and aggregation
    config - Configuration
    stats_service - Main facade
"""

from .config import Config, CourtConfig
from .stats_service import StatsService

__all__ = [
    'Config',
    'CourtConfig',
    'StatsService',
]

__version__ = '1.0.0'
