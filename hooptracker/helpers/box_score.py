"""Box Score Calculator - Pure functions over player box scores."""

from typing import Iterable

from ..models.player import PlayerStats


def sum_stats(stats: Iterable[PlayerStats]) -> PlayerStats:
    """
    Add up box scores into a fresh PlayerStats.

    This is a PURE FUNCTION: the inputs are left untouched.
    """
    total = PlayerStats()
    for line in stats:
        total.add(line)
    return total


def stocks(stats: PlayerStats) -> int:
    """Steals plus blocks."""
    return stats.steals + stats.blocks


def defensive_score(stats: PlayerStats) -> int:
    """Rebounds + steals + blocks, the leaderboard's defense category."""
    return stats.rebounds + stocks(stats)
