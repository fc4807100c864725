"""Defensive aggregation - contest outcomes from the defended shots in a game.

A contest is "successful" when the contested shot missed.
"""

from typing import Iterable, List, Optional

from ..helpers.contest import average_contest_level
from ..models.defense import DefenderImpact, MatchupStats, TeamDefensiveImpact
from ..models.game import Game
from ..models.shot import DefendedShot, Shot
from ..models.zones import ZoneDefense


def defended_shots(shots: Iterable[Shot]) -> List[DefendedShot]:
    return [shot for shot in shots if shot.has_defender]


def _tally(impact: TeamDefensiveImpact, shots: List[DefendedShot]) -> None:
    """Fill contest counts, the level histogram and the zone breakdown."""
    for shot in shots:
        impact.total_contests += 1
        forced_miss = not shot.made
        if forced_miss:
            impact.successful_contests += 1

        # No level recorded: counted as a contest, but in no level bucket
        if shot.contest_level is not None:
            impact.contests_by_level[shot.contest_level] += 1

        zone_stats = impact.zone_defense.setdefault(shot.zone, ZoneDefense())
        zone_stats.contests += 1
        if forced_miss:
            zone_stats.successful_contests += 1


def defender_impact(game: Optional[Game], defender_id: str) -> DefenderImpact:
    """
    Contest metrics for one defender in a game.

    Returns a zero-valued DefenderImpact when the game is None or the
    defender contested nothing.
    """
    if game is None:
        return DefenderImpact(defender_id=defender_id)

    roster_entry = game.get_player(defender_id)
    contested = [s for s in defended_shots(game.shots) if s.defender.id == defender_id]

    impact = DefenderImpact(defender_id=defender_id)
    if roster_entry is not None:
        impact.defender_name = roster_entry.name
    elif contested:
        impact.defender_name = contested[0].defender.name
    _tally(impact, contested)

    # Unmeasured contests add 0 but still count
    if impact.total_contests > 0:
        impact.avg_contest_distance = sum(s.defender.distance or 0 for s in contested) / impact.total_contests
    return impact


def team_defensive_impact(game: Optional[Game]) -> TeamDefensiveImpact:
    """Contest metrics over every shot with any defender attached."""
    impact = TeamDefensiveImpact()
    if game is None:
        return impact
    _tally(impact, defended_shots(game.shots))
    return impact


def player_matchup_stats(game: Optional[Game], offensive_player_id: str, defensive_player_id: str) -> MatchupStats:
    """Shooting of one player while guarded by one defender."""
    if game is None:
        return MatchupStats()

    matchup = [
        s for s in defended_shots(game.shots)
        if s.player_id == offensive_player_id and s.defender.id == defensive_player_id
    ]
    return MatchupStats(
        total_shots=len(matchup),
        made_shots=sum(1 for s in matchup if s.made),
        avg_contest_level=average_contest_level(s.contest_level for s in matchup),
    )
