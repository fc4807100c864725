"""Shooting aggregation - make rates by zone, quarter and defensive coverage."""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from ..models.shot import Shot, ShotType
from ..models.zones import ShotEfficiency, Zone, ZoneDefensiveSplit


def shot_efficiency(shots: Iterable[Shot]) -> ShotEfficiency:
    """Made/missed/total/efficiency for any subset of shots."""
    stats = ShotEfficiency()
    for shot in shots:
        if shot.made:
            stats.made += 1
        else:
            stats.missed += 1
    return stats


def zone_efficiency_map(shots: Iterable[Shot], include_empty: bool = False) -> Dict[Zone, ShotEfficiency]:
    """
    Partition shots by zone and compute efficiency per zone.

    Args:
        shots: Shots to partition
        include_empty: Also return zones with no attempts (total=0); callers
            must read those as "no data", not as 0% shooting

    Returns:
        Mapping of zone to ShotEfficiency, in Zone declaration order
    """
    by_zone = defaultdict(list)
    for shot in shots:
        by_zone[shot.zone].append(shot)

    result = {}
    for zone in Zone:
        if zone in by_zone:
            result[zone] = shot_efficiency(by_zone[zone])
        elif include_empty:
            result[zone] = ShotEfficiency()
    return result


def quarter_breakdown(shots: Iterable[Shot]) -> Dict[int, ShotEfficiency]:
    """Efficiency per period, only for periods with attempts."""
    by_quarter = defaultdict(list)
    for shot in shots:
        by_quarter[shot.quarter].append(shot)
    return {q: shot_efficiency(by_quarter[q]) for q in sorted(by_quarter)}


def zone_defensive_split(shots: Iterable[Shot], zone: Zone) -> ZoneDefensiveSplit:
    """Make rates in one zone for shots with and without a recorded defender."""
    split = ZoneDefensiveSplit(zone=zone)
    for shot in shots:
        if shot.zone != zone:
            continue
        if shot.has_defender:
            split.contested += 1
            split.contested_made += int(shot.made)
        else:
            split.uncontested += 1
            split.uncontested_made += int(shot.made)
    return split


def filter_shots(
    shots: Iterable[Shot],
    player_id: Optional[str] = None,
    quarter: Optional[int] = None,
    shot_type: Optional[ShotType] = None,
) -> List[Shot]:
    """Filter a shot log; None means "any" for each criterion."""
    return [
        shot for shot in shots
        if (player_id is None or shot.player_id == player_id)
        and (quarter is None or shot.quarter == quarter)
        and (shot_type is None or shot.shot_type == shot_type)
    ]
