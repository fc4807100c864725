from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class Zone(Enum):
    """Named half-court shooting zones."""
    PAINT = 'Paint'
    MID_RANGE_LEFT = 'Mid-Range Left'
    MID_RANGE_RIGHT = 'Mid-Range Right'
    LEFT_CORNER_3 = 'Left Corner 3'
    RIGHT_CORNER_3 = 'Right Corner 3'
    ABOVE_BREAK_3 = 'Above Break 3'

    @property
    def is_three(self) -> bool:
        return self in (Zone.LEFT_CORNER_3, Zone.RIGHT_CORNER_3, Zone.ABOVE_BREAK_3)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CourtPosition:
    """Zone and distance from the basket, derived from shot coordinates."""
    zone: Zone
    distance: float


@dataclass
class ShotEfficiency:
    """Make/miss totals for any subset of shots"""
    made: int = 0
    missed: int = 0

    @property
    def total(self) -> int:
        return self.made + self.missed

    @property
    def efficiency(self) -> float:
        return (self.made / self.total * 100) if self.total > 0 else 0.0

    @property
    def has_data(self) -> bool:
        # A zone with no attempts is "no data", not 0% shooting
        return self.total > 0

    def to_dict(self) -> dict:
        return {
            'made': self.made,
            'missed': self.missed,
            'total': self.total,
            'efficiency': self.efficiency,
        }


@dataclass
class ZoneDefense:
    """Contests and forced misses inside one zone."""
    contests: int = 0
    successful_contests: int = 0

    @property
    def efficiency(self) -> float:
        return (self.successful_contests / self.contests * 100) if self.contests > 0 else 0.0

    def to_dict(self) -> dict:
        return {
            'contests': self.contests,
            'successful_contests': self.successful_contests,
            'efficiency': self.efficiency,
        }


@dataclass
class ZoneDefensiveSplit:
    """Shooting in a zone split by whether a defender was recorded."""
    zone: Zone
    contested: int = 0
    contested_made: int = 0
    uncontested: int = 0
    uncontested_made: int = 0

    @property
    def contested_efficiency(self) -> float:
        return (self.contested_made / self.contested * 100) if self.contested > 0 else 0.0

    @property
    def uncontested_efficiency(self) -> float:
        return (self.uncontested_made / self.uncontested * 100) if self.uncontested > 0 else 0.0


@dataclass
class ZoneMap:
    """Container for a per-zone efficiency map."""
    zones: Dict[Zone, ShotEfficiency] = field(default_factory=dict)

    def get_zone(self, zone: Zone) -> Optional[ShotEfficiency]:
        return self.zones.get(zone)

    def hottest_zone(self) -> Optional[Zone]:
        """Zone with the best make rate among zones that have attempts."""
        candidates = [z for z, stats in self.zones.items() if stats.has_data]
        if not candidates:
            return None
        return max(candidates, key=lambda z: self.zones[z].efficiency)

    def coldest_zone(self) -> Optional[Zone]:
        candidates = [z for z, stats in self.zones.items() if stats.has_data]
        if not candidates:
            return None
        return min(candidates, key=lambda z: self.zones[z].efficiency)
