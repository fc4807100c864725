from dataclasses import dataclass, field
from typing import Dict

from .shot import ContestLevel
from .zones import Zone, ZoneDefense


def empty_level_counts() -> Dict[ContestLevel, int]:
    """Histogram with every contest level present at zero."""
    return {level: 0 for level in ContestLevel}


@dataclass
class TeamDefensiveImpact:
    """Contest outcomes over every defended shot in a game."""
    total_contests: int = 0
    successful_contests: int = 0
    contests_by_level: Dict[ContestLevel, int] = field(default_factory=empty_level_counts)
    zone_defense: Dict[Zone, ZoneDefense] = field(default_factory=dict)

    @property
    def contest_efficiency(self) -> float:
        # Share of contests that ended in a miss
        if self.total_contests == 0:
            return 0.0
        return self.successful_contests / self.total_contests * 100

    def level_share(self, level: ContestLevel) -> float:
        if self.total_contests == 0:
            return 0.0
        return self.contests_by_level[level] / self.total_contests * 100

    def perimeter_defense(self) -> ZoneDefense:
        """Combined contests across the three-point zones."""
        combined = ZoneDefense()
        for zone, stats in self.zone_defense.items():
            if zone.is_three:
                combined.contests += stats.contests
                combined.successful_contests += stats.successful_contests
        return combined


@dataclass
class DefenderImpact(TeamDefensiveImpact):
    """Contest outcomes for one defender."""
    defender_id: str = ''
    defender_name: str = 'Unknown'
    avg_contest_distance: float = 0.0

    @property
    def impact_by_zone(self) -> Dict[Zone, ZoneDefense]:
        return self.zone_defense


@dataclass
class MatchupStats:
    """One shooter against one defender."""
    total_shots: int = 0
    made_shots: int = 0
    avg_contest_level: ContestLevel = ContestLevel.UNCONTESTED

    @property
    def efficiency(self) -> float:
        return (self.made_shots / self.total_shots * 100) if self.total_shots > 0 else 0.0
