"""Contest Evaluator - Pure functions for grading defensive pressure."""

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from ..config import ContestConfig, DEFAULT_CONTEST
from ..models.shot import ContestLevel, Point


@dataclass(frozen=True)
class ContestResult:
    level: ContestLevel
    distance: float


def separation(shooter: Point, defender: Point) -> float:
    """Euclidean distance between shooter and defender."""
    return math.hypot(shooter.x - defender.x, shooter.y - defender.y)


def contest_level_for_distance(distance: float, config: ContestConfig = DEFAULT_CONTEST) -> ContestLevel:
    """
    Grade a shooter-defender separation.

    Bands use exclusive upper bounds, so a distance of exactly 20 is a
    medium contest. BLOCKED is never produced here; only the recorder can
    assign it.
    """
    if distance < config.heavy:
        return ContestLevel.HEAVY_CONTEST
    if distance < config.medium:
        return ContestLevel.MEDIUM_CONTEST
    if distance < config.light:
        return ContestLevel.LIGHT_CONTEST
    return ContestLevel.UNCONTESTED


def classify_contest(
    shooter: Point,
    defender: Point,
    config: ContestConfig = DEFAULT_CONTEST,
) -> ContestResult:
    """Contest level and separation for a shooter/defender pair."""
    distance = separation(shooter, defender)
    return ContestResult(contest_level_for_distance(distance, config), distance)


def average_contest_level(levels: Iterable[Optional[ContestLevel]]) -> ContestLevel:
    """
    Average contest levels by ordinal and re-bucket the mean.

    A missing level adds nothing to the sum but still counts as a shot.
    """
    levels = list(levels)
    if not levels:
        return ContestLevel.UNCONTESTED
    total = sum(level.ordinal for level in levels if level is not None)
    return ContestLevel.from_ordinal_average(total / len(levels))
