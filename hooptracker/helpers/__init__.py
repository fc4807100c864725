"""Helpers - Pure utility functions with no side effects."""

from .box_score import sum_stats, stocks, defensive_score
from .contest import (
    ContestResult,
    classify_contest,
    contest_level_for_distance,
    average_contest_level,
)
from .zone_mapper import (
    classify_zone,
    auto_shot_type,
    distance_from_basket,
    normalize_zone_name,
)

__all__ = [
    'sum_stats',
    'stocks',
    'defensive_score',
    'ContestResult',
    'classify_contest',
    'contest_level_for_distance',
    'average_contest_level',
    'classify_zone',
    'auto_shot_type',
    'distance_from_basket',
    'normalize_zone_name',
]
