"""Zone Mapper - Pure functions for mapping shot coordinates to zones."""

import math

from ..config import CourtConfig, DEFAULT_COURT
from ..models.shot import ShotType
from ..models.zones import CourtPosition, Zone


def distance_from_basket(x: float, y: float, court: CourtConfig = DEFAULT_COURT) -> float:
    """Euclidean distance from (x, y) to the basket center."""
    return math.hypot(x - court.basket_x, y - court.basket_y)


def classify_zone(x: float, y: float, court: CourtConfig = DEFAULT_COURT) -> CourtPosition:
    """
    Map shot coordinates to a zone and distance from the basket.

    This is a PURE FUNCTION - total over any real (x, y), including points
    outside the court.

    Args:
        x: X coordinate (0 = left sideline, court.width = right sideline)
        y: Y coordinate (0 = baseline under the basket)
        court: Court geometry

    Returns:
        CourtPosition with the zone and distance
    """
    distance = distance_from_basket(x, y, court)
    left_side = x < court.basket_x

    # Paint wins over every distance rule
    if y < court.paint_depth and abs(x - court.basket_x) < court.paint_half_width:
        return CourtPosition(Zone.PAINT, distance)

    # Strictly beyond the arc
    if distance > court.three_point_radius:
        if y > court.corner_three_y:
            zone = Zone.LEFT_CORNER_3 if left_side else Zone.RIGHT_CORNER_3
        else:
            zone = Zone.ABOVE_BREAK_3
        return CourtPosition(zone, distance)

    # Everything else is mid-range
    zone = Zone.MID_RANGE_LEFT if left_side else Zone.MID_RANGE_RIGHT
    return CourtPosition(zone, distance)


def auto_shot_type(x: float, y: float, court: CourtConfig = DEFAULT_COURT) -> ShotType:
    """
    Pick 2PT or 3PT from the shot location.

    Uses the same boundary as classify_zone, so the corner strip always
    counts as a three. Free throws are never inferred.
    """
    return ShotType.THREE if classify_zone(x, y, court).zone.is_three else ShotType.TWO


def normalize_zone_name(raw_name: str) -> Zone:
    """
    Standardize zone names typed by a user or found in an event script.

    Args:
        raw_name: Raw zone name

    Returns:
        The matching Zone

    Raises:
        ValueError: if the name matches no zone
    """
    mappings = {
        'paint': Zone.PAINT,
        'in the paint': Zone.PAINT,
        'mid-range left': Zone.MID_RANGE_LEFT,
        'midrange left': Zone.MID_RANGE_LEFT,
        'mid range left': Zone.MID_RANGE_LEFT,
        'mid-range right': Zone.MID_RANGE_RIGHT,
        'midrange right': Zone.MID_RANGE_RIGHT,
        'mid range right': Zone.MID_RANGE_RIGHT,
        'left corner 3': Zone.LEFT_CORNER_3,
        'left corner': Zone.LEFT_CORNER_3,
        'right corner 3': Zone.RIGHT_CORNER_3,
        'right corner': Zone.RIGHT_CORNER_3,
        'above break 3': Zone.ABOVE_BREAK_3,
        'above the break 3': Zone.ABOVE_BREAK_3,
        'above the break': Zone.ABOVE_BREAK_3,
        'arc 3': Zone.ABOVE_BREAK_3,
    }

    key = raw_name.lower().strip().replace('_', ' ')
    normalized = mappings.get(key)
    if normalized is None:
        raise ValueError(f"Unknown zone: {raw_name!r}")
    return normalized

