"""
Filter Criteria - GEO Operators

Great-circle distance via the Haversine formula.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Optional

from filter_criteria.core.config import settings
from filter_criteria.core.types import GeoOperator, GeoUnit
from filter_criteria.operators.utils import is_number, is_sequence

EARTH_RADIUS = {
    GeoUnit.KM: 6371.0,
    GeoUnit.MI: 3959.0,
}


def to_point(value: Any) -> Optional[tuple[float, float]]:
    """Accept ``[lat, lng]`` pairs and ``{"lat": ..., "lng": ...}`` mappings."""
    if isinstance(value, Mapping):
        lat, lng = value.get("lat"), value.get("lng")
    elif is_sequence(value) and len(value) == 2:
        lat, lng = value
    else:
        return None

    if not (is_number(lat) and is_number(lng)):
        return None
    return float(lat), float(lng)


def calculate_distance(
    point1: tuple[float, float],
    point2: tuple[float, float],
    unit: GeoUnit = GeoUnit.KM,
) -> float:
    """Haversine distance between two (lat, lng) points."""
    lat1, lng1 = map(math.radians, point1)
    lat2, lng2 = map(math.radians, point2)
    d_lat = lat2 - lat1
    d_lng = lng2 - lng1

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS[unit] * c


def evaluate(value: Any, operator: str, match_value: Any) -> bool:
    """
    Evaluate a GEO operator.

    The match value is ``{"lat", "lng", "radius"?, "unit"?}``. A missing
    radius means 0, so IN-RADIUS degrades to an exact-point match.
    NOT-IN-RADIUS is the strict complement of IN-RADIUS on valid operands.
    """
    if not isinstance(match_value, Mapping):
        return False

    point = to_point(value)
    center = to_point(match_value)
    if point is None or center is None:
        return False

    radius = match_value.get("radius")
    if radius is None:
        radius = 0
    if not is_number(radius):
        return False

    try:
        unit = GeoUnit(match_value.get("unit") or settings.GEO_DEFAULT_UNIT)
    except ValueError:
        return False

    distance = calculate_distance(point, center, unit)
    operator = GeoOperator(operator)

    if operator == GeoOperator.IN_RADIUS:
        return distance <= radius
    elif operator == GeoOperator.NOT_IN_RADIUS:
        return distance > radius

    return False
