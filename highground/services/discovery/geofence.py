"""Distance constraint applied to model-suggested places."""
from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Iterable, List, Optional

from highground.models.place import PlaceOfInterest

logger = logging.getLogger(__name__)


class UnparseableDistancePolicy(str, Enum):
    KEEP = "keep"
    DROP = "drop"


# Records whose distance text has no number pass through unchecked (fail-open).
ON_UNPARSEABLE_DISTANCE = UnparseableDistancePolicy.KEEP

# The first number in a distance is read as kilometres whatever unit follows it,
# so "800 m" reads as 800 km and "4 miles" as 4 km.
DISTANCE_UNIT = "km"

_LEADING_NUMBER = re.compile(r"\d+(?:\.\d+)?")


def parse_distance_km(distance: Optional[str]) -> Optional[float]:
    """Return the first number in ``distance`` (e.g. "3.2 km" -> 3.2), if any.

    The unit text is not inspected; see ``DISTANCE_UNIT``.
    """
    if not distance:
        return None
    match = _LEADING_NUMBER.search(distance)
    if not match:
        return None
    return float(match.group(0))


def filter_within_radius(
    places: Iterable[PlaceOfInterest],
    radius_km: float = 5.0,
    policy: UnparseableDistancePolicy = ON_UNPARSEABLE_DISTANCE,
) -> List[PlaceOfInterest]:
    kept: List[PlaceOfInterest] = []
    for place in places:
        distance = parse_distance_km(place.distance_from_user)
        if distance is None:
            if policy is UnparseableDistancePolicy.KEEP:
                kept.append(place)
            else:
                logger.info("Dropping %r: distance %r is unreadable", place.name, place.distance_from_user)
            continue
        if distance <= radius_km:
            kept.append(place)
        else:
            logger.info(
                "Dropping %r: %.2f km is beyond the %.2f km radius",
                place.name,
                distance,
                radius_km,
            )
    return kept
