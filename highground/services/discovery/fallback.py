"""Deterministic sample places served whenever live discovery fails."""
from __future__ import annotations

from typing import List

from highground.models.place import Coordinates, PlaceOfInterest


def sample_places(latitude: float, longitude: float) -> List[PlaceOfInterest]:
    """Three hand-written places at fixed offsets, all inside the 5 km radius."""
    return [
        PlaceOfInterest(
            id="1",
            name="Scenic Ridge",
            elevation="850 ft",
            status="Accessible",
            risk="Low",
            coordinates=Coordinates(lat=latitude + 0.01, lng=longitude + 0.01),
            description="A gentle hill with panoramic views of the surrounding area.",
            distance_from_user="1.2 km",
        ),
        PlaceOfInterest(
            id="2",
            name="Lookout Point",
            elevation="1,240 ft",
            status="Caution",
            risk="Medium",
            coordinates=Coordinates(lat=latitude + 0.02, lng=longitude - 0.01),
            description="A moderate climb with rocky terrain and beautiful vistas.",
            distance_from_user="2.8 km",
        ),
        PlaceOfInterest(
            id="3",
            name="Valley Overlook",
            elevation="1,120 ft",
            status="Dangerous",
            risk="High",
            coordinates=Coordinates(lat=latitude - 0.01, lng=longitude + 0.02),
            description="A challenging ascent with steep cliffs and difficult terrain.",
            distance_from_user="3.5 km",
        ),
    ]
