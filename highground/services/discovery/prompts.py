"""Prompt templates for the mid-altitude place discovery pipeline."""
from __future__ import annotations

from textwrap import dedent

PLACE_PROMPT_TEMPLATE = dedent(
    """
    I need to find mid altitude places (hills, viewpoints, plateaus, etc.) STRICTLY WITHIN a {radius}km radius of the following coordinates:
    Latitude: {lat}
    Longitude: {lng}

    IMPORTANT: All locations MUST be within {radius}km of these coordinates. Do not include anything beyond {radius}km.

    Please provide exactly {count} locations with the following information for each:
    1. Name of the place
    2. Approximate elevation (in feet)
    3. Coordinates (latitude and longitude)
    4. Brief description (1-2 sentences)
    5. Risk level (Low, Medium, or High)
    6. Status (Accessible, Caution, or Dangerous)
    7. Approximate distance from the user's location (MUST be less than {radius}km)

    Format your response as a JSON array with objects containing these fields:
    [
      {{
        "id": "1",
        "name": "Name of place",
        "elevation": "Elevation in feet",
        "coordinates": {{
          "lat": latitude,
          "lng": longitude
        }},
        "description": "Brief description",
        "risk": "Risk level",
        "status": "Status",
        "distanceFromUser": "Distance in km"
      }},
      ...
    ]

    CRITICAL: All locations MUST be within {radius}km of the provided coordinates.
    Only return the JSON array, nothing else.
    """
).strip()


def build_place_prompt(
    lat: float, lng: float, *, radius_km: float = 5.0, count: int = 3
) -> str:
    """Return the instruction asking for ``count`` places within ``radius_km``."""
    return PLACE_PROMPT_TEMPLATE.format(
        lat=lat, lng=lng, radius=f"{radius_km:g}", count=count
    )
