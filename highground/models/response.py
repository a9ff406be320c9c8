"""
Response models for place discovery
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from highground.models.place import PlaceOfInterest


class PlaceSearchResponse(BaseModel):
    """Place search response model

    ``success`` is False only when the live pipeline failed and the sample
    places were substituted; a missing API key still reports success.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool = True
    places: List[PlaceOfInterest] = []
    error: Optional[str] = None  # Never contains credentials
    used_fallback: bool = Field(default=False, alias="usedFallback")
