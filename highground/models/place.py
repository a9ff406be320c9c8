"""
Place models shared by the discovery pipeline and the API
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class AccessStatus(str, Enum):
    ACCESSIBLE = "Accessible"
    CAUTION = "Caution"
    DANGEROUS = "Dangerous"


class Coordinates(BaseModel):
    """Coordinates model"""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class PlaceOfInterest(BaseModel):
    """Mid-altitude place suggested near the user"""
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    id: str
    name: str
    elevation: str  # Free text with unit (e.g., "850 ft")
    coordinates: Coordinates
    description: str
    risk: RiskLevel
    status: AccessStatus
    # Free text with unit (e.g., "2.8 km"), inspected by the geofence
    distance_from_user: Optional[str] = Field(default=None, alias="distanceFromUser")
