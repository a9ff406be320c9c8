"""Mid-altitude place discovery: prompt a generative model, parse, geofence, fall back."""
from .service import PlaceDiscoveryService

__all__ = ["PlaceDiscoveryService"]
