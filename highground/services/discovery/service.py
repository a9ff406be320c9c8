"""High-level orchestration for discovering mid-altitude places near a user."""
from __future__ import annotations

import logging
from typing import List, Optional

from highground.config import settings
from highground.models.place import PlaceOfInterest
from highground.models.response import PlaceSearchResponse

from .cache import ViewCacheInvalidator, build_invalidator
from .errors import ConfigurationError, HttpError, NetworkError, ShapeError
from .fallback import sample_places
from .gemini_client import GeminiClient
from .geofence import filter_within_radius
from .parser import ResponseParser
from .prompts import build_place_prompt
from .validator import PlaceRecordValidator

logger = logging.getLogger(__name__)

PARSE_FAILURE_MESSAGE = "Failed to parse response from generative model"
NETWORK_FAILURE_MESSAGE = "Network error while contacting the generative model"
UNEXPECTED_FAILURE_MESSAGE = "Unexpected error while discovering places"


class PlaceDiscoveryService:
    """Pipeline: prompt → Gemini → parse → validate → geofence, else sample places.

    ``find_places`` never raises. Every failure is answered with the
    deterministic sample places; only a genuine model answer invalidates the
    navigation view.
    """

    def __init__(
        self,
        *,
        llm_client: Optional[GeminiClient] = None,
        parser: Optional[ResponseParser] = None,
        validator: Optional[PlaceRecordValidator] = None,
        invalidator: Optional[ViewCacheInvalidator] = None,
        radius_km: Optional[float] = None,
        places_per_request: Optional[int] = None,
        view_path: Optional[str] = None,
    ) -> None:
        self._llm_client = llm_client or GeminiClient()
        self._parser = parser or ResponseParser()
        self._validator = validator or PlaceRecordValidator()
        self._invalidator = invalidator or build_invalidator()
        self._radius_km = radius_km if radius_km is not None else settings.search_radius_km
        self._places_per_request = places_per_request or settings.places_per_request
        self._view_path = view_path or settings.navigation_view_path

    async def find_places(self, latitude: float, longitude: float) -> PlaceSearchResponse:
        logger.info("Starting mid-altitude places search for %s, %s", latitude, longitude)
        try:
            return await self._discover(latitude, longitude)
        except Exception:
            logger.exception("Error finding mid-altitude places")
            return self._fallback(latitude, longitude, error=UNEXPECTED_FAILURE_MESSAGE)

    async def _discover(self, latitude: float, longitude: float) -> PlaceSearchResponse:
        prompt = build_place_prompt(
            latitude,
            longitude,
            radius_km=self._radius_km,
            count=self._places_per_request,
        )

        try:
            text = await self._llm_client.generate(prompt)
        except ConfigurationError:
            logger.info("No Gemini API key found, using sample data")
            return self._fallback(latitude, longitude)
        except HttpError as exc:
            return self._fallback(
                latitude,
                longitude,
                error=f"{exc}. Please check your API key and network.",
            )
        except ShapeError as exc:
            return self._fallback(latitude, longitude, error=str(exc))
        except NetworkError as exc:
            logger.error("Gemini request failed: %s", exc)
            return self._fallback(latitude, longitude, error=NETWORK_FAILURE_MESSAGE)

        parsed = self._parser.parse(text)
        if parsed is None:
            return self._fallback(latitude, longitude, error=PARSE_FAILURE_MESSAGE)

        places = self._validator.validate(parsed.items)
        places = filter_within_radius(places, radius_km=self._radius_km)
        if len(places) > self._places_per_request:
            logger.info(
                "Model returned %d place(s); keeping the first %d",
                len(places),
                self._places_per_request,
            )
            places = places[: self._places_per_request]
        # An empty list after filtering is still a success, not a fallback.
        logger.info(
            "Found %d mid-altitude place(s) within %.2f km", len(places), self._radius_km
        )

        await self._invalidate_view()
        return PlaceSearchResponse(success=True, places=places, used_fallback=False)

    async def _invalidate_view(self) -> None:
        try:
            await self._invalidator.invalidate(self._view_path)
        except Exception as exc:
            logger.warning("Could not invalidate %s: %s", self._view_path, exc)

    @staticmethod
    def _fallback(
        latitude: float, longitude: float, *, error: Optional[str] = None
    ) -> PlaceSearchResponse:
        places: List[PlaceOfInterest] = sample_places(latitude, longitude)
        if error:
            logger.error("Falling back to sample places: %s", error)
        return PlaceSearchResponse(
            success=error is None,
            places=places,
            error=error,
            used_fallback=True,
        )
