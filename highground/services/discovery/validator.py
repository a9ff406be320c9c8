"""Validation and repair utilities for parsed place records."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Set

from pydantic import ValidationError

from highground.models.place import AccessStatus, PlaceOfInterest, RiskLevel

logger = logging.getLogger(__name__)

_RISK_LEVELS = {level.value.lower(): level.value for level in RiskLevel}
_ACCESS_STATUSES = {status.value.lower(): status.value for status in AccessStatus}


class PlaceRecordValidator:
    """Validate and repair raw LLM items into PlaceOfInterest instances."""

    def validate(self, items: Iterable[Any]) -> List[PlaceOfInterest]:
        places: List[PlaceOfInterest] = []
        seen_ids: Set[str] = set()
        for position, item in enumerate(items, start=1):
            if not isinstance(item, dict):
                logger.warning("Dropping non-object item at position %d", position)
                continue
            cleaned = self._repair(item, position=position, seen_ids=seen_ids)
            try:
                place = PlaceOfInterest.model_validate(cleaned)
            except ValidationError as exc:
                logger.warning(
                    "Dropping invalid place at position %d: %s",
                    position,
                    exc.errors(include_url=False),
                )
                continue
            seen_ids.add(place.id)
            places.append(place)
        return places

    def _repair(
        self, item: Dict[str, Any], *, position: int, seen_ids: Set[str]
    ) -> Dict[str, Any]:
        data = dict(item)

        place_id = self._text_or_none(item.get("id"))
        if not place_id or place_id in seen_ids:
            place_id = str(position)
            # Keep ids unique within the batch even when the model reused one
            while place_id in seen_ids:
                place_id = f"{place_id}-{position}"
        data["id"] = place_id

        data["elevation"] = self._text_or_none(item.get("elevation"))
        data["distanceFromUser"] = self._text_or_none(item.get("distanceFromUser"))
        data["risk"] = self._normalize_choice(item.get("risk"), _RISK_LEVELS)
        data["status"] = self._normalize_choice(item.get("status"), _ACCESS_STATUSES)
        return data

    @staticmethod
    def _text_or_none(value: object) -> Optional[str]:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        return None

    @staticmethod
    def _normalize_choice(value: object, allowed: Dict[str, str]) -> object:
        if isinstance(value, str):
            return allowed.get(value.strip().lower(), value)
        return value
