# -*- coding: utf-8 -*-
"""Location data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from locationtracker.constants import LOCATION_FIELDS
from locationtracker.core.errors import DecodeFailure


_STRING_FIELDS = {
    "name": "name",
    "category": "category",
    "city": "city",
    "state": "state",
    "park": "park",
    "description": "description",
    "imageName": "image_name",
}


@dataclass
class Location:
    """A single point of interest and its completion flag.

    Fields:
        id: Stable identity key, unique within a list.
        name, category, city, state, park, description: Free text.
        image_name: Opaque asset key resolved by the GUI only.
        is_completed: The only field mutated after load.
    """

    id: int
    name: str
    category: str
    city: str
    state: str
    park: str
    description: str
    image_name: str
    is_completed: bool = False

    @classmethod
    def from_dict(cls, raw: Any) -> "Location":
        """Build a record from one decoded JSON object; raise DecodeFailure on schema mismatch."""
        if not isinstance(raw, dict):
            raise DecodeFailure(f"Expected JSON object for location, got {type(raw).__name__}")

        missing = [key for key in LOCATION_FIELDS if key not in raw]
        if missing:
            raise DecodeFailure(f"Location record is missing fields: {', '.join(missing)}")
        unknown = sorted(set(raw) - set(LOCATION_FIELDS))
        if unknown:
            raise DecodeFailure(f"Location record has unknown fields: {', '.join(unknown)}")

        # bool is an int subclass; reject it explicitly for the id
        location_id = raw["id"]
        if isinstance(location_id, bool) or not isinstance(location_id, int):
            raise DecodeFailure(f"Location id must be an integer, got {location_id!r}")

        values: dict[str, Any] = {}
        for key, attr in _STRING_FIELDS.items():
            value = raw[key]
            if not isinstance(value, str):
                raise DecodeFailure(f"Location {location_id}: '{key}' must be a string")
            values[attr] = value

        is_completed = raw["isCompleted"]
        if not isinstance(is_completed, bool):
            raise DecodeFailure(f"Location {location_id}: 'isCompleted' must be a boolean")

        return cls(id=location_id, is_completed=is_completed, **values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the persisted key names and order."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "city": self.city,
            "state": self.state,
            "park": self.park,
            "description": self.description,
            "imageName": self.image_name,
            "isCompleted": self.is_completed,
        }


def decode_locations(data: Any) -> list[Location]:
    """Decode a JSON array into records, enforcing unique ids."""
    if not isinstance(data, list):
        raise DecodeFailure(f"Expected JSON array of locations, got {type(data).__name__}")

    locations: list[Location] = []
    seen: set[int] = set()
    for raw in data:
        location = Location.from_dict(raw)
        if location.id in seen:
            raise DecodeFailure(f"Duplicate location id: {location.id}")
        seen.add(location.id)
        locations.append(location)
    return locations


def encode_locations(locations: list[Location]) -> list[dict[str, Any]]:
    """Encode records into a JSON-ready array, preserving list order."""
    return [location.to_dict() for location in locations]
