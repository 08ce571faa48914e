"""Structured-output contract handed to the model alongside the prompt."""

from copy import deepcopy
from typing import Any, Dict

SUMMARY_FIELDS = ["totalDistance", "totalDays", "fuelRequired", "fuelCost"]
SEGMENT_FIELDS = [
    "segment",
    "driveTime",
    "distance",
    "arrivalLocation",
    "stopType",
    "state",
    "safety",
]
JOURNEY_FIELDS = ["origin", "destination", "summary", "segments"]

JOURNEY_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "journeys": {
            "type": "array",
            "description": "An array of journey plans, one for each destination.",
            "items": {
                "type": "object",
                "properties": {
                    "origin": {"type": "string"},
                    "destination": {"type": "string"},
                    "summary": {
                        "type": "object",
                        "properties": {name: {"type": "string"} for name in SUMMARY_FIELDS},
                        "required": list(SUMMARY_FIELDS),
                    },
                    "segments": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "segment": {"type": "number"},
                                "driveTime": {"type": "string"},
                                "distance": {"type": "number"},
                                "arrivalLocation": {"type": "string"},
                                "stopType": {"type": "string"},
                                "state": {"type": "string"},
                                "safety": {"type": "string"},
                            },
                            "required": list(SEGMENT_FIELDS),
                        },
                    },
                },
                "required": list(JOURNEY_FIELDS),
            },
        }
    },
    "required": ["journeys"],
}


def to_gemini_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Gemini's ``responseSchema`` spells types in upper case (``OBJECT``, ``STRING``...)."""
    converted = deepcopy(schema)

    def _walk(node: Dict[str, Any]) -> None:
        if "type" in node:
            node["type"] = node["type"].upper()
        for child in node.get("properties", {}).values():
            _walk(child)
        if "items" in node:
            _walk(node["items"])

    _walk(converted)
    return converted
