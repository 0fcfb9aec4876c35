"""Structured-output schemas for the chat-completions API.

Each JSON schema is sent with ``strict: true``; the pydantic models parse
and re-validate what comes back.
"""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict


class MajorElement(BaseModel):
    element: str
    percent: float


class MineralSuggestion(BaseModel):
    """Mineral profile inferred from a photo."""

    model_config = ConfigDict(extra="forbid")

    common_name: str
    description: str
    mineral_family: str
    formula: str
    hardness_mohs: float
    density_g_cm3: float
    crystal_system: str
    color: str
    streak: str
    luster: str
    major_elements: List[MajorElement]
    notes: str


class MineralTranslation(BaseModel):
    """Translated text fields of a mineral record."""

    model_config = ConfigDict(extra="forbid")

    common_name: str
    description: str
    mineral_family: str
    formula: str
    crystal_system: str
    color: str
    streak: str
    luster: str
    notes: str


def _string_properties(names: List[str]) -> Dict[str, Dict[str, str]]:
    return {name: {"type": "string"} for name in names}


TRANSLATION_FIELDS = list(MineralTranslation.model_fields)

SUGGESTION_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        **_string_properties(
            ["common_name", "description", "mineral_family", "formula"]
        ),
        "hardness_mohs": {"type": "number"},
        "density_g_cm3": {"type": "number"},
        **_string_properties(["crystal_system", "color", "streak", "luster"]),
        "major_elements": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "properties": {
                    "element": {"type": "string"},
                    "percent": {"type": "number"},
                },
                "required": ["element", "percent"],
            },
        },
        "notes": {"type": "string"},
    },
    "required": list(MineralSuggestion.model_fields),
}

TRANSLATION_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": _string_properties(TRANSLATION_FIELDS),
    "required": TRANSLATION_FIELDS,
}
