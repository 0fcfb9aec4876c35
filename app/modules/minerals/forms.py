"""Admin form payloads for the publish step."""

from typing import Dict

from pydantic import BaseModel

from integrations.openai.schemas import MineralSuggestion
from modules.minerals.elements import (
    major_elements_to_text,
    parse_decimal,
    parse_major_elements,
)
from modules.minerals.errors import ValidationError
from modules.minerals.models import MineralDiskRecord

REQUIRED_TEXT_FIELDS = (
    "common_name",
    "description",
    "mineral_family",
    "formula",
    "crystal_system",
    "color",
    "streak",
    "luster",
    "notes",
)
NUMERIC_FIELDS = ("hardness_mohs", "density_g_cm3")


class MineralForm(BaseModel):
    """Raw form values as typed by the operator. Every value is text."""

    common_name: str = ""
    description: str = ""
    mineral_family: str = ""
    formula: str = ""
    hardness_mohs: str = ""
    density_g_cm3: str = ""
    crystal_system: str = ""
    color: str = ""
    streak: str = ""
    luster: str = ""
    major_elements_pct_text: str = ""
    notes: str = ""

    def to_disk_record(self) -> MineralDiskRecord:
        """Validate every field and build the base-language record.

        Text values are trimmed. The image filename is left unset.

        Raises:
            ValidationError: On the first missing or malformed field.
        """
        values: Dict[str, object] = {}
        for key in REQUIRED_TEXT_FIELDS:
            values[key] = _required(getattr(self, key), key)
        for key in NUMERIC_FIELDS:
            values[key] = parse_decimal(_required(getattr(self, key), key), key)
        values["major_elements_pct"] = parse_major_elements(self.major_elements_pct_text)
        return MineralDiskRecord(**values)

    @classmethod
    def from_suggestion(cls, suggestion: MineralSuggestion) -> "MineralForm":
        elements = {
            item.element.strip(): item.percent
            for item in suggestion.major_elements
            if item.element.strip()
        }
        return cls(
            common_name=suggestion.common_name,
            description=suggestion.description,
            mineral_family=suggestion.mineral_family,
            formula=suggestion.formula,
            hardness_mohs=f"{suggestion.hardness_mohs:.2f}",
            density_g_cm3=f"{suggestion.density_g_cm3:.2f}",
            crystal_system=suggestion.crystal_system,
            color=suggestion.color,
            streak=suggestion.streak,
            luster=suggestion.luster,
            major_elements_pct_text=major_elements_to_text(elements),
            notes=suggestion.notes,
        )


class PublishForm(MineralForm):
    """Form values plus the draft holding the uploaded image."""

    draft_id: str = ""


def _required(value: str, key: str) -> str:
    trimmed = (value or "").strip()
    if not trimmed:
        raise ValidationError(f"'{key}' is required", field=key)
    return trimmed
