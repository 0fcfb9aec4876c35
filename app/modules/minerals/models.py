"""Mineral data model and on-disk naming conventions.

A mineral lives in its own folder under the record store root:

    minerals/
        mineral.silicate.0x1a2b3c4d/
            mineral.json        canonical base-language record (legacy default)
            mineral.en.json     one file per supported language
            mineral.fr.json
            ...
            image.png

The folder name doubles as the mineral's public identifier (slug).
"""

import re
from typing import Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

RECORD_PREFIX = "mineral"
METADATA_SUFFIX = ".json"
CANONICAL_METADATA_FILE = f"{RECORD_PREFIX}{METADATA_SUFFIX}"
PUBLIC_DATA_PREFIX = "/data/minerals"

FOLDER_NAME_PATTERN = re.compile(
    rf"^{RECORD_PREFIX}\.(?P<family>[a-z0-9]+(?:-[a-z0-9]+)*)\.0x(?P<id>[0-9a-f]{{3,}})$"
)


def is_valid_folder_name(name: str) -> bool:
    """Check a folder name against ``mineral.<family-slug>.0x<hex>``.

    The family slug is one or more dash-separated lowercase alphanumeric
    tokens; the id is at least three lowercase hex characters.
    """
    return FOLDER_NAME_PATTERN.match(name) is not None


def metadata_filename(language_code: Optional[str] = None) -> str:
    """Metadata file name for a language, or the canonical file when None."""
    if language_code is None:
        return CANONICAL_METADATA_FILE
    return f"{RECORD_PREFIX}.{language_code}{METADATA_SUFFIX}"


# Text fields sent to the translation service; numbers and the element
# composition are copied unchanged between languages.
TRANSLATABLE_FIELDS = (
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


class MineralDiskRecord(BaseModel):
    """Per-language serialized form of a mineral.

    ``mineral_group`` is accepted on read as a legacy name for
    ``mineral_family``; writes always use ``mineral_family``.
    """

    model_config = ConfigDict(populate_by_name=True)

    common_name: str
    description: str = ""
    mineral_family: str = Field(
        validation_alias=AliasChoices("mineral_family", "mineral_group")
    )
    formula: str
    hardness_mohs: float
    density_g_cm3: float
    crystal_system: str
    color: str
    streak: str
    luster: str
    major_elements_pct: Dict[str, float] = Field(default_factory=dict)
    notes: str
    image_file: Optional[str] = None

    def translatable_fields(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in TRANSLATABLE_FIELDS}

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)


class Mineral(BaseModel):
    """A language-resolved mineral as served by the catalog."""

    model_config = ConfigDict(frozen=True)

    slug: str
    folder_name: str
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
    major_elements_pct: Dict[str, float] = Field(default_factory=dict)
    notes: str
    image_path: Optional[str] = None

    @classmethod
    def from_disk_record(cls, folder_name: str, record: MineralDiskRecord) -> "Mineral":
        image_path = None
        if record.image_file:
            image_path = f"{PUBLIC_DATA_PREFIX}/{folder_name}/{record.image_file}"
        return cls(
            slug=folder_name,
            folder_name=folder_name,
            common_name=record.common_name,
            description=record.description,
            mineral_family=record.mineral_family,
            formula=record.formula,
            hardness_mohs=record.hardness_mohs,
            density_g_cm3=record.density_g_cm3,
            crystal_system=record.crystal_system,
            color=record.color,
            streak=record.streak,
            luster=record.luster,
            major_elements_pct=dict(record.major_elements_pct),
            notes=record.notes,
            image_path=image_path,
        )
