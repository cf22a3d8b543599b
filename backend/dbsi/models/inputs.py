"""Per-section input payloads.

These models hold the raw values typed into each section's form: numbers
may arrive as strings and choice fields as free text. They are resolved
and validated by the section evaluator, which reports every offending
field at once instead of failing on the first one.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RawNumber = float | str | None
RawChoice = str | None


class SectionInput(BaseModel):
    """Base class for section inputs."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class InteriorSpreadInput(SectionInput):
    """SI 1 — interior propagation."""

    building_use: RawChoice = Field(default=None, alias="usBuilding")
    surface_area: RawNumber = None
    height: RawNumber = None
    compartment_area: RawNumber = None
    material_type: RawChoice = None


class ExteriorSpreadInput(SectionInput):
    """SI 2 — exterior propagation."""

    facade_height: RawNumber = None
    distance_to_property: RawNumber = None
    facade_material: RawChoice = None
    opening_percentage: RawNumber = None
    insulation_material: RawChoice = None


class EvacuationInput(SectionInput):
    """SI 3 — evacuation of occupants."""

    building_use: RawChoice = Field(default=None, alias="usBuilding")
    floor_area: RawNumber = None
    occupant_load: RawNumber = None
    exit_width: RawNumber = None
    travel_distance: RawNumber = None
    number_of_floors: RawNumber = None


class ProtectionSystemsInput(SectionInput):
    """SI 4 — fire protection installations."""

    building_use: RawChoice = Field(default=None, alias="usBuilding")
    total_area: RawNumber = None
    building_height: RawNumber = None
    risk_level: RawChoice = None
    installed_systems: list[str] = Field(default_factory=list)


class FireBrigadeAccessInput(SectionInput):
    """SI 5 — fire brigade intervention."""

    building_height: RawNumber = None
    building_width: RawNumber = None
    access_road_width: RawNumber = None
    distance_to_access: RawNumber = None
    hydrant_distance: RawNumber = None
    has_fire_lift: bool = False
    has_hydrants: bool = False
    accessible_roof: bool = False


class StructuralResistanceInput(SectionInput):
    """SI 6 — fire resistance of the structure."""

    building_height: RawNumber = None
    structure_type: RawChoice = None
    building_use: RawChoice = Field(default=None, alias="usBuilding")
    load_level: RawChoice = None
    sector_location: RawChoice = None
    risk_level: RawChoice = None
