"""Project-wide building data shared by every section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from dbsi.exceptions import InputValidationError
from dbsi.models.enums import BuildingLocation, BuildingUse
from dbsi.models.validation import invalid_fields


class ProjectContext(BaseModel):
    """General project parameters entered once and reused by all sections.

    Instances are immutable; a valid ProjectContext is a precondition for
    running any section evaluator. The UI layer posts camelCase keys
    (``usBuilding``, ``evacuationHeight``) which are accepted as aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    project_name: str = ""
    building_use: BuildingUse = Field(alias="usBuilding")
    total_surface: float = Field(gt=0)
    evacuation_height: float = Field(gt=0)
    floors: float = Field(gt=0)
    max_occupancy: float = Field(gt=0)
    building_location: BuildingLocation

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> ProjectContext:
        """Build a context from raw form data.

        Blank strings count as missing. Raises
        :class:`~dbsi.exceptions.InputValidationError` naming every field
        that is missing, non-numeric, non-positive or not an accepted value.
        """
        cleaned = {
            key: value.strip() if isinstance(value, str) else value
            for key, value in data.items()
        }
        cleaned = {key: value for key, value in cleaned.items() if value != ""}
        try:
            return cls.model_validate(cleaned)
        except ValidationError as exc:
            raise InputValidationError(invalid_fields(exc, cls)) from exc
