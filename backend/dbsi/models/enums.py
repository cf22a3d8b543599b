"""Enums for the DB-SI domain models.

Values are the identifiers exchanged with the form layer; human-readable
labels live in :mod:`dbsi.data.labels`.
"""

from enum import StrEnum


class SectionId(StrEnum):
    """The six sections of the CTE DB-SI basic document."""

    SI1 = "si1"
    SI2 = "si2"
    SI3 = "si3"
    SI4 = "si4"
    SI5 = "si5"
    SI6 = "si6"


class BuildingUse(StrEnum):
    """Building uses across all sections.

    Each section accepts its own subset; see the section's ``accepted_uses``.
    """

    RESIDENTIAL = "residential"
    RESIDENTIAL_SINGLE = "residential_single"
    OFFICE = "office"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    EDUCATIONAL = "educational"
    HEALTHCARE = "healthcare"
    HOTEL = "hotel"
    ASSEMBLY = "assembly"
    RESTAURANT = "restaurant"
    PARKING_EXCLUSIVE = "parking_exclusive"
    PARKING_UNDER = "parking_under"


class BuildingLocation(StrEnum):
    """Setting of the building."""

    URBAN = "urban"
    RURAL = "rural"
    INDUSTRIAL = "industrial"


class MaterialClass(StrEnum):
    """Reaction-to-fire classes, from least to most restrictive."""

    D = "d"
    C = "c"
    B = "b"
    A2 = "a2"
    A1 = "a1"

    @property
    def rank(self) -> int:
        return list(MaterialClass).index(self)


class RiskLevel(StrEnum):
    """Fire risk level used by the protection-installation rules."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SpecialRisk(StrEnum):
    """Special-risk classification of the sector for structural resistance."""

    NORMAL = "normal"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class LoadLevel(StrEnum):
    """Fire load density of the sector."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SectorLocation(StrEnum):
    """Position of the sector relative to grade."""

    ABOVE_GRADE = "above_grade"
    BASEMENT = "basement"
    ROOF = "roof"


class StructureType(StrEnum):
    """Primary structural material."""

    CONCRETE = "concrete"
    STEEL = "steel"
    WOOD = "wood"
    MASONRY = "masonry"
    MIXED = "mixed"


class ProtectionSystem(StrEnum):
    """Fire protection installations."""

    EXTINGUISHERS = "extinguishers"
    FIRE_HOSE_REELS = "fire_hose_reels"
    DRY_RISER = "dry_riser"
    FIRE_DETECTION = "fire_detection"
    FIRE_ALARM = "fire_alarm"
    SPRINKLERS = "sprinklers"
    EMERGENCY_LIGHTING = "emergency_lighting"
    SIGNAGE = "signage"
    PUBLIC_ADDRESS = "public_address"
    SMOKE_CONTROL = "smoke_control"


class ComplianceState(StrEnum):
    """Outcome kinds a section can report."""

    PASS = "pass"
    FAIL = "fail"
    PARTIAL = "partial"
    NOT_EVALUATED = "not_evaluated"
