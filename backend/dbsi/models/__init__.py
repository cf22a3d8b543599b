"""Domain models for the DB-SI compliance calculator."""

from dbsi.models.enums import (
    BuildingLocation,
    BuildingUse,
    ComplianceState,
    LoadLevel,
    MaterialClass,
    ProtectionSystem,
    RiskLevel,
    SectionId,
    SectorLocation,
    SpecialRisk,
    StructureType,
)
from dbsi.models.inputs import (
    EvacuationInput,
    ExteriorSpreadInput,
    FireBrigadeAccessInput,
    InteriorSpreadInput,
    ProtectionSystemsInput,
    SectionInput,
    StructuralResistanceInput,
)
from dbsi.models.project import ProjectContext
from dbsi.models.report import ReportEntry, ReportModel
from dbsi.models.result import CheckOutcome, ComplianceStatus, SectionResult, Threshold

__all__ = [
    "BuildingLocation",
    "BuildingUse",
    "CheckOutcome",
    "ComplianceState",
    "ComplianceStatus",
    "EvacuationInput",
    "ExteriorSpreadInput",
    "FireBrigadeAccessInput",
    "InteriorSpreadInput",
    "LoadLevel",
    "MaterialClass",
    "ProjectContext",
    "ProtectionSystem",
    "ProtectionSystemsInput",
    "ReportEntry",
    "ReportModel",
    "RiskLevel",
    "SectionId",
    "SectionInput",
    "SectionResult",
    "SectorLocation",
    "SpecialRisk",
    "StructuralResistanceInput",
    "StructureType",
    "Threshold",
]
