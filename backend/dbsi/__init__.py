"""DB-SI fire-safety compliance calculator.

Usage::

    from dbsi import ComplianceAggregator, ProjectContext, create_default_calculator

    context = ProjectContext.from_form(form_data)
    calculator = create_default_calculator()
    result = calculator.evaluate("si1", context, {"compartmentArea": "2000", "materialType": "b"})
    report = ComplianceAggregator().aggregate(context, [result])
"""

from dbsi.aggregator import ComplianceAggregator
from dbsi.engine import ComplianceCalculator
from dbsi.exceptions import (
    DbsiError,
    InputValidationError,
    ReportRenderingError,
    UnknownSectionError,
)
from dbsi.factory import create_default_calculator
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
    StructuralResistanceInput,
)
from dbsi.models.project import ProjectContext
from dbsi.models.report import ReportEntry, ReportModel
from dbsi.models.result import ComplianceStatus, SectionResult, Threshold

__all__ = [
    "BuildingLocation",
    "BuildingUse",
    "ComplianceAggregator",
    "ComplianceCalculator",
    "ComplianceState",
    "ComplianceStatus",
    "DbsiError",
    "EvacuationInput",
    "ExteriorSpreadInput",
    "FireBrigadeAccessInput",
    "InputValidationError",
    "InteriorSpreadInput",
    "LoadLevel",
    "MaterialClass",
    "ProjectContext",
    "ProtectionSystem",
    "ProtectionSystemsInput",
    "ReportEntry",
    "ReportModel",
    "ReportRenderingError",
    "RiskLevel",
    "SectionId",
    "SectionResult",
    "SectorLocation",
    "SpecialRisk",
    "StructuralResistanceInput",
    "StructureType",
    "Threshold",
    "UnknownSectionError",
    "create_default_calculator",
]
