"""Section evaluators, one per DB-SI section."""

from dbsi.sections.evacuation import EvacuationEvaluator
from dbsi.sections.exterior import ExteriorSpreadEvaluator
from dbsi.sections.installations import ProtectionSystemsEvaluator
from dbsi.sections.interior import InteriorSpreadEvaluator
from dbsi.sections.intervention import FireBrigadeAccessEvaluator
from dbsi.sections.structure import StructuralResistanceEvaluator

__all__ = [
    "EvacuationEvaluator",
    "ExteriorSpreadEvaluator",
    "FireBrigadeAccessEvaluator",
    "InteriorSpreadEvaluator",
    "ProtectionSystemsEvaluator",
    "StructuralResistanceEvaluator",
]
