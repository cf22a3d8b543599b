"""Factory functions for creating pre-configured calculator instances."""

from __future__ import annotations

from dbsi.engine import ComplianceCalculator
from dbsi.sections import (
    EvacuationEvaluator,
    ExteriorSpreadEvaluator,
    FireBrigadeAccessEvaluator,
    InteriorSpreadEvaluator,
    ProtectionSystemsEvaluator,
    StructuralResistanceEvaluator,
)


def create_default_calculator(*, fill_missing_advice: bool = True) -> ComplianceCalculator:
    """Create a ComplianceCalculator wired up with all six section evaluators.

    Args:
        fill_missing_advice: Append a generic advisory to non-compliant
            sections whose failed checks produced no recommendation text.
            Pass False to keep those sections silent.

    Example::

        from dbsi import create_default_calculator

        calculator = create_default_calculator()
        result = calculator.evaluate("si3", context, section_input)
    """
    evaluator_types = (
        InteriorSpreadEvaluator,
        ExteriorSpreadEvaluator,
        EvacuationEvaluator,
        ProtectionSystemsEvaluator,
        FireBrigadeAccessEvaluator,
        StructuralResistanceEvaluator,
    )
    return ComplianceCalculator(
        evaluator_type(fill_missing_advice=fill_missing_advice)
        for evaluator_type in evaluator_types
    )
