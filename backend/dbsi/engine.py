"""Section dispatch for the DB-SI compliance calculator.

The :class:`ComplianceCalculator` owns one evaluator per section and routes
each request to it. It holds no mutable state: every call is a pure
function of the project context and the section input, so repeated calls
with the same arguments produce identical results.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dbsi.exceptions import UnknownSectionError
from dbsi.models.enums import SectionId

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dbsi.models.inputs import SectionInput
    from dbsi.models.project import ProjectContext
    from dbsi.models.result import SectionResult
    from dbsi.rules import SectionEvaluator

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class ComplianceCalculator:
    """Evaluates DB-SI sections for a project.

    Args:
        evaluators: One evaluator per section. A later evaluator for the
            same section replaces an earlier one.

    Example::

        from dbsi import create_default_calculator

        calculator = create_default_calculator()
        result = calculator.evaluate("si1", context, {"compartmentArea": "2000", ...})
    """

    def __init__(self, evaluators: Iterable[SectionEvaluator[Any, Any]]) -> None:
        self._evaluators: dict[SectionId, SectionEvaluator[Any, Any]] = {
            evaluator.section_id: evaluator for evaluator in evaluators
        }

    @property
    def sections(self) -> list[SectionId]:
        return sorted(self._evaluators, key=list(SectionId).index)

    def evaluator(self, section_id: SectionId | str) -> SectionEvaluator[Any, Any]:
        """Return the evaluator registered for *section_id*.

        Raises:
            UnknownSectionError: If no evaluator handles that section.
        """
        try:
            return self._evaluators[SectionId(str(section_id).lower())]
        except (ValueError, KeyError) as exc:
            raise UnknownSectionError(str(section_id)) from exc

    def evaluate(
        self,
        section_id: SectionId | str,
        context: ProjectContext,
        section_input: SectionInput | dict[str, Any],
    ) -> SectionResult:
        """Evaluate one section.

        Raises:
            UnknownSectionError: If *section_id* is not registered.
            InputValidationError: If the section input is incomplete or invalid.
        """
        evaluator = self.evaluator(section_id)
        logger.debug("Evaluating %s for project %r", evaluator.section_id.value, context.project_name)
        return evaluator.evaluate(context, section_input)
