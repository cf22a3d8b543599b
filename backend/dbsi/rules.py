"""Shared rule-evaluation machinery used by every section evaluator.

Every section follows the same shape:

1. **Resolve** — parse the raw form values, falling back to the project
   context where the section allows it. All offending fields are collected
   and reported together as an :class:`~dbsi.exceptions.InputValidationError`.
2. **Look up** — pick thresholds from the section's static tables, keyed by
   building use, height band, risk level or sector location.
3. **Compare** — run each :class:`Check` with its own comparison operator.
   Operators are declared per check and never normalised across sections.
4. **Recommend** — failed checks contribute their advice text; sections may
   add free advisories that do not affect the verdict.
5. **Assemble** — build an immutable :class:`~dbsi.models.result.SectionResult`.
"""

from __future__ import annotations

import logging
import math
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import ValidationError

from dbsi.exceptions import InputValidationError
from dbsi.models.enums import SectionId
from dbsi.models.inputs import SectionInput
from dbsi.models.project import ProjectContext
from dbsi.models.validation import invalid_fields
from dbsi.models.result import (
    CheckOutcome,
    ComplianceStatus,
    SectionResult,
    Threshold,
    ThresholdValue,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=StrEnum)
InputT = TypeVar("InputT", bound=SectionInput)
ValuesT = TypeVar("ValuesT")


class Comparison(StrEnum):
    """Comparison a check applies as ``actual <op> limit``."""

    AT_MOST = "<="
    AT_LEAST = ">="
    BELOW = "<"
    ABOVE = ">"

    def holds(self, actual: float, limit: float) -> bool:
        return _OPERATORS[self](actual, limit)


_OPERATORS: dict[Comparison, Callable[[float, float], bool]] = {
    Comparison.AT_MOST: operator.le,
    Comparison.AT_LEAST: operator.ge,
    Comparison.BELOW: operator.lt,
    Comparison.ABOVE: operator.gt,
}


class BandTable(Generic[T]):
    """Maps a value onto the first band whose upper bound contains it.

    Upper bounds are inclusive, so with bands ``(15, a), (28, b), (inf, c)``
    a height of exactly 15 resolves to ``a``.

    Example::

        road_width = BandTable((15, 3.5), (28, 6.0), (math.inf, 8.0))
        road_width.lookup(15)  # 3.5
    """

    def __init__(self, *bands: tuple[float, T]) -> None:
        if not bands:
            msg = "BandTable needs at least one band"
            raise ValueError(msg)
        uppers = [upper for upper, _ in bands]
        if uppers != sorted(uppers) or uppers[-1] != math.inf:
            msg = "Band upper bounds must be ascending and end with math.inf"
            raise ValueError(msg)
        self._bands = bands

    def lookup(self, value: float) -> T:
        for upper, result in self._bands:
            if value <= upper:
                return result
        # Unreachable: the last band is open-ended.
        return self._bands[-1][1]


@dataclass(frozen=True)
class Check:
    """One comparison of an actual value against a derived limit."""

    key: str
    actual: float
    comparison: Comparison
    limit: float
    advice: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.comparison.holds(self.actual, self.limit)

    @classmethod
    def requires(cls, key: str, present: bool, needed: bool, *advice: str) -> Check:
        """Check that a feature is present whenever it is needed."""
        return cls(key, float(present), Comparison.AT_LEAST, float(needed), advice)

    def outcome(self) -> CheckOutcome:
        return CheckOutcome(
            key=self.key,
            actual=self.actual,
            comparison=self.comparison.value,
            limit=self.limit,
            passed=self.passed,
        )


@dataclass
class Assessment:
    """Accumulates thresholds, checks and advice in evaluation order."""

    thresholds: list[Threshold] = field(default_factory=list)
    checks: list[Check] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    status: ComplianceStatus | None = None

    def threshold(
        self, key: str, label: str, value: ThresholdValue, unit: str | None = None,
    ) -> None:
        self.thresholds.append(Threshold(key=key, label=label, value=value, unit=unit))

    def require(self, check: Check) -> bool:
        """Record *check*; a failure appends its advice. Returns the result."""
        self.checks.append(check)
        if not check.passed:
            self.recommendations.extend(check.advice)
        return check.passed

    def advise(self, *texts: str) -> None:
        """Add advisories that do not affect compliance."""
        self.recommendations.extend(texts)

    @property
    def all_passed(self) -> bool:
        return all(check.passed for check in self.checks)


# ---------------------------------------------------------------------------
# Input resolution
# ---------------------------------------------------------------------------


def parse_positive(raw: Any) -> float | None:
    """Parse a raw form value into a positive finite number.

    Returns None for blanks, unparsable text, booleans and values <= 0.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
    elif isinstance(raw, int | float):
        value = float(raw)
    else:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


class FieldResolver:
    """Resolves raw section fields into typed values.

    Each accessor records the resolved value under the field name, or marks
    the field as invalid. :meth:`build` raises once with every invalid field.
    """

    def __init__(self, section_input: SectionInput, section: SectionId) -> None:
        self._input = section_input
        self._section = section
        self._values: dict[str, Any] = {}
        self._errors: set[str] = set()

    def _raw(self, name: str) -> Any:
        return getattr(self._input, name)

    def number(self, name: str, fallback: float | None = None) -> None:
        """Required positive number; invalid values fall back to *fallback*."""
        value = parse_positive(self._raw(name))
        if value is None:
            value = parse_positive(fallback)
        if value is None:
            self._errors.add(name)
        self._values[name] = value

    def optional_number(self, name: str) -> None:
        """Optional positive number; anything invalid is treated as absent."""
        self._values[name] = parse_positive(self._raw(name))

    def choice(
        self,
        name: str,
        enum: type[E],
        accepted: Collection[E] | None = None,
        fallback: E | None = None,
    ) -> None:
        """Enum value, required unless a *fallback* is provided.

        A blank value takes the fallback; any other unrecognised or
        unaccepted value is rejected rather than defaulted.
        """
        raw = self._raw(name)
        text = raw.strip().lower() if isinstance(raw, str) else raw
        value: E | None
        if not text:
            value = fallback
        else:
            try:
                value = enum(text)
            except ValueError:
                value = None
        if value is None or (accepted is not None and value not in accepted):
            self._errors.add(name)
        self._values[name] = value

    def optional_choice(self, name: str, enum: type[E]) -> None:
        """Enum value that may be left blank; non-blank values must be valid."""
        raw = self._raw(name)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            self._values[name] = None
            return
        self.choice(name, enum)

    def choices(self, name: str, enum: type[E]) -> None:
        """Set of enum values; any unrecognised member invalidates the field."""
        members: set[E] = set()
        for raw in self._raw(name):
            try:
                members.add(enum(str(raw).strip().lower()))
            except ValueError:
                self._errors.add(name)
        self._values[name] = frozenset(members)

    def flag(self, name: str) -> None:
        self._values[name] = bool(self._raw(name))

    def build(self, factory: Callable[..., ValuesT]) -> ValuesT:
        if self._errors:
            raise InputValidationError(self._errors, section=self._section.value)
        return factory(**self._values)


# ---------------------------------------------------------------------------
# Evaluator base class
# ---------------------------------------------------------------------------


class SectionEvaluator(ABC, Generic[InputT, ValuesT]):
    """Base class for the six section evaluators.

    Subclasses declare the section identity and input model, and implement
    :meth:`resolve` (raw input → typed values) and :meth:`assess` (typed
    values → thresholds, checks and advice).

    Args:
        fill_missing_advice: When a section ends non-compliant without any
            recommendation text, append one generic advisory naming the
            failed checks.
    """

    section_id: ClassVar[SectionId]
    title: ClassVar[str]
    input_model: ClassVar[type[SectionInput]]
    accepted_uses: ClassVar[frozenset[Any]] = frozenset()

    def __init__(self, *, fill_missing_advice: bool = True) -> None:
        self._fill_missing_advice = fill_missing_advice

    def evaluate(
        self,
        context: ProjectContext,
        section_input: InputT | dict[str, Any],
    ) -> SectionResult:
        """Evaluate the section for *context* and *section_input*.

        Raises:
            InputValidationError: If required fields are missing or invalid.
                No partial result is produced.
        """
        if not isinstance(section_input, self.input_model):
            try:
                section_input = self.input_model.model_validate(section_input)
            except ValidationError as exc:
                raise InputValidationError(
                    invalid_fields(exc, self.input_model), section=self.section_id.value,
                ) from exc

        values = self.resolve(
            FieldResolver(section_input, self.section_id), context,
        )
        assessment = Assessment()
        self.assess(values, assessment)

        status = assessment.status or ComplianceStatus.of(assessment.all_passed)
        recommendations = list(assessment.recommendations)
        if (
            self._fill_missing_advice
            and status.is_compliant is False
            and not recommendations
        ):
            failed = ", ".join(c.key for c in assessment.checks if not c.passed)
            recommendations.append(f"Review the failed checks: {failed}")

        logger.debug(
            "%s evaluated: %s (%d checks, %d recommendations)",
            self.section_id.value,
            status.label,
            len(assessment.checks),
            len(recommendations),
        )

        return SectionResult(
            section_id=self.section_id,
            title=self.title,
            status=status,
            thresholds=assessment.thresholds,
            recommendations=recommendations,
            checks=[check.outcome() for check in assessment.checks],
        )

    @abstractmethod
    def resolve(self, fields: FieldResolver, context: ProjectContext) -> ValuesT:
        """Resolve raw fields into the section's typed values."""

    @abstractmethod
    def assess(self, values: ValuesT, assessment: Assessment) -> None:
        """Fill *assessment* with thresholds, checks and advice."""


def join_labels(labels: Iterable[str]) -> str:
    items = list(labels)
    return ", ".join(items) if items else "-"
