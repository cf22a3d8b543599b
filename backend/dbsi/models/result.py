"""Section evaluation output models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dbsi.models.enums import ComplianceState, SectionId

ThresholdValue = bool | int | float | str


class ComplianceStatus(BaseModel):
    """Tagged compliance outcome.

    Most sections report a plain pass/fail. Sections that measure coverage
    (protection installations) report a percentage instead, which is a
    pass only at 100%.
    """

    model_config = ConfigDict(frozen=True)

    state: ComplianceState
    percent: float | None = Field(default=None, ge=0, le=100)

    @classmethod
    def of(cls, passed: bool) -> ComplianceStatus:
        return cls(state=ComplianceState.PASS if passed else ComplianceState.FAIL)

    @classmethod
    def from_percent(cls, percent: float) -> ComplianceStatus:
        state = ComplianceState.PASS if percent >= 100 else ComplianceState.PARTIAL
        return cls(state=state, percent=percent)

    @classmethod
    def not_evaluated(cls) -> ComplianceStatus:
        return cls(state=ComplianceState.NOT_EVALUATED)

    @property
    def is_compliant(self) -> bool | None:
        """True/False for evaluated sections, None when not evaluated."""
        if self.state == ComplianceState.NOT_EVALUATED:
            return None
        return self.state == ComplianceState.PASS

    @property
    def label(self) -> str:
        if self.state == ComplianceState.PASS:
            return "COMPLIANT"
        if self.state == ComplianceState.FAIL:
            return "NON-COMPLIANT"
        if self.state == ComplianceState.PARTIAL:
            return f"PARTIAL ({self.percent:.0f}%)"
        return "NOT EVALUATED"


class Threshold(BaseModel):
    """A derived value shown next to the verdict (limit, rating, count)."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    value: ThresholdValue
    unit: str | None = None

    @property
    def display(self) -> str:
        from dbsi.formatting import format_value

        return format_value(self.value, self.unit)


class CheckOutcome(BaseModel):
    """Record of one comparison performed by a section."""

    model_config = ConfigDict(frozen=True)

    key: str
    actual: float
    comparison: str
    limit: float
    passed: bool


class SectionResult(BaseModel):
    """Result of evaluating one section.

    Only produced by a section evaluator; never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    section_id: SectionId
    title: str
    status: ComplianceStatus
    thresholds: list[Threshold] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    checks: list[CheckOutcome] = Field(default_factory=list)

    @property
    def compliance(self) -> bool | None:
        return self.status.is_compliant

    @property
    def failed_checks(self) -> list[str]:
        return [c.key for c in self.checks if not c.passed]

    def value(self, key: str) -> ThresholdValue:
        """Return the threshold value stored under *key*.

        Raises:
            KeyError: If the section did not compute that threshold.
        """
        for threshold in self.thresholds:
            if threshold.key == key:
                return threshold.value
        raise KeyError(key)

    def calculations(self) -> list[tuple[str, str]]:
        """(label, formatted value) pairs in display order."""
        return [(t.label, t.display) for t in self.thresholds]

    def to_export_dict(self) -> dict[str, Any]:
        return {
            "section_id": self.section_id.value,
            "title": self.title,
            "compliance": self.compliance,
            "status": self.status.label,
            "calculations": [
                {"label": label, "value": value} for label, value in self.calculations()
            ],
            "recommendations": list(self.recommendations),
        }
