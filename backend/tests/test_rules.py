"""Tests for the shared rule machinery — band tables, checks, field resolution."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pytest

from dbsi.exceptions import InputValidationError
from dbsi.models.enums import BuildingLocation, BuildingUse, RiskLevel, SectionId
from dbsi.models.inputs import RawNumber, SectionInput
from dbsi.models.project import ProjectContext
from dbsi.rules import (
    Assessment,
    BandTable,
    Check,
    Comparison,
    FieldResolver,
    SectionEvaluator,
    join_labels,
    parse_positive,
)

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


def _context() -> ProjectContext:
    return ProjectContext(
        building_use=BuildingUse.OFFICE,
        total_surface=800,
        evacuation_height=12,
        floors=3,
        max_occupancy=80,
        building_location=BuildingLocation.URBAN,
    )


class _LimitInput(SectionInput):
    value: RawNumber = None
    limit: RawNumber = None


@dataclass(frozen=True)
class _LimitValues:
    value: float
    limit: float


class _SilentLimitEvaluator(SectionEvaluator[_LimitInput, _LimitValues]):
    """A section whose failing check carries no advice text."""

    section_id = SectionId.SI1
    title = "Limit"
    input_model = _LimitInput

    def resolve(self, fields: FieldResolver, context: ProjectContext) -> _LimitValues:
        fields.number("value")
        fields.number("limit", fallback=context.evacuation_height)
        return fields.build(_LimitValues)

    def assess(self, values: _LimitValues, assessment: Assessment) -> None:
        assessment.require(Check("value", values.value, Comparison.AT_MOST, values.limit))
        assessment.threshold("limit", "Limit", values.limit, "m")


# ---------------------------------------------------------------------------
# BandTable
# ---------------------------------------------------------------------------


class TestBandTable:
    def test_upper_bounds_are_inclusive(self) -> None:
        table = BandTable((15, "a"), (28, "b"), (math.inf, "c"))
        assert table.lookup(15) == "a"
        assert table.lookup(15.0001) == "b"
        assert table.lookup(28) == "b"
        assert table.lookup(1000) == "c"

    def test_rejects_empty_table(self) -> None:
        with pytest.raises(ValueError, match="at least one band"):
            BandTable()

    def test_rejects_closed_table(self) -> None:
        with pytest.raises(ValueError, match="math.inf"):
            BandTable((15, "a"), (28, "b"))

    def test_rejects_unsorted_bounds(self) -> None:
        with pytest.raises(ValueError):
            BandTable((28, "b"), (15, "a"), (math.inf, "c"))


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


class TestComparison:
    @pytest.mark.parametrize(
        ("comparison", "actual", "limit", "expected"),
        [
            (Comparison.AT_MOST, 10, 10, True),
            (Comparison.AT_MOST, 10.1, 10, False),
            (Comparison.AT_LEAST, 10, 10, True),
            (Comparison.AT_LEAST, 9.9, 10, False),
            (Comparison.BELOW, 10, 10, False),
            (Comparison.ABOVE, 10.1, 10, True),
        ],
    )
    def test_holds(
        self, comparison: Comparison, actual: float, limit: float, expected: bool,
    ) -> None:
        assert comparison.holds(actual, limit) is expected


class TestCheck:
    def test_requires_passes_when_not_needed(self) -> None:
        assert Check.requires("lift", False, False, "Install a lift").passed is True

    def test_requires_fails_when_needed_and_absent(self) -> None:
        check = Check.requires("lift", False, True, "Install a lift")
        assert check.passed is False
        assert check.outcome().comparison == ">="

    def test_assessment_collects_advice_of_failed_checks_only(self) -> None:
        assessment = Assessment()
        assessment.require(Check("a", 5, Comparison.AT_MOST, 10, ("never shown",)))
        assessment.require(Check("b", 15, Comparison.AT_MOST, 10, ("first", "second")))
        assessment.advise("advisory")
        assert assessment.recommendations == ["first", "second", "advisory"]
        assert assessment.all_passed is False


# ---------------------------------------------------------------------------
# Field resolution
# ---------------------------------------------------------------------------


class TestParsePositive:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("12.5", 12.5), (" 3 ", 3.0), (7, 7.0), (0.25, 0.25)],
    )
    def test_valid(self, raw: object, expected: float) -> None:
        assert parse_positive(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  ", "abc", "0", -1, 0, "inf", "nan", True, []])
    def test_invalid(self, raw: object) -> None:
        assert parse_positive(raw) is None


class TestFieldResolver:
    def test_invalid_number_takes_fallback(self) -> None:
        fields = FieldResolver(_LimitInput(value="x", limit="-2"), SectionId.SI1)
        fields.number("value", fallback=5)
        fields.number("limit", fallback=None)
        with pytest.raises(InputValidationError) as exc_info:
            fields.build(_LimitValues)
        assert exc_info.value.fields == ("limit",)

    def test_choice_is_case_insensitive(self) -> None:
        class _RiskInput(SectionInput):
            risk: str | None = None

        fields = FieldResolver(_RiskInput(risk=" HIGH "), SectionId.SI4)
        fields.choice("risk", RiskLevel)

        @dataclass(frozen=True)
        class _RiskValues:
            risk: RiskLevel

        assert fields.build(_RiskValues).risk == RiskLevel.HIGH


# ---------------------------------------------------------------------------
# Evaluator base class
# ---------------------------------------------------------------------------


class TestSectionEvaluator:
    def test_generic_advice_for_silent_failures(self) -> None:
        result = _SilentLimitEvaluator().evaluate(_context(), {"value": 20, "limit": 10})
        assert result.compliance is False
        assert result.recommendations == ["Review the failed checks: value"]

    def test_generic_advice_can_be_disabled(self) -> None:
        evaluator = _SilentLimitEvaluator(fill_missing_advice=False)
        result = evaluator.evaluate(_context(), {"value": 20, "limit": 10})
        assert result.compliance is False
        assert result.recommendations == []

    def test_passing_section_gets_no_advice(self) -> None:
        result = _SilentLimitEvaluator().evaluate(_context(), {"value": 5})
        assert result.compliance is True
        assert result.recommendations == []
        assert result.value("limit") == 12

    def test_result_records_checks(self) -> None:
        result = _SilentLimitEvaluator().evaluate(_context(), {"value": 20, "limit": 10})
        assert [c.model_dump() for c in result.checks] == [
            {"key": "value", "actual": 20.0, "comparison": "<=", "limit": 10.0, "passed": False},
        ]

    def test_unknown_threshold_key(self) -> None:
        result = _SilentLimitEvaluator().evaluate(_context(), {"value": 5})
        with pytest.raises(KeyError):
            result.value("nope")


def test_join_labels() -> None:
    assert join_labels(["A", "B"]) == "A, B"
    assert join_labels(iter([])) == "-"
