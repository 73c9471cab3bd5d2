"""
Tests for upstream record validation.
"""
from decimal import Decimal

import pytest

from sitetrack.domain.entities import (
    CrewEntry,
    DailyLaborReport,
    ExecutionCost,
    Payment,
    Site,
)
from sitetrack.domain.exceptions import InvariantViolationError
from sitetrack.domain.services import (
    RecordValidationService,
    assert_labor_report_consistent,
    validate_records,
)


class TestLaborReportInvariant:

    def test_consistent_report(self):
        report = DailyLaborReport.from_crew_entries("r1", "s1", [CrewEntry("Carpenter", 2, 200000)])
        assert_labor_report_consistent(report)

    def test_report_without_entries_is_not_checked(self):
        assert_labor_report_consistent(DailyLaborReport(id="r1", site_id="s1", labor_cost=123))

    def test_inconsistent_report(self):
        report = DailyLaborReport(
            id="r1", site_id="s1", labor_cost=500000,
            crew_entries=[CrewEntry("Carpenter", 2, 200000)],
        )
        with pytest.raises(InvariantViolationError) as exc:
            assert_labor_report_consistent(report)
        assert exc.value.expected == "400000"
        assert exc.value.actual == "500000"
        assert exc.value.code == "INVARIANT_VIOLATION"


class TestRecordValidationService:

    def test_clean_dataset(self, sites, labor_reports, execution_costs, payments):
        is_valid, errors = validate_records(sites, labor_reports, execution_costs, payments)
        assert is_valid is True
        assert errors == []

    def test_orphans(self, sites):
        service = RecordValidationService(sites)
        errors = service.find_orphans("Execution cost", [
            ExecutionCost(id="c9", site_id="nowhere", category="OTHER", amount=1),
        ])
        assert errors == ["Execution cost c9 references unknown site 'nowhere'"]

    def test_negative_amounts(self, sites):
        is_valid, errors = validate_records(
            sites,
            labor_reports=[DailyLaborReport(id="r9", site_id="s1", labor_cost=-10)],
            execution_costs=[ExecutionCost(id="c9", site_id="s1", category="MATERIAL", amount=-5)],
            payments=[Payment(id="p9", site_id="s1", amount=-1)],
        )
        assert is_valid is False
        assert len(errors) == 3
        assert any("r9" in e for e in errors)
        assert any("c9" in e for e in errors)
        assert any("p9" in e for e in errors)

    def test_unrecognized_category(self, sites):
        service = RecordValidationService(sites)
        errors = service.check_execution_costs([
            ExecutionCost(id="c9", site_id="s1", category="LABOR", amount=Decimal("10")),
        ])
        assert len(errors) == 1
        assert "unrecognized category" in errors[0]

    def test_miscased_category_is_reported(self, sites):
        is_valid, errors = validate_records(sites, execution_costs=[
            ExecutionCost(id="c9", site_id="s1", category="material", amount=Decimal("30")),
        ])
        assert is_valid is False
        assert errors == ["Execution cost c9 has unrecognized category 'material'"]

    def test_non_positive_budget(self):
        service = RecordValidationService([Site(id="s0", budget_amount=0)])
        assert service.check_site_budgets() == ["Site s0 has non-positive budget_amount 0"]

    def test_inconsistent_labor_report_is_reported(self, sites):
        report = DailyLaborReport(
            id="r9", site_id="s1", labor_cost=1,
            crew_entries=[CrewEntry("Helper", 1, 150000)],
        )
        is_valid, errors = RecordValidationService(sites).validate(labor_reports=[report])
        assert not is_valid
        assert "labor_cost of report r9" in errors[0]

    def test_findings_are_logged(self, sites, caplog):
        with caplog.at_level("WARNING"):
            validate_records(sites, payments=[Payment(id="p9", site_id="zz", amount=1)])
        assert "references unknown site 'zz'" in caplog.text
