"""
Record Validation Service - Data-quality checks on data-store records.

The metrics engine trusts its inputs. These checks are for callers that
want to surface upstream problems:
- Labor report cost equals the sum of its crew entries
- Non-negative monetary amounts
- No orphaned site references
- Only known execution cost categories
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from sitetrack.domain.entities import (
    DailyLaborReport,
    ExecutionCost,
    Payment,
    Site,
)
from sitetrack.domain.exceptions import InvariantViolationError

logger = logging.getLogger(__name__)


def assert_labor_report_consistent(report: DailyLaborReport) -> None:
    """
    Check that a report's labor_cost matches its crew entries.

    Reports without crew entries carry only the precomputed total and
    are not checked.

    Raises:
        InvariantViolationError: If the totals differ
    """
    if not report.crew_entries:
        return
    expected = report.crew_entries_total()
    if report.labor_cost != expected:
        raise InvariantViolationError(
            f"labor_cost of report {report.id}",
            expected=str(expected),
            actual=str(report.labor_cost),
        )


class RecordValidationService:
    """
    Validate a dataset of sites and their records.

    Each check returns a list of human-readable findings; an empty list
    means the check passed.
    """

    def __init__(self, sites: Iterable[Site]):
        self.sites = list(sites)
        self.site_ids = {s.id for s in self.sites}

    # =========================================================================
    # Individual checks
    # =========================================================================

    def check_labor_reports(self, reports: Iterable[DailyLaborReport]) -> List[str]:
        errors = []
        for report in reports:
            try:
                assert_labor_report_consistent(report)
            except InvariantViolationError as e:
                errors.append(e.message)
            if report.labor_cost < 0:
                errors.append(f"Labor report {report.id} has negative labor_cost {report.labor_cost}")
        return errors

    def check_execution_costs(self, costs: Iterable[ExecutionCost]) -> List[str]:
        errors = []
        for cost in costs:
            if cost.amount < 0:
                errors.append(f"Execution cost {cost.id} has negative amount {cost.amount}")
            if not cost.is_categorized:
                errors.append(
                    f"Execution cost {cost.id} has unrecognized category {cost.category!r}"
                )
        return errors

    def check_payments(self, payments: Iterable[Payment]) -> List[str]:
        return [
            f"Payment {p.id} has negative amount {p.amount}"
            for p in payments
            if p.amount < 0
        ]

    def check_site_budgets(self) -> List[str]:
        return [
            f"Site {s.id} has non-positive budget_amount {s.budget_amount}"
            for s in self.sites
            if s.budget_amount <= 0
        ]

    def find_orphans(self, kind: str, records: Iterable) -> List[str]:
        """Report records whose site_id matches no known site."""
        return [
            f"{kind} {r.id} references unknown site '{r.site_id}'"
            for r in records
            if r.site_id not in self.site_ids
        ]

    # =========================================================================
    # Full validation
    # =========================================================================

    def validate(
        self,
        labor_reports: Iterable[DailyLaborReport] = (),
        execution_costs: Iterable[ExecutionCost] = (),
        payments: Iterable[Payment] = (),
    ) -> Tuple[bool, List[str]]:
        """
        Run every check over the dataset.

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        reports = list(labor_reports)
        costs = list(execution_costs)
        pays = list(payments)

        errors: List[str] = []
        errors.extend(self.check_site_budgets())
        errors.extend(self.check_labor_reports(reports))
        errors.extend(self.check_execution_costs(costs))
        errors.extend(self.check_payments(pays))
        errors.extend(self.find_orphans("Labor report", reports))
        errors.extend(self.find_orphans("Execution cost", costs))
        errors.extend(self.find_orphans("Payment", pays))

        for message in errors:
            logger.warning(message)

        return len(errors) == 0, errors


def validate_records(
    sites: Iterable[Site],
    labor_reports: Iterable[DailyLaborReport] = (),
    execution_costs: Iterable[ExecutionCost] = (),
    payments: Iterable[Payment] = (),
) -> Tuple[bool, List[str]]:
    """Convenience wrapper around RecordValidationService.validate."""
    return RecordValidationService(sites).validate(labor_reports, execution_costs, payments)
