"""
In-Memory Adapter - camelCase objects used by the client-side models.
"""
from typing import Any, Mapping

from sitetrack.domain.entities import (
    DailyLaborReport,
    ExecutionCost,
    Payment,
    PaymentType,
    Site,
    SiteCalculation,
    SiteStatus,
)
from .base_adapter import RecordAdapter


class InMemoryAdapter(RecordAdapter):
    """Adapter for camelCase in-memory records."""

    dataset_keys = {
        'sites': 'sites',
        'labor_reports': 'dailyReports',
        'execution_costs': 'executionCosts',
        'payments': 'payments',
    }

    def site(self, record: Mapping[str, Any]) -> Site:
        kind = "site"
        return Site(
            id=str(self.require(record, 'id', kind)),
            name=self.text(record, 'name') or "",
            budget_amount=self.money(record, 'budgetAmount', kind),
            contract_amount=self.money(record, 'contractAmount', kind, required=False),
            deadline=self.day(record, 'deadline', kind),
            status=self.convert(kind, 'status', record.get('status') or 'ACTIVE',
                                lambda v: SiteStatus(str(v).upper())),
            start_date=self.day(record, 'startDate', kind),
            client_name=self.text(record, 'clientName'),
            address=self.text(record, 'address'),
        )

    def labor_report(self, record: Mapping[str, Any]) -> DailyLaborReport:
        kind = "daily report"
        return DailyLaborReport(
            id=str(self.require(record, 'id', kind)),
            site_id=str(self.require(record, 'siteId', kind)),
            labor_cost=self.money(record, 'laborCost', kind),
            report_date=self.day(record, 'date', kind),
            work_content=self.text(record, 'workContent') or "",
        )

    def execution_cost(self, record: Mapping[str, Any]) -> ExecutionCost:
        kind = "execution cost"
        return ExecutionCost(
            id=str(self.require(record, 'id', kind)),
            site_id=str(self.require(record, 'siteId', kind)),
            category=self.require(record, 'category', kind),
            amount=self.money(record, 'amount', kind),
            cost_date=self.day(record, 'date', kind),
            description=self.text(record, 'description') or "",
            vendor_name=self.text(record, 'vendorName'),
        )

    def payment(self, record: Mapping[str, Any]) -> Payment:
        kind = "payment"
        return Payment(
            id=str(self.require(record, 'id', kind)),
            site_id=str(self.require(record, 'siteId', kind)),
            amount=self.money(record, 'amount', kind),
            payment_type=self.convert(kind, 'type', record.get('type') or 'OTHER',
                                      lambda v: PaymentType(str(v).upper())),
            payment_date=self.day(record, 'date', kind),
            description=self.text(record, 'description'),
        )

    def snapshot_to_record(self, calc: SiteCalculation) -> dict:
        return {
            'siteId': calc.site_id,
            'budgetAmount': float(calc.budget_amount),
            'totalLaborCost': float(calc.total_labor_cost),
            'totalMaterialCost': float(calc.total_material_cost),
            'totalOutsourceCost': float(calc.total_outsource_cost),
            'totalOtherCost': float(calc.total_other_cost),
            'totalExecutionCost': float(calc.total_execution_cost),
            'remainingBudget': float(calc.remaining_budget),
            'marginRate': calc.margin_rate,
            'deadline': calc.deadline.isoformat() if calc.deadline else None,
            'dDay': calc.days_remaining,
            'riskLevel': calc.risk_level.value,
        }
