"""
Remote Row Adapter - snake_case rows from the hosted database.

Row shapes follow the `sites`, `daily_reports` (with nested
`crew_entries`), `execution_costs` and `payments` tables.
"""
from typing import Any, Mapping

from sitetrack.domain.entities import (
    CrewEntry,
    DailyLaborReport,
    ExecutionCost,
    Payment,
    PaymentType,
    Site,
    SiteCalculation,
    SiteStatus,
)
from .base_adapter import RecordAdapter


class RemoteRowAdapter(RecordAdapter):
    """Adapter for snake_case data-store rows."""

    def site(self, record: Mapping[str, Any]) -> Site:
        kind = "site"
        return Site(
            id=str(self.require(record, 'id', kind)),
            name=self.text(record, 'name') or "",
            budget_amount=self.money(record, 'budget_amount', kind),
            contract_amount=self.money(record, 'contract_amount', kind, required=False),
            deadline=self.day(record, 'deadline', kind),
            status=self.convert(kind, 'status', record.get('status') or 'ACTIVE',
                                lambda v: SiteStatus(str(v).upper())),
            start_date=self.day(record, 'start_date', kind),
            client_name=self.text(record, 'client_name'),
            address=self.text(record, 'address'),
        )

    def crew_entry(self, record: Mapping[str, Any]) -> CrewEntry:
        kind = "crew entry"
        return CrewEntry(
            labor_type_name=self.text(record, 'labor_type_name') or "",
            count=self.convert(kind, 'count', self.require(record, 'count', kind), int),
            daily_rate=self.money(record, 'daily_rate', kind),
        )

    def labor_report(self, record: Mapping[str, Any]) -> DailyLaborReport:
        kind = "daily report"
        return DailyLaborReport(
            id=str(self.require(record, 'id', kind)),
            site_id=str(self.require(record, 'site_id', kind)),
            labor_cost=self.money(record, 'labor_cost', kind),
            report_date=self.day(record, 'report_date', kind),
            work_content=self.text(record, 'work_content') or "",
            crew_entries=tuple(self.crew_entry(e) for e in record.get('crew_entries') or []),
        )

    def execution_cost(self, record: Mapping[str, Any]) -> ExecutionCost:
        kind = "execution cost"
        return ExecutionCost(
            id=str(self.require(record, 'id', kind)),
            site_id=str(self.require(record, 'site_id', kind)),
            category=self.require(record, 'category', kind),
            amount=self.money(record, 'amount', kind),
            cost_date=self.day(record, 'cost_date', kind),
            description=self.text(record, 'description') or "",
            vendor_name=self.text(record, 'vendor_name'),
        )

    def payment(self, record: Mapping[str, Any]) -> Payment:
        kind = "payment"
        return Payment(
            id=str(self.require(record, 'id', kind)),
            site_id=str(self.require(record, 'site_id', kind)),
            amount=self.money(record, 'amount', kind),
            payment_type=self.convert(kind, 'payment_type', record.get('payment_type') or 'OTHER',
                                      lambda v: PaymentType(str(v).upper())),
            payment_date=self.day(record, 'payment_date', kind),
            description=self.text(record, 'description'),
        )

    def snapshot_to_record(self, calc: SiteCalculation) -> dict:
        return {
            'total_labor_cost': float(calc.total_labor_cost),
            'total_material_cost': float(calc.total_material_cost),
            'total_outsource_cost': float(calc.total_outsource_cost),
            'total_other_cost': float(calc.total_other_cost),
            'total_execution_cost': float(calc.total_execution_cost),
            'remaining_budget': float(calc.remaining_budget),
            'margin_rate': calc.margin_rate,
            'd_day': calc.days_remaining,
            'risk_level': calc.risk_level.value,
        }

    def site_with_metrics(self, site_row: Mapping[str, Any], calc: SiteCalculation) -> dict:
        """Merge a snapshot over the original site row."""
        return {**site_row, **self.snapshot_to_record(calc)}
