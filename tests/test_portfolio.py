"""
Tests for portfolio and payment summaries.
"""
from decimal import Decimal

from sitetrack.domain.entities import PaymentType, RiskLevel, SiteStatus
from sitetrack.domain.services import (
    compute_all_site_snapshots,
    sort_by_risk,
    summarize_payments,
    summarize_portfolio,
)


class TestPortfolioSummary:

    def test_active_sites_only(self, sites, labor_reports, execution_costs, today):
        snapshots = compute_all_site_snapshots(sites, labor_reports, execution_costs, today)
        summary = summarize_portfolio(sites, snapshots)

        assert summary.site_count == 2
        assert summary.danger_count == 1
        assert summary.warning_count == 0
        assert summary.safe_count == 1
        assert summary.total_budget == Decimal("120000000")
        assert summary.total_execution_cost == Decimal("32400000")
        assert summary.total_remaining_budget == Decimal("87600000")
        assert [s.site_id for s in summary.snapshots] == ["s2", "s1"]

    def test_selected_statuses(self, sites, labor_reports, execution_costs, today):
        snapshots = compute_all_site_snapshots(sites, labor_reports, execution_costs, today)
        summary = summarize_portfolio(
            sites, snapshots, statuses=(SiteStatus.ACTIVE, SiteStatus.COMPLETED)
        )

        assert summary.site_count == 3
        assert summary.warning_count == 1
        assert [s.site_id for s in summary.snapshots] == ["s2", "s3", "s1"]

    def test_no_matching_sites(self, sites, labor_reports, execution_costs, today):
        snapshots = compute_all_site_snapshots(sites, labor_reports, execution_costs, today)
        summary = summarize_portfolio(sites, snapshots, statuses=(SiteStatus.PAUSED,))

        assert summary.site_count == 0
        assert summary.total_budget == Decimal("0")
        assert summary.snapshots == []

    def test_to_dict(self, sites, labor_reports, execution_costs, today):
        snapshots = compute_all_site_snapshots(sites, labor_reports, execution_costs, today)
        data = summarize_portfolio(sites, snapshots).to_dict()

        assert data['danger_count'] == 1
        assert data['sites'][0]['site_id'] == "s2"
        assert data['sites'][0]['risk_level'] == "DANGER"


class TestSortByRisk:

    def test_stable_within_level(self, sites, labor_reports, execution_costs, today):
        snapshots = compute_all_site_snapshots(
            [sites[0], sites[1], sites[0]], labor_reports, execution_costs, today
        )
        ordered = sort_by_risk(snapshots)
        assert [s.risk_level for s in ordered] == [RiskLevel.DANGER, RiskLevel.SAFE, RiskLevel.SAFE]
        assert ordered[1] is snapshots[0]
        assert ordered[2] is snapshots[2]


class TestPaymentSummary:

    def test_totals_by_type(self, sites, payments):
        summary = summarize_payments(sites[0], payments)

        assert summary.total_received == Decimal("75000000")
        assert summary.by_type == {
            PaymentType.DEPOSIT: Decimal("45000000"),
            PaymentType.INTERIM: Decimal("30000000"),
        }
        assert summary.outstanding == Decimal("55000000")

    def test_fully_paid_and_unpaid_sites(self, sites, payments):
        summary = summarize_payments(sites[1], payments)
        assert summary.outstanding == Decimal("0")

        summary = summarize_payments(sites[2], payments)
        assert summary.total_received == Decimal("0")
        assert summary.outstanding == Decimal("120000000")

    def test_to_dict(self, sites, payments):
        data = summarize_payments(sites[0], payments).to_dict()
        assert data['by_type'] == {'DEPOSIT': 45000000.0, 'INTERIM': 30000000.0}
        assert data['outstanding'] == 55000000.0
