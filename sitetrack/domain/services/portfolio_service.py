"""
Portfolio Service - Office-level aggregation over site snapshots.

Answers "which sites are at risk?" for the office dashboard and
summarizes client payments against contract amounts.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from sitetrack.domain.entities import (
    Payment,
    PaymentType,
    RiskLevel,
    Site,
    SiteCalculation,
    SiteStatus,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True)
class PortfolioSummary:
    """Risk counts and money totals for a selection of sites."""

    site_count: int
    danger_count: int
    warning_count: int
    safe_count: int
    total_budget: Decimal
    total_execution_cost: Decimal
    total_remaining_budget: Decimal
    snapshots: List[SiteCalculation] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'site_count': self.site_count,
            'danger_count': self.danger_count,
            'warning_count': self.warning_count,
            'safe_count': self.safe_count,
            'total_budget': float(self.total_budget),
            'total_execution_cost': float(self.total_execution_cost),
            'total_remaining_budget': float(self.total_remaining_budget),
            'sites': [s.to_dict() for s in self.snapshots],
        }


@dataclass(frozen=True)
class PaymentSummary:
    """Payments received for one site against its contract amount."""

    site_id: str
    contract_amount: Decimal
    total_received: Decimal
    by_type: Dict[PaymentType, Decimal]

    @property
    def outstanding(self) -> Decimal:
        """Contract amount not yet received (negative when overpaid)."""
        return self.contract_amount - self.total_received

    def to_dict(self) -> dict:
        return {
            'site_id': self.site_id,
            'contract_amount': float(self.contract_amount),
            'total_received': float(self.total_received),
            'outstanding': float(self.outstanding),
            'by_type': {k.value: float(v) for k, v in self.by_type.items()},
        }


def sort_by_risk(snapshots: Iterable[SiteCalculation]) -> List[SiteCalculation]:
    """Order snapshots DANGER first, then WARNING, then SAFE (stable)."""
    return sorted(snapshots, key=lambda s: -s.risk_level.severity)


def summarize_portfolio(
    sites: Iterable[Site],
    snapshots: Iterable[SiteCalculation],
    statuses: Sequence[SiteStatus] = (SiteStatus.ACTIVE,),
) -> PortfolioSummary:
    """
    Summarize the snapshots of sites whose status is in `statuses`.

    Args:
        sites: Sites the snapshots were computed for
        snapshots: One snapshot per site (any order)
        statuses: Lifecycle statuses to include

    Returns:
        PortfolioSummary with risk-sorted snapshots of the selected sites
    """
    selected_ids = {s.id for s in sites if s.status in statuses}
    selected = [s for s in snapshots if s.site_id in selected_ids]

    counts = {level: 0 for level in RiskLevel}
    for snap in selected:
        counts[snap.risk_level] += 1

    summary = PortfolioSummary(
        site_count=len(selected),
        danger_count=counts[RiskLevel.DANGER],
        warning_count=counts[RiskLevel.WARNING],
        safe_count=counts[RiskLevel.SAFE],
        total_budget=sum((s.budget_amount for s in selected), ZERO),
        total_execution_cost=sum((s.total_execution_cost for s in selected), ZERO),
        total_remaining_budget=sum((s.remaining_budget for s in selected), ZERO),
        snapshots=sort_by_risk(selected),
    )
    logger.info(
        f"Portfolio: {summary.site_count} sites, "
        f"{summary.danger_count} danger, {summary.warning_count} warning"
    )
    return summary


def summarize_payments(site: Site, payments: Iterable[Payment]) -> PaymentSummary:
    """Total the payments received for a site, filtered by site id."""
    by_type: Dict[PaymentType, Decimal] = {}
    for payment in payments:
        if payment.site_id != site.id:
            continue
        by_type[payment.payment_type] = by_type.get(payment.payment_type, ZERO) + payment.amount

    return PaymentSummary(
        site_id=site.id,
        contract_amount=site.contract_amount,
        total_received=sum(by_type.values(), ZERO),
        by_type=by_type,
    )
