"""
Site Metrics Engine - Budget consumption and risk classification per site.

Pure functions over canonical entities:
- Days remaining until a site's deadline
- Three-tier risk classification (financial axis first, then schedule)
- Per-site snapshot: cost breakdown, remaining budget, margin rate
- Batch snapshots over a collection of sites

"today" is an explicit argument; when omitted the clock is read once per call.
"""
import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from sitetrack.domain.entities import (
    CostCategory,
    DailyLaborReport,
    ExecutionCost,
    RiskLevel,
    RiskThresholds,
    DEFAULT_THRESHOLDS,
    Site,
    SiteCalculation,
)
from sitetrack.domain.entities.base import as_date

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _resolve_today(today) -> date:
    resolved = as_date(today)
    return resolved if resolved is not None else date.today()


def calculate_days_remaining(deadline, today=None) -> Optional[int]:
    """
    Signed number of calendar days until a deadline.

    Both dates are reduced to their calendar day before differencing, so the
    time of day never shifts the result.

    Args:
        deadline: date, datetime or ISO date string; None for no deadline
        today: Reference day (defaults to the current local date)

    Returns:
        Positive = days left, 0 = due today, negative = days overdue,
        None when there is no deadline
    """
    deadline_day = as_date(deadline)
    if deadline_day is None:
        return None
    return (deadline_day - _resolve_today(today)).days


def classify_risk(
    margin_rate: float,
    days_remaining: Optional[int] = None,
    thresholds: Optional[RiskThresholds] = None,
) -> RiskLevel:
    """
    Classify a site's risk from its margin rate and deadline distance.

    The financial axis is checked first; the schedule axis is only consulted
    when the margin alone would be SAFE and a deadline exists.
    """
    t = thresholds or DEFAULT_THRESHOLDS

    if margin_rate < t.danger_margin:
        return RiskLevel.DANGER
    if margin_rate < t.warning_margin:
        return RiskLevel.WARNING

    if days_remaining is not None:
        if days_remaining < 0:
            return RiskLevel.DANGER
        if days_remaining < t.deadline_warning_days:
            return RiskLevel.WARNING

    return RiskLevel.SAFE


def _sum_execution_costs(site_id: str, execution_costs: Iterable[ExecutionCost]) -> Dict[CostCategory, Decimal]:
    totals: Dict[CostCategory, Decimal] = defaultdict(lambda: ZERO)
    for cost in execution_costs:
        if cost.site_id != site_id:
            continue
        if not cost.is_categorized:
            logger.debug(
                f"Execution cost {cost.id} on site {site_id} has unrecognized "
                f"category {cost.category!r}; excluded from totals"
            )
            continue
        totals[cost.category] += cost.amount
    return totals


def compute_site_snapshot(
    site: Site,
    labor_reports: Iterable[DailyLaborReport],
    execution_costs: Iterable[ExecutionCost],
    today=None,
    thresholds: Optional[RiskThresholds] = None,
) -> SiteCalculation:
    """
    Aggregate a site's labor reports and execution costs into a snapshot.

    Records of other sites may be passed in; they are filtered out by
    site id. Records referencing unknown sites contribute nothing.

    Args:
        site: Site to evaluate
        labor_reports: Daily labor reports (any sites)
        execution_costs: Execution costs (any sites)
        today: Reference day for the deadline distance
        thresholds: Risk thresholds (defaults apply when omitted)

    Returns:
        Fresh SiteCalculation
    """
    total_labor = sum(
        (r.labor_cost for r in labor_reports if r.site_id == site.id), ZERO
    )
    by_category = _sum_execution_costs(site.id, execution_costs)
    total_material = by_category[CostCategory.MATERIAL]
    total_outsource = by_category[CostCategory.OUTSOURCE]
    total_other = by_category[CostCategory.OTHER]

    total_execution = total_labor + total_material + total_outsource + total_other
    remaining = site.budget_amount - total_execution

    # Zero or negative budget reports zero margin instead of dividing
    if site.budget_amount > 0:
        margin_rate = float(remaining / site.budget_amount * 100)
    else:
        margin_rate = 0.0

    days_remaining = calculate_days_remaining(site.deadline, today)
    risk_level = classify_risk(margin_rate, days_remaining, thresholds)

    logger.debug(
        f"Site {site.id}: executed {total_execution} of {site.budget_amount}, "
        f"margin {margin_rate:.2f}%, risk {risk_level.value}"
    )

    return SiteCalculation(
        site_id=site.id,
        budget_amount=site.budget_amount,
        total_labor_cost=total_labor,
        total_material_cost=total_material,
        total_outsource_cost=total_outsource,
        total_other_cost=total_other,
        total_execution_cost=total_execution,
        remaining_budget=remaining,
        margin_rate=margin_rate,
        deadline=site.deadline,
        days_remaining=days_remaining,
        risk_level=risk_level,
    )


def compute_all_site_snapshots(
    sites: Iterable[Site],
    labor_reports: Iterable[DailyLaborReport],
    execution_costs: Iterable[ExecutionCost],
    today=None,
    thresholds: Optional[RiskThresholds] = None,
    max_workers: Optional[int] = None,
) -> List[SiteCalculation]:
    """
    Compute a snapshot for every site, preserving input order.

    No deduplication and no status filtering. The clock is read once so
    every snapshot in the batch shares the same reference day. With
    max_workers set, sites are computed on a thread pool; the result is
    identical to the sequential one.
    """
    site_list: Sequence[Site] = list(sites)
    reports = list(labor_reports)
    costs = list(execution_costs)
    reference_day = _resolve_today(today)

    def _compute(site: Site) -> SiteCalculation:
        return compute_site_snapshot(site, reports, costs, reference_day, thresholds)

    if max_workers and len(site_list) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            snapshots = list(pool.map(_compute, site_list))
    else:
        snapshots = [_compute(site) for site in site_list]

    logger.debug(f"Computed {len(snapshots)} site snapshots for {reference_day}")
    return snapshots
