"""
Site Calculation - Derived budget-consumption snapshot of one site.

Produced fresh by the metrics engine on every call and never persisted.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class RiskLevel(Enum):
    """Three-tier risk classification of a site."""
    SAFE = "SAFE"
    WARNING = "WARNING"
    DANGER = "DANGER"

    @property
    def severity(self) -> int:
        """Ordering key: SAFE < WARNING < DANGER."""
        return _SEVERITY[self]


_SEVERITY = {
    RiskLevel.SAFE: 0,
    RiskLevel.WARNING: 1,
    RiskLevel.DANGER: 2,
}


@dataclass(frozen=True)
class RiskThresholds:
    """
    Cut-off points of the risk decision table.

    Attributes:
        danger_margin: Margin rate (%) below which a site is DANGER
        warning_margin: Margin rate (%) below which a site is WARNING
        deadline_warning_days: Days remaining below which a site is WARNING
    """

    danger_margin: float = 5.0
    warning_margin: float = 15.0
    deadline_warning_days: int = 7

    def __post_init__(self):
        if self.danger_margin > self.warning_margin:
            raise ValueError("danger_margin cannot exceed warning_margin")
        if self.deadline_warning_days < 0:
            raise ValueError("deadline_warning_days cannot be negative")


DEFAULT_THRESHOLDS = RiskThresholds()


@dataclass(frozen=True)
class SiteCalculation:
    """
    Budget-consumption snapshot of a site.

    Invariants:
        total_execution_cost = labor + material + outsource + other
        remaining_budget = budget_amount - total_execution_cost (may be negative)
        margin_rate = remaining_budget / budget_amount * 100, or 0 without budget

    days_remaining is None when the site has no deadline, which is distinct
    from 0 (due today).
    """

    site_id: str
    budget_amount: Decimal
    total_labor_cost: Decimal
    total_material_cost: Decimal
    total_outsource_cost: Decimal
    total_other_cost: Decimal
    total_execution_cost: Decimal
    remaining_budget: Decimal
    margin_rate: float
    deadline: Optional[date]
    days_remaining: Optional[int]
    risk_level: RiskLevel

    @property
    def is_over_budget(self) -> bool:
        return self.remaining_budget < 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'site_id': self.site_id,
            'budget_amount': float(self.budget_amount),
            'total_labor_cost': float(self.total_labor_cost),
            'total_material_cost': float(self.total_material_cost),
            'total_outsource_cost': float(self.total_outsource_cost),
            'total_other_cost': float(self.total_other_cost),
            'total_execution_cost': float(self.total_execution_cost),
            'remaining_budget': float(self.remaining_budget),
            'margin_rate': self.margin_rate,
            'deadline': self.deadline.isoformat() if self.deadline else None,
            'days_remaining': self.days_remaining,
            'risk_level': self.risk_level.value,
        }
