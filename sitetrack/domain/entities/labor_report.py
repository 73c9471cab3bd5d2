"""
Daily Labor Report Entity - Per-day labor cost of a site's crew.

The report carries a precomputed labor_cost. The metrics engine trusts it;
crew entries are kept only so upstream validation can recompute the sum.
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from .base import as_date, as_money


@dataclass(frozen=True)
class CrewEntry:
    """One labor type line on a daily report (e.g. 3 carpenters at 250,000)."""

    labor_type_name: str
    count: int
    daily_rate: Decimal

    def __post_init__(self):
        object.__setattr__(self, "daily_rate", as_money(self.daily_rate))

    @property
    def total_cost(self) -> Decimal:
        return self.daily_rate * self.count


@dataclass(frozen=True)
class DailyLaborReport:
    """
    Immutable daily labor report.

    Attributes:
        id: Report identifier
        site_id: Owning site
        report_date: Day the work was done
        labor_cost: Sum of crew entry costs for the day
        work_content: Free-text description of the work
        crew_entries: Crew lines the labor cost was computed from
    """

    id: str
    site_id: str
    labor_cost: Decimal = Decimal("0")
    report_date: Optional[date] = None
    work_content: str = ""
    crew_entries: Tuple[CrewEntry, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "labor_cost", as_money(self.labor_cost))
        object.__setattr__(self, "report_date", as_date(self.report_date))
        object.__setattr__(self, "crew_entries", tuple(self.crew_entries))

    def crew_entries_total(self) -> Decimal:
        """Recompute the labor cost from crew entries."""
        return sum((e.total_cost for e in self.crew_entries), Decimal("0"))

    @classmethod
    def from_crew_entries(
        cls,
        id: str,
        site_id: str,
        crew_entries: Iterable[CrewEntry],
        report_date=None,
        work_content: str = "",
    ) -> 'DailyLaborReport':
        """Build a report whose labor_cost is the sum of its crew entries."""
        entries = tuple(crew_entries)
        return cls(
            id=id,
            site_id=site_id,
            labor_cost=sum((e.total_cost for e in entries), Decimal("0")),
            report_date=report_date,
            work_content=work_content,
            crew_entries=entries,
        )
