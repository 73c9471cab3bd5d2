"""
Site Entity - A construction site with its execution budget and deadline.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from .base import as_date, as_money


class SiteStatus(Enum):
    """Lifecycle status of a site."""
    PLANNING = "PLANNING"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class Site:
    """
    Immutable site record supplied by the data store.

    Attributes:
        id: Stable site identity, referenced by reports, costs and payments
        name: Display name
        budget_amount: Total execution budget allocated to the site
        contract_amount: Client-facing contract amount (independent of budget)
        deadline: Optional completion deadline
        status: Lifecycle status; only used by callers to pick sites
        start_date: Optional start of works
        client_name: Optional client
        address: Optional site address
    """

    id: str
    name: str = ""
    budget_amount: Decimal = Decimal("0")
    contract_amount: Decimal = Decimal("0")
    deadline: Optional[date] = None
    status: SiteStatus = SiteStatus.ACTIVE
    start_date: Optional[date] = None
    client_name: Optional[str] = None
    address: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "budget_amount", as_money(self.budget_amount))
        object.__setattr__(self, "contract_amount", as_money(self.contract_amount))
        object.__setattr__(self, "deadline", as_date(self.deadline))
        object.__setattr__(self, "start_date", as_date(self.start_date))
        if not isinstance(self.status, SiteStatus):
            object.__setattr__(self, "status", SiteStatus(str(self.status).upper()))
