"""
Execution Cost Entity - Categorized non-labor spending on a site.

Labor is never an execution cost category; it flows exclusively
through daily labor reports.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from .base import as_date, as_money


class CostCategory(Enum):
    """Classification of execution costs."""
    MATERIAL = "MATERIAL"
    OUTSOURCE = "OUTSOURCE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value) -> Union['CostCategory', str]:
        """
        Map a raw category token to a CostCategory.

        Tokens must match exactly (upper case, no padding). Anything else is
        returned unchanged so validation can report it instead of failing
        the mapping.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class ExecutionCost:
    """
    Immutable execution cost entry.

    Attributes:
        id: Cost identifier
        site_id: Owning site
        category: MATERIAL, OUTSOURCE or OTHER (raw string if unrecognized)
        amount: Cost amount
        cost_date: Date the cost was incurred
        description: Free-text description
        vendor_name: Optional vendor
    """

    id: str
    site_id: str
    category: Union[CostCategory, str] = CostCategory.MATERIAL
    amount: Decimal = Decimal("0")
    cost_date: Optional[date] = None
    description: str = ""
    vendor_name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "category", CostCategory.parse(self.category))
        object.__setattr__(self, "amount", as_money(self.amount))
        object.__setattr__(self, "cost_date", as_date(self.cost_date))

    @property
    def is_categorized(self) -> bool:
        return isinstance(self.category, CostCategory)
