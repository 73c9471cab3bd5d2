"""
Payment Entity - Money received from the client for a site.
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from .base import as_date, as_money


class PaymentType(Enum):
    """Stage of the contract a payment settles."""
    DEPOSIT = "DEPOSIT"
    INTERIM = "INTERIM"
    FINAL = "FINAL"
    OTHER = "OTHER"


@dataclass(frozen=True)
class Payment:
    """Immutable client payment record."""

    id: str
    site_id: str
    amount: Decimal = Decimal("0")
    payment_type: PaymentType = PaymentType.OTHER
    payment_date: Optional[date] = None
    description: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "amount", as_money(self.amount))
        object.__setattr__(self, "payment_date", as_date(self.payment_date))
        if not isinstance(self.payment_type, PaymentType):
            object.__setattr__(
                self, "payment_type", PaymentType(str(self.payment_type).upper())
            )
