"""
Shared fixtures for SiteTrack tests.
"""
from datetime import date
from decimal import Decimal

import pytest

from sitetrack.domain.entities import (
    CostCategory,
    CrewEntry,
    DailyLaborReport,
    ExecutionCost,
    Payment,
    PaymentType,
    Site,
    SiteStatus,
)

TODAY = date(2024, 3, 10)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def sites():
    return [
        Site(id="s1", name="Banpo Interior", budget_amount=Decimal("100000000"),
             contract_amount=Decimal("130000000"), deadline=date(2024, 4, 15),
             status=SiteStatus.ACTIVE),
        Site(id="s2", name="Yeonnam Renovation", budget_amount=Decimal("20000000"),
             contract_amount=Decimal("28000000"), deadline=date(2024, 3, 12),
             status=SiteStatus.ACTIVE),
        Site(id="s3", name="Yeoksam Office 4F", budget_amount=Decimal("90000000"),
             contract_amount=Decimal("120000000"), deadline=date(2024, 2, 28),
             status=SiteStatus.COMPLETED),
    ]


@pytest.fixture
def labor_reports():
    return [
        DailyLaborReport.from_crew_entries(
            "r1", "s1",
            [CrewEntry("Carpenter", 3, Decimal("250000")), CrewEntry("Helper", 2, Decimal("150000"))],
            report_date=date(2024, 3, 5),
        ),
        DailyLaborReport(id="r2", site_id="s1", labor_cost=Decimal("3200000"), report_date=date(2024, 3, 7)),
        DailyLaborReport(id="r3", site_id="s2", labor_cost=Decimal("6000000"), report_date=date(2024, 3, 1)),
        DailyLaborReport(id="r4", site_id="s3", labor_cost=Decimal("25000000"), report_date=date(2024, 2, 20)),
    ]


@pytest.fixture
def execution_costs():
    return [
        ExecutionCost(id="c1", site_id="s1", category=CostCategory.MATERIAL, amount=Decimal("8500000")),
        ExecutionCost(id="c2", site_id="s1", category=CostCategory.OTHER, amount=Decimal("150000")),
        ExecutionCost(id="c3", site_id="s2", category=CostCategory.MATERIAL, amount=Decimal("12000000")),
        ExecutionCost(id="c4", site_id="s2", category=CostCategory.OUTSOURCE, amount=Decimal("1500000")),
        ExecutionCost(id="c5", site_id="s3", category=CostCategory.MATERIAL, amount=Decimal("55000000")),
    ]


@pytest.fixture
def payments():
    return [
        Payment(id="p1", site_id="s1", amount=Decimal("45000000"), payment_type=PaymentType.DEPOSIT),
        Payment(id="p2", site_id="s1", amount=Decimal("30000000"), payment_type=PaymentType.INTERIM),
        Payment(id="p3", site_id="s2", amount=Decimal("28000000"), payment_type=PaymentType.FINAL),
    ]
