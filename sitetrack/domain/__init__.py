"""
Domain Layer - Site financial records and the metrics computed from them.

This module contains:
- entities/: Immutable records (Site, DailyLaborReport, ExecutionCost, Payment, SiteCalculation)
- services/: Metrics engine, record validation, portfolio summaries
"""

from .entities import (
    Site, SiteStatus,
    DailyLaborReport, CrewEntry,
    ExecutionCost, CostCategory,
    Payment, PaymentType,
    SiteCalculation, RiskLevel, RiskThresholds,
)

__all__ = [
    'Site', 'SiteStatus',
    'DailyLaborReport', 'CrewEntry',
    'ExecutionCost', 'CostCategory',
    'Payment', 'PaymentType',
    'SiteCalculation', 'RiskLevel', 'RiskThresholds',
]
