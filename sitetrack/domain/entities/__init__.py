"""
Domain Entities - Immutable records consumed and produced by the metrics engine.
"""

from .site import Site, SiteStatus
from .labor_report import DailyLaborReport, CrewEntry
from .execution_cost import ExecutionCost, CostCategory
from .payment import Payment, PaymentType
from .site_calculation import SiteCalculation, RiskLevel, RiskThresholds, DEFAULT_THRESHOLDS

__all__ = [
    'Site', 'SiteStatus',
    'DailyLaborReport', 'CrewEntry',
    'ExecutionCost', 'CostCategory',
    'Payment', 'PaymentType',
    'SiteCalculation', 'RiskLevel', 'RiskThresholds', 'DEFAULT_THRESHOLDS',
]
