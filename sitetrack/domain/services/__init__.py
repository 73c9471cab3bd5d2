"""
Domain Services - Metrics computation, validation and portfolio reporting.
"""

from .metrics_engine import (
    calculate_days_remaining,
    classify_risk,
    compute_site_snapshot,
    compute_all_site_snapshots,
)
from .record_validation_service import (
    RecordValidationService,
    assert_labor_report_consistent,
    validate_records,
)
from .portfolio_service import (
    PortfolioSummary,
    PaymentSummary,
    sort_by_risk,
    summarize_portfolio,
    summarize_payments,
)

__all__ = [
    'calculate_days_remaining',
    'classify_risk',
    'compute_site_snapshot',
    'compute_all_site_snapshots',
    'RecordValidationService',
    'assert_labor_report_consistent',
    'validate_records',
    'PortfolioSummary',
    'PaymentSummary',
    'sort_by_risk',
    'summarize_portfolio',
    'summarize_payments',
]
