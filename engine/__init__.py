"""
Projection engine — monthly extraction, price comparison and cash-flow math + runner.
"""

from .projection import (
    MonthlyCashFlowRow,
    MonthlyExtractionRow,
    PriceComparisonRow,
    compute_cash_flow,
    compute_monthly_extraction,
    compute_price_comparison,
    monthly_operational_cost,
    monthly_revenue,
    monthly_volume,
    profit_margin_percent,
)
from .runner import ProjectionResult, run_projection

__all__ = [
    "MonthlyCashFlowRow",
    "MonthlyExtractionRow",
    "PriceComparisonRow",
    "compute_cash_flow",
    "compute_monthly_extraction",
    "compute_price_comparison",
    "monthly_operational_cost",
    "monthly_revenue",
    "monthly_volume",
    "profit_margin_percent",
    "ProjectionResult",
    "run_projection",
]
