"""
Core package — data model, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    CASH_FLOW_COLUMNS,
    EXTRACTION_COLUMNS,
    PRICE_COMPARISON_COLUMNS,
    CostCategory,
    MemorandumConfig,
    PricingScenario,
    ProjectConstants,
)
from .config import ConfigurationError, ProjectionConfig
from .utils import require_columns, excel_round, month_labels, period_starts

__all__ = [
    "CASH_FLOW_COLUMNS",
    "EXTRACTION_COLUMNS",
    "PRICE_COMPARISON_COLUMNS",
    "CostCategory",
    "MemorandumConfig",
    "PricingScenario",
    "ProjectConstants",
    "ConfigurationError",
    "ProjectionConfig",
    "require_columns",
    "excel_round",
    "month_labels",
    "period_starts",
]
