"""
Presets — the static supplier/project dataset of the memorandum.
"""

from .suppliers import (
    SUPPLIER_SCENARIOS,
    OPERATIONAL_COST_BREAKDOWN,
    EXTRACTION_PERIODS,
    PROJECT_CONSTANTS,
    COST_CATEGORIES,
    get_memorandum_data,
)

__all__ = [
    "SUPPLIER_SCENARIOS",
    "OPERATIONAL_COST_BREAKDOWN",
    "EXTRACTION_PERIODS",
    "PROJECT_CONSTANTS",
    "COST_CATEGORIES",
    "get_memorandum_data",
]
