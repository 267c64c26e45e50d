"""
Static memorandum dataset — supplier pricing scenarios and project constants.

Figures are taken from the investment memorandum for the two aggregate extraction
projects (project1 / project2). Everything here is plain data; validation and
model construction happen in data_prep/loader.py so a typo fails at startup.
"""

from __future__ import annotations

from typing import Any, Dict, List

# ----- Supplier pricing scenarios (selectable, one at a time) -----
# annual_extraction is the combined extractable volume (m³) and is identical for
# all suppliers; only price and resulting revenue differ.

SUPPLIER_SCENARIOS: List[Dict[str, Any]] = [
    {
        "name": "Step Building Supplies",
        "price_per_unit": 732.57,
        "total_revenue": 426_867_037,
        "annual_extraction": 583_145.86,
        "extraction_cycle": 2,
    },
    {
        "name": "Inframat",
        "price_per_unit": 650,
        "total_revenue": 379_044_809,
        "annual_extraction": 583_145.86,
        "extraction_cycle": 2,
    },
    {
        "name": "Bulkmat",
        "price_per_unit": 598,
        "total_revenue": 348_305_960,
        "annual_extraction": 583_145.86,
        "extraction_cycle": 2,
    },
    {
        "name": "Platinum Aggregates",
        "price_per_unit": 90,
        "total_revenue": 91_845_563,
        "annual_extraction": 583_145.86,
        "extraction_cycle": 2,
    },
]

# ----- Project constants -----
# The memorandum headline quotes R140.63M; that is the rounded sum of the two
# project budgets, so the exact sum is used as the total.

OPERATIONAL_COST_BREAKDOWN: Dict[str, float] = {
    "project1": 35_206_181,
    "project2": 105_426_656,
}

EXTRACTION_PERIODS: Dict[str, int] = {
    "project1": 2,
    "project2": 5,
}

PROJECT_CONSTANTS: Dict[str, Any] = {
    "total_operational_cost": sum(OPERATIONAL_COST_BREAKDOWN.values()),
    "operational_cost": dict(OPERATIONAL_COST_BREAKDOWN),
    "duration_months": dict(EXTRACTION_PERIODS),
}

# ----- Cost categories (R millions, as published) -----

COST_CATEGORIES: List[Dict[str, Any]] = [
    {"name": "Site Preparation", "amount": 0.1},
    {"name": "Labour", "amount": 2.88},
    {"name": "Equipment & Maintenance", "amount": 7.8},
    {"name": "Transportation", "amount": 1.2},
    {"name": "Environmental", "amount": 0.18},
    {"name": "Permits", "amount": 0.002},
    {"name": "Contingency", "amount": 1.02},
]


def get_memorandum_data() -> Dict[str, Any]:
    """
    Return the raw memorandum dataset in the shape accepted by
    data_prep.loader.load_memorandum(). Callers get fresh copies.
    """
    return {
        "scenarios": [dict(s) for s in SUPPLIER_SCENARIOS],
        "constants": {
            "total_operational_cost": PROJECT_CONSTANTS["total_operational_cost"],
            "operational_cost": dict(PROJECT_CONSTANTS["operational_cost"]),
            "duration_months": dict(PROJECT_CONSTANTS["duration_months"]),
        },
        "cost_categories": [dict(c) for c in COST_CATEGORIES],
    }
