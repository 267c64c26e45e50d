"""
Memorandum summary figures — headline KPIs, per-project summary, cost breakdown,
cash-flow summary.

These feed the tabular/text panels next to the charts. Undefined values (zero
revenue margin) are reported as None, never NaN.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

import numpy as np
import pandas as pd

from core.config import ProjectionConfig
from core.schema import CASH_FLOW_COLUMNS, CostCategory, PricingScenario, ProjectConstants
from core.utils import require_columns
from engine.projection import monthly_operational_cost, profit_margin_percent


def compute_headline_figures(
    scenario: PricingScenario,
    constants: ProjectConstants,
    config: Optional[ProjectionConfig] = None,
) -> Dict[str, Optional[float]]:
    """
    Headline boxes of the memorandum: projected revenue, extraction volume,
    total cost and margin for the selected scenario.
    """
    cfg = config or ProjectionConfig()
    return {
        "total_revenue": float(scenario.total_revenue),
        "total_extraction_volume": float(scenario.annual_extraction),
        "total_operational_cost": float(constants.total_operational_cost),
        "profit_margin_percent": profit_margin_percent(
            scenario.total_revenue, constants.total_operational_cost, cfg.margin_decimals
        ),
    }


def compute_project_summary(constants: ProjectConstants) -> pd.DataFrame:
    """
    One row per project:
        project, operational_cost, duration_months, monthly_cost, cost_share_pct
    """
    rows = []
    for p in constants.projects:
        rows.append({
            "project": p,
            "operational_cost": float(constants.operational_cost[p]),
            "duration_months": int(constants.duration_months[p]),
            "monthly_cost": monthly_operational_cost(constants, p),
            "cost_share_pct": constants.cost_share(p) * 100.0,
        })
    return pd.DataFrame(
        rows,
        columns=["project", "operational_cost", "duration_months", "monthly_cost", "cost_share_pct"],
    )


def compute_cost_breakdown(categories: Sequence[CostCategory]) -> pd.DataFrame:
    """
    Cost categories with their share of the category total (pie-chart input).
    A zero total yields 0% shares rather than a division error.
    """
    names = [c.name for c in categories]
    amounts = np.array([c.amount for c in categories], dtype=float)
    total = amounts.sum()
    shares = amounts / total * 100.0 if total > 0 else np.zeros_like(amounts)
    return pd.DataFrame({"name": names, "amount": amounts, "share_pct": shares})


def summarize_cash_flow(cash_flow: pd.DataFrame) -> Dict[str, Any]:
    """
    Collapse a cash-flow frame (engine.runner.cash_flow_frame) to summary values.

    Returns
    -------
    Dict with total_revenue, total_operational_cost, total_net_cash_flow,
    active_months, last_active_month, best_month, worst_month.
    """
    require_columns(cash_flow, CASH_FLOW_COLUMNS)
    if cash_flow.empty:
        raise ValueError("Cash flow frame is empty.")

    active = cash_flow.loc[cash_flow["is_active_month"].astype(bool), "month"]
    best = cash_flow.loc[cash_flow["net_cash_flow"].idxmax()]
    worst = cash_flow.loc[cash_flow["net_cash_flow"].idxmin()]

    return {
        "total_revenue": float(cash_flow["revenue"].sum()),
        "total_operational_cost": float(cash_flow["operational_cost"].sum()),
        "total_net_cash_flow": float(cash_flow["net_cash_flow"].sum()),
        "active_months": int(len(active)),
        "last_active_month": int(active.max()) if len(active) > 0 else None,
        "best_month": int(best["month"]),
        "worst_month": int(worst["month"]),
    }
