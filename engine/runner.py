"""
Projection runner — recomputes every series for the selected pricing scenario.

Each call starts from scratch: selecting another scenario means calling
run_projection() again with its name. Results are DataFrames with the columns
declared in core/schema.py, ready for the charting / table collaborators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from core.config import ProjectionConfig
from core.schema import (
    CASH_FLOW_COLUMNS,
    EXTRACTION_COLUMNS,
    PRICE_COMPARISON_COLUMNS,
    MemorandumConfig,
    PricingScenario,
)
from core.utils import period_starts

from .projection import (
    MonthlyCashFlowRow,
    MonthlyExtractionRow,
    PriceComparisonRow,
    compute_cash_flow,
    compute_monthly_extraction,
    compute_price_comparison,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectionResult:
    """All derived series for one selected scenario."""
    scenario: PricingScenario
    extraction: pd.DataFrame
    price_comparison: pd.DataFrame
    cash_flow: pd.DataFrame


def _with_period_start(df: pd.DataFrame, config: ProjectionConfig) -> pd.DataFrame:
    if config.start_date is None:
        return df
    starts = period_starts(pd.Timestamp(config.start_date), len(df))
    df.insert(2, "period_start", pd.DatetimeIndex(starts))
    return df


def extraction_frame(
    rows: Sequence[MonthlyExtractionRow],
    projects: List[str],
    config: Optional[ProjectionConfig] = None,
) -> pd.DataFrame:
    """One row per month: month, label, one volume column per project, total_volume."""
    cfg = config or ProjectionConfig()
    columns = list(EXTRACTION_COLUMNS[:2]) + list(projects) + list(EXTRACTION_COLUMNS[2:])
    records = []
    for r in rows:
        rec = {"month": r.month, "label": r.label}
        rec.update({p: r.project_volume[p] for p in projects})
        rec["total_volume"] = r.total_volume
        records.append(rec)
    df = pd.DataFrame(records, columns=columns)
    return _with_period_start(df, cfg)


def price_comparison_frame(rows: Sequence[PriceComparisonRow]) -> pd.DataFrame:
    """
    One row per scenario. profit_margin_percent is object dtype so an undefined
    margin stays None rather than turning into NaN.
    """
    df = pd.DataFrame(
        {
            "name": [r.name for r in rows],
            "price_per_unit": [r.price_per_unit for r in rows],
            "total_revenue": [r.total_revenue for r in rows],
            "profit_margin_percent": pd.Series(
                [r.profit_margin_percent for r in rows], dtype=object
            ),
            "margin_defined": [r.margin_defined for r in rows],
        },
        columns=list(PRICE_COMPARISON_COLUMNS),
    )
    return df


def cash_flow_frame(
    rows: Sequence[MonthlyCashFlowRow],
    config: Optional[ProjectionConfig] = None,
) -> pd.DataFrame:
    cfg = config or ProjectionConfig()
    df = pd.DataFrame(
        [
            {
                "month": r.month,
                "label": r.label,
                "revenue": r.revenue,
                "operational_cost": r.operational_cost,
                "net_cash_flow": r.net_cash_flow,
                "is_active_month": r.is_active_month,
            }
            for r in rows
        ],
        columns=[c for c in CASH_FLOW_COLUMNS if c != "cumulative_net_cash_flow"],
    )
    df["cumulative_net_cash_flow"] = df["net_cash_flow"].cumsum()
    df = df.reindex(columns=list(CASH_FLOW_COLUMNS))
    return _with_period_start(df, cfg)


def run_projection(
    memorandum: MemorandumConfig,
    scenario_name: Optional[str] = None,
    *,
    config: Optional[ProjectionConfig] = None,
) -> ProjectionResult:
    """
    Derive extraction, price comparison and cash flow series for one scenario.

    Parameters
    ----------
    memorandum : MemorandumConfig
        Validated dataset (see data_prep.loader.load_memorandum)
    scenario_name : str, optional
        Name of the selected pricing scenario. Defaults to the first scenario.
    config : ProjectionConfig, optional
        Horizon, margin rounding and optional calendar anchor

    Raises
    ------
    KeyError if scenario_name is not one of memorandum.scenario_names.
    """
    cfg = config or ProjectionConfig()
    if scenario_name is None:
        scenario = memorandum.scenarios[0]
    else:
        scenario = memorandum.get_scenario(scenario_name)

    constants = memorandum.constants
    logger.debug("Projecting scenario %r over %d months", scenario.name, cfg.projection_months)

    extraction_rows = compute_monthly_extraction(scenario, constants, cfg)
    comparison_rows = compute_price_comparison(memorandum.scenarios, constants, cfg)
    cash_rows = compute_cash_flow(scenario, constants, cfg)

    return ProjectionResult(
        scenario=scenario,
        extraction=extraction_frame(extraction_rows, constants.projects, cfg),
        price_comparison=price_comparison_frame(comparison_rows),
        cash_flow=cash_flow_frame(cash_rows, cfg),
    )
