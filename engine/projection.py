"""
Deterministic projection helpers — monthly extraction, price comparison, cash flow.

Allocation rules (matching the memorandum model):
  1. Each project's share of the scenario total = its share of total operational cost
  2. A project's share is spread evenly over its duration (months 1..duration)
  3. After its duration a project contributes exactly 0 (no pro-rating, no carry-over)
  4. Revenue follows the same allocation as volume; cost is the project budget / duration

All functions are pure: same inputs, same rows. Nothing is cached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from core.config import ProjectionConfig
from core.schema import PricingScenario, ProjectConstants
from core.utils import excel_round, month_labels


@dataclass(frozen=True)
class MonthlyExtractionRow:
    """Extraction volume (m³) for one projection month."""
    month: int
    label: str
    project_volume: Dict[str, float]
    total_volume: float


@dataclass(frozen=True)
class PriceComparisonRow:
    """
    One scenario on the price comparison chart.

    profit_margin_percent is None when the margin is undefined (zero revenue),
    so the display layer can show a placeholder instead of NaN.
    """
    name: str
    price_per_unit: float
    total_revenue: float
    profit_margin_percent: Optional[float]

    @property
    def margin_defined(self) -> bool:
        return self.profit_margin_percent is not None


@dataclass(frozen=True)
class MonthlyCashFlowRow:
    """Revenue, cost and net cash flow for one projection month."""
    month: int
    label: str
    revenue: float
    operational_cost: float
    net_cash_flow: float
    is_active_month: bool


def monthly_volume(scenario: PricingScenario, constants: ProjectConstants, project: str) -> float:
    """Constant monthly extraction volume for one project while it is active."""
    return (
        scenario.annual_extraction
        * constants.cost_share(project)
        / constants.duration_months[project]
    )


def monthly_revenue(scenario: PricingScenario, constants: ProjectConstants, project: str) -> float:
    """Constant monthly revenue for one project while it is active."""
    return (
        scenario.total_revenue
        * constants.cost_share(project)
        / constants.duration_months[project]
    )


def monthly_operational_cost(constants: ProjectConstants, project: str) -> float:
    return constants.operational_cost[project] / constants.duration_months[project]


def _activity_mask(constants: ProjectConstants, n_months: int) -> np.ndarray:
    """Boolean (n_projects, n_months): True while month <= project duration."""
    months = np.arange(1, n_months + 1)
    durations = np.array([constants.duration_months[p] for p in constants.projects], dtype=int)
    return months[np.newaxis, :] <= durations[:, np.newaxis]


def _spread(per_project: np.ndarray, active: np.ndarray) -> np.ndarray:
    """Place each project's monthly amount in its active months, 0 elsewhere."""
    return np.where(active, per_project[:, np.newaxis], 0.0)


def compute_monthly_extraction(
    scenario: PricingScenario,
    constants: ProjectConstants,
    config: Optional[ProjectionConfig] = None,
) -> List[MonthlyExtractionRow]:
    """
    Monthly extraction volume per project and in total.

    Returns exactly config.projection_months rows ordered by month. Summed over
    all rows, each project delivers monthly_volume * duration, i.e. its full
    cost-share allocation of the scenario's extraction volume.
    """
    cfg = config or ProjectionConfig()
    n = cfg.projection_months
    projects = constants.projects

    per_project = np.array([monthly_volume(scenario, constants, p) for p in projects], dtype=float)
    volumes = _spread(per_project, _activity_mask(constants, n))
    totals = volumes.sum(axis=0)

    labels = month_labels(n)
    rows = []
    for m in range(n):
        rows.append(MonthlyExtractionRow(
            month=m + 1,
            label=labels[m],
            project_volume={p: float(volumes[i, m]) for i, p in enumerate(projects)},
            total_volume=float(totals[m]),
        ))
    return rows


def profit_margin_percent(
    total_revenue: float,
    total_operational_cost: float,
    decimals: int = 2,
) -> Optional[float]:
    """(revenue - cost) / revenue * 100, rounded half away from zero. None if revenue is 0."""
    if total_revenue == 0:
        return None
    margin = (total_revenue - total_operational_cost) / total_revenue * 100.0
    return float(excel_round(margin, decimals))


def compute_price_comparison(
    scenarios: Sequence[PricingScenario],
    constants: ProjectConstants,
    config: Optional[ProjectionConfig] = None,
) -> List[PriceComparisonRow]:
    """One row per scenario, in input order."""
    cfg = config or ProjectionConfig()
    return [
        PriceComparisonRow(
            name=s.name,
            price_per_unit=s.price_per_unit,
            total_revenue=s.total_revenue,
            profit_margin_percent=profit_margin_percent(
                s.total_revenue, constants.total_operational_cost, cfg.margin_decimals
            ),
        )
        for s in scenarios
    ]


def compute_cash_flow(
    scenario: PricingScenario,
    constants: ProjectConstants,
    config: Optional[ProjectionConfig] = None,
) -> List[MonthlyCashFlowRow]:
    """
    Monthly revenue, operational cost and net cash flow.

    When every duration fits in the horizon, revenue sums to scenario.total_revenue
    and cost sums to constants.total_operational_cost. The cost series depends on
    the constants only, so it is identical for every scenario.
    """
    cfg = config or ProjectionConfig()
    n = cfg.projection_months
    projects = constants.projects
    active = _activity_mask(constants, n)

    rev_pp = np.array([monthly_revenue(scenario, constants, p) for p in projects], dtype=float)
    cost_pp = np.array([monthly_operational_cost(constants, p) for p in projects], dtype=float)

    revenue = _spread(rev_pp, active).sum(axis=0)
    cost = _spread(cost_pp, active).sum(axis=0)
    any_active = active.any(axis=0)

    labels = month_labels(n)
    rows = []
    for m in range(n):
        rows.append(MonthlyCashFlowRow(
            month=m + 1,
            label=labels[m],
            revenue=float(revenue[m]),
            operational_cost=float(cost[m]),
            net_cash_flow=float(revenue[m] - cost[m]),
            is_active_month=bool(any_active[m]),
        ))
    return rows
