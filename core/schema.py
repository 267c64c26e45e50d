"""
Memorandum data model — pricing scenarios, project constants, cost categories.

Models are frozen: the dataset is fixed at process start and never mutated.
Cross-field invariants on ProjectConstants are checked here so that any instance
that exists is safe to divide by (total cost > 0, every duration >= 1).
The projection horizon check lives in data_prep/validators.py since it depends
on ProjectionConfig.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Output frame columns. Per-project volume columns are inserted between
# "label" and "total_volume" using the project ids.
EXTRACTION_COLUMNS: Tuple[str, ...] = ("month", "label", "total_volume")

PRICE_COMPARISON_COLUMNS: Tuple[str, ...] = (
    "name",
    "price_per_unit",
    "total_revenue",
    "profit_margin_percent",
    "margin_defined",
)

CASH_FLOW_COLUMNS: Tuple[str, ...] = (
    "month",
    "label",
    "revenue",
    "operational_cost",
    "net_cash_flow",
    "cumulative_net_cash_flow",
    "is_active_month",
)

# Project ids become extraction frame columns, so they must not shadow these.
RESERVED_PROJECT_IDS = frozenset(EXTRACTION_COLUMNS) | {"period_start"}


class PricingScenario(BaseModel):
    """One supplier's pricing assumptions for the whole project."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(min_length=1)
    price_per_unit: float = Field(gt=0, description="Rand per cubic metre")
    # 0 is accepted: the margin is then reported as undefined, not rejected
    total_revenue: float = Field(ge=0, description="Rand, whole project")
    annual_extraction: float = Field(gt=0, description="Cubic metres")
    extraction_cycle: int = Field(default=2, ge=1, description="Permit-renewal cycles (informational)")


class ProjectConstants(BaseModel):
    """Operational cost and duration per extraction project."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    total_operational_cost: float
    operational_cost: Mapping[str, float]
    duration_months: Mapping[str, int]

    @field_validator("operational_cost", "duration_months", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _check_invariants(self) -> "ProjectConstants":
        if self.total_operational_cost <= 0:
            raise ValueError(
                f"total_operational_cost must be positive, got {self.total_operational_cost}"
            )
        if not self.operational_cost:
            raise ValueError("At least one project is required.")
        reserved = sorted(set(self.operational_cost) & RESERVED_PROJECT_IDS)
        if reserved:
            raise ValueError(f"Project ids clash with output column names: {reserved}")
        if set(self.operational_cost) != set(self.duration_months):
            raise ValueError(
                f"Project ids differ between operational_cost {sorted(self.operational_cost)} "
                f"and duration_months {sorted(self.duration_months)}"
            )
        negative = [p for p, c in self.operational_cost.items() if c < 0]
        if negative:
            raise ValueError(f"Negative operational cost for projects: {negative}")
        bad_durations = [p for p, d in self.duration_months.items() if d < 1]
        if bad_durations:
            raise ValueError(f"Duration must be at least 1 month for projects: {bad_durations}")

        cost_sum = sum(self.operational_cost.values())
        if not math.isclose(cost_sum, self.total_operational_cost, rel_tol=1e-9, abs_tol=0.01):
            raise ValueError(
                f"Per-project operational costs sum to {cost_sum:,.2f}, "
                f"not total_operational_cost {self.total_operational_cost:,.2f}"
            )
        return self

    @property
    def projects(self) -> List[str]:
        return list(self.operational_cost)

    def cost_share(self, project: str) -> float:
        """Fraction of total operational cost carried by one project."""
        return self.operational_cost[project] / self.total_operational_cost


class CostCategory(BaseModel):
    """One slice of the published cost breakdown (amounts in R millions)."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str = Field(min_length=1)
    amount: float = Field(ge=0)


class MemorandumConfig(BaseModel):
    """The full static dataset: selectable scenarios plus the shared constants."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    scenarios: Tuple[PricingScenario, ...] = Field(min_length=1)
    constants: ProjectConstants
    cost_categories: Tuple[CostCategory, ...] = ()

    @property
    def scenario_names(self) -> List[str]:
        return [s.name for s in self.scenarios]

    def get_scenario(self, name: str) -> PricingScenario:
        for scenario in self.scenarios:
            if scenario.name == name:
                return scenario
        raise KeyError(
            f"Unknown scenario '{name}'. "
            f"Available: {self.scenario_names}"
        )
