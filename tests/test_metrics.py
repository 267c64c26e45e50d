from __future__ import annotations

import pytest

from core.schema import CostCategory, PricingScenario
from engine.runner import run_projection
from pm.metrics import (
    compute_cost_breakdown,
    compute_headline_figures,
    compute_project_summary,
    summarize_cash_flow,
)


def test_headline_figures(memorandum, constants):
    step = memorandum.get_scenario("Step Building Supplies")
    figures = compute_headline_figures(step, constants)

    assert figures["total_revenue"] == 426_867_037
    assert figures["total_extraction_volume"] == 583_145.86
    assert figures["total_operational_cost"] == pytest.approx(140.63e6, abs=5e3)
    assert figures["profit_margin_percent"] == 67.05


def test_headline_figures_zero_revenue(constants):
    empty = PricingScenario(name="Empty", price_per_unit=1.0, total_revenue=0, annual_extraction=1.0)
    assert compute_headline_figures(empty, constants)["profit_margin_percent"] is None


def test_project_summary(constants):
    summary = compute_project_summary(constants)

    assert summary["project"].tolist() == ["project1", "project2"]
    p1 = summary.set_index("project").loc["project1"]
    assert p1["monthly_cost"] == pytest.approx(17_603_090.5)
    assert p1["duration_months"] == 2
    assert summary["cost_share_pct"].sum() == pytest.approx(100.0)


def test_cost_breakdown(memorandum):
    breakdown = compute_cost_breakdown(memorandum.cost_categories)

    assert len(breakdown) == 7
    assert breakdown["share_pct"].sum() == pytest.approx(100.0)
    equipment = breakdown.set_index("name").loc["Equipment & Maintenance"]
    assert equipment["share_pct"] == pytest.approx(7.8 / 13.182 * 100)


def test_cost_breakdown_zero_total():
    breakdown = compute_cost_breakdown([CostCategory(name="Nothing", amount=0.0)])
    assert breakdown["share_pct"].tolist() == [0.0]


def test_summarize_cash_flow(memorandum):
    result = run_projection(memorandum, "Platinum Aggregates")
    summary = summarize_cash_flow(result.cash_flow)

    assert summary["total_revenue"] == pytest.approx(91_845_563, rel=1e-6)
    assert summary["total_operational_cost"] == pytest.approx(140_632_837, rel=1e-6)
    assert summary["total_net_cash_flow"] == pytest.approx(91_845_563 - 140_632_837, rel=1e-6)
    assert summary["active_months"] == 5
    assert summary["last_active_month"] == 5
    assert summary["worst_month"] == 1
    assert summary["best_month"] == 6


def test_summarize_cash_flow_requires_columns(memorandum):
    cash = run_projection(memorandum).cash_flow.drop(columns=["net_cash_flow"])
    with pytest.raises(ValueError, match="Missing required columns"):
        summarize_cash_flow(cash)
