from __future__ import annotations

import math

import pytest

from core.config import ProjectionConfig
from core.schema import PricingScenario, ProjectConstants
from engine.projection import (
    compute_cash_flow,
    compute_monthly_extraction,
    compute_price_comparison,
    monthly_volume,
    profit_margin_percent,
)


def test_extraction_has_one_row_per_month(inframat, constants):
    rows = compute_monthly_extraction(inframat, constants)
    assert [r.month for r in rows] == list(range(1, 13))
    assert rows[0].label == "Month 1"
    assert rows[-1].label == "Month 12"


def test_extraction_month_one_matches_cost_share_allocation(inframat, constants):
    rows = compute_monthly_extraction(inframat, constants)
    first = rows[0]

    expected_p1 = 583_145.86 * (35_206_181 / 140_632_837) / 2
    expected_p2 = 583_145.86 * (105_426_656 / 140_632_837) / 5
    assert first.project_volume["project1"] == pytest.approx(expected_p1)
    assert first.project_volume["project2"] == pytest.approx(expected_p2)
    assert first.project_volume["project1"] == pytest.approx(72_992.69, abs=0.01)
    assert first.project_volume["project2"] == pytest.approx(87_432.10, abs=0.01)
    assert first.total_volume == pytest.approx(expected_p1 + expected_p2)


def test_extraction_stops_after_each_project_duration(inframat, constants):
    rows = compute_monthly_extraction(inframat, constants)
    for r in rows:
        if r.month > 2:
            assert r.project_volume["project1"] == 0.0
        else:
            assert r.project_volume["project1"] > 0
        if r.month > 5:
            assert r.project_volume["project2"] == 0.0
            assert r.total_volume == 0.0
        else:
            assert r.project_volume["project2"] > 0


def test_volume_conservation(memorandum, constants):
    for scenario in memorandum.scenarios:
        rows = compute_monthly_extraction(scenario, constants)
        expected = sum(
            monthly_volume(scenario, constants, p) * constants.duration_months[p]
            for p in constants.projects
        )
        assert sum(r.total_volume for r in rows) == pytest.approx(expected, rel=1e-6)
        # full allocation equals the scenario's extraction volume
        assert expected == pytest.approx(scenario.annual_extraction, rel=1e-6)


def test_revenue_and_cost_conservation(memorandum, constants):
    for scenario in memorandum.scenarios:
        rows = compute_cash_flow(scenario, constants)
        assert sum(r.revenue for r in rows) == pytest.approx(scenario.total_revenue, rel=1e-6)
        assert sum(r.operational_cost for r in rows) == pytest.approx(
            constants.total_operational_cost, rel=1e-6
        )


def test_cash_flow_zero_after_durations(inframat, constants):
    rows = compute_cash_flow(inframat, constants)
    p1_cost = 35_206_181 / 2
    p2_cost = 105_426_656 / 5

    assert rows[0].operational_cost == pytest.approx(p1_cost + p2_cost)
    assert rows[1].operational_cost == pytest.approx(p1_cost + p2_cost)
    for r in rows[2:5]:
        assert r.operational_cost == pytest.approx(p2_cost)
        assert r.is_active_month
    for r in rows[5:]:
        assert r.revenue == 0.0
        assert r.operational_cost == 0.0
        assert r.net_cash_flow == 0.0
        assert not r.is_active_month


def test_net_cash_flow_is_revenue_minus_cost(memorandum, constants):
    rows = compute_cash_flow(memorandum.get_scenario("Platinum Aggregates"), constants)
    for r in rows:
        assert r.net_cash_flow == pytest.approx(r.revenue - r.operational_cost)
    # revenue below cost: the active months run at a loss
    assert rows[0].net_cash_flow < 0


def test_non_negative_series(memorandum, constants):
    for scenario in memorandum.scenarios:
        for r in compute_monthly_extraction(scenario, constants):
            assert r.total_volume >= 0
            assert all(v >= 0 for v in r.project_volume.values())
        for r in compute_cash_flow(scenario, constants):
            assert r.revenue >= 0
            assert r.operational_cost >= 0


def test_operational_cost_series_identical_across_scenarios(memorandum, constants):
    baseline = [r.operational_cost for r in compute_cash_flow(memorandum.scenarios[0], constants)]
    for scenario in memorandum.scenarios[1:]:
        costs = [r.operational_cost for r in compute_cash_flow(scenario, constants)]
        assert costs == baseline


def test_revenue_series_changes_with_scenario(memorandum, constants):
    step = compute_cash_flow(memorandum.get_scenario("Step Building Supplies"), constants)
    bulk = compute_cash_flow(memorandum.get_scenario("Bulkmat"), constants)
    assert step[0].revenue > bulk[0].revenue


def test_price_comparison_preserves_input_order(memorandum, constants):
    rows = compute_price_comparison(memorandum.scenarios, constants)
    assert [r.name for r in rows] == [
        "Step Building Supplies",
        "Inframat",
        "Bulkmat",
        "Platinum Aggregates",
    ]
    reversed_rows = compute_price_comparison(list(reversed(memorandum.scenarios)), constants)
    assert [r.name for r in reversed_rows] == [r.name for r in reversed(rows)]


def test_price_comparison_margins(memorandum, constants):
    rows = {r.name: r for r in compute_price_comparison(memorandum.scenarios, constants)}
    assert rows["Step Building Supplies"].profit_margin_percent == 67.05
    assert rows["Inframat"].profit_margin_percent == 62.90
    assert rows["Platinum Aggregates"].profit_margin_percent == -53.12
    assert rows["Step Building Supplies"].price_per_unit == 732.57
    assert all(r.margin_defined for r in rows.values())


def test_margin_against_published_total():
    # headline total of R140.63M; 67.0553% rounds up, the preset exact total gives 67.05
    assert profit_margin_percent(426_867_037, 140_630_000) == 67.06


def test_zero_revenue_margin_is_undefined(constants):
    empty = PricingScenario(
        name="No Offtake",
        price_per_unit=1.0,
        total_revenue=0,
        annual_extraction=583_145.86,
    )
    rows = compute_price_comparison([empty], constants)
    assert rows[0].profit_margin_percent is None
    assert not rows[0].margin_defined

    # the time series are still well-formed
    cash = compute_cash_flow(empty, constants)
    assert all(r.revenue == 0.0 for r in cash)
    assert all(not math.isnan(r.net_cash_flow) for r in cash)


def test_margin_rounding_is_half_away_from_zero():
    assert profit_margin_percent(200.0, 100.0) == 50.0
    assert profit_margin_percent(8.0, 7.0, decimals=1) == 12.5
    assert profit_margin_percent(1000.0, 1000.125, decimals=2) == -0.01


def test_results_are_deterministic(inframat, constants):
    assert compute_cash_flow(inframat, constants) == compute_cash_flow(inframat, constants)
    assert compute_monthly_extraction(inframat, constants) == compute_monthly_extraction(
        inframat, constants
    )


def test_custom_horizon_and_projects():
    constants = ProjectConstants(
        total_operational_cost=600.0,
        operational_cost={"north": 200.0, "south": 300.0, "east": 100.0},
        duration_months={"north": 1, "south": 3, "east": 6},
    )
    scenario = PricingScenario(
        name="Flat", price_per_unit=10.0, total_revenue=1200.0, annual_extraction=60.0
    )
    cfg = ProjectionConfig(projection_months=6)

    rows = compute_monthly_extraction(scenario, constants, cfg)
    assert len(rows) == 6
    assert rows[0].project_volume == pytest.approx({"north": 20.0, "south": 10.0, "east": 10.0 / 6})
    assert rows[3].project_volume == pytest.approx({"north": 0.0, "south": 0.0, "east": 10.0 / 6})

    cash = compute_cash_flow(scenario, constants, cfg)
    assert sum(r.revenue for r in cash) == pytest.approx(1200.0)
    assert sum(r.operational_cost for r in cash) == pytest.approx(600.0)
    assert all(r.is_active_month for r in cash)


def test_horizon_shorter_than_duration_truncates(inframat, constants):
    rows = compute_monthly_extraction(inframat, constants, ProjectionConfig(projection_months=3))
    assert len(rows) == 3
    assert rows[2].project_volume["project1"] == 0.0
    assert rows[2].project_volume["project2"] > 0
