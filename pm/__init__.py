"""
Summary outputs — headline figures, project and cost breakdowns, cash-flow summary.
"""

from .metrics import (
    compute_headline_figures,
    compute_project_summary,
    compute_cost_breakdown,
    summarize_cash_flow,
)

__all__ = [
    "compute_headline_figures",
    "compute_project_summary",
    "compute_cost_breakdown",
    "summarize_cash_flow",
]
