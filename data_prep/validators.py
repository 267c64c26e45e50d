"""
Configuration checks for the memorandum dataset before it reaches the engine.

Catches problems early:
- Project durations that run past the projection horizon
- Duplicate or missing scenario names
- Scenarios whose revenue makes the margin undefined or negative
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence

from core.config import ProjectionConfig
from core.schema import PricingScenario, ProjectConstants


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a memorandum configuration."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_constants(
    constants: ProjectConstants,
    config: ProjectionConfig,
) -> ValidationResult:
    """
    Checks that depend on the projection settings. Structural invariants
    (positive total, durations >= 1, costs summing to the total) are already
    enforced when ProjectConstants is built.
    """
    result = ValidationResult()

    if config.projection_months < 1:
        result.errors.append(
            f"projection_months must be at least 1, got {config.projection_months}."
        )
        return result

    for project, months in constants.duration_months.items():
        if months > config.projection_months:
            result.errors.append(
                f"{project} runs for {months} months, beyond the "
                f"{config.projection_months}-month projection horizon."
            )

    zero_cost = [p for p, c in constants.operational_cost.items() if c == 0]
    if zero_cost:
        result.warnings.append(
            f"Projects with zero operational cost receive no volume or revenue: {zero_cost}"
        )

    return result


def validate_scenarios(
    scenarios: Sequence[PricingScenario],
    constants: ProjectConstants,
) -> ValidationResult:
    """
    Run all checks on the selectable scenario set.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()

    if len(scenarios) == 0:
        result.errors.append("No pricing scenarios configured.")
        return result

    counts = Counter(s.name for s in scenarios)
    dups = sorted(name for name, n in counts.items() if n > 1)
    if dups:
        result.errors.append(f"Duplicate scenario names: {dups}")

    for s in scenarios:
        if s.total_revenue == 0:
            result.warnings.append(
                f"Scenario '{s.name}' has zero total revenue; profit margin is undefined."
            )
        elif s.total_revenue < constants.total_operational_cost:
            result.warnings.append(
                f"Scenario '{s.name}' revenue {s.total_revenue:,.0f} does not cover "
                f"operational cost {constants.total_operational_cost:,.0f}."
            )

    volumes = {s.annual_extraction for s in scenarios}
    if len(volumes) > 1:
        result.warnings.append(
            f"Scenarios disagree on annual extraction volume: {sorted(volumes)}"
        )

    return result
