"""
Projection configuration.
The memorandum dataset itself lives in presets/ (PricingScenario / ProjectConstants).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd


class ConfigurationError(ValueError):
    """Raised once at startup when the memorandum configuration is unusable."""


@dataclass(frozen=True)
class ProjectionConfig:
    projection_months: int = 12

    # profit margin is reported as a percentage with this many decimals
    margin_decimals: int = 2

    # optional calendar anchor; frames gain a month-start "period_start" column
    start_date: Optional[pd.Timestamp] = None
