from __future__ import annotations

from typing import Iterable, List

import numpy as np
import pandas as pd
from dateutil.relativedelta import relativedelta


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def excel_round(x, decimals: int = 2):
    """Excel ROUND: half away from zero (vectorized)."""
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    return np.sign(x) * (np.floor(np.abs(x) * m + 0.5) / m)


def month_labels(n_months: int) -> List[str]:
    """Display labels for projection months: "Month 1" .. "Month n"."""
    return [f"Month {m}" for m in range(1, n_months + 1)]


def period_starts(start_date: pd.Timestamp, n_months: int) -> List[pd.Timestamp]:
    """
    Month-start dates for each projection month.
    Month 1 is the month containing start_date; a mid-month anchor is snapped back
    to the first of that month.
    """
    base = pd.Timestamp(year=start_date.year, month=start_date.month, day=1)
    return [base + relativedelta(months=k) for k in range(n_months)]
