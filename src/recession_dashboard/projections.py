"""Chart-ready tables derived from a forecast payload and the current selection.

Every function here is pure: same payload and selection in, equal frame out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from .config import (
    HIGH_RISK_THRESHOLD,
    HISTORICAL_PERIODS,
    HORIZONS,
    MODERATE_RISK_THRESHOLD,
    RISK_MESSAGES,
)
from .data import ForecastPayload

CURRENT_COLUMNS = ["name", "probability", "color", "code"]


@dataclass(frozen=True)
class HistoricalPeriod:
    id: str
    name: str
    start: str | None = None
    end: str | None = None
    last_n: int | None = None


@dataclass(frozen=True)
class RiskNarrative:
    level: str
    message: str


PERIODS = [HistoricalPeriod(**p) for p in HISTORICAL_PERIODS]
PERIODS_BY_ID = {p.id: p for p in PERIODS}


def get_period(period_id: str) -> HistoricalPeriod:
    if period_id not in PERIODS_BY_ID:
        raise ValueError(f"Unknown historical period {period_id!r}.")
    return PERIODS_BY_ID[period_id]


def current_horizon_projection(
    payload: ForecastPayload,
    horizon: str,
    models: Iterable[str],
) -> pd.DataFrame:
    """Bars for one horizon, ascending by probability; ties keep model order."""
    if horizon not in payload.predictions:
        raise ValueError(f"No forecast for horizon {horizon!r}.")

    forecast = payload.predictions[horizon]
    rows = [
        {
            "name": m.name,
            "probability": forecast.probabilities[m.code],
            "color": m.color,
            "code": m.code,
        }
        for m in payload.chosen_models(models)
    ]
    out = pd.DataFrame(rows, columns=CURRENT_COLUMNS)
    out["probability"] = out["probability"].astype(float)
    return out.sort_values("probability", kind="stable").reset_index(drop=True)


def historical_window_projection(
    historical: pd.DataFrame,
    period: HistoricalPeriod | str,
) -> pd.DataFrame:
    if isinstance(period, str):
        period = get_period(period)

    if period.last_n is not None:
        window = historical.tail(period.last_n)
    elif period.start is not None and period.end is not None:
        mask = (historical["date"] >= pd.Timestamp(period.start)) & (
            historical["date"] <= pd.Timestamp(period.end)
        )
        window = historical.loc[mask]
    else:
        window = historical
    return window.reset_index(drop=True)


def cross_horizon_projection(payload: ForecastPayload, models: Iterable[str]) -> pd.DataFrame:
    """One row per horizon with each chosen model's probability."""
    chosen = payload.chosen_models(models)
    rows: list[dict[str, object]] = []
    for horizon in HORIZONS:
        if horizon not in payload.predictions:
            continue
        probabilities = payload.predictions[horizon].probabilities
        row: dict[str, object] = {"horizon": horizon}
        for m in chosen:
            row[m.code] = probabilities[m.code]
        rows.append(row)
    return pd.DataFrame(rows, columns=["horizon", *[m.code for m in chosen]])


def risk_narrative(projection: pd.DataFrame) -> RiskNarrative:
    if projection.empty:
        level = "selection_required"
    elif (projection["probability"] > HIGH_RISK_THRESHOLD).any():
        level = "high"
    elif (projection["probability"] > MODERATE_RISK_THRESHOLD).any():
        level = "moderate"
    else:
        level = "low"
    return RiskNarrative(level=level, message=RISK_MESSAGES[level])
