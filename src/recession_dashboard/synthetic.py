"""Synthetic demo payload, for running the dashboard without a bundled data file."""

from __future__ import annotations

from datetime import date
import logging

import numpy as np
import pandas as pd

from .config import (
    DEMO_MODELS,
    HORIZON_MONTHS,
    NBER_RECESSIONS,
    REPORTING_LAG_MONTHS,
    SYNTHETIC_SEED,
    SYNTHETIC_START_DATE,
)

logger = logging.getLogger(__name__)


def _recession_indicator(dates: pd.DatetimeIndex) -> pd.Series:
    actual = pd.Series(0, index=dates, dtype=int)
    for start, end in NBER_RECESSIONS:
        actual.loc[(dates >= pd.Timestamp(start)) & (dates <= pd.Timestamp(end))] = 1
    return actual


def _model_history(
    actual: pd.Series,
    rng: np.random.Generator,
    lead_months: int,
    noise: float,
) -> np.ndarray:
    """Noisy probability that rises `lead_months` ahead of each recession."""
    lead = actual.shift(-lead_months).fillna(0.0).astype(float)
    signal = lead.rolling(window=3, min_periods=1).mean().to_numpy()
    base = 0.08 + 0.75 * signal
    return np.clip(base + rng.normal(0.0, noise, size=len(signal)), 0.0, 1.0)


def generate_payload_dict(
    as_of: date | str | None = None,
    start_date: str = SYNTHETIC_START_DATE,
    seed: int = SYNTHETIC_SEED,
    models: list[dict[str, str]] | None = None,
    reporting_lag_months: int = REPORTING_LAG_MONTHS,
) -> dict[str, object]:
    """Build a payload in the bundled JSON shape from seeded random draws."""
    models = [dict(m) for m in (models or DEMO_MODELS)]
    as_of_ts = pd.Timestamp.today().normalize() if as_of is None else pd.Timestamp(as_of)
    as_of_ts = as_of_ts.replace(day=1)
    if as_of_ts < pd.Timestamp(start_date):
        raise ValueError("as_of must not precede start_date.")

    rng = np.random.default_rng(seed)
    dates = pd.date_range(start=start_date, end=as_of_ts, freq="MS")
    actual = _recession_indicator(dates)

    history: dict[str, np.ndarray] = {}
    for i, model in enumerate(models):
        probs = _model_history(actual, rng, lead_months=2 + i % 4, noise=0.04 + 0.01 * i)
        if reporting_lag_months > 0:
            probs[-reporting_lag_months:] = np.nan
        history[model["id"]] = probs

    historical_data: list[dict[str, object]] = []
    for pos, ts in enumerate(dates):
        row: dict[str, object] = {"date": ts.date().isoformat(), "actual": int(actual.iloc[pos])}
        for code, probs in history.items():
            if not np.isnan(probs[pos]):
                row[f"{code}_pred"] = round(float(probs[pos]), 4)
        historical_data.append(row)

    # Horizon forecasts drift upward with lead time around a per-model level.
    predictions: dict[str, object] = {}
    levels = rng.uniform(0.10, 0.45, size=len(models))
    for step, (horizon, months) in enumerate(HORIZON_MONTHS.items()):
        drift = 0.06 * step
        probs = np.clip(levels + drift + rng.normal(0.0, 0.03, size=len(models)), 0.0, 1.0)
        predictions[horizon] = {
            "targetDate": (as_of_ts + pd.DateOffset(months=months)).date().isoformat(),
            "models": {m["id"]: round(float(p), 4) for m, p in zip(models, probs)},
        }

    logger.info(
        "Generated synthetic payload: %d models, %d months through %s (seed=%d)",
        len(models),
        len(dates),
        as_of_ts.date().isoformat(),
        seed,
    )
    return {
        "lastUpdated": as_of_ts.date().isoformat(),
        "models": models,
        "predictions": predictions,
        "historicalData": historical_data,
    }
