from __future__ import annotations

import numpy as np

from recession_dashboard.data import ForecastPayload, pred_column


def probability_values(payload: ForecastPayload) -> np.ndarray:
    """Every stored probability, horizon forecasts and historical predictions alike."""
    horizon_probs = [p for f in payload.predictions.values() for p in f.probabilities.values()]
    pred_cols = [pred_column(c) for c in payload.model_codes]
    history_probs = payload.historical[pred_cols].to_numpy(dtype=float).ravel()
    history_probs = history_probs[~np.isnan(history_probs)]
    return np.concatenate([np.asarray(horizon_probs, dtype=float), history_probs])
