from __future__ import annotations

import numpy as np
import pandas as pd
from sklearn.metrics import brier_score_loss

from .config import DEFAULT_ALERT_THRESHOLD
from .data import ForecastPayload, pred_column

PERFORMANCE_COLUMNS = [
    "model",
    "name",
    "observations",
    "mean_prob",
    "max_prob",
    "months_above_threshold",
    "brier_score",
    "precision",
    "recall",
    "f1",
]


def _threshold_breakdown(y_true: np.ndarray, y_prob: np.ndarray, threshold: float) -> dict[str, float]:
    y_pred = (y_prob >= threshold).astype(int)

    tp = int(np.sum((y_true == 1) & (y_pred == 1)))
    fp = int(np.sum((y_true == 0) & (y_pred == 1)))
    fn = int(np.sum((y_true == 1) & (y_pred == 0)))

    precision = tp / (tp + fp) if (tp + fp) else 0.0
    recall = tp / (tp + fn) if (tp + fn) else 0.0
    f1 = (2 * precision * recall / (precision + recall)) if (precision + recall) else 0.0
    return {"precision": precision, "recall": recall, "f1": f1}


def model_performance(
    payload: ForecastPayload,
    window: pd.DataFrame,
    models: set[str] | frozenset[str] | list[str],
    alert_threshold: float = DEFAULT_ALERT_THRESHOLD,
) -> pd.DataFrame:
    """Score each chosen model's stored predictions against actual recession months."""
    rows: list[dict[str, object]] = []
    for model in payload.chosen_models(models):
        scored = window[["actual", pred_column(model.code)]].dropna()
        y_true = scored["actual"].to_numpy(dtype=int)
        y_prob = scored[pred_column(model.code)].to_numpy(dtype=float)

        row: dict[str, object] = {
            "model": model.code,
            "name": model.name,
            "observations": int(len(scored)),
        }
        if scored.empty:
            row.update(
                {
                    "mean_prob": np.nan,
                    "max_prob": np.nan,
                    "months_above_threshold": 0,
                    "brier_score": np.nan,
                    "precision": np.nan,
                    "recall": np.nan,
                    "f1": np.nan,
                }
            )
        else:
            row.update(
                {
                    "mean_prob": float(y_prob.mean()),
                    "max_prob": float(y_prob.max()),
                    "months_above_threshold": int((y_prob >= alert_threshold).sum()),
                    "brier_score": float(brier_score_loss(y_true, y_prob)),
                    **_threshold_breakdown(y_true, y_prob, alert_threshold),
                }
            )
        rows.append(row)

    return pd.DataFrame(rows, columns=PERFORMANCE_COLUMNS)


def historical_narrative(window: pd.DataFrame, period_id: str) -> str:
    if window.empty:
        return "No data available for the selected period. Try selecting a different timeframe."

    text = (
        "The chart above shows how each model's predictions compared to actual recession "
        "periods (in red). Models with lines closely tracking the actual recession line "
        "performed better."
    )
    if period_id != "last12":
        text += (
            " Examining historical recession periods can provide insight into how these models "
            "would have performed during past economic crises."
        )
    return text
