from __future__ import annotations

import copy
from pathlib import Path
import sys

import pytest

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from recession_dashboard.data import ForecastPayload, parse_payload  # noqa: E402

MONTHS = [
    "2019-10-01",
    "2019-11-01",
    "2019-12-01",
    "2020-01-01",
    "2020-02-01",
    "2020-03-01",
    "2020-04-01",
    "2020-05-01",
    "2020-06-01",
    "2020-07-01",
    "2020-08-01",
    "2020-09-01",
    "2020-10-01",
    "2020-11-01",
    "2020-12-01",
    "2021-01-01",
]
RECESSION_MONTHS = {"2020-02-01", "2020-03-01", "2020-04-01"}


def _history() -> list[dict[str, object]]:
    rows = []
    for i, month in enumerate(MONTHS):
        actual = 1 if month in RECESSION_MONTHS else 0
        row: dict[str, object] = {"date": month, "actual": actual}
        # The two most recent months have no predictions yet.
        if i < len(MONTHS) - 2:
            row["rf_pred"] = 0.8 if actual else 0.1
            row["xgb_pred"] = 0.6 if actual else 0.3
            row["lstm_pred"] = 0.2
        rows.append(row)
    return rows


RAW_PAYLOAD = {
    "lastUpdated": "2021-01-01",
    "models": [
        {"id": "rf", "name": "Random Forest", "color": "#8884d8"},
        {"id": "xgb", "name": "XGBoost", "color": "#82ca9d"},
        {"id": "lstm", "name": "LSTM", "color": "#ffc658"},
    ],
    "predictions": {
        "1M": {"targetDate": "2021-02-01", "models": {"rf": 0.10, "xgb": 0.15, "lstm": 0.05}},
        "3M": {"targetDate": "2021-04-01", "models": {"rf": 0.25, "xgb": 0.20, "lstm": 0.25}},
        "6M": {"targetDate": "2021-07-01", "models": {"rf": 0.45, "xgb": 0.30, "lstm": 0.30}},
        "12M": {"targetDate": "2022-01-01", "models": {"rf": 0.75, "xgb": 0.50, "lstm": 0.35}},
    },
    "historicalData": _history(),
}


@pytest.fixture
def raw_payload() -> dict:
    return copy.deepcopy(RAW_PAYLOAD)


@pytest.fixture
def payload(raw_payload: dict) -> ForecastPayload:
    return parse_payload(raw_payload)
