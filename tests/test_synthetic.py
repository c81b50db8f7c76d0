from __future__ import annotations

import numpy as np
import pytest

from recession_dashboard.config import DEMO_MODELS, HORIZONS
from recession_dashboard.data import parse_payload, pred_column
from recession_dashboard.synthetic import generate_payload_dict

from helpers import probability_values


def test_generated_payload_passes_validation() -> None:
    payload = parse_payload(generate_payload_dict(as_of="2025-03-20", seed=1))

    assert payload.last_updated.isoformat() == "2025-03-01"
    assert payload.model_codes == [m["id"] for m in DEMO_MODELS]
    assert list(payload.predictions) == list(HORIZONS)
    assert payload.predictions["12M"].target_date.isoformat() == "2026-03-01"
    assert payload.historical["date"].iloc[0].isoformat().startswith("2000-01-01")
    assert payload.historical["date"].iloc[-1].isoformat().startswith("2025-03-01")
    assert payload.historical["date"].is_unique


def test_probabilities_in_unit_interval() -> None:
    payload = parse_payload(generate_payload_dict(as_of="2024-12-01", seed=3))
    values = probability_values(payload)
    assert ((values >= 0.0) & (values <= 1.0)).all()


def test_reporting_lag_leaves_recent_predictions_absent() -> None:
    payload = parse_payload(generate_payload_dict(as_of="2024-12-01", reporting_lag_months=4))
    history = payload.historical

    for code in payload.model_codes:
        col = pred_column(code)
        assert history[col].tail(4).isna().all()
        assert history[col].iloc[:-4].notna().all()


def test_actual_marks_nber_recessions() -> None:
    payload = parse_payload(generate_payload_dict(as_of="2024-12-01"))
    history = payload.historical.set_index("date")

    assert history.loc["2008-06-01", "actual"] == 1
    assert history.loc["2020-03-01", "actual"] == 1
    assert history.loc["2015-06-01", "actual"] == 0
    assert history.loc["2020-05-01", "actual"] == 0


def test_same_seed_is_deterministic() -> None:
    first = generate_payload_dict(as_of="2024-12-01", seed=11)
    second = generate_payload_dict(as_of="2024-12-01", seed=11)
    other = generate_payload_dict(as_of="2024-12-01", seed=12)

    assert first == second
    assert first["predictions"] != other["predictions"]


def test_predictions_rise_ahead_of_recessions() -> None:
    payload = parse_payload(generate_payload_dict(as_of="2024-12-01", seed=5))
    history = payload.historical.set_index("date")
    col = pred_column("rf")

    calm = history.loc["2014-01-01":"2016-12-01", col].mean()
    pre_gfc = history.loc["2007-09-01":"2008-12-01", col].mean()
    assert pre_gfc > calm + 0.3
    assert not np.isnan(calm)


def test_as_of_before_start_rejected() -> None:
    with pytest.raises(ValueError):
        generate_payload_dict(as_of="1999-01-01")
