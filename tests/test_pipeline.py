from __future__ import annotations

import json

from recession_dashboard.data import load_payload
from recession_dashboard.pipeline import build_payload


def test_build_payload_writes_loadable_file(tmp_path) -> None:
    path = tmp_path / "data" / "recession_prediction_data.json"

    summary = build_payload(output_path=path, as_of="2025-03-01", seed=9)

    assert path.exists()
    assert summary["last_updated"] == "2025-03-01"
    assert summary["horizons"] == ["1M", "3M", "6M", "12M"]

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert set(raw) == {"lastUpdated", "models", "predictions", "historicalData"}

    payload = load_payload(path)
    assert payload.model_codes == summary["models"]
    assert len(payload.historical) == summary["historical_rows"]
