from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import json
import logging
import math
from pathlib import Path
from typing import Iterable

import pandas as pd

from .config import HORIZONS, PAYLOAD_PATH
from .synthetic import generate_payload_dict

logger = logging.getLogger(__name__)

PRED_SUFFIX = "_pred"


class PayloadError(ValueError):
    """Raised when a forecast payload does not match the expected shape."""


@dataclass(frozen=True)
class Model:
    code: str
    name: str
    color: str


@dataclass(frozen=True)
class HorizonForecast:
    horizon: str
    target_date: date
    probabilities: dict[str, float]


@dataclass
class ForecastPayload:
    last_updated: date
    models: list[Model]
    predictions: dict[str, HorizonForecast]
    historical: pd.DataFrame

    @property
    def model_codes(self) -> list[str]:
        return [m.code for m in self.models]

    def chosen_models(self, codes: Iterable[str]) -> list[Model]:
        """Models whose code is in `codes`, in payload display order."""
        chosen = set(codes)
        unknown = chosen - set(self.model_codes)
        if unknown:
            raise KeyError(", ".join(sorted(unknown)))
        return [m for m in self.models if m.code in chosen]


def pred_column(code: str) -> str:
    return f"{code}{PRED_SUFFIX}"


def _parse_date(value: object, field: str) -> date:
    if not isinstance(value, str):
        raise PayloadError(f"{field} must be an ISO date string, got {value!r}.")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise PayloadError(f"{field} is not an ISO date: {value!r}.") from exc


def _parse_probability(value: object, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PayloadError(f"{field} must be a number, got {value!r}.")
    prob = float(value)
    if math.isnan(prob) or not 0.0 <= prob <= 1.0:
        raise PayloadError(f"{field} must lie in [0, 1], got {value!r}.")
    return prob


def _parse_models(raw_models: object) -> list[Model]:
    if not isinstance(raw_models, list) or not raw_models:
        raise PayloadError("models must be a non-empty list.")

    models: list[Model] = []
    seen: set[str] = set()
    for i, item in enumerate(raw_models):
        if not isinstance(item, dict):
            raise PayloadError(f"models[{i}] must be an object.")
        missing = [k for k in ("id", "name", "color") if not item.get(k)]
        if missing:
            raise PayloadError(f"models[{i}] is missing: {', '.join(missing)}.")
        code = str(item["id"])
        if code in seen:
            raise PayloadError(f"Duplicate model id {code!r}.")
        seen.add(code)
        models.append(Model(code=code, name=str(item["name"]), color=str(item["color"])))
    return models


def _parse_predictions(raw_predictions: object, codes: list[str]) -> dict[str, HorizonForecast]:
    if not isinstance(raw_predictions, dict):
        raise PayloadError("predictions must be an object keyed by horizon.")

    missing = [h for h in HORIZONS if h not in raw_predictions]
    if missing:
        raise PayloadError(f"predictions is missing horizons: {', '.join(missing)}.")
    unknown = [h for h in raw_predictions if h not in HORIZONS]
    if unknown:
        raise PayloadError(f"predictions has unknown horizons: {', '.join(map(str, unknown))}.")

    predictions: dict[str, HorizonForecast] = {}
    for horizon in HORIZONS:
        entry = raw_predictions[horizon]
        if not isinstance(entry, dict) or not isinstance(entry.get("models"), dict):
            raise PayloadError(f"predictions[{horizon}] must have a 'models' object.")
        target_date = _parse_date(entry.get("targetDate"), f"predictions[{horizon}].targetDate")

        raw_probs = entry["models"]
        absent = [c for c in codes if c not in raw_probs]
        if absent:
            raise PayloadError(f"predictions[{horizon}] has no probability for: {', '.join(absent)}.")
        extra = [c for c in raw_probs if c not in codes]
        if extra:
            raise PayloadError(f"predictions[{horizon}] references unknown models: {', '.join(extra)}.")

        probabilities = {
            code: _parse_probability(raw_probs[code], f"predictions[{horizon}].models.{code}")
            for code in codes
        }
        predictions[horizon] = HorizonForecast(
            horizon=horizon,
            target_date=target_date,
            probabilities=probabilities,
        )
    return predictions


def _parse_historical(raw_history: object, codes: list[str]) -> pd.DataFrame:
    if not isinstance(raw_history, list):
        raise PayloadError("historicalData must be a list.")

    pred_cols = [pred_column(c) for c in codes]
    rows: list[dict[str, object]] = []
    previous: date | None = None
    for i, item in enumerate(raw_history):
        if not isinstance(item, dict):
            raise PayloadError(f"historicalData[{i}] must be an object.")
        obs_date = _parse_date(item.get("date"), f"historicalData[{i}].date")
        if previous is not None and obs_date <= previous:
            raise PayloadError(
                f"historicalData must be strictly ascending by date; "
                f"{obs_date.isoformat()} follows {previous.isoformat()}."
            )
        previous = obs_date

        actual = item.get("actual")
        if isinstance(actual, bool) or actual not in (0, 1):
            raise PayloadError(f"historicalData[{i}].actual must be 0 or 1, got {actual!r}.")

        row: dict[str, object] = {"date": obs_date, "actual": int(actual)}
        for key, value in item.items():
            if key in {"date", "actual"}:
                continue
            if key not in pred_cols:
                raise PayloadError(f"historicalData[{i}] has unknown field {key!r}.")
            if value is None:
                continue
            row[key] = _parse_probability(value, f"historicalData[{i}].{key}")
        rows.append(row)

    frame = pd.DataFrame(rows, columns=["date", "actual", *pred_cols])
    frame["date"] = pd.to_datetime(frame["date"])
    frame["actual"] = frame["actual"].astype(int)
    for col in pred_cols:
        frame[col] = frame[col].astype(float)
    return frame


def parse_payload(raw: dict) -> ForecastPayload:
    """Validate a raw JSON payload and build the in-memory forecast store."""
    if not isinstance(raw, dict):
        raise PayloadError("Payload root must be an object.")

    last_updated = _parse_date(raw.get("lastUpdated"), "lastUpdated")
    models = _parse_models(raw.get("models"))
    codes = [m.code for m in models]
    predictions = _parse_predictions(raw.get("predictions"), codes)
    historical = _parse_historical(raw.get("historicalData"), codes)

    return ForecastPayload(
        last_updated=last_updated,
        models=models,
        predictions=predictions,
        historical=historical,
    )


def load_payload(path: Path | str = PAYLOAD_PATH) -> ForecastPayload:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Forecast payload not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise PayloadError(f"{path} is not valid JSON: {exc}") from exc

    payload = parse_payload(raw)
    logger.info(
        "Loaded payload from %s: %d models, %d historical rows, as of %s",
        path,
        len(payload.models),
        len(payload.historical),
        payload.last_updated.isoformat(),
    )
    return payload


def load_payload_source(
    path: Path | str = PAYLOAD_PATH,
    as_of: date | str | None = None,
    seed: int | None = None,
) -> ForecastPayload:
    """Read the bundled payload file, or synthesize demo data when it is absent."""
    path = Path(path)
    if path.exists():
        return load_payload(path)

    logger.warning("No payload file at %s; using synthetic demo data.", path)
    kwargs: dict[str, object] = {"as_of": as_of}
    if seed is not None:
        kwargs["seed"] = seed
    return parse_payload(generate_payload_dict(**kwargs))

