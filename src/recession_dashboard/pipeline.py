from __future__ import annotations

from datetime import date
import json
import logging
from pathlib import Path

from .config import PAYLOAD_PATH, REPORTING_LAG_MONTHS, SYNTHETIC_SEED, SYNTHETIC_START_DATE
from .data import parse_payload
from .synthetic import generate_payload_dict

logger = logging.getLogger(__name__)


def build_payload(
    output_path: Path | str = PAYLOAD_PATH,
    as_of: date | str | None = None,
    start_date: str = SYNTHETIC_START_DATE,
    seed: int = SYNTHETIC_SEED,
    reporting_lag_months: int = REPORTING_LAG_MONTHS,
) -> dict[str, object]:
    """Generate the demo payload, validate it, and write it as the bundled JSON file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    raw = generate_payload_dict(
        as_of=as_of,
        start_date=start_date,
        seed=seed,
        reporting_lag_months=reporting_lag_months,
    )
    payload = parse_payload(raw)

    with output_path.open("w", encoding="utf-8") as f:
        json.dump(raw, f, indent=2)
    logger.info("Wrote payload to %s", output_path)

    return {
        "path": str(output_path),
        "last_updated": payload.last_updated.isoformat(),
        "models": payload.model_codes,
        "historical_rows": int(len(payload.historical)),
        "horizons": list(payload.predictions),
    }
