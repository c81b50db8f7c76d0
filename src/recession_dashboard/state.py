from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .config import DEFAULT_HORIZON, DEFAULT_PERIOD, DEFAULT_VIEW, VIEWS
from .data import ForecastPayload
from .projections import PERIODS_BY_ID


@dataclass(frozen=True)
class SelectionState:
    """Dashboard choices that drive which projection is shown."""

    horizon: str = DEFAULT_HORIZON
    models: frozenset[str] = field(default_factory=frozenset)
    view: str = DEFAULT_VIEW
    period: str = DEFAULT_PERIOD

    def with_horizon(self, horizon: str) -> "SelectionState":
        return replace(self, horizon=horizon)

    def with_models(self, models: Iterable[str]) -> "SelectionState":
        return replace(self, models=frozenset(models))

    def with_view(self, view: str) -> "SelectionState":
        return replace(self, view=view)

    def with_period(self, period: str) -> "SelectionState":
        return replace(self, period=period)


def default_selection(payload: ForecastPayload) -> SelectionState:
    return SelectionState(models=frozenset(payload.model_codes))


def validate_selection(selection: SelectionState, payload: ForecastPayload) -> SelectionState:
    if selection.horizon not in payload.predictions:
        raise ValueError(f"Unknown horizon {selection.horizon!r}.")
    unknown = sorted(selection.models - set(payload.model_codes))
    if unknown:
        raise ValueError(f"Unknown model codes: {', '.join(unknown)}.")
    if selection.view not in VIEWS:
        raise ValueError(f"Unknown view {selection.view!r}.")
    if selection.period not in PERIODS_BY_ID:
        raise ValueError(f"Unknown historical period {selection.period!r}.")
    return selection


def toggle_model(selection: SelectionState, code: str) -> SelectionState:
    if code in selection.models:
        return selection.with_models(selection.models - {code})
    return selection.with_models(selection.models | {code})
