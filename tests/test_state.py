from __future__ import annotations

import pytest

from recession_dashboard.state import (
    SelectionState,
    default_selection,
    toggle_model,
    validate_selection,
)


def test_default_selection(payload) -> None:
    selection = default_selection(payload)

    assert selection.horizon == "6M"
    assert selection.models == frozenset({"rf", "xgb", "lstm"})
    assert selection.view == "current"
    assert selection.period == "last12"
    assert validate_selection(selection, payload) is selection


def test_with_methods_return_new_state(payload) -> None:
    selection = default_selection(payload)
    changed = selection.with_view("historical").with_period("covid").with_horizon("1M")

    assert selection.view == "current"
    assert changed.view == "historical"
    assert changed.period == "covid"
    assert changed.horizon == "1M"
    assert changed.models == selection.models


def test_toggle_model_round_trip(payload) -> None:
    selection = default_selection(payload)

    removed = toggle_model(selection, "xgb")
    assert removed.models == frozenset({"rf", "lstm"})

    restored = toggle_model(removed, "xgb")
    assert restored == selection


def test_toggle_down_to_empty_is_valid(payload) -> None:
    selection = SelectionState(models=frozenset({"rf"}))
    empty = toggle_model(selection, "rf")

    assert empty.models == frozenset()
    validate_selection(empty, payload)


@pytest.mark.parametrize(
    ("selection", "message"),
    [
        (SelectionState(horizon="24M"), "horizon"),
        (SelectionState(models=frozenset({"svm"})), "svm"),
        (SelectionState(view="table"), "view"),
        (SelectionState(period="recent"), "period"),
    ],
)
def test_validate_selection_rejects_unknown_values(payload, selection, message) -> None:
    with pytest.raises(ValueError, match=message):
        validate_selection(selection, payload)
