from __future__ import annotations

from pathlib import Path
import sys

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recession_dashboard.analysis import historical_narrative, model_performance
from recession_dashboard.charts import comparison_chart, current_horizon_chart, historical_chart
from recession_dashboard.config import (
    DATA_SOURCES,
    DEFAULT_ALERT_THRESHOLD,
    HORIZON_INSIGHT,
    HORIZON_LABELS,
    HORIZONS,
    PAYLOAD_PATH,
    VIEW_LABELS,
    VIEWS,
)
from recession_dashboard.data import ForecastPayload, PayloadError, load_payload_source
from recession_dashboard.logging_config import configure_logging
from recession_dashboard.projections import (
    PERIODS,
    cross_horizon_projection,
    current_horizon_projection,
    historical_window_projection,
    risk_narrative,
)
from recession_dashboard.state import SelectionState, default_selection, validate_selection

PERIOD_NAMES = {p.id: p.name for p in PERIODS}


@st.cache_data(show_spinner="Loading forecast data...")
def _load_payload() -> ForecastPayload:
    return load_payload_source(PAYLOAD_PATH)


def _friendly_performance(df: pd.DataFrame) -> pd.DataFrame:
    out = df.drop(columns=["model"]).rename(
        columns={
            "name": "Model",
            "observations": "Months With Predictions",
            "mean_prob": "Mean Probability",
            "max_prob": "Peak Probability",
            "months_above_threshold": f"Months Above {DEFAULT_ALERT_THRESHOLD:.0%}",
            "brier_score": "Brier Score (lower is better)",
            "precision": "Precision",
            "recall": "Recall",
            "f1": "F1",
        }
    )
    return out


def _selection_controls(payload: ForecastPayload) -> SelectionState:
    defaults = default_selection(payload)

    st.subheader("Forecast Controls")
    left, right = st.columns([3, 2])
    view = left.radio(
        "View",
        options=list(VIEWS),
        index=VIEWS.index(defaults.view),
        format_func=lambda v: VIEW_LABELS[v],
        horizontal=True,
        key="view",
    )
    horizon = right.selectbox(
        "Forecast Horizon",
        options=list(HORIZONS),
        index=HORIZONS.index(defaults.horizon),
        format_func=lambda h: HORIZON_LABELS[h],
        disabled=view != "current",
        key="horizon",
    )
    model_names = {m.code: m.name for m in payload.models}
    chosen = st.multiselect(
        "Select Models",
        options=payload.model_codes,
        default=payload.model_codes,
        format_func=lambda c: model_names[c],
        key="models",
    )

    # Rendered on every run so the chosen period survives view switches.
    period_ids = list(PERIOD_NAMES)
    period = st.radio(
        "Select Historical Period",
        options=period_ids,
        index=period_ids.index(defaults.period),
        format_func=lambda p: PERIOD_NAMES[p],
        horizontal=True,
        disabled=view != "historical",
        key="period",
    )

    selection = (
        defaults.with_view(view).with_horizon(horizon).with_models(chosen).with_period(period)
    )
    return validate_selection(selection, payload)


def _render_current(payload: ForecastPayload, selection: SelectionState) -> None:
    projection = current_horizon_projection(payload, selection.horizon, selection.models)
    target_date = payload.predictions[selection.horizon].target_date.isoformat()
    if projection.empty:
        st.info("No models selected.")
    else:
        st.plotly_chart(
            current_horizon_chart(projection, selection.horizon, target_date),
            use_container_width=True,
        )

    st.markdown("#### Risk Assessment")
    narrative = risk_narrative(projection)
    if narrative.level == "high":
        st.error(narrative.message)
    elif narrative.level == "moderate":
        st.warning(narrative.message)
    else:
        st.info(narrative.message)


def _render_historical(payload: ForecastPayload, selection: SelectionState) -> None:
    window = historical_window_projection(payload.historical, selection.period)
    chosen = payload.chosen_models(selection.models)

    if not window.empty:
        st.plotly_chart(historical_chart(window, chosen), use_container_width=True)

    st.markdown("#### Performance Analysis")
    st.write(historical_narrative(window, selection.period))

    if not window.empty and chosen:
        performance = model_performance(payload, window, selection.models)
        st.dataframe(_friendly_performance(performance), use_container_width=True)
        st.caption(
            f"Scores use months where both a prediction and the actual outcome are known. "
            f"Warnings are counted at a {DEFAULT_ALERT_THRESHOLD:.0%} probability cutoff."
        )


def _render_comparison(payload: ForecastPayload, selection: SelectionState) -> None:
    projection = cross_horizon_projection(payload, selection.models)
    chosen = payload.chosen_models(selection.models)
    if not chosen:
        st.info("No models selected.")
    else:
        st.plotly_chart(comparison_chart(projection, chosen), use_container_width=True)
        with st.expander("Comparison table"):
            table = projection.rename(columns={m.code: m.name for m in chosen})
            st.dataframe(table.set_index("horizon"), use_container_width=True)

    st.markdown("#### Horizon Insights")
    st.write(HORIZON_INSIGHT)


def main() -> None:
    configure_logging()
    st.set_page_config(page_title="Recession Prediction Dashboard", layout="wide")
    st.title("Recession Prediction Dashboard")

    try:
        payload = _load_payload()
    except (FileNotFoundError, PayloadError) as exc:
        st.error(str(exc))
        st.stop()

    st.caption(f"Using data up to: {payload.last_updated.isoformat()}")

    selection = _selection_controls(payload)

    if selection.view == "current":
        _render_current(payload, selection)
    elif selection.view == "historical":
        _render_historical(payload, selection)
    else:
        _render_comparison(payload, selection)

    st.subheader("About This Dashboard")
    left, right = st.columns(2)
    left.markdown("**Data Sources**")
    left.markdown("\n".join(f"- {name} ({code})" for code, name in DATA_SOURCES.items()))
    right.markdown("**Model Information**")
    right.markdown(
        "This dashboard compares multiple machine learning models trained to predict the "
        "probability of a recession in the US economy across different time horizons.\n\n"
        "Each model uses different underlying algorithms and techniques to generate predictions "
        "based on the same input data. By comparing multiple models, users can gain a more "
        "comprehensive view of potential economic outcomes.\n\n"
        "Models are regularly retrained with the latest economic data to ensure predictions "
        "remain current and accurate."
    )

    st.caption(f"Economic Prediction Team | Last Data Update: {payload.last_updated.isoformat()}")


if __name__ == "__main__":
    main()
