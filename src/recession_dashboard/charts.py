from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .config import HORIZON_LABELS
from .data import Model, pred_column

ACTUAL_COLOR = "#ff0000"


def _probability_axis(fig: go.Figure, axis: str = "y") -> None:
    update = fig.update_xaxes if axis == "x" else fig.update_yaxes
    update(range=[0, 1], tickformat=".0%")


def current_horizon_chart(projection: pd.DataFrame, horizon: str, target_date: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=projection["probability"],
            y=projection["name"],
            orientation="h",
            marker_color=list(projection["color"]),
            name="Probability",
            hovertemplate="%{y}: %{x:.1%}<extra></extra>",
        )
    )
    fig.update_layout(
        title=f"{HORIZON_LABELS.get(horizon, horizon)} Recession Probability Forecast (Target date: {target_date})",
        xaxis_title="Recession Probability",
        showlegend=False,
    )
    _probability_axis(fig, axis="x")
    return fig


def historical_chart(window: pd.DataFrame, models: list[Model]) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=window["date"],
            y=window["actual"],
            mode="lines",
            line={"color": ACTUAL_COLOR, "width": 3, "shape": "hv"},
            name="Actual Recession",
        )
    )
    for model in models:
        fig.add_trace(
            go.Scatter(
                x=window["date"],
                y=window[pred_column(model.code)],
                mode="lines+markers",
                line={"color": model.color, "width": 2},
                marker={"size": 6},
                name=model.name,
                hovertemplate="%{x|%Y-%m-%d}: %{y:.1%}<extra>" + model.name + "</extra>",
            )
        )
    fig.update_layout(title="Historical Model Performance", xaxis_title="Date", yaxis_title="Probability")
    _probability_axis(fig)
    return fig


def comparison_chart(projection: pd.DataFrame, models: list[Model]) -> go.Figure:
    fig = go.Figure()
    for model in models:
        if model.code not in projection.columns:
            continue
        fig.add_trace(
            go.Scatter(
                x=projection["horizon"],
                y=projection[model.code],
                mode="lines+markers",
                line={"color": model.color, "width": 2},
                marker={"size": 8},
                name=model.name,
                hovertemplate="%{x}: %{y:.1%}<extra>" + model.name + "</extra>",
            )
        )
    fig.update_layout(
        title="Forecast Comparison Across Time Horizons",
        xaxis_title="Horizon",
        yaxis_title="Probability",
    )
    _probability_axis(fig)
    return fig
