"""Plotly visualisation helpers for the budget tracker.

Each function accepts the output of a function in :mod:`derivations`
and returns a ``plotly.graph_objects.Figure`` that Streamlit renders via
``st.plotly_chart``.  Labels are passed in already translated so this
module stays independent of the language selection.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .derivations import Bucket, BudgetStatus, buckets_frame

EXPENSE_COLOR = "rgba(239, 68, 68, 0.8)"
INCOME_COLOR = "rgba(34, 197, 94, 0.8)"
BUDGET_COLOR = "rgba(59, 130, 246, 0.3)"
CATEGORY_COLORS = ["#ef4444", "#f59e0b", "#3b82f6", "#10b981", "#8b5cf6"]


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_period_bar_chart(
    buckets: Sequence[Bucket],
    expense_label: str = "Expense",
    income_label: str = "Income",
    title: Optional[str] = None,
) -> go.Figure:
    """Stacked expense/income bars, one per time bucket.

    Parameters
    ----------
    buckets : sequence of Bucket
        Output of :func:`derivations.bucket_transactions`.
    expense_label, income_label : str
        Legend entries.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Stacked bar chart; hovering shows the bucket's net amount.
    """
    if not buckets:
        return _empty_figure()
    df = buckets_frame(buckets)
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=df["Label"],
            y=df["Expenses"],
            name=expense_label,
            marker_color=EXPENSE_COLOR,
            customdata=df["Net"],
            hovertemplate="%{x}<br>" + expense_label + ": $%{y:,.2f}<br>Net: $%{customdata:,.2f}<extra></extra>",
        )
    )
    fig.add_trace(
        go.Bar(
            x=df["Label"],
            y=df["Income"],
            name=income_label,
            marker_color=INCOME_COLOR,
            customdata=df["Net"],
            hovertemplate="%{x}<br>" + income_label + ": $%{y:,.2f}<br>Net: $%{customdata:,.2f}<extra></extra>",
        )
    )
    fig.update_layout(
        title=title,
        barmode="stack",
        hovermode="x unified",
        yaxis_title="$",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_yaxes(rangemode="tozero", tickprefix="$")
    return fig


def create_category_pie_chart(
    totals: Dict[str, float],
    label_for: Callable[[str], str] = str,
    title: Optional[str] = None,
) -> go.Figure:
    """Pie chart of spend per category; categories with no spend are omitted."""
    rows = [(label_for(category), value) for category, value in totals.items() if value > 0]
    if not rows:
        return _empty_figure()
    df = pd.DataFrame(rows, columns=["Category", "Value"])
    fig = px.pie(df, names="Category", values="Value", color_discrete_sequence=CATEGORY_COLORS)
    fig.update_layout(title=title or "Category breakdown")
    return fig


def create_budget_vs_actual_chart(
    statuses: Sequence[BudgetStatus],
    label_for: Callable[[str], str] = str,
    spent_label: str = "Spent",
    budget_label: str = "Budget",
    title: Optional[str] = None,
) -> go.Figure:
    """Grouped bars comparing each category's spend with its limit."""
    if not statuses:
        return _empty_figure()
    labels = [label_for(status.category) for status in statuses]
    fig = go.Figure()
    fig.add_trace(go.Bar(x=labels, y=[s.spent for s in statuses], name=spent_label, marker_color="#ef4444"))
    fig.add_trace(go.Bar(x=labels, y=[s.limit for s in statuses], name=budget_label, marker_color=BUDGET_COLOR))
    fig.update_layout(title=title, barmode="group", yaxis_title="$")
    return fig


def create_monthly_trend_chart(
    trend: pd.DataFrame,
    expense_label: str = "Expense",
    income_label: str = "Income",
    title: Optional[str] = None,
) -> go.Figure:
    """Expense and income lines across the months returned by ``monthly_trend``."""
    if trend.empty:
        return _empty_figure()
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=trend["Label"],
            y=trend["Expenses"],
            name=expense_label,
            mode="lines+markers",
            line=dict(color="#ef4444", width=3, shape="spline"),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=trend["Label"],
            y=trend["Income"],
            name=income_label,
            mode="lines+markers",
            line=dict(color="#10b981", width=3, shape="spline"),
        )
    )
    fig.update_layout(title=title, xaxis_title="Month", yaxis_title="$")
    return fig


def create_budget_ring(status: BudgetStatus, title: Optional[str] = None) -> go.Figure:
    """Donut showing how much of a budget has been used.

    The filled arc is capped at a full ring; the centre text shows the
    uncapped percentage so overspending stays visible.
    """
    used = min(status.percent_used, 100.0)
    color = "#ef4444" if status.over_budget else "#3b82f6"
    fig = go.Figure(
        go.Pie(
            values=[used, 100.0 - used],
            hole=0.75,
            sort=False,
            direction="clockwise",
            marker=dict(colors=[color, "#e2e8f0"]),
            textinfo="none",
            hoverinfo="skip",
            showlegend=False,
        )
    )
    fig.update_layout(
        title=title,
        annotations=[dict(text=f"{round(status.percent_used)}%", x=0.5, y=0.5, showarrow=False, font=dict(size=20))],
        margin=dict(t=40 if title else 10, b=10, l=10, r=10),
        height=220,
    )
    return fig
