"""
Renders the Calculator tab.

Household inputs on the left; headline, narrative, KPI cards, the annual /
monthly summary table and two charts on the right. Figures that cannot be
computed render as the placeholder and are left off the charts.
"""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

import app.branding as branding
import core.formatting as fmt
from app.session import HOUSEHOLD_FIELDS, FIELD_ERRORS_KEY, field_key, on_field_change
from config.scenarios import CARBON_PRICE_OPTIONS
from core.dividend import PolicyAssumptions, Results, UserInputs, price_sensitivity

FIELD_LABELS: dict[str, str] = {
    "num_adults":             "Number of adults",
    "num_children":           "Number of eligible children",
    "annual_electricity_kwh": "Annual electricity use (kWh)",
    "annual_gas_gj":          "Annual gas use (GJ)",
    "annual_petrol_l":        "Annual petrol use (L)",
}

CHART_LAYOUT = dict(
    plot_bgcolor="rgba(0,0,0,0)",
    paper_bgcolor="rgba(0,0,0,0)",
    font=dict(family="Nunito Sans, sans-serif", size=11, color="#071A2F"),
    margin=dict(t=20, b=10, l=0, r=0),
    height=300,
    yaxis=dict(gridcolor="#E8EEF4", zerolinecolor="#D0DAE4", tickfont=dict(size=10)),
    xaxis=dict(tickfont=dict(size=10)),
)


def _render_inputs() -> None:
    st.subheader("Your household")
    errors = st.session_state.get(FIELD_ERRORS_KEY, {})
    for name in HOUSEHOLD_FIELDS:
        st.text_input(
            FIELD_LABELS[name],
            key=field_key(name),
            on_change=on_field_change,
            args=(name,),
        )
        branding.render_field_error(errors.get(name, ""))


def _breakdown_chart(results: Results) -> go.Figure:
    """Household dividend against each fuel's extra cost."""
    fuel = results.annual_fuel_costs
    fig = go.Figure()
    if results.household_dividend is not None:
        fig.add_trace(go.Bar(
            x=["Household dividend"],
            y=[results.household_dividend],
            name="Dividend",
            marker_color="#1DB87A",
        ))
    for label, value, colour in [
        ("Electricity", fuel.electricity, "#4A6FA5"),
        ("Gas",         fuel.gas,         "#F0B429"),
        ("Petrol",      fuel.petrol,      "#E84C4C"),
    ]:
        fig.add_trace(go.Bar(
            x=["Extra costs"], y=[value], name=label, marker_color=colour,
        ))
    fig.update_layout(barmode="stack", **CHART_LAYOUT)
    fig.update_yaxes(title_text="A$ per year")
    return fig


def _sensitivity_frame(policy: PolicyAssumptions, inputs: UserInputs) -> pd.DataFrame:
    rows = []
    for price, res in price_sensitivity(policy, inputs, CARBON_PRICE_OPTIONS.values()):
        rows.append({
            "Carbon price (A$/t)": price,
            "Household dividend":  res.household_dividend,
            "Extra costs":         res.total_extra_cost,
            "Net benefit":         res.net_benefit,
        })
    return pd.DataFrame(rows)


def _sensitivity_chart(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    x = df["Carbon price (A$/t)"]
    for column, colour in [
        ("Household dividend", "#1DB87A"),
        ("Extra costs",        "#E84C4C"),
        ("Net benefit",        "#071A2F"),
    ]:
        if df[column].isna().all():
            continue
        fig.add_trace(go.Scatter(
            x=x, y=df[column], name=column, mode="lines+markers",
            line=dict(color=colour),
        ))
    fig.update_layout(
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        **CHART_LAYOUT,
    )
    fig.update_xaxes(title_text="Carbon price (A$/t)")
    fig.update_yaxes(title_text="A$ per year")
    return fig


def render(policy: PolicyAssumptions, inputs: UserInputs, results: Results) -> None:
    """Renders the Calculator tab content."""
    st.header("Household Carbon Dividend Calculator")

    left, right = st.columns([1, 2])
    with left:
        _render_inputs()

    with right:
        branding.render_headline(fmt.headline(results), results.net_benefit)
        st.write(fmt.narrative(results))

        c1, c2, c3 = st.columns(3)
        with c1:
            branding.render_card(
                "Household dividend",
                fmt.format_currency(results.household_dividend),
                f"{fmt.format_currency(results.household_dividend_monthly)} per month",
            )
        with c2:
            branding.render_card(
                "Extra household costs",
                fmt.format_currency(results.total_extra_cost),
                f"{fmt.format_currency(results.total_extra_cost_monthly)} per month",
            )
        with c3:
            branding.render_card(
                "Net benefit",
                fmt.format_currency(results.net_benefit, include_sign=True),
                f"{fmt.format_currency(results.net_benefit_monthly, include_sign=True)} per month",
                accent_class=branding.value_class(results.net_benefit),
            )

        branding.render_html("<div style='margin-top:16px'></div>")
        st.dataframe(fmt.results_table(results), use_container_width=True, hide_index=True)

    branding.render_html("<div style='margin-top:24px'></div>")
    g1, g2 = st.columns(2)
    with g1:
        with st.container(border=True):
            st.markdown("**Dividend vs extra costs (annual)**")
            st.plotly_chart(_breakdown_chart(results), use_container_width=True)
    with g2:
        with st.container(border=True):
            st.markdown("**Sensitivity to the carbon price**")
            st.plotly_chart(
                _sensitivity_chart(_sensitivity_frame(policy, inputs)),
                use_container_width=True,
            )
