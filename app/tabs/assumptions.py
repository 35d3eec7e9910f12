"""
Renders the Background Assumptions tab.

Every policy figure the model uses can be changed here. Entries are
validated when the box loses focus; a rejected entry is reverted to its
default and the reason shown underneath it.
"""
from __future__ import annotations

import streamlit as st

import app.branding as branding
import services.audit as audit
from app.session import (
    CARBON_PRICE_KEY,
    FIELD_ERRORS_KEY,
    field_key,
    on_carbon_price_change,
    on_field_change,
    reset_policy_fields,
)
from config.constants import DEFAULT_ADULT_SHARE, DEFAULT_POPULATION
from config.scenarios import CARBON_PRICE_OPTIONS
from core.dividend import PolicyAssumptions, eligible_adults_from_population

SECTIONS: list[tuple[str, list[tuple[str, str, str]]]] = [
    ("Scheme revenue", [
        ("total_covered_emissions",   "Covered emissions (Mt CO₂-e)",
         "Emissions subject to the carbon price, in megatonnes."),
        ("admin_cost_rate",           "Administration cost rate (0–1)",
         "Fraction of gross revenue retained to run the scheme."),
    ]),
    ("Dividend", [
        ("eligible_adult_population", "Eligible adult population",
         "Adults receiving one full dividend share. Must be greater than 0."),
        ("child_share_factor",        "Child share factor",
         "Fraction of an adult share paid per eligible child."),
    ]),
    ("Emissions factors", [
        ("grid_emissions_factor",     "Electricity (t CO₂-e / kWh)", ""),
        ("gas_emissions_factor",      "Gas (t CO₂-e / GJ)", ""),
        ("petrol_emissions_factor",   "Petrol (t CO₂-e / L)", ""),
    ]),
    ("Pass-through to consumer prices", [
        ("pass_through_electricity",  "Electricity (0–1)", ""),
        ("pass_through_gas",          "Gas (0–1)", ""),
        ("pass_through_petrol",       "Petrol (0–1)", ""),
    ]),
]


def _render_field(name: str, label: str, help_text: str) -> None:
    st.text_input(
        label,
        key=field_key(name),
        on_change=on_field_change,
        args=(name,),
        help=help_text or None,
    )
    errors = st.session_state.get(FIELD_ERRORS_KEY, {})
    branding.render_field_error(errors.get(name, ""))


def render(policy: PolicyAssumptions) -> None:
    """Renders the Background Assumptions tab content."""
    st.header("Background Assumptions")

    with st.container(border=True):
        st.subheader("Carbon price")
        st.selectbox(
            "Carbon price (A$ per tonne CO₂-e)",
            list(CARBON_PRICE_OPTIONS),
            key=CARBON_PRICE_KEY,
            on_change=on_carbon_price_change,
        )

    cols = st.columns(2)
    for i, (title, fields) in enumerate(SECTIONS):
        with cols[i % 2]:
            with st.container(border=True):
                st.subheader(title)
                for name, label, help_text in fields:
                    _render_field(name, label, help_text)

    with st.expander("Deriving eligible adults from population"):
        derived = eligible_adults_from_population(DEFAULT_POPULATION, DEFAULT_ADULT_SHARE)
        st.caption(
            f"Population {DEFAULT_POPULATION:,.0f} × adult share "
            f"{DEFAULT_ADULT_SHARE:.3f} = {derived:,.0f} eligible adults. "
            f"The model currently uses {policy.eligible_adult_population:,.0f}."
        )

    c1, c2 = st.columns(2)
    with c1:
        st.button(
            "Reset to defaults",
            type="secondary",
            use_container_width=True,
            on_click=reset_policy_fields,
        )
    with c2:
        if st.button("Clear change log", type="secondary", use_container_width=True):
            audit.clear_log()
            st.rerun()

    with st.container(border=True):
        st.subheader("Change log")
        entries = audit.get_log(10)
        if not entries:
            st.caption("No changes logged.")
        else:
            for entry in entries:
                st.text(f"{entry['ts'][-9:]} {entry['action']} {entry['details']}")
