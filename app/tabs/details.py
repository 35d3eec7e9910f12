import streamlit as st

import core.formatting as fmt
from core.dividend import PolicyAssumptions, Results


def render(policy: PolicyAssumptions, results: Results) -> None:
    """Renders the Calculation Details tab."""
    st.header("Calculation Details")

    with st.container(border=True):
        st.markdown("**Step-by-step figures**")
        st.dataframe(fmt.details_table(results), use_container_width=True, hide_index=True)

    with st.expander("Formulas"):
        st.markdown(
            "- Gross revenue = carbon price × covered emissions\n"
            "- Net revenue = gross revenue × (1 − administration cost rate)\n"
            "- Dividend per adult = net revenue ÷ eligible adult population\n"
            "- Household dividend = (adults + child share factor × children) × dividend per adult\n"
            "- Extra cost per unit = carbon price × emissions factor × pass-through rate\n"
            "- Annual fuel cost = annual usage × extra cost per unit\n"
            "- Net benefit = household dividend − total extra cost\n"
            "- Monthly figures = annual figures ÷ 12"
        )
        st.caption(
            f"Current carbon price: {fmt.format_currency(policy.carbon_price)} per tonne. "
            "Figures are unrounded until displayed."
        )
