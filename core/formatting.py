"""Presentation helpers for dividend results.

Turns model figures into display strings and summary tables. Rounding happens
here and only here; nothing returned from this module is fed back into the
model. ``None`` (a figure that cannot be computed) always renders as the
placeholder rather than as zero.

No Streamlit imports, so the tables can be checked in plain unit tests.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd

from config.constants import CURRENCY_SYMBOL, UNDEFINED_PLACEHOLDER
from core.dividend import Results


def format_currency(
    value: Optional[float], include_sign: bool = False, decimals: int = 2
) -> str:
    """Format as Australian dollars, e.g. ``$1,310.63`` or ``-$42.00``.

    ``include_sign`` prefixes strictly positive values with ``+`` so gains and
    losses read differently in the net benefit column.
    """
    if value is None:
        return UNDEFINED_PLACEHOLDER
    formatted = f"{CURRENCY_SYMBOL}{abs(value):,.{decimals}f}"
    if value < 0:
        return "-" + formatted
    if include_sign and value > 0:
        return "+" + formatted
    return formatted


def format_unit_cost(value: Optional[float], unit: str, decimals: int = 4) -> str:
    """Per-unit fuel cost with its unit suffix, e.g. ``$0.0350/kWh``."""
    if value is None:
        return UNDEFINED_PLACEHOLDER
    return f"{format_currency(value, decimals=decimals)}{unit}"


def net_benefit_label(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    return "benefit" if value >= 0 else "cost"


# ─────────────────────────────────────────────────────────────────────────────
# HEADLINE & NARRATIVE
# ─────────────────────────────────────────────────────────────────────────────

NOT_COMPUTABLE_HEADLINE = "Unable to calculate net benefit with invalid population values."
NOT_COMPUTABLE_NARRATIVE = (
    "With these settings, dividend calculation is not possible "
    "(e.g., the eligible adult population is zero). "
    "Please check the Background Assumptions."
)


def headline(results: Results) -> str:
    """One-line summary. A net cost is shown as a positive amount labelled 'cost'."""
    benefit = results.net_benefit
    if benefit is None:
        return NOT_COMPUTABLE_HEADLINE
    label = net_benefit_label(benefit)
    return (
        f"Your household's net {label} is {format_currency(abs(benefit))} per year."
    )


def narrative(results: Results) -> str:
    benefit = results.net_benefit
    if benefit is None:
        return NOT_COMPUTABLE_NARRATIVE
    return (
        "With these settings, the total funds available for dividends are derived "
        "from the carbon price on covered emissions. Your household receives a "
        f"total annual dividend of {format_currency(results.household_dividend)} "
        f"and pays an estimated {format_currency(results.total_extra_cost)} in extra "
        f"costs, giving a net {net_benefit_label(benefit)} of "
        f"{format_currency(abs(benefit))} per year."
    )


# ─────────────────────────────────────────────────────────────────────────────
# TABLES
# ─────────────────────────────────────────────────────────────────────────────

def results_table(results: Results) -> pd.DataFrame:
    """Annual / monthly summary shown on the Calculator tab."""
    r = results
    rows = [
        ("Dividend per adult", r.per_adult_dividend, r.per_adult_dividend_monthly, False),
        ("Household dividend", r.household_dividend, r.household_dividend_monthly, False),
        ("Extra household costs", r.total_extra_cost, r.total_extra_cost_monthly, False),
        ("Net benefit", r.net_benefit, r.net_benefit_monthly, True),
    ]
    return pd.DataFrame(
        [
            {
                "Item": item,
                "Annual": format_currency(annual, include_sign=signed),
                "Monthly": format_currency(month, include_sign=signed),
            }
            for item, annual, month, signed in rows
        ]
    )


def details_table(results: Results) -> pd.DataFrame:
    """Step-by-step figures shown on the Calculation Details tab."""
    r = results
    unit = r.extra_cost_per_unit
    fuel = r.annual_fuel_costs
    rows = [
        ("Gross scheme revenue", format_currency(r.gross_revenue)),
        ("Net revenue for dividends", format_currency(r.net_revenue)),
        ("Dividend per adult (annual)", format_currency(r.per_adult_dividend)),
        ("Extra cost per kWh of electricity", format_unit_cost(unit.electricity, "/kWh")),
        ("Extra cost per GJ of gas", format_unit_cost(unit.gas, "/GJ")),
        ("Extra cost per litre of petrol", format_unit_cost(unit.petrol, "/L")),
        ("Annual electricity cost", format_currency(fuel.electricity)),
        ("Annual gas cost", format_currency(fuel.gas)),
        ("Annual petrol cost", format_currency(fuel.petrol)),
        ("Total annual household cost", format_currency(r.total_extra_cost)),
        ("Annual household dividend", format_currency(r.household_dividend)),
        ("Net annual benefit", format_currency(r.net_benefit, include_sign=True)),
    ]
    return pd.DataFrame(rows, columns=["Step", "Value"])
