# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Dividend Calculator — Canonical Constants Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for all policy defaults, household defaults and
# presentation constants. All modules MUST import from here — never redefine
# constants locally.
#
# Sources:
#   UNSW Australian Carbon Dividend Plan (policy model and formulas)
#   National Greenhouse Accounts Factors (fuel emissions intensities)
#   ABS National, state and territory population (population framing)
#
# This file has ZERO Streamlit, ZERO network, and ZERO side-effect imports.
# It is safe to import in any context, including unit tests without a
# running Streamlit server.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import math


# ─────────────────────────────────────────────────────────────────────────────
# POLICY ASSUMPTIONS — reference defaults
# Pre-fill the Background Assumptions tab; invalid entries revert to these.
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_CARBON_PRICE: float = 50.0                  # A$ / t CO₂-e
DEFAULT_TOTAL_COVERED_EMISSIONS: float = 466_000_000.0  # t CO₂-e
DEFAULT_ADMIN_COST_RATE: float = 0.10               # fraction of gross revenue
DEFAULT_ELIGIBLE_ADULT_POPULATION: float = 16_000_000.0
DEFAULT_CHILD_SHARE_FACTOR: float = 0.5             # adult shares per child

GRID_EMISSIONS_FACTOR: float = 0.0007    # t CO₂-e / kWh
GAS_EMISSIONS_FACTOR: float = 0.051      # t CO₂-e / GJ
PETROL_EMISSIONS_FACTOR: float = 0.0023  # t CO₂-e / L

DEFAULT_PASS_THROUGH: float = 1.0        # full pass-through to consumer prices

DEFAULT_POLICY_ASSUMPTIONS: dict[str, float] = {
    "carbon_price":              DEFAULT_CARBON_PRICE,
    "total_covered_emissions":   DEFAULT_TOTAL_COVERED_EMISSIONS,
    "admin_cost_rate":           DEFAULT_ADMIN_COST_RATE,
    "eligible_adult_population": DEFAULT_ELIGIBLE_ADULT_POPULATION,
    "child_share_factor":        DEFAULT_CHILD_SHARE_FACTOR,
    "grid_emissions_factor":     GRID_EMISSIONS_FACTOR,
    "gas_emissions_factor":      GAS_EMISSIONS_FACTOR,
    "petrol_emissions_factor":   PETROL_EMISSIONS_FACTOR,
    "pass_through_electricity":  DEFAULT_PASS_THROUGH,
    "pass_through_gas":          DEFAULT_PASS_THROUGH,
    "pass_through_petrol":       DEFAULT_PASS_THROUGH,
}


# ─────────────────────────────────────────────────────────────────────────────
# POPULATION FRAMING — derived input only
# eligible adults = population × adult share. Shown on the assumptions tab as
# a helper; never the source of truth for the dividend divisor.
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_POPULATION: float = 27_204_809.0
DEFAULT_ADULT_SHARE: float = 0.811   # adults (15+) as a fraction of population


# ─────────────────────────────────────────────────────────────────────────────
# HOUSEHOLD DEFAULTS — an average Australian household
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_USER_INPUTS: dict[str, float] = {
    "num_adults":             2,
    "num_children":           0,
    "annual_electricity_kwh": 5000.0,  # kWh / year
    "annual_gas_gj":          20.0,    # GJ / year
    "annual_petrol_l":        1600.0,  # L / year
}


# ─────────────────────────────────────────────────────────────────────────────
# FIELD BOUNDS — (min, max) accepted by the form validation layer
# Each tuple is inclusive. Eligible adults are additionally required to be
# strictly positive (see POSITIVE_FIELDS).
# ─────────────────────────────────────────────────────────────────────────────

FIELD_BOUNDS: dict[str, tuple[float, float]] = {
    "carbon_price":              (0.0, math.inf),
    "total_covered_emissions":   (0.0, math.inf),
    "admin_cost_rate":           (0.0, 1.0),
    "eligible_adult_population": (0.0, math.inf),
    "child_share_factor":        (0.0, math.inf),
    "grid_emissions_factor":     (0.0, math.inf),
    "gas_emissions_factor":      (0.0, math.inf),
    "petrol_emissions_factor":   (0.0, math.inf),
    "pass_through_electricity":  (0.0, 1.0),
    "pass_through_gas":          (0.0, 1.0),
    "pass_through_petrol":       (0.0, 1.0),
    "num_adults":                (0.0, math.inf),
    "num_children":              (0.0, math.inf),
    "annual_electricity_kwh":    (0.0, math.inf),
    "annual_gas_gj":             (0.0, math.inf),
    "annual_petrol_l":           (0.0, math.inf),
}

POSITIVE_FIELDS: frozenset[str] = frozenset({"eligible_adult_population"})


# ─────────────────────────────────────────────────────────────────────────────
# UNITS & PRESENTATION
# ─────────────────────────────────────────────────────────────────────────────

MONTHS_PER_YEAR: int = 12
TONNES_PER_MEGATONNE: float = 1_000_000.0

CURRENCY_CODE: str = "AUD"
CURRENCY_SYMBOL: str = "$"
UNDEFINED_PLACEHOLDER: str = "—"  # rendered wherever a value is not computable
