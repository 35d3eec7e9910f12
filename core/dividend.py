# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Dividend Calculator — Core Dividend Model
# © 2026 Aparajita Parihar. All rights reserved.
#
# Fee-and-dividend model after the UNSW Australian Carbon Dividend Plan.
#   G  = P × E                          gross scheme revenue
#   N  = G × (1 − admin)                net revenue for dividends
#   Da = N ÷ eligible adults            per-adult dividend
#   Dh = (adults + c × children) × Da   household dividend
#   Δp = P × EF × PT                    extra cost per unit of fuel
#   ΔC = usage × Δp                     annual extra cost per fuel
#
# Pure and stateless: no Streamlit, no I/O, no rounding. A dividend that
# cannot be computed is ``None`` and stays ``None`` through every dependent
# figure; fuel costs are always numeric.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, replace
from typing import Iterable, Optional

from config.constants import (
    DEFAULT_POLICY_ASSUMPTIONS,
    DEFAULT_USER_INPUTS,
    MONTHS_PER_YEAR,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# RECORDS
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PolicyAssumptions:
    """Scheme-wide settings. Rates are fractions in [0, 1]."""

    carbon_price: float
    total_covered_emissions: float
    admin_cost_rate: float
    eligible_adult_population: float
    child_share_factor: float
    grid_emissions_factor: float
    gas_emissions_factor: float
    petrol_emissions_factor: float
    pass_through_electricity: float
    pass_through_gas: float
    pass_through_petrol: float

    @classmethod
    def defaults(cls, **overrides: float) -> "PolicyAssumptions":
        """Build from ``DEFAULT_POLICY_ASSUMPTIONS`` with optional overrides."""
        return cls(**{**DEFAULT_POLICY_ASSUMPTIONS, **overrides})

    @classmethod
    def from_population(
        cls,
        population: float,
        adult_share: float,
        **overrides: float,
    ) -> "PolicyAssumptions":
        """Build with the eligible adult count derived as population × adult share.

        A non-positive or non-finite product is passed through unchanged so the
        model reports the dividend as not computable.
        """
        overrides["eligible_adult_population"] = eligible_adults_from_population(
            population, adult_share
        )
        return cls.defaults(**overrides)


@dataclass(frozen=True)
class UserInputs:
    """Household composition and annual fuel use."""

    num_adults: float
    num_children: float
    annual_electricity_kwh: float
    annual_gas_gj: float
    annual_petrol_l: float

    @classmethod
    def defaults(cls, **overrides: float) -> "UserInputs":
        return cls(**{**DEFAULT_USER_INPUTS, **overrides})


@dataclass(frozen=True)
class FuelCosts:
    """One figure per fuel: A$/unit or A$/year depending on context."""

    electricity: float
    gas: float
    petrol: float

    @property
    def total(self) -> float:
        return total_extra_cost(self)


@dataclass(frozen=True)
class Results:
    gross_revenue: float
    net_revenue: float
    per_adult_dividend: Optional[float]
    per_adult_dividend_monthly: Optional[float]
    household_dividend: Optional[float]
    household_dividend_monthly: Optional[float]
    extra_cost_per_unit: FuelCosts
    annual_fuel_costs: FuelCosts
    total_extra_cost: float
    total_extra_cost_monthly: float
    net_benefit: Optional[float]
    net_benefit_monthly: Optional[float]

    @property
    def is_dividend_computable(self) -> bool:
        return self.per_adult_dividend is not None

    def to_dict(self) -> dict:
        """Flatten to a single-level dict; per-fuel figures get fuel suffixes."""
        flat = asdict(self)
        for group in ("extra_cost_per_unit", "annual_fuel_costs"):
            for fuel, value in flat.pop(group).items():
                flat[f"{group}_{fuel}"] = value
        return flat


# ─────────────────────────────────────────────────────────────────────────────
# DERIVED INPUTS — alternate framings of the canonical fields
# ─────────────────────────────────────────────────────────────────────────────

def eligible_adults_from_population(population: float, adult_share: float) -> float:
    return population * adult_share


def admin_cost_rate_from_rebate_share(household_rebate_share: float) -> float:
    """Household rebate share (fraction paid out) → admin cost rate (fraction kept)."""
    return 1.0 - household_rebate_share


# ─────────────────────────────────────────────────────────────────────────────
# FORMULAS
# ─────────────────────────────────────────────────────────────────────────────

def gross_revenue(carbon_price: float, covered_emissions: float) -> float:
    return carbon_price * covered_emissions


def net_revenue(gross: float, admin_cost_rate: float) -> float:
    """Revenue left for dividends. ``admin_cost_rate`` must already be in [0, 1]."""
    return gross * (1.0 - admin_cost_rate)


def per_adult_dividend(net: float, eligible_adult_population: float) -> Optional[float]:
    """
    Annual dividend per eligible adult.

    Returns ``None`` when the population is zero, negative or non-finite.
    Zero would read as "no dividend", which is a different answer from
    "cannot be calculated".
    """
    if not math.isfinite(eligible_adult_population) or eligible_adult_population <= 0:
        logger.warning(
            "Invalid eligible adult population for dividend calculation: %r",
            eligible_adult_population,
        )
        return None
    return net / eligible_adult_population


def household_dividend(
    num_adults: float,
    num_children: float,
    child_share_factor: float,
    adult_dividend: Optional[float],
) -> Optional[float]:
    if adult_dividend is None:
        return None
    return (num_adults + child_share_factor * num_children) * adult_dividend


def extra_cost_per_unit(
    carbon_price: float, emissions_factor: float, pass_through_rate: float
) -> float:
    return carbon_price * emissions_factor * pass_through_rate


def annual_fuel_cost(usage: float, cost_per_unit: float) -> float:
    return usage * cost_per_unit


def total_extra_cost(costs: FuelCosts) -> float:
    return costs.electricity + costs.gas + costs.petrol


def net_benefit(household: Optional[float], total_cost: float) -> Optional[float]:
    """Dividend received minus extra fuel costs paid. Negative means net cost."""
    if household is None:
        return None
    return household - total_cost


def monthly(annual_value: Optional[float]) -> Optional[float]:
    if annual_value is None:
        return None
    return annual_value / MONTHS_PER_YEAR


# ─────────────────────────────────────────────────────────────────────────────
# PUBLIC ENTRY POINT
# ─────────────────────────────────────────────────────────────────────────────

def compute(policy: PolicyAssumptions, inputs: UserInputs) -> Results:
    """
    Evaluate the full model for one household under one set of assumptions.

    Inputs are expected to be validated by the caller (see app/utils.py).
    Recomputed from scratch on every call; nothing is cached or retained.
    """
    p = policy
    u = inputs

    gross = gross_revenue(p.carbon_price, p.total_covered_emissions)
    net = net_revenue(gross, p.admin_cost_rate)
    adult = per_adult_dividend(net, p.eligible_adult_population)
    household = household_dividend(
        u.num_adults, u.num_children, p.child_share_factor, adult
    )

    per_unit = FuelCosts(
        electricity=extra_cost_per_unit(
            p.carbon_price, p.grid_emissions_factor, p.pass_through_electricity
        ),
        gas=extra_cost_per_unit(
            p.carbon_price, p.gas_emissions_factor, p.pass_through_gas
        ),
        petrol=extra_cost_per_unit(
            p.carbon_price, p.petrol_emissions_factor, p.pass_through_petrol
        ),
    )
    fuel_costs = FuelCosts(
        electricity=annual_fuel_cost(u.annual_electricity_kwh, per_unit.electricity),
        gas=annual_fuel_cost(u.annual_gas_gj, per_unit.gas),
        petrol=annual_fuel_cost(u.annual_petrol_l, per_unit.petrol),
    )
    total_cost = total_extra_cost(fuel_costs)
    benefit = net_benefit(household, total_cost)

    return Results(
        gross_revenue=gross,
        net_revenue=net,
        per_adult_dividend=adult,
        per_adult_dividend_monthly=monthly(adult),
        household_dividend=household,
        household_dividend_monthly=monthly(household),
        extra_cost_per_unit=per_unit,
        annual_fuel_costs=fuel_costs,
        total_extra_cost=total_cost,
        total_extra_cost_monthly=monthly(total_cost),
        net_benefit=benefit,
        net_benefit_monthly=monthly(benefit),
    )


def price_sensitivity(
    policy: PolicyAssumptions, inputs: UserInputs, prices: Iterable[float]
) -> list[tuple[float, Results]]:
    """Evaluate ``compute`` once per carbon price, all else held fixed."""
    return [
        (price, compute(replace(policy, carbon_price=price), inputs))
        for price in prices
    ]
