# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Dividend Calculator — Streamlit Application
# © 2026 Aparajita Parihar. All rights reserved.
#
# Estimates what a household would receive and pay under a fee-and-dividend
# carbon price. Three tabs: Calculator, Background Assumptions and
# Calculation Details.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations
import logging
import os
import sys

from dotenv import load_dotenv
# Load .env from project root (parent directory of app/)
_env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
load_dotenv(_env_path)

import streamlit as st

# ─────────────────────────────────────────────────────────────────────────────
# PATH SETUP — Ensure core and services modules are accessible
# ─────────────────────────────────────────────────────────────────────────────
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

import app.branding as branding
from app.session import _get_setting, init_session, raw_policy_values, raw_user_values
from app.tabs import assumptions as assumptions_tab
from app.tabs import calculator as calculator_tab
from app.tabs import details as details_tab
from app.utils import read_policy_assumptions, read_user_inputs
from core.dividend import PolicyAssumptions, Results, UserInputs, compute

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Root logging from ``CARBON_DIVIDEND_LOG_LEVEL`` (default INFO)."""
    level_name = str(_get_setting("CARBON_DIVIDEND_LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def calculate_from_session() -> tuple[PolicyAssumptions, UserInputs, Results]:
    """Read the forms, fail closed on any bad entry, and run the model once."""
    policy, policy_errors = read_policy_assumptions(raw_policy_values())
    inputs, input_errors = read_user_inputs(raw_user_values())
    for name, message in {**policy_errors, **input_errors}.items():
        logger.warning("Using default for %s: %s", name, message)
    return policy, inputs, compute(policy, inputs)


def run() -> None:
    st.set_page_config(**branding.PAGE_CONFIG)
    branding.inject_branding()
    configure_logging()
    init_session()

    policy, inputs, results = calculate_from_session()

    tab_calc, tab_assumptions, tab_details = st.tabs([
        "🧮 Calculator",
        "⚙️ Background Assumptions",
        "📋 Calculation Details",
    ])
    with tab_calc:
        calculator_tab.render(policy, inputs, results)
    with tab_assumptions:
        assumptions_tab.render(policy)
    with tab_details:
        details_tab.render(policy, results)

    branding.render_footer()


if __name__ == "__main__":
    run()
