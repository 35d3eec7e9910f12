# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Dividend Calculator — Session State Management
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single responsibility: own the complete st.session_state initialisation
# contract for the entire application.
#
# Rules:
#   • init_session() is idempotent — call it every run(), it never overwrites
#     existing values (uses setdefault exclusively).
#   • No module outside this file may write a NEW top-level session key
#     without first registering it here.
#   • Reading st.session_state keys from any module is unrestricted.
#   • _get_setting() is the sole settings access point for the application.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import os

import streamlit as st

import services.audit as audit
from app.utils import validate_named_field
from config.constants import (
    DEFAULT_POLICY_ASSUMPTIONS,
    DEFAULT_USER_INPUTS,
    TONNES_PER_MEGATONNE,
)
from config.scenarios import CARBON_PRICE_OPTIONS, DEFAULT_CARBON_PRICE_LABEL


# Policy fields typed as free text (carbon price is a select-box).
POLICY_TEXT_FIELDS: tuple[str, ...] = tuple(
    name for name in DEFAULT_POLICY_ASSUMPTIONS if name != "carbon_price"
)
HOUSEHOLD_FIELDS: tuple[str, ...] = tuple(DEFAULT_USER_INPUTS)

CARBON_PRICE_KEY = "carbon_price_label"
FIELD_ERRORS_KEY = "field_errors"


# ─────────────────────────────────────────────────────────────────────────────
# SETTINGS ACCESS POINT
# The ONLY function in the application permitted to read st.secrets or
# os.getenv. All callers use _get_setting() — never st.secrets directly.
# ─────────────────────────────────────────────────────────────────────────────

def _get_setting(key: str, default: str = "") -> str:
    """Read a setting from Streamlit Secrets, falling back to environment variable.

    Priority: st.secrets[key]  →  os.getenv(key, default)

    Never raises; returns ``default`` if the key is absent from both sources.
    """
    try:
        return st.secrets[key]
    except (KeyError, AttributeError, FileNotFoundError):
        return os.getenv(key, default)


# ─────────────────────────────────────────────────────────────────────────────
# FORM KEYS & DEFAULT TEXT
# ─────────────────────────────────────────────────────────────────────────────

def field_key(name: str) -> str:
    return f"inp_{name}"


def _number_text(value: float) -> str:
    """Render a default for a text box: ``16000000`` not ``1.6e+07``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def default_text(name: str) -> str:
    """Default text shown in the form box for *name* (emissions in Mt)."""
    if name == "total_covered_emissions":
        return _number_text(DEFAULT_POLICY_ASSUMPTIONS[name] / TONNES_PER_MEGATONNE)
    if name in DEFAULT_USER_INPUTS:
        return _number_text(DEFAULT_USER_INPUTS[name])
    return _number_text(DEFAULT_POLICY_ASSUMPTIONS[name])


# ─────────────────────────────────────────────────────────────────────────────
# SESSION STATE INITIALISATION
# ─────────────────────────────────────────────────────────────────────────────

def init_session() -> None:
    """Idempotently initialise all application session state keys.

    Uses ``st.session_state.setdefault()`` throughout — existing values are
    never overwritten.  Call this as the first action inside ``run()`` after
    ``st.set_page_config()`` and ``inject_branding()``.

    Session key registry (authoritative):

    Household form
    ──────────────
    inp_<household field>     str          Raw text of each household input

    Background assumptions form
    ───────────────────────────
    carbon_price_label        str          Selected CARBON_PRICE_OPTIONS label
    inp_<policy field>        str          Raw text of each policy input
                                           (covered emissions in Mt)

    Validation
    ──────────
    field_errors              dict         field name → last rejection message
    """
    ss = st.session_state

    # ── Household form ────────────────────────────────────────────────────────
    for name in HOUSEHOLD_FIELDS:
        ss.setdefault(field_key(name), default_text(name))

    # ── Background assumptions form ───────────────────────────────────────────
    ss.setdefault(CARBON_PRICE_KEY, DEFAULT_CARBON_PRICE_LABEL)
    for name in POLICY_TEXT_FIELDS:
        ss.setdefault(field_key(name), default_text(name))

    # ── Validation ────────────────────────────────────────────────────────────
    ss.setdefault(FIELD_ERRORS_KEY, {})


# ─────────────────────────────────────────────────────────────────────────────
# FORM CALLBACKS
# Run before the next script pass, so widget keys may be rewritten here.
# ─────────────────────────────────────────────────────────────────────────────

def on_field_change(name: str) -> None:
    """Validate an edited field; revert it to its default if rejected."""
    ss = st.session_state
    key = field_key(name)
    default = default_text(name)
    result = validate_named_field(name, ss.get(key), float(default))
    errors = ss.setdefault(FIELD_ERRORS_KEY, {})
    if result.is_valid:
        errors.pop(name, None)
        if str(ss.get(key, "")).strip() == "":
            ss[key] = default
        audit.log_event("INPUT_CHANGED", f"{name} = {ss[key]}")
        return

    errors[name] = f"{result.error} Reverted to default ({default})."
    audit.log_event("INPUT_RESET", f"{name}: '{ss.get(key)}' rejected, reverted to {default}")
    ss[key] = default


def on_carbon_price_change() -> None:
    label = st.session_state.get(CARBON_PRICE_KEY)
    audit.log_event("CARBON_PRICE_CHANGED", f"carbon_price = {CARBON_PRICE_OPTIONS.get(label)}")


def reset_policy_fields() -> None:
    """Restore every background assumption to its published default."""
    ss = st.session_state
    ss[CARBON_PRICE_KEY] = DEFAULT_CARBON_PRICE_LABEL
    for name in POLICY_TEXT_FIELDS:
        ss[field_key(name)] = default_text(name)
        ss.setdefault(FIELD_ERRORS_KEY, {}).pop(name, None)
    audit.log_event("ASSUMPTIONS_RESET", "All background assumptions restored to defaults")


# ─────────────────────────────────────────────────────────────────────────────
# RAW FORM SNAPSHOTS — fed to app.utils readers
# ─────────────────────────────────────────────────────────────────────────────

def raw_policy_values() -> dict[str, str | float | None]:
    ss = st.session_state
    raw: dict[str, str | float | None] = {
        name: ss.get(field_key(name)) for name in POLICY_TEXT_FIELDS
    }
    raw["carbon_price"] = CARBON_PRICE_OPTIONS.get(ss.get(CARBON_PRICE_KEY))
    return raw


def raw_user_values() -> dict[str, str | None]:
    ss = st.session_state
    return {name: ss.get(field_key(name)) for name in HOUSEHOLD_FIELDS}
