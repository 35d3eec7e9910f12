"""
Session & audit tests — app/session.py, services/audit.py
=========================================================
``st.session_state`` is replaced with a plain dict so the form callbacks can
be exercised without a Streamlit runtime.
"""
from __future__ import annotations

import os
import sys

import pytest

_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _root not in sys.path:
    sys.path.insert(0, _root)

import app.session as session
import services.audit as audit
from app.utils import read_policy_assumptions, read_user_inputs
from config.constants import DEFAULT_POLICY_ASSUMPTIONS
from config.scenarios import CARBON_PRICE_OPTIONS, DEFAULT_CARBON_PRICE_LABEL


@pytest.fixture
def state(monkeypatch):
    fake: dict = {}
    monkeypatch.setattr(session.st, "session_state", fake)
    session.init_session()
    return fake


# ─────────────────────────────────────────────────────────────────────────────
# Initialisation
# ─────────────────────────────────────────────────────────────────────────────

class TestInitSession:

    def test_defaults_populated(self, state):
        assert state[session.CARBON_PRICE_KEY] == DEFAULT_CARBON_PRICE_LABEL
        assert state[session.field_key("num_adults")] == "2"
        assert state[session.field_key("total_covered_emissions")] == "466"
        assert state[session.field_key("eligible_adult_population")] == "16000000"
        assert state[session.field_key("grid_emissions_factor")] == "0.0007"
        assert state[session.FIELD_ERRORS_KEY] == {}

    def test_idempotent(self, state):
        state[session.field_key("num_adults")] = "4"
        session.init_session()
        assert state[session.field_key("num_adults")] == "4"

    def test_default_form_reads_back_to_defaults(self, state):
        policy, policy_errors = read_policy_assumptions(session.raw_policy_values())
        inputs, input_errors = read_user_inputs(session.raw_user_values())
        assert policy_errors == {} and input_errors == {}
        assert policy.carbon_price == CARBON_PRICE_OPTIONS[DEFAULT_CARBON_PRICE_LABEL]
        assert policy.total_covered_emissions == pytest.approx(
            DEFAULT_POLICY_ASSUMPTIONS["total_covered_emissions"]
        )
        assert inputs.num_adults == 2


# ─────────────────────────────────────────────────────────────────────────────
# Field callbacks — fail closed
# ─────────────────────────────────────────────────────────────────────────────

class TestFieldChange:

    def test_invalid_entry_reverted(self, state):
        key = session.field_key("eligible_adult_population")
        state[key] = "0"
        session.on_field_change("eligible_adult_population")
        assert state[key] == "16000000"
        assert "Reverted to default" in state[session.FIELD_ERRORS_KEY]["eligible_adult_population"]
        assert audit.get_log(1)[0]["action"] == "INPUT_RESET"

    def test_valid_entry_kept_and_error_cleared(self, state):
        key = session.field_key("admin_cost_rate")
        state[session.FIELD_ERRORS_KEY]["admin_cost_rate"] = "old message"
        state[key] = "0.2"
        session.on_field_change("admin_cost_rate")
        assert state[key] == "0.2"
        assert "admin_cost_rate" not in state[session.FIELD_ERRORS_KEY]
        assert audit.get_log(1)[0]["action"] == "INPUT_CHANGED"

    def test_empty_entry_restores_default_text(self, state):
        key = session.field_key("annual_gas_gj")
        state[key] = ""
        session.on_field_change("annual_gas_gj")
        assert state[key] == "20"

    def test_reset_policy_fields(self, state):
        state[session.field_key("admin_cost_rate")] = "0.5"
        state[session.CARBON_PRICE_KEY] = list(CARBON_PRICE_OPTIONS)[-1]
        session.reset_policy_fields()
        assert state[session.field_key("admin_cost_rate")] == "0.1"
        assert state[session.CARBON_PRICE_KEY] == DEFAULT_CARBON_PRICE_LABEL
        assert audit.get_log(1)[0]["action"] == "ASSUMPTIONS_RESET"


def test_get_setting_falls_back_to_env(monkeypatch):
    monkeypatch.setattr(session.st, "secrets", {})
    monkeypatch.setenv("CARBON_DIVIDEND_LOG_LEVEL", "DEBUG")
    assert session._get_setting("CARBON_DIVIDEND_LOG_LEVEL", "INFO") == "DEBUG"
    monkeypatch.delenv("CARBON_DIVIDEND_LOG_LEVEL")
    assert session._get_setting("CARBON_DIVIDEND_LOG_LEVEL", "INFO") == "INFO"


# ─────────────────────────────────────────────────────────────────────────────
# Audit log
# ─────────────────────────────────────────────────────────────────────────────

class TestAuditLog:

    def test_most_recent_first(self, state):
        audit.log_event("A", "first")
        audit.log_event("B", "second")
        entries = audit.get_log(2)
        assert [e["action"] for e in entries] == ["B", "A"]

    def test_capped(self, state):
        for i in range(audit._MAX_SIZE + 10):
            audit.log_event("INPUT_CHANGED", f"n = {i}")
        assert len(state[audit._LOG_KEY]) == audit._MAX_SIZE
        assert audit.get_log(1)[0]["details"] == f"n = {audit._MAX_SIZE + 9}"

    def test_line_breaks_collapsed(self, state):
        audit.log_event("INPUT\nCHANGED", "a\r\nb")
        entry = audit.get_log(1)[0]
        assert entry["action"] == "INPUT CHANGED"
        assert entry["details"] == "a b"

    def test_empty_action_rejected(self, state):
        with pytest.raises(ValueError):
            audit.log_event("  ", "details")

    def test_clear(self, state):
        audit.log_event("A", "x")
        audit.clear_log()
        assert audit.get_log() == []
