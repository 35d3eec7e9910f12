# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Dividend Calculator — In-Session Audit Log
# © 2026 Aparajita Parihar. All rights reserved.
#
# Logs assumption changes and fail-closed resets (an invalid entry replaced by
# its default), so a user can see why a figure moved.
# Storage: st.session_state ONLY — never persisted to disk or any database.
# The log is cleared on browser/session close.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations
import logging
from datetime import datetime, timezone

import streamlit as st

_LOG_KEY  = "_dividend_audit_log"
_MAX_SIZE = 50   # cap entries to prevent unbounded memory growth

logger = logging.getLogger(__name__)


def _ensure_log() -> None:
    if _LOG_KEY not in st.session_state:
        st.session_state[_LOG_KEY] = []


def _single_line(text: str) -> str:
    """Collapse line breaks so one event is always one line."""
    return " ".join(str(text).split())


def log_event(action: str, details: str) -> None:
    """
    Append an audit event to the in-session log.

    Parameters
    ----------
    action  : Short action label, e.g. "ASSUMPTION_CHANGED", "INPUT_RESET"
    details : Human-readable description; line breaks are collapsed.
    """
    action = _single_line(action)
    if not action:
        raise ValueError("Audit events require a non-empty action label.")
    _ensure_log()

    entry: dict = {
        "ts":      datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        "action":  action,
        "details": _single_line(details),
    }
    st.session_state[_LOG_KEY].append(entry)
    if len(st.session_state[_LOG_KEY]) > _MAX_SIZE:
        st.session_state[_LOG_KEY] = st.session_state[_LOG_KEY][-_MAX_SIZE:]
    logger.info("%s: %s", entry["action"], entry["details"])


def get_log(n: int = 10) -> list[dict]:
    """Return the last *n* audit log entries, most recent first."""
    _ensure_log()
    return list(reversed(st.session_state[_LOG_KEY][-n:]))


def clear_log() -> None:
    """Wipe the entire in-session log (e.g. on "Reset to defaults")."""
    st.session_state[_LOG_KEY] = []
