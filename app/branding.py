"""
Handles visual branding: CSS, page configuration, KPI cards and the footer
rendered at the bottom of the calculator.

Positive/negative colouring of net benefit figures is driven by the
``positive-value`` / ``negative-value`` classes defined here.
"""
from __future__ import annotations

import html

import streamlit as st

from config.constants import UNDEFINED_PLACEHOLDER

# ─────────────────────────────────────────────────────────────────────────────
# CSS
# ─────────────────────────────────────────────────────────────────────────────
DIVIDEND_CSS = """
/* ── Headline ──────────────────────────────────────────────────────────── */
.dividend-headline {
  font-size: 1.6rem;
  font-weight: 700;
  margin: 8px 0 4px;
}
.positive-value { color: #1DB87A; }
.negative-value { color: #E84C4C; }
.neutral-value  { color: #5A7A90; }

/* ── KPI cards ─────────────────────────────────────────────────────────── */
.kpi-card {
  border: 1px solid #E8EEF4;
  border-radius: 8px;
  padding: 12px 16px;
  background: #FFFFFF;
}
.kpi-label   { font-size: 0.82rem; color: #5A7A90; font-weight: 600; }
.kpi-value   { font-size: 1.4rem; font-weight: 700; color: #071A2F; }
.kpi-subtext { font-size: 0.78rem; color: #5A7A90; }

/* ── Inline field errors ───────────────────────────────────────────────── */
.field-error {
  color: #E84C4C;
  font-size: 0.8rem;
  margin: -8px 0 8px;
}

/* ── Footer ────────────────────────────────────────────────────────────── */
.ent-footer {
  margin-top: 48px;
  padding-top: 16px;
  border-top: 1px solid #E8EEF4;
  text-align: center;
  color: #5A7A90;
  font-size: 0.8rem;
}

/* ── Tabs ──────────────────────────────────────────────────────────────── */
.stTabs [data-baseweb="tab"] {
  pointer-events: auto;
  cursor: pointer;
}
"""


# ── Injection helpers ────────────────────────────────────────────────────────

def inject_branding() -> None:
    """Injects the calculator CSS into the current Streamlit page.
    Safe to call multiple times — Streamlit deduplicates identical markdown."""
    st.markdown(f"<style>{DIVIDEND_CSS}</style>", unsafe_allow_html=True)


def render_html(html_content: str) -> None:
    """Central gateway for raw HTML rendering.

    All unsafe_allow_html=True calls outside branding.py must route through
    here. Callers must html.escape() any user-supplied values before passing
    them in.
    """
    st.markdown(html_content, unsafe_allow_html=True)


def value_class(value: float | None) -> str:
    """CSS class for a signed figure; ``None`` gets the neutral colour."""
    if value is None:
        return "neutral-value"
    return "positive-value" if value >= 0 else "negative-value"


# ── UI component helpers ─────────────────────────────────────────────────────

def render_card(label: str, value: str, subtext: str, accent_class: str = "") -> None:
    """Renders a compact KPI metric card."""
    render_html(
        f"""
        <div class="kpi-card"
             role="group"
             aria-label="{html.escape(label)}: {html.escape(value)}">
            <div class="kpi-label"   aria-hidden="true">{html.escape(label)}</div>
            <div class="kpi-value {accent_class}" aria-hidden="true">{html.escape(value)}</div>
            <div class="kpi-subtext" aria-hidden="true">{html.escape(subtext)}</div>
        </div>
        """
    )


def render_headline(text: str, value: float | None) -> None:
    render_html(
        f'<div class="dividend-headline {value_class(value)}">{html.escape(text)}</div>'
    )


def render_field_error(message: str) -> None:
    if message:
        render_html(f'<div class="field-error">{html.escape(message)}</div>')


def render_footer() -> None:
    """Renders the footer at the bottom of the page."""
    render_html(
        f"""
        <div class="ent-footer" role="contentinfo">
            Carbon Dividend Calculator &nbsp;·&nbsp; Results are indicative only.
            <br>
            Model: UNSW Australian Carbon Dividend Plan &nbsp;·&nbsp;
            Figures shown as {html.escape(UNDEFINED_PLACEHOLDER)} cannot be
            calculated with the current assumptions.
            <br>
            © 2026 Aparajita Parihar. All rights reserved.
        </div>
        """
    )


# ── Streamlit page configuration ─────────────────────────────────────────────
# Imported by main.py and passed directly to st.set_page_config().
PAGE_CONFIG = {
    "page_title": "Carbon Dividend Calculator",
    "page_icon": "🌏",
    "layout": "wide",
    "initial_sidebar_state": "collapsed",
    "menu_items": {
        "About": (
            "**Carbon Dividend Calculator**\n\n"
            "Estimates a household's carbon dividend, extra fuel costs and "
            "net benefit under a fee-and-dividend carbon price.\n\n"
            "© 2026 Aparajita Parihar. All rights reserved."
        ),
    },
}
