# ═══════════════════════════════════════════════════════════════════════════════
# Carbon Dividend Calculator — Carbon Price Preset Registry
# © 2026 Aparajita Parihar. All rights reserved.
#
# Single source of truth for:
#   • CARBON_PRICE_OPTIONS  — selectable carbon price presets (A$/t CO₂-e)
#   • DEFAULT_CARBON_PRICE_LABEL — preset selected on first load
#
# The carbon price is chosen from a fixed list rather than typed, so it never
# passes through the free-text validation path.
#
# This file has ZERO Streamlit and ZERO network imports.
# It is safe to import in unit tests and CLI contexts.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

from config.constants import DEFAULT_CARBON_PRICE

# ─────────────────────────────────────────────────────────────────────────────
# CARBON PRICE PRESETS
# Keys are display labels; values are prices in A$ per tonne. Order is the
# order shown in the select-box and on the sensitivity chart x-axis.
# ─────────────────────────────────────────────────────────────────────────────

CARBON_PRICE_OPTIONS: dict[str, float] = {
    "A$25/t — Low starting price":       25.0,
    "A$50/t — Reference price":          50.0,
    "A$75/t — Moderate trajectory":      75.0,
    "A$100/t — Ambitious trajectory":    100.0,
    "A$150/t — Social cost of carbon":   150.0,
}


def label_for_price(price: float) -> str | None:
    """Return the preset label for *price*, or ``None`` if it is not a preset."""
    for label, value in CARBON_PRICE_OPTIONS.items():
        if value == price:
            return label
    return None


DEFAULT_CARBON_PRICE_LABEL: str = label_for_price(DEFAULT_CARBON_PRICE) or next(
    iter(CARBON_PRICE_OPTIONS)
)
