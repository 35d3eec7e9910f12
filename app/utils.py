"""Form-input helpers used across the calculator tabs.

Keeping non-Streamlit logic in a separate module makes it easier to test
without spinning up a full Streamlit runtime.

Every reader here fails closed: an empty, malformed or out-of-range entry is
replaced by the published default from ``config/constants.py`` and reported
back as an error message, so the model only ever sees validated numbers.
"""

from __future__ import annotations

import math
from typing import Any, NamedTuple

from config.constants import (
    DEFAULT_POLICY_ASSUMPTIONS,
    DEFAULT_USER_INPUTS,
    FIELD_BOUNDS,
    POSITIVE_FIELDS,
    TONNES_PER_MEGATONNE,
)
from core.dividend import PolicyAssumptions, UserInputs


class FieldResult(NamedTuple):
    is_valid: bool
    value: float
    error: str = ""


# Messages shown when a value parses but would make the dividend meaningless.
SPECIAL_MESSAGES: dict[str, str] = {
    "eligible_adult_population": (
        "Eligible adult population must be greater than 0 for dividend calculations."
    ),
}


# ─────────────────────────────────────────────────────────────────────────────
# NUMERIC SAFETY HELPERS
# ─────────────────────────────────────────────────────────────────────────────

def _safe_number(value: Any, default: float = 0.0) -> float:
    """Coerce a potentially-missing or malformed value to float.

    Returns ``default`` for ``None``, non-numeric strings, and any value that
    cannot be converted by ``float()``.  Never raises.
    """
    try:
        if value is None:
            return default
        return float(value)
    except (TypeError, ValueError):
        return default


def _format_bound(bound: float) -> str:
    return f"{bound:g}"


# ─────────────────────────────────────────────────────────────────────────────
# FIELD VALIDATION
# ─────────────────────────────────────────────────────────────────────────────

def validate_field(
    raw: Any,
    default: float,
    min_value: float = 0.0,
    max_value: float = math.inf,
    special_msg: str = "",
    must_be_positive: bool = False,
) -> FieldResult:
    """Parse and range-check one form entry.

    * empty / ``None``        → default, valid, no message
    * not a finite number     → default, "Invalid: must be a number."
    * below ``min_value``     → default, ``special_msg`` or a minimum message
    * above ``max_value``     → default, a maximum message
    * ``must_be_positive`` and ≤ 0 → default, ``special_msg``
    """
    text = "" if raw is None else str(raw).strip()
    if text == "":
        return FieldResult(True, default)

    try:
        value = float(text)
    except ValueError:
        return FieldResult(False, default, "Invalid: must be a number.")
    if not math.isfinite(value):
        return FieldResult(False, default, "Invalid: must be a number.")

    if value < min_value:
        msg = special_msg or f"Invalid: must be at least {_format_bound(min_value)}."
        return FieldResult(False, default, msg)
    if value > max_value:
        return FieldResult(
            False, default, f"Invalid: must be no more than {_format_bound(max_value)}."
        )
    if must_be_positive and value <= 0:
        return FieldResult(
            False, default, special_msg or "Invalid: must be greater than 0."
        )

    return FieldResult(True, value)


def validate_named_field(name: str, raw: Any, default: float) -> FieldResult:
    lo, hi = FIELD_BOUNDS[name]
    return validate_field(
        raw,
        default,
        min_value=lo,
        max_value=hi,
        special_msg=SPECIAL_MESSAGES.get(name, ""),
        must_be_positive=name in POSITIVE_FIELDS,
    )


# ─────────────────────────────────────────────────────────────────────────────
# RECORD READERS
# ─────────────────────────────────────────────────────────────────────────────

def read_user_inputs(raw: dict[str, Any]) -> tuple[UserInputs, dict[str, str]]:
    """Build ``UserInputs`` from raw form values keyed by field name.

    Returns the record and a ``{field: message}`` dict for rejected entries.
    """
    values: dict[str, float] = {}
    errors: dict[str, str] = {}
    for name, default in DEFAULT_USER_INPUTS.items():
        result = validate_named_field(name, raw.get(name), float(default))
        values[name] = result.value
        if not result.is_valid:
            errors[name] = result.error
    return UserInputs(**values), errors


def read_policy_assumptions(
    raw: dict[str, Any],
) -> tuple[PolicyAssumptions, dict[str, str]]:
    """Build ``PolicyAssumptions`` from raw form values keyed by field name.

    ``total_covered_emissions`` is entered in megatonnes and converted to
    tonnes here; its error message refers to the megatonne entry.
    ``carbon_price`` comes from a select-box and is only coerced, never
    range-checked.
    """
    values: dict[str, float] = {}
    errors: dict[str, str] = {}
    for name, default in DEFAULT_POLICY_ASSUMPTIONS.items():
        if name == "carbon_price":
            values[name] = _safe_number(raw.get(name), default)
            continue
        if name == "total_covered_emissions":
            result = validate_named_field(name, raw.get(name), default / TONNES_PER_MEGATONNE)
            values[name] = result.value * TONNES_PER_MEGATONNE
        else:
            result = validate_named_field(name, raw.get(name), default)
            values[name] = result.value
        if not result.is_valid:
            errors[name] = result.error
    return PolicyAssumptions(**values), errors
