import math

import pytest

from app.utils import (
    FieldResult,
    _safe_number,
    read_policy_assumptions,
    read_user_inputs,
    validate_field,
    validate_named_field,
)
from config.constants import DEFAULT_POLICY_ASSUMPTIONS, DEFAULT_USER_INPUTS


def test_empty_uses_default_without_error():
    assert validate_field("", 5.0) == FieldResult(True, 5.0, "")
    assert validate_field("   ", 5.0) == FieldResult(True, 5.0, "")
    assert validate_field(None, 5.0) == FieldResult(True, 5.0, "")


def test_valid_number_is_parsed():
    result = validate_field(" 3.25 ", 5.0)
    assert result.is_valid is True
    assert result.value == 3.25
    assert result.error == ""


@pytest.mark.parametrize("raw", ["abc", "1,000", "inf", "-inf", "nan"])
def test_not_a_number(raw):
    result = validate_field(raw, 5.0)
    assert result.is_valid is False
    assert result.value == 5.0
    assert result.error == "Invalid: must be a number."


def test_below_minimum():
    result = validate_field("-1", 5.0, min_value=0.0)
    assert result == FieldResult(False, 5.0, "Invalid: must be at least 0.")


def test_below_minimum_uses_special_message():
    result = validate_field("-1", 5.0, special_msg="Population must be greater than 0.")
    assert result.error == "Population must be greater than 0."


def test_above_maximum():
    result = validate_field("1.5", 0.1, min_value=0.0, max_value=1.0)
    assert result == FieldResult(False, 0.1, "Invalid: must be no more than 1.")


def test_bounds_are_inclusive():
    assert validate_field("0", 0.1, max_value=1.0).is_valid
    assert validate_field("1", 0.1, max_value=1.0).is_valid


def test_must_be_positive_rejects_zero():
    result = validate_field("0", 16e6, must_be_positive=True, special_msg="Need adults.")
    assert result == FieldResult(False, 16e6, "Need adults.")


def test_named_field_uses_registered_bounds():
    assert validate_named_field("admin_cost_rate", "1.5", 0.1).error == (
        "Invalid: must be no more than 1."
    )
    result = validate_named_field("eligible_adult_population", "0", 16e6)
    assert result.is_valid is False
    assert result.error.startswith("Eligible adult population must be greater than 0")


def test_safe_number():
    assert _safe_number("2.5") == 2.5
    assert _safe_number(None, 7.0) == 7.0
    assert _safe_number("x", 7.0) == 7.0


class TestReadUserInputs:

    def test_all_empty_gives_defaults(self):
        inputs, errors = read_user_inputs({})
        assert errors == {}
        for name, default in DEFAULT_USER_INPUTS.items():
            assert getattr(inputs, name) == default

    def test_invalid_entries_fail_closed(self):
        inputs, errors = read_user_inputs({"num_adults": "-2", "annual_gas_gj": "lots"})
        assert inputs.num_adults == DEFAULT_USER_INPUTS["num_adults"]
        assert inputs.annual_gas_gj == DEFAULT_USER_INPUTS["annual_gas_gj"]
        assert set(errors) == {"num_adults", "annual_gas_gj"}

    def test_valid_entries_used(self):
        inputs, errors = read_user_inputs({"num_children": "3", "annual_petrol_l": "0"})
        assert errors == {}
        assert inputs.num_children == 3.0
        assert inputs.annual_petrol_l == 0.0


class TestReadPolicyAssumptions:

    def test_defaults(self):
        policy, errors = read_policy_assumptions({})
        assert errors == {}
        for name, default in DEFAULT_POLICY_ASSUMPTIONS.items():
            assert getattr(policy, name) == pytest.approx(default)

    def test_emissions_entered_in_megatonnes(self):
        policy, errors = read_policy_assumptions({"total_covered_emissions": "434.9"})
        assert errors == {}
        assert policy.total_covered_emissions == pytest.approx(434_900_000)

    def test_zero_population_reverts_to_default(self):
        policy, errors = read_policy_assumptions({"eligible_adult_population": "0"})
        assert policy.eligible_adult_population == DEFAULT_POLICY_ASSUMPTIONS[
            "eligible_adult_population"
        ]
        assert "greater than 0" in errors["eligible_adult_population"]

    @pytest.mark.parametrize("name", [
        "admin_cost_rate",
        "pass_through_electricity",
        "pass_through_gas",
        "pass_through_petrol",
    ])
    def test_rates_above_one_rejected(self, name):
        policy, errors = read_policy_assumptions({name: "1.2"})
        assert getattr(policy, name) == DEFAULT_POLICY_ASSUMPTIONS[name]
        assert errors[name] == "Invalid: must be no more than 1."

    def test_carbon_price_is_coerced_not_validated(self):
        policy, errors = read_policy_assumptions({"carbon_price": 100.0})
        assert policy.carbon_price == 100.0
        policy, errors = read_policy_assumptions({"carbon_price": None})
        assert policy.carbon_price == DEFAULT_POLICY_ASSUMPTIONS["carbon_price"]
        assert "carbon_price" not in errors

    def test_results_are_always_finite(self):
        policy, _ = read_policy_assumptions({
            "eligible_adult_population": "nan",
            "child_share_factor": "inf",
        })
        assert math.isfinite(policy.eligible_adult_population)
        assert math.isfinite(policy.child_share_factor)
