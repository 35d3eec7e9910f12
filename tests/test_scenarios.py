from config.constants import DEFAULT_CARBON_PRICE
from config.scenarios import (
    CARBON_PRICE_OPTIONS,
    DEFAULT_CARBON_PRICE_LABEL,
    label_for_price,
)


def test_default_label_matches_default_price():
    assert CARBON_PRICE_OPTIONS[DEFAULT_CARBON_PRICE_LABEL] == DEFAULT_CARBON_PRICE


def test_prices_ascending_and_non_negative():
    prices = list(CARBON_PRICE_OPTIONS.values())
    assert prices == sorted(prices)
    assert all(p >= 0 for p in prices)


def test_label_for_price():
    assert label_for_price(50.0) == DEFAULT_CARBON_PRICE_LABEL
    assert label_for_price(51.0) is None
