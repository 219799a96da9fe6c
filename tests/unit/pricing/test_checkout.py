from decimal import Decimal

import pytest

from basket_pricing.app.factory import create_checkout
from basket_pricing.application.errors import UnknownProductError
from basket_pricing.settings import Settings


@pytest.fixture
def checkout():
    return create_checkout(Settings())


def test_price_items_end_to_end(checkout):
    tokens = ["Apples"] * 3 + ["Soup"] * 4 + ["Bread"] * 2
    result = checkout.price_items(tokens)
    assert result.receipt.subtotal == Decimal("7.20")
    assert result.receipt.total == Decimal("6.10")
    assert result.unknown_items == []


def test_price_items_reports_unknown(checkout):
    result = checkout.price_items(["Apples", "Milk"])
    assert result.unknown_items == ["Milk"]
    assert result.receipt.subtotal == Decimal("1.00")
    assert result.receipt.total == Decimal("0.90")


def test_price_items_empty(checkout):
    result = checkout.price_items([])
    assert result.basket.is_empty
    assert result.receipt.discounts == []
    assert result.receipt.total == Decimal("0")


def test_price_lines_by_sku(checkout):
    result = checkout.price_lines([("S123", 2), ("B123", 1)])
    assert result.basket.quantity_of(checkout.catalog.get_by_sku("S123")) == 2
    assert [d.amount for d in result.receipt.discounts] == [Decimal("0.40")]
    assert result.receipt.total == Decimal("1.70")


def test_price_lines_unknown_sku(checkout):
    with pytest.raises(UnknownProductError) as exc_info:
        checkout.price_lines([("ZZZ", 1)])
    assert exc_info.value.sku == "ZZZ"
