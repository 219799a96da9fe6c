from decimal import Decimal

from basket_pricing.domain.basket.models import Basket, Product
from basket_pricing.domain.offers.models import (
    AppliedDiscount,
    BuyNGetMOfOtherAtPercent,
    PercentageOffSingleProduct,
    offer_kind,
)

apple = Product.new("A123", "Apples", "bag", "1.00")
soup = Product.new("S123", "Soup", "tin", "0.65")
bread = Product.new("B123", "Bread", "loaf", "0.80")


def soup_bread_offer(trigger_qty: int = 2, per_trigger: int = 1, percent: str = "50", active: bool = True):
    return BuyNGetMOfOtherAtPercent.new(
        trigger_product=soup,
        trigger_qty=trigger_qty,
        target_product=bread,
        target_qty_per_trigger=per_trigger,
        target_percent_off=percent,
        label="Buy 2 Soup, get Bread 50% off",
        active=active,
    )


def test_percentage_off_applies_to_every_unit():
    offer = PercentageOffSingleProduct.new(apple, "10", "Apples 10% off")
    result = offer.apply_to(Basket({apple: 3}))
    assert result == [AppliedDiscount("Apples 10% off", Decimal("0.30"))]


def test_percentage_off_emits_zero_line_when_product_absent():
    offer = PercentageOffSingleProduct.new(apple, "10", "Apples 10% off")
    result = offer.apply_to(Basket({bread: 1}))
    assert len(result) == 1
    assert result[0].amount == Decimal("0")


def test_percentage_off_zero_percent_emits_zero_line():
    offer = PercentageOffSingleProduct.new(apple, "0", "Apples 0% off")
    result = offer.apply_to(Basket({apple: 5}))
    assert len(result) == 1
    assert result[0].amount == Decimal("0")


def test_percentage_off_hundred_percent_is_full_price():
    offer = PercentageOffSingleProduct.new(soup, "100", "Free soup")
    result = offer.apply_to(Basket({soup: 3}))
    assert result[0].amount == Decimal("1.95")


def test_percentage_off_fractional_percent_is_exact():
    offer = PercentageOffSingleProduct.new(soup, "33.33", "Soup third off")
    result = offer.apply_to(Basket({soup: 3}))
    assert result[0].amount == Decimal("0.649935")


def test_apply_to_ignores_active_flag():
    # Inactive offers are filtered by OfferService, not by the offer itself.
    offer = PercentageOffSingleProduct.new(apple, "10", "Apples 10% off", active=False)
    result = offer.apply_to(Basket({apple: 2}))
    assert result[0].amount == Decimal("0.20")

    conditional = soup_bread_offer(active=False)
    assert conditional.apply_to(Basket({soup: 2, bread: 1}))[0].amount == Decimal("0.40")


def test_buy_n_get_m_discounts_one_target_per_trigger():
    result = soup_bread_offer().apply_to(Basket({soup: 4, bread: 2}))
    assert result == [AppliedDiscount("Buy 2 Soup, get Bread 50% off", Decimal("0.80"))]


def test_buy_n_get_m_threshold_not_met():
    assert soup_bread_offer().apply_to(Basket({soup: 1, bread: 1})) == []


def test_buy_n_get_m_discards_partial_triggers():
    offer = soup_bread_offer(trigger_qty=10)
    result = offer.apply_to(Basket({soup: 25, bread: 5}))
    assert result[0].amount == Decimal("0.80")  # 2 triggers, remainder of 5 ignored


def test_buy_n_get_m_capped_by_target_in_basket():
    result = soup_bread_offer().apply_to(Basket({soup: 6, bread: 1}))
    assert result[0].amount == Decimal("0.40")


def test_buy_n_get_m_without_target_units_is_empty():
    assert soup_bread_offer().apply_to(Basket({soup: 4})) == []


def test_buy_n_get_m_zero_percent_is_empty():
    assert soup_bread_offer(percent="0").apply_to(Basket({soup: 4, bread: 2})) == []


def test_buy_n_get_m_multiple_targets_per_trigger():
    offer = soup_bread_offer(per_trigger=2, percent="100")
    result = offer.apply_to(Basket({soup: 2, bread: 3}))
    assert result[0].amount == Decimal("1.60")


def test_offer_kind():
    assert offer_kind(PercentageOffSingleProduct.new(apple, 10, "x")) == "percentage_off_single_product"
    assert offer_kind(soup_bread_offer()) == "buy_n_get_m_of_other_at_percent"
