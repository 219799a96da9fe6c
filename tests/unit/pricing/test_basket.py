from decimal import Decimal

from basket_pricing.domain.basket.models import Basket, Product, basket_from_products

apple = Product.new("A123", "Apples", "bag", "1.00")
soup = Product.new("S123", "Soup", "tin", "0.65")
bread = Product.new("B123", "Bread", "loaf", "0.80")


def test_empty_basket():
    basket = Basket.empty()
    assert basket.is_empty
    assert basket.subtotal == Decimal("0")
    assert basket.quantity_of(apple) == 0


def test_add_returns_new_basket_and_leaves_original_unchanged():
    original = Basket.empty()
    updated = original.add(apple)

    assert original.is_empty
    assert original.quantity_of(apple) == 0
    assert updated.quantity_of(apple) == 1
    assert not updated.is_empty


def test_add_accumulates_quantity():
    basket = Basket.empty().add(apple, 2).add(apple, 3)
    assert basket.quantity_of(apple) == 5
    assert basket.quantity_of(apple) == Basket.empty().add(apple, 5).quantity_of(apple)


def test_negative_add_is_not_clamped():
    basket = Basket.empty().add(apple, 1).add(apple, -3)
    assert basket.quantity_of(apple) == -2
    assert basket.line_subtotal(apple) == Decimal("-2.00")


def test_line_subtracted_to_zero_keeps_basket_non_empty():
    basket = Basket.empty().add(soup, 2).add(soup, -2)
    assert basket.quantity_of(soup) == 0
    assert not basket.is_empty
    assert basket.subtotal == Decimal("0")


def test_subtotal_sums_every_line():
    basket = Basket({apple: 3, soup: 4, bread: 2})
    assert basket.line_subtotal(apple) == Decimal("3.00")
    assert basket.line_subtotal(soup) == Decimal("2.60")
    assert basket.line_subtotal(bread) == Decimal("1.60")
    assert basket.subtotal == Decimal("7.20")


def test_products_with_equal_fields_share_a_line():
    twin = Product.new("A123", "Apples", "bag", "1.00")
    basket = Basket.empty().add(apple).add(twin)
    assert basket.quantity_of(apple) == 2
    assert len(basket.lines) == 1


def test_lines_cannot_be_mutated_from_outside():
    source = {apple: 1}
    basket = Basket(source)
    source[apple] = 10
    assert basket.quantity_of(apple) == 1


def test_basket_from_products_folds_one_unit_each():
    basket = basket_from_products([apple, soup, apple])
    assert basket.quantity_of(apple) == 2
    assert basket.quantity_of(soup) == 1
    assert basket == Basket({apple: 2, soup: 1})
