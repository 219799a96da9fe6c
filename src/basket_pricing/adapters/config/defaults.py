from __future__ import annotations

from typing import List

from basket_pricing.domain.basket.models import Product
from basket_pricing.domain.offers.models import (
    BuyNGetMOfOtherAtPercent,
    Offer,
    PercentageOffSingleProduct,
)
from basket_pricing.ports.catalog import Catalog

APPLES = Product.new(sku="A123", name="Apples", unit="bag", unit_price="1.00")
SOUP = Product.new(sku="S123", name="Soup", unit="tin", unit_price="0.65")
BREAD = Product.new(sku="B123", name="Bread", unit="loaf", unit_price="0.80")
# Priced but not stocked in the default catalog
MILK = Product.new(sku="M123", name="Milk", unit="bottle", unit_price="1.30")


def default_products() -> List[Product]:
    return [APPLES, SOUP, BREAD]


def default_offers(catalog: Catalog) -> List[Offer]:
    apples = catalog.get_by_sku(APPLES.sku) or APPLES
    soup = catalog.get_by_sku(SOUP.sku) or SOUP
    bread = catalog.get_by_sku(BREAD.sku) or BREAD
    return [
        PercentageOffSingleProduct.new(
            product=apples,
            percent=10,
            label="Apples 10% off",
        ),
        BuyNGetMOfOtherAtPercent.new(
            trigger_product=soup,
            trigger_qty=2,
            target_product=bread,
            target_qty_per_trigger=1,
            target_percent_off=50,
            label="Buy 2 Soup, get Bread 50% off",
        ),
    ]
