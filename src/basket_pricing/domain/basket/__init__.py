from __future__ import annotations

from basket_pricing.domain.basket.models import Basket, Product, basket_from_products

__all__ = [
    "Basket",
    "Product",
    "basket_from_products",
]
