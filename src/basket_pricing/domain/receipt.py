from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List

from basket_pricing.domain.basket.models import Basket
from basket_pricing.domain.common.money import ZERO
from basket_pricing.domain.offers.models import AppliedDiscount
from basket_pricing.domain.offers.service import OfferService


@dataclass(frozen=True)
class Receipt:
    """Final pricing result. The total is not clamped and may go negative."""

    subtotal: Decimal
    discounts: List[AppliedDiscount]
    total: Decimal

    @property
    def total_discount(self) -> Decimal:
        return sum((d.amount for d in self.discounts), ZERO)


def build_receipt(basket: Basket, offer_service: OfferService) -> Receipt:
    subtotal = basket.subtotal
    discounts = offer_service.calculate_discounts(basket)
    total = subtotal - sum((d.amount for d in discounts), ZERO)
    return Receipt(subtotal=subtotal, discounts=discounts, total=total)
