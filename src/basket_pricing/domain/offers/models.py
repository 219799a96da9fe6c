from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Protocol, Union

from basket_pricing.domain.basket.models import Basket, Product
from basket_pricing.domain.common.money import MoneyLike, percent_of, to_money


@dataclass(frozen=True)
class AppliedDiscount:
    """A single discount line on the receipt; amount is deducted from the subtotal."""

    label: str
    amount: Decimal


class Offer(Protocol):
    """Contract for any promotional rule that can be applied to a basket.

    ``active`` is carried for the caller to filter on. ``apply_to`` does not
    consult it: an inactive offer still prices a basket when asked directly,
    and only ``OfferService`` skips inactive offers.
    """

    label: str
    active: bool

    def apply_to(self, basket: Basket) -> List[AppliedDiscount]: ...


@dataclass(frozen=True)
class PercentageOffSingleProduct:
    """Percentage off every unit of one product.

    Always yields exactly one discount line, including a zero-amount line
    when the product is not in the basket.
    """

    product: Product
    percent: Decimal  # 10 for 10%
    label: str
    active: bool = True

    @staticmethod
    def new(product: Product, percent: MoneyLike, label: str, active: bool = True) -> "PercentageOffSingleProduct":
        return PercentageOffSingleProduct(product=product, percent=to_money(percent), label=label, active=active)

    def apply_to(self, basket: Basket) -> List[AppliedDiscount]:
        quantity = basket.quantity_of(self.product)
        discount = percent_of(self.product.unit_price, self.percent) * quantity
        return [AppliedDiscount(label=self.label, amount=discount)]


@dataclass(frozen=True)
class BuyNGetMOfOtherAtPercent:
    """Buying ``trigger_qty`` of one product discounts ``target_qty_per_trigger`` units of another.

    Only whole multiples of ``trigger_qty`` count, and the discounted
    quantity is capped at the target units actually in the basket. Callers
    must guarantee ``trigger_qty >= 1``.
    """

    trigger_product: Product
    trigger_qty: int  # N
    target_product: Product
    target_qty_per_trigger: int  # M
    target_percent_off: Decimal  # 50 for 50%
    label: str
    active: bool = True

    @staticmethod
    def new(
        trigger_product: Product,
        trigger_qty: int,
        target_product: Product,
        target_qty_per_trigger: int,
        target_percent_off: MoneyLike,
        label: str,
        active: bool = True,
    ) -> "BuyNGetMOfOtherAtPercent":
        return BuyNGetMOfOtherAtPercent(
            trigger_product=trigger_product,
            trigger_qty=trigger_qty,
            target_product=target_product,
            target_qty_per_trigger=target_qty_per_trigger,
            target_percent_off=to_money(target_percent_off),
            label=label,
            active=active,
        )

    def apply_to(self, basket: Basket) -> List[AppliedDiscount]:
        trigger_count = basket.quantity_of(self.trigger_product)
        target_count = basket.quantity_of(self.target_product)

        num_triggers = trigger_count // self.trigger_qty
        eligible_target_qty = num_triggers * self.target_qty_per_trigger
        discounted_qty = min(eligible_target_qty, target_count)

        discount = percent_of(self.target_product.unit_price, self.target_percent_off) * discounted_qty

        if discount > 0 and eligible_target_qty > 0:
            return [AppliedDiscount(label=self.label, amount=discount)]
        return []


OfferType = Union[PercentageOffSingleProduct, BuyNGetMOfOtherAtPercent]

OFFER_KIND_PERCENTAGE_OFF_SINGLE_PRODUCT = "percentage_off_single_product"
OFFER_KIND_BUY_N_GET_M_OF_OTHER_AT_PERCENT = "buy_n_get_m_of_other_at_percent"


def offer_kind(offer: Offer) -> str:
    if isinstance(offer, PercentageOffSingleProduct):
        return OFFER_KIND_PERCENTAGE_OFF_SINGLE_PRODUCT
    if isinstance(offer, BuyNGetMOfOtherAtPercent):
        return OFFER_KIND_BUY_N_GET_M_OF_OTHER_AT_PERCENT
    return type(offer).__name__
