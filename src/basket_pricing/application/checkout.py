from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from basket_pricing.application.errors import UnknownProductError
from basket_pricing.application.item_parser import parse_items
from basket_pricing.domain.basket.models import Basket, basket_from_products
from basket_pricing.domain.offers.service import OfferService
from basket_pricing.domain.receipt import Receipt, build_receipt
from basket_pricing.ports.catalog import Catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    basket: Basket
    receipt: Receipt
    unknown_items: List[str] = field(default_factory=list)


class Checkout:
    def __init__(self, catalog: Catalog, offer_service: OfferService) -> None:
        self.catalog = catalog
        self.offer_service = offer_service

    def price_basket(self, basket: Basket, unknown_items: Iterable[str] = ()) -> CheckoutResult:
        receipt = build_receipt(basket, self.offer_service)
        logger.info(
            "Priced basket: subtotal=%s discounts=%d total=%s",
            receipt.subtotal,
            len(receipt.discounts),
            receipt.total,
        )
        return CheckoutResult(basket=basket, receipt=receipt, unknown_items=list(unknown_items))

    def price_items(self, tokens: Iterable[str]) -> CheckoutResult:
        """Price a basket given item names, one unit per token."""
        parsed = parse_items(tokens, self.catalog)
        basket = basket_from_products(parsed.products)
        return self.price_basket(basket, parsed.unknown_tokens)

    def price_lines(
        self,
        lines: Iterable[Tuple[str, int]],
        basket: Basket | None = None,
        unknown_items: Iterable[str] = (),
    ) -> CheckoutResult:
        """Price (sku, quantity) lines; every SKU must exist in the catalog."""
        result = basket if basket is not None else Basket.empty()
        for sku, quantity in lines:
            product = self.catalog.get_by_sku(sku)
            if product is None:
                raise UnknownProductError(sku)
            result = result.add(product, quantity)
        return self.price_basket(result, unknown_items)
