from __future__ import annotations

import logging
from typing import Iterable, List

from basket_pricing.domain.basket.models import Basket
from basket_pricing.domain.offers.models import AppliedDiscount, Offer

logger = logging.getLogger(__name__)


class OfferService:
    """Applies every active offer to a basket and keeps the positive discounts.

    Results follow offer declaration order; nothing is sorted.
    """

    def __init__(self, offers: Iterable[Offer] = ()) -> None:
        self._offers: tuple[Offer, ...] = tuple(offers)

    @classmethod
    def in_memory(cls, offers: Iterable[Offer]) -> "OfferService":
        return cls(offers)

    @property
    def available_offers(self) -> List[Offer]:
        """All configured offers, active or not."""
        return list(self._offers)

    def calculate_discounts(self, basket: Basket) -> List[AppliedDiscount]:
        if basket.is_empty:
            return []

        applied: List[AppliedDiscount] = []
        for offer in self._offers:
            if not offer.active:
                logger.debug("Skipping inactive offer %r", offer.label)
                continue
            applied.extend(offer.apply_to(basket))

        discounts = [d for d in applied if d.amount > 0]
        logger.debug("Applied %d of %d discount lines", len(discounts), len(applied))
        return discounts
