from __future__ import annotations

from basket_pricing.domain.offers.models import (
    AppliedDiscount,
    BuyNGetMOfOtherAtPercent,
    Offer,
    OfferType,
    PercentageOffSingleProduct,
    offer_kind,
)
from basket_pricing.domain.offers.service import OfferService

__all__ = [
    "AppliedDiscount",
    "BuyNGetMOfOtherAtPercent",
    "Offer",
    "OfferService",
    "OfferType",
    "PercentageOffSingleProduct",
    "offer_kind",
]
