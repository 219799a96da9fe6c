"""Pydantic models for API requests and responses."""

from basket_pricing.app.api.models.pricing import (
    BasketLine,
    CatalogResponse,
    DiscountModel,
    OfferModel,
    OffersResponse,
    PriceBasketRequest,
    ProductModel,
    ReceiptResponse,
)

__all__ = [
    "BasketLine",
    "CatalogResponse",
    "DiscountModel",
    "OfferModel",
    "OffersResponse",
    "PriceBasketRequest",
    "ProductModel",
    "ReceiptResponse",
]
