"""Pydantic models for pricing API requests and responses."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class ProductModel(BaseModel):
    sku: str
    name: str
    unit: str
    unit_price: Decimal


class CatalogResponse(BaseModel):
    items: list[ProductModel]


class OfferModel(BaseModel):
    kind: str = Field(..., description="percentage_off_single_product | buy_n_get_m_of_other_at_percent")
    label: str
    active: bool


class OffersResponse(BaseModel):
    items: list[OfferModel]


class BasketLine(BaseModel):
    sku: str
    quantity: int = 1


class PriceBasketRequest(BaseModel):
    items: list[str] = Field(default_factory=list, description="Item names, one unit each")
    lines: list[BasketLine] = Field(default_factory=list, description="SKU lines with explicit quantities")


class DiscountModel(BaseModel):
    label: str
    amount: Decimal


class ReceiptResponse(BaseModel):
    subtotal: Decimal
    discounts: list[DiscountModel]
    total: Decimal
    unknown_items: list[str] = Field(default_factory=list)
