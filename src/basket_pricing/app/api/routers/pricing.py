"""Router for catalog, offer and basket pricing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from basket_pricing.app.api.models.pricing import (
    CatalogResponse,
    DiscountModel,
    OfferModel,
    OffersResponse,
    PriceBasketRequest,
    ProductModel,
    ReceiptResponse,
)
from basket_pricing.app.factory import create_checkout
from basket_pricing.application.checkout import Checkout
from basket_pricing.application.errors import PricingConfigError, UnknownProductError
from basket_pricing.application.item_parser import parse_items
from basket_pricing.domain.basket.models import basket_from_products
from basket_pricing.domain.offers.models import offer_kind
from basket_pricing.settings import Settings, get_settings

router = APIRouter()


def get_checkout(settings: Settings = Depends(get_settings)) -> Checkout:
    """Dependency to provide a Checkout wired from settings."""
    try:
        return create_checkout(settings)
    except PricingConfigError as e:
        raise HTTPException(status_code=500, detail=f"Pricing configuration error: {e}")


@router.get("/catalog", response_model=CatalogResponse)
def get_catalog(checkout: Checkout = Depends(get_checkout)) -> CatalogResponse:
    return CatalogResponse(
        items=[
            ProductModel(sku=p.sku, name=p.name, unit=p.unit, unit_price=p.unit_price)
            for p in checkout.catalog.all()
        ]
    )


@router.get("/offers", response_model=OffersResponse)
def get_offers(checkout: Checkout = Depends(get_checkout)) -> OffersResponse:
    """List configured offers, active or not."""
    return OffersResponse(
        items=[
            OfferModel(kind=offer_kind(o), label=o.label, active=o.active)
            for o in checkout.offer_service.available_offers
        ]
    )


@router.post("/baskets/price", response_model=ReceiptResponse)
def price_basket(req: PriceBasketRequest, checkout: Checkout = Depends(get_checkout)) -> ReceiptResponse:
    """
    Price a basket.

    ``items`` are looked up by name (unknown names are reported, not fatal);
    ``lines`` are looked up by SKU and an unknown SKU is a 404.
    """
    parsed = parse_items(req.items, checkout.catalog)
    basket = basket_from_products(parsed.products)
    try:
        result = checkout.price_lines(
            ((line.sku, line.quantity) for line in req.lines),
            basket=basket,
            unknown_items=parsed.unknown_tokens,
        )
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))

    receipt = result.receipt
    return ReceiptResponse(
        subtotal=receipt.subtotal,
        discounts=[DiscountModel(label=d.label, amount=d.amount) for d in receipt.discounts],
        total=receipt.total,
        unknown_items=result.unknown_items,
    )
