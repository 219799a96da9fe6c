from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from basket_pricing.ports.catalog import Catalog

from basket_pricing.adapters.config.inline_config_provider import InlinePricingConfigProvider
from basket_pricing.application.checkout import Checkout
from basket_pricing.domain.offers.service import OfferService
from basket_pricing.settings import Settings, get_settings


def create_adapters(
    settings: Settings | None = None,
    config_path: str | None = None,
) -> tuple["Catalog", OfferService]:
    """
    Build the catalog and offer service.

    ``config_path`` overrides ``PRICING_CONFIG_PATH``; with neither set the
    built-in demo catalog and offers are used.
    """
    settings = settings or get_settings()
    config_provider = InlinePricingConfigProvider(config_path or settings.pricing_config_path)
    catalog = config_provider.get_catalog()
    offer_service = OfferService.in_memory(config_provider.get_offers(catalog))
    return catalog, offer_service


def create_checkout(settings: Settings | None = None, config_path: str | None = None) -> Checkout:
    catalog, offer_service = create_adapters(settings, config_path)
    return Checkout(catalog=catalog, offer_service=offer_service)
