"""Pricing configuration from a JSON document, or the built-in defaults."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, List, Optional

import jsonschema

from basket_pricing.adapters.catalog.in_memory_catalog import InMemoryCatalog
from basket_pricing.adapters.config.defaults import default_offers, default_products
from basket_pricing.application.errors import PricingConfigError, UnknownOfferTypeError
from basket_pricing.domain.basket.models import Product
from basket_pricing.domain.offers.models import (
    OFFER_KIND_BUY_N_GET_M_OF_OTHER_AT_PERCENT,
    OFFER_KIND_PERCENTAGE_OFF_SINGLE_PRODUCT,
    BuyNGetMOfOtherAtPercent,
    Offer,
    PercentageOffSingleProduct,
)
from basket_pricing.ports.catalog import Catalog
from basket_pricing.ports.config_provider import PricingConfigProvider

logger = logging.getLogger(__name__)

_AMOUNT = {"type": "number", "minimum": 0}

PRICING_CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "products": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "sku": {"type": "string", "minLength": 1},
                    "name": {"type": "string", "minLength": 1},
                    "unit": {"type": "string"},
                    "unit_price": _AMOUNT,
                },
                "required": ["sku", "name", "unit", "unit_price"],
            },
        },
        "offers": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "type": {"type": "string"},
                    "label": {"type": "string"},
                    "active": {"type": "boolean"},
                    "sku": {"type": "string"},
                    "percent": _AMOUNT,
                    "trigger_sku": {"type": "string"},
                    "trigger_qty": {"type": "integer", "minimum": 1},
                    "target_sku": {"type": "string"},
                    "target_qty_per_trigger": {"type": "integer", "minimum": 0},
                    "target_percent_off": _AMOUNT,
                },
                "required": ["type", "label"],
            },
        },
    },
    "required": ["products"],
}


class InlinePricingConfigProvider(PricingConfigProvider):
    """Returns catalog and offers from a JSON file or defaults."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        self.config_path = Path(config_path) if config_path else None
        self._data: Optional[dict[str, Any]] = None

    def _load(self) -> Optional[dict[str, Any]]:
        if self._data is not None:
            return self._data
        if not self.config_path:
            return None
        if not self.config_path.exists():
            logger.warning("Pricing config %s not found, using defaults", self.config_path)
            return None

        try:
            with self.config_path.open(encoding="utf-8") as f:
                data = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise PricingConfigError(f"Invalid JSON in pricing config: {e}", str(self.config_path)) from e

        try:
            jsonschema.validate(instance=data, schema=PRICING_CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            raise PricingConfigError(f"Pricing config validation failed: {e.message}", str(self.config_path)) from e

        self._data = data
        return data

    def get_catalog(self) -> Catalog:
        data = self._load()
        if data is None:
            return InMemoryCatalog(default_products())
        products = [
            Product.new(
                sku=p["sku"],
                name=p["name"],
                unit=p["unit"],
                unit_price=_exact(p["unit_price"]),
            )
            for p in data["products"]
        ]
        logger.info("Loaded %d products from %s", len(products), self.config_path)
        return InMemoryCatalog(products)

    def get_offers(self, catalog: Catalog) -> List[Offer]:
        data = self._load()
        if data is None:
            return default_offers(catalog)
        offers = [self._build_offer(raw, catalog) for raw in data.get("offers", [])]
        logger.info("Loaded %d offers from %s", len(offers), self.config_path)
        return offers

    def _build_offer(self, raw: dict[str, Any], catalog: Catalog) -> Offer:
        kind = raw["type"]
        active = bool(raw.get("active", True))
        if kind == OFFER_KIND_PERCENTAGE_OFF_SINGLE_PRODUCT:
            self._require(raw, "sku", "percent")
            return PercentageOffSingleProduct.new(
                product=self._product(catalog, raw["sku"]),
                percent=_exact(raw["percent"]),
                label=raw["label"],
                active=active,
            )
        if kind == OFFER_KIND_BUY_N_GET_M_OF_OTHER_AT_PERCENT:
            self._require(raw, "trigger_sku", "trigger_qty", "target_sku", "target_qty_per_trigger", "target_percent_off")
            return BuyNGetMOfOtherAtPercent.new(
                trigger_product=self._product(catalog, raw["trigger_sku"]),
                trigger_qty=raw["trigger_qty"],
                target_product=self._product(catalog, raw["target_sku"]),
                target_qty_per_trigger=raw["target_qty_per_trigger"],
                target_percent_off=_exact(raw["target_percent_off"]),
                label=raw["label"],
                active=active,
            )
        raise UnknownOfferTypeError(f"Unknown offer type: {kind}", str(self.config_path))

    def _require(self, raw: dict[str, Any], *keys: str) -> None:
        missing = [k for k in keys if k not in raw]
        if missing:
            raise PricingConfigError(
                f"Offer {raw.get('label')!r} is missing fields: {', '.join(missing)}", str(self.config_path)
            )

    def _product(self, catalog: Catalog, sku: str) -> Product:
        product = catalog.get_by_sku(sku)
        if product is None:
            raise PricingConfigError(f"Offer references unknown SKU: {sku}", str(self.config_path))
        return product


def _exact(value: Any) -> Decimal:
    # json integers arrive as int, fractional numbers as Decimal (parse_float)
    return value if isinstance(value, Decimal) else Decimal(value)
