from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from basket_pricing.adapters.outputs.stdout_receipt_writer import (
    JsonStdoutReceiptWriter,
    StdoutReceiptWriter,
)
from basket_pricing.app.factory import create_adapters
from basket_pricing.application.checkout import Checkout
from basket_pricing.application.errors import PricingConfigError
from basket_pricing.domain.common.money import quantize_money
from basket_pricing.domain.offers.models import offer_kind
from basket_pricing.observability.logging import configure_logging
from basket_pricing.ports.receipt_writer import ReceiptWriter
from basket_pricing.settings import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="basket-pricing", description="Shopping basket pricing CLI")
    parser.add_argument("--config", dest="config_path", help="JSON pricing config (products and offers)")
    subparsers = parser.add_subparsers(dest="command")

    price_parser = subparsers.add_parser("price", help="Price a basket of items")
    price_parser.add_argument("items", nargs="*", help="Item names, one unit each (case-insensitive)")
    price_parser.add_argument("--json", action="store_true", dest="as_json", help="Emit the receipt as JSON")

    subparsers.add_parser("offers", help="List configured offers")
    subparsers.add_parser("catalog", help="List catalog products")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    try:
        catalog, offer_service = create_adapters(settings, args.config_path)
    except PricingConfigError as e:
        sys.stderr.write(f"error: {e}\n")
        return 2

    if args.command == "catalog":
        for product in catalog.all():
            price = quantize_money(product.unit_price, settings.money_decimal_places)
            print(f"{product.name} ({product.sku}): {settings.currency_symbol}{price} per {product.unit}")
        return 0

    if args.command == "offers":
        for offer in offer_service.available_offers:
            status = "active" if offer.active else "inactive"
            print(f"{offer.label} [{offer_kind(offer)}, {status}]")
        return 0

    checkout = Checkout(catalog=catalog, offer_service=offer_service)
    result = checkout.price_items(args.items)
    writer: ReceiptWriter
    if args.as_json:
        writer = JsonStdoutReceiptWriter()
    else:
        writer = StdoutReceiptWriter(settings.currency_symbol, settings.money_decimal_places)
    writer.write_receipt(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
