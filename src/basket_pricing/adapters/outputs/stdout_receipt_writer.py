from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from basket_pricing.application.checkout import CheckoutResult
from basket_pricing.domain.common.money import quantize_money
from basket_pricing.ports.receipt_writer import ReceiptWriter


class StdoutReceiptWriter(ReceiptWriter):
    """Human-readable receipt: subtotal, one line per discount, total."""

    def __init__(self, currency_symbol: str = "£", places: int = 2, stream: TextIO | None = None) -> None:
        self.currency_symbol = currency_symbol
        self.places = places
        self.stream = stream

    def _money(self, amount) -> str:
        return f"{self.currency_symbol}{quantize_money(amount, self.places)}"

    def write_receipt(self, result: CheckoutResult) -> None:
        out = self.stream or sys.stdout
        receipt = result.receipt
        out.write(f"Subtotal: {self._money(receipt.subtotal)}\n")
        if receipt.discounts:
            for discount in receipt.discounts:
                out.write(f"{discount.label}: {self._money(discount.amount)}\n")
        else:
            out.write("(No offers available)\n")
        out.write(f"Total price: {self._money(receipt.total)}\n")


def receipt_payload(result: CheckoutResult) -> dict[str, Any]:
    receipt = result.receipt
    return {
        "lines": [
            {"sku": product.sku, "name": product.name, "quantity": quantity}
            for product, quantity in result.basket.lines.items()
        ],
        "subtotal": str(receipt.subtotal),
        "discounts": [{"label": d.label, "amount": str(d.amount)} for d in receipt.discounts],
        "total": str(receipt.total),
        "unknown_items": list(result.unknown_items),
    }


class JsonStdoutReceiptWriter(ReceiptWriter):
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def write_receipt(self, result: CheckoutResult) -> None:
        out = self.stream or sys.stdout
        out.write(json.dumps({"type": "receipt", "data": receipt_payload(result)}) + "\n")
