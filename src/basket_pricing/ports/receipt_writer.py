from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from basket_pricing.application.checkout import CheckoutResult


class ReceiptWriter(Protocol):
    def write_receipt(self, result: "CheckoutResult") -> None: ...
