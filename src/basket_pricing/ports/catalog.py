from __future__ import annotations

from typing import List, Optional, Protocol

from basket_pricing.domain.basket.models import Product


class Catalog(Protocol):
    def get_by_sku(self, sku: str) -> Optional[Product]: ...

    def get_by_name(self, name: str) -> Optional[Product]: ...

    def all(self) -> List[Product]: ...
