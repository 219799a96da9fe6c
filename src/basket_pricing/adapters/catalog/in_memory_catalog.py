from __future__ import annotations

from typing import Iterable, List, Optional

from basket_pricing.domain.basket.models import Product
from basket_pricing.ports.catalog import Catalog


class InMemoryCatalog(Catalog):
    """Products indexed by SKU and by lower-cased name."""

    def __init__(self, products: Iterable[Product]) -> None:
        self.products = list(products)
        self._by_sku = {p.sku: p for p in self.products}
        self._by_name = {p.name.lower(): p for p in self.products}

    def get_by_sku(self, sku: str) -> Optional[Product]:
        return self._by_sku.get(sku)

    def get_by_name(self, name: str) -> Optional[Product]:
        return self._by_name.get(name.lower())

    def all(self) -> List[Product]:
        return list(self.products)
