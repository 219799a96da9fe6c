from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping

from basket_pricing.domain.common.money import ZERO, MoneyLike, to_money


@dataclass(frozen=True)
class Product:
    """A catalog entry. Equal field values make interchangeable basket keys."""

    sku: str
    name: str
    unit: str  # tin, loaf, bottle, bag, etc.
    unit_price: Decimal

    @staticmethod
    def new(sku: str, name: str, unit: str, unit_price: MoneyLike) -> "Product":
        return Product(sku=sku, name=name, unit=unit, unit_price=to_money(unit_price))


@dataclass(frozen=True)
class Basket:
    """Immutable multiset of product lines.

    ``add`` returns a new Basket and never touches the receiver. Quantities
    are not validated; a negative delta can leave a line at zero or below,
    and such a line stays present as a key.
    """

    lines: Mapping[Product, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", MappingProxyType(dict(self.lines)))

    @staticmethod
    def empty() -> "Basket":
        return Basket()

    def add(self, product: Product, qty: int = 1) -> "Basket":
        updated = dict(self.lines)
        updated[product] = self.quantity_of(product) + qty
        return Basket(lines=updated)

    def quantity_of(self, product: Product) -> int:
        return self.lines.get(product, 0)

    def line_subtotal(self, product: Product) -> Decimal:
        return product.unit_price * self.quantity_of(product)

    @property
    def subtotal(self) -> Decimal:
        return sum((self.line_subtotal(product) for product in self.lines), ZERO)

    @property
    def is_empty(self) -> bool:
        return len(self.lines) == 0

    def __hash__(self) -> int:
        return hash(frozenset(self.lines.items()))


def basket_from_products(products: Iterable[Product], basket: Basket | None = None) -> Basket:
    """Fold ``Basket.add`` over products, one unit each."""
    result = basket if basket is not None else Basket.empty()
    for product in products:
        result = result.add(product)
    return result
