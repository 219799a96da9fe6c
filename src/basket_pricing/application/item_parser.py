from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from basket_pricing.domain.basket.models import Product
from basket_pricing.ports.catalog import Catalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedItems:
    products: List[Product] = field(default_factory=list)
    unknown_tokens: List[str] = field(default_factory=list)


def parse_items(tokens: Iterable[str], catalog: Catalog) -> ParsedItems:
    """
    Translate raw item names into products via the catalog.

    Lookup is by name and case-insensitive. Tokens that match nothing are
    skipped rather than failing the whole basket; they are reported back in
    ``unknown_tokens``.
    """
    products: List[Product] = []
    unknown: List[str] = []
    for token in tokens:
        product = catalog.get_by_name(token)
        if product is None:
            logger.warning("Unknown item %r ignored", token)
            unknown.append(token)
        else:
            products.append(product)
    return ParsedItems(products=products, unknown_tokens=unknown)
