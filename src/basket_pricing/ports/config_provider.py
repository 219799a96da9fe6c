from __future__ import annotations

from typing import List, Protocol

from basket_pricing.domain.offers.models import Offer
from basket_pricing.ports.catalog import Catalog


class PricingConfigProvider(Protocol):
    def get_catalog(self) -> Catalog: ...

    def get_offers(self, catalog: Catalog) -> List[Offer]: ...
