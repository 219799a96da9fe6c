from __future__ import annotations

from fastapi import FastAPI

from basket_pricing.app.api.routers import health_router, pricing_router
from basket_pricing.observability.logging import configure_logging

configure_logging()

app = FastAPI(title="Basket Pricing")
app.include_router(health_router)
app.include_router(pricing_router, prefix="/v1", tags=["pricing"])
