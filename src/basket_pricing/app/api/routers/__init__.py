"""API routers."""

from basket_pricing.app.api.routers.health import router as health_router
from basket_pricing.app.api.routers.pricing import router as pricing_router

__all__ = ["health_router", "pricing_router"]
