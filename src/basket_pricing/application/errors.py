class PricingConfigError(Exception):
    """Raised when a pricing configuration document cannot be turned into a catalog and offers."""

    def __init__(self, message: str, config_path: str | None = None) -> None:
        super().__init__(message)
        self.config_path = config_path


class UnknownOfferTypeError(PricingConfigError):
    pass


class UnknownProductError(Exception):
    def __init__(self, sku: str) -> None:
        super().__init__(f"Product {sku} not found in catalog")
        self.sku = sku
