from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    # JSON pricing document (products + offers); built-in defaults when unset
    pricing_config_path: Optional[str] = None
    # Presentation only, the core never formats money
    currency_symbol: str = "£"
    money_decimal_places: int = 2

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            pricing_config_path=os.getenv("PRICING_CONFIG_PATH") or None,
            currency_symbol=os.getenv("CURRENCY_SYMBOL", cls.currency_symbol),
            money_decimal_places=int(os.getenv("MONEY_DECIMAL_PLACES", cls.money_decimal_places)),
        )


_settings_cache: dict[str, Settings] = {}


def get_settings() -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _settings_cache:
        _settings_cache["settings"] = Settings.from_env()
    return _settings_cache["settings"]
