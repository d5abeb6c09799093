from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from booking_rules.domain.constants import (
    CONFIRMATION_FEE_RATE,
    DEFAULT_AIRPORTS,
    INTERNATIONAL_LICENSE_SURCHARGE_AMOUNT,
    INTERNATIONAL_LICENSE_SURCHARGE_RATE,
    LEGAL_MINIMUM_DRIVER_AGE,
    UNDERAGE_DEPOSIT_AMOUNT,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Booking Rules API"
    log_level: str = "INFO"

    # Recargo por licencia internacional: monto fijo o porcentaje del subtotal
    international_license_surcharge_mode: Literal["flat", "percentage"] = "flat"
    international_license_surcharge_amount: Decimal = INTERNATIONAL_LICENSE_SURCHARGE_AMOUNT
    international_license_surcharge_rate: Decimal = INTERNATIONAL_LICENSE_SURCHARGE_RATE

    confirmation_fee_rate: Decimal = CONFIRMATION_FEE_RATE
    underage_deposit_amount: Decimal = UNDERAGE_DEPOSIT_AMOUNT
    legal_minimum_driver_age: int = LEGAL_MINIMUM_DRIVER_AGE
    require_maps_url_for_delivery: bool = False
    supported_airports: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_AIRPORTS))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
