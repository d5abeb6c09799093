"""Política comercial aplicada por el validador y el calculador de precios."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from booking_rules.domain.constants import (
    CONFIRMATION_FEE_RATE,
    DEFAULT_AIRPORTS,
    INTERNATIONAL_LICENSE_SURCHARGE_AMOUNT,
    INTERNATIONAL_LICENSE_SURCHARGE_RATE,
    LEGAL_MINIMUM_DRIVER_AGE,
    SURCHARGE_MODE_FLAT,
    SURCHARGE_MODE_PERCENTAGE,
    UNDERAGE_DEPOSIT_AMOUNT,
)
from booking_rules.domain.value_objects.money import to_decimal


@dataclass(frozen=True)
class BookingPolicy:
    """
    Parámetros de negocio configurables.

    Attributes:
        legal_minimum_driver_age: Edad mínima absoluta, independiente del vehículo.
        international_license_surcharge_mode: "flat" (monto fijo) o
            "percentage" (fracción del subtotal).
        international_license_surcharge_amount: Monto del recargo en modo flat.
        international_license_surcharge_rate: Fracción del subtotal en modo percentage.
        confirmation_fee_rate: Fracción del subtotal que se cobra al confirmar.
        underage_deposit_amount: Depósito reembolsable para conductores menores
            a la edad mínima del vehículo.
        require_maps_url_for_delivery: Exige URL de Google Maps para entregas en mapa.
        airports: Catálogo de aeropuertos de entrega (código -> nombre).
    """

    legal_minimum_driver_age: int = LEGAL_MINIMUM_DRIVER_AGE
    international_license_surcharge_mode: str = SURCHARGE_MODE_FLAT
    international_license_surcharge_amount: Decimal = INTERNATIONAL_LICENSE_SURCHARGE_AMOUNT
    international_license_surcharge_rate: Decimal = INTERNATIONAL_LICENSE_SURCHARGE_RATE
    confirmation_fee_rate: Decimal = CONFIRMATION_FEE_RATE
    underage_deposit_amount: Decimal = UNDERAGE_DEPOSIT_AMOUNT
    require_maps_url_for_delivery: bool = False
    airports: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_AIRPORTS))

    def __post_init__(self) -> None:
        if self.international_license_surcharge_mode not in (
            SURCHARGE_MODE_FLAT,
            SURCHARGE_MODE_PERCENTAGE,
        ):
            raise ValueError(
                f"Unknown surcharge mode: {self.international_license_surcharge_mode}"
            )
        for name in (
            "international_license_surcharge_amount",
            "international_license_surcharge_rate",
            "confirmation_fee_rate",
            "underage_deposit_amount",
        ):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

    @classmethod
    def from_settings(cls, settings: Any) -> "BookingPolicy":
        """Construye la política desde la configuración de la aplicación."""
        return cls(
            legal_minimum_driver_age=settings.legal_minimum_driver_age,
            international_license_surcharge_mode=settings.international_license_surcharge_mode,
            international_license_surcharge_amount=settings.international_license_surcharge_amount,
            international_license_surcharge_rate=settings.international_license_surcharge_rate,
            confirmation_fee_rate=settings.confirmation_fee_rate,
            underage_deposit_amount=settings.underage_deposit_amount,
            require_maps_url_for_delivery=settings.require_maps_url_for_delivery,
            airports=dict(settings.supported_airports),
        )
