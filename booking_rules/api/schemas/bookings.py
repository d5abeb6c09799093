from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, condecimal, conint, constr, field_validator, model_validator

from booking_rules.domain.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_DAMAGE_DEPOSIT_AMOUNT,
    DEFAULT_DAMAGE_DEPOSIT_TYPE,
    DEFAULT_MINIMUM_DRIVER_AGE,
    DEFAULT_MINIMUM_DRIVING_EXPERIENCE,
    DEFAULT_MINIMUM_RENTAL_DAYS,
)
from booking_rules.domain.entities.booking_intent import BookingIntent
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.pricing import PricingInput, PricingResult
from booking_rules.domain.entities.validation_result import ValidationResult
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements
from booking_rules.domain.value_objects.delivery import DeliveryType, decode_delivery
from booking_rules.domain.value_objects.rental_window import parse_trip_date

Money = condecimal(max_digits=12, decimal_places=2)
# Los montos calculados (días × precio) pueden exceder el límite de la entrada
Amount = condecimal(decimal_places=2)
CurrencyCode = constr(strip_whitespace=True, to_upper=True, min_length=3, max_length=3)

MONEY_ENCODERS = {Decimal: lambda v: format(v, ".2f")}


def _blank_to_none(value: Any) -> Any:
    # Los formularios envían "" en fechas sin seleccionar
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return value


class BookingForm(BaseModel):
    """Campos crudos del formulario de reserva."""

    model_config = ConfigDict(extra="forbid")

    pickup_date: date | None = None
    dropoff_date: date | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""
    driver_age: str = ""
    driving_experience: str = ""
    has_driver_license: bool = False
    is_international_license: bool = False
    delivery_type: DeliveryType = DeliveryType.MAP_LOCATION
    delivery_location: str = ""
    airport_code: str = ""

    @field_validator("pickup_date", "dropoff_date", mode="before")
    @classmethod
    def blank_dates(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        if isinstance(value, str):
            # Acepta también ISO con hora; lo ilegible se trata como ausente
            return parse_trip_date(value)
        return value

    @field_validator("driver_age", "driving_experience", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="after")
    def delivery_modes_are_exclusive(self) -> "BookingForm":
        if self.delivery_type is DeliveryType.MAP_LOCATION and self.airport_code.strip():
            raise ValueError("airport_code must be empty when delivery_type is map_location")
        if self.delivery_type is DeliveryType.AIRPORT and self.delivery_location.strip():
            raise ValueError("delivery_location must be empty when delivery_type is airport")
        return self

    def to_domain(self) -> BookingRequest:
        return BookingRequest(
            pickup_date=self.pickup_date,
            dropoff_date=self.dropoff_date,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone_number=self.phone_number,
            driver_age=self.driver_age,
            driving_experience=self.driving_experience,
            has_driver_license=self.has_driver_license,
            is_international_license=self.is_international_license,
            delivery=decode_delivery(self.delivery_type, self.delivery_location, self.airport_code),
        )


class RequirementsPayload(BaseModel):
    model_config = ConfigDict(extra="forbid", json_encoders=MONEY_ENCODERS)

    price_per_day: Money = Field(gt=0)
    require_driver_license: bool = True
    require_minimum_age: bool = True
    minimum_driver_age: conint(ge=0) = DEFAULT_MINIMUM_DRIVER_AGE
    require_driving_experience: bool = True
    minimum_driving_experience: conint(ge=0) = DEFAULT_MINIMUM_DRIVING_EXPERIENCE
    minimum_rental_days: conint(ge=0) = DEFAULT_MINIMUM_RENTAL_DAYS
    require_damage_deposit: bool = False
    damage_deposit_amount: Money = Field(default=DEFAULT_DAMAGE_DEPOSIT_AMOUNT, ge=0)
    damage_deposit_type: str = DEFAULT_DAMAGE_DEPOSIT_TYPE
    currency_code: CurrencyCode = DEFAULT_CURRENCY_CODE

    def to_domain(self) -> VehicleRequirements:
        return VehicleRequirements(**self.model_dump())

    @classmethod
    def from_domain(cls, requirements: VehicleRequirements) -> "RequirementsPayload":
        return cls(
            price_per_day=requirements.price_per_day,
            require_driver_license=requirements.require_driver_license,
            require_minimum_age=requirements.require_minimum_age,
            minimum_driver_age=requirements.minimum_driver_age,
            require_driving_experience=requirements.require_driving_experience,
            minimum_driving_experience=requirements.minimum_driving_experience,
            minimum_rental_days=requirements.minimum_rental_days,
            require_damage_deposit=requirements.require_damage_deposit,
            damage_deposit_amount=requirements.damage_deposit_amount,
            damage_deposit_type=requirements.damage_deposit_type,
            currency_code=requirements.currency_code,
        )


class ValidateBookingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    booking: BookingForm
    requirements: RequirementsPayload | None = None


class QuoteRequest(BaseModel):
    """Entrada de cotización; las fechas se aceptan como texto libre."""

    model_config = ConfigDict(extra="forbid")

    pickup_date: str | None = None
    dropoff_date: str | None = None
    price_per_day: Decimal
    driver_age: str = ""
    is_international_license: bool = False
    minimum_driver_age: int = DEFAULT_MINIMUM_DRIVER_AGE
    require_damage_deposit: bool = False
    damage_deposit_amount: Decimal = Decimal("0")
    currency_code: CurrencyCode = DEFAULT_CURRENCY_CODE

    @field_validator("driver_age", mode="before")
    @classmethod
    def age_as_text(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_domain(self) -> PricingInput:
        return PricingInput(**self.model_dump())


class ValidationResponse(BaseModel):
    is_valid: bool
    blocking_errors: list[str]
    errors: list[str]

    @classmethod
    def from_domain(cls, result: ValidationResult) -> "ValidationResponse":
        return cls(
            is_valid=result.is_valid,
            blocking_errors=list(result.blocking_errors),
            errors=list(result.errors),
        )


class PricingResponse(BaseModel):
    model_config = ConfigDict(json_encoders=MONEY_ENCODERS)

    rental_days: int
    price_per_day: Amount
    subtotal: Amount
    international_license_surcharge: Amount
    damage_deposit: Amount
    underage_deposit: Amount
    confirmation_fee: Amount
    balance_due: Amount
    total: Amount
    currency_code: CurrencyCode

    @classmethod
    def from_domain(cls, result: PricingResult) -> "PricingResponse":
        return cls(
            rental_days=result.rental_days,
            price_per_day=result.price_per_day.amount,
            subtotal=result.subtotal.amount,
            international_license_surcharge=result.international_license_surcharge.amount,
            damage_deposit=result.damage_deposit.amount,
            underage_deposit=result.underage_deposit.amount,
            confirmation_fee=result.confirmation_fee.amount,
            balance_due=result.balance_due.amount,
            total=result.total.amount,
            currency_code=result.currency_code,
        )


class EvaluationResponse(BaseModel):
    vehicle_id: str
    validation: ValidationResponse
    pricing: PricingResponse
    damage_deposit_type: str


class BookingIntentResponse(BaseModel):
    vehicle_id: str
    pickup_date: date
    dropoff_date: date
    first_name: str
    last_name: str
    email: str
    phone_number: str
    driver_age: int
    driving_experience: int
    is_international_license: bool
    delivery_type: DeliveryType
    delivery_location: str
    pricing: PricingResponse
    amount_due_now_cents: int
    pending_fields: list[str]

    @classmethod
    def from_domain(cls, intent: BookingIntent) -> "BookingIntentResponse":
        return cls(
            vehicle_id=intent.vehicle_id,
            pickup_date=intent.pickup_date,
            dropoff_date=intent.dropoff_date,
            first_name=intent.first_name,
            last_name=intent.last_name,
            email=intent.email,
            phone_number=intent.phone_number,
            driver_age=intent.driver_age,
            driving_experience=intent.driving_experience,
            is_international_license=intent.is_international_license,
            delivery_type=intent.delivery_type,
            delivery_location=intent.delivery_location,
            pricing=PricingResponse.from_domain(intent.pricing),
            amount_due_now_cents=intent.amount_due_now_cents,
            pending_fields=list(intent.pending_fields),
        )


class AirportResponse(BaseModel):
    code: str
    name: str
