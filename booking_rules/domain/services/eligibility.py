"""
Validador de elegibilidad de reservas.

`validate` es una función pura: evalúa todas las reglas sin cortar en la
primera falla, de modo que el usuario vea la lista completa de correcciones.
Las violaciones de política van a `blocking_errors`; los datos de contacto
pendientes van a `errors` y no impiden el envío.
"""

from booking_rules.domain import constants as msg
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.entities.validation_result import ValidationResult
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements
from booking_rules.domain.services.form_fields import (
    is_blank_phone,
    is_valid_email,
    parse_whole_number,
)
from booking_rules.domain.value_objects.delivery import (
    Airport,
    MapLocation,
    is_google_maps_url,
)
from booking_rules.domain.value_objects.rental_window import RentalWindow, parse_trip_date


def _check_trip_window(form: BookingRequest, requirements: VehicleRequirements) -> list[str]:
    failures = []
    pickup = parse_trip_date(form.pickup_date)
    dropoff = parse_trip_date(form.dropoff_date)

    if pickup is None:
        failures.append(msg.PICKUP_DATE_REQUIRED)
    if dropoff is None:
        failures.append(msg.DROPOFF_DATE_REQUIRED)
    if pickup is None or dropoff is None:
        return failures

    window = RentalWindow.from_dates(pickup, dropoff)
    if window is None:
        failures.append(msg.DROPOFF_BEFORE_PICKUP)
    elif window.rental_days < requirements.minimum_rental_days:
        failures.append(msg.MINIMUM_RENTAL_DAYS.format(days=requirements.minimum_rental_days))
    return failures


def _check_driver_license(form: BookingRequest, requirements: VehicleRequirements) -> list[str]:
    if requirements.require_driver_license and not form.has_driver_license:
        return [msg.DRIVER_LICENSE_REQUIRED]
    return []


def _check_driver_age(
    form: BookingRequest,
    requirements: VehicleRequirements,
    policy: BookingPolicy,
) -> list[str]:
    if not form.driver_age.strip():
        return [msg.DRIVER_AGE_REQUIRED]

    age = parse_whole_number(form.driver_age)
    if age is None or age < 0:
        return [msg.DRIVER_AGE_INVALID]
    if age < policy.legal_minimum_driver_age:
        return [msg.DRIVER_AGE_LEGAL_MINIMUM.format(age=policy.legal_minimum_driver_age)]
    if requirements.require_minimum_age and age < requirements.minimum_driver_age:
        return [msg.DRIVER_AGE_VEHICLE_MINIMUM.format(age=requirements.minimum_driver_age)]
    return []


def _check_driving_experience(form: BookingRequest, requirements: VehicleRequirements) -> list[str]:
    if not form.driving_experience.strip():
        return [msg.DRIVING_EXPERIENCE_REQUIRED]

    years = parse_whole_number(form.driving_experience)
    if years is None or years < 0:
        return [msg.DRIVING_EXPERIENCE_INVALID]
    if requirements.require_driving_experience and years < requirements.minimum_driving_experience:
        return [msg.DRIVING_EXPERIENCE_MINIMUM.format(years=requirements.minimum_driving_experience)]
    return []


def _check_delivery(form: BookingRequest, policy: BookingPolicy) -> list[str]:
    selection = form.delivery
    if isinstance(selection, Airport):
        if not selection.code:
            return [msg.DELIVERY_REQUIRED]
        if selection.code not in policy.airports:
            return [msg.DELIVERY_AIRPORT_UNSUPPORTED]
        return []
    if isinstance(selection, MapLocation):
        if not selection.text.strip():
            return [msg.DELIVERY_REQUIRED]
        if policy.require_maps_url_for_delivery and not is_google_maps_url(selection.text):
            return [msg.DELIVERY_MAPS_URL_INVALID]
        return []
    return [msg.DELIVERY_REQUIRED]


def _check_contact(form: BookingRequest) -> list[str]:
    issues = []
    if not form.first_name.strip():
        issues.append(msg.FIRST_NAME_REQUIRED)
    if not form.last_name.strip():
        issues.append(msg.LAST_NAME_REQUIRED)
    if not form.email.strip():
        issues.append(msg.EMAIL_REQUIRED)
    elif not is_valid_email(form.email):
        issues.append(msg.EMAIL_INVALID)
    if is_blank_phone(form.phone_number):
        issues.append(msg.PHONE_REQUIRED)
    return issues


def validate(
    form: BookingRequest,
    requirements: VehicleRequirements | None,
    policy: BookingPolicy | None = None,
) -> ValidationResult:
    """
    Valida una solicitud de reserva contra los requisitos del vehículo.

    Args:
        form: Estado actual del formulario.
        requirements: Requisitos del vehículo, o None mientras se cargan.
        policy: Política comercial; por defecto la política estándar.

    Returns:
        ValidationResult con los errores en el orden de evaluación de las reglas.
    """
    if requirements is None:
        return ValidationResult.loading()

    policy = policy or BookingPolicy()

    blocking_errors = [
        *_check_trip_window(form, requirements),
        *_check_driver_license(form, requirements),
        *_check_driver_age(form, requirements, policy),
        *_check_driving_experience(form, requirements),
        *_check_delivery(form, policy),
    ]
    errors = _check_contact(form)

    return ValidationResult(blocking_errors=tuple(blocking_errors), errors=tuple(errors))
