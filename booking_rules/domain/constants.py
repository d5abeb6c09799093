"""Constantes del dominio: valores por defecto y mensajes de validación."""

from decimal import Decimal

DEFAULT_CURRENCY_CODE = "USD"

# Requisitos por defecto de una compañía sin configuración propia
DEFAULT_MINIMUM_DRIVER_AGE = 25
DEFAULT_MINIMUM_DRIVING_EXPERIENCE = 3
DEFAULT_MINIMUM_RENTAL_DAYS = 1
DEFAULT_DAMAGE_DEPOSIT_AMOUNT = Decimal("250.00")
DEFAULT_DAMAGE_DEPOSIT_TYPE = "Cash"

# Política comercial
LEGAL_MINIMUM_DRIVER_AGE = 18
CONFIRMATION_FEE_RATE = Decimal("0.12")
UNDERAGE_DEPOSIT_AMOUNT = Decimal("1000.00")
INTERNATIONAL_LICENSE_SURCHARGE_AMOUNT = Decimal("23.00")
INTERNATIONAL_LICENSE_SURCHARGE_RATE = Decimal("0.10")

SURCHARGE_MODE_FLAT = "flat"
SURCHARGE_MODE_PERCENTAGE = "percentage"

DEFAULT_AIRPORTS = {
    "UVF": "Hewanorra International Airport",
    "GFL": "George F. L. Charles Airport",
}

# === Mensajes ===

LOADING_REQUIREMENTS = "Loading requirements..."

PICKUP_DATE_REQUIRED = "Pickup date is required"
DROPOFF_DATE_REQUIRED = "Dropoff date is required"
DROPOFF_BEFORE_PICKUP = "Dropoff date must be after pickup date"
MINIMUM_RENTAL_DAYS = "Minimum rental period is {days} day(s)"

DRIVER_LICENSE_REQUIRED = "Please upload a valid driver's license to proceed."

DRIVER_AGE_REQUIRED = "Driver age is required"
DRIVER_AGE_INVALID = "Please enter a valid driver age"
DRIVER_AGE_LEGAL_MINIMUM = "Driver must be at least {age} years old"
DRIVER_AGE_VEHICLE_MINIMUM = "Driver must be at least {age} years old for this vehicle"

DRIVING_EXPERIENCE_REQUIRED = "Driving experience is required"
DRIVING_EXPERIENCE_INVALID = "Please enter valid driving experience"
DRIVING_EXPERIENCE_MINIMUM = "Minimum {years} years of driving experience required"

DELIVERY_REQUIRED = "Please choose a delivery location to proceed."
DELIVERY_AIRPORT_UNSUPPORTED = "Please select a supported airport for delivery."
DELIVERY_MAPS_URL_INVALID = "Please provide a valid Google Maps URL for delivery location."

FIRST_NAME_REQUIRED = "First name is required"
LAST_NAME_REQUIRED = "Last name is required"
EMAIL_REQUIRED = "Email address is required"
EMAIL_INVALID = "Please enter a valid email address"
PHONE_REQUIRED = "Phone number is required"
