"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Requisitos de vehículo y solicitudes de reserva de ejemplo
- Cliente HTTP de prueba (FastAPI TestClient)
- Limpieza del almacén in-memory entre tests
"""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from booking_rules.api.dependencies import get_requirements_repo
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements
from booking_rules.domain.value_objects.delivery import MapLocation
from booking_rules.main import app


# ============================================================================
# FIXTURES DE DOMINIO
# ============================================================================

@pytest.fixture
def requirements() -> VehicleRequirements:
    """Requisitos de un vehículo de 100/día con licencia obligatoria y mínimo de 2 días."""
    return VehicleRequirements(
        price_per_day=Decimal("100"),
        require_driver_license=True,
        minimum_driver_age=21,
        minimum_driving_experience=2,
        minimum_rental_days=2,
        require_damage_deposit=False,
        damage_deposit_amount=Decimal("150"),
    )


@pytest.fixture
def booking_request() -> BookingRequest:
    """Solicitud completa y elegible para los requisitos anteriores."""
    return BookingRequest(
        pickup_date=date(2024, 6, 1),
        dropoff_date=date(2024, 6, 4),
        first_name="Jane",
        last_name="Roe",
        email="jane@example.com",
        phone_number="+17585551234",
        driver_age="25",
        driving_experience="5",
        has_driver_license=True,
        is_international_license=False,
        delivery=MapLocation("Rodney Bay Marina, Gros Islet"),
    )


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture(autouse=True)
def clean_requirements_repo():
    """Vacía el almacén de requisitos antes y después de cada test."""
    repo = get_requirements_repo()
    repo.clear()
    yield repo
    repo.clear()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def booking_form_payload():
    """Payload JSON del formulario equivalente a `booking_request`."""
    return {
        "pickup_date": "2024-06-01",
        "dropoff_date": "2024-06-04",
        "first_name": "Jane",
        "last_name": "Roe",
        "email": "jane@example.com",
        "phone_number": "+17585551234",
        "driver_age": "25",
        "driving_experience": "5",
        "has_driver_license": True,
        "is_international_license": False,
        "delivery_type": "map_location",
        "delivery_location": "Rodney Bay Marina, Gros Islet",
    }


@pytest.fixture
def requirements_payload():
    return {
        "price_per_day": "100.00",
        "require_driver_license": True,
        "minimum_driver_age": 21,
        "minimum_driving_experience": 2,
        "minimum_rental_days": 2,
        "require_damage_deposit": False,
        "damage_deposit_amount": "150.00",
    }


# ============================================================================
# MARKERS DE PYTEST
# ============================================================================

def pytest_configure(config):
    """
    Configurar markers personalizados de pytest.
    """
    config.addinivalue_line(
        "markers",
        "pricing: Tests del calculador de precios"
    )
    config.addinivalue_line(
        "markers",
        "eligibility: Tests del validador de elegibilidad"
    )
