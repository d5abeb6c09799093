import logging

from booking_rules.application.use_cases.evaluate_booking import EvaluateBookingUseCase
from booking_rules.domain.entities.booking_intent import BookingIntent
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.errors import BookingNotEligibleError
from booking_rules.domain.services.form_fields import parse_whole_number
from booking_rules.domain.value_objects.rental_window import parse_trip_date

logger = logging.getLogger(__name__)


class PrepareBookingIntentUseCase:
    """
    Convierte un formulario elegible en la intención de reserva que se envía
    al servicio de pagos. Los datos de contacto pendientes no bloquean; se
    devuelven en `pending_fields` para completarlos en el siguiente paso.
    """

    def __init__(self, evaluate_booking: EvaluateBookingUseCase, policy: BookingPolicy) -> None:
        self._evaluate_booking = evaluate_booking
        self._policy = policy

    async def execute(self, vehicle_id: str, request: BookingRequest) -> BookingIntent:
        evaluation = await self._evaluate_booking.execute(vehicle_id=vehicle_id, request=request)
        validation = evaluation.validation

        if not validation.is_valid:
            logger.warning(
                f"Reserva rechazada para vehículo {vehicle_id}: {list(validation.blocking_errors)}"
            )
            raise BookingNotEligibleError(vehicle_id=vehicle_id, validation=validation)

        # Una validación sin errores bloqueantes garantiza fechas, edad,
        # experiencia y entrega presentes.
        delivery = request.delivery
        intent = BookingIntent(
            vehicle_id=str(vehicle_id),
            pickup_date=parse_trip_date(request.pickup_date),
            dropoff_date=parse_trip_date(request.dropoff_date),
            first_name=request.first_name.strip(),
            last_name=request.last_name.strip(),
            email=request.email.strip(),
            phone_number=request.phone_number.strip(),
            driver_age=parse_whole_number(request.driver_age),
            driving_experience=parse_whole_number(request.driving_experience),
            is_international_license=request.is_international_license,
            delivery_type=delivery.kind,
            delivery_location=delivery.describe(self._policy.airports),
            pricing=evaluation.pricing,
            pending_fields=validation.errors,
        )
        logger.info(
            f"Intención de reserva preparada: vehículo {vehicle_id}, "
            f"{intent.pickup_date} -> {intent.dropoff_date}, total {intent.pricing.total}"
        )
        return intent
