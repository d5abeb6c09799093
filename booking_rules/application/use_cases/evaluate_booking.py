import logging
from dataclasses import dataclass

from booking_rules.application.interfaces.requirements_repo import RequirementsRepo
from booking_rules.domain.entities.booking_request import BookingRequest
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.entities.pricing import PricingInput, PricingResult
from booking_rules.domain.entities.validation_result import ValidationResult
from booking_rules.domain.entities.vehicle_requirements import VehicleRequirements
from booking_rules.domain.errors import VehicleNotFoundError
from booking_rules.domain.services import price, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingEvaluation:
    requirements: VehicleRequirements
    validation: ValidationResult
    pricing: PricingResult


class EvaluateBookingUseCase:
    def __init__(self, requirements_repo: RequirementsRepo, policy: BookingPolicy) -> None:
        self._requirements_repo = requirements_repo
        self._policy = policy

    async def execute(self, vehicle_id: str, request: BookingRequest) -> BookingEvaluation:
        requirements = await self._requirements_repo.get_by_vehicle_id(vehicle_id)
        if requirements is None:
            raise VehicleNotFoundError(vehicle_id)

        validation = validate(request, requirements, self._policy)
        pricing = price(PricingInput.from_booking(request, requirements), self._policy)

        logger.info(
            f"Evaluación vehículo {vehicle_id}: valid={validation.is_valid} "
            f"blocking={len(validation.blocking_errors)} advisory={len(validation.errors)} "
            f"days={pricing.rental_days} total={pricing.total}"
        )
        return BookingEvaluation(requirements=requirements, validation=validation, pricing=pricing)
