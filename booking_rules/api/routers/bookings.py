from fastapi import APIRouter, Depends, status

from booking_rules.api.dependencies import get_policy, get_use_cases
from booking_rules.api.schemas.bookings import (
    AirportResponse,
    BookingForm,
    BookingIntentResponse,
    EvaluationResponse,
    PricingResponse,
    QuoteRequest,
    RequirementsPayload,
    ValidateBookingRequest,
    ValidationResponse,
)
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.domain.services import price, validate

router = APIRouter()


@router.post(
    "/bookings/validate",
    response_model=ValidationResponse,
    status_code=status.HTTP_200_OK,
)
async def validate_booking(
    payload: ValidateBookingRequest,
    policy: BookingPolicy = Depends(get_policy),
) -> ValidationResponse:
    requirements = payload.requirements.to_domain() if payload.requirements else None
    result = validate(payload.booking.to_domain(), requirements, policy)
    return ValidationResponse.from_domain(result)


@router.post(
    "/bookings/quote",
    response_model=PricingResponse,
    status_code=status.HTTP_200_OK,
)
async def quote_booking(
    payload: QuoteRequest,
    policy: BookingPolicy = Depends(get_policy),
) -> PricingResponse:
    return PricingResponse.from_domain(price(payload.to_domain(), policy))


@router.get(
    "/vehicles/{vehicle_id}/requirements",
    response_model=RequirementsPayload,
    status_code=status.HTTP_200_OK,
)
async def get_requirements(
    vehicle_id: str,
    use_cases=Depends(get_use_cases),
) -> RequirementsPayload:
    requirements = await use_cases["get_requirements"].execute(vehicle_id=vehicle_id)
    return RequirementsPayload.from_domain(requirements)


@router.put(
    "/vehicles/{vehicle_id}/requirements",
    response_model=RequirementsPayload,
    status_code=status.HTTP_200_OK,
)
async def save_requirements(
    vehicle_id: str,
    payload: RequirementsPayload,
    use_cases=Depends(get_use_cases),
) -> RequirementsPayload:
    requirements = await use_cases["save_requirements"].execute(
        vehicle_id=vehicle_id,
        requirements=payload.to_domain(),
    )
    return RequirementsPayload.from_domain(requirements)


@router.post(
    "/vehicles/{vehicle_id}/evaluation",
    response_model=EvaluationResponse,
    status_code=status.HTTP_200_OK,
)
async def evaluate_booking(
    vehicle_id: str,
    payload: BookingForm,
    use_cases=Depends(get_use_cases),
) -> EvaluationResponse:
    evaluation = await use_cases["evaluate_booking"].execute(
        vehicle_id=vehicle_id,
        request=payload.to_domain(),
    )
    return EvaluationResponse(
        vehicle_id=vehicle_id,
        validation=ValidationResponse.from_domain(evaluation.validation),
        pricing=PricingResponse.from_domain(evaluation.pricing),
        damage_deposit_type=evaluation.requirements.damage_deposit_type,
    )


@router.post(
    "/vehicles/{vehicle_id}/booking-intents",
    response_model=BookingIntentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def prepare_booking_intent(
    vehicle_id: str,
    payload: BookingForm,
    use_cases=Depends(get_use_cases),
) -> BookingIntentResponse:
    intent = await use_cases["prepare_booking_intent"].execute(
        vehicle_id=vehicle_id,
        request=payload.to_domain(),
    )
    return BookingIntentResponse.from_domain(intent)


@router.get(
    "/airports",
    response_model=list[AirportResponse],
    status_code=status.HTTP_200_OK,
)
async def list_airports(policy: BookingPolicy = Depends(get_policy)) -> list[AirportResponse]:
    return [AirportResponse(code=code, name=name) for code, name in policy.airports.items()]
