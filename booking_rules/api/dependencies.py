from functools import lru_cache

from fastapi import Depends

from booking_rules.application.use_cases.evaluate_booking import EvaluateBookingUseCase
from booking_rules.application.use_cases.manage_requirements import (
    GetRequirementsUseCase,
    SaveRequirementsUseCase,
)
from booking_rules.application.use_cases.prepare_booking_intent import PrepareBookingIntentUseCase
from booking_rules.config import Settings, get_settings
from booking_rules.domain.entities.policy import BookingPolicy
from booking_rules.infrastructure.in_memory.requirements_repo import InMemoryRequirementsRepo


@lru_cache(maxsize=1)
def get_requirements_repo() -> InMemoryRequirementsRepo:
    return InMemoryRequirementsRepo()


def get_policy(settings: Settings = Depends(get_settings)) -> BookingPolicy:
    return BookingPolicy.from_settings(settings)


def get_use_cases(policy: BookingPolicy = Depends(get_policy)):
    requirements_repo = get_requirements_repo()
    evaluate_booking = EvaluateBookingUseCase(
        requirements_repo=requirements_repo,
        policy=policy,
    )
    return {
        "evaluate_booking": evaluate_booking,
        "prepare_booking_intent": PrepareBookingIntentUseCase(
            evaluate_booking=evaluate_booking,
            policy=policy,
        ),
        "get_requirements": GetRequirementsUseCase(requirements_repo=requirements_repo),
        "save_requirements": SaveRequirementsUseCase(requirements_repo=requirements_repo),
    }
