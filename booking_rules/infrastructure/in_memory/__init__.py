"""Adaptadores in-memory de los puertos de aplicación."""

from booking_rules.infrastructure.in_memory.requirements_repo import InMemoryRequirementsRepo

__all__ = ["InMemoryRequirementsRepo"]
