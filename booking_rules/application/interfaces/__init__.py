"""Puertos (interfaces) de la capa de aplicación."""

from booking_rules.application.interfaces.requirements_repo import RequirementsRepo

__all__ = ["RequirementsRepo"]
