"""
Capa de Infraestructura - Evaluación de Reservas.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- in_memory/: Implementaciones in-memory del almacén de requisitos
"""

from booking_rules.infrastructure.in_memory import InMemoryRequirementsRepo

__all__ = [
    "InMemoryRequirementsRepo",
]
