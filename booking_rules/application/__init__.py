"""
Capa de Aplicación - Evaluación de Reservas.

Esta capa contiene los casos de uso e interfaces (puertos).
Orquesta las reglas puras del dominio con el almacén de requisitos.

Estructura:
- use_cases/: Casos de uso del sistema
- interfaces/: Puertos (contratos para adaptadores)
"""
