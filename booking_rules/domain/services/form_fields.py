"""Interpretación de campos de texto libre del formulario de reserva."""

import re

WHOLE_NUMBER = re.compile(r"^-?\d+$")
EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PREFILLED_PHONE_PREFIX = "+1"


def parse_whole_number(value: str | None) -> int | None:
    """Retorna el entero escrito en el campo, o None si no es un número entero."""
    text = (value or "").strip()
    if not WHOLE_NUMBER.match(text):
        return None
    return int(text)


def is_valid_email(value: str) -> bool:
    return bool(EMAIL.match(value.strip()))


def is_blank_phone(value: str) -> bool:
    """Un teléfono vacío o con solo el prefijo precargado del formulario ('+1') cuenta como ausente."""
    text = value.strip()
    return not text or text == PREFILLED_PHONE_PREFIX
