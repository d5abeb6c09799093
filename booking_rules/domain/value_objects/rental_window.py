"""Value Object RentalWindow - ventana de fechas pickup/dropoff."""

from dataclasses import dataclass
from datetime import date, datetime

from booking_rules.domain.errors import InvalidDateRangeError


def parse_trip_date(value: date | str | None) -> date | None:
    """
    Normaliza una fecha del formulario a `date`.

    Acepta 'YYYY-MM-DD' o ISO con hora ('YYYY-MM-DDTHH:MM'); cualquier valor
    vacío o mal formado se trata como ausente.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    base = str(value).split("T", 1)[0].strip()
    if not base:
        return None
    try:
        return date.fromisoformat(base)
    except ValueError:
        return None


@dataclass(frozen=True)
class RentalWindow:
    """
    Value Object inmutable que representa la ventana de una renta.

    Attributes:
        pickup: Fecha de recogida.
        dropoff: Fecha de devolución (estrictamente posterior a pickup).
    """

    pickup: date
    dropoff: date

    def __post_init__(self) -> None:
        if self.pickup >= self.dropoff:
            raise InvalidDateRangeError(
                f"pickup must be before dropoff: {self.pickup} >= {self.dropoff}"
            )

    @property
    def rental_days(self) -> int:
        """
        Días de renta.

        Regla de negocio: se cuenta el día de recogida y no el de devolución,
        por lo que 2024-06-01 -> 2024-06-04 son 3 días. Al trabajar con fechas
        de calendario la diferencia ya es un número entero de días.
        """
        return (self.dropoff - self.pickup).days

    @classmethod
    def from_dates(
        cls,
        pickup: date | str | None,
        dropoff: date | str | None,
    ) -> "RentalWindow | None":
        """Factory tolerante: retorna None si falta alguna fecha o el rango está invertido."""
        start = parse_trip_date(pickup)
        end = parse_trip_date(dropoff)
        if start is None or end is None or end <= start:
            return None
        return cls(pickup=start, dropoff=end)
