"""Value Object Money - representa un valor monetario con su moneda."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from booking_rules.domain.errors import InvalidMoneyError

MINOR_UNIT = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str | None) -> Decimal:
    """Convierte a Decimal pasando por str para no heredar el error binario de float."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Money:
    """
    Value Object inmutable que representa un monto monetario.

    El monto se redondea siempre a la unidad menor de la moneda (centavos),
    de modo que toda la aritmética de precios trabaja en punto fijo.

    Attributes:
        amount: Monto decimal (2 decimales).
        currency_code: Código ISO 4217 de la moneda (ej: USD, XCD, EUR).
    """

    amount: Decimal
    currency_code: str = "USD"

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount).quantize(MINOR_UNIT, rounding=ROUND_HALF_UP)
        object.__setattr__(self, "amount", amount)

        if len(self.currency_code) != 3:
            raise InvalidMoneyError(f"currency_code must have 3 characters: {self.currency_code}")

        if self.amount < 0:
            raise InvalidMoneyError(f"amount cannot be negative: {self.amount}")

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError(f"Cannot add Money and {type(other)}")
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency_code=self.currency_code)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            raise TypeError(f"Cannot subtract {type(other)} from Money")
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency_code=self.currency_code)

    def __mul__(self, factor: int) -> "Money":
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Money can only be multiplied by int, got {type(factor)}")
        return Money(amount=self.amount * factor, currency_code=self.currency_code)

    __rmul__ = __mul__

    def _check_currency(self, other: "Money") -> None:
        if self.currency_code != other.currency_code:
            raise InvalidMoneyError(
                f"Currency mismatch: {self.currency_code} vs {other.currency_code}"
            )

    def percentage(self, rate: Decimal) -> "Money":
        """Retorna la fracción `rate` del monto (0.12 = 12%)."""
        return Money(amount=self.amount * to_decimal(rate), currency_code=self.currency_code)

    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency_code}"

    @classmethod
    def zero(cls, currency_code: str = "USD") -> "Money":
        """Crea un Money con valor cero."""
        return cls(amount=Decimal("0"), currency_code=currency_code)

    @classmethod
    def non_negative(cls, value: Decimal | int | float | str | None, currency_code: str = "USD") -> "Money":
        """Crea un Money recortando montos negativos a cero en lugar de fallar."""
        amount = to_decimal(value)
        if amount < 0:
            amount = Decimal("0")
        return cls(amount=amount, currency_code=currency_code)

    def to_cents(self) -> int:
        """Convierte a centavos (útil para el procesador de pagos)."""
        return int(self.amount * 100)
