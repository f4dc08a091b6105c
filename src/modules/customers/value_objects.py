"""Customer value objects.

Immutable, self-validating wrappers around primitives.  Each one is built
through ``from_value(raw)`` and exposes the wrapped primitive as ``value``.
Construction fails with the matching ``DomainError`` subclass, so an
instance that exists is always valid.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Self

from modules.customers.exceptions import (
    CustomerAvailableCreditNegativeError,
    CustomerAvailableCreditOutOfRangeError,
    CustomerEmailInvalidError,
    CustomerIdPositiveError,
    CustomerPhoneNumberInvalidError,
)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_NUMBER_PATTERN = re.compile(r"\+?[1-9]\d{1,14}", re.ASCII)

# Matches the customers.available_credit column: DecimalField(14, 2).
CREDIT_QUANTUM = Decimal("0.01")
MAX_AVAILABLE_CREDIT = Decimal("999999999999.99")


@dataclass(frozen=True)
class CustomerId:
    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True must not become customer #1.
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise CustomerIdPositiveError(self.value)
        if self.value <= 0:
            raise CustomerIdPositiveError(self.value)

    @classmethod
    def from_value(cls, value: Any) -> Self:
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not EMAIL_PATTERN.fullmatch(self.value):
            raise CustomerEmailInvalidError(self.value)

    @classmethod
    def from_value(cls, value: Any) -> Self:
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PhoneNumber:
    """E.164-like phone number: optional ``+``, 2 to 15 digits, no leading 0."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not PHONE_NUMBER_PATTERN.fullmatch(
            self.value
        ):
            raise CustomerPhoneNumberInvalidError(self.value)

    @classmethod
    def from_value(cls, value: Any) -> Self:
        return cls(value)

    def __str__(self) -> str:
        return self.value


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        # str() keeps floats like 0.1 from expanding to binary noise.
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise CustomerAvailableCreditNegativeError(value) from exc


@dataclass(frozen=True)
class AvailableCredit:
    """Non-negative credit balance that fits ``DecimalField(14, 2)``.

    ``add`` returns a new instance and accepts negative deltas as long as
    the resulting balance stays at or above zero.
    """

    value: Decimal

    def __post_init__(self) -> None:
        amount = _to_decimal(self.value)
        if not amount.is_finite() or amount < 0:
            raise CustomerAvailableCreditNegativeError(amount)
        if amount > MAX_AVAILABLE_CREDIT or amount != amount.quantize(CREDIT_QUANTUM):
            raise CustomerAvailableCreditOutOfRangeError(amount)
        object.__setattr__(self, "value", amount)

    @classmethod
    def from_value(cls, value: Any) -> Self:
        return cls(value)

    @classmethod
    def zero(cls) -> Self:
        return cls(Decimal("0"))

    def add(self, delta: Any) -> AvailableCredit:
        return AvailableCredit(self.value + _to_decimal(delta))

    def __str__(self) -> str:
        return str(self.value)
