"""Customer domain exceptions.

Raised by value objects, the ``Customer`` aggregate and the Service Layer
when business rules are violated.  Every error carries a machine-readable
``code`` and a human ``message``.  The API layer (Views) catches these and
translates them into appropriate HTTP responses.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modules.customers.value_objects import CustomerId


class DomainErrorCode(StrEnum):
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    CUSTOMER_NAME_EMPTY = "CUSTOMER_NAME_EMPTY"
    CUSTOMER_EMAIL_INVALID = "CUSTOMER_EMAIL_INVALID"
    CUSTOMER_PHONE_NUMBER_INVALID = "CUSTOMER_PHONE_NUMBER_INVALID"
    CUSTOMER_AVAILABLE_CREDIT_NEGATIVE = "CUSTOMER_AVAILABLE_CREDIT_NEGATIVE"
    CUSTOMER_ID_POSITIVE = "CUSTOMER_ID_POSITIVE"
    CUSTOMER_ALREADY_EXISTS_EMAIL_PHONE_NUMBER = (
        "CUSTOMER_ALREADY_EXISTS_EMAIL_PHONE_NUMBER"
    )
    CUSTOMER_AVAILABLE_CREDIT_POSITIVE = "CUSTOMER_AVAILABLE_CREDIT_POSITIVE"
    CUSTOMER_AVAILABLE_CREDIT_OUT_OF_RANGE = "CUSTOMER_AVAILABLE_CREDIT_OUT_OF_RANGE"


class DomainError(Exception):
    """Base class for every customer business-rule violation."""

    def __init__(self, code: DomainErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class CustomerNotFoundError(DomainError):
    """The requested customer does not exist or has been soft-deleted."""

    def __init__(self, id: CustomerId | int) -> None:
        self.id = id if isinstance(id, int) else id.value
        super().__init__(
            DomainErrorCode.CUSTOMER_NOT_FOUND,
            f"Customer with id {self.id} not found",
        )


class CustomerNameEmptyError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            DomainErrorCode.CUSTOMER_NAME_EMPTY, "Customer name cannot be empty"
        )


class CustomerEmailInvalidError(DomainError):
    def __init__(self, email: Any) -> None:
        self.email = email
        super().__init__(
            DomainErrorCode.CUSTOMER_EMAIL_INVALID, f"Invalid email address: {email}"
        )


class CustomerPhoneNumberInvalidError(DomainError):
    def __init__(self, phone_number: Any) -> None:
        self.phone_number = phone_number
        super().__init__(
            DomainErrorCode.CUSTOMER_PHONE_NUMBER_INVALID,
            f"Invalid phone number: {phone_number}",
        )


class CustomerAvailableCreditNegativeError(DomainError):
    """A balance would drop below zero.

    ``available_credit`` is the offending (resulting) value, not the delta.
    """

    def __init__(self, available_credit: Any) -> None:
        self.available_credit = available_credit
        super().__init__(
            DomainErrorCode.CUSTOMER_AVAILABLE_CREDIT_NEGATIVE,
            f"Available credit cannot be negative: {available_credit}",
        )


class CustomerIdPositiveError(DomainError):
    def __init__(self, id: Any) -> None:
        self.id = id
        super().__init__(
            DomainErrorCode.CUSTOMER_ID_POSITIVE,
            f"Customer ID must be positive integer: {id}",
        )


class CustomerAlreadyExistsEmailPhoneNumberError(DomainError):
    """A live customer already uses the same email + phone number pair."""

    def __init__(self, email: str, phone_number: str) -> None:
        self.email = email
        self.phone_number = phone_number
        super().__init__(
            DomainErrorCode.CUSTOMER_ALREADY_EXISTS_EMAIL_PHONE_NUMBER,
            f"Customer with email {email} and phone number {phone_number} "
            "already exists",
        )


class CustomerAvailableCreditPositiveError(DomainError):
    def __init__(self, available_credit: Any) -> None:
        self.available_credit = available_credit
        super().__init__(
            DomainErrorCode.CUSTOMER_AVAILABLE_CREDIT_POSITIVE,
            f"Available credit must be positive: {available_credit}",
        )


class CustomerAvailableCreditOutOfRangeError(DomainError):
    """A balance does not fit the stored precision (12 integer digits, 2 decimals)."""

    def __init__(self, available_credit: Any) -> None:
        self.available_credit = available_credit
        super().__init__(
            DomainErrorCode.CUSTOMER_AVAILABLE_CREDIT_OUT_OF_RANGE,
            "Available credit must have at most 12 integer digits and "
            f"2 decimal places: {available_credit}",
        )
