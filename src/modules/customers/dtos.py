"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views) and the
Service layer.  DTOs are immutable (``frozen=True``) and accept both the
snake_case field names and the camelCase aliases used on the wire.

Input DTOs only check shape; business rules (email/phone format, name
not empty, credit balance) belong to the value objects and the aggregate.

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: partial update input.
- ``FindAllCustomersDTO``: sorting and pagination for listings.
- ``AddAvailableCreditDTO``: signed credit adjustment.
- ``CustomerOutputDTO`` / ``CustomerListOutputDTO``: outputs.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from modules.customers.repositories.interfaces import CustomerSortField, SortOrder

if TYPE_CHECKING:
    from modules.customers.entities import Customer

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Storage precision of customers.available_credit: DecimalField(14, 2).
CREDIT_MAX_DIGITS = 14
CREDIT_DECIMAL_PLACES = 2

_INPUT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests."""

    model_config = _INPUT_CONFIG

    name: str
    email: str
    phone_number: str
    initial_available_credit: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        max_digits=CREDIT_MAX_DIGITS,
        decimal_places=CREDIT_DECIMAL_PLACES,
    )


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    All fields are optional; only supplied, non-null fields are updated.
    """

    model_config = _INPUT_CONFIG

    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    available_credit: Optional[Decimal] = Field(
        default=None,
        max_digits=CREDIT_MAX_DIGITS,
        decimal_places=CREDIT_DECIMAL_PLACES,
    )


def _positive_int_or_none(value: Any) -> Optional[int]:
    """Lenient query-string parsing: anything but a positive integer is ``None``."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 1 else None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        parsed = int(value)
        return parsed if parsed >= 1 else None
    return None


class FindAllCustomersDTO(BaseModel):
    """Immutable DTO for customer listings.

    Invalid or missing ``page`` / ``pageSize`` fall back to the defaults
    instead of failing, so ``?page=abc`` behaves like no page at all.
    """

    model_config = _INPUT_CONFIG

    sort_by: CustomerSortField = CustomerSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.ASC
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("sort_by", "sort_order", mode="before")
    @classmethod
    def blank_means_default(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("page", mode="before")
    @classmethod
    def parse_page(cls, v: Any) -> int:
        return _positive_int_or_none(v) or DEFAULT_PAGE

    @field_validator("page_size", mode="before")
    @classmethod
    def parse_page_size(cls, v: Any) -> int:
        return _positive_int_or_none(v) or DEFAULT_PAGE_SIZE


class AddAvailableCreditDTO(BaseModel):
    """Immutable DTO for a signed credit adjustment (negative = debit)."""

    model_config = _INPUT_CONFIG

    id: Any
    amount: Decimal = Field(
        max_digits=CREDIT_MAX_DIGITS, decimal_places=CREDIT_DECIMAL_PLACES
    )


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class CustomerOutputDTO(BaseModel):
    """Immutable plain record of a persisted customer."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    email: str
    phone_number: str
    available_credit: Decimal
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, customer: Customer) -> CustomerOutputDTO:
        """Build an output DTO from a persisted ``Customer`` aggregate."""
        if customer.id is None:
            raise ValueError("Cannot map a transient customer to an output record.")
        return cls(
            id=customer.id.value,
            name=customer.name,
            email=customer.email.value,
            phone_number=customer.phone_number.value,
            available_credit=customer.available_credit.value,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
            deleted_at=customer.deleted_at,
        )


class CustomerListOutputDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    customers: List[CustomerOutputDTO]
    total: int
