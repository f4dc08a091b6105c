"""Customer repository interface.

Extends ``IRepository[Customer, CustomerId]`` with the look-ups and
partial writes required by the customer use cases.

Partial updates travel as a ``CustomerPatch``: every patchable field is
either ``UNSET`` or a value, so adapters can tell "omitted" apart from a
supplied value without inspecting dictionary keys.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, fields
from decimal import Decimal
from enum import StrEnum
from typing import TYPE_CHECKING, Any, NamedTuple, Optional, Union

from modules.core.repositories.interfaces import IRepository
from modules.customers.value_objects import (
    AvailableCredit,
    CustomerId,
    Email,
    PhoneNumber,
)

if TYPE_CHECKING:
    from modules.customers.entities import Customer


class CustomerSortField(StrEnum):
    AVAILABLE_CREDIT = "availableCredit"
    NAME = "name"
    CREATED_AT = "createdAt"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class _Unset:
    """Marker for a patch field that was not supplied."""

    _instance: Optional[_Unset] = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class CustomerPatch:
    """Explicit set of changes for ``ICustomerRepository.update``."""

    name: Union[str, _Unset] = UNSET
    email: Union[Email, _Unset] = UNSET
    phone_number: Union[PhoneNumber, _Unset] = UNSET
    available_credit: Union[AvailableCredit, _Unset] = UNSET

    def is_set(self, field_name: str) -> bool:
        return getattr(self, field_name) is not UNSET

    def changes(self) -> dict[str, Any]:
        """Only the supplied fields, keyed by attribute name."""
        return {
            f.name: getattr(self, f.name) for f in fields(self) if self.is_set(f.name)
        }

    @property
    def is_empty(self) -> bool:
        return not self.changes()


class CustomerPage(NamedTuple):
    """One page of customers plus the unpaginated total."""

    customers: list[Customer]
    total: int


class ICustomerRepository(IRepository["Customer", CustomerId]):
    """Repository contract for the Customer aggregate.

    Soft-deleted customers are never returned by look-ups.
    """

    @abstractmethod
    def list(
        self,
        sort_by: CustomerSortField,
        sort_order: SortOrder,
        page: int,
        page_size: int,
    ) -> CustomerPage:
        """Return one sorted page of customers and the total count."""

    @abstractmethod
    def get_by_email_and_phone_number(
        self, email: Email, phone_number: PhoneNumber
    ) -> Optional[Customer]:
        """Retrieve the customer registered with both contact values."""

    @abstractmethod
    def update(self, id: CustomerId, patch: CustomerPatch) -> Customer:
        """Merge ``patch`` into the stored customer and persist it.

        Raises:
            CustomerNotFoundError: if no live customer has ``id``.
        """

    @abstractmethod
    def add_available_credit(self, id: CustomerId, amount: Decimal) -> Customer:
        """Add a signed ``amount`` to the stored balance.

        Raises:
            CustomerNotFoundError: if no live customer has ``id``.
            CustomerAvailableCreditNegativeError: if the balance would go
                below zero.
            CustomerAvailableCreditOutOfRangeError: if the balance would
                exceed the stored precision.
        """
