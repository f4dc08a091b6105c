"""Customer aggregate root.

The aggregate is storage-agnostic: persistence assigns identity and the
repository reconstitutes state through ``Customer.restore``.

Identity is an explicit variant rather than a nullable id:

- ``Transient``: built by ``Customer.create_new``, not stored yet.
- ``Persisted``: carries the ``CustomerId`` assigned by storage.

Lifecycle: transient → persisted → (optionally) soft-deleted.
``mark_deleted`` only records ``deleted_at``; the aggregate keeps accepting
mutations afterwards and soft-delete persistence belongs to the repository.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from django.utils import timezone

from modules.customers.exceptions import (
    CustomerAvailableCreditPositiveError,
    CustomerNameEmptyError,
)
from modules.customers.value_objects import (
    AvailableCredit,
    CustomerId,
    Email,
    PhoneNumber,
)


@dataclass(frozen=True)
class Transient:
    """Identity of a customer that storage has not seen yet."""


@dataclass(frozen=True)
class Persisted:
    """Identity assigned by storage."""

    id: CustomerId


CustomerIdentity = Union[Transient, Persisted]


class Customer:
    """Customer aggregate root.

    Invariant: ``name`` is never empty or whitespace-only.
    """

    def __init__(
        self,
        identity: CustomerIdentity,
        name: str,
        email: Email,
        phone_number: PhoneNumber,
        available_credit: AvailableCredit,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime] = None,
    ) -> None:
        self._ensure_valid_name(name)
        self._identity = identity
        self._name = name
        self._email = email
        self._phone_number = phone_number
        self._available_credit = available_credit
        self._created_at = created_at
        self._updated_at = updated_at
        self._deleted_at = deleted_at

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def create_new(
        cls,
        name: str,
        email: Email,
        phone_number: PhoneNumber,
        initial_credit: Optional[AvailableCredit] = None,
    ) -> Customer:
        """Build a transient customer; credit defaults to zero."""
        if initial_credit is None:
            initial_credit = AvailableCredit.zero()
        now = timezone.now()
        return cls(
            identity=Transient(),
            name=name,
            email=email,
            phone_number=phone_number,
            available_credit=initial_credit,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def restore(
        cls,
        id: CustomerId,
        name: str,
        email: Email,
        phone_number: PhoneNumber,
        available_credit: AvailableCredit,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: Optional[datetime] = None,
    ) -> Customer:
        """Reconstitute a persisted customer from its full state."""
        return cls(
            identity=Persisted(id),
            name=name,
            email=email,
            phone_number=phone_number,
            available_credit=available_credit,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def update_name(self, name: str) -> None:
        self._ensure_valid_name(name)
        self._name = name.strip()
        self._touch()

    def update_contact(self, email: Email, phone_number: PhoneNumber) -> None:
        self._email = email
        self._phone_number = phone_number
        self._touch()

    def increase_available_credit(
        self, delta: Decimal | int | float | AvailableCredit
    ) -> None:
        """Add a strictly positive ``delta`` to the balance.

        Raises:
            CustomerAvailableCreditPositiveError: if ``delta <= 0``.
        """
        if isinstance(delta, AvailableCredit):
            delta = delta.value
        if delta <= 0:
            raise CustomerAvailableCreditPositiveError(delta)
        self._available_credit = self._available_credit.add(delta)
        self._touch()

    def mark_deleted(self) -> None:
        self._deleted_at = timezone.now()

    @staticmethod
    def _ensure_valid_name(name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise CustomerNameEmptyError()

    def _touch(self) -> None:
        self._updated_at = timezone.now()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def identity(self) -> CustomerIdentity:
        return self._identity

    @property
    def id(self) -> Optional[CustomerId]:
        """The storage id, ``None`` while the customer is transient."""
        if isinstance(self._identity, Persisted):
            return self._identity.id
        return None

    @property
    def is_persisted(self) -> bool:
        return isinstance(self._identity, Persisted)

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> Email:
        return self._email

    @property
    def phone_number(self) -> PhoneNumber:
        return self._phone_number

    @property
    def available_credit(self) -> AvailableCredit:
        return self._available_credit

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def deleted_at(self) -> Optional[datetime]:
        return self._deleted_at

    @property
    def is_deleted(self) -> bool:
        return self._deleted_at is not None

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self._name!r}>"
