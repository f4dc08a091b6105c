"""Customer persistence model with soft delete.

The ORM row is a storage detail: the service layer only sees the
``Customer`` aggregate from ``modules.customers.entities``.  ``to_domain``
and ``from_domain`` translate between the two.

Storage rules:
- (email, phone_number) is unique among live (not soft-deleted) rows.
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from django.db import models
from django.db.models import Q

from modules.core.models import SoftDeleteModel
from modules.customers.entities import Customer, Persisted
from modules.customers.value_objects import (
    AvailableCredit,
    CustomerId,
    Email,
    PhoneNumber,
)


class CustomerModel(SoftDeleteModel):
    """Row backing the Customer aggregate."""

    name = models.CharField(max_length=255)
    email = models.CharField(max_length=255)
    phone_number = models.CharField(max_length=255)
    available_credit = models.DecimalField(
        max_digits=14, decimal_places=2, default=0
    )

    class Meta:
        db_table = "customers"
        ordering = ["created_at", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["email", "phone_number"],
                condition=Q(deleted_at__isnull=True),
                name="customers_email_phone_alive_uniq",
            ),
        ]
        indexes = [
            models.Index(fields=["created_at"], name="customers_created_idx"),
            models.Index(fields=["available_credit"], name="customers_credit_idx"),
        ]

    # ------------------------------------------------------------------
    # Mapping: ORM → Domain
    # ------------------------------------------------------------------

    def to_domain(self) -> Customer:
        return Customer.restore(
            id=CustomerId.from_value(self.id),
            name=self.name,
            email=Email.from_value(self.email),
            phone_number=PhoneNumber.from_value(self.phone_number),
            available_credit=AvailableCredit.from_value(self.available_credit),
            created_at=self.created_at,
            updated_at=self.updated_at,
            deleted_at=self.deleted_at,
        )

    # ------------------------------------------------------------------
    # Mapping: Domain → ORM
    # ------------------------------------------------------------------

    @classmethod
    def from_domain(cls, customer: Customer) -> CustomerModel:
        """Build an unsaved row; a transient customer gets no primary key."""
        row = cls(
            name=customer.name,
            email=customer.email.value,
            phone_number=customer.phone_number.value,
            available_credit=customer.available_credit.value,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
            deleted_at=customer.deleted_at,
        )
        if isinstance(customer.identity, Persisted):
            row.id = customer.identity.id.value
            row._state.adding = False
        return row

    def __str__(self) -> str:
        return f"{self.name} (#{self.id})"
