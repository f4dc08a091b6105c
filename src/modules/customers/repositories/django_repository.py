"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.  Every
look-up goes through ``CustomerModel.objects.alive()`` so soft-deleted rows
are invisible.  Rows are mapped to ``Customer`` aggregates before leaving
this module.

Error handling: look-ups return ``None`` for missing customers; writes on
a missing customer raise ``CustomerNotFoundError``.  Database errors (for
example the (email, phone_number) unique constraint) propagate untouched.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import structlog
from django.db import transaction

from modules.customers.entities import Customer
from modules.customers.exceptions import CustomerNotFoundError
from modules.customers.models import CustomerModel
from modules.customers.repositories.interfaces import (
    CustomerPage,
    CustomerPatch,
    CustomerSortField,
    ICustomerRepository,
    SortOrder,
)
from modules.customers.value_objects import CustomerId, Email, PhoneNumber

logger = structlog.get_logger(__name__)

SORT_COLUMNS: dict[CustomerSortField, str] = {
    CustomerSortField.AVAILABLE_CREDIT: "available_credit",
    CustomerSortField.NAME: "name",
    CustomerSortField.CREATED_AT: "created_at",
}


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: CustomerId) -> Optional[Customer]:
        row = CustomerModel.objects.alive().filter(pk=id.value).first()
        return row.to_domain() if row else None

    def list(
        self,
        sort_by: CustomerSortField,
        sort_order: SortOrder,
        page: int,
        page_size: int,
    ) -> CustomerPage:
        """Sorted, paginated listing.

        ``id`` is appended as a tie-breaker so pages are stable when the
        sort column has duplicates.
        """
        column = SORT_COLUMNS[CustomerSortField(sort_by)]
        prefix = "-" if SortOrder(sort_order) == SortOrder.DESC else ""
        queryset = CustomerModel.objects.alive().order_by(
            f"{prefix}{column}", f"{prefix}id"
        )
        offset = (page - 1) * page_size
        rows = queryset[offset : offset + page_size]
        return CustomerPage(
            customers=[row.to_domain() for row in rows],
            total=queryset.count(),
        )

    def get_by_email_and_phone_number(
        self, email: Email, phone_number: PhoneNumber
    ) -> Optional[Customer]:
        row = (
            CustomerModel.objects.alive()
            .filter(email=email.value, phone_number=phone_number.value)
            .first()
        )
        return row.to_domain() if row else None

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer and return the stored state."""
        is_new = not entity.is_persisted
        row = CustomerModel.from_domain(entity)
        row.save()
        logger.info("customer.saved", customer_id=row.id, is_new=is_new)
        return row.to_domain()

    @transaction.atomic
    def delete(self, id: CustomerId) -> None:
        """Soft-delete a customer by ID (no-op when already gone)."""
        count, _ = CustomerModel.objects.alive().filter(pk=id.value).delete()
        if count:
            logger.info("customer.soft_deleted", customer_id=id.value)

    @transaction.atomic
    def update(self, id: CustomerId, patch: CustomerPatch) -> Customer:
        row = self._get_for_update(id)
        if patch.is_set("name"):
            row.name = patch.name
        if patch.is_set("email"):
            row.email = patch.email.value
        if patch.is_set("phone_number"):
            row.phone_number = patch.phone_number.value
        if patch.is_set("available_credit"):
            row.available_credit = patch.available_credit.value
        row.save()
        return row.to_domain()

    @transaction.atomic
    def add_available_credit(self, id: CustomerId, amount: Decimal) -> Customer:
        """Apply a signed amount; an invalid balance raises before the row is written."""
        row = self._get_for_update(id)
        customer = row.to_domain()
        new_balance = customer.available_credit.add(amount)
        row.available_credit = new_balance.value
        row.save(update_fields=["available_credit"])
        return row.to_domain()

    def _get_for_update(self, id: CustomerId) -> CustomerModel:
        row = (
            CustomerModel.objects.alive()
            .select_for_update()
            .filter(pk=id.value)
            .first()
        )
        if row is None:
            raise CustomerNotFoundError(id)
        return row

