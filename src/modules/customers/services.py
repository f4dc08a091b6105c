"""Customer service layer (Use Cases).

One class per use case, each receiving an ``ICustomerRepository`` via
constructor injection (DIP) and exposing ``execute``.  The flow is always
the same: build value objects from primitive input → check business
rules → call the repository → map the aggregate to an output DTO.

Business rules enforced here:
- A customer's (email, phone number) pair is unique among live customers.
- Update, delete and credit adjustments require an existing customer.
- Partial updates only touch the supplied fields.

Domain errors propagate unchanged; repository failures are not wrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import structlog

from modules.customers.dtos import CustomerListOutputDTO, CustomerOutputDTO
from modules.customers.entities import Customer
from modules.customers.exceptions import (
    CustomerAlreadyExistsEmailPhoneNumberError,
    CustomerNotFoundError,
)
from modules.customers.repositories.interfaces import CustomerPatch
from modules.customers.value_objects import (
    AvailableCredit,
    CustomerId,
    Email,
    PhoneNumber,
)

if TYPE_CHECKING:
    from modules.customers.dtos import (
        AddAvailableCreditDTO,
        CreateCustomerDTO,
        FindAllCustomersDTO,
        UpdateCustomerDTO,
    )
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class _CustomerUseCase:
    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    def _get_existing(self, customer_id: CustomerId) -> Customer:
        customer = self._repo.get_by_id(customer_id)
        if customer is None:
            logger.warning("customer.not_found", customer_id=customer_id.value)
            raise CustomerNotFoundError(customer_id)
        return customer


# ----------------------------------------------------------------------
# Commands
# ----------------------------------------------------------------------


class CreateCustomerUseCase(_CustomerUseCase):
    def execute(self, dto: CreateCustomerDTO) -> CustomerOutputDTO:
        """Create a new customer after enforcing the uniqueness rule.

        Raises:
            CustomerEmailInvalidError / CustomerPhoneNumberInvalidError /
            CustomerAvailableCreditNegativeError / CustomerNameEmptyError:
                on invalid input.
            CustomerAlreadyExistsEmailPhoneNumberError: if a live customer
                already has the same email and phone number.
        """
        email = Email.from_value(dto.email)
        phone_number = PhoneNumber.from_value(dto.phone_number)
        initial_credit = AvailableCredit.from_value(dto.initial_available_credit)

        if self._repo.get_by_email_and_phone_number(email, phone_number) is not None:
            logger.warning("customer.duplicate_email_phone_number")
            raise CustomerAlreadyExistsEmailPhoneNumberError(
                email.value, phone_number.value
            )

        customer = Customer.create_new(
            name=dto.name,
            email=email,
            phone_number=phone_number,
            initial_credit=initial_credit,
        )
        persisted = self._repo.save(customer)
        logger.info("customer.created", customer_id=persisted.id.value)
        return CustomerOutputDTO.from_entity(persisted)


class UpdateCustomerUseCase(_CustomerUseCase):
    def execute(self, id: Any, dto: UpdateCustomerDTO) -> CustomerOutputDTO:
        """Apply a partial update.

        Only fields present (non-null) in ``dto`` reach the repository.
        A supplied name is checked against the aggregate's invariant first,
        so a whitespace-only name is rejected before anything is written.

        Raises:
            CustomerNotFoundError: if the customer does not exist.
            CustomerNameEmptyError: if the new name is blank.
        """
        customer_id = CustomerId.from_value(id)
        customer = self._get_existing(customer_id)

        changes: dict[str, Any] = {}
        if dto.name is not None:
            customer.update_name(dto.name)
            changes["name"] = customer.name
        if dto.email is not None:
            changes["email"] = Email.from_value(dto.email)
        if dto.phone_number is not None:
            changes["phone_number"] = PhoneNumber.from_value(dto.phone_number)
        if dto.available_credit is not None:
            changes["available_credit"] = AvailableCredit.from_value(
                dto.available_credit
            )

        updated = self._repo.update(customer_id, CustomerPatch(**changes))
        logger.info(
            "customer.updated",
            customer_id=customer_id.value,
            fields=sorted(changes),
        )
        return CustomerOutputDTO.from_entity(updated)


class DeleteCustomerUseCase(_CustomerUseCase):
    def execute(self, id: Any) -> None:
        """Soft-delete a customer.

        Raises:
            CustomerNotFoundError: if the customer does not exist; the
                repository's ``delete`` is not called in that case.
        """
        customer_id = CustomerId.from_value(id)
        self._get_existing(customer_id)
        self._repo.delete(customer_id)
        logger.info("customer.soft_deleted", customer_id=customer_id.value)


class AddAvailableCreditCustomerUseCase(_CustomerUseCase):
    def execute(self, dto: AddAvailableCreditDTO) -> CustomerOutputDTO:
        """Adjust a customer's balance by a signed amount.

        The sign is not checked here: the repository applies the amount and
        only rejects it when the balance would become negative.  This is a
        separate path from ``Customer.increase_available_credit``, which
        accepts positive deltas only.

        Raises:
            CustomerNotFoundError: if the customer does not exist.
            CustomerAvailableCreditNegativeError: if the balance would drop
                below zero.
            CustomerAvailableCreditOutOfRangeError: if the balance would not
                fit two decimal places and twelve integer digits.
        """
        customer_id = CustomerId.from_value(dto.id)
        self._get_existing(customer_id)
        updated = self._repo.add_available_credit(customer_id, dto.amount)
        logger.info(
            "customer.credit_adjusted",
            customer_id=customer_id.value,
            amount=float(dto.amount),
        )
        return CustomerOutputDTO.from_entity(updated)


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------


class FindCustomerByIdUseCase(_CustomerUseCase):
    def execute(self, id: Any) -> Optional[CustomerOutputDTO]:
        """Return the customer record, or ``None`` when it does not exist."""
        customer = self._repo.get_by_id(CustomerId.from_value(id))
        if customer is None:
            return None
        return CustomerOutputDTO.from_entity(customer)


class FindAllCustomersUseCase(_CustomerUseCase):
    def execute(self, dto: FindAllCustomersDTO) -> CustomerListOutputDTO:
        """Return one sorted page of customers and the unpaginated total."""
        page = self._repo.list(
            sort_by=dto.sort_by,
            sort_order=dto.sort_order,
            page=dto.page,
            page_size=dto.page_size,
        )
        return CustomerListOutputDTO(
            customers=[CustomerOutputDTO.from_entity(c) for c in page.customers],
            total=page.total,
        )
