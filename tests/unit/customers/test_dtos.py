"""Unit tests for Customer DTOs.

Covers:
- CreateCustomerDTO: camelCase aliases, default credit, shape checks.
- UpdateCustomerDTO: every field optional.
- FindAllCustomersDTO: defaults, enum validation, lenient paging.
- CustomerOutputDTO: from_entity factory.
"""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.customers.dtos import (
    AddAvailableCreditDTO,
    CreateCustomerDTO,
    CustomerOutputDTO,
    FindAllCustomersDTO,
    UpdateCustomerDTO,
)
from modules.customers.entities import Customer
from modules.customers.repositories.interfaces import CustomerSortField, SortOrder
from modules.customers.value_objects import (
    AvailableCredit,
    CustomerId,
    Email,
    PhoneNumber,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateCustomerDTO
# ===========================================================================


class TestCreateCustomerDTO:
    def test_accepts_camel_case_payload(self):
        dto = CreateCustomerDTO.model_validate(
            {
                "name": "John Doe",
                "email": "john@example.com",
                "phoneNumber": "+34600123456",
                "initialAvailableCredit": 100,
            }
        )
        assert dto.phone_number == "+34600123456"
        assert dto.initial_available_credit == Decimal("100")

    def test_accepts_field_names(self):
        dto = CreateCustomerDTO(
            name="John Doe", email="john@example.com", phone_number="+34600123456"
        )
        assert dto.name == "John Doe"

    def test_initial_credit_defaults_to_zero(self):
        dto = CreateCustomerDTO(
            name="John Doe", email="john@example.com", phone_number="+34600123456"
        )
        assert dto.initial_available_credit == Decimal("0")

    def test_negative_initial_credit_rejected(self):
        with pytest.raises(ValidationError):
            CreateCustomerDTO(
                name="John Doe",
                email="john@example.com",
                phone_number="+34600123456",
                initial_available_credit=-1,
            )

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateCustomerDTO.model_validate({"name": "John Doe"})
        missing = {err["loc"][0] for err in exc_info.value.errors()}
        assert missing == {"email", "phoneNumber"}

    def test_is_frozen(self):
        dto = CreateCustomerDTO(
            name="John Doe", email="john@example.com", phone_number="+34600123456"
        )
        with pytest.raises(ValidationError):
            dto.name = "Other"

    def test_email_format_is_left_to_domain(self):
        dto = CreateCustomerDTO(
            name="John Doe", email="not-an-email", phone_number="+34600123456"
        )
        assert dto.email == "not-an-email"


# ===========================================================================
# UpdateCustomerDTO
# ===========================================================================


class TestUpdateCustomerDTO:
    def test_all_fields_optional(self):
        dto = UpdateCustomerDTO.model_validate({})
        assert dto.name is None
        assert dto.email is None
        assert dto.phone_number is None
        assert dto.available_credit is None

    def test_partial_payload(self):
        dto = UpdateCustomerDTO.model_validate(
            {"availableCredit": "42.10", "phoneNumber": "+14155550101"}
        )
        assert dto.available_credit == Decimal("42.10")
        assert dto.phone_number == "+14155550101"
        assert dto.name is None


# ===========================================================================
# FindAllCustomersDTO
# ===========================================================================


class TestFindAllCustomersDTO:
    def test_defaults(self):
        dto = FindAllCustomersDTO.model_validate({})
        assert dto.sort_by == CustomerSortField.CREATED_AT
        assert dto.sort_order == SortOrder.ASC
        assert dto.page == 1
        assert dto.page_size == 10

    def test_query_string_values(self):
        dto = FindAllCustomersDTO.model_validate(
            {"sortBy": "availableCredit", "sortOrder": "desc", "page": "3", "pageSize": "25"}
        )
        assert dto.sort_by == CustomerSortField.AVAILABLE_CREDIT
        assert dto.sort_order == SortOrder.DESC
        assert dto.page == 3
        assert dto.page_size == 25

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-2", "1.5", None])
    def test_invalid_paging_falls_back_to_defaults(self, raw):
        dto = FindAllCustomersDTO.model_validate({"page": raw, "pageSize": raw})
        assert dto.page == 1
        assert dto.page_size == 10

    def test_blank_sort_values_use_defaults(self):
        dto = FindAllCustomersDTO.model_validate({"sortBy": "", "sortOrder": ""})
        assert dto.sort_by == CustomerSortField.CREATED_AT
        assert dto.sort_order == SortOrder.ASC

    @pytest.mark.parametrize(
        "payload", [{"sortBy": "email"}, {"sortOrder": "sideways"}]
    )
    def test_unknown_sort_values_rejected(self, payload):
        with pytest.raises(ValidationError):
            FindAllCustomersDTO.model_validate(payload)


# ===========================================================================
# AddAvailableCreditDTO
# ===========================================================================


class TestAddAvailableCreditDTO:
    def test_accepts_negative_amount(self):
        dto = AddAvailableCreditDTO(id=1, amount="-20")
        assert dto.amount == Decimal("-20")

    def test_amount_required(self):
        with pytest.raises(ValidationError):
            AddAvailableCreditDTO(id=1, amount=None)


# ===========================================================================
# CustomerOutputDTO
# ===========================================================================


class TestCustomerOutputDTO:
    def test_from_entity(self):
        created = datetime(2024, 1, 1, tzinfo=dt_timezone.utc)
        customer = Customer.restore(
            id=CustomerId.from_value(4),
            name="John Doe",
            email=Email.from_value("john@example.com"),
            phone_number=PhoneNumber.from_value("+34600123456"),
            available_credit=AvailableCredit.from_value("10.50"),
            created_at=created,
            updated_at=created,
        )
        dto = CustomerOutputDTO.from_entity(customer)
        assert dto.id == 4
        assert dto.email == "john@example.com"
        assert dto.phone_number == "+34600123456"
        assert dto.available_credit == Decimal("10.50")
        assert dto.deleted_at is None

    def test_camel_case_dump(self):
        created = datetime(2024, 1, 1, tzinfo=dt_timezone.utc)
        dto = CustomerOutputDTO(
            id=1,
            name="John Doe",
            email="john@example.com",
            phone_number="+34600123456",
            available_credit=Decimal("0"),
            created_at=created,
            updated_at=created,
        )
        dumped = dto.model_dump(by_alias=True)
        assert {"phoneNumber", "availableCredit", "createdAt", "deletedAt"} <= set(dumped)

    def test_transient_customer_rejected(self):
        customer = Customer.create_new(
            name="John Doe",
            email=Email.from_value("john@example.com"),
            phone_number=PhoneNumber.from_value("+34600123456"),
        )
        with pytest.raises(ValueError):
            CustomerOutputDTO.from_entity(customer)


# ===========================================================================
# Credit precision
# ===========================================================================


class TestCreditPrecision:
    @pytest.mark.parametrize("raw", [10**13, "0.005", "1.999"])
    def test_create_rejects_unstorable_credit(self, raw):
        with pytest.raises(ValidationError):
            CreateCustomerDTO.model_validate(
                {
                    "name": "John Doe",
                    "email": "john@example.com",
                    "phoneNumber": "+34600123456",
                    "initialAvailableCredit": raw,
                }
            )

    @pytest.mark.parametrize("raw", [10**13, "0.005"])
    def test_update_rejects_unstorable_credit(self, raw):
        with pytest.raises(ValidationError):
            UpdateCustomerDTO.model_validate({"availableCredit": raw})

    @pytest.mark.parametrize("raw", [10**13, -(10**13), "0.004"])
    def test_adjustment_rejects_unstorable_amount(self, raw):
        with pytest.raises(ValidationError):
            AddAvailableCreditDTO(id=1, amount=raw)

    def test_largest_storable_values_accepted(self):
        assert UpdateCustomerDTO.model_validate(
            {"availableCredit": "999999999999.99"}
        ).available_credit == Decimal("999999999999.99")
        assert AddAvailableCreditDTO(id=1, amount="-999999999999.99").amount == Decimal(
            "-999999999999.99"
        )
