"""Unit tests for Customer DRF serializers.

Covers:
- Field presence and camelCase names.
- Rendering of a CustomerOutputDTO (credit as a number, nullable deletedAt).
- List envelope.
"""

from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import pytest

from modules.customers.dtos import CustomerListOutputDTO, CustomerOutputDTO
from modules.customers.serializers import CustomerListSerializer, CustomerSerializer

pytestmark = pytest.mark.unit

CREATED = datetime(2024, 5, 1, 9, 0, tzinfo=dt_timezone.utc)


def _output(**overrides) -> CustomerOutputDTO:
    defaults = {
        "id": 1,
        "name": "John Doe",
        "email": "john@example.com",
        "phone_number": "+34600123456",
        "available_credit": Decimal("100"),
        "created_at": CREATED,
        "updated_at": CREATED,
    }
    defaults.update(overrides)
    return CustomerOutputDTO(**defaults)


# ===========================================================================
# Field presence
# ===========================================================================


class TestSerializerFields:
    def test_expected_fields(self):
        assert set(CustomerSerializer().fields) == {
            "id",
            "name",
            "email",
            "phoneNumber",
            "availableCredit",
            "createdAt",
            "updatedAt",
            "deletedAt",
        }

    def test_all_fields_read_only(self):
        assert all(field.read_only for field in CustomerSerializer().fields.values())


# ===========================================================================
# Rendering
# ===========================================================================


class TestSerialization:
    def test_renders_camel_case(self):
        data = CustomerSerializer(_output()).data
        assert data["id"] == 1
        assert data["phoneNumber"] == "+34600123456"
        assert data["deletedAt"] is None

    def test_credit_is_a_number(self):
        data = CustomerSerializer(_output(available_credit=Decimal("12.5"))).data
        assert not isinstance(data["availableCredit"], str)
        assert data["availableCredit"] == Decimal("12.50")

    def test_timestamps_iso_formatted(self):
        data = CustomerSerializer(_output()).data
        assert data["createdAt"] == data["updatedAt"]
        assert data["createdAt"].startswith("2024-05-01T09:00:00")

    def test_deleted_at_rendered_when_set(self):
        data = CustomerSerializer(_output(deleted_at=CREATED)).data
        assert data["deletedAt"] is not None


class TestListSerialization:
    def test_envelope(self):
        payload = CustomerListOutputDTO(customers=[_output(), _output(id=2)], total=7)
        data = CustomerListSerializer(payload).data
        assert [c["id"] for c in data["customers"]] == [1, 2]
        assert data["total"] == 7
