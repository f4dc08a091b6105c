"""Customer DRF serializers for API output.

The serializers operate at the Interface layer (API Views).  They only
render the service layer's output DTOs as camelCase JSON and describe the
responses in the OpenAPI schema; request validation happens in the
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers


class CustomerSerializer(serializers.Serializer):
    """Read-only rendering of a ``CustomerOutputDTO``."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
    phoneNumber = serializers.CharField(source="phone_number", read_only=True)
    availableCredit = serializers.DecimalField(
        source="available_credit",
        max_digits=14,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    deletedAt = serializers.DateTimeField(
        source="deleted_at", allow_null=True, read_only=True
    )


class CustomerListSerializer(serializers.Serializer):
    """Read-only rendering of a ``CustomerListOutputDTO``."""

    customers = CustomerSerializer(many=True, read_only=True)
    total = serializers.IntegerField(read_only=True)


class ErrorSerializer(serializers.Serializer):
    """Error body returned for domain errors."""

    detail = serializers.CharField()
    code = serializers.CharField(required=False)
