"""Customer API views.

Exposes the customer use cases via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes:
not found → 404, duplicate email/phone → 409, any other domain rule → 400.
The view never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Any

from drf_spectacular.utils import OpenApiParameter, extend_schema, inline_serializer
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.dtos import (
    AddAvailableCreditDTO,
    CreateCustomerDTO,
    FindAllCustomersDTO,
    UpdateCustomerDTO,
)
from modules.customers.exceptions import (
    CustomerAlreadyExistsEmailPhoneNumberError,
    CustomerNotFoundError,
    DomainError,
)
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import (
    CustomerListSerializer,
    CustomerSerializer,
    ErrorSerializer,
)
from modules.customers.services import (
    AddAvailableCreditCustomerUseCase,
    CreateCustomerUseCase,
    DeleteCustomerUseCase,
    FindAllCustomersUseCase,
    FindCustomerByIdUseCase,
    UpdateCustomerUseCase,
)

ERROR_RESPONSES = {
    400: ErrorSerializer,
    404: ErrorSerializer,
}


def _parse_id(pk: str | None) -> Any:
    """Best-effort int conversion; ``CustomerId`` rejects whatever is left."""
    try:
        return int(pk)
    except (TypeError, ValueError):
        return pk


def _domain_error_response(exc: DomainError) -> Response:
    if isinstance(exc, CustomerNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, CustomerAlreadyExistsEmailPhoneNumberError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return Response({"detail": exc.message, "code": exc.code}, status=status_code)


def _validation_error_response(exc: PydanticValidationError) -> Response:
    return Response(
        {
            "detail": "Invalid request payload.",
            "errors": exc.errors(
                include_url=False, include_context=False, include_input=False
            ),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer operations.

    Each action delegates to one use case wired with
    ``CustomerDjangoRepository`` (DIP).  No ORM access happens here.
    """

    serializer_class = CustomerSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        repository = CustomerDjangoRepository()
        self._create_customer = CreateCustomerUseCase(repository)
        self._find_customer_by_id = FindCustomerByIdUseCase(repository)
        self._find_all_customers = FindAllCustomersUseCase(repository)
        self._update_customer = UpdateCustomerUseCase(repository)
        self._delete_customer = DeleteCustomerUseCase(repository)
        self._add_available_credit = AddAvailableCreditCustomerUseCase(repository)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "sortBy", str, enum=["availableCredit", "name", "createdAt"]
            ),
            OpenApiParameter("sortOrder", str, enum=["asc", "desc"]),
            OpenApiParameter("page", int),
            OpenApiParameter("pageSize", int),
        ],
        responses={200: CustomerListSerializer, 400: ErrorSerializer},
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        try:
            dto = FindAllCustomersDTO.model_validate(request.query_params.dict())
        except PydanticValidationError as exc:
            return _validation_error_response(exc)

        result = self._find_all_customers.execute(dto)
        return Response(CustomerListSerializer(result).data)

    @extend_schema(responses={200: CustomerSerializer, **ERROR_RESPONSES})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        customer_id = _parse_id(pk)
        try:
            customer = self._find_customer_by_id.execute(customer_id)
        except DomainError as exc:
            return _domain_error_response(exc)

        if customer is None:
            return _domain_error_response(CustomerNotFoundError(customer_id))
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=CreateCustomerDTO,
        responses={201: CustomerSerializer, 409: ErrorSerializer, **ERROR_RESPONSES},
    )
    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        try:
            dto = CreateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _validation_error_response(exc)

        try:
            customer = self._create_customer.execute(dto)
        except DomainError as exc:
            return _domain_error_response(exc)

        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=UpdateCustomerDTO,
        responses={200: CustomerSerializer, **ERROR_RESPONSES},
    )
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/ (partial update, like PATCH)."""
        try:
            dto = UpdateCustomerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _validation_error_response(exc)

        try:
            customer = self._update_customer.execute(_parse_id(pk), dto)
        except DomainError as exc:
            return _domain_error_response(exc)

        return Response(CustomerSerializer(customer).data)

    @extend_schema(
        request=UpdateCustomerDTO,
        responses={200: CustomerSerializer, **ERROR_RESPONSES},
    )
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}/"""
        return self.update(request, pk)

    @extend_schema(responses={204: None, **ERROR_RESPONSES})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            self._delete_customer.execute(_parse_id(pk))
        except DomainError as exc:
            return _domain_error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Credit
    # ------------------------------------------------------------------

    @extend_schema(
        request=inline_serializer(
            name="AddAvailableCreditRequest",
            fields={
                "availableCredit": serializers.DecimalField(
                    max_digits=14, decimal_places=2
                )
            },
        ),
        responses={200: CustomerSerializer, **ERROR_RESPONSES},
    )
    @action(detail=True, methods=["patch"], url_path="available-credit")
    def available_credit(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}/available-credit/

        Adds the signed ``availableCredit`` amount to the balance.
        """
        payload = request.data if isinstance(request.data, dict) else {}
        try:
            dto = AddAvailableCreditDTO(
                id=_parse_id(pk), amount=payload.get("availableCredit")
            )
        except PydanticValidationError as exc:
            return _validation_error_response(exc)

        try:
            customer = self._add_available_credit.execute(dto)
        except DomainError as exc:
            return _domain_error_response(exc)

        return Response(CustomerSerializer(customer).data)

