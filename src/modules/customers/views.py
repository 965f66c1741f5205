"""Customer API views.

Exposes the ``CustomerService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerData,
)
from modules.customers.repositories.memory_repository import get_customer_repository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService

NOT_FOUND = {"detail": "Customer not found."}


class CustomerViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with the process-wide in-memory repository.
    Reads go through ``ListModelMixin`` for pagination; writes are
    handled explicitly so domain errors map to 400 / 404 / 409.
    """

    serializer_class = CustomerSerializer
    filter_backends: list = []
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=get_customer_repository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_customers()

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        if pk is None:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        try:
            customer = self._service.get_customer(int(pk))
        except CustomerNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        serializer = CustomerSerializer(customer)
        return Response(serializer.data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        serializer = CustomerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dto = CreateCustomerDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            customer = self._service.create_customer(dto)
        except InvalidCustomerData as exc:
            return self._invalid(exc)
        except CustomerAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        return self._update(request, pk, partial=False)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/customers/{pk}/"""
        return self._update(request, pk, partial=True)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        if pk is None:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        try:
            self._service.delete_customer(int(pk))
        except CustomerNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _update(self, request: Request, pk: str | None, partial: bool) -> Response:
        if pk is None:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)

        serializer = CustomerSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            if partial:
                dto = UpdateCustomerDTO(**serializer.validated_data)
            else:
                dto = UpdateCustomerDTO.from_create(
                    CreateCustomerDTO(**serializer.validated_data)
                )
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            customer = self._service.update_customer(int(pk), dto)
        except CustomerNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except InvalidCustomerData as exc:
            return self._invalid(exc)
        except CustomerAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        out = CustomerSerializer(customer)
        return Response(out.data)

    @staticmethod
    def _invalid(exc: InvalidCustomerData) -> Response:
        return Response(
            {"detail": str(exc), "field": exc.field},
            status=status.HTTP_400_BAD_REQUEST,
        )
