"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for creation and full replacement (PUT).
- ``UpdateCustomerDTO``: input for partial updates (PATCH).

DTOs only carry data.  Field validation runs in ``CustomerService`` so
the first failing field can be reported in a fixed order.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    cpf: str


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    All fields are optional: only supplied fields will be updated.  The
    merged record is validated as a whole before it is saved.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    email: Optional[str] = None
    cpf: Optional[str] = None

    @classmethod
    def from_create(cls, dto: CreateCustomerDTO) -> UpdateCustomerDTO:
        """Full replacement expressed as an update touching every field."""
        return cls(name=dto.name, email=dto.email, cpf=dto.cpf)
