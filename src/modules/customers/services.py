"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Every write passes the field gate: CPF, then email, then name.
- A CPF may belong to a single customer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog

from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerData,
)
from modules.customers.models import Customer
from modules.customers.validators import is_valid_cpf, is_valid_email, is_valid_name

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Validation gate
    # ------------------------------------------------------------------

    @staticmethod
    def validate_cpf(cpf: str | None) -> None:
        if not is_valid_cpf(cpf):
            logger.warning(
                "customer.invalid_cpf", cpf_suffix=cpf[-4:] if cpf else ""
            )
            raise InvalidCustomerData("cpf", "Invalid CPF.")

    @staticmethod
    def validate_email(email: str | None) -> None:
        if not is_valid_email(email):
            logger.warning("customer.invalid_email")
            raise InvalidCustomerData("email", "Invalid email.")

    @staticmethod
    def validate_name(name: str | None) -> None:
        if not is_valid_name(name):
            logger.warning("customer.invalid_name")
            raise InvalidCustomerData("name", "Invalid name.")

    @classmethod
    def validate_fields(
        cls, name: str | None, email: str | None, cpf: str | None
    ) -> None:
        """Run the three validators, stopping at the first rejection.

        Raises:
            InvalidCustomerData: naming the first field that failed.
        """
        cls.validate_cpf(cpf)
        cls.validate_email(email)
        cls.validate_name(name)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after validation and the uniqueness rule.

        Raises:
            InvalidCustomerData: if CPF, email or name is malformed.
            CustomerAlreadyExists: if the CPF is already registered.
        """
        self.validate_cpf(dto.cpf)
        self.validate_email(dto.email)

        with self._repo.atomic():
            if self._repo.get_by_cpf(dto.cpf):
                logger.warning("customer.duplicate_cpf")
                raise CustomerAlreadyExists("CPF already registered.")

            self.validate_name(dto.name)

            customer = Customer(name=dto.name, email=dto.email, cpf=dto.cpf)
            customer = self._repo.save(customer)

        logger.info("customer.created", customer_id=customer.id)
        return customer

    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Update an existing customer with the supplied fields.

        Fields left as ``None`` keep their stored value; the merged record
        is validated as a whole.

        Raises:
            CustomerNotFound: if the customer does not exist.
            InvalidCustomerData: if the merged record fails validation.
            CustomerAlreadyExists: if the new CPF belongs to another customer.
        """
        with self._repo.atomic():
            customer = self._repo.get_by_id(id)
            if not customer:
                raise CustomerNotFound(f"Customer {id} not found.")

            log = logger.bind(customer_id=id)

            for field in ("name", "email", "cpf"):
                value = getattr(dto, field)
                if value is not None:
                    setattr(customer, field, value)

            self.validate_fields(customer.name, customer.email, customer.cpf)

            owner = self._repo.get_by_cpf(customer.cpf)
            if owner and owner.id != customer.id:
                log.warning("customer.duplicate_cpf")
                raise CustomerAlreadyExists("CPF already registered.")

            customer = self._repo.save(customer)

        log.info("customer.updated")
        return customer

    def delete_customer(self, id: int) -> None:
        """Delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        if not self._repo.delete(id):
            raise CustomerNotFound(f"Customer {id} not found.")
        logger.info("customer.removed", customer_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[Customer]:
        """Return a list of customers, optionally filtered."""
        return self._repo.list(filters)

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        logger.info("customer.retrieved", customer_id=id)
        return customer
