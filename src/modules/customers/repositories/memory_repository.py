"""In-memory implementation of the Customer repository.

Satisfies ``ICustomerRepository`` with a process-wide list guarded by a
re-entrant lock.  Entities are copied on the way in and out, so a caller
only changes the store through ``save()``.

Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising, and the Service Layer decides how to
translate a missing entity into an API response.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Dict, Iterator, List, Optional

import structlog

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository
from modules.customers.validators import strip_cpf_formatting

logger = structlog.get_logger(__name__)


class CustomerInMemoryRepository(ICustomerRepository):
    """Concrete Customer repository backed by a Python list."""

    def __init__(self) -> None:
        self._customers: List[Customer] = []
        self._lock = threading.RLock()

    def _find(self, id: int) -> Optional[Customer]:
        return next((c for c in self._customers if c.id == id), None)

    def _next_id(self) -> int:
        return max((c.id for c in self._customers), default=0) + 1

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by id, or ``None`` when absent."""
        with self._lock:
            customer = self._find(id)
            return replace(customer) if customer else None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers in insertion order.

        ``filters`` maps field names to exact values::

            {"email": "ana@example.com"}
        """
        with self._lock:
            customers = [replace(c) for c in self._customers]
        if filters:
            customers = [
                c
                for c in customers
                if all(getattr(c, key) == value for key, value in filters.items())
            ]
        return customers

    def save(self, entity: Customer) -> Customer:
        """Insert (``id is None``) or replace a customer."""
        with self._lock:
            is_new = entity.id is None or self._find(entity.id) is None
            if entity.id is None:
                entity.id = self._next_id()

            stored = replace(entity)
            if is_new:
                self._customers.append(stored)
            else:
                index = next(
                    i for i, c in enumerate(self._customers) if c.id == entity.id
                )
                self._customers[index] = stored

        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return replace(stored)

    def delete(self, id: int) -> bool:
        """Delete a customer by id.

        Returns ``True`` if the customer was found and removed,
        ``False`` if no customer exists with the given id.
        """
        with self._lock:
            customer = self._find(id)
            if not customer:
                return False
            self._customers.remove(customer)
        logger.info("customer.deleted", customer_id=id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._customers)

    def get_by_cpf(self, cpf: str) -> Optional[Customer]:
        """Retrieve a customer by CPF, comparing digits only."""
        digits = strip_cpf_formatting(cpf)
        with self._lock:
            customer = next(
                (c for c in self._customers if strip_cpf_formatting(c.cpf) == digits),
                None,
            )
            return replace(customer) if customer else None

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            yield

    def clear(self) -> None:
        with self._lock:
            self._customers.clear()


_default_repository = CustomerInMemoryRepository()


def get_customer_repository() -> CustomerInMemoryRepository:
    """Return the process-wide customer store."""
    return _default_repository
